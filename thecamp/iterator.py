"""Forward-only iteration over a group's letters.

The listing endpoint only answers "N letters after letter C, sorted ASC/DESC"
and has no page index, so `LettersIterator` keeps the cursor (the id of the
last letter it has seen) and refetches transparently at page boundaries.

Usage:
    >>> it = client.letters_iterator(group, SortOrder.DESCENDING)
    >>> while it.advance():
    ...     print(it.letter.title)

or simply ``for letter in it: ...``.

The total count is taken from every fetched page as-is and is not reconciled
with earlier pages, so a mailbox that changes mid-iteration may end early or
late.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING

from .errors import InvalidStateError, ProtocolError, TheCampError
from .models import Group, Letter, LetterPage, SortOrder

if TYPE_CHECKING:
    from .client import TheCampClient

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 30


class IteratorState(Enum):
    UNSTARTED = "unstarted"
    IN_PAGE = "in_page"
    EXHAUSTED = "exhausted"
    ERRORED = "errored"


class LettersIterator:
    """Cursor-based iterator over the letters of one group.

    Not thread-safe. After an error the iterator is unusable; build a new one.
    """

    def __init__(
        self,
        client: TheCampClient,
        group: Group,
        order: SortOrder | str = SortOrder.ASCENDING,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ProtocolError(f"Page size must be positive, got {page_size}")
        self._client = client
        self.group = group
        self.order = SortOrder.parse(order)
        self.page_size = page_size

        self._state = IteratorState.UNSTARTED
        self._total_count: int | None = None
        self._current_count = 0
        self._last_letter_id: str | None = None
        self._letters: list[Letter] = []
        self._idx = 0

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def total_count(self) -> int | None:
        return self._total_count

    @property
    def current_count(self) -> int:
        return self._current_count

    @property
    def letter(self) -> Letter:
        """The letter at the current position; only valid after `advance()` returned True."""
        if self._state is not IteratorState.IN_PAGE:
            raise InvalidStateError(f"No current letter while iterator is {self._state.value}")
        return self._letters[self._idx]

    def advance(self) -> bool:
        """Move to the next letter, fetching a page if needed.

        Returns:
            True if a letter is available through `letter`, False once all
            letters have been read.

        Raises:
            InvalidStateError: if called after exhaustion or after an error
            TheCampError: any transport, decode or protocol failure; the
                iterator is then left in the ERRORED state
        """
        if self._state in (IteratorState.EXHAUSTED, IteratorState.ERRORED):
            raise InvalidStateError(f"Cannot advance an iterator that is {self._state.value}")

        try:
            if self._state is IteratorState.UNSTARTED:
                return self._start()
            return self._step()
        except TheCampError:
            self._state = IteratorState.ERRORED
            raise

    def _start(self) -> bool:
        page = self._fetch()
        self._total_count = page.total_count
        if page.total_count == 0:
            logger.debug(f"Group {self.group.id} has no letters")
            self._state = IteratorState.EXHAUSTED
            return False

        self._load(page)
        self._current_count = 1
        self._state = IteratorState.IN_PAGE
        return True

    def _step(self) -> bool:
        self._current_count += 1
        if self._current_count > self._total_count:
            self._state = IteratorState.EXHAUSTED
            return False

        if self._idx + 1 < len(self._letters):
            self._idx += 1
            return True

        page = self._fetch()
        self._total_count = page.total_count
        self._load(page)
        return True

    def _fetch(self) -> LetterPage:
        logger.debug(
            f"Fetching {self.page_size} letters for group {self.group.id} "
            f"after {self._last_letter_id} ({self.order.value})"
        )
        return self._client.letters(self.group, self._last_letter_id, self.page_size, self.order)

    def _load(self, page: LetterPage) -> None:
        if not page.letters:
            raise ProtocolError(
                f"Server reported {page.total_count} letters but returned an empty page "
                f"after {self._current_count - 1}"
            )
        self._letters = page.letters
        self._idx = 0
        # The server continues after the last item of the previous batch, whatever the order.
        self._last_letter_id = page.letters[-1].id

    def __iter__(self) -> Iterator[Letter]:
        while self.advance():
            yield self.letter
