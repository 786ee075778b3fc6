"""Value objects decoded from the portal's listing payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from zoneinfo import ZoneInfo

from .envelope import require
from .errors import ProtocolError

SEOUL = ZoneInfo("Asia/Seoul")
STATUS_SENT = 1


class SortOrder(str, Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"

    @classmethod
    def parse(cls, value: SortOrder | str) -> SortOrder:
        """Coerce `value` to a SortOrder, raising ProtocolError for anything else."""
        try:
            return cls(value)
        except ValueError:
            raise ProtocolError(f"Invalid sort order: {value!r}") from None


def _text(payload: dict[str, Any], key: str, default: str | None = None) -> str:
    # Optional fields sent as null read like missing ones.
    if default is not None and payload.get(key) is None:
        return default
    value = require(payload, key, (str, int))
    return str(value)


def _number(payload: dict[str, Any], key: str) -> int:
    if payload.get(key) is None:
        return 0
    return require(payload, key, int)


@dataclass(frozen=True)
class Group:
    id: str
    name: str
    unit_name: str
    unit_code: str
    full_name: str
    entered_date: str

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Group:
        # The server pads display fields to a fixed width.
        return cls(
            id=_text(payload, "group_id"),
            name=_text(payload, "group_name", "").strip(),
            unit_name=_text(payload, "unit_name", "").strip(),
            unit_code=_text(payload, "unit_code"),
            full_name=_text(payload, "full_name", "").strip(),
            entered_date=_text(payload, "enter_date", "").strip(),
        )


@dataclass(frozen=True)
class TraineeInfo:
    name: str
    birthday: str
    relationship: str
    group: Group = field(repr=False, compare=False)

    @classmethod
    def from_dict(cls, payload: dict[str, Any], group: Group) -> TraineeInfo:
        return cls(
            name=_text(payload, "trainee_name"),
            birthday=_text(payload, "birth", ""),
            relationship=_text(payload, "relationship", ""),
            group=group,
        )


@dataclass(frozen=True)
class Letter:
    id: str
    title: str
    content: str
    status: int
    trainee_id: str
    timestamp_millis: int

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Letter:
        return cls(
            id=_text(payload, "letter_id"),
            title=_text(payload, "title", ""),
            content=_text(payload, "content", ""),
            status=_number(payload, "status"),
            trainee_id=_text(payload, "trainee_id", ""),
            timestamp_millis=_number(payload, "create_date"),
        )

    @property
    def sent(self) -> bool:
        return self.status == STATUS_SENT

    @property
    def date(self) -> datetime:
        """Creation time in Korea Standard Time, truncated to the second."""
        return datetime.fromtimestamp(self.timestamp_millis // 1000, tz=SEOUL)


@dataclass(frozen=True)
class LetterPage:
    total_count: int
    letters: list[Letter]

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> LetterPage:
        total = require(payload, "letter_cnt", int)
        items = payload.get("letter_list") or []
        if not isinstance(items, list):
            raise ProtocolError("Field 'letter_list' is not a list")
        letters = []
        for item in items:
            if not isinstance(item, dict):
                raise ProtocolError("Letter entry is not an object")
            letters.append(Letter.from_dict(item))
        return cls(total_count=total, letters=letters)
