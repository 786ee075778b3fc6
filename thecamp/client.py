from __future__ import annotations

import logging
from dataclasses import dataclass

from .auth import AuthError, build_login_payload, load_credentials
from .envelope import Envelope, decode_envelope, decode_nested, require
from .errors import ProtocolError
from .iterator import DEFAULT_PAGE_SIZE, LettersIterator
from .models import Group, LetterPage, SortOrder, TraineeInfo
from .transport import DEFAULT_TIMEOUT, HOST, USER_AGENT, SessionTransport
from .utils.config import DEFAULT_CONFIG_MODULE, load_client_settings

logger = logging.getLogger(__name__)

LOGIN_PATH = "/pcws/common/login.do"
GROUP_LIST_PATH = "/pcws/troop/group/getMyGroupList.do"
GROUP_DETAIL_PATH = "pcws/troop/group/getGroupDetail.do"
LETTER_LIST_PATH = "/pcws/message/letter/getList.do"
LETTER_INSERT_PATH = "/pcws/message/letter/insert.do"


@dataclass
class TheCampClient:
    host: str = HOST
    user_agent: str = USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        self.transport = SessionTransport(
            host=self.host, user_agent=self.user_agent, timeout=self.timeout
        )

    @classmethod
    def from_config(cls, module_path: str = DEFAULT_CONFIG_MODULE) -> TheCampClient:
        settings = load_client_settings(module_path)
        return cls(
            host=settings.host,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            page_size=settings.page_size,
        )

    @classmethod
    def from_env(cls, module_path: str = DEFAULT_CONFIG_MODULE) -> TheCampClient:
        """Build a configured client and log in with credentials from env/.env.

        Raises AuthError if credentials are missing or rejected.
        """
        user_id, password = load_credentials()
        client = cls.from_config(module_path)
        if not client.login(user_id, password):
            raise AuthError(f"Login rejected for user '{user_id}'")
        return client

    def _request(self, path: str, body: dict) -> Envelope:
        return decode_envelope(self.transport.post(path, body))

    def login(self, user_id: str, password: str) -> bool:
        """Authenticate the session; the token stays in the transport's cookie jar."""
        res = self._request(LOGIN_PATH, build_login_payload(user_id, password))
        if res.ok:
            logger.info(f"Logged in as '{user_id}'")
        else:
            logger.warning(f"Login failed for '{user_id}': {res.code} {res.message}")
        return res.ok

    def groups(self) -> list[Group]:
        """Return the trainee groups the logged-in account belongs to."""
        payload = decode_nested(self._request(GROUP_LIST_PATH, {}), "list2")
        items = payload.get("my_group") or []
        if not isinstance(items, list):
            raise ProtocolError("Field 'my_group' is not a list")
        groups = []
        for item in items:
            if not isinstance(item, dict):
                raise ProtocolError("Group entry is not an object")
            groups.append(Group.from_dict(item))
        logger.debug(f"Fetched {len(groups)} groups")
        return groups

    def trainee_info(self, group: Group) -> TraineeInfo:
        payload = decode_nested(self._request(GROUP_DETAIL_PATH, {"group_id": group.id}), "group")
        info = require(payload, "trainee_info", dict)
        return TraineeInfo.from_dict(info, group)

    def send_letter(self, trainee_info: TraineeInfo, title: str, content: str) -> bool:
        """Submit a letter to the trainee. Attachments are not supported.

        Returns True only when the server reports success.
        """
        group = trainee_info.group
        body = {
            "unit_code": group.unit_code,
            "group_id": group.id,
            "trainee_name": trainee_info.name,
            "birth": trainee_info.birthday,
            # Misspelled upstream; the server expects this exact key.
            "relationsip": trainee_info.relationship,
            "title": title,
            "content": content,
            "fileInfo": [],
        }
        res = self._request(LETTER_INSERT_PATH, body)
        if res.ok:
            logger.info(f"Sent letter '{title}' to {trainee_info.name} ({group.id})")
        else:
            logger.warning(f"Letter rejected for group {group.id}: {res.code} {res.message}")
        return res.ok

    def letters(
        self,
        group: Group,
        last_letter_id: str | None = None,
        count: int = DEFAULT_PAGE_SIZE,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> LetterPage:
        """Fetch one page of up to `count` letters following `last_letter_id`."""
        order = SortOrder.parse(order)
        body = {
            "unit_code": group.unit_code,
            "group_id": group.id,
            "order": order.value,
            "cnt": count,
        }
        if last_letter_id is not None:
            body["letter_id"] = last_letter_id

        payload = decode_nested(self._request(LETTER_LIST_PATH, body), "list")
        page = LetterPage.from_dict(payload)
        logger.debug(f"Fetched {len(page.letters)} of {page.total_count} letters for {group.id}")
        return page

    def letters_iterator(
        self, group: Group, order: SortOrder | str = SortOrder.ASCENDING
    ) -> LettersIterator:
        return LettersIterator(self, group, order, page_size=self.page_size)

    def close(self) -> None:
        self.transport.close()
