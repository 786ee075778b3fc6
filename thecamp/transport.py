from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import TransportError

logger = logging.getLogger(__name__)

HOST = "https://www.thecamp.or.kr"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 6.1) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/59.0.3071.115 Safari/537.36"
)
DEFAULT_TIMEOUT = 30.0


def _session_without_retries() -> requests.Session:
    """Session whose adapters never retry; failures go straight to the caller."""
    sess = requests.Session()
    retries = Retry(total=0, read=False, raise_on_status=False)
    adapter = HTTPAdapter(max_retries=retries)
    sess.mount("http://", adapter)
    sess.mount("https://", adapter)
    return sess


def build_headers(user_agent: str = USER_AGENT) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "X-Requested-With": "XMLHttpRequest",
        "User-Agent": user_agent,
    }


@dataclass
class SessionTransport:
    """POSTs JSON bodies to the portal, keeping the session cookie between calls.

    The cookie jar lives on the underlying `requests.Session`; it is never
    exposed and lasts as long as this instance.
    """

    host: str = HOST
    user_agent: str = USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    session: requests.Session = field(default_factory=_session_without_retries, repr=False)

    def __post_init__(self) -> None:
        self.host = self.host.rstrip("/")
        self.headers = build_headers(self.user_agent)

    def url_for(self, path: str) -> str:
        return f"{self.host}/{path.lstrip('/')}"

    def post(self, path: str, body: dict[str, Any]) -> bytes:
        url = self.url_for(path)
        logger.debug(f"POST {url}")
        try:
            res = self.session.post(url, json=body, headers=self.headers, timeout=self.timeout)
            res.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError(f"POST {url} failed: {e}") from e
        return res.content

    def close(self) -> None:
        self.session.close()
