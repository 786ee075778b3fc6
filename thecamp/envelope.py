"""Decoding of the `{resultCode, resultMessage, resultData}` response envelope.

Every endpoint answers with the same outer envelope. Listing endpoints put a
second, JSON-encoded envelope inside one of the `resultData` fields, e.g.::

    {"resultCode": 200, "resultData": {"list2": "{\"result_code\": 200, ...}"}}

`decode_nested` is the one place that unwraps and validates that inner layer.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError, ProtocolError

logger = logging.getLogger(__name__)

SUCCESS_CODE = 200


@dataclass(frozen=True)
class Envelope:
    code: int = 0
    message: str = ""
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE


def _loads(raw: str | bytes, what: str) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, TypeError) as e:
        raise DecodeError(f"Malformed JSON in {what}: {e}") from e


def require(payload: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    """Return `payload[key]`, raising ProtocolError if missing or not of `kind`.

    Booleans are rejected where an int is expected.
    """
    if key not in payload:
        raise ProtocolError(f"Missing field '{key}'")
    value = payload[key]
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds):
        raise ProtocolError(f"Field '{key}' has unexpected type {type(value).__name__}")
    return value


def decode_envelope(raw: bytes | str) -> Envelope:
    """Decode the outer envelope of a response body.

    An empty body is a valid, zero-valued envelope: some endpoints answer
    with no payload at all. The result code is not checked here because
    login and letter submission report failure through it.
    """
    if not raw or not raw.strip():
        return Envelope()

    payload = _loads(raw, "response body")
    if not isinstance(payload, dict):
        raise ProtocolError(f"Expected an object envelope, got {type(payload).__name__}")

    code = 0 if payload.get("resultCode") is None else require(payload, "resultCode", int)
    message = payload.get("resultMessage") or ""
    if not isinstance(message, str):
        raise ProtocolError("Field 'resultMessage' has unexpected type")
    return Envelope(code=code, message=message, data=payload.get("resultData"))


def decode_nested(envelope: Envelope, field: str) -> dict[str, Any]:
    """Decode the nested envelope stored under `envelope.data[field]`.

    Both the outer `resultCode` and the inner `result_code` must equal 200.

    Raises:
        ProtocolError: on a non-success code at either level or a missing field
        DecodeError: if the nested field is not valid JSON
    """
    if not envelope.ok:
        raise ProtocolError(
            f"Unexpected result code {envelope.code}: {envelope.message or 'no message'}"
        )
    if not isinstance(envelope.data, dict):
        raise ProtocolError(f"Expected object resultData holding '{field}'")

    inner = require(envelope.data, field, (str, dict))
    if isinstance(inner, str):
        inner = _loads(inner, f"field '{field}'")
    if not isinstance(inner, dict):
        raise ProtocolError(f"Nested field '{field}' is not an object")

    code = require(inner, "result_code", int)
    if code != SUCCESS_CODE:
        raise ProtocolError(f"Unexpected nested result code {code} in '{field}'")

    logger.debug(f"Decoded nested envelope '{field}' with keys {sorted(inner)}")
    return inner
