"""Builders for fake portal responses used across the test suite."""

from __future__ import annotations

import json
from typing import Any


def envelope_bytes(code: int = 200, data: Any = None, message: str = "") -> bytes:
    """Serialize an outer response envelope as the portal sends it."""
    return json.dumps({"resultCode": code, "resultMessage": message, "resultData": data}).encode()


def nested_bytes(field: str, inner: dict[str, Any], code: int = 200) -> bytes:
    """Envelope whose `resultData[field]` is a JSON-encoded string."""
    return envelope_bytes(code, {field: json.dumps(inner)})


def letter_dict(n: int) -> dict[str, Any]:
    return {
        "letter_id": f"L{n:03d}",
        "title": f"Letter {n}",
        "content": f"Body {n}",
        "status": 1,
        "trainee_id": "T1",
        "create_date": 1_600_000_000_000 + n * 1000,
    }


def letters_page_bytes(total: int, numbers: list[int] | range) -> bytes:
    return nested_bytes(
        "list",
        {"result_code": 200, "letter_cnt": total, "letter_list": [letter_dict(n) for n in numbers]},
    )
