from __future__ import annotations

import os

import pytest

from thecamp.client import TheCampClient
from thecamp.models import Group


@pytest.fixture
def clean_env(monkeypatch):
    """Remove thecamp variables from the environment."""
    for key in list(os.environ):
        if key.startswith("THECAMP_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def client():
    return TheCampClient()


@pytest.fixture
def group():
    return Group(
        id="G1",
        name="Hong Gildong",
        unit_name="Army Training Center",
        unit_code="U1",
        full_name="Army Training Center 23rd class Hong Gildong",
        entered_date="2024-01-01",
    )


@pytest.fixture
def raw_group():
    """A group entry as returned by getMyGroupList.do, padded like the real server."""
    return {
        "group_id": "G1",
        "group_name": "  Hong Gildong   ",
        "unit_name": "Army Training Center      ",
        "unit_code": "U1",
        "full_name": "   Army Training Center 23rd class Hong Gildong ",
        "enter_date": "2024-01-01",
    }
