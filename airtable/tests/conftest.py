# airtable/tests/conftest.py
from __future__ import annotations

import json
from typing import List, Optional
from unittest.mock import MagicMock

import pytest
from pydantic import Field

from airtable.base import Base
from airtable.http.client import HttpResponse, HttpTransport
from airtable.models.records import RecordModel


class Word(RecordModel):
    word: str = Field(alias="Word")
    google: int = Field(default=0, alias="Google")
    next: bool = Field(default=False, alias="Next")


def page(words: List[str], offset: Optional[str] = None, prefix: str = "rec") -> dict:
    body: dict = {
        "records": [
            {"id": f"{prefix}{w}", "fields": {"Word": w, "Google": len(w)}}
            for w in words
        ]
    }
    if offset is not None:
        body["offset"] = offset
    return body


def ok(body) -> HttpResponse:
    return HttpResponse(
        status=200,
        url="https://api.airtable.com/v0/appX/Words",
        headers={"Content-Type": "application/json"},
        text=body if isinstance(body, str) else json.dumps(body),
        elapsed_ms=1,
    )


@pytest.fixture
def transport():
    return MagicMock(spec=HttpTransport)


@pytest.fixture
def base(transport):
    return Base("keyABC", "appX", "Words", Word, transport=transport)


class Plain:
    """Has the id methods but no schema pydantic can build."""

    def __init__(self, record_id: str = "") -> None:
        self.record_id = record_id

    def get_id(self) -> str:
        return self.record_id

    def set_id(self, record_id: str) -> None:
        self.record_id = record_id
