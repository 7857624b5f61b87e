# airtable/models/records.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class Record(Protocol):
    """
    What every caller-defined record type must offer: read and assign the
    server-side identifier. Empty until the record has been fetched or created.
    """

    def get_id(self) -> str: ...

    def set_id(self, record_id: str) -> None: ...


class RecordModel(BaseModel):
    """
    Convenience base for pydantic-defined tables. Columns map through aliases:

        class Word(RecordModel):
            word: str = Field(alias="Word")
            google: int = Field(alias="Google")
            next: bool = Field(default=False, alias="Next")

    Unknown columns are ignored, so the schema only needs the fields you use.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # never part of `fields`; travels in the envelope instead
    id: str = Field(default="", exclude=True)

    def get_id(self) -> str:
        return self.id

    def set_id(self, record_id: str) -> None:
        self.id = record_id


# ---- wire shapes ----


class WireEnvelope(BaseModel):
    """{id, fields} for exactly one record; id omitted on send when empty."""

    id: str = ""
    fields: Any


class RawEnvelope(BaseModel):
    id: str
    fields: Dict[str, Any] = Field(default_factory=dict)


class RawPage(BaseModel):
    records: List[RawEnvelope] = Field(default_factory=list)
    offset: Optional[str] = None


class Page(BaseModel):
    records: List[Any] = Field(default_factory=list)
    # "" means no further page
    offset: str = ""
