# airtable/codec.py
from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Dict, Type

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from airtable.exceptions import ConfigurationError, DecodeError
from airtable.models.records import Page, RawPage, Record, WireEnvelope


@lru_cache(maxsize=None)
def _adapter(record_type: type) -> TypeAdapter:
    return TypeAdapter(record_type)


class Codec:
    """
    JSON <-> typed records. pydantic does the heavy lifting; anything a
    TypeAdapter can validate (BaseModel, dataclass, TypedDict...) is accepted.
    """

    def adapter_for(self, record_type: type) -> TypeAdapter:
        """The TypeAdapter for `record_type`; a type pydantic cannot handle is a setup error."""
        try:
            return _adapter(record_type)
        except PydanticSchemaGenerationError as e:
            name = getattr(record_type, "__name__", repr(record_type))
            raise ConfigurationError(f"{name} is not usable as a record type: {e}") from e

    def dump_fields(self, record: Any) -> Dict[str, Any]:
        if isinstance(record, BaseModel):
            return record.model_dump(mode="json", by_alias=True)
        return self.adapter_for(type(record)).dump_python(record, mode="json", by_alias=True)

    def encode_envelope(self, record: Record, include_id: bool) -> str:
        env = WireEnvelope(
            id=record.get_id() if include_id else "",
            fields=self.dump_fields(record),
        )
        payload = env.model_dump(mode="json")
        if not payload.get("id"):
            payload.pop("id", None)
        return json.dumps(payload, ensure_ascii=False)

    def decode_record(self, fields: Dict[str, Any], record_type: Type[Any]) -> Any:
        try:
            return self.adapter_for(record_type).validate_python(fields)
        except ValidationError as e:
            raise DecodeError(f"record does not fit {record_type.__name__}: {e}") from e

    def decode_page(self, raw: Any, record_type: Type[Any]) -> Page:
        """
        Decode a page body into typed records, in server order, each with its
        envelope id assigned through set_id.
        """
        try:
            page = RawPage.model_validate(raw)
        except ValidationError as e:
            raise DecodeError(f"malformed page: {e}") from e

        records = []
        for env in page.records:
            rec = self.decode_record(env.fields, record_type)
            rec.set_id(env.id)
            records.append(rec)
        return Page(records=records, offset=page.offset or "")
