# airtable/base.py
from __future__ import annotations

import logging
from typing import Generic, Optional, Type, TypeVar

from airtable.codec import Codec
from airtable.config.settings import DEFAULT_API_URL, Settings, get_settings
from airtable.exceptions import ConfigurationError
from airtable.http.client import HttpTransport
from airtable.query import QueryBuilder
from airtable.util.url import looks_like_url, table_url

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Base(Generic[T]):
    """
    Handle on one table of one base. Coordinates are fixed at construction;
    the transport carries the auth headers for every request.
    """

    def __init__(
        self,
        api_key: str,
        base_key: str,
        table: str,
        record_type: Type[T],
        api_url: str = DEFAULT_API_URL,
        transport: Optional[HttpTransport] = None,
        codec: Optional[Codec] = None,
        timeout: Optional[float] = 30.0,
        log_requests: bool = True,
    ) -> None:
        if not base_key or not table:
            raise ConfigurationError("base key and table name are required")
        if not looks_like_url(api_url):
            raise ConfigurationError(f"api url must be http(s): {api_url!r}")

        self._api_key = api_key
        self.base_key = base_key
        self.table = table
        self.record_type = record_type
        self.api_url = api_url.rstrip("/")
        self.codec = codec or Codec()
        # fail here rather than on the first page or write
        self.codec.adapter_for(record_type)
        self.transport = transport or HttpTransport(
            api_key, timeout=timeout, log_requests=log_requests
        )

    @classmethod
    def from_env(
        cls, table: str, record_type: Type[T], settings: Optional[Settings] = None
    ) -> "Base[T]":
        s = settings or get_settings()
        if not s.AIRTABLE_API_KEY or not s.AIRTABLE_BASE_KEY:
            raise ConfigurationError(
                "Airtable credentials missing. Set AIRTABLE_API_KEY and "
                "AIRTABLE_BASE_KEY in environment or .env."
            )
        return cls(
            s.AIRTABLE_API_KEY,
            s.AIRTABLE_BASE_KEY,
            table,
            record_type,
            api_url=s.AIRTABLE_API_URL,
            timeout=s.AIRTABLE_TIMEOUT,
            log_requests=s.LOG_REQUESTS,
        )

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.transport.close()

    def __enter__(self) -> "Base[T]":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        # never echo the key
        return f"Base(base_key={self.base_key!r}, table={self.table!r})"

    def url(self, record_id: Optional[str] = None) -> str:
        return table_url(self.api_url, self.base_key, self.table, record_id)

    def query(self) -> QueryBuilder[T]:
        return QueryBuilder(self)

    def create(self, record: T) -> None:
        """POST the record as a new row. The record's own id is not sent."""
        body = self.codec.encode_envelope(record, include_id=False)
        self.transport.post(self.url(), body)
        logger.info("created record in %s", self.table)

    def update(self, record: T) -> None:
        """
        PATCH the row addressed by the record's id. The id is not checked
        here; an empty one produces a request the API will reject.
        """
        record_id = record.get_id()
        body = self.codec.encode_envelope(record, include_id=True)
        self.transport.patch(self.url(record_id), body)
        logger.info("updated record %s in %s", record_id, self.table)


def new(api_key: str, base_key: str, table: str, record_type: Type[T], **kwargs) -> Base[T]:
    return Base(api_key, base_key, table, record_type, **kwargs)
