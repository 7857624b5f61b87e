"""
Client for the Airtable REST API: typed records, fluent queries and lazy
pagination over a single table.

    base = airtable.new(api_key, base_key, "Words", Word)
    for word in base.query().view("To Learn").sort("Google", "desc"):
        ...
"""

from airtable.base import Base, new
from airtable.codec import Codec
from airtable.exceptions import (
    AirtableError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)
from airtable.models.records import Record, RecordModel
from airtable.pagination import Paginator, PaginatorState
from airtable.query import QueryBuilder, QuerySpec, SortDirection

__all__ = [
    "AirtableError",
    "Base",
    "Codec",
    "ConfigurationError",
    "DecodeError",
    "HTTPStatusError",
    "Paginator",
    "PaginatorState",
    "QueryBuilder",
    "QuerySpec",
    "Record",
    "RecordModel",
    "SortDirection",
    "TransportError",
    "new",
]
