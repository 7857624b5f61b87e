# airtable/query.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Generic, List, Optional, Tuple, TypeVar, Union

if TYPE_CHECKING:
    from airtable.base import Base
    from airtable.pagination import Paginator

T = TypeVar("T")


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def __str__(self) -> str:
        return self.value


def _coerce_direction(direction: Union[SortDirection, str]) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    return SortDirection(str(direction).strip().lower())


@dataclass(frozen=True)
class QuerySpec:
    """Accumulated read parameters. Nothing here is validated locally."""

    view: Optional[str] = None
    formula: Optional[str] = None
    sort: Tuple[Tuple[str, SortDirection], ...] = ()
    fields: Tuple[str, ...] = ()
    page_size: Optional[int] = None
    max_records: Optional[int] = None

    def to_params(self, offset: str) -> List[Tuple[str, str]]:
        """Query pairs for one page request, offset first."""
        pairs: List[Tuple[str, str]] = [("offset", offset)]
        if self.view is not None:
            pairs.append(("view", self.view))
        if self.formula is not None:
            pairs.append(("filterByFormula", self.formula))
        for i, (field, direction) in enumerate(self.sort):
            pairs.append((f"sort[{i}][field]", field))
            pairs.append((f"sort[{i}][direction]", str(direction)))
        for name in self.fields:
            pairs.append(("fields[]", name))
        if self.page_size is not None:
            pairs.append(("pageSize", str(self.page_size)))
        if self.max_records is not None:
            pairs.append(("maxRecords", str(self.max_records)))
        return pairs


class QueryBuilder(Generic[T]):
    """
    Fluent, value-returning builder bound to a Base:

        base.query().view("To Learn").sort("Next", "desc").formula("...")

    Every call returns a new builder; the one you started from is untouched.
    Iterating a builder starts a fresh Paginator at page one.
    """

    def __init__(self, base: "Base[T]", spec: Optional[QuerySpec] = None) -> None:
        self.base = base
        self.spec = spec or QuerySpec()

    def _with(self, **changes) -> "QueryBuilder[T]":
        return QueryBuilder(self.base, replace(self.spec, **changes))

    def view(self, name: str) -> "QueryBuilder[T]":
        return self._with(view=name)

    def formula(self, expr: str) -> "QueryBuilder[T]":
        return self._with(formula=expr)

    def sort(
        self, field: str, direction: Union[SortDirection, str] = SortDirection.ASCENDING
    ) -> "QueryBuilder[T]":
        # additive: earlier calls take precedence as tie-breakers
        entry = (field, _coerce_direction(direction))
        return self._with(sort=self.spec.sort + (entry,))

    def fields(self, *names: str) -> "QueryBuilder[T]":
        return self._with(fields=self.spec.fields + tuple(names))

    def page_size(self, n: int) -> "QueryBuilder[T]":
        return self._with(page_size=int(n))

    def max_records(self, n: int) -> "QueryBuilder[T]":
        return self._with(max_records=int(n))

    def paginate(self) -> "Paginator[T]":
        from airtable.pagination import Paginator

        return Paginator(self.base, self.spec)

    def __iter__(self) -> "Paginator[T]":
        return self.paginate()
