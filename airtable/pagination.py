# airtable/pagination.py
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from airtable.exceptions import AirtableError
from airtable.query import QuerySpec
from airtable.util.url import url_with_pairs

if TYPE_CHECKING:
    from airtable.base import Base

logger = logging.getLogger(__name__)

T = TypeVar("T")

# pending offset before the first page has been requested
FIRST_PAGE = ""


class PaginatorState(str, Enum):
    NOT_STARTED = "not_started"
    HAS_BUFFERED_ITEMS = "has_buffered_items"
    AWAITING_FETCH = "awaiting_fetch"
    EXHAUSTED = "exhausted"


class Paginator(Generic[T]):
    """
    Lazy, forward-only cursor over a table. One GET per page, issued only when
    the in-memory window runs dry. Stopping early never triggers a request.

    Fetch or decode failures end the sequence exactly like the last page does;
    the exception is kept on `last_error` so callers can tell the two apart.
    """

    def __init__(self, base: "Base[T]", spec: Optional[QuerySpec] = None) -> None:
        self.base = base
        self.spec = spec or QuerySpec()
        self._offset: Optional[str] = FIRST_PAGE
        self._window: List[T] = []
        self._pos = 0
        self.requests_made = 0
        self.last_error: Optional[AirtableError] = None

    @property
    def state(self) -> PaginatorState:
        if self._pos < len(self._window):
            return PaginatorState.HAS_BUFFERED_ITEMS
        if self._offset is None:
            return PaginatorState.EXHAUSTED
        if self.requests_made == 0:
            return PaginatorState.NOT_STARTED
        return PaginatorState.AWAITING_FETCH

    @property
    def pending_offset(self) -> Optional[str]:
        return self._offset

    def page_url(self, offset: str) -> str:
        return url_with_pairs(self.base.url(), self.spec.to_params(offset))

    def _take(self) -> T:
        item = self._window[self._pos]
        self._pos += 1
        return item

    def _fetch(self, offset: str) -> bool:
        """Load the page at `offset` into the window. False on failure."""
        url = self.page_url(offset)
        self.requests_made += 1
        logger.debug("fetching page %d of %s", self.requests_made, self.base.table)
        try:
            resp = self.base.transport.get(url)
            page = self.base.codec.decode_page(resp.json(), self.base.record_type)
        except AirtableError as e:
            logger.warning(
                "pagination of %s stopped after %d request(s): %s",
                self.base.table,
                self.requests_made,
                e,
            )
            self.last_error = e
            self._offset = None
            self._window, self._pos = [], 0
            return False

        self._window, self._pos = list(page.records), 0
        # opaque token, passed through unchanged
        self._offset = page.offset or None
        return True

    def try_next(self) -> Optional[T]:
        """Next record, or None once the sequence has ended."""
        if self._pos < len(self._window):
            return self._take()

        if self._offset is None:
            return None

        if not self._fetch(self._offset):
            return None

        if not self._window:
            # an empty page ends the sequence even if it carried an offset
            self._offset = None
            return None
        return self._take()

    def __iter__(self) -> "Paginator[T]":
        return self

    def __next__(self) -> T:
        item = self.try_next()
        if item is None:
            raise StopIteration
        return item
