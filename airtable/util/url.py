# airtable/util/url.py
from __future__ import annotations

from typing import Iterable, Optional, Tuple
from urllib.parse import quote, urlencode, urlparse, urlunparse


def table_url(root: str, base_key: str, table: str, record_id: Optional[str] = None) -> str:
    # table names may contain spaces; path segments are percent-quoted
    parts = [root.rstrip("/"), quote(base_key, safe=""), quote(table, safe="")]
    if record_id is not None:
        parts.append(quote(record_id, safe=""))
    return "/".join(parts)


def url_with_pairs(base_url: str, pairs: Iterable[Tuple[str, str]]) -> str:
    """Append query pairs in the given order; repeated keys are kept."""
    p = urlparse(base_url)
    q = urlencode(list(pairs))
    if p.query:
        q = f"{p.query}&{q}" if q else p.query
    return urlunparse(p._replace(query=q))


def looks_like_url(s: object) -> bool:
    return isinstance(s, str) and (s.startswith("http://") or s.startswith("https://"))
