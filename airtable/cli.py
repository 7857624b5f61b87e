#!/usr/bin/env python3
"""
airtable-dump — stream a table as JSON lines.

Usage (example):
  airtable-dump --table Words --view "To Learn" \
    --sort Next:desc --sort Google:desc \
    --formula 'FIND("Harry Potter", Source)' --limit 200

Credentials come from AIRTABLE_API_KEY / AIRTABLE_BASE_KEY (env or .env).
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import sys
from typing import List, Optional

from pydantic import ConfigDict

from airtable.base import Base
from airtable.config.settings import get_settings
from airtable.exceptions import ConfigurationError
from airtable.logging_utils import setup_logging
from airtable.models.records import RecordModel
from airtable.query import SortDirection

logger = logging.getLogger("airtable.cli")


class AnyRecord(RecordModel):
    """Keeps every column the API returns."""

    model_config = ConfigDict(extra="allow")


def _parse_sort(value: str):
    field, _, direction = value.rpartition(":")
    if not field:
        return value, SortDirection.ASCENDING
    try:
        return field, SortDirection(direction.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"sort direction must be asc or desc, got {direction!r}"
        )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Dump an Airtable table as JSON lines.")
    ap.add_argument("--table", required=True)
    ap.add_argument("--view")
    ap.add_argument("--formula")
    ap.add_argument(
        "--sort", action="append", default=[], type=_parse_sort, help="FIELD[:asc|desc]"
    )
    ap.add_argument("--field", action="append", default=[], dest="fields")
    ap.add_argument("--page-size", type=int)
    ap.add_argument("--limit", type=int, help="stop after N records")
    ap.add_argument("--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(
        logging.DEBUG if args.verbose else logging.WARNING, json_logs=settings.LOG_JSON
    )

    try:
        base = Base.from_env(args.table, AnyRecord, settings=settings)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    q = base.query()
    if args.view:
        q = q.view(args.view)
    if args.formula:
        q = q.formula(args.formula)
    for field, direction in args.sort:
        q = q.sort(field, direction)
    if args.fields:
        q = q.fields(*args.fields)
    if args.page_size is not None:
        q = q.page_size(args.page_size)

    logger.debug("query on %s: %s", args.table, q.spec)
    pager = q.paginate()
    rows = pager if args.limit is None else itertools.islice(pager, args.limit)
    with base:
        for rec in rows:
            out = {"id": rec.get_id(), "fields": rec.model_dump(by_alias=True)}
            sys.stdout.write(json.dumps(out, ensure_ascii=False, default=str) + "\n")

    if pager.last_error is not None:
        print(f"ERROR: {pager.last_error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
