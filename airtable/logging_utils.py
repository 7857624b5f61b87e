from __future__ import annotations

import json
import logging
import os
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# Per-request correlation ID, set by the transport around each HTTP call
correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="-")

_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # provide %(correlation_id)s to all formatters
        record.correlation_id = correlation_id_ctx.get()
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", "-"),
        }
        return json.dumps(payload, ensure_ascii=True)


_CONFIGURED = False


def _env_truthy(name: str, default: str = "true") -> bool:
    val = os.getenv(name, default)
    return str(val or default).strip().lower() in {"true", "1", "t", "yes", "y", "on"}


def setup_logging(level: Optional[int] = None, json_logs: Optional[bool] = None) -> None:
    """
    Idempotent logging setup that ensures %(correlation_id)s is available in all log lines.
    Library code never calls this; applications and the CLI do.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    filt = CorrelationIdFilter()
    root = logging.getLogger()
    root.addFilter(filt)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.addFilter(filt)
        root.addHandler(handler)
        root.setLevel(level or logging.INFO)
    else:
        for h in list(root.handlers):
            fmt = getattr(h.formatter, "_fmt", "") if h.formatter else ""
            if "%(correlation_id)" not in fmt:
                h.setFormatter(logging.Formatter(_FORMAT))
            h.addFilter(filt)
        if level is not None:
            root.setLevel(level)

    if json_logs is None:
        json_logs = _env_truthy("LOG_JSON", "false")
    if json_logs:
        for h in root.handlers:
            h.setFormatter(JsonFormatter())

    _CONFIGURED = True


@contextmanager
def correlation_scope(cid: Optional[str] = None) -> Iterator[str]:
    """Bind a correlation id for the duration of one request."""
    cid = cid or uuid.uuid4().hex
    token = correlation_id_ctx.set(cid)
    try:
        yield cid
    finally:
        correlation_id_ctx.reset(token)
