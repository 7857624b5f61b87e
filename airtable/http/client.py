# airtable/http/client.py
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from airtable.exceptions import DecodeError, HTTPStatusError, TransportError
from airtable.http.auth import bearer_headers
from airtable.logging_utils import correlation_scope

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    status: int
    url: str
    headers: Dict[str, str]
    text: str
    elapsed_ms: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        try:
            return json.loads(self.text) if self.text else None
        except ValueError as e:
            raise DecodeError(f"response from {self.url} is not JSON: {e}") from e


class HttpTransport:
    """
    Thin synchronous wrapper over a requests.Session:
      - bearer + JSON content-type headers fixed at construction
      - non-2xx turned into HTTPStatusError, network failures into TransportError
    Safe to share across threads only as far as requests.Session is.
    """

    def __init__(
        self,
        api_key: str,
        timeout: Optional[float] = 30.0,
        log_requests: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = None if timeout is None else float(timeout)
        self.log_requests = bool(log_requests)
        self.session = session or requests.Session()
        self.session.headers.update(bearer_headers(api_key))

    def request(self, method: str, url: str, body: Optional[str] = None) -> HttpResponse:
        method = method.upper()
        with correlation_scope():
            t0 = time.perf_counter()
            if self.log_requests:
                logger.info(">> %s %s", method, url)
            try:
                resp = self.session.request(
                    method, url, data=body, timeout=self.timeout
                )
            except requests.RequestException as e:
                logger.warning("!! %s %s failed: %s", method, url, e)
                raise TransportError(str(e), method=method, url=url) from e

            out = HttpResponse(
                status=resp.status_code,
                url=url,
                headers=dict(resp.headers or {}),
                text=resp.text or "",
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
            )
            if self.log_requests:
                logger.info("<< %s %s %d %dms", method, url, out.status, out.elapsed_ms)
            if not out.ok:
                logger.warning("!! %s %s -> HTTP %d", method, url, out.status)
                raise HTTPStatusError(out.status, method, url, body=out.text)
            return out

    def get(self, url: str) -> HttpResponse:
        return self.request("GET", url)

    def post(self, url: str, body: str) -> HttpResponse:
        return self.request("POST", url, body=body)

    def patch(self, url: str, body: str) -> HttpResponse:
        return self.request("PATCH", url, body=body)

    def close(self) -> None:
        self.session.close()
