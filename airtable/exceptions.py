# airtable/exceptions.py
from __future__ import annotations

from typing import Optional


class AirtableError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(AirtableError):
    """
    Setup-time misconfiguration (missing or malformed credentials).
    Not meant to be recovered from; fix the environment and rebuild the Base.
    """


class TransportError(AirtableError):
    """Network-level failure talking to the API (DNS, TLS, timeout, reset)."""

    def __init__(self, message: str, method: str = "", url: str = "") -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class HTTPStatusError(TransportError):
    """The API answered with a non-2xx status."""

    def __init__(
        self, status: int, method: str, url: str, body: Optional[str] = None
    ) -> None:
        msg = f"{method} {url} -> HTTP {status}"
        if body:
            msg = f"{msg}: {body[:500]}"
        super().__init__(msg, method=method, url=url)
        self.status = status
        self.body = body


class DecodeError(AirtableError):
    """Response body is not JSON, or does not fit the page/record shape."""
