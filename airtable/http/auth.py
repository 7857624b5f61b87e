# airtable/http/auth.py
from __future__ import annotations

from typing import Dict

from airtable.exceptions import ConfigurationError

_FORBIDDEN = ("\r", "\n", "\x00")


def bearer_headers(api_key: str) -> Dict[str, str]:
    """
    Default headers sent with every request: bearer auth + JSON content type.
    A key that cannot be carried in a header is a setup error.
    """
    if not isinstance(api_key, str) or not api_key.strip():
        raise ConfigurationError("api key must be a non-empty string")
    if any(ch in api_key for ch in _FORBIDDEN) or api_key != api_key.strip():
        raise ConfigurationError("invalid api key: not a valid header value")
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
