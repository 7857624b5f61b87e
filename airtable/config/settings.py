# airtable/config/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv, find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.airtable.com/v0"


class Settings(BaseSettings):
    AIRTABLE_API_KEY: Optional[str] = None
    AIRTABLE_BASE_KEY: Optional[str] = None
    AIRTABLE_API_URL: str = DEFAULT_API_URL
    AIRTABLE_TIMEOUT: float = 30.0

    LOG_REQUESTS: bool = True
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    # Real environment wins over .env so CI/container secrets are not shadowed.
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings()
