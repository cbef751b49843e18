"""Settings read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://newsapi.org/v2"
DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    browser_ws: Optional[str] = None


def load_settings() -> Settings:
    """Load settings from NEWSAPI_* variables. Raises RuntimeError without a key."""
    load_dotenv()
    api_key = os.getenv("NEWSAPI_KEY", "")
    if not api_key:
        raise RuntimeError("NEWSAPI_KEY environment variable is required to call NewsAPI.")

    raw_timeout = os.getenv("NEWSAPI_TIMEOUT", "")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError as exc:
        raise RuntimeError(f"NEWSAPI_TIMEOUT must be a number, got {raw_timeout!r}") from exc

    return Settings(
        api_key=api_key,
        base_url=os.getenv("NEWSAPI_BASE_URL", DEFAULT_BASE_URL),
        timeout=timeout,
        browser_ws=os.getenv("NEWSAPI_BROWSER_WS") or None,
    )
