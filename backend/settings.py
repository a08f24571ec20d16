import logging
import os
from typing import List, Optional

from domain.errors import ConfigurationError

# Basic settings helper to read environment configuration.

MAX_PROVIDER_PAGES = 3
logger = logging.getLogger(__name__)


def _as_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", name, val, default)
        return default


def _as_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, val, default)
        return default


class Settings:
    def __init__(self) -> None:
        self.GOOGLE_PLACES_API_KEY: Optional[str] = (os.getenv("GOOGLE_PLACES_API_KEY") or "").strip() or None
        self.RESTAURANTS_DEFAULT_RADIUS_M: int = _as_int("RESTAURANTS_DEFAULT_RADIUS_M", 8047)
        max_pages = _as_int("RESTAURANTS_MAX_PAGES", MAX_PROVIDER_PAGES)
        self.RESTAURANTS_MAX_PAGES: int = min(max(max_pages, 1), MAX_PROVIDER_PAGES)
        self.RESTAURANTS_PAGE_TOKEN_DELAY_SEC: float = _as_float("RESTAURANTS_PAGE_TOKEN_DELAY_SEC", 2.0)
        self.PROVIDER_TIMEOUT_SEC: float = _as_float("PROVIDER_TIMEOUT_SEC", 10.0)
        self.CUISINE_STRATEGY: str = os.getenv("CUISINE_STRATEGY", "tag_suffix").strip().lower()
        self.CORS_ALLOW_ORIGINS: List[str] = [
            o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
        ]
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def require_api_key(self) -> str:
        """Return the provider key or fail before any outbound call is made."""
        if not self.GOOGLE_PLACES_API_KEY:
            raise ConfigurationError()
        return self.GOOGLE_PLACES_API_KEY


settings = Settings()
