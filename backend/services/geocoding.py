"""Forward geocoding helpers using the Google Geocoding API.

The API surface is intentionally small: the restaurant search only needs the
first candidate's coordinates for a free-text address or zip code.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import requests

from domain.errors import LocationNotFound, UnexpectedFailure
from services.places_types import STATUS_OK, Coordinates

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT_SEC = 10.0
logger = logging.getLogger(__name__)
_session = requests.Session()


def _redact_key(url: str) -> str:
    if "key=" not in url:
        return url
    return re.sub(r"key=[^&]+", "key=<redacted>", url)


def _get_json(url: str, *, params: dict[str, Any], timeout: float) -> dict:
    """GET a provider endpoint and decode its JSON body.

    Transport and decoding errors surface as UnexpectedFailure.
    """
    try:
        resp = _session.get(url, params=params, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        message = _redact_key(str(exc))
        logger.warning("Provider request failed for %s: %s", url, message)
        raise UnexpectedFailure(message) from exc

    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning("Provider returned invalid JSON for %s: %s", url, exc)
        raise UnexpectedFailure(f"Invalid JSON from provider: {exc}") from exc

    if not isinstance(data, dict):
        raise UnexpectedFailure("Unexpected provider response shape")
    return data


def geocode_address(
    address: str,
    api_key: str,
    timeout: float = DEFAULT_TIMEOUT_SEC,
) -> Coordinates:
    """Resolve a free-text address into the first candidate's coordinates.

    Raises LocationNotFound when the geocoder reports anything but OK or has
    no usable candidate.
    """
    data = _get_json(
        GEOCODE_URL,
        params={"address": address, "key": api_key},
        timeout=timeout,
    )

    status = data.get("status")
    results = data.get("results") or []
    if status != STATUS_OK or not results:
        logger.info("Geocode found nothing for %r (status=%s)", address, status)
        raise LocationNotFound()

    first = results[0] if isinstance(results[0], dict) else {}
    loc = (first.get("geometry") or {}).get("location") or {}
    try:
        coords = Coordinates(lat=float(loc["lat"]), lng=float(loc["lng"]))
    except (KeyError, TypeError, ValueError):
        logger.info("Geocode candidate for %r had no coordinates", address)
        raise LocationNotFound()

    logger.debug("Geocoded %r -> %.6f,%.6f", address, coords.lat, coords.lng)
    return coords


class Geocoder:
    """Geocoder client bound to a key and timeout."""

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT_SEC):
        self.api_key = api_key
        self.timeout = timeout

    def geocode(self, address: str) -> Coordinates:
        return geocode_address(address, self.api_key, timeout=self.timeout)

