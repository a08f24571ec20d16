"""
Multi-page collection of nearby-search results.

The provider serves at most three pages per query and needs a short settling
delay before a continuation token becomes valid.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Protocol

from domain.errors import ProviderError
from services.places_types import Coordinates, PlacesPage, RawPlace

logger = logging.getLogger(__name__)

MAX_PAGES = 3
PAGE_TOKEN_DELAY_SEC = 2.0


class PlaceSearchClient(Protocol):
    def search_nearby(self, lat: float, lng: float, radius_m: float) -> PlacesPage: ...

    def fetch_page(self, page_token: str) -> PlacesPage: ...


def _check_status(page: PlacesPage) -> None:
    if page.is_ok or page.is_zero_results:
        return
    logger.warning(
        "Places search returned status=%s (%s)", page.status, page.error_message or "no message"
    )
    raise ProviderError(page.status)


class PageAggregator:
    def __init__(
        self,
        client: PlaceSearchClient,
        max_pages: int = MAX_PAGES,
        page_delay_sec: float = PAGE_TOKEN_DELAY_SEC,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.max_pages = min(max(int(max_pages), 1), MAX_PAGES)
        self.page_delay_sec = page_delay_sec
        self.sleep = sleep

    def collect(self, coords: Coordinates, radius_m: float) -> List[RawPlace]:
        """
        Gather up to `max_pages` pages of results around `coords`.

        A zero-results first page yields an empty list. Any other non-OK
        status on the first page raises ProviderError. A failed follow-up page
        ends collection with what has been gathered so far.

        Returns:
            Places in fetch order (duplicates across pages are kept)
        """
        page = self.client.search_nearby(coords.lat, coords.lng, radius_m)
        _check_status(page)
        if page.is_zero_results:
            logger.info("No places within %sm of %.5f,%.5f", radius_m, coords.lat, coords.lng)
            return []

        places: List[RawPlace] = list(page.results)
        logger.info("Fetched page 1: %d places, more=%s", len(page.results), bool(page.next_page_token))

        pages_fetched = 1
        while page.next_page_token and pages_fetched < self.max_pages:
            logger.debug("Waiting %.1fs for page token to become valid", self.page_delay_sec)
            self.sleep(self.page_delay_sec)
            page = self.client.fetch_page(page.next_page_token)
            pages_fetched += 1
            if not page.is_ok:
                logger.warning(
                    "Stopping after page %d: follow-up page returned status=%s",
                    pages_fetched - 1,
                    page.status,
                )
                # results carried by a non-OK follow-up page are dropped
                break
            places.extend(page.results)
            logger.info(
                "Fetched page %d: %d places, more=%s",
                pages_fetched,
                len(page.results),
                bool(page.next_page_token),
            )

        return places

    def collect_single(self, page_token: str) -> PlacesPage:
        """Fetch exactly the page a caller-supplied continuation token points at."""
        page = self.client.fetch_page(page_token)
        _check_status(page)
        logger.info(
            "Fetched token page: %d places, more=%s", len(page.results), bool(page.next_page_token)
        )
        return page
