"""
Restaurant search pipeline.

geocode -> collect pages -> shuffle -> classify cuisine -> format
"""
from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from domain.errors import MissingParameter
from domain.models import NO_RESULTS_MESSAGE, RestaurantSearchResult
from services.aggregator import PageAggregator
from services.cuisine import CuisineClassifier, build_classifier
from services.formatter import format_restaurant
from services.geocoding import Geocoder
from services.places_client import PlacesClient
from services.places_types import Coordinates
from services.shuffle import fisher_yates_shuffle

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 8047  # ~5 miles


class GeocoderClient(Protocol):
    def geocode(self, address: str) -> Coordinates: ...


class RestaurantSearchService:
    def __init__(
        self,
        geocoder: GeocoderClient,
        aggregator: PageAggregator,
        classifier: Optional[CuisineClassifier] = None,
        rng: Optional[random.Random] = None,
        default_radius_m: int = DEFAULT_RADIUS_M,
    ):
        self.geocoder = geocoder
        self.aggregator = aggregator
        self.classifier = classifier or build_classifier()
        self.rng = rng
        self.default_radius_m = default_radius_m

    def search(
        self,
        location: Optional[str] = None,
        radius_m: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> RestaurantSearchResult:
        """
        Find restaurants near a location, or fetch one page by continuation token.

        Args:
            location: Free-text address or zip code
            radius_m: Search radius in meters (default ~5 miles)
            page_token: Continuation token; bypasses geocoding and fetches one page

        Returns:
            RestaurantSearchResult with shuffled, classified restaurants

        Raises:
            MissingParameter: Neither location nor page_token given
            LocationNotFound: Geocoder had no candidate
            ProviderError: Provider reported a non-success status
        """
        next_page_token: Optional[str] = None
        if page_token:
            page = self.aggregator.collect_single(page_token)
            places = list(page.results)
            next_page_token = page.next_page_token
        else:
            if not location or not location.strip():
                raise MissingParameter()
            radius = radius_m if radius_m is not None else self.default_radius_m
            coords = self.geocoder.geocode(location.strip())
            places = self.aggregator.collect(coords, radius)

        if not places:
            return RestaurantSearchResult(
                restaurants=[], message=NO_RESULTS_MESSAGE, next_page_token=next_page_token
            )

        fisher_yates_shuffle(places, self.rng)
        restaurants = [format_restaurant(p, self.classifier.classify(p)) for p in places]
        logger.info("Returning %d restaurants (token mode=%s)", len(restaurants), bool(page_token))
        return RestaurantSearchResult(restaurants=restaurants, next_page_token=next_page_token)


def build_search_service(config) -> RestaurantSearchService:
    """
    Wire the default provider clients from a Settings object.

    Raises:
        ConfigurationError: If the provider key is missing
        ValueError: If the configured cuisine strategy is unknown
    """
    api_key = config.require_api_key()
    timeout = config.PROVIDER_TIMEOUT_SEC
    aggregator = PageAggregator(
        PlacesClient(api_key, timeout=timeout),
        max_pages=config.RESTAURANTS_MAX_PAGES,
        page_delay_sec=config.RESTAURANTS_PAGE_TOKEN_DELAY_SEC,
    )
    return RestaurantSearchService(
        geocoder=Geocoder(api_key, timeout=timeout),
        aggregator=aggregator,
        classifier=build_classifier(config.CUISINE_STRATEGY),
        default_radius_m=config.RESTAURANTS_DEFAULT_RADIUS_M,
    )
