"""
Restaurant search API routes.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from domain.errors import MissingParameter, RestaurantSearchError, UnexpectedFailure
from services.restaurant_search import RestaurantSearchService, build_search_service
from settings import settings

router = APIRouter()
logger = logging.getLogger(__name__)


class RestaurantResponse(BaseModel):
    name: str
    cuisine: str
    location: str
    rating: Optional[float] = None
    priceLevel: Optional[int] = None
    placeId: Optional[str] = None


class RestaurantsResponse(BaseModel):
    restaurants: List[RestaurantResponse]
    message: Optional[str] = None
    nextPageToken: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


@dataclass
class SearchQuery:
    location: Optional[str]
    radius: Optional[int]
    page_token: Optional[str]


def search_query(
    location: Optional[str] = Query(None, description="Address, city or zip code"),
    radius: Optional[int] = Query(None, gt=0, description="Search radius in meters"),
    page_token: Optional[str] = Query(None, alias="pageToken"),
) -> SearchQuery:
    """Read the query string; a location or a page token is required."""
    if not page_token and not (location and location.strip()):
        raise MissingParameter()
    return SearchQuery(location=location, radius=radius, page_token=page_token)


def _unexpected(exc: Exception) -> UnexpectedFailure:
    # Raised from inside the app so CORS headers still reach the browser.
    logger.exception("Error fetching restaurants")
    return UnexpectedFailure(str(exc))


def get_search_service(query: SearchQuery = Depends(search_query)) -> RestaurantSearchService:
    """Build provider clients per request; ConfigurationError comes before any network call."""
    # `query` is resolved first, so a missing location fails before any client is built.
    try:
        return build_search_service(settings)
    except RestaurantSearchError:
        raise
    except Exception as exc:
        raise _unexpected(exc) from exc


def _search(query: SearchQuery, service: RestaurantSearchService) -> RestaurantsResponse:
    try:
        result = service.search(location=query.location, radius_m=query.radius, page_token=query.page_token)
    except RestaurantSearchError:
        raise
    except Exception as exc:
        raise _unexpected(exc) from exc
    logger.info(
        "Search location=%r radius=%s token=%s -> %d restaurants",
        query.location,
        query.radius,
        "yes" if query.page_token else "no",
        len(result.restaurants),
    )
    return RestaurantsResponse(**result.to_body())


_responses = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get(
    "/restaurants",
    response_model=RestaurantsResponse,
    response_model_exclude_unset=True,
    responses=_responses,
)
def get_restaurants(
    query: SearchQuery = Depends(search_query),
    service: RestaurantSearchService = Depends(get_search_service),
):
    """Find restaurants near a location, shuffled, with a cuisine label each."""
    return _search(query, service)


@router.post(
    "/restaurants",
    response_model=RestaurantsResponse,
    response_model_exclude_unset=True,
    responses=_responses,
)
def post_restaurants(
    query: SearchQuery = Depends(search_query),
    service: RestaurantSearchService = Depends(get_search_service),
):
    """Same as GET; parameters are still read from the query string."""
    return _search(query, service)
