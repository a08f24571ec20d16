"""
Exception handlers rendering pipeline errors as `{error, details}` bodies.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.errors import RestaurantSearchError, UnexpectedFailure

logger = logging.getLogger(__name__)


async def search_error_handler(request: Request, exc: RestaurantSearchError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Search failed: %s (%s)", exc.message, exc.details or "no details")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(".".join(str(p) for p in err.get("loc", ())) for err in exc.errors())
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request parameters", "details": fields or str(exc)},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error fetching restaurants")
    return JSONResponse(status_code=500, content=UnexpectedFailure(str(exc)).to_body())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RestaurantSearchError, search_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
