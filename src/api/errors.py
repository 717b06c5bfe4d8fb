"""Mapping of domain errors to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from ..domain.errors import InternalError, ItineraryError

logger = logging.getLogger(__name__)


def error_response(error: ItineraryError) -> JSONResponse:
    """Build the JSON error body for a domain error."""
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


def internal_error_response() -> JSONResponse:
    return error_response(InternalError())


async def handle_itinerary_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ItineraryError)
    logger.info(
        "Request rejected",
        extra={
            "error_type": type(exc).__name__,
            "error_message": exc.message,
            "path": request.url.path,
        },
    )
    return error_response(exc)
