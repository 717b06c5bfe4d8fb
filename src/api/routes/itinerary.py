"""POST /itinerary/reconstruct

Validates the ticket list, runs the reconstruction and maps the result
to either the ordered city list or a structured error body.
"""

from __future__ import annotations

from typing import List, Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...ports.itinerary import ItineraryReconstructorPort
from ..dependencies import get_itinerary_service
from ..errors import error_response
from ..schemas import ErrorResponse
from ..validation import parse_tickets

router = APIRouter(tags=["Itinerary"])

_TICKET_LIST_SCHEMA = {
    "type": "array",
    "minItems": 1,
    "items": {
        "type": "array",
        "items": {"type": "string", "minLength": 1},
        "minItems": 2,
        "maxItems": 2,
    },
    "example": [["JFK", "LAX"], ["LAX", "DXB"]],
}

_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": {
                    "oneOf": [
                        _TICKET_LIST_SCHEMA,
                        {
                            "type": "object",
                            "properties": {"tickets": _TICKET_LIST_SCHEMA},
                            "required": ["tickets"],
                        },
                    ]
                }
            }
        },
    }
}


@router.post(
    "/itinerary/reconstruct",
    response_model=List[str],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Reconstruct an itinerary",
    openapi_extra=_REQUEST_BODY,
)
async def reconstruct_itinerary(
    request: Request,
    service: ItineraryReconstructorPort = Depends(get_itinerary_service),
) -> Union[List[str], JSONResponse]:
    """Reconstructs the travel itinerary from a list of source-destination pairs."""
    tickets = parse_tickets(await request.body())

    result = service.reconstruct(tickets)
    if result.error is not None:
        return error_response(result.error)

    return result.unwrap().as_list()
