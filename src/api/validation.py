"""Request validation for the reconstruct endpoint.

Turns the raw request body into tickets, or raises the typed error
describing what is wrong with it. Parser messages are not forwarded to
the client; only the generic message of each error type is.
"""

from __future__ import annotations

import json
import logging
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from ..domain.errors import InvalidTicketError, MalformedRequestError, NoTicketsProvidedError
from ..domain.models import Ticket
from ..itinerary.reconstruct import pairs_to_tickets
from .schemas import TicketPair, TicketsEnvelope

logger = logging.getLogger(__name__)

_BODY_ADAPTER: TypeAdapter[Union[List[TicketPair], TicketsEnvelope]] = TypeAdapter(
    Union[List[TicketPair], TicketsEnvelope]
)


def parse_tickets(raw_body: bytes) -> List[Ticket]:
    """Parse and validate a reconstruct request body.

    Accepts a JSON array of ``[source, destination]`` string pairs, or
    the same array wrapped as ``{"tickets": [...]}``.

    Raises:
        MalformedRequestError: Body is not JSON or has the wrong shape.
        NoTicketsProvidedError: The ticket list is empty.
        InvalidTicketError: A ticket has a blank endpoint.
    """
    try:
        document = json.loads(raw_body)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedRequestError("invalid JSON format", cause=e)

    try:
        parsed = _BODY_ADAPTER.validate_python(document)
    except ValidationError as e:
        logger.debug("Rejected request body", extra={"errors": e.error_count()})
        raise MalformedRequestError(
            "tickets must be an array of [source, destination] pairs", cause=e
        )

    pairs = parsed.tickets if isinstance(parsed, TicketsEnvelope) else parsed
    if not pairs:
        raise NoTicketsProvidedError("at least one ticket is required")

    tickets = pairs_to_tickets(pairs)
    for index, ticket in enumerate(tickets):
        if not ticket.is_valid:
            raise InvalidTicketError(
                f"ticket at index {index} has empty source or destination",
                index=index,
            )

    return tickets
