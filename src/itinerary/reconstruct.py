"""Itinerary reconstruction by walking a successor map.

The tickets of one trip describe a single simple path. Each departure
city maps to exactly one arrival city, so the trip is recovered by
finding the only city that is never an arrival and following the map
from there.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..domain.errors import (
    CircularRouteError,
    DisconnectedRouteError,
    DuplicateRouteError,
    InvalidTicketError,
    ItineraryError,
    NoStartingPointError,
    NoTicketsProvidedError,
)
from ..domain.models import Itinerary, ReconstructionResult, Ticket

SuccessorMap = Dict[str, str]


def reconstruct_itinerary(tickets: Sequence[Ticket]) -> ReconstructionResult:
    """Rebuild the travel order of a set of one-hop tickets.

    Parameters
    ----------
    tickets:
        Tickets in the order they were received. The order does not
        change a valid itinerary, but it decides which error is
        reported first for invalid input.

    Returns
    -------
    ReconstructionResult
        The itinerary of ``len(tickets) + 1`` cities, or the first
        problem found. Problems are returned, never raised.
    """
    if not tickets:
        return ReconstructionResult.failure(NoTicketsProvidedError())

    for index, ticket in enumerate(tickets):
        if not ticket.is_valid:
            return ReconstructionResult.failure(
                InvalidTicketError(
                    f"ticket at index {index} has empty source or destination",
                    index=index,
                )
            )

    successors = _build_successor_map(tickets)
    if isinstance(successors, ItineraryError):
        return ReconstructionResult.failure(successors)

    start = find_starting_point(tickets)
    if start is None:
        return ReconstructionResult.failure(NoStartingPointError())

    cities = _walk(successors, start, hops=len(tickets))
    if isinstance(cities, ItineraryError):
        return ReconstructionResult.failure(cities)

    expected = len(tickets) + 1
    if len(cities) != expected:
        return ReconstructionResult.failure(
            DisconnectedRouteError(visited=len(cities), expected=expected)
        )

    return ReconstructionResult.success(Itinerary(cities=tuple(cities)))


def find_starting_point(tickets: Sequence[Ticket]) -> Optional[str]:
    """Return the first departure city that is never an arrival.

    Tickets are scanned in input order so the answer is deterministic.
    Returns None when every departure is also an arrival (pure cycle).
    """
    destinations = {ticket.destination for ticket in tickets}
    for ticket in tickets:
        if ticket.source not in destinations:
            return ticket.source
    return None


def _build_successor_map(
    tickets: Sequence[Ticket],
) -> Union[SuccessorMap, DuplicateRouteError]:
    successors: SuccessorMap = {}
    for ticket in tickets:
        if ticket.source in successors:
            return DuplicateRouteError(
                f"duplicate route from {ticket.source}", source=ticket.source
            )
        successors[ticket.source] = ticket.destination
    return successors


def _walk(
    successors: SuccessorMap, start: str, hops: int
) -> Union[List[str], CircularRouteError]:
    cities: List[str] = [start]
    visited: set[str] = set()
    current = start

    for _ in range(hops):
        if current in visited:
            return CircularRouteError(city=current)
        visited.add(current)

        next_city = successors.get(current)
        if next_city is None:
            break
        cities.append(next_city)
        current = next_city

    return cities


def pairs_to_tickets(pairs: Sequence[Tuple[str, str]]) -> List[Ticket]:
    """Convenience helper turning raw ``(source, destination)`` pairs into tickets."""
    return [Ticket(source, destination) for source, destination in pairs]
