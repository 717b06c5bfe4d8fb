"""Itinerary port - Abstraction for itinerary reconstruction.

The HTTP layer depends on this protocol rather than on a concrete
service, so handlers can be exercised with test doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import ReconstructionResult, Ticket


class ItineraryReconstructorPort(Protocol):
    """Port for itinerary reconstruction.

    Implementations:
    - services/itinerary_service.py (ItineraryService) - Production

    Implementations must be safe to call concurrently and must report
    every failure through the returned result instead of raising.
    """

    def reconstruct(self, tickets: Sequence[Ticket]) -> ReconstructionResult:
        """Rebuild the travel order of the given tickets.

        Args:
            tickets: Tickets in the order they were received.

        Returns:
            ReconstructionResult with the itinerary or the error found.
        """
        ...
