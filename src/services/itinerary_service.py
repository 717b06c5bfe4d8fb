"""Itinerary service - Logged entry point for reconstruction.

This service wraps the pure reconstruction routine and adds:
- Diagnostic logging
- Conversion of unexpected failures into InternalError results
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..domain.errors import InternalError
from ..domain.models import ReconstructionResult, Ticket
from ..itinerary.reconstruct import reconstruct_itinerary


@dataclass
class ItineraryService:
    """Reconstructs itineraries and logs the outcome.

    This service implements ItineraryReconstructorPort. It holds no
    per-request state, so one instance serves every request.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def reconstruct(self, tickets: Sequence[Ticket]) -> ReconstructionResult:
        """Rebuild the travel order of the given tickets.

        Args:
            tickets: Tickets in the order they were received.

        Returns:
            ReconstructionResult with the itinerary, or with the error
            found. Unexpected exceptions come back as InternalError.
        """
        self._logger.debug(
            "Reconstructing itinerary",
            extra={"tickets": len(tickets)},
        )

        try:
            result = reconstruct_itinerary(tickets)
        except Exception as e:
            self._logger.exception(
                "Unexpected error in itinerary reconstruction",
                extra={"tickets": len(tickets)},
            )
            return ReconstructionResult.failure(InternalError(cause=e))

        if result.is_success:
            assert result.itinerary is not None
            self._logger.info(
                "Itinerary reconstructed",
                extra={
                    "stops": len(result.itinerary.cities),
                    "origin": result.itinerary.origin,
                    "destination": result.itinerary.final_destination,
                },
            )
        else:
            assert result.error is not None
            self._logger.warning(
                "Itinerary reconstruction failed",
                extra={
                    "error_type": type(result.error).__name__,
                    "error_message": result.error.message,
                },
            )

        return result
