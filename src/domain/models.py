"""Immutable domain models for the itinerary reconstructor.

All models are frozen dataclasses with slots. They have no external
dependencies and live only for the duration of one request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from .errors import ItineraryError


@dataclass(frozen=True, slots=True)
class Ticket:
    """A single one-hop flight ticket.

    Construction does not validate the endpoints so that malformed input
    can still be represented and reported with its position.

    Attributes:
        source: Departure city code (e.g., 'JFK')
        destination: Arrival city code (e.g., 'LAX')
    """

    source: str
    destination: str

    @classmethod
    def from_pair(cls, pair: Sequence[str]) -> Ticket:
        """Build a ticket from a ``[source, destination]`` sequence."""
        if len(pair) != 2:
            raise ValueError(f"A ticket needs exactly 2 cities, got {len(pair)}")
        return cls(source=pair[0], destination=pair[1])

    @property
    def is_valid(self) -> bool:
        """Check that neither endpoint is blank."""
        return bool(self.source and self.source.strip()) and bool(
            self.destination and self.destination.strip()
        )


@dataclass(frozen=True, slots=True)
class Itinerary:
    """Cities in travel order, one more than the number of tickets.

    Attributes:
        cities: Ordered tuple of city codes
    """

    cities: Tuple[str, ...]

    @property
    def origin(self) -> str:
        """First city of the trip."""
        return self.cities[0]

    @property
    def final_destination(self) -> str:
        """Last city of the trip."""
        return self.cities[-1]

    @property
    def num_legs(self) -> int:
        """Number of flights taken."""
        return max(len(self.cities) - 1, 0)

    @property
    def legs(self) -> Tuple[Ticket, ...]:
        """The tickets in travel order."""
        return tuple(
            Ticket(source, destination)
            for source, destination in zip(self.cities, self.cities[1:])
        )

    def as_list(self) -> List[str]:
        return list(self.cities)


@dataclass(frozen=True, slots=True)
class ReconstructionResult:
    """Outcome of one reconstruction: an itinerary or an error.

    Exactly one of ``itinerary`` and ``error`` is set. Use the
    ``success`` and ``failure`` constructors rather than building the
    result by hand.

    Attributes:
        itinerary: The reconstructed itinerary on success
        error: The detected problem on failure
    """

    itinerary: Optional[Itinerary] = None
    error: Optional["ItineraryError"] = field(default=None)

    def __post_init__(self) -> None:
        if (self.itinerary is None) == (self.error is None):
            raise ValueError("Exactly one of itinerary or error must be set")

    @classmethod
    def success(cls, itinerary: Itinerary) -> ReconstructionResult:
        return cls(itinerary=itinerary)

    @classmethod
    def failure(cls, error: "ItineraryError") -> ReconstructionResult:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        """Check if an itinerary was produced."""
        return self.error is None

    def unwrap(self) -> Itinerary:
        """Return the itinerary or raise the carried error."""
        if self.error is not None:
            raise self.error
        assert self.itinerary is not None
        return self.itinerary
