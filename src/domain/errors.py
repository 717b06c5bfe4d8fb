"""Typed domain errors for the itinerary reconstructor.

Every failure the reconstructor can detect has its own error type with a
stable HTTP status code and error category. The reconstructor returns
these errors as values (see ``ReconstructionResult``); only the HTTP
edge raises and catches them.

All errors inherit from ItineraryError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Optional


class ErrorType(str, Enum):
    """Error category exposed in the ``type`` field of error bodies."""

    VALIDATION = "validation_error"
    BUSINESS = "business_error"
    INTERNAL = "internal_error"


@dataclass
class ItineraryError(Exception):
    """Base error for the itinerary domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    status_code: ClassVar[int] = 500
    error_type: ClassVar[ErrorType] = ErrorType.INTERNAL

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON error body sent to clients.

        The cause is deliberately left out so internal details never
        reach the client.
        """
        return {
            "code": self.status_code,
            "message": self.message,
            "type": self.error_type.value,
        }


@dataclass
class MalformedRequestError(ItineraryError):
    """Request body is not JSON or not a list of ticket pairs."""

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.VALIDATION


@dataclass
class InvalidTicketError(ItineraryError):
    """A ticket has an empty source or destination.

    Attributes:
        index: Position of the offending ticket in the request
    """

    index: int = -1

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.VALIDATION


@dataclass
class NoTicketsProvidedError(ItineraryError):
    """The ticket list is empty."""

    message: str = "no tickets provided"

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.VALIDATION


@dataclass
class DuplicateRouteError(ItineraryError):
    """Two tickets depart from the same city.

    Attributes:
        source: The city with more than one outgoing ticket
    """

    source: str = ""

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.VALIDATION


@dataclass
class NoStartingPointError(ItineraryError):
    """Every departure city is also some ticket's destination.

    Raised for pure cycles too: the start scan fails before any walk.
    """

    message: str = "no valid starting point found"

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.BUSINESS


@dataclass
class CircularRouteError(ItineraryError):
    """The walk revisited a city before using every ticket.

    Attributes:
        city: The city that was reached twice
    """

    message: str = "circular route detected"
    city: str = ""

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.BUSINESS


@dataclass
class DisconnectedRouteError(ItineraryError):
    """The tickets form more than one path fragment.

    Attributes:
        visited: Number of cities reached from the starting city
        expected: Number of cities a complete itinerary would contain
    """

    message: str = "disconnected route found"
    visited: int = 0
    expected: int = 0

    status_code: ClassVar[int] = 400
    error_type: ClassVar[ErrorType] = ErrorType.BUSINESS


@dataclass
class InternalError(ItineraryError):
    """Unexpected failure. The message shown to clients stays generic."""

    message: str = "internal server error"
