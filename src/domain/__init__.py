"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CircularRouteError,
    DisconnectedRouteError,
    DuplicateRouteError,
    ErrorType,
    InternalError,
    InvalidTicketError,
    ItineraryError,
    MalformedRequestError,
    NoStartingPointError,
    NoTicketsProvidedError,
)
from .models import Itinerary, ReconstructionResult, Ticket

__all__ = [
    # Models
    "Ticket",
    "Itinerary",
    "ReconstructionResult",
    # Errors
    "ErrorType",
    "ItineraryError",
    "MalformedRequestError",
    "InvalidTicketError",
    "NoTicketsProvidedError",
    "DuplicateRouteError",
    "NoStartingPointError",
    "CircularRouteError",
    "DisconnectedRouteError",
    "InternalError",
]
