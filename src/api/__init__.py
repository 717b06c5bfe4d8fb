"""HTTP API layer built on FastAPI."""

from __future__ import annotations

from .schemas import ErrorResponse, HealthResponse, TicketsEnvelope
from .server import create_app

__all__ = [
    "create_app",
    "ErrorResponse",
    "HealthResponse",
    "TicketsEnvelope",
]
