"""Pydantic request and response models for the HTTP API."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

TicketPair = Tuple[str, str]


class TicketsEnvelope(BaseModel):
    """Alternate request shape: ``{"tickets": [[src, dst], ...]}``."""

    model_config = ConfigDict(extra="forbid")

    tickets: List[TicketPair]


class ErrorResponse(BaseModel):
    code: int
    message: str
    type: str


class HealthResponse(BaseModel):
    status: str = Field("healthy")
    service: str
