from __future__ import annotations

from .health import router as health_router
from .itinerary import router as itinerary_router

__all__ = ["health_router", "itinerary_router"]
