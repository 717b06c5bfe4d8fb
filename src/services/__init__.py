"""Services layer - Application orchestration.

This module contains the application services that sit between the
HTTP layer and the reconstruction core.

Available services:
- ItineraryService: Logged itinerary reconstruction
"""

from .itinerary_service import ItineraryService

__all__ = ["ItineraryService"]
