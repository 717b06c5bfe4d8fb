"""Itinerary reconstruction from unordered flight tickets.

This subpackage contains the pure reconstruction routine. It has no
I/O and no shared state, so it can be called from any thread or task.
"""

from .reconstruct import (
    SuccessorMap,
    find_starting_point,
    pairs_to_tickets,
    reconstruct_itinerary,
)

__all__ = [
    "SuccessorMap",
    "find_starting_point",
    "pairs_to_tickets",
    "reconstruct_itinerary",
]
