"""
Itinerary Planning - rule-based day plans
"""

from .itinerary_planner import (
    ItineraryPlanner,
    INTEREST_PLACES,
    GENERIC_PLACES,
    normalize_interests,
)

__all__ = [
    "ItineraryPlanner",
    "INTEREST_PLACES",
    "GENERIC_PLACES",
    "normalize_interests",
]
