"""
Data models package for the Vaccination Allocator.

This package exports the core pillars of the data architecture:
1. Demand (Person)
2. Prioritisation (AgeInterval)
3. Supply (Hub, WeeklyHours)
"""

from .person import Person

from .interval import AgeInterval

from .hub import (
    Hub,
    DAYS_IN_WEEK
)

from .schedule import WeeklyHours

__all__ = [
    # --- Demand Models ---
    "Person",

    # --- Prioritisation Models ---
    "AgeInterval",

    # --- Supply Models ---
    "Hub",
    "WeeklyHours",
    "DAYS_IN_WEEK",
]
