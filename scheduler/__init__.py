"""
Allocation package: registries, interval table, schedule, engine and statistics.
"""

from .campaign import VaccinationCampaign
from .engine import AllocationEngine
from .errors import (
    VaccinationError,
    DuplicateIdentityError,
    UnknownHubError,
    UnknownPersonError,
    StaffingNotConfiguredError,
    InvalidScheduleShapeError,
    InvalidIntervalBreakpointsError,
    InvalidHeaderError,
    InvalidRecordError,
)
from .loader import PeopleLoader

__all__ = [
    "VaccinationCampaign",
    "AllocationEngine",
    "PeopleLoader",
    "VaccinationError",
    "DuplicateIdentityError",
    "UnknownHubError",
    "UnknownPersonError",
    "StaffingNotConfiguredError",
    "InvalidScheduleShapeError",
    "InvalidIntervalBreakpointsError",
    "InvalidHeaderError",
    "InvalidRecordError",
]
