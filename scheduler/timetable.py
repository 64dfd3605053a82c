"""
Weekly Schedule.

Holds the shared working hours and derives each hub's daily slot availability.
"""

import logging
from typing import Dict, List, Sequence

from pydantic import ValidationError

from models import WeeklyHours, DAYS_IN_WEEK
from .errors import InvalidScheduleShapeError, VaccinationError
from .registry import HubRegistry

logger = logging.getLogger(__name__)

UNAVAILABLE = -1


class WeeklySchedule:
    """
    Working hours for the week, combined with hub capacities.
    Until hours are set every day is closed.
    """

    def __init__(self, hubs: HubRegistry):
        self.hubs = hubs
        self.week = WeeklyHours()

    def set_hours(self, hours: Sequence[int]) -> None:
        try:
            self.week = WeeklyHours(hours=list(hours))
        except ValidationError as exc:
            raise InvalidScheduleShapeError(
                f"Expected {DAYS_IN_WEEK} daily values of at most "
                f"{WeeklyHours.MAX_DAILY_HOURS} hours, got {list(hours)}"
            ) from exc

    def daily_slots(self, day: int) -> List[str]:
        return self.week.time_slots(day)

    def weekly_slots(self) -> List[List[str]]:
        """One list of 'HH:MM' slot labels per day of the week."""
        return [self.week.time_slots(d) for d in range(DAYS_IN_WEEK)]

    def daily_available(self, hub_name: str, day: int) -> int:
        """
        Slots available at a hub on a day: hours * hourly capacity.
        Raises UnknownHubError / StaffingNotConfiguredError.
        """
        return self.week.for_day(day) * self.hubs.estimate_hourly_capacity(hub_name)

    def available_by_hub(self) -> Dict[str, List[int]]:
        """
        Daily availability of every hub for the whole week.
        A hub whose capacity cannot be computed is reported as UNAVAILABLE
        for each day without aborting the others.
        """
        available = {}
        for name in self.hubs.hub_names():
            try:
                available[name] = [self.daily_available(name, d) for d in range(DAYS_IN_WEEK)]
            except VaccinationError as exc:
                logger.warning(f"Availability of hub {name} could not be computed: {exc}")
                available[name] = [UNAVAILABLE] * DAYS_IN_WEEK
        return available
