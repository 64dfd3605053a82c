"""
The Vaccination Allocation Engine.

This module implements the core allocation logic.
It combines two passes per hub and day:
1. Quota Pass - Oldest age intervals first, each capped at 40% of the slots still free.
2. Overflow Pass - Whatever is left goes to anyone still waiting, oldest first.

A person is allocated at most once across the whole week: the global
'allocated' flag excludes them from every later hub/day.
"""

import logging
import math
from typing import Dict, List

from models import AgeInterval, DAYS_IN_WEEK
from .errors import StaffingNotConfiguredError
from .intervals import AgeIntervalTable
from .registry import PersonRegistry, HubRegistry
from .timetable import WeeklySchedule

logger = logging.getLogger(__name__)


class AllocationEngine:
    """
    Allocates registered people to hub/day slots.
    Assumes exclusive access to the registries for the duration of a call.
    """

    # Share of the remaining slots an interval may take during the quota pass
    QUOTA_FRACTION = 0.4

    def __init__(
        self,
        people: PersonRegistry,
        hubs: HubRegistry,
        intervals: AgeIntervalTable,
        schedule: WeeklySchedule,
        current_year: int
    ):
        self.people = people
        self.hubs = hubs
        self.intervals = intervals
        self.schedule = schedule
        self.current_year = current_year

    def allocate(self, hub_name: str, day: int) -> List[str]:
        """
        Compute the allocation plan of a hub on a given day (0 = Monday).
        The returned ssn list is also stored as the hub's list for that day.
        No particular order of the returned ids is guaranteed.
        """
        hub = self.hubs.get_hub(hub_name)
        remaining = self.schedule.daily_available(hub_name, day)
        order = self.intervals.oldest_first()
        allocated: List[str] = []

        # 1. Quota Pass: quota shrinks as older intervals consume slots
        for interval in order:
            quota = math.floor(self.QUOTA_FRACTION * remaining)
            taken = self._take(interval, quota, allocated)
            remaining -= taken
            logger.debug(f"{hub_name}/day {day}: quota {quota} for {interval.label}, took {taken}")

        # 2. Overflow Pass
        if remaining > 0:
            for interval in order:
                if remaining <= 0:
                    break
                taken = self._take(interval, remaining, allocated)
                remaining -= taken
                if taken:
                    logger.debug(f"{hub_name}/day {day}: overflow gave {taken} to {interval.label}")

        hub.record_day(day, allocated)
        return allocated

    def _take(self, interval: AgeInterval, limit: int, allocated: List[str]) -> int:
        """Allocate up to 'limit' waiting people of an interval, in registry order."""
        taken = 0
        for person in self.people:
            if taken >= limit:
                break
            if person.allocated or not interval.contains(person.age(self.current_year)):
                continue
            self.people.mark_allocated(person.ssn)
            allocated.append(person.ssn)
            taken += 1
        return taken

    def week_allocate(self) -> List[Dict[str, List[str]]]:
        """
        Allocate every hub for every day of the week, hub by hub.
        Returns one mapping per day: hub name -> ssn list, only for hubs that
        allocated someone that day. Hubs without staff are skipped.
        """
        logger.info(f"Starting weekly allocation over {len(self.hubs)} hubs and {len(self.people)} people...")

        for name in self.hubs.hub_names():
            try:
                for day in range(DAYS_IN_WEEK):
                    self.allocate(name, day)
            except StaffingNotConfiguredError as exc:
                logger.warning(f"Skipping hub {name}: {exc}")

        week = []
        for day in range(DAYS_IN_WEEK):
            week.append({
                hub.name: list(hub.allocations[day])
                for hub in self.hubs
                if hub.allocations[day]
            })

        logger.info(f"Weekly allocation complete: {self.people.allocated_count()} people allocated")
        return week

    def clear_allocation(self) -> None:
        """Remove everyone from the allocation lists and clear their status."""
        self.people.reset_allocations()
        self.hubs.clear_allocations()
