"""
Vaccination Campaign facade.

Wires the registries, interval table, schedule, engine and statistics together
behind a single object, the entry point used by the loader and the runner.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Set

from models import Person
from .engine import AllocationEngine
from .intervals import AgeIntervalTable
from .registry import PersonRegistry, HubRegistry
from .statistics import AllocationStatistics
from .timetable import WeeklySchedule


class VaccinationCampaign:
    """
    In-memory campaign state. Not thread-safe: callers must not mutate it
    while an allocation is running.
    """

    def __init__(self, current_year: Optional[int] = None):
        self.current_year = current_year if current_year is not None else date.today().year

        self.people = PersonRegistry()
        self.hubs = HubRegistry()
        self.intervals = AgeIntervalTable()
        self.schedule = WeeklySchedule(self.hubs)
        self.engine = AllocationEngine(
            self.people, self.hubs, self.intervals, self.schedule, self.current_year
        )
        self.stats = AllocationStatistics(
            self.people, self.hubs, self.intervals, self.current_year
        )

    # --- People ---

    def add_person(self, first_name: str, last_name: str, ssn: str, birth_year: int) -> bool:
        return self.people.add_person(first_name, last_name, ssn, birth_year)

    def count_people(self) -> int:
        return self.people.count()

    def get_person(self, ssn: str) -> Optional[Person]:
        return self.people.get_person(ssn)

    def get_age(self, ssn: str) -> Optional[int]:
        return self.people.get_age(ssn, self.current_year)

    # --- Age Intervals ---

    def set_age_intervals(self, *breaks: int) -> None:
        self.intervals.set_breakpoints(breaks)

    def get_age_intervals(self) -> List[str]:
        return self.intervals.labels()

    def get_in_interval(self, label: str) -> Set[str]:
        return self.intervals.members_of(label, self.people, self.current_year)

    # --- Hubs ---

    def define_hub(self, name: str) -> None:
        self.hubs.define_hub(name)

    def get_hubs(self) -> List[str]:
        return self.hubs.hub_names()

    def set_staff(self, name: str, doctors: int, nurses: int, other: int) -> None:
        self.hubs.set_staff(name, doctors, nurses, other)

    def estimate_hourly_capacity(self, name: str) -> int:
        return self.hubs.estimate_hourly_capacity(name)

    # --- Schedule ---

    def set_hours(self, *hours: int) -> None:
        self.schedule.set_hours(hours)

    def get_hours(self) -> List[List[str]]:
        return self.schedule.weekly_slots()

    def get_daily_available(self, hub: str, day: int) -> int:
        return self.schedule.daily_available(hub, day)

    def get_available(self) -> Dict[str, List[int]]:
        return self.schedule.available_by_hub()

    # --- Allocation ---

    def allocate(self, hub: str, day: int) -> List[str]:
        return self.engine.allocate(hub, day)

    def week_allocate(self) -> List[Dict[str, List[str]]]:
        return self.engine.week_allocate()

    def clear_allocation(self) -> None:
        self.engine.clear_allocation()

    # --- Statistics ---

    def prop_allocated(self) -> float:
        return self.stats.proportion_allocated()

    def prop_allocated_age(self) -> Dict[str, float]:
        return self.stats.proportion_allocated_by_interval()

    def distribution_allocated(self) -> Dict[str, float]:
        return self.stats.distribution_of_allocated()

    # --- Bulk Setup ---

    def add_people(self, people: Iterable[Person]) -> int:
        """Register already built Person models; returns how many were new."""
        return sum(
            1 for p in people
            if self.add_person(p.first_name, p.last_name, p.ssn, p.birth_year)
        )

    def configure_hub(self, name: str, staff: Sequence[int]) -> None:
        self.define_hub(name)
        self.set_staff(name, *staff)
