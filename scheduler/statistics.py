"""
Allocation Statistics.

Aggregate views over the current allocation state, used by the final report.
Empty states (no people, or nobody allocated) yield 0.0 rather than NaN.
"""

from collections import defaultdict
from typing import Any, Dict

from models import DAYS_IN_WEEK
from .intervals import AgeIntervalTable
from .registry import PersonRegistry, HubRegistry


class AllocationStatistics:
    """
    Read-only reporting over registries and the interval table.
    """

    def __init__(
        self,
        people: PersonRegistry,
        hubs: HubRegistry,
        intervals: AgeIntervalTable,
        current_year: int
    ):
        self.people = people
        self.hubs = hubs
        self.intervals = intervals
        self.current_year = current_year

    def _allocated_by_label(self) -> Dict[str, int]:
        counts = {label: 0 for label in self.intervals.labels()}
        for person in self.people:
            if person.allocated:
                counts[self.intervals.classify(person.age(self.current_year)).label] += 1
        return counts

    def proportion_allocated(self) -> float:
        """Allocated people w.r.t. everybody registered."""
        total = self.people.count()
        if total == 0:
            return 0.0
        return self.people.allocated_count() / total

    def proportion_allocated_by_interval(self) -> Dict[str, float]:
        """
        Per interval label, allocated people in that interval divided by the
        global number of registered people (not the interval's size).
        """
        total = self.people.count()
        counts = self._allocated_by_label()
        if total == 0:
            return {label: 0.0 for label in counts}
        return {label: n / total for label, n in counts.items()}

    def distribution_of_allocated(self) -> Dict[str, float]:
        """Share of the allocated people falling in each interval."""
        allocated = self.people.allocated_count()
        counts = self._allocated_by_label()
        if allocated == 0:
            return {label: 0.0 for label in counts}
        return {label: n / allocated for label, n in counts.items()}

    def summary(self) -> Dict[str, Any]:
        """
        Generate comprehensive stats for the final report.
        """
        hub_usage = defaultdict(lambda: [0] * DAYS_IN_WEEK)
        for hub in self.hubs:
            for day, ids in enumerate(hub.allocations):
                hub_usage[hub.name][day] = len(ids)

        return {
            "total_people": self.people.count(),
            "allocated_people": self.people.allocated_count(),
            "proportion_allocated": round(self.proportion_allocated(), 4),
            "proportion_by_interval": {
                k: round(v, 4) for k, v in self.proportion_allocated_by_interval().items()
            },
            "distribution_of_allocated": {
                k: round(v, 4) for k, v in self.distribution_of_allocated().items()
            },
            "hub_daily_allocations": dict(hub_usage),
        }
