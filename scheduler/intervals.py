"""
Age Interval Table.

Turns user supplied breakpoints into an ordered partition of [0, +inf)
and classifies ages into it.
"""

from typing import Iterable, List, Set

from models import AgeInterval
from .errors import InvalidIntervalBreakpointsError
from .registry import PersonRegistry


class AgeIntervalTable:
    """
    Ordered, gap-free set of half-open age intervals.
    The first interval starts at 0 and the last one is unbounded.
    """

    def __init__(self):
        self._intervals: List[AgeInterval] = [AgeInterval(lower=0)]

    def set_breakpoints(self, breakpoints: Iterable[int]) -> None:
        """
        Replace the table. For instance breakpoints (40, 50, 60) define
        [0,40) [40,50) [50,60) [60,+). A leading 0 is accepted and not duplicated.
        """
        requested = list(breakpoints)
        bounds = list(requested)
        if not bounds or bounds[0] != 0:
            bounds.insert(0, 0)

        for prev, nxt in zip(bounds, bounds[1:]):
            if nxt <= prev:
                raise InvalidIntervalBreakpointsError(
                    f"Breakpoints must be positive and strictly increasing, got {requested}"
                )

        uppers = bounds[1:] + [None]
        self._intervals = [
            AgeInterval(lower=lo, upper=hi) for lo, hi in zip(bounds, uppers)
        ]

    @property
    def intervals(self) -> List[AgeInterval]:
        """Intervals in ascending order of lower bound."""
        return list(self._intervals)

    def labels(self) -> List[str]:
        return [i.label for i in self._intervals]

    def oldest_first(self) -> List[AgeInterval]:
        return list(reversed(self._intervals))

    def classify(self, age: int) -> AgeInterval:
        for interval in self._intervals:
            if interval.contains(age):
                return interval
        raise ValueError(f"Age must be non-negative, got {age}")

    def parse_label(self, label: str) -> AgeInterval:
        try:
            return AgeInterval.from_label(label)
        except ValueError as exc:
            raise InvalidIntervalBreakpointsError(str(exc)) from exc

    def members_of(self, label: str, people: PersonRegistry, current_year: int) -> Set[str]:
        """Ssn of every registered person whose age falls in the labelled interval."""
        interval = self.parse_label(label)
        return {p.ssn for p in people if interval.contains(p.age(current_year))}
