"""
Schedule data models for the Vaccination Allocator.

This module defines the weekly opening hours shared by every hub
and the 15-minute time slots derived from them.
"""

from datetime import datetime, timedelta
from typing import ClassVar, List
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .hub import DAYS_IN_WEEK


class WeeklyHours(BaseModel):
    """
    Working hours for the 7 days of the week, Monday first.
    A new instance replaces the previous one wholesale.
    """
    MAX_DAILY_HOURS: ClassVar[int] = 12
    OPENING: ClassVar[str] = "09:00"
    SLOT_MINUTES: ClassVar[int] = 15

    hours: List[int] = Field(
        default_factory=lambda: [0] * DAYS_IN_WEEK,
        min_length=DAYS_IN_WEEK,
        max_length=DAYS_IN_WEEK,
        description="Working hours per day, 0=Monday"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {"hours": [8, 8, 8, 8, 8, 4, 0]}
    })

    @field_validator('hours')
    @classmethod
    def validate_daily_cap(cls, value: List[int]) -> List[int]:
        for day, h in enumerate(value):
            if h < 0 or h > cls.MAX_DAILY_HOURS:
                raise ValueError(
                    f"Day {day} has {h} hours, allowed range is 0-{cls.MAX_DAILY_HOURS}"
                )
        return value

    def for_day(self, day: int) -> int:
        if not 0 <= day < DAYS_IN_WEEK:
            raise ValueError(f"Day index must be between 0 and {DAYS_IN_WEEK - 1}, got {day}")
        return self.hours[day]

    def time_slots(self, day: int) -> List[str]:
        """Slot start times ('HH:MM') from opening time, four per working hour."""
        per_hour = 60 // self.SLOT_MINUTES
        start = datetime.strptime(self.OPENING, "%H:%M")
        step = timedelta(minutes=self.SLOT_MINUTES)
        return [
            (start + i * step).strftime("%H:%M")
            for i in range(per_hour * self.for_day(day))
        ]
