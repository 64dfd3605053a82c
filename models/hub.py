"""
Hub data model for the Vaccination Allocator.

This module defines the 'Supply' side of the campaign:
vaccination centres whose throughput is gated by their scarcest staff role.
"""

from typing import ClassVar, List
from pydantic import BaseModel, Field, ConfigDict

DAYS_IN_WEEK = 7


def _empty_week() -> List[List[str]]:
    return [[] for _ in range(DAYS_IN_WEEK)]


class Hub(BaseModel):
    """
    A named vaccination centre.
    Staff counts are not range-checked: a zero or negative count simply yields
    a zero or negative capacity.
    """

    # Vaccinations per hour that a single member of each role can sustain
    DOCTOR_RATE: ClassVar[int] = 10
    NURSE_RATE: ClassVar[int] = 12
    OTHER_RATE: ClassVar[int] = 20

    name: str = Field(min_length=1, description="Unique hub name")

    # --- Staffing ---
    doctors: int = Field(default=0, description="Number of doctors")
    nurses: int = Field(default=0, description="Number of nurses")
    other: int = Field(default=0, description="Number of other personnel")
    staff_configured: bool = Field(
        default=False,
        description="Capacity is only defined once staffing has been set"
    )

    # --- Output ---
    allocations: List[List[str]] = Field(
        default_factory=_empty_week,
        description="Person ids allocated on each day of the week (0=Monday)"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Fiera Milano",
            "doctors": 4,
            "nurses": 5,
            "other": 2,
            "staff_configured": True
        }
    })

    def set_staff(self, doctors: int, nurses: int, other: int) -> None:
        self.doctors = doctors
        self.nurses = nurses
        self.other = other
        self.staff_configured = True

    def hourly_capacity(self) -> int:
        """Throughput of the scarcest role. Callers check staff_configured first."""
        return min(
            self.DOCTOR_RATE * self.doctors,
            self.NURSE_RATE * self.nurses,
            self.OTHER_RATE * self.other,
        )

    def record_day(self, day: int, person_ids: List[str]) -> None:
        """Overwrite the allocation list of a single day."""
        self.allocations[day] = list(person_ids)

    def clear_allocations(self) -> None:
        self.allocations = _empty_week()

    @property
    def has_allocations(self) -> bool:
        return any(self.allocations)
