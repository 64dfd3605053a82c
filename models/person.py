"""
Person data model for the Vaccination Allocator.

This module defines the 'Demand' side of the campaign:
the individuals waiting for a vaccination slot.
"""

from pydantic import BaseModel, Field, ConfigDict


class Person(BaseModel):
    """
    A registered individual.
    The 'allocated' flag is owned by the PersonRegistry and only flipped through it.
    """
    ssn: str = Field(min_length=1, description="Unique identifier (codice fiscale)")
    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")
    birth_year: int = Field(description="Year of birth, used to derive the age")

    # --- Allocation State ---
    allocated: bool = Field(
        default=False,
        description="True once the person holds a slot in any hub/day"
    )

    def age(self, current_year: int) -> int:
        """Age in whole years, computed from the birth year only."""
        return current_year - self.birth_year

    @property
    def summary(self) -> str:
        """Textual record formatted as 'ssn,last,first'."""
        return f"{self.ssn},{self.last_name},{self.first_name}"

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "ssn": "RSSMRA50A01H501U",
            "first_name": "Mario",
            "last_name": "Rossi",
            "birth_year": 1950,
            "allocated": False
        }
    })
