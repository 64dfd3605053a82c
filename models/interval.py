"""
Age interval data model for the Vaccination Allocator.

An interval is a half-open age range [lower, upper).
An upper bound of None means the interval is unbounded ('+').
"""

import re
from typing import Optional
from pydantic import BaseModel, Field, model_validator, ConfigDict

_LABEL_PATTERN = re.compile(r"^\[(\d+),(\d+|\+)\)$")


class AgeInterval(BaseModel):
    """Half-open age bracket used to prioritise allocation."""
    lower: int = Field(ge=0, description="Inclusive lower bound")
    upper: Optional[int] = Field(default=None, description="Exclusive upper bound, None = +infinity")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_bounds(self):
        if self.upper is not None and self.upper <= self.lower:
            raise ValueError("Upper bound must be strictly greater than lower bound")
        return self

    @property
    def is_unbounded(self) -> bool:
        return self.upper is None

    def contains(self, age: int) -> bool:
        if age < self.lower:
            return False
        return self.upper is None or age < self.upper

    @property
    def label(self) -> str:
        """Canonical label, e.g. '[0,40)' or '[60,+)'."""
        upper = "+" if self.upper is None else str(self.upper)
        return f"[{self.lower},{upper})"

    @classmethod
    def from_label(cls, text: str) -> "AgeInterval":
        """
        Parse a canonical label back into bounds.
        Raises ValueError when the text is not of the '[lo,hi)' form.
        """
        match = _LABEL_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Malformed interval label: {text!r}")
        lower, upper = match.groups()
        return cls(lower=int(lower), upper=None if upper == "+" else int(upper))

    def __str__(self) -> str:
        return self.label
