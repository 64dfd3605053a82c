"""
Registries for people and hubs.

The registries are the sole owners of Person and Hub records.
Other components mutate allocation state only through the methods exposed here.
"""

import logging
from typing import Dict, Iterator, List, Optional

from pydantic import ValidationError

from models import Person, Hub
from .errors import (
    DuplicateIdentityError,
    UnknownHubError,
    UnknownPersonError,
    StaffingNotConfiguredError,
    InvalidRecordError,
)

logger = logging.getLogger(__name__)


class PersonRegistry:
    """
    Stores people by ssn, in registration order.
    """

    def __init__(self):
        self._people: Dict[str, Person] = {}

    def add_person(self, first_name: str, last_name: str, ssn: str, birth_year: int) -> bool:
        """
        Register a person. Returns False (and changes nothing) on a duplicate ssn.
        Raises InvalidRecordError when the record does not validate.
        """
        if ssn in self:
            logger.debug(f"Duplicate ssn {ssn} rejected")
            return False

        try:
            person = Person(
                ssn=ssn,
                first_name=first_name,
                last_name=last_name,
                birth_year=birth_year
            )
        except ValidationError as exc:
            raise InvalidRecordError(f"Invalid person record for ssn {ssn!r}: {exc}") from exc

        self._people[ssn] = person
        return True

    def get_person(self, ssn: str) -> Optional[Person]:
        return self._people.get(ssn)

    def get_age(self, ssn: str, current_year: int) -> Optional[int]:
        person = self._people.get(ssn)
        if person is None:
            return None
        return person.age(current_year)

    def count(self) -> int:
        return len(self._people)

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people.values())

    def __contains__(self, ssn: str) -> bool:
        return ssn in self._people

    # --- Allocation State ---

    def mark_allocated(self, ssn: str) -> None:
        person = self._people.get(ssn)
        if person is None:
            raise UnknownPersonError(f"Person {ssn} is not registered")
        person.allocated = True

    def reset_allocations(self) -> None:
        for person in self._people.values():
            person.allocated = False

    def allocated_count(self) -> int:
        return sum(1 for p in self._people.values() if p.allocated)


class HubRegistry:
    """
    Stores hubs by name, in definition order.
    """

    def __init__(self):
        self._hubs: Dict[str, Hub] = {}

    def define_hub(self, name: str) -> Hub:
        if name in self._hubs:
            raise DuplicateIdentityError(f"Hub {name} is already defined")
        try:
            hub = Hub(name=name)
        except ValidationError as exc:
            raise InvalidRecordError(f"Invalid hub name {name!r}: {exc}") from exc
        self._hubs[name] = hub
        return hub

    def get_hub(self, name: str) -> Hub:
        hub = self._hubs.get(name)
        if hub is None:
            raise UnknownHubError(f"Hub {name} is not defined")
        return hub

    def set_staff(self, name: str, doctors: int, nurses: int, other: int) -> None:
        self.get_hub(name).set_staff(doctors, nurses, other)

    def estimate_hourly_capacity(self, name: str) -> int:
        """
        Hourly vaccinations: min(10*doctors, 12*nurses, 20*other).
        Raises UnknownHubError or StaffingNotConfiguredError.
        """
        hub = self.get_hub(name)
        if not hub.staff_configured:
            raise StaffingNotConfiguredError(f"Hub {name} has no staff configured")
        return hub.hourly_capacity()

    def hub_names(self) -> List[str]:
        return list(self._hubs)

    def __iter__(self) -> Iterator[Hub]:
        return iter(self._hubs.values())

    def __len__(self) -> int:
        return len(self._hubs)

    def clear_allocations(self) -> None:
        for hub in self._hubs.values():
            hub.clear_allocations()
