"""
Synthetic population generator for the Vaccination Allocator.
STRATEGY: seeded pseudo-random records, so a given seed always yields the same people.
"""

import logging
import random
from typing import Any, Dict, List, Optional

from models import Person

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "Mario", "Giulia", "Luca", "Francesca", "Marco", "Chiara", "Andrea",
    "Sara", "Giuseppe", "Elena", "Paolo", "Anna", "Stefano", "Laura",
]
LAST_NAMES = [
    "Rossi", "Russo", "Ferrari", "Esposito", "Bianchi", "Romano", "Colombo",
    "Ricci", "Marino", "Greco", "Bruno", "Gallo", "Conti", "De Luca",
]


class PopulationGenerator:
    def __init__(self, seed: int = 42, max_age: int = 95):
        self.rng = random.Random(seed)
        self.max_age = max_age

    def _raw_person(self, index: int, current_year: int) -> Dict[str, Any]:
        first = self.rng.choice(FIRST_NAMES)
        last = self.rng.choice(LAST_NAMES)
        age = self.rng.randint(0, self.max_age)
        return {
            # Index suffix keeps ids unique across the batch
            "ssn": f"{last[:3].upper()}{first[:3].upper()}{index:06d}",
            "first_name": first,
            "last_name": last,
            "birth_year": current_year - age,
        }

    def generate_people(self, count: int, current_year: int) -> List[Person]:
        """
        Build 'count' validated Person models with ages spread over 0..max_age.
        """
        people = [Person(**self._raw_person(i, current_year)) for i in range(count)]
        logger.info(f"Generated {len(people)} synthetic people (seed-based)")
        return people

    def generate_csv(self, count: int, current_year: int, header: Optional[str] = "SSN,LAST,FIRST,YEAR") -> List[str]:
        """Same population rendered as CSV lines, ready for the PeopleLoader."""
        lines = [header] if header else []
        for p in self.generate_people(count, current_year):
            lines.append(f"{p.ssn},{p.last_name},{p.first_name},{p.birth_year}")
        return lines
