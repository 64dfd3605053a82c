"""
CSV People Loader.

Reads people records in the form:

    SSN,LAST,FIRST,YEAR
    RSSMRA50A01H501U,Rossi,Mario,1950

Malformed or duplicate lines are skipped and reported to an optional listener
receiving (line_number, raw_line). Line numbers start at 1 with the header.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from .campaign import VaccinationCampaign
from .errors import InvalidHeaderError

logger = logging.getLogger(__name__)

HEADER = ("SSN", "LAST", "FIRST", "YEAR")

LoadListener = Callable[[int, str], None]


class PeopleLoader:
    """Registers every valid CSV line through the campaign's add_person."""

    def __init__(self, campaign: VaccinationCampaign, on_error: Optional[LoadListener] = None):
        self.campaign = campaign
        self.on_error = on_error

    def _report(self, line_number: int, raw: str, reason: str) -> None:
        logger.warning(f"Line {line_number} skipped ({reason}): {raw!r}")
        if self.on_error:
            self.on_error(line_number, raw)

    def load(self, lines: Iterable[str]) -> int:
        """
        Load people from an iterable of text lines (an open file works).
        Returns the number of people actually added.
        Raises InvalidHeaderError when the header is wrong.
        """
        added = 0
        for line_number, raw in enumerate(lines, start=1):
            raw = raw.rstrip("\r\n")
            fields = raw.split(",")

            if line_number == 1:
                if len(fields) != len(HEADER) and self.on_error:
                    self._report(line_number, raw, "wrong header size")
                    continue
                if tuple(f.strip() for f in fields) != HEADER:
                    raise InvalidHeaderError(f"Expected header {','.join(HEADER)}, got {raw!r}")
                continue

            if len(fields) != len(HEADER):
                self._report(line_number, raw, "wrong number of fields")
                continue

            ssn, last, first, year = (f.strip() for f in fields)
            if not ssn:
                self._report(line_number, raw, "missing ssn")
                continue
            try:
                birth_year = int(year)
            except ValueError:
                self._report(line_number, raw, "invalid birth year")
                continue

            if self.campaign.add_person(first, last, ssn, birth_year):
                added += 1
            else:
                self._report(line_number, raw, "duplicate ssn")

        logger.info(f"Loaded {added} people")
        return added

    def load_path(self, path: Path) -> int:
        with Path(path).open("r", encoding="utf-8") as f:
            return self.load(f)
