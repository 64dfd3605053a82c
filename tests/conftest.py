from __future__ import annotations

import pytest

from scheduler import VaccinationCampaign

YEAR = 2025


@pytest.fixture
def campaign() -> VaccinationCampaign:
    return VaccinationCampaign(current_year=YEAR)


@pytest.fixture
def scenario(campaign: VaccinationCampaign) -> VaccinationCampaign:
    """Breaks 40/60, five people aged 70, 65, 50, 30, 10, hub H at 10/hour, 8h on Monday."""
    campaign.set_age_intervals(40, 60)
    for ssn, age in [("P70", 70), ("P65", 65), ("P50", 50), ("P30", 30), ("P10", 10)]:
        campaign.add_person("First", "Last", ssn, YEAR - age)
    campaign.define_hub("H")
    campaign.set_staff("H", 1, 1, 1)
    campaign.set_hours(8, 0, 0, 0, 0, 0, 0)
    return campaign


def add_people(campaign: VaccinationCampaign, prefix: str, age: int, count: int) -> list[str]:
    ids = [f"{prefix}{i:04d}" for i in range(count)]
    for ssn in ids:
        campaign.add_person("First", "Last", ssn, YEAR - age)
    return ids
