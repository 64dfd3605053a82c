from __future__ import annotations

import pytest

from conftest import add_people
from scheduler import VaccinationCampaign


def test_empty_campaign_reports_zero(campaign: VaccinationCampaign) -> None:
    campaign.set_age_intervals(50)
    assert campaign.prop_allocated() == 0.0
    assert campaign.prop_allocated_age() == {"[0,50)": 0.0, "[50,+)": 0.0}
    assert campaign.distribution_allocated() == {"[0,50)": 0.0, "[50,+)": 0.0}


def test_proportions_use_global_denominator(campaign: VaccinationCampaign) -> None:
    campaign.set_age_intervals(60)
    add_people(campaign, "OLD", 70, 6)
    add_people(campaign, "YNG", 20, 14)
    campaign.define_hub("H")
    campaign.set_staff("H", 1, 1, 1)
    campaign.set_hours(1, 0, 0, 0, 0, 0, 0)

    campaign.allocate("H", 0)

    # 10 slots: 4 old in quota, floor(0.4*6)=2 young, overflow 2 old then 2 young
    assert campaign.prop_allocated() == pytest.approx(10 / 20)
    assert campaign.prop_allocated_age() == pytest.approx({"[0,60)": 4 / 20, "[60,+)": 6 / 20})
    assert campaign.distribution_allocated() == pytest.approx({"[0,60)": 0.4, "[60,+)": 0.6})


def test_distribution_sums_to_one(scenario: VaccinationCampaign) -> None:
    scenario.allocate("H", 0)
    assert sum(scenario.distribution_allocated().values()) == pytest.approx(1.0)
    assert scenario.distribution_allocated() == pytest.approx(
        {"[0,40)": 0.4, "[40,60)": 0.2, "[60,+)": 0.4}
    )


def test_summary_report(scenario: VaccinationCampaign) -> None:
    scenario.allocate("H", 0)
    summary = scenario.stats.summary()
    assert summary["total_people"] == 5
    assert summary["allocated_people"] == 5
    assert summary["proportion_allocated"] == 1.0
    assert summary["hub_daily_allocations"] == {"H": [5, 0, 0, 0, 0, 0, 0]}
