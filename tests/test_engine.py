from __future__ import annotations

import logging
from collections import Counter

import pytest

from conftest import YEAR, add_people
from scheduler import VaccinationCampaign
from scheduler.errors import StaffingNotConfiguredError, UnknownHubError


def test_scenario_allocates_everyone(scenario: VaccinationCampaign) -> None:
    result = scenario.allocate("H", 0)
    assert set(result) == {"P70", "P65", "P50", "P30", "P10"}
    assert scenario.prop_allocated() == 1.0
    assert set(scenario.hubs.get_hub("H").allocations[0]) == set(result)


def test_quota_pass_caps_oldest_interval(campaign: VaccinationCampaign) -> None:
    campaign.set_age_intervals(60)
    old = set(add_people(campaign, "OLD", 80, 50))
    young = set(add_people(campaign, "YNG", 10, 50))
    campaign.define_hub("H")
    campaign.set_staff("H", 1, 1, 1)
    campaign.set_hours(1, 0, 0, 0, 0, 0, 0)

    result = campaign.allocate("H", 0)

    # 10 slots: [60,+) takes floor(4.0)=4, [0,60) takes floor(0.4*6)=2, overflow 4 more oldest
    assert len(result) == 10
    assert set(result[:4]) <= old
    assert set(result[4:6]) <= young
    assert set(result[6:]) <= old
    assert len(set(result) & young) == 2


def test_quota_recomputed_on_remaining_slots(campaign: VaccinationCampaign) -> None:
    campaign.set_age_intervals(40, 60)
    add_people(campaign, "A", 70, 100)
    add_people(campaign, "B", 50, 100)
    add_people(campaign, "C", 20, 100)
    campaign.define_hub("H")
    campaign.set_staff("H", 10, 10, 10)
    campaign.set_hours(1, 0, 0, 0, 0, 0, 0)

    result = campaign.allocate("H", 0)

    # 100 slots: 40 oldest, floor(0.4*60)=24, floor(0.4*36)=14, overflow 22 to oldest
    counts = Counter(ssn[0] for ssn in result)
    assert counts == {"A": 62, "B": 24, "C": 14}


def test_overflow_fills_from_oldest_available(campaign: VaccinationCampaign) -> None:
    campaign.set_age_intervals(60)
    add_people(campaign, "YNG", 20, 30)
    campaign.define_hub("H")
    campaign.set_staff("H", 1, 1, 1)
    campaign.set_hours(2, 0, 0, 0, 0, 0, 0)

    result = campaign.allocate("H", 0)
    assert len(result) == 20
    assert len(set(result)) == 20


def test_allocation_stops_when_people_run_out(campaign: VaccinationCampaign) -> None:
    campaign.set_age_intervals(50)
    add_people(campaign, "P", 30, 3)
    campaign.define_hub("H")
    campaign.set_staff("H", 5, 5, 5)
    campaign.set_hours(12, 12, 0, 0, 0, 0, 0)

    assert len(campaign.allocate("H", 0)) == 3
    assert campaign.allocate("H", 1) == []


def test_allocate_overwrites_previous_list(scenario: VaccinationCampaign) -> None:
    scenario.allocate("H", 0)
    assert scenario.allocate("H", 0) == []
    assert scenario.hubs.get_hub("H").allocations[0] == []


def test_allocate_errors(campaign: VaccinationCampaign) -> None:
    with pytest.raises(UnknownHubError):
        campaign.allocate("missing", 0)
    campaign.define_hub("H")
    with pytest.raises(StaffingNotConfiguredError):
        campaign.allocate("H", 0)


def _busy_campaign() -> VaccinationCampaign:
    campaign = VaccinationCampaign(current_year=YEAR)
    campaign.set_age_intervals(30, 50, 70)
    for age in (85, 72, 64, 55, 41, 33, 25, 12):
        add_people(campaign, f"A{age}-", age, 40)
    campaign.define_hub("North")
    campaign.set_staff("North", 1, 1, 1)
    campaign.define_hub("South")
    campaign.set_staff("South", 2, 1, 3)
    campaign.set_hours(2, 3, 1, 0, 4, 2, 1)
    return campaign


def test_week_allocate_is_globally_exclusive() -> None:
    campaign = _busy_campaign()
    week = campaign.week_allocate()

    assert len(week) == 7
    all_ids = [ssn for day in week for ids in day.values() for ssn in ids]
    assert len(all_ids) == len(set(all_ids))
    assert len(all_ids) == campaign.people.allocated_count()
    # Thursday has no hours, so no hub shows up
    assert week[3] == {}


def test_week_allocate_is_reproducible_after_reset() -> None:
    campaign = _busy_campaign()
    first = [{h: set(ids) for h, ids in day.items()} for day in campaign.week_allocate()]

    campaign.clear_allocation()
    assert campaign.prop_allocated() == 0.0
    assert all(not hub.has_allocations for hub in campaign.hubs)

    second = [{h: set(ids) for h, ids in day.items()} for day in campaign.week_allocate()]
    assert first == second


def test_week_allocate_without_reset_sees_smaller_pool() -> None:
    campaign = _busy_campaign()
    first = campaign.week_allocate()
    second = campaign.week_allocate()
    first_ids = {ssn for day in first for ids in day.values() for ssn in ids}
    second_ids = {ssn for day in second for ids in day.values() for ssn in ids}
    assert not first_ids & second_ids


def test_week_allocate_skips_unstaffed_hub(campaign: VaccinationCampaign, caplog) -> None:
    add_people(campaign, "P", 40, 5)
    campaign.define_hub("Empty")
    campaign.define_hub("Ready")
    campaign.set_staff("Ready", 1, 1, 1)
    campaign.set_hours(1, 0, 0, 0, 0, 0, 0)

    with caplog.at_level(logging.WARNING):
        week = campaign.week_allocate()

    assert set(week[0]) == {"Ready"}
    assert len(week[0]["Ready"]) == 5
    assert "Empty" in caplog.text
