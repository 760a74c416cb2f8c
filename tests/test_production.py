from datetime import datetime

import pytest

from floodconsequences.crops.production import (
    build_production_function,
    cumulate_monthly_costs,
    is_leap_year,
)
from floodconsequences.crops.schedule import CropSchedule
from floodconsequences.events import ArrivalandDurationEvent

ONES = [1.0] * 12


def _build(start, last, days):
    schedule = CropSchedule(start, last, days)
    return build_production_function(ONES, ONES, ONES, schedule, 1.0, 0.1)


def test_create_production_function():
    pf = _build(datetime(1984, 1, 22), datetime(1984, 1, 28), 330)
    expected = [2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0, 18.0, 20.0, 22.0, 24.0]
    assert pf.cumulative_monthly_production_costs_early == expected


def test_create_production_function_wrap_year():
    pf = _build(datetime(1984, 2, 22), datetime(1984, 2, 28), 330)
    expected = [24.0, 2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0, 18.0, 20.0, 22.0]
    assert pf.cumulative_monthly_production_costs_early == expected


def test_create_production_function_shorter_schedule():
    pf = _build(datetime(1984, 2, 22), datetime(1984, 2, 28), 299)
    expected = [0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0, 18.0, 20.0, 22.0]
    assert pf.cumulative_monthly_production_costs_early == expected


def test_total_and_fixed_costs_follow_early_curve():
    pf = _build(datetime(1984, 1, 22), datetime(1984, 1, 28), 330)
    assert pf.production_cost_less_harvest == pf.cumulative_monthly_production_costs_early[-1]
    assert pf.cumulative_monthly_fixed_costs_only == [
        value / 2 for value in pf.cumulative_monthly_production_costs_early
    ]
    assert pf.harvest_cost == 1.0
    assert pf.loss_from_late_planting == 0.1


def test_exposed_value_uses_arrival_month():
    pf = _build(datetime(1984, 1, 22), datetime(1984, 1, 28), 330)
    event = ArrivalandDurationEvent(arrival_time=datetime(1984, 3, 5), duration=2.0)
    assert pf.exposed_value(event) == pf.cumulative_monthly_production_costs_early[2]


def test_cumulate_returns_monotonic_curve():
    costs, total, fixed = cumulate_monthly_costs(ONES, ONES, datetime(1984, 1, 22), 330)
    assert costs == sorted(costs)
    assert total == max(costs)
    assert fixed == sorted(fixed)


def test_maturity_longer_than_year_is_rejected():
    with pytest.raises(ValueError):
        cumulate_monthly_costs(ONES, ONES, datetime(1983, 1, 22), 366)


@pytest.mark.parametrize(
    "year, leap",
    [(1984, True), (1983, False), (1900, False), (2000, True)],
)
def test_is_leap_year(year, leap):
    assert is_leap_year(year) is leap