"""Crop production costs accumulated month by month over the growing season."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from floodconsequences.crops.schedule import CropSchedule
from floodconsequences.events import HazardEvent

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class _DateLike(Protocol):
    year: int
    month: int
    day: int


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_before_month(year: int, month: int) -> int:
    """Return the length of the month before ``month`` (1-based, may overflow)."""
    previous = month - 1
    year += (previous - 1) // 12
    previous = (previous - 1) % 12 + 1
    if previous == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[previous - 1]


def cumulate_monthly_costs(
    monthly_costs: Sequence[float],
    fixed_costs: Sequence[float],
    start: _DateLike,
    days_to_maturity: int,
) -> tuple[list[float], float, list[float]]:
    """Accumulate monthly and fixed costs from the start date until maturity.

    Returns the cumulative total costs by month, the grand total, and the
    cumulative fixed costs by month.
    """
    days_in_year = 366 if is_leap_year(start.year) else 365
    if days_to_maturity > days_in_year:
        raise ValueError(
            f"days to maturity {days_to_maturity} exceeds the {days_in_year} days in the year"
        )
    total_costs = 0.0
    total_fixed = 0.0
    cumulative = [0.0] * 12
    cumulative_fixed = [0.0] * 12
    start_index = start.month - 1
    counter = 0
    wrapped = False
    year = start.year
    remaining = days_to_maturity
    while True:
        days = _days_before_month(year, start_index + counter + 1)
        if counter == 0 and not wrapped:
            days -= start.day
        remaining -= days
        if start_index + counter > 11 and not wrapped:
            start_index = 0
            counter = 0
            year += 1
            wrapped = True
        month = start_index + counter
        if month > 11:
            raise ValueError("crop season runs past a full year")
        total_fixed += fixed_costs[month]
        cumulative_fixed[month] = total_fixed
        total_costs += monthly_costs[month] + fixed_costs[month]
        cumulative[month] = total_costs
        counter += 1
        if remaining <= 0:
            break
    return cumulative, total_costs, cumulative_fixed


@dataclass
class ProductionFunction:
    """The costs of producing a crop, cumulated by month."""

    harvest_cost: float = 0.0
    cumulative_monthly_production_costs_early: list[float] = field(default_factory=list)
    cumulative_monthly_production_costs_late: list[float] = field(default_factory=list)
    cumulative_monthly_fixed_costs_only: list[float] = field(default_factory=list)
    production_cost_less_harvest: float = 0.0
    loss_from_late_planting: float = 0.0

    def exposed_value(self, event: HazardEvent) -> float:
        """Return the costs sunk by the month of the hazard's arrival, planting early."""
        return self.cumulative_monthly_production_costs_early[event.arrival_time.month - 1]


def build_production_function(
    monthly_costs_first_plant: Sequence[float],
    monthly_costs_last_plant: Sequence[float],
    monthly_fixed_costs: Sequence[float],
    schedule: CropSchedule,
    harvest_cost: float,
    late_planting_loss: float,
) -> ProductionFunction:
    """Build a production function from monthly costs and a crop schedule."""
    early, total_early, fixed_early = cumulate_monthly_costs(
        monthly_costs_first_plant,
        monthly_fixed_costs,
        schedule.start_planting_date,
        schedule.days_to_maturity,
    )
    late, _, _ = cumulate_monthly_costs(
        monthly_costs_last_plant,
        monthly_fixed_costs,
        schedule.last_planting_date,
        schedule.days_to_maturity,
    )
    return ProductionFunction(
        harvest_cost=harvest_cost,
        cumulative_monthly_production_costs_early=early,
        cumulative_monthly_production_costs_late=late,
        cumulative_monthly_fixed_costs_only=fixed_early,
        production_cost_less_harvest=total_early,
        loss_from_late_planting=late_planting_loss,
    )