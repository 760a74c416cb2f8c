"""Crop planting schedules and their response to hazard timing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from floodconsequences.crops.cases import CropDamageCase
from floodconsequences.events import HazardEvent


def _day_of_year(moment: datetime) -> int:
    return moment.timetuple().tm_yday


@dataclass
class CropSchedule:
    """The start and end of the planting season and the days to maturity."""

    start_planting_date: datetime
    last_planting_date: datetime
    days_to_maturity: int

    def compute_crop_damage_case(self, event: HazardEvent) -> CropDamageCase:
        """Classify how a hazard's arrival and duration affect the crop season."""
        hazard_start = _day_of_year(event.arrival_time)
        hazard_days = int(event.duration)
        start_doy = _day_of_year(self.start_planting_date)
        last_doy = _day_of_year(self.last_planting_date)

        if hazard_start <= start_doy:
            if hazard_start + hazard_days < start_doy:
                if start_doy + self.days_to_maturity > 365:
                    harvest_doy = start_doy + self.days_to_maturity - 365
                    if harvest_doy > hazard_start:
                        return CropDamageCase.IMPACTED
                return CropDamageCase.NOT_IMPACTED_DURING_SEASON
            if hazard_start + hazard_days < last_doy:
                return CropDamageCase.PLANTING_DELAYED
            return CropDamageCase.NOT_PLANTED

        if start_doy + self.days_to_maturity < hazard_start:
            return CropDamageCase.NOT_IMPACTED_DURING_SEASON
        return CropDamageCase.IMPACTED