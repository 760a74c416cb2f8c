"""Duration and season based crop damage curves."""

from __future__ import annotations

from dataclasses import dataclass, field

from floodconsequences.events import HazardEvent


@dataclass
class DamageFunction:
    """Damage percentages by month for each flood duration in days."""

    duration_damage_curves: dict[float, list[float]] = field(default_factory=dict)

    def compute_damage_percent(self, event: HazardEvent) -> float:
        """Return the damage percent for the event's duration and arrival month."""
        month_index = event.arrival_time.month - 1
        duration = event.duration
        previous_key = 0.0
        previous_value = [0.0] * 12
        first = True
        for key in sorted(self.duration_damage_curves):
            value = self.duration_damage_curves[key]
            if key > duration:
                if first:
                    factor = duration / key
                    return value[month_index] * factor
                factor = (key - duration) / (key - previous_key)
                return previous_value[month_index] + factor * (
                    value[month_index] - previous_value[month_index]
                )
            previous_key = key
            previous_value = value
            first = False
        return previous_value[month_index]