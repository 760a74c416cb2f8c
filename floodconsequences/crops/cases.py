"""Outcomes of evaluating a hazard against a crop's season."""

from __future__ import annotations

import enum


class CropDamageCase(enum.IntEnum):
    """The possible outcomes of a hazard for a crop season."""

    UNASSIGNED = 0
    IMPACTED = 1
    NOT_IMPACTED_DURING_SEASON = 2
    PLANTING_DELAYED = 4
    NOT_PLANTED = 8
    SUBSTITUTE_CROP = 16

    @property
    def label(self) -> str:
        """Return the human readable name of the outcome."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        return format(self.label, format_spec)


_LABELS: dict[CropDamageCase, str] = {
    CropDamageCase.UNASSIGNED: "Unassigned",
    CropDamageCase.IMPACTED: "Impacted",
    CropDamageCase.NOT_IMPACTED_DURING_SEASON: "Not Impacted During Season",
    CropDamageCase.PLANTING_DELAYED: "Planting Delayed",
    CropDamageCase.NOT_PLANTED: "Not Planted",
    CropDamageCase.SUBSTITUTE_CROP: "Substitute Crop",
}