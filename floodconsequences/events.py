"""Hazard events: the values a hazard presents at one location."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from floodconsequences.parameters import ZERO_TIME, Parameter

NO_DATA = -901.0

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _format_arrival(moment: datetime) -> str:
    return f"{_MONTHS[moment.month - 1]} {moment.day:>2} {moment.hour:02d}:{moment.minute:02d}"


class HazardEvent(ABC):
    """Base for hazard events; values an event lacks report the no-data defaults."""

    depth = NO_DATA
    velocity = NO_DATA
    arrival_time = ZERO_TIME
    erosion = NO_DATA
    duration = NO_DATA
    wave_height = NO_DATA
    salinity = False
    qualitative = ""
    dv = NO_DATA

    @abstractmethod
    def parameters(self) -> Parameter:
        """Return the flags of the parameters this event carries."""

    def has(self, parameter: Parameter) -> bool:
        """Return True when any of the given flags is carried by this event."""
        return bool(self.parameters() & parameter)

    @abstractmethod
    def to_json(self) -> str:
        """Return the event's JSON text."""


@dataclass
class DepthEvent(HazardEvent):
    """A hazard with depth only."""

    depth: float = 0.0

    def parameters(self) -> Parameter:
        return Parameter.DEPTH

    def to_json(self) -> str:
        return f'{{"depthevent":{{"depth":{self.depth:f}}}}}'


@dataclass
class ArrivalandDurationEvent(HazardEvent):
    """A hazard with an arrival time and a duration in days."""

    arrival_time: datetime = ZERO_TIME
    duration: float = 0.0

    def parameters(self) -> Parameter:
        return Parameter.DURATION | Parameter.ARRIVAL_TIME

    def to_json(self) -> str:
        return (
            '{"arrivalanddurationevent":{"arrivaltime":'
            f'{_format_arrival(self.arrival_time)},"duration":{self.duration:f}}}}}'
        )


@dataclass
class ArrivalDepthandDurationEvent(HazardEvent):
    """A hazard with an arrival time, a depth and a duration in days."""

    arrival_time: datetime = ZERO_TIME
    depth: float = 0.0
    duration: float = 0.0

    def parameters(self) -> Parameter:
        return Parameter.DURATION | Parameter.DEPTH | Parameter.ARRIVAL_TIME

    def to_json(self) -> str:
        return (
            '{"arrivaldepthanddurationevent":{"arrivaltime":'
            f'{_format_arrival(self.arrival_time)},"depth":{self.depth:f},'
            f'"duration":{self.duration:f}}}}}'
        )


@dataclass
class QualitativeEvent(HazardEvent):
    """A hazard described only by a qualitative message."""

    qualitative: str = ""

    def parameters(self) -> Parameter:
        return Parameter.QUALITATIVE

    def to_json(self) -> str:
        return f'{{"qualitativeevent":{{"qualitative":{self.qualitative}}}}}'


@dataclass
class DepthandDVEvent(HazardEvent):
    """A hazard with a depth and a depth-times-velocity value."""

    depth: float = 0.0
    dv: float = 0.0

    def parameters(self) -> Parameter:
        return Parameter.DEPTH | Parameter.DV

    def to_json(self) -> str:
        return f'{{"depthanddvevent":{{"depth":{self.depth:f},"dv":{self.dv:f}}}}}'


@dataclass
class CoastalEvent(HazardEvent):
    """A coastal hazard with still depth, wave height, salinity and percent eroded."""

    depth: float = 0.0
    wave_height: float = 0.0
    salinity: bool = False
    erosion: float = 0.0

    def parameters(self) -> Parameter:
        flags = Parameter.DEFAULT
        if self.depth > NO_DATA:
            flags |= Parameter.DEPTH
        if self.wave_height > 0.0:
            flags |= Parameter.WAVE_HEIGHT
            if self.wave_height < 3.0:
                flags |= Parameter.MEDIUM_WAVE_HEIGHT
            else:
                flags |= Parameter.HIGH_WAVE_HEIGHT
        if self.salinity:
            flags |= Parameter.SALINITY
        if self.erosion > 0.0:
            flags |= Parameter.EROSION
        return Parameter(flags)

    def to_json(self) -> str:
        salinity = "true" if self.salinity else "false"
        return (
            f'{{"coastalevent":{{"depth":{self.depth:f}, '
            f'"waveheight":{self.wave_height:f},"salinity":{salinity}}}}}'
        )


def new_coastal_event(event: CoastalEvent) -> CoastalEvent:
    """Return a copy of the event with unset depth and wave height marked as no data."""
    depth = NO_DATA if event.depth == 0.0 else event.depth
    wave_height = NO_DATA if event.wave_height == 0.0 else event.wave_height
    return dataclasses.replace(event, depth=depth, wave_height=wave_height)