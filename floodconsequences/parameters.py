"""Hazard parameter flags and raw hazard data."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from datetime import datetime

ZERO_TIME = datetime.min


class Parameter(enum.IntFlag):
    """Bit flags naming the parameters a hazard event carries."""

    DEFAULT = 0
    DEPTH = 1
    VELOCITY = 2
    ARRIVAL_TIME = 4
    ARRIVAL_TIME_2FT = 8
    EROSION = 16
    DURATION = 32
    WAVE_HEIGHT = 64
    MEDIUM_WAVE_HEIGHT = 128
    HIGH_WAVE_HEIGHT = 256
    SALINITY = 512
    QUALITATIVE = 1024
    DV = 2048

    def __str__(self) -> str:
        return parameter_to_string(self)


_NAMES: dict[Parameter, str] = {
    Parameter.DEPTH: "depth",
    Parameter.VELOCITY: "velocity",
    Parameter.ARRIVAL_TIME: "arrivaltime",
    Parameter.EROSION: "erosion",
    Parameter.DURATION: "duration",
    Parameter.WAVE_HEIGHT: "waveheight",
    Parameter.MEDIUM_WAVE_HEIGHT: "mediumwaveheight",
    Parameter.HIGH_WAVE_HEIGHT: "highwaveheight",
    Parameter.SALINITY: "salinity",
    Parameter.QUALITATIVE: "qualitative",
    Parameter.DV: "depthtimesvelocity",
}

_BY_NAME: dict[str, Parameter] = {name: flag for flag, name in _NAMES.items()}
_BY_NAME["default"] = Parameter.DEFAULT


@dataclass
class HazardData:
    """Raw values read for a location before they become a hazard event."""

    depth: float = 0.0
    velocity: float = 0.0
    arrival_time: datetime = ZERO_TIME
    erosion: float = 0.0
    duration: float = 0.0
    wave_height: float = 0.0
    salinity: bool = False
    qualitative: str = ""
    dv: float = 0.0


def parameter_to_string(parameter: Parameter) -> str:
    """Return the comma separated names of the flags that are set."""
    if parameter < 1:
        return "default"
    return ", ".join(name for flag, name in _NAMES.items() if parameter & flag)


def parameter_from_string(text: str) -> Parameter:
    """Combine the flags named in a comma separated string; unknown names are ignored."""
    result = Parameter.DEFAULT
    for part in text.split(", "):
        result |= _BY_NAME.get(part, Parameter.DEFAULT)
    return Parameter(result)


def parameter_to_json(parameter: Parameter) -> str:
    """Encode the parameter as a quoted JSON string."""
    return '"' + parameter_to_string(parameter) + '"'


def parameter_from_json(data: str | bytes) -> Parameter:
    """Decode a quoted, comma separated JSON string into a parameter."""
    value = json.loads(data)
    if not isinstance(value, str):
        raise ValueError(f"expected a JSON string for a parameter, got {value!r}")
    return parameter_from_string(value)