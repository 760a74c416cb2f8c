"""Interfaces for things that suffer consequences, their sources and sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from floodconsequences.events import HazardEvent
from floodconsequences.geography import BBox, Location
from floodconsequences.results import Result


class Receptor(ABC):
    """Anything that can have consequences from a hazard event."""

    @abstractmethod
    def compute(self, event: HazardEvent) -> Result:
        """Return the consequences of the event for this receptor."""

    @abstractmethod
    def location(self) -> Location:
        """Return where the receptor is."""


StreamProcessor = Callable[[Receptor], None]


class StreamProvider(ABC):
    """A source that hands receptors one by one to a processor."""

    @abstractmethod
    def by_fips(self, fips_code: str, processor: StreamProcessor) -> None:
        """Stream the receptors within a FIPS code."""

    @abstractmethod
    def by_bbox(self, bbox: BBox, processor: StreamProcessor) -> None:
        """Stream the receptors within a bounding box."""


class ResultsWriter(ABC):
    """A sink for results; closes when used as a context manager."""

    @abstractmethod
    def write(self, result: Result) -> None:
        """Record one result."""

    @abstractmethod
    def close(self) -> None:
        """Finish writing."""

    def __enter__(self) -> ResultsWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ContinuousDistribution(ABC):
    """A continuous probability distribution."""

    @abstractmethod
    def central_tendency(self) -> float:
        """Return the distribution's central value."""

    @abstractmethod
    def inv_cdf(self, probability: float) -> float:
        """Return the value at the given non-exceedance probability."""


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ParameterValue:
    """A parameter that is either a scalar or a distribution."""

    value: Any = None

    def central_tendency(self) -> float:
        """Return the scalar, the distribution's central value, or 0."""
        if _is_scalar(self.value):
            return float(self.value)
        if isinstance(self.value, ContinuousDistribution):
            return self.value.central_tendency()
        return 0.0

    def sample_value(self, value: Any) -> float:
        """Return the scalar, or sample the distribution at a probability, or 0."""
        if _is_scalar(self.value):
            return float(self.value)
        if isinstance(self.value, ContinuousDistribution) and isinstance(value, float):
            return self.value.inv_cdf(value)
        return 0.0