"""Locations, bounding boxes and GeoJSON point geometry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Location:
    """A point with an optional spatial reference identifier."""

    x: float
    y: float
    srid: str = ""


@dataclass
class BBox:
    """A bounding box stored as ``[minx, miny, maxx, maxy]``."""

    bbox: list[float] = field(default_factory=list)

    def to_string(self) -> str:
        """Return the closed ring of the box corners as comma separated values."""
        x0, y0, x1, y1 = self.bbox[0], self.bbox[1], self.bbox[2], self.bbox[3]
        ring = (x0, y0, x1, y0, x1, y1, x0, y1, x0, y0)
        return ",".join(f"{value:f}" for value in ring)

    def contains(self, location: Location) -> bool:
        """Return True when the location lies inside the box or on its edge."""
        return (
            self.bbox[0] <= location.x <= self.bbox[2]
            and self.bbox[1] <= location.y <= self.bbox[3]
        )


@dataclass
class GeoJsonGeometry:
    """A GeoJSON point geometry."""

    type: str = "Point"
    coordinates: list[float] = field(default_factory=list)

    def to_location(self) -> Location:
        """Return the point's coordinates as a location with no SRID."""
        return Location(x=self.coordinates[0], y=self.coordinates[1], srid="")