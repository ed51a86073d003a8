from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Protocol

LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0


@dataclass(frozen=True)
class Coordinates:
    """Signed decimal-degree latitude/longitude pair.

    Construction fails with ValueError when either axis is outside its range
    or not a finite number; values are never clamped.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        lat = float(self.latitude)
        lon = float(self.longitude)
        if not math.isfinite(lat) or not (LAT_MIN <= lat <= LAT_MAX):
            raise ValueError(f"latitude out of range: {self.latitude!r}")
        if not math.isfinite(lon) or not (LON_MIN <= lon <= LON_MAX):
            raise ValueError(f"longitude out of range: {self.longitude!r}")
        # normalize ints to floats on the frozen instance
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)


class CatalogPoint(Protocol):
    id: Any
    name: str
    latitude: float
    longitude: float


__all__ = ["Coordinates", "CatalogPoint", "LAT_MIN", "LAT_MAX", "LON_MIN", "LON_MAX"]
