from __future__ import annotations

from typing import Iterable, List, TypeVar

from coords.model import CatalogPoint, Coordinates

# Roughly 1 km at the equator. Applied identically to both axes: the box is
# not corrected for longitude compression at higher latitudes.
PROXIMITY_DEGREES = 0.01

P = TypeVar("P", bound=CatalogPoint)


def is_near(point: CatalogPoint, query: Coordinates) -> bool:
    """Per-axis box test; not a radius."""
    lat_diff = abs(point.latitude - query.latitude)
    lon_diff = abs(point.longitude - query.longitude)
    return lat_diff < PROXIMITY_DEGREES and lon_diff < PROXIMITY_DEGREES


def filter_by_proximity(query: Coordinates, points: Iterable[P]) -> List[P]:
    """Return the points inside the query's box, in their original order."""
    return [p for p in points if is_near(p, query)]


__all__ = ["PROXIMITY_DEGREES", "is_near", "filter_by_proximity"]
