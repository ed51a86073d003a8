"""Coordinate interpretation engine.

Modules:
 - model: the validated Coordinates pair and the CatalogPoint protocol
 - notation: DMS/decimal parsing and the coordinate-likeness hint
 - formatting: DMS/decimal display rendering
"""

from coords.formatting import format_coordinates
from coords.model import CatalogPoint, Coordinates
from coords.notation import looks_like_coordinates, parse_coordinates

__all__ = [
    "Coordinates",
    "CatalogPoint",
    "parse_coordinates",
    "format_coordinates",
    "looks_like_coordinates",
]
