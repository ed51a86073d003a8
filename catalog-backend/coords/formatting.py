from __future__ import annotations

import math
from typing import Dict, Tuple

from coords.model import Coordinates

SEXAGESIMAL = "sexagesimal"
DECIMAL = "decimal"

# "dms" is accepted as a shorthand for sexagesimal
NOTATION_ALIASES: Dict[str, str] = {
    SEXAGESIMAL: SEXAGESIMAL,
    "dms": SEXAGESIMAL,
    DECIMAL: DECIMAL,
}


def decimal_to_dms(value: float) -> Tuple[int, int, float]:
    """Split an absolute decimal-degree value into (degrees, minutes, seconds).

    Seconds are left unrounded; rendering rounds them to two decimals.
    """
    abs_value = abs(value)
    degrees = math.floor(abs_value)
    minutes_float = (abs_value - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = (minutes_float - minutes) * 60
    return int(degrees), int(minutes), seconds


def _dms_group(value: float) -> str:
    d, m, s = decimal_to_dms(value)
    return f"{d}°{m}'{s:.2f}\""


def to_dms(coords: Coordinates) -> str:
    lat_h = "N" if coords.latitude >= 0 else "S"
    lon_h = "E" if coords.longitude >= 0 else "W"
    return f"{_dms_group(coords.latitude)}{lat_h} {_dms_group(coords.longitude)}{lon_h}"


def to_decimal(coords: Coordinates) -> str:
    return f"{coords.latitude:.6f}, {coords.longitude:.6f}"


def normalize_notation(notation: str) -> str:
    key = (notation or "").strip().lower()
    if key not in NOTATION_ALIASES:
        raise ValueError(f"unknown notation: {notation!r}")
    return NOTATION_ALIASES[key]


def format_coordinates(coords: Coordinates, notation: str = SEXAGESIMAL) -> str:
    """Render coordinates as DMS (default) or six-place decimal text.

    DMS output looks like ``4°39'1.34"N 101°5'6.43"E``; decimal output like
    ``3.157800, 101.711700``. Raises ValueError for an unknown notation name.
    """
    if normalize_notation(notation) == SEXAGESIMAL:
        return to_dms(coords)
    return to_decimal(coords)


__all__ = [
    "SEXAGESIMAL",
    "DECIMAL",
    "NOTATION_ALIASES",
    "decimal_to_dms",
    "to_dms",
    "to_decimal",
    "normalize_notation",
    "format_coordinates",
]
