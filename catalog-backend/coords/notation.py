from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple

from coords.model import Coordinates

# 4°39'1.34"N 101°5'6.43"E  (minute/second marks optional, degree mark required)
# Field widths are bounded so runs of digits cannot be split ambiguously.
_DMS_GROUP = r"(?<!\d)(\d{1,3})°\s*(\d{1,2})'?\s*(\d{1,2}(?:\.\d*)?)\"?\s*"
_DMS_RE = re.compile(
    _DMS_GROUP + r"([NS])"
    r"\s+"
    + _DMS_GROUP + r"([EW])",
    re.IGNORECASE,
)

# 3.1578, 101.7117
_NUMBER = r"-?(?<!\d)\d+(?:\.\d*)?"
_DECIMAL_RE = re.compile(rf"({_NUMBER})\s*,\s*({_NUMBER})")
_DECIMAL_SHAPE_RE = re.compile(rf"{_NUMBER}\s*,\s*{_NUMBER}")

DEGREE_SIGN = "°"

_NEGATIVE_HEMISPHERES = {"S", "W"}
_POSITIVE_HEMISPHERES = {"N", "E"}

Pair = Tuple[float, float]


def hemisphere_sign(letter: str) -> int:
    """Return -1 for S/W, +1 for N/E (case-insensitive)."""
    h = letter.upper()
    if h in _NEGATIVE_HEMISPHERES:
        return -1
    if h in _POSITIVE_HEMISPHERES:
        return 1
    raise ValueError(f"not a hemisphere letter: {letter!r}")


def dms_to_decimal(degrees: float, minutes: float, seconds: float, hemisphere: str) -> float:
    """Convert one degrees/minutes/seconds group to signed decimal degrees."""
    value = float(degrees) + float(minutes) / 60 + float(seconds) / 3600
    return hemisphere_sign(hemisphere) * value


def match_dms(text: str) -> Optional[Pair]:
    m = _DMS_RE.search(text)
    if not m:
        return None
    lat_d, lat_m, lat_s, lat_h, lon_d, lon_m, lon_s, lon_h = m.groups()
    return (
        dms_to_decimal(int(lat_d), int(lat_m), float(lat_s), lat_h),
        dms_to_decimal(int(lon_d), int(lon_m), float(lon_s), lon_h),
    )


def match_decimal(text: str) -> Optional[Pair]:
    m = _DECIMAL_RE.search(text)
    if not m:
        return None
    return float(m.group(1)), float(m.group(2))


# Tried in order; the first grammar that matches decides the outcome
MATCHERS: List[Callable[[str], Optional[Pair]]] = [
    match_dms,
    match_decimal,
]


def parse_coordinates(raw: str) -> Optional[Coordinates]:
    """Parse a DMS or decimal coordinate string.

    Returns None for empty input, unrecognized notation, or values outside
    the latitude/longitude ranges.
    """
    if not raw:
        return None
    for matcher in MATCHERS:
        pair = matcher(raw)
        if pair is None:
            continue
        try:
            return Coordinates(*pair)
        except ValueError:
            return None
    return None


def looks_like_coordinates(raw: str) -> bool:
    """Cheap routing hint: does this text resemble coordinate notation at all?"""
    if not raw:
        return False
    if DEGREE_SIGN in raw:
        return True
    return _DECIMAL_SHAPE_RE.fullmatch(raw.strip()) is not None


__all__ = [
    "hemisphere_sign",
    "dms_to_decimal",
    "match_dms",
    "match_decimal",
    "MATCHERS",
    "parse_coordinates",
    "looks_like_coordinates",
    "DEGREE_SIGN",
]
