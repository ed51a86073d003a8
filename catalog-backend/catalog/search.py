from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, TypeVar

from catalog.proximity import filter_by_proximity
from coords.model import CatalogPoint
from coords.notation import looks_like_coordinates, parse_coordinates

P = TypeVar("P", bound=CatalogPoint)

NAME_ONLY = ("name",)
NAME_AND_DESCRIPTION = ("name", "description")


def filter_by_text(query: str, points: Iterable[P], fields: Sequence[str] = NAME_ONLY) -> List[P]:
    """Case-insensitive substring match against any of ``fields``."""
    needle = query.strip().lower()
    return [
        p for p in points
        if any(needle in (getattr(p, f, None) or "").lower() for f in fields)
    ]


def filter_by_name(query: str, points: Iterable[P]) -> List[P]:
    return filter_by_text(query, points, NAME_ONLY)


def filter_by_state(state: Optional[str], points: Iterable[P]) -> List[P]:
    if not state:
        return list(points)
    return [p for p in points if getattr(p, "state", None) == state]


def search_locations(
    points: Iterable[P],
    query: Optional[str] = None,
    state: Optional[str] = None,
    text_fields: Sequence[str] = NAME_ONLY,
) -> List[P]:
    """Filter catalog points by state, then by a free-text query.

    Coordinate-like queries that parse are answered by proximity only.
    Everything else (including coordinate-like text that fails to parse)
    falls back to a case-insensitive substring match on ``text_fields``.
    Catalog order is kept.
    """
    filtered = filter_by_state(state, points)
    if not query or not query.strip():
        return filtered

    if looks_like_coordinates(query):
        coords = parse_coordinates(query)
        if coords is not None:
            return filter_by_proximity(coords, filtered)

    return filter_by_text(query, filtered, text_fields)


__all__ = [
    "NAME_ONLY",
    "NAME_AND_DESCRIPTION",
    "filter_by_text",
    "filter_by_name",
    "filter_by_state",
    "search_locations",
]
