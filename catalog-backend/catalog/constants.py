from __future__ import annotations

from typing import Dict, List

# Malaysian states and federal territories
MALAYSIAN_STATES: List[str] = [
    "Johor",
    "Kedah",
    "Kelantan",
    "Melaka",
    "Negeri Sembilan",
    "Pahang",
    "Penang",
    "Perak",
    "Perlis",
    "Sabah",
    "Sarawak",
    "Selangor",
    "Terengganu",
    "Kuala Lumpur",
    "Labuan",
    "Putrajaya",
]

# Initial map camera
MAP_CENTER: Dict[str, float] = {
    "latitude": 4.2105,
    "longitude": 101.9758,
    "zoom": 6,
}

# Map style ids understood by the tile renderer
MAP_STYLES: Dict[str, str] = {
    "streets": "streets-v2",
    "satellite": "satellite",
    "hybrid": "hybrid",
    "outdoor": "outdoor-v2",
}
DEFAULT_MAP_STYLE = "streets"


__all__ = ["MALAYSIAN_STATES", "MAP_CENTER", "MAP_STYLES", "DEFAULT_MAP_STYLE"]
