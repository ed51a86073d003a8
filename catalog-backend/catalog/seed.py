from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Dict, List

from catalog.store import LocationStore

logger = logging.getLogger(__name__)

SAMPLE_LOCATIONS: List[Dict[str, Any]] = [
    {
        "name": "Petronas Twin Towers",
        "latitude": 3.1578,
        "longitude": 101.7117,
        "elevation": 45.0,
        "state": "Kuala Lumpur",
        "description": "Iconic twin skyscrapers in KLCC",
        "imagery_date": date(2024, 6, 15),
    },
    {
        "name": "Batu Caves",
        "latitude": 3.2379,
        "longitude": 101.684,
        "elevation": 100.0,
        "state": "Selangor",
        "description": "Limestone hill with Hindu temples",
        "imagery_date": date(2024, 5, 20),
    },
    {
        "name": "George Town Heritage",
        "latitude": 5.4141,
        "longitude": 100.3288,
        "elevation": 5.0,
        "state": "Penang",
        "description": "UNESCO World Heritage Site",
        "imagery_date": date(2024, 7, 10),
    },
    {
        "name": "Mount Kinabalu Base",
        "latitude": 6.0756,
        "longitude": 116.5586,
        "elevation": 1866.0,
        "state": "Sabah",
        "description": "Base camp of Mount Kinabalu",
        "imagery_date": date(2024, 4, 5),
    },
    {
        "name": "Langkawi Sky Bridge",
        "latitude": 6.377,
        "longitude": 99.6646,
        "elevation": 660.0,
        "state": "Kedah",
        "description": "Curved pedestrian bridge at Gunung Mat Cincang",
        "imagery_date": date(2024, 8, 22),
    },
]


def slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())


def seed_store(store: LocationStore) -> int:
    """Insert the sample locations that are not already present. Returns the count added."""
    existing = {rec.id for rec in store.list()}
    added = 0
    for loc in SAMPLE_LOCATIONS:
        loc_id = slugify(loc["name"])
        if loc_id in existing:
            continue
        store.create({**loc, "id": loc_id})
        added += 1
        logger.debug("seeded location %s", loc_id)
    logger.info("seed complete: %d locations added", added)
    return added


__all__ = ["SAMPLE_LOCATIONS", "slugify", "seed_store"]
