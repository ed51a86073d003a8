"""Location record storage.

The HTTP layer only talks to the LocationStore protocol. InMemoryLocationStore
is the implementation used by the app and the tests; a database-backed store
can replace it as long as it keeps the same semantics:

  - list() returns records newest first
  - get() returns the record with its primary image first
  - unknown ids raise KeyError
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

from coords.model import Coordinates

UPDATABLE_FIELDS = (
    "name",
    "latitude",
    "longitude",
    "elevation",
    "imagery_date",
    "state",
    "description",
)


@dataclass
class ImageRecord:
    public_id: str
    url: str
    is_primary: bool = False


@dataclass
class LocationRecord:
    id: str
    name: str
    latitude: float
    longitude: float
    state: str
    elevation: Optional[float] = None
    imagery_date: Optional[date] = None
    description: Optional[str] = None
    images: List[ImageRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LocationStore(Protocol):
    def list(self) -> List[LocationRecord]:
        ...

    def get(self, location_id: str) -> LocationRecord:
        ...

    def create(self, data: Dict[str, Any]) -> LocationRecord:
        ...

    def update(self, location_id: str, changes: Dict[str, Any]) -> LocationRecord:
        ...

    def delete(self, location_id: str) -> None:
        ...


def _build_images(images: Optional[List[Dict[str, Any]]]) -> List[ImageRecord]:
    out: List[ImageRecord] = []
    for idx, img in enumerate(images or []):
        out.append(
            ImageRecord(
                public_id=str(img["public_id"]),
                url=str(img["url"]),
                # first upload is the cover unless the caller flags others too
                is_primary=idx == 0 or bool(img.get("is_primary")),
            )
        )
    return out


def _primary_first(record: LocationRecord) -> LocationRecord:
    images = sorted(record.images, key=lambda i: not i.is_primary)
    return replace(record, images=images)


class InMemoryLocationStore:
    def __init__(self) -> None:
        self._records: Dict[str, LocationRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[LocationRecord]:
        # dicts keep insertion order; newest last
        return list(reversed(list(self._records.values())))

    def get(self, location_id: str) -> LocationRecord:
        record = self._records.get(location_id)
        if record is None:
            raise KeyError(location_id)
        return _primary_first(record)

    def create(self, data: Dict[str, Any]) -> LocationRecord:
        # validates ranges; raises ValueError
        coords = Coordinates(data["latitude"], data["longitude"])
        location_id = data.get("id") or uuid.uuid4().hex
        if location_id in self._records:
            raise ValueError(f"Location with id '{location_id}' already exists")
        record = LocationRecord(
            id=location_id,
            name=data["name"],
            latitude=coords.latitude,
            longitude=coords.longitude,
            state=data["state"],
            elevation=data.get("elevation"),
            imagery_date=data.get("imagery_date"),
            description=data.get("description") or None,
            images=_build_images(data.get("images")),
        )
        self._records[record.id] = record
        return record

    def update(self, location_id: str, changes: Dict[str, Any]) -> LocationRecord:
        current = self._records.get(location_id)
        if current is None:
            raise KeyError(location_id)
        patch = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        if "description" in patch:
            patch["description"] = patch["description"] or None
        updated = replace(current, **patch, updated_at=datetime.now(timezone.utc))
        Coordinates(updated.latitude, updated.longitude)
        self._records[location_id] = updated
        return updated

    def delete(self, location_id: str) -> None:
        if location_id not in self._records:
            raise KeyError(location_id)
        del self._records[location_id]


__all__ = [
    "ImageRecord",
    "LocationRecord",
    "LocationStore",
    "InMemoryLocationStore",
    "UPDATABLE_FIELDS",
]
