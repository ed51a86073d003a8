from __future__ import annotations

import hashlib
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.auth import verify_admin_key
from app.schemas import (
    LocationCreate,
    LocationOut,
    LocationUpdate,
    MapCenter,
    MapPoint,
    MapView,
)
from catalog.constants import DEFAULT_MAP_STYLE, MAP_CENTER, MAP_STYLES
from catalog.search import NAME_AND_DESCRIPTION, search_locations
from catalog.store import LocationStore
from coords.model import Coordinates
from coords.notation import parse_coordinates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])

INVALID_COORDINATES = "Invalid coordinates format"


def get_store(request: Request) -> LocationStore:
    return request.app.state.store


def resolve_coordinates(
    raw: Optional[str],
    latitude: Optional[float],
    longitude: Optional[float],
) -> Optional[Coordinates]:
    """Turn form input into Coordinates.

    Free-form text takes precedence over the numeric fields. Returns None when
    neither was supplied; raises 422 for text that does not parse or numbers
    out of range.
    """
    if raw is not None and raw.strip():
        coords = parse_coordinates(raw)
        if coords is None:
            raise HTTPException(status_code=422, detail=INVALID_COORDINATES)
        return coords
    if latitude is None and longitude is None:
        return None
    if latitude is None or longitude is None:
        raise HTTPException(status_code=422, detail="Both latitude and longitude are required")
    try:
        return Coordinates(latitude, longitude)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


async def _invalidate_views(request: Request) -> None:
    cache = getattr(request.app.state, "cache", None)
    if cache:
        await cache.clear()


def _map_cache_key(style: str, state: Optional[str], search: Optional[str]) -> str:
    h = hashlib.sha1((search or "").strip().encode("utf-8")).hexdigest()
    return f"map:{style}:{state or '*'}:{h}"


@router.get("", response_model=List[LocationOut])
async def list_locations(
    search: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    store: LocationStore = Depends(get_store),
):
    """Catalog listing, newest first.

    ``search`` is routed through coordinate parsing when it looks like a
    coordinate (proximity match), otherwise it is a substring match on name
    or description.
    """
    return search_locations(store.list(), query=search, state=state, text_fields=NAME_AND_DESCRIPTION)


@router.get("/map", response_model=MapView)
async def map_view(
    request: Request,
    search: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    style: str = Query(DEFAULT_MAP_STYLE),
    store: LocationStore = Depends(get_store),
):
    """Points and camera for the map renderer."""
    if style not in MAP_STYLES:
        raise HTTPException(status_code=422, detail=f"Unknown map style: {style}")

    cache = getattr(request.app.state, "cache", None)
    cache_key = _map_cache_key(style, state, search)
    if cache:
        cached = await cache.get_json(cache_key)
        if cached:
            try:
                return MapView(**cached)
            except ValueError:
                # Corrupt cache entry: ignore
                pass

    everything = store.list()
    records = search_locations(everything, query=search, state=state)
    view = MapView(
        center=MapCenter(**MAP_CENTER),
        style=MAP_STYLES[style],
        points=[
            MapPoint(id=r.id, latitude=r.latitude, longitude=r.longitude, label=r.name)
            for r in records
        ],
        total=len(everything),
    )
    if cache:
        await cache.set_json(cache_key, view.model_dump(mode="json"))
    return view


@router.get("/{location_id}", response_model=LocationOut)
async def get_location(location_id: str, store: LocationStore = Depends(get_store)):
    try:
        return store.get(location_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Location not found")


@router.post("", response_model=LocationOut, status_code=201)
async def create_location(
    body: LocationCreate,
    request: Request,
    store: LocationStore = Depends(get_store),
    _: bool = Depends(verify_admin_key),
):
    coords = resolve_coordinates(body.coordinates, body.latitude, body.longitude)
    if coords is None:
        raise HTTPException(status_code=400, detail="Missing required fields")

    data = body.model_dump(exclude={"coordinates", "latitude", "longitude"})
    data["latitude"] = coords.latitude
    data["longitude"] = coords.longitude
    try:
        record = store.create(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("location.created", extra={"location_id": record.id})
    await _invalidate_views(request)
    return record


@router.put("/{location_id}", response_model=LocationOut)
async def update_location(
    location_id: str,
    body: LocationUpdate,
    request: Request,
    store: LocationStore = Depends(get_store),
    _: bool = Depends(verify_admin_key),
):
    changes = body.model_dump(exclude_unset=True, exclude={"coordinates", "latitude", "longitude"})
    # name/state cannot be cleared
    for key in ("name", "state"):
        if key in changes and not changes[key]:
            del changes[key]

    if body.coordinates is not None and body.coordinates.strip():
        coords = resolve_coordinates(body.coordinates, None, None)
        changes["latitude"], changes["longitude"] = coords.latitude, coords.longitude
    else:
        # numeric fields may be patched one at a time; the store validates the result
        if body.latitude is not None:
            changes["latitude"] = body.latitude
        if body.longitude is not None:
            changes["longitude"] = body.longitude

    try:
        record = store.update(location_id, changes)
    except KeyError:
        raise HTTPException(status_code=404, detail="Location not found")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("location.updated", extra={"location_id": location_id})
    await _invalidate_views(request)
    return record


@router.delete("/{location_id}")
async def delete_location(
    location_id: str,
    request: Request,
    store: LocationStore = Depends(get_store),
    _: bool = Depends(verify_admin_key),
):
    try:
        store.delete(location_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Location not found")

    logger.info("location.deleted", extra={"location_id": location_id})
    await _invalidate_views(request)
    return {"success": True}
