from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from app.schemas import (
    CoordinateFormatRequest,
    CoordinateFormatResponse,
    CoordinateParseRequest,
    CoordinateParseResponse,
    SniffResponse,
)
from coords.formatting import format_coordinates
from coords.model import Coordinates
from coords.notation import looks_like_coordinates, parse_coordinates

router = APIRouter(prefix="/coordinates", tags=["coordinates"])


@router.post("/parse", response_model=CoordinateParseResponse)
async def parse(req: CoordinateParseRequest) -> CoordinateParseResponse:
    """Parse DMS or decimal text; echoes both display notations back.

    Body schema:
      {"raw": "4°39'1.34\\"N 101°5'6.43\\"E"}
    """
    coords = parse_coordinates(req.raw)
    if coords is None:
        raise HTTPException(status_code=422, detail="Invalid coordinates format")
    return CoordinateParseResponse(
        latitude=coords.latitude,
        longitude=coords.longitude,
        dms=format_coordinates(coords, "sexagesimal"),
        decimal=format_coordinates(coords, "decimal"),
    )


@router.post("/format", response_model=CoordinateFormatResponse)
async def format_(req: CoordinateFormatRequest) -> CoordinateFormatResponse:
    coords = Coordinates(req.latitude, req.longitude)
    return CoordinateFormatResponse(text=format_coordinates(coords, req.notation))


@router.get("/sniff", response_model=SniffResponse)
async def sniff(q: str = Query("")) -> SniffResponse:
    return SniffResponse(coordinate_like=looks_like_coordinates(q))
