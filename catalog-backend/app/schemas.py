from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from catalog.constants import MALAYSIAN_STATES
from coords.formatting import format_coordinates
from coords.model import Coordinates


def _check_state(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if v not in MALAYSIAN_STATES:
        raise ValueError(f"unknown state: {v!r}")
    return v


class ImageIn(BaseModel):
    public_id: str = Field(min_length=1)
    url: str = Field(min_length=1)
    is_primary: bool = False


class ImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    public_id: str
    url: str
    is_primary: bool


class LocationCreate(BaseModel):
    """Admin form payload.

    Position comes either from the free-form ``coordinates`` text (DMS or
    decimal) or from numeric ``latitude``/``longitude``; the text wins when
    both are sent.
    """

    name: str = Field(min_length=1)
    state: str
    coordinates: Optional[str] = Field(
        default=None, description="e.g. 4°39'1.34\"N 101°5'6.43\"E or 3.1578, 101.7117"
    )
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Optional[float] = None
    imagery_date: Optional[date] = None
    description: Optional[str] = None
    images: List[ImageIn] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Petronas Twin Towers",
                "state": "Kuala Lumpur",
                "coordinates": "3°9'28.08\"N 101°42'42.12\"E",
                "elevation": 45,
                "imagery_date": "2024-06-15",
                "description": "Iconic twin skyscrapers in KLCC",
            }
        }
    )

    @field_validator("state")
    @classmethod
    def _validate_state(cls, v: str) -> str:
        return _check_state(v)  # type: ignore[return-value]


class LocationUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    state: Optional[str] = None
    coordinates: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    elevation: Optional[float] = None
    imagery_date: Optional[date] = None
    description: Optional[str] = None

    @field_validator("state")
    @classmethod
    def _validate_state(cls, v: Optional[str]) -> Optional[str]:
        return _check_state(v)


class LocationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    latitude: float
    longitude: float
    state: str
    elevation: Optional[float] = None
    imagery_date: Optional[date] = None
    description: Optional[str] = None
    images: List[ImageOut] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coordinates_dms(self) -> str:
        return format_coordinates(Coordinates(self.latitude, self.longitude), "sexagesimal")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def coordinates_decimal(self) -> str:
        return format_coordinates(Coordinates(self.latitude, self.longitude), "decimal")


class MapCenter(BaseModel):
    latitude: float
    longitude: float
    zoom: float


class MapPoint(BaseModel):
    id: str
    latitude: float
    longitude: float
    label: str


class MapView(BaseModel):
    center: MapCenter
    style: str
    points: List[MapPoint] = Field(default_factory=list)
    # catalog size before search/state filtering
    total: int = 0


class CoordinateParseRequest(BaseModel):
    raw: str


class CoordinateParseResponse(BaseModel):
    latitude: float
    longitude: float
    dms: str
    decimal: str


class CoordinateFormatRequest(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    notation: Literal["sexagesimal", "dms", "decimal"] = "sexagesimal"


class CoordinateFormatResponse(BaseModel):
    text: str


class SniffResponse(BaseModel):
    coordinate_like: bool


class UploadResponse(BaseModel):
    public_id: str
    url: str
