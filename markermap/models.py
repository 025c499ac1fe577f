"""Pydantic models for locations shown on the map."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class LocationCategory(str, Enum):
    """Fixed set of location categories."""

    RESTAURANT = "restaurant"
    CAFE = "cafe"
    BAR = "bar"
    SHOPPING = "shopping"
    PARK = "park"
    HIKE = "hike"
    MUSEUM = "museum"
    ENTERTAINMENT = "entertainment"
    BEACH = "beach"
    VIEWPOINT = "viewpoint"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: Any) -> "LocationCategory":
        """Return the matching category, or ``OTHER`` for unknown values."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


class Location(BaseModel):
    """A point of interest as delivered by the locations API.

    Read-only from the clustering engine's point of view.
    """

    id: str
    name: str
    latitude: float = Field(..., ge=-90.0, le=90.0, alias="lat")
    longitude: float = Field(..., ge=-180.0, le=180.0, alias="lng")
    category: LocationCategory = LocationCategory.OTHER
    address: str = ""
    city: str = ""
    description: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)
    price_level: Optional[int] = Field(default=None, ge=0, le=4)
    tags: Tuple[str, ...] = ()

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> LocationCategory:
        return LocationCategory.coerce(value)
