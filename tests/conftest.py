"""
Pytest configuration and shared fixtures for markermap tests.

This file provides:
- Location factories
- Sample Bay Area location sets
- Viewport bounds used across modules
"""

from typing import Callable, List

import pytest

from markermap.models import Location, LocationCategory
from markermap.spatial.projection import BAY_AREA_BOUNDS, ViewportBounds


# ==============================================================================
# Factories
# ==============================================================================

@pytest.fixture
def make_location() -> Callable[..., Location]:
    """Factory building a Location with sensible defaults."""

    def _make(
        id: str,
        lat: float = 37.7,
        lng: float = -122.4,
        category: str = "other",
        name: str = "",
    ) -> Location:
        return Location(
            id=id,
            name=name or f"Place {id}",
            latitude=lat,
            longitude=lng,
            category=category,
            address=f"{id} Main St",
            city="San Francisco",
        )

    return _make


# ==============================================================================
# Sample Locations
# ==============================================================================

@pytest.fixture
def bay_area_bounds() -> ViewportBounds:
    return BAY_AREA_BOUNDS


@pytest.fixture
def sample_locations(make_location) -> List[Location]:
    """Mixed Bay Area locations: a downtown group, an Oakland pair, and loners."""
    return [
        make_location("ferry", 37.7955, -122.3937, "restaurant", "Ferry Building"),
        make_location("blue-bottle", 37.7962, -122.3942, "cafe", "Blue Bottle"),
        make_location("embarcadero", 37.7990, -122.3975, "bar", "Embarcadero Bar"),
        make_location("lake-merritt", 37.8044, -122.2580, "park", "Lake Merritt"),
        make_location("oakland-museum", 37.7987, -122.2640, "museum", "Oakland Museum"),
        make_location("ocean-beach", 37.7594, -122.5107, "beach", "Ocean Beach"),
        make_location("mission-peak", 37.5128, -121.8806, "hike", "Mission Peak"),
        make_location("twin-peaks", 37.7544, -122.4477, "viewpoint", "Twin Peaks"),
    ]


@pytest.fixture
def restaurants_and_parks(make_location) -> List[Location]:
    """Five restaurants and three parks spread across the viewport."""
    restaurants = [
        make_location(f"r{i}", 37.45 + i * 0.08, -122.65 + i * 0.1, "restaurant")
        for i in range(5)
    ]
    parks = [
        make_location(f"p{i}", 37.5 + i * 0.1, -122.1 - i * 0.1, "park")
        for i in range(3)
    ]
    return restaurants + parks
