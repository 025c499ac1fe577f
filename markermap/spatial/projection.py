"""
Linear projection of geographic coordinates onto the map surface.

The map is a fixed geographic rectangle (the viewport) stretched over a
normalized 0-100 display space on both axes. ``x`` grows eastwards and
``y`` grows southwards, so the north-west corner is (0, 0) and the
south-east corner is (100, 100).

Points outside the viewport are clamped onto its edge rather than dropped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

DISPLAY_MIN = 0.0
DISPLAY_MAX = 100.0

DEGENERATE_AXIS_FALLBACK = 50.0
"""Coordinate used on an axis whose viewport span is zero."""


@dataclass(frozen=True)
class ViewportBounds:
    """Geographic rectangle mapped onto the full display surface (degrees)."""

    north: float
    south: float
    east: float
    west: float

    @property
    def width(self) -> float:
        return self.east - self.west

    @property
    def height(self) -> float:
        return self.north - self.south

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def north_west(self) -> Tuple[float, float]:
        """(lat, lng) of the top-left corner."""
        return self.north, self.west

    @property
    def south_east(self) -> Tuple[float, float]:
        """(lat, lng) of the bottom-right corner."""
        return self.south, self.east


BAY_AREA_BOUNDS = ViewportBounds(north=37.9, south=37.4, east=-122.0, west=-122.7)


@dataclass(frozen=True)
class ProjectedPoint:
    """Position in display space, both coordinates in [0, 100]."""

    x: float
    y: float

    def distance_to(self, other: "ProjectedPoint") -> float:
        return pixel_distance(self, other)


def _clamp(value: float) -> float:
    return max(DISPLAY_MIN, min(DISPLAY_MAX, value))


def project(lat: float, lng: float, bounds: ViewportBounds = BAY_AREA_BOUNDS) -> ProjectedPoint:
    """
    Map a latitude/longitude pair into display space.

    Each axis is interpolated independently and then clamped to [0, 100].
    A zero-width or zero-height viewport yields ``DEGENERATE_AXIS_FALLBACK``
    on that axis instead of a NaN or infinity.

    Args:
        lat: Latitude in decimal degrees
        lng: Longitude in decimal degrees
        bounds: Viewport to project into

    Returns:
        ProjectedPoint with clamped coordinates

    Example:
        >>> project(37.9, -122.7)
        ProjectedPoint(x=0.0, y=0.0)
    """
    if bounds.width == 0:
        x = DEGENERATE_AXIS_FALLBACK
    else:
        x = _clamp((lng - bounds.west) / bounds.width * 100.0)

    if bounds.height == 0:
        y = DEGENERATE_AXIS_FALLBACK
    else:
        y = _clamp((bounds.north - lat) / bounds.height * 100.0)

    return ProjectedPoint(x=x, y=y)


def project_many(
    coords: Iterable[Tuple[float, float]],
    bounds: ViewportBounds = BAY_AREA_BOUNDS,
) -> np.ndarray:
    """
    Vectorized ``project`` over (lat, lng) pairs.

    Returns:
        Array of shape (n, 2) holding x and y columns. Empty input gives
        an empty (0, 2) array.
    """
    arr = np.asarray(list(coords), dtype=float)
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)

    lat = arr[:, 0]
    lng = arr[:, 1]

    if bounds.width == 0:
        xs = np.full(len(arr), DEGENERATE_AXIS_FALLBACK)
    else:
        xs = np.clip((lng - bounds.west) / bounds.width * 100.0, DISPLAY_MIN, DISPLAY_MAX)

    if bounds.height == 0:
        ys = np.full(len(arr), DEGENERATE_AXIS_FALLBACK)
    else:
        ys = np.clip((bounds.north - lat) / bounds.height * 100.0, DISPLAY_MIN, DISPLAY_MAX)

    return np.column_stack([xs, ys])


def pixel_distance(a: ProjectedPoint, b: ProjectedPoint) -> float:
    """Euclidean distance in display space (not a geodesic distance)."""
    return math.hypot(a.x - b.x, a.y - b.y)
