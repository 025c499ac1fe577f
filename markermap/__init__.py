"""
markermap: Marker clustering and interaction engine for location maps.

Keeps a map of points of interest legible by grouping nearby markers,
filtering by category, and expanding clusters on demand.
"""

from .models import Location, LocationCategory
from .session import MapSession, MapView, build_view

__all__ = [
    "Location",
    "LocationCategory",
    "MapSession",
    "MapView",
    "build_view",
]

__version__ = "0.1.0"
