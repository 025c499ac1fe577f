"""
Display attributes for each location category.

Every ``LocationCategory`` member has exactly one ``CategoryStyle``. Unknown
category values resolve to the ``OTHER`` style instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from ..models import LocationCategory


@dataclass(frozen=True)
class CategoryStyle:
    """
    Marker and filter-chip styling for one category.

    Attributes:
        label: Plural label shown in the filter panel
        color: Marker colour as a hex string
        bg_class: Marker background utility class
        icon: Icon name drawn inside the marker
        animation: Idle animation class (not applied while selected/hovered)
        chip_class: Filter chip classes when the category is active
    """
    label: str
    color: str
    bg_class: str
    icon: str
    animation: str
    chip_class: str


CATEGORY_STYLES: Dict[LocationCategory, CategoryStyle] = {
    LocationCategory.RESTAURANT: CategoryStyle(
        label="Restaurants", color="#E53E3E", bg_class="bg-red-500",
        icon="utensils", animation="animate-pulse",
        chip_class="bg-red-100 text-red-800 border-red-200",
    ),
    LocationCategory.CAFE: CategoryStyle(
        label="Cafes", color="#D69E2E", bg_class="bg-orange-500",
        icon="coffee", animation="animate-steam",
        chip_class="bg-orange-100 text-orange-800 border-orange-200",
    ),
    LocationCategory.BAR: CategoryStyle(
        label="Bars", color="#9F7AEA", bg_class="bg-purple-500",
        icon="wine", animation="animate-glow",
        chip_class="bg-purple-100 text-purple-800 border-purple-200",
    ),
    LocationCategory.SHOPPING: CategoryStyle(
        label="Shopping", color="#3182CE", bg_class="bg-blue-500",
        icon="shopping-bag", animation="animate-bounce",
        chip_class="bg-blue-100 text-blue-800 border-blue-200",
    ),
    LocationCategory.PARK: CategoryStyle(
        label="Parks", color="#38A169", bg_class="bg-green-500",
        icon="trees", animation="animate-sway",
        chip_class="bg-green-100 text-green-800 border-green-200",
    ),
    LocationCategory.HIKE: CategoryStyle(
        label="Hiking", color="#319795", bg_class="bg-teal-500",
        icon="mountain", animation="animate-bounce",
        chip_class="bg-emerald-100 text-emerald-800 border-emerald-200",
    ),
    LocationCategory.MUSEUM: CategoryStyle(
        label="Museums", color="#805AD5", bg_class="bg-purple-600",
        icon="palette", animation="animate-pulse",
        chip_class="bg-indigo-100 text-indigo-800 border-indigo-200",
    ),
    LocationCategory.ENTERTAINMENT: CategoryStyle(
        label="Entertainment", color="#E53E3E", bg_class="bg-pink-500",
        icon="music", animation="animate-bounce",
        chip_class="bg-pink-100 text-pink-800 border-pink-200",
    ),
    LocationCategory.BEACH: CategoryStyle(
        label="Beaches", color="#0BC5EA", bg_class="bg-cyan-500",
        icon="waves", animation="animate-wave",
        chip_class="bg-cyan-100 text-cyan-800 border-cyan-200",
    ),
    LocationCategory.VIEWPOINT: CategoryStyle(
        label="Viewpoints", color="#3182CE", bg_class="bg-blue-600",
        icon="camera", animation="animate-flash",
        chip_class="bg-yellow-100 text-yellow-800 border-yellow-200",
    ),
    LocationCategory.OTHER: CategoryStyle(
        label="Other", color="#718096", bg_class="bg-gray-500",
        icon="map-pin", animation="animate-pulse",
        chip_class="bg-gray-100 text-gray-800 border-gray-200",
    ),
}

_missing = set(LocationCategory) - set(CATEGORY_STYLES)
if _missing:
    raise RuntimeError(f"CATEGORY_STYLES missing entries for: {sorted(c.value for c in _missing)}")


def style_for(category: Union[LocationCategory, str, None]) -> CategoryStyle:
    """Style for ``category``; unknown values get the ``OTHER`` style."""
    return CATEGORY_STYLES[LocationCategory.coerce(category)]
