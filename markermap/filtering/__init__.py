"""
markermap/filtering: Category visibility filter and category styles.

Usage:
    from markermap.filtering import toggle, clear, apply_filter, counts_by_category

    state = toggle(clear(), "restaurant")
    visible = apply_filter(locations, state)
    badges = counts_by_category(locations)  # always unfiltered totals
"""

from .categories import (
    CategoryFilterState,
    FilterSummary,
    apply_filter,
    available_categories,
    clear,
    counts_by_category,
    filter_summary,
    is_visible,
    select_all,
    toggle,
    visible_count,
)
from .styles import CATEGORY_STYLES, CategoryStyle, style_for

__all__ = [
    "CategoryFilterState",
    "FilterSummary",
    "apply_filter",
    "available_categories",
    "clear",
    "counts_by_category",
    "filter_summary",
    "is_visible",
    "select_all",
    "toggle",
    "visible_count",
    "CATEGORY_STYLES",
    "CategoryStyle",
    "style_for",
]
