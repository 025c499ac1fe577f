"""
Category filter state and pure reducers.

The filter is an immutable set of active categories. An empty set means
"no restriction": every location is visible. Reducers never mutate their
input; they return a new ``CategoryFilterState``.

Counts shown on filter badges are always computed over the unfiltered
location list, so a badge reports the real total for its category whatever
else is active.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Sequence

import pandas as pd

from ..models import Location, LocationCategory

MAX_QUICK_CHIPS = 3


@dataclass(frozen=True)
class CategoryFilterState:
    """Set of active categories; empty means every category is shown."""

    active: FrozenSet[LocationCategory] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.active

    def __contains__(self, category) -> bool:
        return LocationCategory.coerce(category) in self.active

    def __len__(self) -> int:
        return len(self.active)


@dataclass
class FilterSummary:
    """Text and chips for the filter panel header."""

    visible_count: int
    total_count: int
    active_count: int
    quick_chips: List[LocationCategory]
    """First active categories shown as removable chips, in enum order."""

    overflow_count: int
    """Active categories not shown as chips ('+N more')."""

    @property
    def has_active_filters(self) -> bool:
        return self.active_count > 0

    @property
    def text(self) -> str:
        return f"Showing {self.visible_count} of {self.total_count} locations"


def clear() -> CategoryFilterState:
    """Empty filter (no restriction)."""
    return CategoryFilterState()


def toggle(state: CategoryFilterState, category) -> CategoryFilterState:
    """Add ``category`` if inactive, remove it if active."""
    category = LocationCategory.coerce(category)
    if category in state.active:
        return CategoryFilterState(active=state.active - {category})
    return CategoryFilterState(active=state.active | {category})


def select_all(locations: Iterable[Location]) -> CategoryFilterState:
    """Activate every category that has at least one location."""
    return CategoryFilterState(active=frozenset(available_categories(locations)))


def is_visible(location: Location, state: CategoryFilterState) -> bool:
    return state.is_empty or location.category in state.active


def apply_filter(locations: Sequence[Location], state: CategoryFilterState) -> List[Location]:
    """Visible subset of ``locations`` in input order."""
    if state.is_empty:
        return list(locations)
    return [loc for loc in locations if loc.category in state.active]


def counts_by_category(locations: Iterable[Location]) -> Dict[LocationCategory, int]:
    """
    Count locations per category over the unfiltered input.

    Categories appear in order of first occurrence; categories with no
    locations are absent. Empty input gives an empty mapping.
    """
    values = pd.Series([loc.category.value for loc in locations], dtype=object)
    if values.empty:
        return {}
    counts = values.value_counts()
    return {LocationCategory(value): int(counts[value]) for value in pd.unique(values)}


def available_categories(locations: Iterable[Location]) -> List[LocationCategory]:
    """Categories that have at least one location, in first-seen order."""
    return list(counts_by_category(locations))


def visible_count(locations: Sequence[Location], state: CategoryFilterState) -> int:
    if state.is_empty:
        return len(locations)
    return sum(1 for loc in locations if loc.category in state.active)


def filter_summary(locations: Sequence[Location], state: CategoryFilterState) -> FilterSummary:
    """Build the header summary for the filter panel."""
    ordered_active = [c for c in LocationCategory if c in state.active]
    return FilterSummary(
        visible_count=visible_count(locations, state),
        total_count=len(locations),
        active_count=len(ordered_active),
        quick_chips=ordered_active[:MAX_QUICK_CHIPS],
        overflow_count=max(0, len(ordered_active) - MAX_QUICK_CHIPS),
    )
