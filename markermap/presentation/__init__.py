"""
markermap/presentation: Cluster marker interaction.

Pure transition functions over an immutable ``ClusterUIState`` plus the
radial layout used when a cluster is expanded.
"""

from .state import (
    ClusterPhase,
    ClusterUIState,
    SelectionEvent,
    Transition,
    activate,
    dismiss,
    hover,
    is_expanded,
    phase_of,
    reconcile,
    select_member,
    unhover,
)
from .layout import (
    EXPANDED_RADIUS_PX,
    MarkerPlacement,
    category_indicators,
    expanded_layout,
    marker_z_index,
)

__all__ = [
    "ClusterPhase",
    "ClusterUIState",
    "SelectionEvent",
    "Transition",
    "activate",
    "dismiss",
    "hover",
    "is_expanded",
    "phase_of",
    "reconcile",
    "select_member",
    "unhover",
    "EXPANDED_RADIUS_PX",
    "MarkerPlacement",
    "category_indicators",
    "expanded_layout",
    "marker_z_index",
]
