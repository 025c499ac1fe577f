"""Radial layout and stacking order for cluster markers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from ..models import Location, LocationCategory
from ..spatial.clustering import Cluster
from .state import ClusterUIState

EXPANDED_RADIUS_PX = 40.0
MAX_CATEGORY_INDICATORS = 3

# Stacking order; selected markers sit above their peers.
Z_SINGLE = 10
Z_SINGLE_SELECTED = 20
Z_CLUSTER = 15
Z_CLUSTER_SELECTED = 25
Z_EXPANDED_MEMBER = 20
Z_EXPANDED_MEMBER_SELECTED = 25


@dataclass(frozen=True)
class MarkerPlacement:
    """Where one member of an expanded cluster is drawn."""

    location: Location
    index: int
    angle: float
    """Radians, measured from the positive x axis."""

    offset_x: float
    offset_y: float
    """Pixel offsets from the cluster centre (y grows downwards)."""

    z_index: int

    @property
    def angle_degrees(self) -> float:
        return math.degrees(self.angle)


def expanded_layout(
    cluster: Cluster,
    radius: float = EXPANDED_RADIUS_PX,
    selected_id: Optional[str] = None,
) -> List[MarkerPlacement]:
    """
    Spread cluster members evenly on a circle around the centre.

    Member ``i`` of ``n`` sits at angle ``i / n * 2*pi``. Computed fresh on
    every call; nothing is stored on the cluster.
    """
    n = cluster.size
    placements = []
    for i, location in enumerate(cluster.locations):
        angle = (i / n) * 2 * math.pi
        placements.append(
            MarkerPlacement(
                location=location,
                index=i,
                angle=angle,
                offset_x=math.cos(angle) * radius,
                offset_y=math.sin(angle) * radius,
                z_index=Z_EXPANDED_MEMBER_SELECTED if location.id == selected_id else Z_EXPANDED_MEMBER,
            )
        )
    return placements


def marker_z_index(cluster: Cluster, state: ClusterUIState) -> int:
    selected = state.selected_id is not None and cluster.get(state.selected_id) is not None
    if cluster.is_singleton:
        return Z_SINGLE_SELECTED if selected else Z_SINGLE
    return Z_CLUSTER_SELECTED if selected else Z_CLUSTER


def category_indicators(cluster: Cluster) -> List[LocationCategory]:
    """Category badges drawn on a collapsed cluster marker."""
    return cluster.categories[:MAX_CATEGORY_INDICATORS]
