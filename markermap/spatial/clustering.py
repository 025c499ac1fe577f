"""
Greedy radius clustering of map markers.

This module provides:
1. Single-pass, order-sensitive grouping of locations in display space
2. Geographic bounds and display-space centroids for each group
3. Size classes used to pick the cluster marker size
4. Diagnostics and a tabular view of a clustering pass

The algorithm is a local heuristic tuned for a fixed viewport, not a
general clustering library:
- Locations are visited in input order; the first unclaimed location
  becomes the seed of a candidate group.
- Every unclaimed location within ``radius`` of the seed joins the group.
- Groups smaller than ``min_cluster_size`` collapse to a singleton seed.
- Claiming is irreversible, so later locations never move between groups.

Distances are measured in the 0-100 display space produced by
:func:`markermap.spatial.projection.project`, so a radius means "visual
closeness at this zoom" rather than metres on the ground.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np
import pandas as pd

from ..models import Location, LocationCategory
from .projection import BAY_AREA_BOUNDS, ProjectedPoint, ViewportBounds, project_many

logger = logging.getLogger(__name__)

CLUSTER_ID_PREFIX = "cluster-"
SINGLE_ID_PREFIX = "single-"


@dataclass(frozen=True)
class ClusterOptions:
    """Parameters for a clustering pass."""

    radius: float = 8.0
    """Display-space distance threshold (percentage of the map extent)."""

    min_cluster_size: int = 2
    """Minimum group size that forms a multi-member cluster."""

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")
        if self.min_cluster_size < 1:
            raise ValueError(f"min_cluster_size must be >= 1, got {self.min_cluster_size}")


DEFAULT_CLUSTER_OPTIONS = ClusterOptions()


@dataclass(frozen=True)
class GeoBounds:
    """Geographic bounding box over a cluster's members."""

    north: float
    south: float
    east: float
    west: float

    @classmethod
    def from_locations(cls, locations: Sequence[Location]) -> "GeoBounds":
        lats = [loc.latitude for loc in locations]
        lngs = [loc.longitude for loc in locations]
        return cls(north=max(lats), south=min(lats), east=max(lngs), west=min(lngs))


@dataclass(frozen=True)
class Cluster:
    """A group of one or more locations rendered as a single marker."""

    id: str
    """'cluster-<seed id>' for groups, 'single-<id>' for lone markers."""

    locations: Tuple[Location, ...]
    """Members in input order; never empty."""

    center: ProjectedPoint
    """Mean of the members' projected points."""

    bounds: GeoBounds

    @property
    def size(self) -> int:
        return len(self.locations)

    @property
    def is_singleton(self) -> bool:
        return len(self.locations) == 1

    @property
    def member_ids(self) -> List[str]:
        return [loc.id for loc in self.locations]

    @property
    def categories(self) -> List[LocationCategory]:
        """Distinct member categories in first-seen order."""
        seen: List[LocationCategory] = []
        for loc in self.locations:
            if loc.category not in seen:
                seen.append(loc.category)
        return seen

    def get(self, location_id: str) -> Optional[Location]:
        for loc in self.locations:
            if loc.id == location_id:
                return loc
        return None


@dataclass
class ClusteringDiagnostics:
    """Summary of a clustering pass, mostly for logging and tests."""

    num_points: int
    """Total number of locations clustered."""

    num_clusters: int
    """Number of clusters returned (singletons included)."""

    num_singletons: int
    """Clusters holding exactly one location."""

    cluster_sizes: List[int] = field(default_factory=list)
    """Size of each cluster, in output order."""

    largest_cluster_size: int = 0


def cluster_size_class(cluster_size: int) -> str:
    """Marker size bucket for a cluster: 'sm', 'md' or 'lg'."""
    if cluster_size >= 10:
        return "lg"
    if cluster_size >= 5:
        return "md"
    return "sm"


def _build_cluster(
    cluster_id: str,
    members: List[Location],
    points: np.ndarray,
) -> Cluster:
    cx, cy = points.mean(axis=0)
    return Cluster(
        id=cluster_id,
        locations=tuple(members),
        center=ProjectedPoint(x=float(cx), y=float(cy)),
        bounds=GeoBounds.from_locations(members),
    )


def _unique_id(base: str, position: int, used_ids: Set[str]) -> str:
    """Return ``base``, or ``base@position`` when a repeated seed id already took it."""
    cluster_id = base if base not in used_ids else f"{base}@{position}"
    used_ids.add(cluster_id)
    return cluster_id


def cluster_locations(
    locations: Sequence[Location],
    options: Optional[ClusterOptions] = None,
    bounds: ViewportBounds = BAY_AREA_BOUNDS,
) -> List[Cluster]:
    """
    Partition locations into display clusters.

    Every input location ends up in exactly one returned cluster. The
    result depends only on input order and parameters, so the same
    sequence always produces the same partition.

    Args:
        locations: Locations in the order they should be visited
        options: Radius and minimum cluster size (defaults: 8 and 2)
        bounds: Viewport used to project locations into display space

    Returns:
        Clusters in the order their seeds appear in ``locations``.
    """
    if options is None:
        options = DEFAULT_CLUSTER_OPTIONS

    n = len(locations)
    if n == 0:
        return []

    points = project_many(((loc.latitude, loc.longitude) for loc in locations), bounds)

    # Claims are tracked by position so repeated ids cannot drop members.
    claimed = np.zeros(n, dtype=bool)
    clusters: List[Cluster] = []
    used_ids: Set[str] = set()

    for i, seed in enumerate(locations):
        if claimed[i]:
            continue

        # Every position before i is already claimed, so scan from i on.
        tail = points[i:]
        dist = np.hypot(tail[:, 0] - points[i, 0], tail[:, 1] - points[i, 1])
        nearby = np.flatnonzero((dist <= options.radius) & ~claimed[i:]) + i

        if len(nearby) >= options.min_cluster_size:
            members = [locations[j] for j in nearby]
            cluster_id = _unique_id(f"{CLUSTER_ID_PREFIX}{seed.id}", i, used_ids)
            clusters.append(_build_cluster(cluster_id, members, points[nearby]))
            claimed[nearby] = True
        else:
            cluster_id = _unique_id(f"{SINGLE_ID_PREFIX}{seed.id}", i, used_ids)
            clusters.append(_build_cluster(cluster_id, [seed], points[i:i + 1]))
            claimed[i] = True

    if logger.isEnabledFor(logging.DEBUG):
        diagnostics = summarize_clusters(clusters)
        logger.debug(
            "Clustered %d locations into %d clusters (%d singletons, radius=%s, min_size=%d)",
            diagnostics.num_points,
            diagnostics.num_clusters,
            diagnostics.num_singletons,
            options.radius,
            options.min_cluster_size,
        )

    return clusters


def summarize_clusters(clusters: Sequence[Cluster]) -> ClusteringDiagnostics:
    """Build diagnostics for the output of :func:`cluster_locations`."""
    sizes = [c.size for c in clusters]
    return ClusteringDiagnostics(
        num_points=sum(sizes),
        num_clusters=len(clusters),
        num_singletons=sum(1 for s in sizes if s == 1),
        cluster_sizes=sizes,
        largest_cluster_size=max(sizes, default=0),
    )


def clusters_to_dataframe(clusters: Sequence[Cluster]) -> pd.DataFrame:
    """
    Flatten clusters into one row per location.

    Columns: cluster_id, cluster_size, id, name, category, lat, lng,
    center_x, center_y. Row order follows cluster order, then member order.
    """
    columns = [
        "cluster_id", "cluster_size", "id", "name", "category",
        "lat", "lng", "center_x", "center_y",
    ]
    rows = []
    for cluster in clusters:
        for loc in cluster.locations:
            rows.append(
                dict(
                    cluster_id=cluster.id,
                    cluster_size=cluster.size,
                    id=loc.id,
                    name=loc.name,
                    category=loc.category.value,
                    lat=loc.latitude,
                    lng=loc.longitude,
                    center_x=cluster.center.x,
                    center_y=cluster.center.y,
                )
            )
    return pd.DataFrame(rows, columns=columns)
