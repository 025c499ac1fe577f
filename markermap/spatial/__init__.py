"""
markermap/spatial: Display-space projection and marker clustering.

This module provides the viewport projection and the greedy radius
clustering that groups nearby markers.
"""

from .projection import (
    BAY_AREA_BOUNDS,
    DEGENERATE_AXIS_FALLBACK,
    ProjectedPoint,
    ViewportBounds,
    pixel_distance,
    project,
    project_many,
)
from .clustering import (
    DEFAULT_CLUSTER_OPTIONS,
    Cluster,
    ClusterOptions,
    ClusteringDiagnostics,
    GeoBounds,
    cluster_locations,
    cluster_size_class,
    clusters_to_dataframe,
    summarize_clusters,
)

__all__ = [
    "BAY_AREA_BOUNDS",
    "DEGENERATE_AXIS_FALLBACK",
    "ProjectedPoint",
    "ViewportBounds",
    "pixel_distance",
    "project",
    "project_many",
    "DEFAULT_CLUSTER_OPTIONS",
    "Cluster",
    "ClusterOptions",
    "ClusteringDiagnostics",
    "GeoBounds",
    "cluster_locations",
    "cluster_size_class",
    "clusters_to_dataframe",
    "summarize_clusters",
]
