"""
Collapsed/expanded state for cluster markers.

State lives in an immutable ``ClusterUIState`` value owned by the caller.
Every interaction is a pure function returning a ``Transition``: the next
state plus, when the user resolved a cluster down to one location, the
``SelectionEvent`` for the host view.

Transitions per cluster:
- COLLAPSED -> EXPANDED: activating a cluster with more than one member
- EXPANDED -> COLLAPSED: selecting a member (emits it) or dismissing
- Single-member clusters never expand; activating one emits its member

Clusters are independent: expanding one does not collapse the others.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from ..models import Location
from ..spatial.clustering import Cluster

logger = logging.getLogger(__name__)


class ClusterPhase(str, Enum):
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class ClusterUIState:
    """Presentation state for one rendering session."""

    expanded: FrozenSet[str] = field(default_factory=frozenset)
    """Ids of clusters currently expanded."""

    hovered_id: Optional[str] = None
    """Location under the pointer, if any."""

    selected_id: Optional[str] = None
    """Location most recently emitted as a selection."""


@dataclass(frozen=True)
class SelectionEvent:
    """A single location chosen by the user."""

    location: Location
    cluster_id: str


@dataclass(frozen=True)
class Transition:
    state: ClusterUIState
    event: Optional[SelectionEvent] = None


def phase_of(state: ClusterUIState, cluster: Cluster) -> ClusterPhase:
    if not cluster.is_singleton and cluster.id in state.expanded:
        return ClusterPhase.EXPANDED
    return ClusterPhase.COLLAPSED


def is_expanded(state: ClusterUIState, cluster: Cluster) -> bool:
    return phase_of(state, cluster) is ClusterPhase.EXPANDED


def _emit(state: ClusterUIState, cluster: Cluster, location: Location) -> Transition:
    logger.debug("Selected location %s from %s", location.id, cluster.id)
    next_state = replace(
        state,
        expanded=state.expanded - {cluster.id},
        selected_id=location.id,
    )
    return Transition(state=next_state, event=SelectionEvent(location=location, cluster_id=cluster.id))


def activate(state: ClusterUIState, cluster: Cluster) -> Transition:
    """
    Handle a click on a cluster marker.

    A single-member cluster emits its location directly. A collapsed
    multi-member cluster expands; an expanded one stays expanded.
    """
    if cluster.is_singleton:
        return _emit(state, cluster, cluster.locations[0])

    if cluster.id in state.expanded:
        return Transition(state=state)
    return Transition(state=replace(state, expanded=state.expanded | {cluster.id}))


def select_member(state: ClusterUIState, cluster: Cluster, location_id: str) -> Transition:
    """
    Pick one member of an expanded cluster; emits it and collapses the cluster.

    Members of a multi-member cluster are only on screen while it is
    expanded. Single-member clusters accept their member directly.

    Raises:
        ValueError: If ``location_id`` is not a member of ``cluster``, or
            ``cluster`` is a collapsed multi-member cluster
    """
    location = cluster.get(location_id)
    if location is None:
        raise ValueError(f"Location '{location_id}' is not a member of cluster '{cluster.id}'")
    if phase_of(state, cluster) is not ClusterPhase.EXPANDED and not cluster.is_singleton:
        raise ValueError(f"Cluster '{cluster.id}' must be expanded before selecting a member")
    return _emit(state, cluster, location)


def dismiss(state: ClusterUIState, cluster: Cluster) -> Transition:
    """Collapse a cluster without selecting anything."""
    if cluster.id not in state.expanded:
        return Transition(state=state)
    return Transition(state=replace(state, expanded=state.expanded - {cluster.id}))


def hover(state: ClusterUIState, location_id: str) -> ClusterUIState:
    return replace(state, hovered_id=location_id)


def unhover(state: ClusterUIState) -> ClusterUIState:
    return replace(state, hovered_id=None)


def reconcile(state: ClusterUIState, clusters: Iterable[Cluster]) -> ClusterUIState:
    """
    Carry state across a full re-clustering.

    An expanded id survives only if a multi-member cluster with the same id
    still exists. Hovered and selected ids survive only if that location is
    still on the map.
    """
    clusters = list(clusters)
    multi_ids = {c.id for c in clusters if not c.is_singleton}
    location_ids = {loc.id for c in clusters for loc in c.locations}

    expanded = state.expanded & multi_ids
    dropped = state.expanded - expanded
    if dropped:
        logger.debug("Collapsed %d clusters that no longer exist: %s", len(dropped), sorted(dropped))

    return ClusterUIState(
        expanded=frozenset(expanded),
        hovered_id=state.hovered_id if state.hovered_id in location_ids else None,
        selected_id=state.selected_id if state.selected_id in location_ids else None,
    )
