"""
Map view pipeline and per-session interaction state.

Data flow for one render:
    locations -> category filter -> clustering -> presentation state

Usage:
    from markermap.session import MapSession

    session = MapSession(locations, is_authenticated=True)
    session.toggle_category("restaurant")
    event = session.activate(session.view.clusters[0].id)
    if event is not None:
        show_details(event.location)

Every change to the locations, the filter, or the clustering parameters
recomputes the cluster partition from scratch. Presentation state is then
reconciled against the new clusters (see ``presentation.state.reconcile``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .filtering.categories import (
    CategoryFilterState,
    FilterSummary,
    apply_filter,
    clear,
    counts_by_category,
    filter_summary,
    select_all,
    toggle,
)
from .models import Location, LocationCategory
from .presentation import state as ui
from .presentation.layout import MarkerPlacement, expanded_layout
from .spatial.clustering import Cluster, ClusterOptions, cluster_locations
from .spatial.projection import BAY_AREA_BOUNDS, ViewportBounds
from .tools.config_loader import MapProfile

logger = logging.getLogger(__name__)


@dataclass
class MapView:
    """Everything the host view needs to draw the map and its filter panel."""

    visible_locations: List[Location]
    clusters: List[Cluster]
    counts: Dict[LocationCategory, int]
    """Per-category totals over all locations, ignoring the filter."""

    summary: FilterSummary
    ui_state: ui.ClusterUIState = field(default_factory=ui.ClusterUIState)
    can_add_location: bool = False

    @property
    def visible_count(self) -> int:
        return self.summary.visible_count

    @property
    def total_count(self) -> int:
        return self.summary.total_count

    def cluster(self, cluster_id: str) -> Cluster:
        for c in self.clusters:
            if c.id == cluster_id:
                return c
        raise KeyError(f"No cluster with id '{cluster_id}'")

    def cluster_for_location(self, location_id: str) -> Optional[Cluster]:
        for c in self.clusters:
            if c.get(location_id) is not None:
                return c
        return None


def build_view(
    locations: Sequence[Location],
    filter_state: Optional[CategoryFilterState] = None,
    options: Optional[ClusterOptions] = None,
    bounds: ViewportBounds = BAY_AREA_BOUNDS,
    ui_state: Optional[ui.ClusterUIState] = None,
    is_authenticated: bool = False,
) -> MapView:
    """Run filter and clustering over ``locations`` and reconcile UI state."""
    if filter_state is None:
        filter_state = clear()
    if ui_state is None:
        ui_state = ui.ClusterUIState()

    visible = apply_filter(locations, filter_state)
    clusters = cluster_locations(visible, options, bounds)

    return MapView(
        visible_locations=visible,
        clusters=clusters,
        counts=counts_by_category(locations),
        summary=filter_summary(locations, filter_state),
        ui_state=ui.reconcile(ui_state, clusters),
        can_add_location=is_authenticated,
    )


class MapSession:
    """
    State holder for one rendering session.

    Owns the location list, the category filter, the clustering parameters
    and the cluster UI state. Interaction methods return the
    ``SelectionEvent`` produced (or None) and keep ``view`` current.
    """

    def __init__(
        self,
        locations: Sequence[Location] = (),
        *,
        profile: Optional[MapProfile] = None,
        is_authenticated: bool = False,
    ):
        if profile is None:
            profile = MapProfile(name="default")

        self._locations: List[Location] = list(locations)
        self._bounds = profile.bounds
        self._options = profile.clustering
        self._expanded_radius = profile.expanded_radius
        self._filter = clear()
        self._ui = ui.ClusterUIState()
        self._is_authenticated = is_authenticated
        self.view: MapView = self._recompute()

    # ------------------------------------------------------------------
    # Inputs that trigger a full recompute
    # ------------------------------------------------------------------

    @property
    def filter_state(self) -> CategoryFilterState:
        return self._filter

    @property
    def options(self) -> ClusterOptions:
        return self._options

    @property
    def ui_state(self) -> ui.ClusterUIState:
        return self._ui

    def set_locations(self, locations: Sequence[Location]) -> MapView:
        self._locations = list(locations)
        return self._recompute()

    def set_options(self, options: ClusterOptions) -> MapView:
        self._options = options
        return self._recompute()

    def set_authenticated(self, is_authenticated: bool) -> MapView:
        self._is_authenticated = is_authenticated
        self.view.can_add_location = is_authenticated
        return self.view

    def toggle_category(self, category) -> MapView:
        self._filter = toggle(self._filter, category)
        return self._recompute()

    def clear_filters(self) -> MapView:
        self._filter = clear()
        return self._recompute()

    def select_all_categories(self) -> MapView:
        self._filter = select_all(self._locations)
        return self._recompute()

    # ------------------------------------------------------------------
    # Marker interaction
    # ------------------------------------------------------------------

    def activate(self, cluster_id: str) -> Optional[ui.SelectionEvent]:
        return self._apply(ui.activate(self._ui, self.view.cluster(cluster_id)))

    def select_member(self, cluster_id: str, location_id: str) -> Optional[ui.SelectionEvent]:
        return self._apply(ui.select_member(self._ui, self.view.cluster(cluster_id), location_id))

    def dismiss(self, cluster_id: str) -> None:
        self._apply(ui.dismiss(self._ui, self.view.cluster(cluster_id)))

    def hover(self, location_id: str) -> None:
        self._set_ui(ui.hover(self._ui, location_id))

    def unhover(self) -> None:
        self._set_ui(ui.unhover(self._ui))

    def is_expanded(self, cluster_id: str) -> bool:
        return ui.is_expanded(self._ui, self.view.cluster(cluster_id))

    def layout(self, cluster_id: str) -> List[MarkerPlacement]:
        """Radial placement for an expanded cluster; empty when collapsed."""
        cluster = self.view.cluster(cluster_id)
        if not ui.is_expanded(self._ui, cluster):
            return []
        return expanded_layout(cluster, self._expanded_radius, self._ui.selected_id)

    # ------------------------------------------------------------------

    def _apply(self, transition: ui.Transition) -> Optional[ui.SelectionEvent]:
        self._set_ui(transition.state)
        return transition.event

    def _set_ui(self, state: ui.ClusterUIState) -> None:
        self._ui = state
        self.view.ui_state = state

    def _recompute(self) -> MapView:
        self.view = build_view(
            self._locations,
            filter_state=self._filter,
            options=self._options,
            bounds=self._bounds,
            ui_state=self._ui,
            is_authenticated=self._is_authenticated,
        )
        self._ui = self.view.ui_state
        logger.debug(
            "Recomputed map view: %d/%d visible, %d clusters",
            self.view.visible_count,
            self.view.total_count,
            len(self.view.clusters),
        )
        return self.view
