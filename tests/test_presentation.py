"""
Unit Tests for Cluster Presentation (markermap/presentation)

Tests the collapsed/expanded transitions, selection events, reconciliation
after re-clustering, and the radial layout.
"""

import math

import pytest

from markermap.presentation import (
    ClusterPhase,
    ClusterUIState,
    SelectionEvent,
    activate,
    category_indicators,
    dismiss,
    expanded_layout,
    hover,
    is_expanded,
    marker_z_index,
    phase_of,
    reconcile,
    select_member,
    unhover,
)
from markermap.spatial.clustering import cluster_locations


@pytest.fixture
def four_cluster(make_location):
    """One cluster of four co-located members."""
    locs = [
        make_location(f"m{i}", 37.70 + i * 0.0005, -122.40, cat)
        for i, cat in enumerate(["cafe", "bar", "cafe", "park"])
    ]
    clusters = cluster_locations(locs)
    assert len(clusters) == 1
    return clusters[0]


@pytest.fixture
def singleton(make_location):
    return cluster_locations([make_location("solo", 37.5, -122.2)])[0]


# ==============================================================================
# Transition Tests
# ==============================================================================

class TestActivate:
    """Activating cluster markers."""

    def test_initial_phase_is_collapsed(self, four_cluster):
        assert phase_of(ClusterUIState(), four_cluster) is ClusterPhase.COLLAPSED

    def test_multi_member_cluster_expands_without_event(self, four_cluster):
        transition = activate(ClusterUIState(), four_cluster)

        assert transition.event is None
        assert is_expanded(transition.state, four_cluster)

    def test_activate_expanded_cluster_stays_expanded(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state
        transition = activate(state, four_cluster)

        assert transition.state == state
        assert transition.event is None

    def test_singleton_emits_member_directly(self, singleton):
        transition = activate(ClusterUIState(), singleton)

        assert transition.event == SelectionEvent(location=singleton.locations[0], cluster_id="single-solo")
        assert transition.state.selected_id == "solo"
        assert phase_of(transition.state, singleton) is ClusterPhase.COLLAPSED

    def test_input_state_not_mutated(self, four_cluster):
        state = ClusterUIState()
        activate(state, four_cluster)

        assert state.expanded == frozenset()


class TestSelectAndDismiss:
    """Leaving the expanded state."""

    def test_select_member_emits_and_collapses(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state
        transition = select_member(state, four_cluster, "m2")

        assert transition.event.location.id == "m2"
        assert transition.event.cluster_id == four_cluster.id
        assert not is_expanded(transition.state, four_cluster)
        assert transition.state.selected_id == "m2"

    def test_select_non_member_raises(self, four_cluster):
        with pytest.raises(ValueError):
            select_member(ClusterUIState(), four_cluster, "not-here")

    def test_select_from_collapsed_cluster_raises(self, four_cluster):
        with pytest.raises(ValueError):
            select_member(ClusterUIState(), four_cluster, "m1")

    def test_select_singleton_member_without_expanding(self, singleton):
        transition = select_member(ClusterUIState(), singleton, "solo")

        assert transition.event.location.id == "solo"

    def test_dismiss_collapses_without_event(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state
        transition = dismiss(state, four_cluster)

        assert transition.event is None
        assert not is_expanded(transition.state, four_cluster)

    def test_dismiss_collapsed_is_noop(self, four_cluster):
        state = ClusterUIState()

        assert dismiss(state, four_cluster).state == state


class TestIndependentClusters:
    """Several clusters may be expanded at the same time."""

    def test_two_clusters_expanded(self, make_location):
        locs = [
            make_location("a1", 37.70, -122.40),
            make_location("a2", 37.70, -122.40),
            make_location("b1", 37.45, -122.65),
            make_location("b2", 37.45, -122.65),
        ]
        first, second = cluster_locations(locs)

        state = activate(ClusterUIState(), first).state
        state = activate(state, second).state

        assert is_expanded(state, first)
        assert is_expanded(state, second)

        state = select_member(state, first, "a1").state
        assert not is_expanded(state, first)
        assert is_expanded(state, second)


class TestHashableValues:
    """Frozen value types can be used in sets and as dict keys."""

    def test_cluster_and_event_hashable(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state
        event = select_member(state, four_cluster, "m0").event

        assert {four_cluster, four_cluster} == {four_cluster}
        assert {event: "seen"}[event] == "seen"
        assert hash(expanded_layout(four_cluster)[0]) == hash(expanded_layout(four_cluster)[0])


class TestHover:
    def test_hover_and_unhover(self):
        state = hover(ClusterUIState(), "m1")
        assert state.hovered_id == "m1"

        assert unhover(state).hovered_id is None


# ==============================================================================
# Reconciliation Tests
# ==============================================================================

class TestReconcile:
    """Carrying state across re-clustering."""

    def test_expansion_survives_same_cluster(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state

        assert reconcile(state, [four_cluster]) == state

    def test_expansion_dropped_when_cluster_gone(self, four_cluster, singleton):
        state = activate(ClusterUIState(), four_cluster).state
        state = hover(state, "m1")

        reconciled = reconcile(state, [singleton])

        assert reconciled.expanded == frozenset()
        assert reconciled.hovered_id is None

    def test_expansion_dropped_when_cluster_becomes_singleton(self, make_location):
        a = make_location("a", 37.70, -122.40)
        b = make_location("b", 37.70, -122.40)
        pair = cluster_locations([a, b])[0]
        state = activate(ClusterUIState(), pair).state

        # Same seed id, but the cluster now has one member and a new id.
        recomputed = cluster_locations([a])

        assert reconcile(state, recomputed).expanded == frozenset()

    def test_selection_kept_while_location_present(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state
        state = select_member(state, four_cluster, "m3").state

        assert reconcile(state, [four_cluster]).selected_id == "m3"


# ==============================================================================
# Layout Tests
# ==============================================================================

class TestExpandedLayout:
    """Radial placement of expanded members."""

    def test_four_members_at_right_angles(self, four_cluster):
        placements = expanded_layout(four_cluster)

        assert [p.angle_degrees for p in placements] == pytest.approx([0.0, 90.0, 180.0, 270.0])

    def test_offsets_on_circle(self, four_cluster):
        placements = expanded_layout(four_cluster, radius=40.0)

        assert placements[0].offset_x == pytest.approx(40.0)
        assert placements[0].offset_y == pytest.approx(0.0, abs=1e-9)
        assert placements[1].offset_x == pytest.approx(0.0, abs=1e-9)
        assert placements[1].offset_y == pytest.approx(40.0)
        for p in placements:
            assert math.hypot(p.offset_x, p.offset_y) == pytest.approx(40.0)

    def test_select_member_at_ninety_degrees(self, four_cluster):
        state = activate(ClusterUIState(), four_cluster).state
        at_ninety = next(p for p in expanded_layout(four_cluster) if p.angle_degrees == pytest.approx(90.0))

        transition = select_member(state, four_cluster, at_ninety.location.id)

        assert transition.event.location == four_cluster.locations[1]
        assert phase_of(transition.state, four_cluster) is ClusterPhase.COLLAPSED

    def test_selected_member_raised(self, four_cluster):
        placements = expanded_layout(four_cluster, selected_id="m2")

        assert [p.z_index for p in placements] == [20, 20, 25, 20]

    def test_layout_recomputed_each_call(self, four_cluster):
        assert expanded_layout(four_cluster) == expanded_layout(four_cluster)
        assert expanded_layout(four_cluster, radius=10.0)[0].offset_x == pytest.approx(10.0)


class TestMarkerDecorations:
    def test_z_index(self, four_cluster, singleton):
        empty = ClusterUIState()

        assert marker_z_index(singleton, empty) == 10
        assert marker_z_index(four_cluster, empty) == 15
        assert marker_z_index(singleton, ClusterUIState(selected_id="solo")) == 20
        assert marker_z_index(four_cluster, ClusterUIState(selected_id="m0")) == 25

    def test_category_indicators(self, four_cluster):
        assert [c.value for c in category_indicators(four_cluster)] == ["cafe", "bar", "park"]
