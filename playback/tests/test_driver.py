"""Playback driver tests

Verifies the visual rules applied per event, cursor handling, and that
reset() followed by a replay reproduces the original playback exactly.
"""

import pytest

from tarjan import SAMPLE_EDGES, SAMPLE_NODES, classify_edges, sample_graph
from playback import (
    InMemorySurface,
    PatchSurface,
    PlaybackDriver,
    PlaybackStatus,
    element_ids,
)


def make_driver(nodes, edges, directed=True, surface=None):
    events = classify_edges(nodes, edges, directed)
    surface = surface if surface is not None else InMemorySurface()
    return PlaybackDriver(events, surface), surface


class TestStepRules:
    """Each event kind applies the right classes."""

    def test_node_entered_marks_visiting_and_current(self):
        driver, surface = make_driver([0, 1], [(0, 1)])

        driver.step()  # enter 0

        assert surface.classes_of("0") == {"visiting", "current"}

    def test_entering_child_moves_current(self):
        driver, surface = make_driver([0, 1], [(0, 1)])

        driver.step()  # enter 0
        driver.step()  # tree 0-1
        driver.step()  # enter 1

        assert surface.classes_of("0") == {"visiting"}
        assert surface.classes_of("1") == {"visiting", "current"}
        assert surface.classes_of("0-1") == {"tree"}

    def test_finishing_child_reactivates_parent(self):
        driver, surface = make_driver([0, 1], [(0, 1)])

        for _ in range(4):  # enter 0, tree 0-1, enter 1, finish 1
            driver.step()

        assert surface.classes_of("1") == {"visited"}
        assert surface.classes_of("0") == {"visiting", "current"}

    def test_finishing_root_leaves_no_current(self):
        driver, surface = make_driver([0, 1], [])

        driver.step()  # enter 0
        driver.step()  # finish 0

        assert surface.classes_of("0") == {"visited"}

        driver.step()  # enter 1
        assert surface.classes_of("0") == {"visited"}
        assert surface.classes_of("1") == {"visiting", "current"}

    def test_edge_classes_applied(self):
        driver, surface = make_driver(SAMPLE_NODES, SAMPLE_EDGES)

        driver.run()

        assert surface.classes_of("3-1") == {"back"}
        assert surface.classes_of("4-2") == {"cross"}
        assert surface.classes_of("0-7") == {"forward"}
        assert all(surface.classes_of(str(n)) == {"visited"} for n in SAMPLE_NODES)


class TestCursor:
    """Cursor, completion and status."""

    def test_step_returns_events_in_order_then_none(self):
        driver, _ = make_driver([0, 1, 2], [(0, 1), (1, 2)])

        replayed = [driver.step() for _ in range(driver.total)]

        assert replayed == list(driver.events)
        assert driver.step() is None
        assert driver.cursor == driver.total

    def test_status_transitions(self):
        driver, _ = make_driver([0], [])

        assert driver.status == PlaybackStatus.IDLE
        assert not driver.is_complete()
        driver.step()
        assert driver.status == PlaybackStatus.PLAYING
        driver.step()
        assert driver.status == PlaybackStatus.COMPLETE
        assert driver.is_complete()

    def test_empty_log_is_complete(self):
        driver = PlaybackDriver([], InMemorySurface())

        assert driver.is_complete()
        assert driver.step() is None


class TestReset:
    """reset() returns to the initial state and replays identically."""

    @pytest.mark.parametrize("steps", [0, 1, 7, 1000])
    def test_reset_clears_state(self, steps):
        graph = sample_graph()
        surface = InMemorySurface(element_ids(graph))
        driver, _ = make_driver(graph.nodes, graph.edges, surface=surface)
        initial = surface.snapshot()

        for _ in range(steps):
            driver.step()
        driver.reset()

        assert driver.cursor == 0
        assert surface.snapshot() == initial

    def test_replay_after_reset_is_identical(self):
        graph = sample_graph(directed=False)
        surface = InMemorySurface(element_ids(graph))
        driver, _ = make_driver(graph.nodes, graph.edges, directed=False, surface=surface)

        first_pass = []
        while driver.step() is not None:
            first_pass.append(surface.snapshot())

        for _ in range(5):
            driver.reset()
        second_pass = []
        while driver.step() is not None:
            second_pass.append(surface.snapshot())

        assert first_pass == second_pass

    def test_reset_mid_playback_forgets_current(self):
        driver, surface = make_driver([0, 1], [(0, 1)])
        driver.step()
        driver.reset()

        driver.step()  # enter 0 again
        assert surface.classes_of("0") == {"visiting", "current"}


class TestPatchSurface:
    """PatchSurface turns class changes into JSON Patch ops."""

    def test_drain_patch_reports_touched_elements(self):
        surface = PatchSurface(["0", "1", "0-1"])
        driver = PlaybackDriver(classify_edges([0, 1], [(0, 1)]), surface)

        driver.step()  # enter 0
        assert surface.drain_patch() == [
            {"op": "replace", "path": "/classes/0", "value": ["current", "visiting"]},
        ]

        driver.step()  # tree 0-1
        assert surface.drain_patch() == [
            {"op": "replace", "path": "/classes/0-1", "value": ["tree"]},
        ]
        assert surface.drain_patch() == []

    def test_state_lists_every_element(self):
        surface = PatchSurface(["0", "1", "0-1"])

        assert surface.state() == {"classes": {"0": [], "1": [], "0-1": []}}

    def test_clear_drops_pending_ops(self):
        surface = PatchSurface(["0"])
        driver = PlaybackDriver(classify_edges([0], []), surface)
        driver.step()

        driver.reset()

        assert surface.drain_patch() == []
        assert surface.state() == {"classes": {"0": []}}
