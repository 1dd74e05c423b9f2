"""
Tests for the Qt signal adapter.

Signals are connected to plain callables, so they are delivered directly
and no QApplication or event loop is needed.
"""
from datetime import datetime, timedelta

import pytest

pytest.importorskip("PyQt6.QtCore")

from timeline_lanes.interaction.qt_bridge import SessionSignals
from timeline_lanes.interaction.session import InteractionSession
from timeline_lanes.interfaces import StaticIntervalSource
from timeline_lanes.timing.snap_calculator import SnapCalculator
from timeline_lanes.types import HitZone, InteractionMode, Interval, ViewWindow


def march(day: int) -> datetime:
    return datetime(2025, 3, day)


@pytest.fixture
def bridge():
    intervals = [Interval("A", march(1), march(3)), Interval("B", march(2), march(4))]
    session = InteractionSession(
        StaticIntervalSource(intervals),
        ViewWindow(march(1), march(31), 120.0),
        SnapCalculator(1.0),
    )
    return SessionSignals(session)


@pytest.fixture
def received(bridge):
    events = {"started": [], "candidate": [], "committed": [], "cancelled": [], "status": []}
    bridge.gesture_started.connect(lambda item_id, mode: events["started"].append((item_id, mode)))
    bridge.candidate_changed.connect(events["candidate"].append)
    bridge.gesture_committed.connect(events["committed"].append)
    bridge.gesture_cancelled.connect(events["cancelled"].append)
    bridge.status_message.connect(lambda message, is_error: events["status"].append((message, is_error)))
    return events


class TestSessionSignals:
    """Tests for SessionSignals."""

    def test_drag_emits_started_candidates_and_commit(self, bridge, received):
        assert bridge.pointer_down("A", 10, HitZone.BODY)
        bridge.pointer_move(140)
        bridge.pointer_move(150)
        bridge.pointer_move(250)
        final = bridge.pointer_up()

        assert final == Interval("A", march(3), march(5))
        assert received["started"] == [("A", InteractionMode.DRAGGING)]
        # 140 and 150 snap to the same day
        assert [u.new_interval.start for u in received["candidate"]] == [march(2), march(3)]
        assert len(received["committed"]) == 1
        assert received["committed"][0].committed
        assert received["status"] == [("Moved 'A' by 2d", False)]

    def test_unchanged_commit_emits_nothing(self, bridge, received):
        bridge.pointer_down("A", 10, HitZone.BODY)
        bridge.pointer_move(20)
        assert bridge.pointer_up() == Interval("A", march(1), march(3))
        assert received["committed"] == []
        assert received["status"] == []

    def test_resize_status_message(self, bridge, received):
        bridge.pointer_down("B", 121, HitZone.LEADING_EDGE)
        bridge.pointer_move(1)
        bridge.pointer_up()
        assert received["status"] == [("Resized start of 'B' by -1d", False)]

    def test_cancel_emits_original(self, bridge, received):
        bridge.pointer_down("B", 470, HitZone.TRAILING_EDGE)
        bridge.pointer_move(590)
        assert bridge.pointer_cancel() == Interval("B", march(2), march(4))
        assert received["cancelled"] == [Interval("B", march(2), march(4))]
        assert received["committed"] == []
        assert received["status"] == [("Cancelled edit of 'B'", False)]

    def test_ignored_pointer_down_emits_nothing(self, bridge, received):
        bridge.pointer_down("A", 10, HitZone.BODY)
        assert not bridge.pointer_down("B", 200, HitZone.BODY)
        assert len(received["started"]) == 1

    def test_status_uses_unit_of_gesture_view(self, bridge, received):
        bridge.pointer_down("A", 10, HitZone.BODY)
        bridge.session.view = ViewWindow(march(1), march(31), 5.0, unit=timedelta(hours=1))
        bridge.pointer_move(250)
        bridge.pointer_up()
        assert received["status"] == [("Moved 'A' by 2d", False)]
