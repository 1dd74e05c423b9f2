"""
Tests for host item helpers.
"""
from datetime import datetime

import pytest

from timeline_lanes.interfaces import IntervalSourceInterface, StaticIntervalSource, find_interval
from timeline_lanes.items import (
    DEFAULT_ITEM_COLOR,
    TimelineItem,
    apply_update,
    find_item,
    items_with_lanes,
    layout_item_rects,
)
from timeline_lanes.layout.lanes import LaneLayout
from timeline_lanes.types import Interval, InvalidIntervalError, ItemRect, ViewWindow


def march(day: int) -> datetime:
    return datetime(2025, 3, day)


@pytest.fixture
def items():
    return [
        TimelineItem("1", "Kickoff", march(1), march(3), "#ef4444"),
        TimelineItem("2", "Design", march(2), march(4)),
        TimelineItem("3", "Review", march(5), march(6)),
    ]


class TestTimelineItem:
    """Tests for TimelineItem."""

    def test_inverted_range_raises(self):
        with pytest.raises(InvalidIntervalError):
            TimelineItem("x", "Broken", march(3), march(3))

    def test_interval(self, items):
        assert items[0].interval == Interval("1", march(1), march(3))

    def test_to_dict(self, items):
        data = items[0].to_dict()
        assert data == {
            "id": "1",
            "title": "Kickoff",
            "start": "2025-03-01T00:00:00",
            "end": "2025-03-03T00:00:00",
            "color": "#ef4444",
        }

    def test_from_dict_round_trip(self, items):
        assert TimelineItem.from_dict(items[1].to_dict()) == items[1]

    def test_from_dict_legacy_keys(self):
        item = TimelineItem.from_dict({
            "id": 7,
            "name": "Launch",
            "startDate": "2025-03-10",
            "endDate": "2025-03-12",
        })
        assert item.title == "Launch"
        assert item.start == march(10)
        assert item.color == DEFAULT_ITEM_COLOR


class TestItemHelpers:
    """Tests for items_with_lanes / apply_update / layout_item_rects."""

    def test_find_item(self, items):
        assert find_item(items, "2").title == "Design"
        assert find_item(items, "9") is None

    def test_items_with_lanes(self, items):
        laid_out = items_with_lanes(reversed(items))
        assert [(item.id, item.lane) for item in laid_out] == [("1", 0), ("2", 1), ("3", 0)]
        assert items[0].lane is None

    def test_apply_update(self, items):
        updated = apply_update(items, Interval("1", march(3), march(5)))
        assert updated[0].start == march(3)
        assert updated[0].end == march(5)
        assert updated[0].title == "Kickoff"
        assert items[0].start == march(1)

    def test_apply_update_unknown_id(self, items):
        assert apply_update(items, Interval("9", march(1), march(2))) == items

    def test_lanes_after_update(self, items):
        """Moving item 1 past item 2 changes the lane assignment."""
        updated = apply_update(items, Interval("1", march(4), march(6)))
        lanes = {item.id: item.lane for item in items_with_lanes(updated)}
        assert lanes == {"2": 0, "1": 0, "3": 1}

    def test_layout_item_rects(self, items):
        view = ViewWindow(march(1), march(31), 120.0)
        rects = layout_item_rects(view, items, LaneLayout(lane_height=50, header_height=20))
        assert rects[1] == ItemRect(item_id="2", left=120, width=240, top=70, height=50, lane=1)
        assert rects[2].top == 20


class TestIntervalSource:
    """Tests for StaticIntervalSource and find_interval()."""

    def test_static_source_is_a_source(self):
        assert isinstance(StaticIntervalSource(), IntervalSourceInterface)

    def test_find_interval_converts_items(self, items):
        source = StaticIntervalSource(items)
        assert find_interval(source, "3") == Interval("3", march(5), march(6))
        assert find_interval(source, "missing") is None

    def test_source_sees_host_edits(self, items):
        source = StaticIntervalSource(items)
        items.append(TimelineItem("4", "Retro", march(7), march(8)))
        assert find_interval(source, "4") is not None
