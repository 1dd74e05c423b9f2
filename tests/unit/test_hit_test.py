"""
Tests for hit testing of rendered items.
"""
from timeline_lanes.interaction.hit_test import hit_zone_at, resize_handle_width
from timeline_lanes.types import HitZone, Rect


class TestResizeHandleWidth:
    """Tests for resize_handle_width()."""

    def test_wide_item_uses_full_handle(self):
        assert resize_handle_width(240) == 8

    def test_narrow_item_uses_minimum_handle(self):
        assert resize_handle_width(20) == 3
        assert resize_handle_width(10) == 3

    def test_medium_item_keeps_move_area(self):
        width = resize_handle_width(30)
        assert width * 2 + 8 <= 30


class TestHitZoneAt:
    """Tests for hit_zone_at()."""

    def setup_method(self):
        self.rect = Rect(left=100, width=240)

    def test_leading_edge(self):
        assert hit_zone_at(self.rect, 100) == HitZone.LEADING_EDGE
        assert hit_zone_at(self.rect, 108) == HitZone.LEADING_EDGE

    def test_trailing_edge(self):
        assert hit_zone_at(self.rect, 340) == HitZone.TRAILING_EDGE
        assert hit_zone_at(self.rect, 333) == HitZone.TRAILING_EDGE

    def test_body(self):
        assert hit_zone_at(self.rect, 109) == HitZone.BODY
        assert hit_zone_at(self.rect, 220) == HitZone.BODY

    def test_outside(self):
        assert hit_zone_at(self.rect, 99) is None
        assert hit_zone_at(self.rect, 341) is None

    def test_custom_handle_width(self):
        assert hit_zone_at(self.rect, 115, handle_width=20) == HitZone.LEADING_EDGE
