"""
Tests for the week calendar grid.
"""
from datetime import date, datetime, timedelta

import pytest

from timeline_lanes.interaction.session import InteractionSession
from timeline_lanes.interfaces import StaticIntervalSource
from timeline_lanes.timing.snap_calculator import SnapCalculator
from timeline_lanes.timing.week_grid import WeekGrid, start_of_week
from timeline_lanes.types import HitZone, Interval


@pytest.fixture
def grid():
    # 2025-03-03 is a Monday
    return WeekGrid(date(2025, 3, 3))


class TestStartOfWeek:
    """Tests for start_of_week()."""

    def test_monday_start(self):
        assert start_of_week(date(2025, 3, 6)) == date(2025, 3, 3)
        assert start_of_week(date(2025, 3, 3)) == date(2025, 3, 3)

    def test_sunday_start(self):
        assert start_of_week(date(2025, 3, 6), week_starts_on=6) == date(2025, 3, 2)

    def test_accepts_datetime(self):
        assert start_of_week(datetime(2025, 3, 9, 18)) == date(2025, 3, 3)


class TestWeekGrid:
    """Tests for WeekGrid placement."""

    def test_defaults(self, grid):
        assert grid.grid_height == 13 * 60
        assert grid.days()[0] == date(2025, 3, 3)
        assert grid.days()[-1] == date(2025, 3, 9)

    def test_day_index(self, grid):
        assert grid.day_index(datetime(2025, 3, 5, 10)) == 2
        assert grid.day_index(datetime(2025, 3, 10)) is None
        assert grid.day_index(datetime(2025, 3, 2)) is None

    def test_single_day_item(self, grid):
        style = grid.item_style(Interval("m", datetime(2025, 3, 4, 9), datetime(2025, 3, 4, 10, 30)))
        assert style.start_day == 1
        assert style.end_day == 1
        assert style.left == pytest.approx(1 / 7)
        assert style.width == pytest.approx(1 / 7)
        assert style.top == 60
        assert style.height == 90
        assert not style.spans_days

    def test_multi_day_item(self, grid):
        style = grid.item_style(Interval("trip", datetime(2025, 3, 4, 9), datetime(2025, 3, 6, 17)))
        assert style.start_day == 1
        assert style.end_day == 3
        assert style.width == pytest.approx(3 / 7)
        assert style.height == 8 * 60
        assert style.spans_days

    def test_multi_day_item_ending_earlier_in_day_runs_to_bottom(self, grid):
        style = grid.item_style(Interval("overnight", datetime(2025, 3, 4, 18), datetime(2025, 3, 5, 9)))
        assert style.top == 10 * 60
        assert style.height == grid.grid_height - 10 * 60

    def test_end_past_week_is_clamped(self, grid):
        style = grid.item_style(Interval("long", datetime(2025, 3, 8, 9), datetime(2025, 3, 12, 10)))
        assert style.end_day == 6
        assert style.width == pytest.approx(2 / 7)

    def test_start_outside_week_is_hidden(self, grid):
        assert grid.item_style(Interval("x", datetime(2025, 3, 1, 9), datetime(2025, 3, 4, 10))) is None
        assert grid.item_style(Interval("y", datetime(2025, 3, 10, 9), datetime(2025, 3, 10, 10))) is None

    def test_day_at_x_is_clamped(self, grid):
        assert grid.day_at_x(0, 700) == 0
        assert grid.day_at_x(350, 700) == 3
        assert grid.day_at_x(-5, 700) == 0
        assert grid.day_at_x(900, 700) == 6

    def test_time_at_point(self, grid):
        assert grid.time_at_point(250, 90, 700) == datetime(2025, 3, 5, 9, 30)
        assert grid.time_at_point(0, -20, 700) == datetime(2025, 3, 3, 8)

    def test_week_navigation(self, grid):
        assert grid.next_week().week_start == date(2025, 3, 10)
        assert grid.previous_week().week_start == date(2025, 2, 24)
        assert grid.next_week().first_hour == grid.first_hour

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            WeekGrid(date(2025, 3, 3), first_hour=24)
        with pytest.raises(ValueError):
            WeekGrid(date(2025, 3, 3), hour_count=0)


class TestDayView:
    """Tests for vertical gestures through WeekGrid.day_view()."""

    def test_day_view_window(self, grid):
        view = grid.day_view(2)
        assert view.window_start == datetime(2025, 3, 5, 8)
        assert view.window_end == datetime(2025, 3, 5, 21)
        assert view.unit == timedelta(hours=1)
        assert view.pixels_per_unit == 60

    def test_day_view_out_of_range(self, grid):
        with pytest.raises(ValueError):
            grid.day_view(7)

    def test_resize_bottom_edge_by_quarter_hours(self, grid):
        meeting = Interval("m", datetime(2025, 3, 5, 9), datetime(2025, 3, 5, 10))
        session = InteractionSession(StaticIntervalSource([meeting]), grid.day_view(2), SnapCalculator(0.25))
        session.on_pointer_down("m", 120, HitZone.TRAILING_EDGE)
        assert session.on_pointer_move(152) == Interval("m", datetime(2025, 3, 5, 9), datetime(2025, 3, 5, 10, 30))


class TestWeekGestures:
    """Tests for day-span resizing and cross-day moves."""

    def setup_method(self):
        self.grid = WeekGrid(date(2025, 3, 3))
        self.trip = Interval("trip", datetime(2025, 3, 4, 9), datetime(2025, 3, 5, 10))
        self.meeting = Interval("m", datetime(2025, 3, 5, 9), datetime(2025, 3, 5, 10))

    def test_week_view_window(self):
        view = self.grid.week_view(700)
        assert view.window_start == datetime(2025, 3, 3)
        assert view.window_end == datetime(2025, 3, 10)
        assert view.unit == timedelta(days=1)
        assert view.pixels_per_unit == 100

    def test_week_view_rejects_zero_width(self):
        with pytest.raises(ValueError):
            self.grid.week_view(0)

    def test_resize_right_edge_extends_span(self):
        session = InteractionSession(StaticIntervalSource([self.trip]), self.grid.week_view(700))
        session.on_pointer_down("trip", 250, HitZone.TRAILING_EDGE)
        assert session.on_pointer_move(350) == Interval("trip", datetime(2025, 3, 4, 9), datetime(2025, 3, 6, 10))
        assert self.grid.item_style(session.on_pointer_up()).end_day == 3

    def test_resize_left_edge_keeps_time_of_day(self):
        session = InteractionSession(StaticIntervalSource([self.trip]), self.grid.week_view(700))
        session.on_pointer_down("trip", 100, HitZone.LEADING_EDGE)
        assert session.on_pointer_move(0) == Interval("trip", datetime(2025, 3, 3, 9), datetime(2025, 3, 5, 10))
        assert session.on_pointer_move(300) is None

    def test_move_to_another_day_and_time(self):
        moved = self.grid.move_interval(self.meeting, 210, 45, 700)
        assert moved == Interval("m", datetime(2025, 3, 7, 9, 45), datetime(2025, 3, 7, 10, 45))

    def test_move_with_half_hour_snap(self):
        moved = self.grid.move_interval(self.meeting, 210, 45, 700, SnapCalculator(0.5))
        assert moved == Interval("m", datetime(2025, 3, 7, 10), datetime(2025, 3, 7, 11))

    def test_small_horizontal_movement_stays_on_day(self):
        moved = self.grid.move_interval(self.meeting, -40, -90, 700)
        assert moved == Interval("m", datetime(2025, 3, 5, 7, 30), datetime(2025, 3, 5, 8, 30))

    def test_move_keeps_multi_day_duration(self):
        moved = self.grid.move_interval(self.trip, 100, 60, 700)
        assert moved.duration == self.trip.duration
        assert moved.start == datetime(2025, 3, 5, 10)
