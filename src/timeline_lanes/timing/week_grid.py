"""
Week Grid
=========

Geometry of a week calendar: one column per day, one row per hour.

Items are placed by day column (horizontal, as fractions of the grid width)
and by time of day (vertical, in pixels). An item spanning several days
covers every column from its start day to its end day; an end day past
the last column is drawn up to the last column.

Columns use fractions so the host can lay them out at any width; rows use
pixels because the hour height is fixed.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from ..constants import DAYS_PER_WEEK, WEEK_FIRST_HOUR, WEEK_HOUR_COUNT, WEEK_HOUR_HEIGHT
from ..types import Interval, ViewWindow
from .snap_calculator import SnapCalculator

ONE_DAY = timedelta(days=1)
ONE_HOUR = timedelta(hours=1)


def start_of_week(day: date, week_starts_on: int = 0) -> date:
    """
    First day of the week containing ``day``.

    Args:
        day: Any date (or datetime)
        week_starts_on: Weekday the week starts on (0 = Monday)
    """
    if isinstance(day, datetime):
        day = day.date()
    offset = (day.weekday() - week_starts_on) % DAYS_PER_WEEK
    return day - timedelta(days=offset)


@dataclass(frozen=True)
class WeekItemStyle:
    """
    Placement of an item in the week grid.

    Attributes:
        left: Left edge as a fraction of the grid width (0.0 - 1.0)
        width: Width as a fraction of the grid width
        top: Top edge in pixels from the first hour row
        height: Height in pixels
        start_day: Column of the start day
        end_day: Column of the (clamped) end day
    """
    left: float
    width: float
    top: float
    height: float
    start_day: int
    end_day: int

    @property
    def spans_days(self) -> bool:
        """Whether the item covers more than one column."""
        return self.end_day > self.start_day


class WeekGrid:
    """
    Week calendar layout.

    Instants are ``datetime`` values; the grid only looks at their
    calendar date and time of day.
    """

    def __init__(
        self,
        week_start: date,
        first_hour: int = WEEK_FIRST_HOUR,
        hour_count: int = WEEK_HOUR_COUNT,
        hour_height: float = WEEK_HOUR_HEIGHT,
        day_count: int = DAYS_PER_WEEK
    ):
        if isinstance(week_start, datetime):
            week_start = week_start.date()
        if not 0 <= first_hour < 24:
            raise ValueError(f"first_hour must be within 0-23, got {first_hour}")
        if hour_count <= 0 or hour_height <= 0 or day_count <= 0:
            raise ValueError("hour_count, hour_height and day_count must be positive")
        self.week_start = week_start
        self.first_hour = first_hour
        self.hour_count = hour_count
        self.hour_height = hour_height
        self.day_count = day_count

    @property
    def grid_height(self) -> float:
        """Height of all hour rows in pixels."""
        return self.hour_count * self.hour_height

    def days(self) -> List[date]:
        """Dates of all columns, left to right."""
        return [self.week_start + timedelta(days=i) for i in range(self.day_count)]

    def day_index(self, instant: datetime) -> Optional[int]:
        """Column of the instant's calendar day, or None if outside the week."""
        day = instant.date() if isinstance(instant, datetime) else instant
        index = (day - self.week_start).days
        if 0 <= index < self.day_count:
            return index
        return None

    def _hour_of(self, instant: datetime) -> float:
        return instant.hour + instant.minute / 60 + instant.second / 3600

    def item_style(self, interval: Interval) -> Optional[WeekItemStyle]:
        """
        Place an interval in the grid.

        Args:
            interval: Interval with datetime start/end

        Returns:
            WeekItemStyle, or None if the start day is not in this week
        """
        start_day = self.day_index(interval.start)
        if start_day is None:
            return None

        end_day = self.day_index(interval.end)
        if end_day is None:
            end_day = self.day_count - 1

        start_hour = self._hour_of(interval.start)
        end_hour = self._hour_of(interval.end)
        top = (start_hour - self.first_hour) * self.hour_height

        if end_hour > start_hour:
            height = (end_hour - start_hour) * self.hour_height
        else:
            # Multi-day span ending earlier in its day: run to the last row
            height = max(self.grid_height - top, 0.0)

        return WeekItemStyle(
            left=start_day / self.day_count,
            width=(end_day - start_day + 1) / self.day_count,
            top=top,
            height=height,
            start_day=start_day,
            end_day=end_day,
        )

    def day_at_x(self, x: float, grid_width: float) -> int:
        """Column under a horizontal pixel, clamped to the week."""
        day_width = grid_width / self.day_count
        index = int(x // day_width)
        return max(0, min(self.day_count - 1, index))

    def time_at_point(self, x: float, y: float, grid_width: float) -> datetime:
        """
        Instant under a pointer position.

        The column picks the day; the row offset is rounded to whole minutes
        and clamped to the first row.
        """
        day = self.week_start + timedelta(days=self.day_at_x(x, grid_width))
        minutes = max(0, round(y * 60 / self.hour_height))
        return datetime.combine(day, time(self.first_hour)) + timedelta(minutes=minutes)

    def day_view(self, day_index: int) -> ViewWindow:
        """
        Vertical view window of one day column.

        One unit is one hour and ``pixels_per_unit`` is the hour height, so
        the interaction session can drive vertical drags/resizes with it.
        """
        if not 0 <= day_index < self.day_count:
            raise ValueError(f"day_index must be within 0-{self.day_count - 1}, got {day_index}")
        day = self.week_start + timedelta(days=day_index)
        window_start = datetime.combine(day, time(self.first_hour))
        return ViewWindow(
            window_start=window_start,
            window_end=window_start + timedelta(hours=self.hour_count),
            pixels_per_unit=self.hour_height,
            unit=ONE_HOUR,
        )

    def week_view(self, grid_width: float) -> ViewWindow:
        """
        Horizontal view window of the whole week.

        One unit is one day and ``pixels_per_unit`` is the column width, so
        resizing through the leading/trailing edge changes the day span.
        """
        if grid_width <= 0:
            raise ValueError(f"grid_width must be positive, got {grid_width}")
        window_start = datetime.combine(self.week_start, time(0))
        return ViewWindow(
            window_start=window_start,
            window_end=window_start + timedelta(days=self.day_count),
            pixels_per_unit=grid_width / self.day_count,
            unit=ONE_DAY,
        )

    def drag_delta(
        self,
        dx: float,
        dy: float,
        grid_width: float,
        snap: Optional[SnapCalculator] = None
    ) -> timedelta:
        """
        Time delta of a pointer movement across the grid.

        Horizontal movement counts whole day columns (rounded). Vertical
        movement counts hours, snapped by ``snap`` (granularity in hours)
        or rounded to whole minutes when no snapping is active.
        """
        if grid_width <= 0:
            raise ValueError(f"grid_width must be positive, got {grid_width}")
        days = math.floor(dx / (grid_width / self.day_count) + 0.5)
        hours = dy / self.hour_height
        if snap is not None and snap.active:
            vertical = snap.snap_delta(hours, ONE_HOUR)
        else:
            vertical = timedelta(minutes=math.floor(hours * 60 + 0.5))
        return timedelta(days=days) + vertical

    def move_interval(
        self,
        origin: Interval,
        dx: float,
        dy: float,
        grid_width: float,
        snap: Optional[SnapCalculator] = None
    ) -> Interval:
        """
        Move an interval to another day and time of day in one gesture.

        Args:
            origin: Interval at the start of the drag
            dx: Horizontal pointer offset from the drag origin (pixels)
            dy: Vertical pointer offset from the drag origin (pixels)
            grid_width: Rendered width of all day columns
            snap: Optional vertical snapping, granularity in hours

        Returns:
            The shifted interval (duration unchanged)
        """
        return origin.shift(self.drag_delta(dx, dy, grid_width, snap))

    def _shifted(self, days: int) -> 'WeekGrid':
        return WeekGrid(
            self.week_start + timedelta(days=days),
            first_hour=self.first_hour,
            hour_count=self.hour_count,
            hour_height=self.hour_height,
            day_count=self.day_count,
        )

    def previous_week(self) -> 'WeekGrid':
        """Grid for the week before this one."""
        return self._shifted(-DAYS_PER_WEEK)

    def next_week(self) -> 'WeekGrid':
        """Grid for the week after this one."""
        return self._shifted(DAYS_PER_WEEK)
