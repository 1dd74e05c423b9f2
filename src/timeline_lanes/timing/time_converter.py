"""
Time Converter

Converts between instants/durations and plain float time units.
All pixel math works in units; instants stay in the host's own type.

Design:
- Pure functions (no side effects)
- The unit is a parameter (not stored state)
- Works for datetime/date instants (unit is a timedelta) and for
  numeric instants (unit is a number)
"""

import math
from datetime import date, datetime, timedelta
from typing import Any, Union

Instant = Union[datetime, date, int, float]

ONE_DAY = timedelta(days=1)


class TimeConverter:
    """
    Converts between time deltas and float units.

    All methods are static - pure functions with no state.
    """

    @staticmethod
    def delta_to_units(delta: Any, unit: Any) -> float:
        """
        Convert a time delta to units.

        Args:
            delta: Time delta (timedelta or number)
            unit: Length of one unit (same kind as delta)

        Returns:
            Delta expressed in units
        """
        if not unit:
            raise ValueError(f"Unit must be non-zero, got {unit!r}")
        return delta / unit

    @staticmethod
    def units_to_delta(units: float, unit: Any) -> Any:
        """
        Convert units back to a time delta.

        Args:
            units: Number of units (may be fractional or negative)
            unit: Length of one unit

        Returns:
            Time delta of the same kind as ``unit``
        """
        return unit * units

    @staticmethod
    def elapsed_units(start: Any, end: Any, unit: Any) -> float:
        """Units elapsed from ``start`` to ``end`` (negative if end < start)."""
        return TimeConverter.delta_to_units(end - start, unit)

    @staticmethod
    def offset(instant: Any, units: float, unit: Any) -> Any:
        """Instant shifted by ``units`` units."""
        return instant + TimeConverter.units_to_delta(units, unit)

    @staticmethod
    def round_to_days(delta: timedelta) -> timedelta:
        """Round a timedelta to the nearest whole day (halves toward +inf)."""
        return timedelta(days=math.floor(delta / ONE_DAY + 0.5))

    @staticmethod
    def parse_instant(value: Any) -> Instant:
        """
        Parse an instant from host data.

        Accepts datetime/date/number values as-is and ISO-8601 strings
        (``"2025-03-01"`` or ``"2025-03-01T09:30:00"``).

        Raises:
            ValueError: If a string is not valid ISO-8601
            TypeError: If the value is not a supported instant
        """
        if isinstance(value, (datetime, date, int, float)) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip()
            # fromisoformat() before 3.11 rejects a trailing Z
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text)
        raise TypeError(f"Unsupported instant type: {type(value).__name__}")

    @staticmethod
    def format_units(units: float, unit: Any) -> str:
        """Short label for a number of units (``"2d"``, ``"1.5h"``, ``"3"``)."""
        if isinstance(unit, timedelta):
            total_seconds = units * unit.total_seconds()
            if total_seconds % 86400 == 0:
                return f"{total_seconds / 86400:g}d"
            if total_seconds % 3600 == 0 or abs(total_seconds) >= 3600:
                return f"{total_seconds / 3600:g}h"
            return f"{total_seconds / 60:g}m"
        return f"{units:g}"
