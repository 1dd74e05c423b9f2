"""
Snap Calculator

Quantizes time deltas to a granularity (e.g. whole days).

Design:
- Works in float units, returns instants/deltas in the host's type
- Rounds to the nearest multiple (not truncation), so pointer jitter
  below half a step never produces a visible change
- Uses integer step counts for exact results: a delta of two steps is
  exactly ``2 * step``, so durations survive a drag unchanged
"""

import math
from typing import Any, Optional

from .time_converter import TimeConverter


class SnapCalculator:
    """
    Snaps time deltas to multiples of a granularity.

    The granularity is given in time units (``1.0`` = one day when the
    view unit is a day, ``1 / 24`` = one hour).
    """

    def __init__(self, granularity: Optional[float] = 1.0, snap_enabled: bool = True):
        """
        Initialize snap calculator.

        Args:
            granularity: Step size in time units, or None to disable snapping
            snap_enabled: Whether snapping is applied
        """
        if granularity is not None and granularity <= 0:
            raise ValueError(f"Snap granularity must be positive, got {granularity}")
        self.granularity = granularity
        self.snap_enabled = snap_enabled

    @property
    def active(self) -> bool:
        """Whether snapping currently changes values."""
        return self.snap_enabled and self.granularity is not None

    def snap_steps(self, units: float) -> Optional[int]:
        """
        Number of whole steps nearest to ``units``.

        Returns:
            Step count, or None when snapping is inactive
        """
        if not self.active:
            return None
        # Halves round toward +inf
        return math.floor(units / self.granularity + 0.5)

    def snap_units(self, units: float) -> float:
        """Snap a unit count to the nearest multiple of the granularity."""
        steps = self.snap_steps(units)
        if steps is None:
            return units
        return steps * self.granularity

    def snap_delta(self, units: float, unit: Any) -> Any:
        """
        Snap a unit count and convert it to a time delta.

        Args:
            units: Unrounded delta in units
            unit: Length of one unit (timedelta or number)

        Returns:
            Time delta, an exact multiple of ``granularity * unit`` when active
        """
        steps = self.snap_steps(units)
        if steps is None:
            return TimeConverter.units_to_delta(units, unit)
        step = TimeConverter.units_to_delta(self.granularity, unit)
        return step * steps
