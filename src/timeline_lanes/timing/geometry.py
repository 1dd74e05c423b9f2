"""
Timeline Geometry
=================

Pure functions mapping between instants and pixels, and turning pointer
deltas into proposed intervals.

Mapping (per ViewWindow):
    pixel(t) = (t - window_start) / unit * pixels_per_unit

The inverse mapping is quantized by a SnapCalculator when one is given.
Nothing here clamps to the visible window: intervals may extend or
scroll outside it.
"""

from typing import Any, Optional

from ..constants import MIN_PIXELS_PER_UNIT, MAX_PIXELS_PER_UNIT
from ..types import Interval, InteractionMode, InvalidIntervalError, Rect, ViewWindow, is_date_only
from .snap_calculator import SnapCalculator
from .time_converter import TimeConverter


# =============================================================================
# Instant <-> Pixel
# =============================================================================

def time_to_pixel(view: ViewWindow, instant: Any) -> float:
    """Horizontal pixel offset of an instant."""
    return TimeConverter.elapsed_units(view.window_start, instant, view.unit) * view.pixels_per_unit


def pixel_delta_to_time_delta(
    view: ViewWindow,
    pixel_delta: float,
    snap: Optional[SnapCalculator] = None
) -> Any:
    """
    Convert a pointer movement into a time delta.

    Args:
        view: Current view window
        pixel_delta: Pointer movement in pixels (positive = later)
        snap: Optional snap calculator; the delta is rounded to the
              nearest multiple of its granularity

    Returns:
        Time delta in the view's unit type (timedelta or number).
        Views over ``date`` instants always get whole days.
    """
    units = pixel_delta / view.pixels_per_unit
    if snap is None:
        delta = TimeConverter.units_to_delta(units, view.unit)
    else:
        delta = snap.snap_delta(units, view.unit)
    if is_date_only(view.window_start):
        # date + timedelta drops the time part, so round before it truncates
        return TimeConverter.round_to_days(delta)
    return delta


def pixel_to_time(view: ViewWindow, pixel: float, snap: Optional[SnapCalculator] = None) -> Any:
    """
    Instant under a horizontal pixel offset.

    Quantization is relative to ``window_start``, so a snapped result is
    always ``window_start`` plus a whole number of snap steps.
    """
    return view.window_start + pixel_delta_to_time_delta(view, pixel, snap)


def interval_to_rect(view: ViewWindow, interval: Interval) -> Rect:
    """
    Horizontal placement of an interval.

    Args:
        view: Current view window
        interval: Interval to place

    Returns:
        Rect with left offset and width in pixels
    """
    left = time_to_pixel(view, interval.start)
    width = TimeConverter.delta_to_units(interval.end - interval.start, view.unit) * view.pixels_per_unit
    return Rect(left=left, width=width)


# =============================================================================
# Proposals
# =============================================================================

def propose_interval(origin: Interval, mode: InteractionMode, time_delta: Any) -> Optional[Interval]:
    """
    Apply a time delta to an interval according to the gesture mode.

    - DRAGGING: both ends move, duration is unchanged
    - RESIZING_START: only start moves and must stay before end
    - RESIZING_END: only end moves and must stay after start

    Args:
        origin: Interval at the start of the gesture
        mode: Gesture mode
        time_delta: Time delta to apply

    Returns:
        The proposed interval, or None if it would be invalid
    """
    try:
        if mode == InteractionMode.DRAGGING:
            return origin.shift(time_delta)
        if mode == InteractionMode.RESIZING_START:
            return origin.with_start(origin.start + time_delta)
        if mode == InteractionMode.RESIZING_END:
            return origin.with_end(origin.end + time_delta)
    except InvalidIntervalError:
        return None
    return None


# =============================================================================
# Zoom / Pan
# =============================================================================

def zoom_view(
    view: ViewWindow,
    factor: float,
    min_pixels_per_unit: float = MIN_PIXELS_PER_UNIT,
    max_pixels_per_unit: float = MAX_PIXELS_PER_UNIT
) -> ViewWindow:
    """
    Scale the pixel density of a view, clamped to the zoom limits.

    Returns:
        A new ViewWindow (the input is not modified)
    """
    if factor <= 0:
        raise ValueError(f"Zoom factor must be positive, got {factor}")
    pixels_per_unit = view.pixels_per_unit * factor
    pixels_per_unit = max(min_pixels_per_unit, min(pixels_per_unit, max_pixels_per_unit))
    return ViewWindow(view.window_start, view.window_end, pixels_per_unit, view.unit)


def pan_view(view: ViewWindow, time_delta: Any) -> ViewWindow:
    """Shift the visible range by a time delta, keeping the zoom."""
    return ViewWindow(
        view.window_start + time_delta,
        view.window_end + time_delta,
        view.pixels_per_unit,
        view.unit,
    )
