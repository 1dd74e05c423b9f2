"""
Timing System

Instant/pixel mapping, quantization and calendar grids.

Modules:
- TimeConverter: Convert between time deltas and float units
- SnapCalculator: Round time deltas to a granularity
- geometry: Affine instant <-> pixel mapping, proposals, zoom/pan
- WeekGrid: Week calendar placement with multi-day spans
"""

from .time_converter import TimeConverter
from .snap_calculator import SnapCalculator
from .geometry import (
    interval_to_rect,
    pan_view,
    pixel_delta_to_time_delta,
    pixel_to_time,
    propose_interval,
    time_to_pixel,
    zoom_view,
)
from .week_grid import WeekGrid, WeekItemStyle, start_of_week

__all__ = [
    'TimeConverter',
    'SnapCalculator',
    'interval_to_rect',
    'pan_view',
    'pixel_delta_to_time_delta',
    'pixel_to_time',
    'propose_interval',
    'time_to_pixel',
    'zoom_view',
    'WeekGrid',
    'WeekItemStyle',
    'start_of_week',
]
