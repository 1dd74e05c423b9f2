"""
Timeline Lanes
==============

Lane layout and pointer interaction core for calendar/timeline views.
Designed to be **standalone and reusable**: the host renders, the package
decides where items go and how gestures change them.

Directory Structure
-------------------
- layout/       - Lane assignment and lane placement
- timing/       - Instant/pixel mapping, snapping, week grid
- interaction/  - Hit testing, gesture state machine, Qt adapter
- settings/     - Settings schema and storage

Import Examples
---------------
    from timeline_lanes import assign_lanes, interval_to_rect, InteractionSession
    from timeline_lanes.types import Interval, ViewWindow, HitZone
    from timeline_lanes.timing import SnapCalculator, WeekGrid
    from timeline_lanes.interaction import SessionSignals, hit_zone_at
    from timeline_lanes.settings import TimelineSettingsStore

Features
--------
- First-fit lane assignment with half-open overlap (touching items share a lane)
- Affine instant <-> pixel mapping for datetime, date or numeric instants
- Snap-to-granularity with rounding, so sub-half-step jitter is ignored
- Drag, resize-from-start and resize-from-end with inversion rejected
- Commit vs. cancel distinction for every gesture
- Week calendar placement with multi-day spans
"""

from .types import (
    HitZone,
    InteractionMode,
    InteractionState,
    Interval,
    IntervalUpdate,
    InvalidIntervalError,
    ItemRect,
    Rect,
    ViewWindow,
)
from .layout import LaneLayout, assign_lanes
from .timing import (
    SnapCalculator,
    interval_to_rect,
    pixel_delta_to_time_delta,
)
from .interaction import InteractionSession, hit_zone_at
from .interfaces import IntervalSourceInterface, StaticIntervalSource
from .items import TimelineItem, apply_update, items_with_lanes, layout_item_rects

__version__ = "0.1.0"

__all__ = [
    'HitZone',
    'InteractionMode',
    'InteractionState',
    'Interval',
    'IntervalUpdate',
    'InvalidIntervalError',
    'ItemRect',
    'Rect',
    'ViewWindow',
    'LaneLayout',
    'assign_lanes',
    'SnapCalculator',
    'interval_to_rect',
    'pixel_delta_to_time_delta',
    'InteractionSession',
    'hit_zone_at',
    'IntervalSourceInterface',
    'StaticIntervalSource',
    'TimelineItem',
    'apply_update',
    'items_with_lanes',
    'layout_item_rects',
]
