"""
Interaction Components

Hit testing, the gesture state machine and its Qt adapter.
"""

from .hit_test import hit_zone_at, resize_handle_width
from .session import (
    InteractionSession,
    advance_gesture,
    begin_gesture,
    cancel_gesture,
    end_gesture,
)
from .qt_bridge import SessionSignals

__all__ = [
    'hit_zone_at',
    'resize_handle_width',
    'InteractionSession',
    'advance_gesture',
    'begin_gesture',
    'cancel_gesture',
    'end_gesture',
    'SessionSignals',
]
