"""
Timeline Data Types
====================

Public data contracts for the lane layout and interaction core.

These types define the input/output interface of the package.
Hosts pass intervals and a view window in, and receive lane indices,
rectangles and interval updates back. They never need to know about
internal representations.

All types are dataclasses for easy comparison and copying.
Instants can be any comparable values that support subtraction
(``datetime``, ``date`` or plain numbers) as long as a working set
uses one kind consistently.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Any, Hashable, Optional
from enum import Enum, auto


class InvalidIntervalError(ValueError):
    """Raised when an interval would have ``start >= end``."""


def default_unit_for(instant: Any) -> Any:
    """
    Get the natural time unit for an instant.

    Calendar instants (``datetime``/``date``) use whole days,
    numeric instants use ``1``.
    """
    if isinstance(instant, (datetime, date)):
        return timedelta(days=1)
    return 1


def is_date_only(instant: Any) -> bool:
    """Whether an instant is a calendar date with no time of day."""
    return isinstance(instant, date) and not isinstance(instant, datetime)


# =============================================================================
# Input Types (Data the host passes in)
# =============================================================================

@dataclass(frozen=True)
class Interval:
    """
    Half-open time range ``[start, end)`` of one item.

    Attributes:
        id: Identifier, unique within a working set
        start: Start instant (inclusive)
        end: End instant (exclusive), always greater than start

    Example:
        interval = Interval("a", datetime(2025, 3, 1), datetime(2025, 3, 3))
    """
    id: Hashable
    start: Any
    end: Any

    def __post_init__(self):
        """Validate interval data."""
        if not self.start < self.end:
            raise InvalidIntervalError(
                f"Interval {self.id!r} must have start < end "
                f"(got start={self.start!r}, end={self.end!r})"
            )

    @property
    def duration(self) -> Any:
        """Length of the interval (``end - start``)."""
        return self.end - self.start

    def shift(self, delta: Any) -> 'Interval':
        """Move both ends by ``delta``."""
        return replace(self, start=self.start + delta, end=self.end + delta)

    def with_start(self, start: Any) -> 'Interval':
        """Copy with a new start (raises InvalidIntervalError if inverted)."""
        return replace(self, start=start)

    def with_end(self, end: Any) -> 'Interval':
        """Copy with a new end (raises InvalidIntervalError if inverted)."""
        return replace(self, end=end)


@dataclass(frozen=True)
class ViewWindow:
    """
    Visible time range and pixel density.

    Defines the affine mapping between instants and horizontal pixels:
    ``pixel(t) = (t - window_start) / unit * pixels_per_unit``.

    Attributes:
        window_start: First visible instant (pixel 0)
        window_end: Last visible instant
        pixels_per_unit: Zoom level, pixels per time unit (must be > 0)
        unit: Length of one time unit. ``None`` picks one day for
              calendar instants and ``1`` for numbers.
    """
    window_start: Any
    window_end: Any
    pixels_per_unit: float
    unit: Any = None

    def __post_init__(self):
        """Validate window data."""
        if self.pixels_per_unit is None or self.pixels_per_unit <= 0:
            raise ValueError(f"pixels_per_unit must be positive, got {self.pixels_per_unit}")
        if not self.window_start < self.window_end:
            raise ValueError(
                f"View window must have window_start < window_end "
                f"(got {self.window_start!r} .. {self.window_end!r})"
            )
        if self.unit is None:
            object.__setattr__(self, 'unit', default_unit_for(self.window_start))

    @property
    def span_units(self) -> float:
        """Visible length in time units."""
        return (self.window_end - self.window_start) / self.unit

    @property
    def width(self) -> float:
        """Total width of the window in pixels."""
        return self.span_units * self.pixels_per_unit


# =============================================================================
# Output Types (Data the core hands back)
# =============================================================================

@dataclass(frozen=True)
class Rect:
    """Horizontal placement of an interval inside a view window."""
    left: float
    width: float

    @property
    def right(self) -> float:
        """Right edge in pixels."""
        return self.left + self.width


@dataclass(frozen=True)
class ItemRect:
    """Full rendering rectangle for an item (horizontal span plus lane row)."""
    item_id: Hashable
    left: float
    width: float
    top: float
    height: float
    lane: int


class HitZone(Enum):
    """Which part of a rendered item the pointer went down on."""
    BODY = auto()
    LEADING_EDGE = auto()    # Resize handle at the start edge
    TRAILING_EDGE = auto()   # Resize handle at the end edge


class InteractionMode(Enum):
    """State machine for pointer gestures."""
    NONE = auto()            # Idle, no gesture active
    DRAGGING = auto()
    RESIZING_START = auto()
    RESIZING_END = auto()


@dataclass(frozen=True)
class InteractionState:
    """
    Transient state of one pointer gesture.

    Created on pointer-down, replaced on every pointer-move and reset
    to the idle state on pointer-up or cancellation.

    Attributes:
        mode: Current gesture mode (NONE when idle)
        target_id: Id of the item being edited
        origin_pointer: Pointer coordinate at pointer-down
        origin_interval: Snapshot of the item's interval at pointer-down
        accumulated_delta: Pointer offset from origin_pointer in pixels
        candidate: Last valid candidate interval of the gesture
        view: View window captured at pointer-down
    """
    mode: InteractionMode = InteractionMode.NONE
    target_id: Optional[Hashable] = None
    origin_pointer: float = 0.0
    origin_interval: Optional[Interval] = None
    accumulated_delta: float = 0.0
    candidate: Optional[Interval] = None
    view: Optional[ViewWindow] = None

    @property
    def is_active(self) -> bool:
        """Whether a gesture is in progress."""
        return self.mode != InteractionMode.NONE


IDLE_STATE = InteractionState()


@dataclass
class IntervalUpdate:
    """
    Update event produced by a gesture.

    Emitted for every valid candidate (``committed=False``) and once more
    when the gesture is committed on pointer-up (``committed=True``).
    Contains before/after state so hosts can build their own undo.
    """
    item_id: Hashable
    mode: InteractionMode
    old_interval: Interval
    new_interval: Interval
    committed: bool = False

    @property
    def start_changed(self) -> bool:
        """Whether the start instant changed."""
        return self.old_interval.start != self.new_interval.start

    @property
    def end_changed(self) -> bool:
        """Whether the end instant changed."""
        return self.old_interval.end != self.new_interval.end

    @property
    def changed(self) -> bool:
        """Whether anything changed."""
        return self.start_changed or self.end_changed
