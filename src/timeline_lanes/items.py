"""
Timeline Items
==============

Host-side item records and the helpers a view runs every render pass:
assign lanes, compute rectangles, merge updates back into the list.

The host owns the item list. Every helper here returns new objects and
leaves its inputs untouched.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Hashable, Iterable, List, Optional

from .layout.lanes import LaneLayout, assign_lanes
from .logging import TimelineLog as Log
from .timing.geometry import interval_to_rect
from .timing.time_converter import TimeConverter
from .types import Interval, InvalidIntervalError, ItemRect, ViewWindow

DEFAULT_ITEM_COLOR = "#3b82f6"


@dataclass(frozen=True)
class TimelineItem:
    """
    An item shown on the timeline.

    Attributes:
        id: Unique identifier
        title: Display title
        start: Start instant (inclusive)
        end: End instant (exclusive)
        color: Hex color used by the renderer
        lane: Lane index, set by items_with_lanes()

    Example:
        item = TimelineItem("1", "Kickoff", datetime(2025, 3, 1), datetime(2025, 3, 3))
    """
    id: Hashable
    title: str
    start: Any
    end: Any
    color: str = DEFAULT_ITEM_COLOR
    lane: Optional[int] = None

    def __post_init__(self):
        """Validate item data."""
        if not self.start < self.end:
            raise InvalidIntervalError(
                f"Item {self.id!r} must have start < end (got {self.start!r} .. {self.end!r})"
            )

    @property
    def interval(self) -> Interval:
        return Interval(self.id, self.start, self.end)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = {
            'id': self.id,
            'title': self.title,
            'start': self.start.isoformat() if hasattr(self.start, 'isoformat') else self.start,
            'end': self.end.isoformat() if hasattr(self.end, 'isoformat') else self.end,
            'color': self.color,
        }
        if self.lane is not None:
            result['lane'] = self.lane
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TimelineItem':
        """
        Create from dictionary.

        Accepts ``start``/``end`` as ISO strings or instants, and the legacy
        ``startDate``/``endDate`` and ``name`` keys.
        """
        start = data['start'] if 'start' in data else data['startDate']
        end = data['end'] if 'end' in data else data['endDate']
        return cls(
            id=data['id'],
            title=data.get('title', data.get('name', '')),
            start=TimeConverter.parse_instant(start),
            end=TimeConverter.parse_instant(end),
            color=data.get('color') or DEFAULT_ITEM_COLOR,
            lane=data.get('lane'),
        )


def find_item(items: Iterable[TimelineItem], item_id: Hashable) -> Optional[TimelineItem]:
    """Get an item by id, or None."""
    for item in items:
        if item.id == item_id:
            return item
    return None


def items_with_lanes(items: Iterable[TimelineItem]) -> List[TimelineItem]:
    """
    Copy items with their lane index filled in.

    Returns:
        Items sorted by start (ties keep input order), each with ``lane`` set
    """
    items = list(items)
    lanes = assign_lanes(items)
    ordered = sorted(items, key=lambda item: item.start)
    return [replace(item, lane=lanes[item.id]) for item in ordered]


def apply_update(items: Iterable[TimelineItem], interval: Interval) -> List[TimelineItem]:
    """
    Merge an interval update into the item list.

    The item with ``interval.id`` gets the new start/end; everything else is
    copied unchanged. Applying updates in arrival order makes the newest one win.

    Returns:
        New item list (unchanged copy if the id is unknown)
    """
    updated = []
    found = False
    for item in items:
        if item.id == interval.id:
            item = replace(item, start=interval.start, end=interval.end)
            found = True
        updated.append(item)
    if not found:
        Log.debug(f"apply_update: unknown item {interval.id!r}, list unchanged")
    return updated


def layout_item_rects(
    view: ViewWindow,
    items: Iterable[TimelineItem],
    lane_layout: Optional[LaneLayout] = None
) -> List[ItemRect]:
    """
    Rendering rectangles for all items.

    Args:
        view: Current view window (horizontal mapping)
        items: Items to place
        lane_layout: Vertical lane placement (default lane/header heights)

    Returns:
        One ItemRect per item, in lane assignment order
    """
    lane_layout = lane_layout or LaneLayout()
    rects = []
    for item in items_with_lanes(items):
        rect = interval_to_rect(view, item.interval)
        rects.append(ItemRect(
            item_id=item.id,
            left=rect.left,
            width=rect.width,
            top=lane_layout.lane_top(item.lane),
            height=lane_layout.lane_height,
            lane=item.lane,
        ))
    return rects
