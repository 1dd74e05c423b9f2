"""
Timeline Interfaces

Protocol definitions for host integration points.

The host owns the canonical item list. The interaction session only reads
it (through IntervalSourceInterface) to look up the item a gesture starts
on; updates flow back to the host as return values or Qt signals.
"""

from typing import Hashable, Iterable, List, Optional, Protocol, runtime_checkable

from .types import Interval


@runtime_checkable
class IntervalSourceInterface(Protocol):
    """
    Protocol for interval providers.

    Implement this to let a session look up items in the host's list.
    Anything with ``id``, ``start`` and ``end`` attributes counts as an
    interval (TimelineItem does).
    """

    def get_intervals(self) -> Iterable[Interval]:
        """
        Get the current working set.

        Returns:
            Intervals (or interval-like items) in host order
        """
        ...


class StaticIntervalSource:
    """
    IntervalSourceInterface over a plain list.

    The list is held by reference, so host edits are visible to the
    session without re-wrapping.
    """

    def __init__(self, intervals: Optional[List[Interval]] = None):
        self.intervals = intervals if intervals is not None else []

    def get_intervals(self) -> Iterable[Interval]:
        return self.intervals


def find_interval(source: IntervalSourceInterface, item_id: Hashable) -> Optional[Interval]:
    """
    Look up an item by id.

    Returns:
        The item converted to an Interval, or None if the id is unknown
        or the item's range is invalid
    """
    for item in source.get_intervals():
        if item.id == item_id:
            if isinstance(item, Interval):
                return item
            if not item.start < item.end:
                return None
            return Interval(item.id, item.start, item.end)
    return None
