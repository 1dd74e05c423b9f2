"""
Lane Assignment
===============

Partitions intervals into lanes so that no two intervals sharing a lane
overlap.

The assignment is recomputed from scratch on every call. There is no
incremental state, so calling it after every committed update is safe and
always yields the same mapping for the same input.

Algorithm (first-fit):
    1. Stable-sort intervals ascending by start (ties keep input order)
    2. For each interval, scan lanes in index order and place it in the
       first lane where it overlaps none of the lane's members
    3. If no lane accepts it, open a new lane

Overlap is half-open: ``[10, 20)`` and ``[20, 30)`` can share a lane.
"""

from typing import Dict, Hashable, Iterable, List, Optional

from ..constants import LANE_HEIGHT, HEADER_HEIGHT
from ..logging import TimelineLog as Log
from ..types import Interval

LaneAssignment = Dict[Hashable, int]


def intervals_overlap(a: Interval, b: Interval) -> bool:
    """Half-open overlap test. Intervals that only touch do not overlap."""
    return a.start < b.end and a.end > b.start


def assign_lanes(intervals: Iterable[Interval]) -> LaneAssignment:
    """
    Assign every interval to a lane.

    Args:
        intervals: Intervals in host order (order only matters for equal starts)

    Returns:
        Mapping of interval id to lane index. Lane indices are dense:
        if N lanes are used, 0..N-1 all hold at least one interval.
    """
    # sorted() is stable, equal starts keep their input order
    ordered = sorted(intervals, key=lambda interval: interval.start)
    lanes: List[List[Interval]] = []
    assignment: LaneAssignment = {}

    for interval in ordered:
        for lane_index, lane in enumerate(lanes):
            if not any(intervals_overlap(interval, existing) for existing in lane):
                lane.append(interval)
                assignment[interval.id] = lane_index
                break
        else:
            lanes.append([interval])
            assignment[interval.id] = len(lanes) - 1

    Log.debug(f"assign_lanes: {len(assignment)} intervals in {len(lanes)} lanes")
    return assignment


def lane_count(assignment: LaneAssignment) -> int:
    """Number of lanes used by an assignment."""
    if not assignment:
        return 0
    return max(assignment.values()) + 1


def group_by_lane(intervals: Iterable[Interval], assignment: LaneAssignment) -> List[List[Interval]]:
    """
    Group intervals by their lane.

    Args:
        intervals: Intervals that were assigned
        assignment: Result of assign_lanes()

    Returns:
        One list per lane (index = lane), each sorted by start
    """
    groups: List[List[Interval]] = [[] for _ in range(lane_count(assignment))]
    for interval in intervals:
        lane = assignment.get(interval.id)
        if lane is not None:
            groups[lane].append(interval)
    for group in groups:
        group.sort(key=lambda interval: interval.start)
    return groups


class LaneLayout:
    """
    Maps lane indices to vertical pixel positions.

    Lanes are stacked top to bottom below a fixed header:
    ``top(lane) = header_height + lane * lane_height``.
    """

    def __init__(self, lane_height: float = LANE_HEIGHT, header_height: float = HEADER_HEIGHT):
        if lane_height <= 0:
            raise ValueError(f"Lane height must be positive, got {lane_height}")
        self.lane_height = lane_height
        self.header_height = header_height

    def lane_top(self, lane: int) -> float:
        """Y coordinate of a lane's top edge."""
        return self.header_height + lane * self.lane_height

    def lane_at_y(self, y: float) -> Optional[int]:
        """
        Get the lane under a y coordinate.

        Returns:
            Lane index, or None if y is inside the header
        """
        if y < self.header_height:
            return None
        return int((y - self.header_height) // self.lane_height)

    def content_height(self, lanes: int) -> float:
        """Total height needed to show the header and ``lanes`` lanes."""
        return self.header_height + max(lanes, 0) * self.lane_height
