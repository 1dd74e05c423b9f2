"""
Lane Layout

Lane assignment and lane-to-pixel placement.
"""

from .lanes import (
    LaneAssignment,
    LaneLayout,
    assign_lanes,
    group_by_lane,
    intervals_overlap,
    lane_count,
)

__all__ = [
    'LaneAssignment',
    'LaneLayout',
    'assign_lanes',
    'group_by_lane',
    'intervals_overlap',
    'lane_count',
]
