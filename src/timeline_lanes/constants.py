"""
Timeline Constants

Central location for timeline dimensions and interaction constants.
Values mirror the default calendar/timeline views; every one of them can be
overridden through TimelineSettings.
"""

# =============================================================================
# Dimensions
# =============================================================================

DEFAULT_PIXELS_PER_UNIT = 120.0  # One day column at zoom 1.0
MIN_PIXELS_PER_UNIT = 60.0  # Zoom 0.5
MAX_PIXELS_PER_UNIT = 240.0  # Zoom 2.0
ZOOM_IN_FACTOR = 1.25
ZOOM_OUT_FACTOR = 0.8

LANE_HEIGHT = 60
HEADER_HEIGHT = 80

# =============================================================================
# Resize Handles
# =============================================================================

RESIZE_HANDLE_WIDTH = 8  # Default hit zone at each rendered edge (pixels)
MIN_RESIZE_HANDLE_WIDTH = 3  # Minimum hit zone for narrow items
MIN_MOVE_AREA_WIDTH = 8  # Minimum body width left for dragging
RESIZE_HANDLE_PERCENT = 0.15  # Share of item width used for handles on narrow items

# =============================================================================
# Snapping
# =============================================================================

DEFAULT_SNAP_GRANULARITY = 1.0  # In time units (one day by default)

# =============================================================================
# Week Grid
# =============================================================================

DAYS_PER_WEEK = 7
WEEK_FIRST_HOUR = 8  # First visible hour row
WEEK_HOUR_COUNT = 13  # 08:00 .. 20:00
WEEK_HOUR_HEIGHT = 60  # Pixels per hour (one pixel per minute)
