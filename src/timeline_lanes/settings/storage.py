"""
Timeline Settings Storage

Single source of truth for timeline layout and interaction settings.

Settings are:
- Stored as JSON in the user config directory (or a path the host picks)
- Validated on load (invalid files fall back to defaults)
- Type-safe via dataclass schema

Usage:
    store = TimelineSettingsStore(path)
    settings = store.settings

    settings.pixels_per_unit = 150
    store.save()

    session = InteractionSession(source, store.view_window(start, end), store.snap_calculator())
"""
import json
import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

from ..constants import (
    DEFAULT_PIXELS_PER_UNIT, MIN_PIXELS_PER_UNIT, MAX_PIXELS_PER_UNIT,
    ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR, DEFAULT_SNAP_GRANULARITY,
    RESIZE_HANDLE_WIDTH, LANE_HEIGHT, HEADER_HEIGHT,
    WEEK_FIRST_HOUR, WEEK_HOUR_COUNT, WEEK_HOUR_HEIGHT,
)
from ..layout.lanes import LaneLayout
from ..logging import TimelineLog as Log
from ..timing.geometry import zoom_view
from ..timing.snap_calculator import SnapCalculator
from ..timing.week_grid import WeekGrid
from ..types import ViewWindow
from .base_settings import BaseSettings, ValidationResult, validated_field

APP_NAME = "timeline_lanes"
SETTINGS_FILENAME = "timeline_settings.json"


def default_settings_path() -> Path:
    """
    Platform-specific settings file location.

    - macOS: ~/Library/Application Support/timeline_lanes/
    - Linux: ~/.config/timeline_lanes/
    - Windows: %APPDATA%/timeline_lanes/
    """
    if sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif sys.platform == "win32":
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APP_NAME / SETTINGS_FILENAME


# =============================================================================
# Settings Schema (Dataclass)
# =============================================================================

@dataclass
class TimelineSettings(BaseSettings):
    """
    Timeline settings schema.

    Add new settings here - they will automatically be saved/loaded.
    All fields should have default values for backwards compatibility.
    """

    # Zoom (pixels per time unit)
    pixels_per_unit: float = validated_field(DEFAULT_PIXELS_PER_UNIT, greater_than=0)
    min_pixels_per_unit: float = validated_field(MIN_PIXELS_PER_UNIT, greater_than=0)
    max_pixels_per_unit: float = validated_field(MAX_PIXELS_PER_UNIT, greater_than=0)
    zoom_in_factor: float = validated_field(ZOOM_IN_FACTOR, greater_than=1.0)
    zoom_out_factor: float = validated_field(ZOOM_OUT_FACTOR, greater_than=0, max_value=1.0)

    # Snapping (granularity in time units)
    snap_enabled: bool = True
    snap_granularity: float = validated_field(DEFAULT_SNAP_GRANULARITY, greater_than=0)

    # Interaction
    resize_handle_width: float = validated_field(RESIZE_HANDLE_WIDTH, min_value=1, max_value=40)

    # Lanes
    lane_height: float = validated_field(LANE_HEIGHT, min_value=20, max_value=200)
    header_height: float = validated_field(HEADER_HEIGHT, min_value=0)

    # Week grid
    week_first_hour: int = validated_field(WEEK_FIRST_HOUR, min_value=0, max_value=23)
    week_hour_count: int = validated_field(WEEK_HOUR_COUNT, min_value=1, max_value=24)
    week_hour_height: float = validated_field(WEEK_HOUR_HEIGHT, greater_than=0)

    def validate(self) -> ValidationResult:
        """Field validation plus zoom range consistency."""
        result = super().validate()
        if result.valid and not (
            self.min_pixels_per_unit <= self.pixels_per_unit <= self.max_pixels_per_unit
        ):
            result.add_error(
                f"pixels_per_unit: Value {self.pixels_per_unit} is outside the zoom range "
                f"{self.min_pixels_per_unit}..{self.max_pixels_per_unit}"
            )
        if result.valid and self.week_first_hour + self.week_hour_count > 24:
            result.add_warning("week grid extends past midnight")
        return result


# =============================================================================
# Settings Store
# =============================================================================

class TimelineSettingsStore:
    """
    Loads and saves TimelineSettings and builds the objects they configure.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, autoload: bool = True):
        self.path = Path(path) if path is not None else default_settings_path()
        self.settings = TimelineSettings()
        if autoload:
            self.load()

    def load(self) -> TimelineSettings:
        """
        Load settings from file.

        A missing file keeps defaults. An unreadable or invalid file is
        logged and replaced by defaults in memory (the file is left alone).
        """
        if not self.path.exists():
            Log.debug(f"TimelineSettingsStore: no settings at {self.path}, using defaults")
            self.settings = TimelineSettings()
            return self.settings

        try:
            with open(self.path, 'r', encoding='utf-8') as file:
                data = json.load(file)
        except (OSError, json.JSONDecodeError) as e:
            Log.error(f"TimelineSettingsStore: failed to load {self.path}: {e}")
            self.settings = TimelineSettings()
            return self.settings

        if not isinstance(data, dict):
            Log.error(f"TimelineSettingsStore: {self.path} does not hold a JSON object")
            self.settings = TimelineSettings()
            return self.settings

        settings = TimelineSettings.from_dict(data)
        result = settings.validate()
        for warning in result.warnings:
            Log.warning(f"TimelineSettingsStore: {warning}")
        if not result.valid:
            for error in result.errors:
                Log.error(f"TimelineSettingsStore: {error}")
            settings = TimelineSettings()

        self.settings = settings
        Log.info(f"TimelineSettingsStore: settings loaded from {self.path}")
        return self.settings

    def save(self) -> None:
        """
        Save settings to file.

        Raises:
            ValueError: If the current settings do not validate
        """
        result = self.settings.validate()
        if not result.valid:
            raise ValueError("; ".join(result.errors))

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as file:
            json.dump(self.settings.to_dict(), file, indent=4)
        Log.info(f"TimelineSettingsStore: settings saved to {self.path}")

    def update(self, **values: Any) -> TimelineSettings:
        """
        Change settings and save them.

        Raises:
            AttributeError: If a key is not a settings field
            ValueError: If the new settings do not validate
        """
        valid_keys = {f.name for f in fields(TimelineSettings)}
        for key in values:
            if key not in valid_keys:
                raise AttributeError(f"Unknown timeline setting '{key}'")

        candidate = TimelineSettings.from_dict({**self.settings.to_dict(), **values})
        result = candidate.validate()
        if not result.valid:
            raise ValueError("; ".join(result.errors))

        self.settings = candidate
        self.save()
        return self.settings

    # =========================================================================
    # Builders
    # =========================================================================

    def snap_calculator(self) -> SnapCalculator:
        s = self.settings
        return SnapCalculator(granularity=s.snap_granularity, snap_enabled=s.snap_enabled)

    def lane_layout(self) -> LaneLayout:
        return LaneLayout(lane_height=self.settings.lane_height, header_height=self.settings.header_height)

    def week_grid(self, week_start) -> WeekGrid:
        s = self.settings
        return WeekGrid(
            week_start,
            first_hour=s.week_first_hour,
            hour_count=s.week_hour_count,
            hour_height=s.week_hour_height,
        )

    def view_window(self, window_start: Any, window_end: Any, unit: Any = None) -> ViewWindow:
        """View window at the configured zoom."""
        return ViewWindow(window_start, window_end, self.settings.pixels_per_unit, unit)

    def zoom_in(self, view: ViewWindow) -> ViewWindow:
        s = self.settings
        return zoom_view(view, s.zoom_in_factor, s.min_pixels_per_unit, s.max_pixels_per_unit)

    def zoom_out(self, view: ViewWindow) -> ViewWindow:
        s = self.settings
        return zoom_view(view, s.zoom_out_factor, s.min_pixels_per_unit, s.max_pixels_per_unit)
