"""
Timeline Settings Components

Settings schema, validation and storage.
"""

from .base_settings import BaseSettings, FieldValidator, ValidationResult, validated_field
from .storage import TimelineSettings, TimelineSettingsStore, default_settings_path

__all__ = [
    'BaseSettings',
    'FieldValidator',
    'ValidationResult',
    'validated_field',
    'TimelineSettings',
    'TimelineSettingsStore',
    'default_settings_path',
]
