"""
Configuration module with strongly typed settings.

Usage:
    from partypicker.config import settings

    print(settings.picker.default_spins)
    print(settings.tracks.include_bonus)
"""
from .settings import (
    Settings,
    PickerSettings,
    TrackSettings,
    ObservabilitySettings,
)

# Singleton instance - validates on import
settings = Settings()

__all__ = [
    "settings",
    "Settings",
    "PickerSettings",
    "TrackSettings",
    "ObservabilitySettings",
]
