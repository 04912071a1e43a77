"""
Strongly typed configuration using pydantic-settings.

All settings are validated at startup and loaded from:
1. Default values defined here
2. .env file (if present)
3. Environment variables (highest priority)

Environment variable naming:
- PickerSettings: PICKER_DEFAULT_SPINS, PICKER_RNG_SEED, etc.
- TrackSettings: TRACKS_DATA_PATH, TRACKS_INCLUDE_BONUS
- ObservabilitySettings: ENVIRONMENT, LOG_LEVEL (no prefix)
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path


class PickerSettings(BaseSettings):
    """Spinner wheel and color settings."""

    model_config = SettingsConfigDict(env_prefix="PICKER_")

    # Wheel
    default_spins: int = Field(default=3, ge=0, le=100, description="Full revolutions before landing")
    rng_seed: Optional[int] = Field(default=None, description="Seed for reproducible picks")

    # Colors
    color_saturation: int = Field(default=70, ge=0, le=100)
    color_lightness: int = Field(default=60, ge=0, le=100)


class TrackSettings(BaseSettings):
    """Track list loading settings."""

    model_config = SettingsConfigDict(env_prefix="TRACKS_")

    data_path: Optional[Path] = Field(default=None, description="Override for the bundled tracks.json")
    include_bonus: bool = Field(default=True, description="Include bonus (DLC) tracks")


class ObservabilitySettings(BaseSettings):
    """Logging and metrics settings."""

    model_config = SettingsConfigDict(env_prefix="")  # Direct: ENVIRONMENT, LOG_LEVEL

    environment: str = Field(default="development", pattern="^(development|staging|production)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_format: str = Field(default="console", pattern="^(console|json)$")
    enable_metrics: bool = Field(default=True)


class Settings(BaseSettings):
    """
    Root settings aggregating all subsections.

    Usage:
        from partypicker.config import settings

        settings.picker.default_spins
        settings.tracks.include_bonus
        settings.observability.log_level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    picker: PickerSettings = Field(default_factory=PickerSettings)
    tracks: TrackSettings = Field(default_factory=TrackSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
