"""
Unit tests for typed settings.
"""
import pytest
from pathlib import Path
from pydantic import ValidationError

from partypicker.config import Settings, PickerSettings, TrackSettings, ObservabilitySettings


class TestSettings:
    """Tests for environment driven configuration."""

    def test_defaults(self, monkeypatch):
        for var in ("PICKER_DEFAULT_SPINS", "PICKER_RNG_SEED", "TRACKS_INCLUDE_BONUS", "TRACKS_DATA_PATH"):
            monkeypatch.delenv(var, raising=False)
        config = Settings(_env_file=None)

        assert config.picker.default_spins == 3
        assert config.picker.rng_seed is None
        assert config.picker.color_saturation == 70
        assert config.picker.color_lightness == 60
        assert config.tracks.include_bonus is True
        assert config.tracks.data_path is None

    def test_picker_env_override(self, monkeypatch):
        monkeypatch.setenv("PICKER_DEFAULT_SPINS", "5")
        monkeypatch.setenv("PICKER_RNG_SEED", "1234")
        config = PickerSettings()
        assert config.default_spins == 5
        assert config.rng_seed == 1234

    def test_track_env_override(self, monkeypatch):
        monkeypatch.setenv("TRACKS_INCLUDE_BONUS", "false")
        monkeypatch.setenv("TRACKS_DATA_PATH", "/srv/tracks.json")
        config = TrackSettings()
        assert config.include_bonus is False
        assert config.data_path == Path("/srv/tracks.json")

    def test_out_of_range_rejected(self, monkeypatch):
        monkeypatch.setenv("PICKER_COLOR_SATURATION", "150")
        with pytest.raises(ValidationError):
            PickerSettings()

    def test_log_level_validated(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            ObservabilitySettings()
