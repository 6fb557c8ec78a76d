"""Tests for configuration and presets."""

import pytest
from py_landscape.config import PRESETS, Settings, get_preset, list_presets


class TestPresets:
    """Test preset lookup."""

    def test_default_matches_inspector_defaults(self):
        params = get_preset("default")

        assert params.gain == 0.5
        assert params.lacunarity == 2.0
        assert params.octaves == 4
        assert params.scale == 5.0
        assert params.resolution == 128
        assert params.world_length == 256.0
        assert params.max_height == 50.0

    @pytest.mark.parametrize("name", list(PRESETS))
    def test_all_presets_valid(self, name):
        get_preset(name).validate()

    def test_list_presets(self):
        assert set(list_presets()) == {"default", "small_island", "rugged", "gentle", "archipelago"}

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            get_preset("atlantis")


class TestSettings:
    """Test environment driven settings."""

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LANDSCAPE_MAX_RESOLUTION", "64")
        monkeypatch.setenv("LANDSCAPE_LOG_FORMAT", "plain")

        settings = Settings()

        assert settings.max_resolution == 64
        assert settings.log_format == "plain"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LANDSCAPE_MAX_RESOLUTION", raising=False)

        settings = Settings()

        assert settings.max_resolution == 512
        assert settings.default_preset == "default"

    def test_server_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("LANDSCAPE_API_HOST", "127.0.0.1")
        monkeypatch.setenv("LANDSCAPE_API_PORT", "9001")
        monkeypatch.setenv("LANDSCAPE_DEBUG", "true")

        settings = Settings()

        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 9001
        assert settings.debug is True
