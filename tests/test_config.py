"""
Tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from cerebro.config import Settings, load_settings, settings_from_env


class TestSettings:
    """Tests for Settings and its environment loaders."""

    def test_defaults(self):
        """Test defaults when nothing is configured."""
        settings = settings_from_env({})
        assert settings == Settings()
        assert settings.skip_prompts is False
        assert settings.log_level == "WARNING"
        assert settings.history_size == 50

    def test_values_from_env(self):
        """Test CEREBRO_* variables are read and coerced."""
        settings = settings_from_env(
            {
                "CEREBRO_SKIP_PROMPTS": "true",
                "CEREBRO_LOG_LEVEL": "debug",
                "CEREBRO_HISTORY_SIZE": "10",
                "UNRELATED": "x",
            }
        )
        assert settings.skip_prompts is True
        assert settings.log_level == "DEBUG"
        assert settings.history_size == 10

    def test_blank_values_keep_defaults(self):
        """Test blank variables are treated as unset."""
        assert settings_from_env({"CEREBRO_LOG_LEVEL": "  "}).log_level == "WARNING"

    def test_invalid_values(self):
        """Test invalid values are rejected."""
        for environ in (
            {"CEREBRO_LOG_LEVEL": "LOUD"},
            {"CEREBRO_HISTORY_SIZE": "0"},
            {"CEREBRO_HISTORY_SIZE": "many"},
            {"CEREBRO_SKIP_PROMPTS": "perhaps"},
        ):
            with pytest.raises(ValidationError):
                settings_from_env(environ)

    def test_load_settings_reads_process_env(self, monkeypatch):
        """Test load_settings reads the process environment."""
        monkeypatch.setenv("CEREBRO_SKIP_PROMPTS", "1")
        monkeypatch.delenv("CEREBRO_LOG_LEVEL", raising=False)
        settings = load_settings(dotenv=False)
        assert settings.skip_prompts is True
        assert settings.log_level == "WARNING"
