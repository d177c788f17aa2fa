"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from lvtranslator.services import SettingsManager
from lvtranslator.services.settings_manager import (
    DEFAULT_CACHE_MAX_SIZE,
    DEFAULT_CACHE_TTL_MS,
    DEFAULT_RATE_LIMIT_MAX_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW_MS,
)

MANAGED_VARS = (
    "GEMINI_API_KEY",
    "CACHE_MAX_SIZE",
    "CACHE_TTL_MS",
    "RATE_LIMIT_WINDOW_MS",
    "RATE_LIMIT_MAX_REQUESTS",
    "LVT_STORAGE_DIR",
    "APP_ENV",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove managed variables from the environment before and after a test."""
    saved = {name: os.environ.pop(name, None) for name in MANAGED_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with a test .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("GEMINI_API_KEY=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        """API key should be None when .env has empty value."""
        assert settings.get_gemini_api_key() is None

    def test_get_api_key_read_from_env_file(self, temp_env_dir, clean_env):
        """API key should be loaded from the .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key-123"

    def test_get_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        """API key should strip leading/trailing whitespace."""
        os.environ["GEMINI_API_KEY"] = "  test-key  "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        """API key should return None for whitespace-only value."""
        os.environ["GEMINI_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None

    def test_reload_env_updates_api_key(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=old-key\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "old-key"

        env_file.write_text("GEMINI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_gemini_api_key() == "new-key"

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None


class TestSettingsManagerLimits:
    """Tests for cache and rate limit configuration."""

    def test_defaults(self, settings):
        assert settings.get_cache_max_size() == DEFAULT_CACHE_MAX_SIZE
        assert settings.get_cache_ttl_ms() == DEFAULT_CACHE_TTL_MS
        assert settings.get_rate_limit_window_ms() == DEFAULT_RATE_LIMIT_WINDOW_MS
        assert settings.get_rate_limit_max_requests() == DEFAULT_RATE_LIMIT_MAX_REQUESTS
        assert settings.get_environment() == "production"

    def test_values_from_env_file(self, temp_env_dir, clean_env):
        env_file = temp_env_dir / ".env"
        env_file.write_text(
            "CACHE_MAX_SIZE=250\n"
            "RATE_LIMIT_WINDOW_MS=1000\n"
            "RATE_LIMIT_MAX_REQUESTS=3\n"
            "APP_ENV=development\n"
        )

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_cache_max_size() == 250
        assert settings.get_rate_limit_window_ms() == 1000
        assert settings.get_rate_limit_max_requests() == 3
        assert settings.get_environment() == "development"

    @pytest.mark.parametrize("raw", ["abc", "0", "-5", "  "])
    def test_invalid_integers_fall_back_to_default(self, settings, raw):
        os.environ["CACHE_MAX_SIZE"] = raw
        assert settings.get_cache_max_size() == DEFAULT_CACHE_MAX_SIZE

    def test_storage_dir_defaults_under_project_root(self, settings, temp_env_dir):
        assert settings.get_storage_dir() == temp_env_dir / ".lvt_storage"

    def test_storage_dir_override(self, settings, temp_env_dir):
        os.environ["LVT_STORAGE_DIR"] = str(temp_env_dir / "custom")
        assert settings.get_storage_dir() == temp_env_dir / "custom"
