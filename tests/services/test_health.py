"""Unit tests for the health check."""

from datetime import datetime
from unittest.mock import MagicMock

from lvtranslator import __version__
from lvtranslator.services import check_health


def _settings(api_key=None, environment="production"):
    manager = MagicMock()
    manager.get_gemini_api_key = MagicMock(return_value=api_key)
    manager.get_environment = MagicMock(return_value=environment)
    return manager


class TestHealthCheck:
    """Tests for check_health."""

    def test_reports_ok_with_api_key(self):
        health = check_health(_settings(api_key="key"))

        assert health.status == "ok"
        assert health.api_key_configured is True
        assert health.version == __version__

    def test_reports_missing_api_key(self):
        assert check_health(_settings()).api_key_configured is False

    def test_timestamp_is_iso_format(self):
        health = check_health(_settings())
        assert datetime.fromisoformat(health.timestamp).tzinfo is not None

    def test_as_dict_shape(self):
        data = check_health(_settings(environment="development")).as_dict()

        assert data["environment"] == "development"
        assert set(data) == {"status", "timestamp", "environment", "apiKeyConfigured", "version"}
