"""Health check - reports whether the translator is configured to run."""

from dataclasses import dataclass
from datetime import datetime, timezone

from lvtranslator import __version__
from lvtranslator.services.settings_manager import SettingsManager


@dataclass
class HealthStatus:
    """Snapshot of service health."""

    status: str
    timestamp: str
    environment: str
    api_key_configured: bool
    version: str

    def as_dict(self) -> dict:
        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "environment": self.environment,
            "apiKeyConfigured": self.api_key_configured,
            "version": self.version,
        }


def check_health(settings: SettingsManager) -> HealthStatus:
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.get_environment(),
        api_key_configured=settings.get_gemini_api_key() is not None,
        version=__version__,
    )
