"""Settings Manager - Handles API key, cache and rate limit configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_CACHE_MAX_SIZE = 100
DEFAULT_CACHE_TTL_MS = 24 * 60 * 60 * 1000
DEFAULT_RATE_LIMIT_WINDOW_MS = 60_000
DEFAULT_RATE_LIMIT_MAX_REQUESTS = 10
DEFAULT_ENVIRONMENT = "production"
STORAGE_DIRNAME = ".lvt_storage"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the process environment after loading the .env file
    in the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_cache_max_size(self) -> int:
        return self._get_positive_int("CACHE_MAX_SIZE", DEFAULT_CACHE_MAX_SIZE)

    def get_cache_ttl_ms(self) -> int:
        """Maximum age of restored cache entries, in milliseconds."""
        return self._get_positive_int("CACHE_TTL_MS", DEFAULT_CACHE_TTL_MS)

    def get_rate_limit_window_ms(self) -> int:
        return self._get_positive_int("RATE_LIMIT_WINDOW_MS", DEFAULT_RATE_LIMIT_WINDOW_MS)

    def get_rate_limit_max_requests(self) -> int:
        return self._get_positive_int("RATE_LIMIT_MAX_REQUESTS", DEFAULT_RATE_LIMIT_MAX_REQUESTS)

    def get_storage_dir(self) -> Path:
        """Directory used by the persistent store."""
        value = os.getenv("LVT_STORAGE_DIR")
        if value and value.strip():
            return Path(value.strip())
        return self._project_root / STORAGE_DIRNAME

    def get_environment(self) -> str:
        value = os.getenv("APP_ENV")
        return value.strip() if value and value.strip() else DEFAULT_ENVIRONMENT

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _get_positive_int(self, name: str, default: int) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            print(f"[SETTINGS] Ignoring non-integer {name}={raw!r}, using {default}")
            return default
        return value if value > 0 else default
