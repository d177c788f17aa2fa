"""Services layer - business logic and external integrations."""

from lvtranslator.services.settings_manager import SettingsManager
from lvtranslator.services.rate_limiter import RateLimiter, RateLimitStatus
from lvtranslator.services.health import HealthStatus, check_health

# Text processing services
from lvtranslator.services.text_processing import normalize_text

# Caching services
from lvtranslator.services.caching import (
    CacheEntry,
    CacheEntrySnapshot,
    CacheStats,
    TranslationCache,
    hash_text,
    make_cache_key,
)

# Translation services
from lvtranslator.services.translation import (
    CachedTranslationService,
    GeminiTranslationService,
    TranslationResult,
    TranslationService,
)

__all__ = [
    "SettingsManager",
    "RateLimiter",
    "RateLimitStatus",
    "HealthStatus",
    "check_health",
    "normalize_text",
    "TranslationCache",
    "CacheEntry",
    "CacheEntrySnapshot",
    "CacheStats",
    "hash_text",
    "make_cache_key",
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
    "CachedTranslationService",
]
