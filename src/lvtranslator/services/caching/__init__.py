"""Caching services - LRU translation result cache."""

from lvtranslator.services.caching.translation_cache import (
    CacheEntry,
    CacheEntrySnapshot,
    CacheStats,
    TranslationCache,
    hash_text,
    make_cache_key,
)

__all__ = [
    "TranslationCache",
    "CacheEntry",
    "CacheEntrySnapshot",
    "CacheStats",
    "hash_text",
    "make_cache_key",
]
