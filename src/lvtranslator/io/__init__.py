"""I/O layer - Persistence for exported cache data."""

from .cache_store import CACHE_STORAGE_KEY, JsonFileStore

__all__ = ["JsonFileStore", "CACHE_STORAGE_KEY"]
