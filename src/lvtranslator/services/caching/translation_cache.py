"""Translation Cache - fixed-capacity LRU store for translation results."""

import json
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _now_ms() -> int:
    """Current time as milliseconds since epoch."""
    return int(time.time() * 1000)


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def hash_text(text: str) -> str:
    """
    Hash text into a short base-36 string.

    Rolling 32-bit hash (h = h * 31 + c) over UTF-16 code units, so keys
    match the ones produced by the browser build of the translator.
    Not collision-free: two different texts for the same language pair
    may share a key.

    Args:
        text: Text to hash.

    Returns:
        Base-36 hash, "0" for empty text.
    """
    if not text:
        return "0"

    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = ((value << 5) - value + code_unit) & 0xFFFFFFFF

    if value >= 0x80000000:
        value -= 0x100000000

    return _to_base36(abs(value))


def make_cache_key(text: str, source_lang: str, target_lang: str) -> str:
    """Build the cache key for a (text, source, target) triple."""
    return f"{source_lang}-{target_lang}-{hash_text(text)}"


@dataclass
class CacheEntry:
    """A cached translation with usage metadata."""

    value: str
    hits: int
    created: int
    last_accessed: int

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "hits": self.hits,
            "created": self.created,
            "lastAccessed": self.last_accessed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CacheEntry":
        """
        Build an entry from its serialized form.

        Raises:
            ValueError: If the data is not an object or its value is not a string.
        """
        if not isinstance(data, dict) or not isinstance(data.get("value"), str):
            raise ValueError(f"Malformed cache entry: {data!r}")

        created = data.get("created")
        if created is None:
            created = _now_ms()
        last_accessed = data.get("lastAccessed")
        if last_accessed is None:
            last_accessed = created

        return cls(
            value=data["value"],
            hits=int(data.get("hits") or 0),
            created=int(created),
            last_accessed=int(last_accessed),
        )


@dataclass
class CacheEntrySnapshot:
    """Read-only view of a cache entry for diagnostics."""

    key: str
    value: str
    hits: int
    age: int
    last_accessed: int


@dataclass
class CacheStats:
    """Cache statistics."""

    size: int
    max_size: int
    hits: int
    misses: int
    hit_rate: str
    utilization: str

    def as_dict(self) -> dict:
        return {
            "size": self.size,
            "maxSize": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "hitRate": self.hit_rate,
            "utilization": self.utilization,
        }


class TranslationCache:
    """
    Least-recently-used cache of translation results.

    Keys are derived from (text, source_lang, target_lang); direction
    matters, so en->vi and vi->en are distinct entries. The oldest
    untouched entry sits at the front of the ordering and is evicted
    when capacity is reached.

    Note that get() is not a pure read: a hit moves the entry to the
    most-recently-used end and updates both the global and per-entry
    hit counters, a miss increments the miss counter.

    One lock guards entries and counters so the cache can be shared with
    worker threads.
    """

    def __init__(self, max_size: int = 100):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        """
        Look up a cached translation.

        Side effects: updates hit/miss statistics and marks the entry as
        most recently used.

        Returns:
            Cached translation, or None on a miss.
        """
        return self.get_by_key(make_cache_key(text, source_lang, target_lang))

    def get_by_key(self, key: str) -> Optional[str]:
        """Look up a cached value by its precomputed key."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.misses += 1
                return None

            self._entries.move_to_end(key)
            entry.hits += 1
            entry.last_accessed = _now_ms()
            self.hits += 1
            return entry.value

    def set(self, text: str, source_lang: str, target_lang: str, value: str) -> None:
        """Store a translation, evicting the least recently used entry if full."""
        self.set_by_key(make_cache_key(text, source_lang, target_lang), value)

    def set_by_key(self, key: str, value: str) -> None:
        """
        Store a value under a precomputed key.

        An existing entry is replaced as a fresh insert: its hits and
        creation time are reset and it moves to the most-recently-used end.
        """
        with self._lock:
            self._entries.pop(key, None)

            if len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)

            now = _now_ms()
            self._entries[key] = CacheEntry(
                value=value,
                hits=0,
                created=now,
                last_accessed=now,
            )

    def has(self, text: str, source_lang: str, target_lang: str) -> bool:
        """Check for an entry without touching order or statistics."""
        with self._lock:
            return make_cache_key(text, source_lang, target_lang) in self._entries

    def clear(self) -> None:
        """Remove every entry and reset statistics."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def get_stats(self) -> CacheStats:
        with self._lock:
            size = len(self._entries)
            total = self.hits + self.misses
            hit_rate = f"{self.hits / total * 100:.2f}%" if total > 0 else "0%"

            return CacheStats(
                size=size,
                max_size=self.max_size,
                hits=self.hits,
                misses=self.misses,
                hit_rate=hit_rate,
                utilization=f"{size / self.max_size * 100:.2f}%",
            )

    def get_entries(self) -> list[CacheEntrySnapshot]:
        """Snapshot of all entries in LRU order (oldest first)."""
        with self._lock:
            now = _now_ms()
            return [
                CacheEntrySnapshot(
                    key=key,
                    value=entry.value,
                    hits=entry.hits,
                    age=now - entry.created,
                    last_accessed=entry.last_accessed,
                )
                for key, entry in self._entries.items()
            ]

    def remove_older_than(self, max_age_ms: int) -> int:
        """
        Remove entries created more than max_age_ms ago.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            now = _now_ms()
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created > max_age_ms
            ]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def remove_least_used(self, count: int) -> int:
        """
        Remove the entries with the fewest hits.

        Frequency-based pruning, independent of the recency order used
        for capacity eviction. Ties keep LRU order (stable sort).

        Returns:
            Number of entries actually removed.
        """
        with self._lock:
            ranked = sorted(self._entries.items(), key=lambda item: item[1].hits)
            to_remove = max(0, min(count, len(ranked)))
            for key, _ in ranked[:to_remove]:
                del self._entries[key]
            return to_remove

    def export(self) -> str:
        """Serialize entries and statistics to a JSON string."""
        with self._lock:
            data = {
                "entries": [
                    [key, entry.to_dict()] for key, entry in self._entries.items()
                ],
                "stats": {
                    "hits": self.hits,
                    "misses": self.misses,
                    "maxSize": self.max_size,
                },
                "timestamp": _now_ms(),
            }
        return json.dumps(data, ensure_ascii=False)

    def import_data(self, blob: str) -> bool:
        """
        Replace the cache contents with a previously exported blob.

        Entries keep their stored hits and timestamps. If the blob holds
        more entries than max_size, only the most recent ones are kept.
        On malformed input the cache is left unchanged.

        Returns:
            True on success, False if the blob could not be parsed.
        """
        try:
            data = json.loads(blob)
            stats = data["stats"]
            hits = int(stats.get("hits") or 0)
            misses = int(stats.get("misses") or 0)

            entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
            for pair in data["entries"]:
                key, raw_entry = pair
                if not isinstance(key, str):
                    raise ValueError(f"Cache key must be a string: {key!r}")
                entries.pop(key, None)
                entries[key] = CacheEntry.from_dict(raw_entry)
        except (TypeError, ValueError, KeyError, AttributeError, OverflowError, RecursionError) as e:
            print(f"[CACHE] Failed to import cache: {e}")
            return False

        while len(entries) > self.max_size:
            entries.popitem(last=False)

        with self._lock:
            self._entries = entries
            self.hits = hits
            self.misses = misses
        return True

    def get_size(self) -> int:
        """Approximate size in bytes of the exported cache."""
        return len(self.export().encode("utf-8"))
