"""Unit tests for JsonFileStore persistence."""

import pytest

from lvtranslator.io import CACHE_STORAGE_KEY, JsonFileStore
from lvtranslator.services import TranslationCache


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(tmp_path / "storage")


class TestJsonFileStore:
    """Tests for save/load/remove."""

    def test_load_missing_key_returns_none(self, store):
        assert store.load("missing") is None

    def test_save_and_load_roundtrip(self, store):
        assert store.save("lvt_settings", '{"theme": "dark"}')
        assert store.load("lvt_settings") == '{"theme": "dark"}'

    def test_save_creates_directory(self, store):
        store.save("key", "value")
        assert (store.directory / "key.json").exists()

    def test_save_overwrites(self, store):
        store.save("key", "one")
        store.save("key", "two")
        assert store.load("key") == "two"

    def test_remove(self, store):
        store.save("key", "value")
        store.remove("key")
        assert store.load("key") is None

    def test_remove_missing_key_does_not_raise(self, store):
        store.remove("missing")

    def test_keys(self, store):
        store.save("b", "2")
        store.save("a", "1")
        assert store.keys() == ["a", "b"]

    def test_keys_without_directory(self, store):
        assert store.keys() == []

    def test_invalid_key_is_rejected(self, store):
        with pytest.raises(ValueError):
            store.save("../escape", "value")

    def test_unicode_content_survives(self, store):
        store.save("key", "ສະບາຍດີ Xin chào")
        assert store.load("key") == "ສະບາຍດີ Xin chào"

    def test_cache_survives_restart(self, store):
        """Exported cache written to the store restores into a new instance."""
        cache = TranslationCache(max_size=5)
        cache.set("Hello", "en", "lo", "ສະບາຍດີ")
        cache.get("Hello", "en", "lo")
        store.save(CACHE_STORAGE_KEY, cache.export())

        restored = TranslationCache(max_size=5)
        assert restored.import_data(store.load(CACHE_STORAGE_KEY))
        assert restored.get("Hello", "en", "lo") == "ສະບາຍດີ"
        assert restored.get_stats().hits == 2
