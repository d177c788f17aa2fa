"""Cached Translation Service - cache-aside wrapper around another translator."""

from typing import Optional

from lvtranslator.services.caching.translation_cache import TranslationCache
from lvtranslator.services.text_processing.text_normalization import normalize_text
from lvtranslator.services.translation.translation_service import TranslationResult, TranslationService


class CachedTranslationService(TranslationService):
    """
    Serves translations from a TranslationCache, falling back to an inner service.

    Text is whitespace-normalized before keying. Only successful results
    are cached; errors pass through untouched.
    """

    CACHE_MODEL = "cache"

    def __init__(self, inner: TranslationService, cache: TranslationCache):
        self.inner = inner
        self.cache = cache

    def lookup(self, text: str, source_lang: str, target_lang: str) -> Optional[TranslationResult]:
        """Return a cached result, or None on a miss."""
        cached = self.cache.get(normalize_text(text), source_lang, target_lang)
        if cached is None:
            return None
        return TranslationResult(text=cached, model=self.CACHE_MODEL, cached=True)

    def store(self, text: str, source_lang: str, target_lang: str, result: TranslationResult) -> None:
        """Cache a successful result."""
        if result.is_error or result.cached:
            return
        self.cache.set(normalize_text(text), source_lang, target_lang, result.text)

    def translate(
        self, text: str, source_lang: str, target_lang: str, api_key: str
    ) -> TranslationResult:
        hit = self.lookup(text, source_lang, target_lang)
        if hit is not None:
            return hit

        result = self.inner.translate(
            text=normalize_text(text),
            source_lang=source_lang,
            target_lang=target_lang,
            api_key=api_key,
        )
        self.store(text, source_lang, target_lang, result)
        return result
