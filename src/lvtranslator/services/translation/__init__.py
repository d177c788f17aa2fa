"""Translation services - abstract interface, Gemini implementation and cache wrapper."""

from lvtranslator.services.translation.translation_service import TranslationService, TranslationResult
from lvtranslator.services.translation.gemini_translation_service import GeminiTranslationService
from lvtranslator.services.translation.cached_translation_service import CachedTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
    "CachedTranslationService",
]
