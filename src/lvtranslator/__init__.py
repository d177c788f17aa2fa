"""
LVTranslator - Vietnamese, Lao and English translation with result caching.

This package provides:
- An LRU cache of translation results with statistics and export/import
- A Gemini-backed translator with a cache-aside wrapper
- Sliding-window rate limiting and a health report
- A Qt coordinator that runs translations off the main thread
"""

__version__ = "2.0.0"

from lvtranslator.core import SUPPORTED_LANGUAGES, TranslationRequest

__all__ = [
    "SUPPORTED_LANGUAGES",
    "TranslationRequest",
]
