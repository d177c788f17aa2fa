"""Domain layer - Pure values describing translation requests."""

from .languages import LANGUAGE_NAMES, SUPPORTED_LANGUAGES, is_supported, language_name
from .translation_request import MAX_TEXT_LENGTH, TranslationRequest, ValidationResult

__all__ = [
    "LANGUAGE_NAMES",
    "SUPPORTED_LANGUAGES",
    "MAX_TEXT_LENGTH",
    "TranslationRequest",
    "ValidationResult",
    "is_supported",
    "language_name",
]
