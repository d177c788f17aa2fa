"""Translation Service - Abstract translator between Vietnamese, Lao and English."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class TranslationResult:
    """Result of a translation request."""

    text: str
    model: str
    error: Optional[str] = None
    cached: bool = False

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None


class TranslationService(ABC):
    """
    Abstract service for translating text between supported languages.

    Implementations (e.g., GeminiTranslationService) handle API calls.
    """

    @abstractmethod
    def translate(
        self, text: str, source_lang: str, target_lang: str, api_key: str
    ) -> TranslationResult:
        """
        Translate text from source_lang to target_lang.

        Args:
            text: Text to translate.
            source_lang: Source language code (vi, lo, en).
            target_lang: Target language code (vi, lo, en).
            api_key: Model provider API key for authentication.

        Returns:
            TranslationResult with text or error message.
        """
        pass
