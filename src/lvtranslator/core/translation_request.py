"""Translation Request - A text to translate plus its language pair."""

from dataclasses import dataclass
from typing import Optional

from .languages import is_supported

MAX_TEXT_LENGTH = 10_000


@dataclass
class ValidationResult:
    """Outcome of validating a translation request."""

    valid: bool
    error: Optional[str] = None


@dataclass
class TranslationRequest:
    """
    A single translation request.

    Attributes:
        text: Text to translate.
        source_lang: Source language code (vi, lo, en).
        target_lang: Target language code (vi, lo, en).
    """

    text: str
    source_lang: str
    target_lang: str

    def validate(self) -> ValidationResult:
        if not self.text or not isinstance(self.text, str):
            return ValidationResult(False, "Invalid or missing text field")

        if not self.source_lang or not self.target_lang:
            return ValidationResult(False, "Missing language parameters")

        if not is_supported(self.source_lang) or not is_supported(self.target_lang):
            return ValidationResult(False, "Invalid language code")

        if len(self.text) > MAX_TEXT_LENGTH:
            return ValidationResult(
                False, "Text exceeds maximum length of 10,000 characters"
            )

        if not self.text.strip():
            return ValidationResult(False, "Text cannot be empty")

        return ValidationResult(True)

    def sanitized_text(self) -> str:
        return self.text.strip()
