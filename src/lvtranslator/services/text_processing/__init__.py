"""Text processing services - normalization."""

from lvtranslator.services.text_processing.text_normalization import normalize_text

__all__ = [
    "normalize_text",
]
