"""Text normalization utilities for consistent cache keying."""

import re
import unicodedata

# Zero-width space/joiners and BOM, used as invisible word breaks in Lao text
_INVISIBLE_BREAKS = re.compile('[\u200b\u200c\u200d\u2060\ufeff]')
_WHITESPACE = re.compile(r'\s+')


def normalize_text(text: str) -> str:
    """
    Normalize Vietnamese, Lao or English text for consistent cache keying.

    Rules:
    - Compose to Unicode NFC, so Vietnamese tone marks typed as combining
      sequences ("a" + U+0300) match precomposed input ("à")
    - Drop zero-width break characters that Lao editors insert between words
    - Trim leading and trailing whitespace
    - Collapse runs of whitespace (spaces, tabs, newlines) to single spaces
    - Case-sensitive (cache keys distinguish "Hello" from "hello")

    Args:
        text: Original text to normalize.

    Returns:
        Normalized text string.
    """
    text = unicodedata.normalize("NFC", text)
    text = _INVISIBLE_BREAKS.sub('', text)
    text = _WHITESPACE.sub(' ', text)
    return text.strip()
