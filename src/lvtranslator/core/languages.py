"""Supported languages."""

VIETNAMESE = "vi"
LAO = "lo"
ENGLISH = "en"

SUPPORTED_LANGUAGES = (VIETNAMESE, LAO, ENGLISH)

LANGUAGE_NAMES = {
    VIETNAMESE: "Vietnamese",
    LAO: "Lao",
    ENGLISH: "English",
}


def is_supported(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def language_name(code: str) -> str:
    """Display name for a language code, or the code itself if unknown."""
    return LANGUAGE_NAMES.get(code, code)
