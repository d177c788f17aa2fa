"""Unit tests for text normalization."""

import pytest

from lvtranslator.services import normalize_text


class TestTextNormalization:
    """Tests for normalize_text function."""

    def test_trim_both_sides(self):
        """Should remove whitespace from both sides."""
        assert normalize_text("   Xin chào   ") == "Xin chào"

    def test_collapse_internal_spaces(self):
        """Should collapse multiple spaces to single space."""
        assert normalize_text("hello   world") == "hello world"

    def test_collapse_mixed_whitespace(self):
        """Should collapse mixed whitespace to single space."""
        assert normalize_text("hello \t\n  world") == "hello world"

    def test_preserve_lao_characters(self):
        """Should preserve Lao script as-is."""
        assert normalize_text("ສະບາຍດີ") == "ສະບາຍດີ"

    def test_preserve_vietnamese_diacritics(self):
        """Should keep tone marks and punctuation untouched."""
        assert normalize_text("Cảm ơn bạn!") == "Cảm ơn bạn!"

    def test_case_is_preserved(self):
        assert normalize_text("Hello") != normalize_text("hello")

    def test_empty_string(self):
        """Should handle empty string."""
        assert normalize_text("") == ""

    def test_only_whitespace(self):
        """Should collapse whitespace-only string to empty."""
        assert normalize_text("   \t\n   ") == ""

    @pytest.mark.parametrize("variant", ["Xin\nchào", "Xin  chào", "Xin\tchào", " Xin chào "])
    def test_deterministic_keying(self, variant):
        """Same logical text with different whitespace should normalize to same key."""
        assert normalize_text(variant) == "Xin chào"

    def test_decomposed_vietnamese_matches_precomposed(self):
        """Combining tone marks should compose to the same key as precomposed text."""
        decomposed = "Xin cha\u0300o"
        assert normalize_text(decomposed) == "Xin chào"

    def test_zero_width_breaks_in_lao_are_removed(self):
        """Invisible word breaks should not change the cache key."""
        assert normalize_text("ສະບາຍ\u200bດີ") == "ສະບາຍດີ"

    def test_bom_is_removed(self):
        assert normalize_text("\ufeffHello") == "Hello"
