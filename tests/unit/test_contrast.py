"""Tests for carouselgen.validation.contrast: WCAG contrast checks.

Tests cover:
- Hex parsing with and without the leading ``#``.
- Luminance and contrast ratio of well-known color pairs.
- WCAG level mapping for normal and large text.
- Large-text detection by size and weight.
- Text color suggestions and color lightening/darkening.
"""

from __future__ import annotations

import pytest

from carouselgen.validation.contrast import (
    DARK_TEXT,
    LIGHT_TEXT,
    adjust_color,
    get_contrast_ratio,
    get_luminance,
    get_wcag_level,
    has_sufficient_contrast,
    hex_to_rgb,
    is_large_text,
    suggest_text_color,
)


class TestHexToRgb:
    """Test hex color parsing."""

    def test_with_hash(self):
        assert hex_to_rgb("#1E40AF") == (30, 64, 175)

    def test_without_hash_lowercase(self):
        assert hex_to_rgb("ffffff") == (255, 255, 255)

    @pytest.mark.parametrize("value", ["#FFF", "blue", "#GGGGGG", "", "#1234567"])
    def test_invalid_returns_none(self, value):
        """Short, named or malformed colors are not parsed."""
        assert hex_to_rgb(value) is None


class TestContrastRatio:
    """Test luminance and contrast ratio arithmetic."""

    def test_luminance_extremes(self):
        assert get_luminance(0, 0, 0) == 0
        assert get_luminance(255, 255, 255) == pytest.approx(1.0)

    def test_black_on_white_is_21(self):
        assert get_contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_ratio_is_symmetric(self):
        assert get_contrast_ratio("#1E40AF", "#FFFFFF") == pytest.approx(
            get_contrast_ratio("#FFFFFF", "#1E40AF")
        )

    @pytest.mark.parametrize(("a", "b"), [("#123456", "#FEDCBA"), ("#FF0000", "#00FF00"), ("#000000", "#000001")])
    def test_ratio_within_bounds(self, a, b):
        assert 1 <= get_contrast_ratio(a, b) <= 21

    def test_same_color_is_one(self):
        assert get_contrast_ratio("#3B82F6", "#3B82F6") == pytest.approx(1.0)

    def test_gray_on_white(self):
        """#767676 is the classic darkest-gray-that-passes-AA value."""
        assert get_contrast_ratio("#767676", "#FFFFFF") == pytest.approx(4.54, abs=0.01)

    def test_unparseable_color_has_no_contrast(self):
        assert get_contrast_ratio("not-a-color", "#FFFFFF") == 1.0


class TestWcagLevel:
    """Test the level thresholds."""

    @pytest.mark.parametrize(
        ("ratio", "expected"),
        [(21, "AAA"), (7, "AAA"), (6.99, "AA"), (4.5, "AA"), (4.49, "AA-large"), (3, "AA-large"), (2.99, "fail")],
    )
    def test_normal_text(self, ratio, expected):
        assert get_wcag_level(ratio) == expected

    @pytest.mark.parametrize(
        ("ratio", "expected"),
        [(7, "AAA"), (4.5, "AAA"), (4.49, "AA"), (3, "AA"), (2.99, "fail")],
    )
    def test_large_text(self, ratio, expected):
        """Large text never reports AA-large."""
        assert get_wcag_level(ratio, is_large_text=True) == expected


class TestIsLargeText:
    """Test large-text classification."""

    def test_24px_normal_is_large(self):
        assert is_large_text(24) is True

    def test_20px_bold_is_large(self):
        assert is_large_text(20, "bold") is True

    def test_20px_numeric_bold_is_large(self):
        assert is_large_text(20, "700") is True

    def test_20px_normal_is_not_large(self):
        assert is_large_text(20, "normal") is False

    def test_18px_bold_is_not_large(self):
        assert is_large_text(18, "bold") is False


class TestHasSufficientContrast:
    """Test the combined contrast check."""

    def test_aa_normal_text_passes(self):
        """#767676 on white at 16px is AA and passes."""
        check = has_sufficient_contrast("#767676", "#FFFFFF", 16)
        assert check.level == "AA"
        assert check.passes is True

    def test_same_ratio_is_aaa_for_large_text(self):
        check = has_sufficient_contrast("#767676", "#FFFFFF", 24)
        assert check.level == "AAA"

    def test_aa_large_still_passes(self):
        """AA-large is a pass; strict validation only warns about it."""
        check = has_sufficient_contrast("#888888", "#FFFFFF", 16)
        assert check.level == "AA-large"
        assert check.passes is True

    def test_light_gray_fails(self):
        check = has_sufficient_contrast("#CCCCCC", "#FFFFFF", 16)
        assert check.level == "fail"
        assert check.passes is False
        assert check.ratio == pytest.approx(1.61, abs=0.01)


class TestSuggestTextColor:
    """Test the dark/light text suggestion."""

    def test_light_background_gets_dark_text(self):
        assert suggest_text_color("#FFFFFF") == DARK_TEXT == "#1E293B"

    def test_dark_background_gets_light_text(self):
        assert suggest_text_color("#0F172A") == LIGHT_TEXT == "#F8FAFC"

    def test_suggestion_meets_aa(self):
        for background in ("#FFFFFF", "#F59E0B", "#1E40AF", "#000000"):
            suggestion = suggest_text_color(background)
            assert get_contrast_ratio(suggestion, background) >= 4.5

    def test_unparseable_background(self):
        assert suggest_text_color("transparent") == "#000000"


class TestAdjustColor:
    """Test lightening and darkening."""

    def test_lighten_black_halfway(self):
        assert adjust_color("#000000", 50) == "#808080"

    def test_darken_white_halfway(self):
        assert adjust_color("#FFFFFF", -50) == "#808080"

    def test_halves_round_up(self):
        """30% of 255 is 76.5, which rounds up to 77 (0x4d)."""
        assert adjust_color("#000000", 30) == "#4d4d4d"

    def test_full_lighten_is_white(self):
        assert adjust_color("#1E40AF", 100) == "#ffffff"

    def test_zero_is_identity(self):
        assert adjust_color("#1E40AF", 0) == "#1e40af"

    def test_invalid_returned_unchanged(self):
        assert adjust_color("nope", 20) == "nope"
