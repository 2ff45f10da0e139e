"""Tests for linetype.ui.colors – color blending and the countdown color."""

from __future__ import annotations

from linetype.ui.colors import ThemeColors, blend_hex, time_left_color


# ===========================================================================
# ThemeColors – constants exist
# ===========================================================================

class TestThemeColors:
    def test_primary_is_hex(self):
        assert ThemeColors.PRIMARY.startswith("#")
        assert len(ThemeColors.PRIMARY) == 7

    def test_word_colors_are_hex(self):
        for value in (ThemeColors.WORD_CORRECT, ThemeColors.WORD_INCORRECT, ThemeColors.TEXT_MUTED):
            assert value.startswith("#") and len(value) == 7

    def test_card_bg_is_rgba(self):
        assert ThemeColors.CARD_BG.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_clamps_t(self):
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"
        assert blend_hex("#000000", "#FFFFFF", 5.0) == "#FFFFFF"

    def test_invalid_input_returns_a(self):
        assert blend_hex("red", "#FFFFFF", 0.5) == "red"
        assert blend_hex("#GGGGGG", "#FFFFFF", 0.5) == "#GGGGGG"

    def test_strips_whitespace(self):
        assert blend_hex(" #000000 ", "#000000", 0.3) == "#000000"


# ===========================================================================
# time_left_color
# ===========================================================================

class TestTimeLeftColor:
    def test_full_time_is_primary(self):
        assert time_left_color(60, 60) == ThemeColors.PRIMARY.upper()

    def test_no_time_is_coral(self):
        assert time_left_color(0, 60) == ThemeColors.CORAL.upper()

    def test_halfway_is_between(self):
        half = time_left_color(30, 60)
        assert half not in (ThemeColors.PRIMARY.upper(), ThemeColors.CORAL.upper())

    def test_zero_duration(self):
        assert time_left_color(0, 0) == ThemeColors.PRIMARY
