"""Tests for hex parsing and white-text contrast."""

import pytest

from wheelspin.exceptions import InvalidColorError
from wheelspin.palette import (
    BASE_COLORS,
    EXTENDED_COLORS,
    FUN_COLORS,
    contrast_ratio_with_white,
    darken_color,
    ensure_contrast,
    hex_to_rgb,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
)


def test_normalize_hex_forms():
    assert normalize_hex("#00B4D8") == "#00b4d8"
    assert normalize_hex("00b4d8") == "#00b4d8"
    assert normalize_hex("#ABC") == "#aabbcc"


@pytest.mark.parametrize("bad", ["", "#12345", "#GGGGGG", "red", "#1234567"])
def test_normalize_hex_rejects(bad):
    with pytest.raises(InvalidColorError):
        normalize_hex(bad)


def test_invalid_color_is_value_error():
    with pytest.raises(ValueError):
        hex_to_rgb("nope")


def test_rgb_round_trip_and_clamp():
    assert hex_to_rgb("#ff8000") == (255, 128, 0)
    assert rgb_to_hex(300, -5, 16) == "#ff0010"


def test_luminance_extremes():
    assert relative_luminance("#ffffff") == pytest.approx(1.0)
    assert relative_luminance("#000000") == pytest.approx(0.0)
    assert contrast_ratio_with_white("#000000") == pytest.approx(21.0)


def test_darken_floors_channels():
    assert darken_color("#ff8000", 0.5) == "#7f4000"


def test_dark_color_unchanged():
    assert ensure_contrast("#1D3557") == "#1d3557"


def test_bright_colors_pushed_under_target():
    for color in BASE_COLORS + EXTENDED_COLORS + FUN_COLORS + ("#ffffff",):
        adjusted = ensure_contrast(color)
        assert relative_luminance(adjusted) <= 0.25


def test_ensure_contrast_idempotent():
    for color in ("#FFD23F", "#06FFA5", "#E63946"):
        once = ensure_contrast(color)
        assert ensure_contrast(once) == once


def test_ensure_contrast_only_darkens():
    original = hex_to_rgb("#FFD23F")
    adjusted = hex_to_rgb(ensure_contrast("#FFD23F"))
    assert all(a <= o for a, o in zip(adjusted, original))
