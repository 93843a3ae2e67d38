"""Unit tests for colour palettes and hex conversion."""

import pytest

from floodwave.core.palettes import (
    CYBERPUNK_PALETTE,
    FALLBACK_RGB,
    PRESET_COLORS,
    color_to_rgb,
    hex_to_rgb,
    is_hex_color,
)


def test_palette_colours_are_hex():
    assert len(CYBERPUNK_PALETTE) == 9
    assert all(is_hex_color(c) for c in CYBERPUNK_PALETTE)


def test_presets_come_from_palette():
    assert set(PRESET_COLORS) <= set(CYBERPUNK_PALETTE)


@pytest.mark.parametrize(
    "value,expected",
    [("#FF006E", (255, 0, 110)), ("#000000", (0, 0, 0)), ("#3a86ff", (58, 134, 255))],
)
def test_hex_to_rgb(value, expected):
    assert hex_to_rgb(value) == expected


@pytest.mark.parametrize("value", ["FF006E", "#FFF", "#GG0000", "", None, 123])
def test_hex_to_rgb_rejects_malformed(value):
    with pytest.raises(ValueError):
        hex_to_rgb(value)


def test_color_to_rgb_falls_back():
    assert color_to_rgb("red") == FALLBACK_RGB
    assert color_to_rgb(7) == FALLBACK_RGB
    assert color_to_rgb("#00FF00") == (0, 255, 0)
