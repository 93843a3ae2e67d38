"""
Floodwave - Color Palettes

Shared colour constants used across the generator, the renderers and the
viewer, plus conversion from "#RRGGBB" tokens to RGB tuples.
"""

from typing import List, Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Territory colours handed out by the generator
CYBERPUNK_PALETTE: List[str] = [
    "#FF006E",
    "#FB5607",
    "#FFBE0B",
    "#8338EC",
    "#3A86FF",
    "#06FFA5",
    "#00D9FF",
    "#FF10F0",
    "#00F5FF",
]

# Quick-pick fill colours offered by the viewer
PRESET_COLORS: List[str] = ["#FF006E", "#3A86FF", "#06FFA5"]

DEFAULT_FILL_COLOR = "#FF006E"

# Used by renderers for cells that are not valid hex colours
FALLBACK_RGB: RGBColor = (0, 0, 0)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex_color(value) -> bool:
    """Check for a 7-character "#RRGGBB" string."""
    return (
        isinstance(value, str)
        and len(value) == 7
        and value[0] == "#"
        and all(ch in _HEX_DIGITS for ch in value[1:])
    )


def hex_to_rgb(value: str) -> RGBColor:
    """
    Convert a "#RRGGBB" colour token to an RGB tuple.

    Raises:
        ValueError: If value is not a "#RRGGBB" string
    """
    if not is_hex_color(value):
        raise ValueError(f"Not a #RRGGBB colour: {value!r}")
    return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


def color_to_rgb(value) -> RGBColor:
    """Like hex_to_rgb, but maps anything unparseable to FALLBACK_RGB."""
    if is_hex_color(value):
        return hex_to_rgb(value)
    return FALLBACK_RGB
