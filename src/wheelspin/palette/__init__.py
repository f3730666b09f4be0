"""Palette engine: contrast guarantee and color assignment."""

from wheelspin.palette.contrast import (
    DEFAULT_TARGET_LUMINANCE,
    HexColor,
    contrast_ratio_with_white,
    darken_color,
    ensure_contrast,
    hex_to_rgb,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
)
from wheelspin.palette.palette import (
    BASE_COLORS,
    EXTENDED_COLORS,
    FUN_COLORS,
    PaletteState,
    generate_palette,
    new_palette_state,
    next_color,
    shuffled,
)

__all__ = [
    # Contrast
    "DEFAULT_TARGET_LUMINANCE",
    "HexColor",
    "contrast_ratio_with_white",
    "darken_color",
    "ensure_contrast",
    "hex_to_rgb",
    "normalize_hex",
    "relative_luminance",
    "rgb_to_hex",
    # Palettes
    "BASE_COLORS",
    "EXTENDED_COLORS",
    "FUN_COLORS",
    "PaletteState",
    "generate_palette",
    "new_palette_state",
    "next_color",
    "shuffled",
]
