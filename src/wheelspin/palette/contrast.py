"""Color parsing and white-text contrast utilities.

Every wheel sector carries white label text, so sector colors are pushed
below a relative-luminance ceiling before they are used. The luminance
formula is the standard sRGB one (WCAG 2.x).
"""

from typing import Tuple
import re

from wheelspin.exceptions import InvalidColorError

# Type aliases
RGB = Tuple[int, int, int]
HexColor = str

# Luminance ceiling that keeps white text readable (~3:1 contrast)
DEFAULT_TARGET_LUMINANCE = 0.25

# Darkening schedule
DARKEN_START_FACTOR = 0.95
DARKEN_FACTOR_STEP = 0.05
DARKEN_MIN_FACTOR = 0.40
DARKEN_MAX_STEPS = 30

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(color: str) -> HexColor:
    """Normalize a hex color to lowercase ``#rrggbb``.

    Args:
        color: ``#RRGGBB``, ``#RGB`` or the same without the leading hash

    Returns:
        Normalized color string

    Raises:
        InvalidColorError: If the string is not a hex color
    """
    match = _HEX_RE.match(color.strip()) if isinstance(color, str) else None
    if match is None:
        raise InvalidColorError(f"Invalid hex color: {color!r}")

    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits}"


def hex_to_rgb(color: str) -> RGB:
    """Convert a hex color to an (r, g, b) tuple."""
    value = int(normalize_hex(color)[1:], 16)
    return ((value >> 16) & 255, (value >> 8) & 255, value & 255)


def rgb_to_hex(r: int, g: int, b: int) -> HexColor:
    """Convert channel values (clamped to 0-255) to ``#rrggbb``."""
    def channel(x: int) -> str:
        return f"{max(0, min(255, int(x))):02x}"

    return f"#{channel(r)}{channel(g)}{channel(b)}"


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """Relative luminance of a color, from 0.0 (black) to 1.0 (white)."""
    r, g, b = hex_to_rgb(color)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio_with_white(color: str) -> float:
    """Contrast ratio of white text on this color (1.0 to 21.0)."""
    return (1.0 + 0.05) / (relative_luminance(color) + 0.05)


def darken_color(color: str, factor: float) -> HexColor:
    """Scale every channel by factor, flooring to integers."""
    r, g, b = hex_to_rgb(color)
    return rgb_to_hex(
        max(0, int(r * factor)),
        max(0, int(g * factor)),
        max(0, int(b * factor)),
    )


def ensure_contrast(color: str, target_luminance: float = DEFAULT_TARGET_LUMINANCE) -> HexColor:
    """Darken a color until white text on it is legible.

    The color is darkened step by step with a shrinking factor
    (0.95, 0.90, ... floored at 0.40). After DARKEN_MAX_STEPS steps the
    darkest color reached is returned even if it is still above the target,
    so this never fails.

    Args:
        color: Hex color
        target_luminance: Maximum relative luminance allowed

    Returns:
        Normalized hex color with luminance <= target_luminance
        (best effort)
    """
    result = normalize_hex(color)
    if relative_luminance(result) <= target_luminance:
        return result

    factor = DARKEN_START_FACTOR
    steps = 0
    while relative_luminance(result) > target_luminance and steps < DARKEN_MAX_STEPS:
        result = darken_color(result, factor)
        factor = max(DARKEN_MIN_FACTOR, factor - DARKEN_FACTOR_STEP)
        steps += 1

    return result
