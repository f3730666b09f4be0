"""Text measurement backends for the label layout engine."""

from typing import Dict, Optional, Sequence
import logging

from PIL import ImageFont

logger = logging.getLogger(__name__)

# Bold sans fonts to try, in order
BOLD_FONT_PATHS: Sequence[str] = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSansBold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
)


def load_bold_font(size: int, font_paths: Sequence[str] = BOLD_FONT_PATHS):
    """Load the first available bold font at size, or Pillow's default."""
    for path in font_paths:
        try:
            return ImageFont.truetype(path, size)
        except (OSError, IOError):
            continue

    logger.warning(f"No bold TrueType font found, using default font at {size}px")
    return ImageFont.load_default(size=size)


class PillowTextMeasurer:
    """Measures text with a real bold font through Pillow.

    Fonts are loaded lazily and cached per pixel size. Instances are
    callable, matching the MeasureFunc signature.
    """

    def __init__(self, font_paths: Optional[Sequence[str]] = None) -> None:
        self._font_paths = tuple(font_paths) if font_paths else tuple(BOLD_FONT_PATHS)
        self._font_cache: Dict[int, object] = {}

    def font(self, size: int):
        """Get the cached font for a pixel size."""
        if size not in self._font_cache:
            self._font_cache[size] = load_bold_font(size, self._font_paths)
        return self._font_cache[size]

    def __call__(self, text: str, font_px: int) -> float:
        if not text:
            return 0.0
        return float(self.font(font_px).getlength(text))


class FixedWidthMeasurer:
    """Approximate measurer: every character advances font_px * ratio.

    Useful headless or where no font files are installed.
    """

    def __init__(self, char_width_ratio: float = 0.6) -> None:
        self.char_width_ratio = char_width_ratio

    def __call__(self, text: str, font_px: int) -> float:
        return len(text) * font_px * self.char_width_ratio
