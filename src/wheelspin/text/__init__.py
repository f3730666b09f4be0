"""Text layout engine for wheel labels."""

from wheelspin.text.layout import (
    ELLIPSIS,
    MAX_LINES,
    MeasureFunc,
    WrappedText,
    truncate_with_ellipsis,
    wrap_text_to_width,
)
from wheelspin.text.metrics import FixedWidthMeasurer, PillowTextMeasurer, load_bold_font

__all__ = [
    "ELLIPSIS",
    "MAX_LINES",
    "MeasureFunc",
    "WrappedText",
    "truncate_with_ellipsis",
    "wrap_text_to_width",
    "FixedWidthMeasurer",
    "PillowTextMeasurer",
    "load_bold_font",
]
