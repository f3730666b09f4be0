"""Pixel-width text wrapping for sector labels.

Labels have to fit inside a wedge, so wrapping works on measured pixel
widths rather than character counts:
- Words are packed greedily onto lines
- A word wider than the box is cut down and ends with an ellipsis
- At most MAX_LINES lines are produced; overflow is folded into the last one

Measurement is injected (see wheelspin.text.metrics) so the algorithm itself
stays pure and testable.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

ELLIPSIS = "…"
MAX_LINES = 3

# measure(text, font_px) -> width in pixels
MeasureFunc = Callable[[str, int], float]


@dataclass(frozen=True)
class WrappedText:
    """Result of wrapping a label."""
    lines: Tuple[str, ...]
    font_px: int

    @property
    def line_count(self) -> int:
        return len(self.lines)


def truncate_with_ellipsis(
    text: str,
    max_width: float,
    font_px: int,
    measure: MeasureFunc,
) -> str:
    """Cut text one character at a time until text + ellipsis fits.

    Never goes below a single character, so the result can still be wider
    than max_width when even one character plus the ellipsis does not fit.
    """
    cut = text
    while len(cut) > 1 and measure(f"{cut}{ELLIPSIS}", font_px) > max_width:
        cut = cut[:-1]
    return f"{cut}{ELLIPSIS}"


def wrap_text_to_width(
    text: str,
    max_width: float,
    font_px: int,
    measure: MeasureFunc,
    max_lines: int = MAX_LINES,
) -> WrappedText:
    """Word-wrap text so each line fits within max_width pixels.

    Args:
        text: Label text (any whitespace separates words)
        max_width: Maximum line width in pixels
        font_px: Font size used for measuring
        measure: Width measurement function
        max_lines: Line cap; extra lines are merged into the last one

    Returns:
        WrappedText with the lines and the font size used
    """
    words = text.split()
    lines: List[str] = []
    current_line = ""

    for word in words:
        test_line = f"{current_line} {word}" if current_line else word

        if measure(test_line, font_px) <= max_width:
            current_line = test_line
            continue

        # Word doesn't fit, close the current line first
        if current_line:
            lines.append(current_line)
            current_line = ""

        if measure(word, font_px) <= max_width:
            current_line = word
        else:
            lines.append(truncate_with_ellipsis(word, max_width, font_px, measure))

    if current_line:
        lines.append(current_line)

    if len(lines) > max_lines:
        kept = lines[:max_lines - 1]
        rest = " ".join(lines[max_lines - 1:])
        if measure(rest, font_px) > max_width:
            rest = truncate_with_ellipsis(rest, max_width, font_px, measure)
        kept.append(rest)
        lines = kept

    return WrappedText(lines=tuple(lines), font_px=font_px)
