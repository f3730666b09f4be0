"""SVG render target.

Builds the same markup a browser page would hold for the wheel: one
<path> per sector, one <text> with a <tspan> per label line, and the wheel
rotation as a transform on the outer group.
"""

from typing import List
from xml.sax.saxutils import escape, quoteattr
import logging

from wheelspin.render.base import RenderTarget
from wheelspin.wheel.geometry import LabelCommand, WedgeCommand

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def _num(value: float) -> str:
    """Compact number formatting for attributes."""
    return f"{value:.3f}".rstrip("0").rstrip(".") or "0"


class SvgRenderTarget(RenderTarget):
    """Collects draw commands as SVG elements."""

    def __init__(self, width: int = 800, height: int = 800) -> None:
        self._width = width
        self._height = height
        self._elements: List[str] = []
        self._rotation = 0.0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def elements(self) -> List[str]:
        return list(self._elements)

    def clear(self) -> None:
        self._elements.clear()

    def set_rotation(self, degrees: float) -> None:
        self._rotation = degrees

    def draw_wedge(self, wedge: WedgeCommand) -> None:
        if wedge.is_full_circle:
            # Start and end points coincide, so an arc path would draw nothing
            cx, cy = wedge.center
            self._elements.append(
                f'<circle cx="{_num(cx)}" cy="{_num(cy)}" r="{_num(wedge.radius)}" '
                f'fill="{wedge.fill}" stroke="{wedge.stroke}" stroke-width="{_num(wedge.stroke_width)}"/>'
            )
            return

        self._elements.append(
            f'<path d="{wedge.path}" fill="{wedge.fill}" '
            f'stroke="{wedge.stroke}" stroke-width="{_num(wedge.stroke_width)}"/>'
        )

    def draw_label(self, label: LabelCommand) -> None:
        x, y = label.anchor
        tspans = []
        for i, line in enumerate(label.lines):
            dy = label.first_dy if i == 0 else label.line_height
            tspans.append(f'<tspan x="{_num(x)}" dy="{_num(dy)}">{escape(line)}</tspan>')

        self._elements.append(
            f'<text x="{_num(x)}" y="{_num(y)}" text-anchor="middle" dominant-baseline="middle" '
            f'font-size="{label.font_px}" fill="{label.color}" '
            f'font-family={quoteattr(label.font_family)} font-weight="700" '
            f'transform="rotate({_num(label.rotation_deg)}, {_num(x)}, {_num(y)})">'
            f'{"".join(tspans)}</text>'
        )

    def to_svg(self) -> str:
        """Full SVG document for the current drawing."""
        cx, cy = self._width / 2, self._height / 2
        parts = [
            f'<svg xmlns="{SVG_NS}" width="{self._width}" height="{self._height}" '
            f'viewBox="0 0 {self._width} {self._height}">',
            f'<g transform="rotate({_num(self._rotation)}, {_num(cx)}, {_num(cy)})">',
            *self._elements,
            "</g>",
            "</svg>",
        ]
        return "\n".join(parts)
