"""Polar geometry for drawing the wheel.

Sector 0 starts at 12 o'clock and sectors proceed clockwise in screen
coordinates (y grows downward), so sector i spans
``2*pi*i/N - pi/2`` to ``2*pi*(i+1)/N - pi/2``.

render_wheel() projects a Wheel into a list of draw commands (one wedge and
one label per item). Render targets in wheelspin.render turn those into SVG
markup or pixels; the rotation itself is applied by the target, not baked
into the commands.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union
import math

from wheelspin.config import WheelSettings
from wheelspin.palette import ensure_contrast
from wheelspin.text import MeasureFunc, WrappedText, wrap_text_to_width
from wheelspin.wheel.model import Wheel

Point = Tuple[float, float]


@dataclass(frozen=True)
class WedgeCommand:
    """A filled pie slice."""
    index: int
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    start_point: Point
    end_point: Point
    large_arc: int
    fill: str
    stroke: str = "#ffffff"
    stroke_width: float = 1.0

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def is_full_circle(self) -> bool:
        return math.isclose(self.sweep, 2 * math.pi)

    @property
    def path(self) -> str:
        """SVG path data for this wedge."""
        cx, cy = self.center
        x1, y1 = self.start_point
        x2, y2 = self.end_point
        r = self.radius
        return f"M {cx},{cy} L {x1},{y1} A {r},{r} 0 {self.large_arc},1 {x2},{y2} Z"


@dataclass(frozen=True)
class LabelCommand:
    """A block of label lines centered on an anchor and rotated radially.

    Line k is drawn at ``y + first_dy + k * line_height`` before rotation.
    """
    index: int
    anchor: Point
    rotation_deg: float
    lines: Tuple[str, ...]
    font_px: int
    line_height: float
    first_dy: float
    max_width: float
    color: str = "#ffffff"
    font_family: str = "Outfit, sans-serif"


DrawCommand = Union[WedgeCommand, LabelCommand]


def sector_angles(index: int, count: int) -> Tuple[float, float]:
    """Start and end angle (radians) of sector index out of count."""
    start = (2 * math.pi * index) / count - math.pi / 2
    end = (2 * math.pi * (index + 1)) / count - math.pi / 2
    return start, end


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    cx, cy = center
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def chord_length(radius: float, sweep: float) -> float:
    """Chord spanned by a sweep at radius.

    Sweeps past a half turn are capped at the diameter, so a single
    full-circle sector gets the whole width rather than a zero chord.
    """
    return 2 * radius * math.sin(min(sweep, math.pi) / 2)


def build_wedge(
    index: int,
    count: int,
    center: Point,
    radius: float,
    fill: str,
    stroke: str = "#ffffff",
) -> WedgeCommand:
    """Compute the wedge for one sector."""
    start, end = sector_angles(index, count)
    return WedgeCommand(
        index=index,
        center=center,
        radius=radius,
        start_angle=start,
        end_angle=end,
        start_point=point_on_circle(center, radius, start),
        end_point=point_on_circle(center, radius, end),
        large_arc=1 if (end - start) > math.pi else 0,
        fill=fill,
        stroke=stroke,
    )


def layout_label(
    index: int,
    count: int,
    text: str,
    measure: MeasureFunc,
    settings: WheelSettings,
) -> LabelCommand:
    """Place and wrap the label for one sector.

    The label sits on the sector's mid-angle at label_radius_ratio of the
    outer radius. Its width budget is the chord at that radius minus the
    margin, and it is rotated (mid-angle + 90 degrees) so it reads along
    the radius.
    """
    start, end = sector_angles(index, count)
    mid = (start + end) / 2
    text_radius = settings.radius * settings.label_radius_ratio
    # A single item sweeps the whole circle; its label gets the full diameter
    max_width = chord_length(text_radius, end - start) - settings.label_margin_px

    wrapped: WrappedText = wrap_text_to_width(
        text, max_width, settings.base_font_px, measure, max_lines=settings.max_lines
    )

    line_height = wrapped.font_px * settings.line_height_ratio
    total_height = line_height * (max(wrapped.line_count, 1) - 1)

    return LabelCommand(
        index=index,
        anchor=point_on_circle(settings.center, text_radius, mid),
        rotation_deg=math.degrees(mid) + 90,
        lines=wrapped.lines,
        font_px=wrapped.font_px,
        line_height=line_height,
        first_dy=-total_height / 2,
        max_width=max_width,
        color=settings.label_color,
        font_family=settings.font_family,
    )


def render_wheel(
    wheel: Wheel,
    measure: MeasureFunc,
    settings: Optional[WheelSettings] = None,
) -> List[DrawCommand]:
    """Project a wheel into draw commands.

    Args:
        wheel: Wheel to draw
        measure: Text measurement used for label wrapping
        settings: Canvas and label settings (defaults if omitted)

    Returns:
        Wedges and labels in sector order; empty for an empty wheel
    """
    settings = settings or WheelSettings()
    count = wheel.count
    commands: List[DrawCommand] = []

    for i, item in enumerate(wheel.items):
        fill = ensure_contrast(item.color, settings.contrast_target)
        commands.append(build_wedge(i, count, settings.center, settings.radius, fill, settings.stroke_color))
        commands.append(layout_label(i, count, item.text or "", measure, settings))

    return commands
