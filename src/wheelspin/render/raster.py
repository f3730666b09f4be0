"""Pillow render target producing numpy RGB buffers.

The wheel is drawn once into an RGBA image (redrawn only when the command
list changes); each frame just rotates that image, which is far cheaper
than re-laying out labels at 60 fps.
"""

from typing import Optional, Tuple
import logging
import math

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from wheelspin.palette import hex_to_rgb
from wheelspin.render.base import RenderTarget
from wheelspin.text.metrics import PillowTextMeasurer
from wheelspin.wheel.geometry import LabelCommand, WedgeCommand

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


class RasterRenderTarget(RenderTarget):
    """Draws the wheel with Pillow.

    Args:
        size: Canvas edge in pixels (square)
        fonts: Font source; shares the measurer used for wrapping so the
            drawn text matches the measured text
        background: Color behind the wheel
    """

    def __init__(
        self,
        size: int = 800,
        fonts: Optional[PillowTextMeasurer] = None,
        background: Color = (0, 0, 0),
    ) -> None:
        self._size = size
        self._fonts = fonts or PillowTextMeasurer()
        self._background = background
        self._rotation = 0.0
        self._image = self._blank()
        self._draw = ImageDraw.Draw(self._image)
        self._frame: Optional[Image.Image] = None

    @property
    def width(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return self._size

    @property
    def image(self) -> Image.Image:
        """Unrotated wheel image."""
        return self._image

    def _blank(self) -> Image.Image:
        return Image.new("RGBA", (self._size, self._size), (0, 0, 0, 0))

    def clear(self) -> None:
        self._image = self._blank()
        self._draw = ImageDraw.Draw(self._image)
        self._frame = None

    def set_rotation(self, degrees: float) -> None:
        if degrees != self._rotation:
            self._rotation = degrees
            self._frame = None

    def draw_wedge(self, wedge: WedgeCommand) -> None:
        cx, cy = wedge.center
        r = wedge.radius
        box = [cx - r, cy - r, cx + r, cy + r]
        fill = hex_to_rgb(wedge.fill)
        outline = hex_to_rgb(wedge.stroke)
        width = max(1, int(round(wedge.stroke_width)))

        if wedge.is_full_circle:
            self._draw.ellipse(box, fill=fill, outline=outline, width=width)
        else:
            # Pillow angles are degrees clockwise from 3 o'clock, same as ours
            self._draw.pieslice(
                box,
                start=math.degrees(wedge.start_angle),
                end=math.degrees(wedge.end_angle),
                fill=fill,
                outline=outline,
                width=width,
            )
        self._frame = None

    def draw_label(self, label: LabelCommand) -> None:
        if not label.lines:
            return

        font = self._fonts.font(label.font_px)
        color = hex_to_rgb(label.color)
        block_w = int(max(self._fonts(line, label.font_px) for line in label.lines)) + 4
        block_h = int(label.line_height * len(label.lines)) + 4

        block = Image.new("RGBA", (block_w, block_h), (0, 0, 0, 0))
        draw = ImageDraw.Draw(block)
        for i, line in enumerate(label.lines):
            line_y = label.line_height * (i + 0.5) + 2
            draw.text((block_w / 2, line_y), line, font=font, fill=color, anchor="mm")

        rotated = block.rotate(-label.rotation_deg, resample=Image.BICUBIC, expand=True)
        x, y = label.anchor
        left = int(round(x - rotated.width / 2))
        top = int(round(y - rotated.height / 2))
        # alpha_composite refuses negative offsets, so crop instead
        self._image.alpha_composite(
            rotated,
            dest=(max(0, left), max(0, top)),
            source=(max(0, -left), max(0, -top)),
        )
        self._frame = None

    def render_image(self) -> Image.Image:
        """Rotated wheel over the background color."""
        if self._frame is None:
            wheel = self._image.rotate(-self._rotation, resample=Image.BICUBIC)
            frame = Image.new("RGBA", wheel.size, self._background + (255,))
            frame.alpha_composite(wheel)
            self._frame = frame.convert("RGB")
        return self._frame

    def get_buffer(self) -> Buffer:
        """Rotated wheel as an (height, width, 3) uint8 array."""
        return np.asarray(self.render_image(), dtype=np.uint8).copy()

    def save(self, path) -> None:
        """Write the current frame to an image file."""
        self.render_image().save(path)
        logger.info(f"Wheel image saved to {path}")
