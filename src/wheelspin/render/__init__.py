"""Render targets for wheel draw commands."""

from wheelspin.render.base import RenderTarget
from wheelspin.render.svg import SvgRenderTarget
from wheelspin.render.raster import RasterRenderTarget

__all__ = ["RenderTarget", "SvgRenderTarget", "RasterRenderTarget"]
