"""Tests for the SVG and raster render targets."""

import xml.etree.ElementTree as ET

import numpy as np

from wheelspin.config import WheelSettings
from wheelspin.render import RasterRenderTarget, SvgRenderTarget
from wheelspin.text import FixedWidthMeasurer, PillowTextMeasurer
from wheelspin.wheel import Item, Wheel, create_wheel, render_wheel

SVG = "{http://www.w3.org/2000/svg}"


def test_svg_document(rng, measure, wheel_settings):
    wheel = create_wheel(rng=rng)
    target = SvgRenderTarget()
    target.draw(render_wheel(wheel, measure, wheel_settings))
    target.set_rotation(123.5)

    root = ET.fromstring(target.to_svg())
    group = root.find(f"{SVG}g")
    assert group.get("transform") == "rotate(123.5, 400, 400)"
    paths = group.findall(f"{SVG}path")
    texts = group.findall(f"{SVG}text")
    assert len(paths) == 5
    assert [p.get("fill") for p in paths] == [item.color for item in wheel.items]
    assert [t.find(f"{SVG}tspan").text for t in texts] == [item.text for item in wheel.items]


def test_svg_escapes_text(measure):
    wheel = Wheel(items=(Item("A&B <c>", "#123456"), Item("x", "#234567")))
    target = SvgRenderTarget()
    target.draw(render_wheel(wheel, measure))
    root = ET.fromstring(target.to_svg())
    assert root.find(f"{SVG}g/{SVG}text/{SVG}tspan").text == "A&B <c>"


def test_svg_single_item_is_circle(measure):
    target = SvgRenderTarget()
    target.draw(render_wheel(Wheel(items=(Item("Only", "#123456"),)), measure))
    root = ET.fromstring(target.to_svg())
    assert root.find(f"{SVG}g/{SVG}circle") is not None
    assert root.find(f"{SVG}g/{SVG}path") is None


def test_svg_redraw_replaces_elements(rng, measure):
    target = SvgRenderTarget()
    target.draw(render_wheel(create_wheel(rng=rng), measure))
    target.draw(render_wheel(Wheel(), measure))
    assert target.elements == []


def test_raster_buffer(rng):
    target = RasterRenderTarget(size=200, background=(10, 20, 30))
    wheel = create_wheel(rng=rng)
    settings = WheelSettings(size=200, radius=100.0, base_font_px=12)
    target.draw(render_wheel(wheel, PillowTextMeasurer(), settings))

    buffer = target.get_buffer()
    assert buffer.shape == (200, 200, 3)
    assert buffer.dtype == np.uint8
    # Corner is outside the wheel
    assert tuple(buffer[0, 0]) == (10, 20, 30)
    # Just inside the rim, right of 12 o'clock: sector 0
    assert tuple(buffer[5, 105]) != (10, 20, 30)


def test_raster_rotation_changes_frame(rng):
    target = RasterRenderTarget(size=120)
    settings = WheelSettings(size=120, radius=60.0, base_font_px=10)
    target.draw(render_wheel(create_wheel(rng=rng), FixedWidthMeasurer(), settings))
    before = target.get_buffer()
    target.set_rotation(36)
    after = target.get_buffer()
    assert not np.array_equal(before, after)
