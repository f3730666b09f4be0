"""Wheel model, geometry, store and spin engine."""

from wheelspin.wheel.model import Item, Wheel, create_wheel, default_items
from wheelspin.wheel.geometry import (
    DrawCommand,
    LabelCommand,
    WedgeCommand,
    render_wheel,
    sector_angles,
)
from wheelspin.wheel.store import WheelStore, add_item, edit_item, remove_item
from wheelspin.wheel.spin import (
    FULL_SPINS,
    SPIN_DURATION_MS,
    SpinController,
    SpinFrame,
    SpinTimeline,
    finish_spin,
    plan_spin,
    pointer_angle,
    resolve_sector,
    start_spin,
)

__all__ = [
    # Model
    "Item",
    "Wheel",
    "create_wheel",
    "default_items",
    # Geometry
    "DrawCommand",
    "LabelCommand",
    "WedgeCommand",
    "render_wheel",
    "sector_angles",
    # Store
    "WheelStore",
    "add_item",
    "edit_item",
    "remove_item",
    # Spin
    "FULL_SPINS",
    "SPIN_DURATION_MS",
    "SpinController",
    "SpinFrame",
    "SpinTimeline",
    "finish_spin",
    "plan_spin",
    "pointer_angle",
    "resolve_sector",
    "start_spin",
]
