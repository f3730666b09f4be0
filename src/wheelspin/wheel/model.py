"""Wheel data model.

A Wheel is an immutable value: ordered items, the current rotation, the
spinning flag, the palette bookkeeping and the last outcome. Operations in
wheelspin.wheel.store and wheelspin.wheel.spin return new Wheel values.
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence, Tuple
import random

from wheelspin.palette import (
    BASE_COLORS,
    EXTENDED_COLORS,
    FUN_COLORS,
    HexColor,
    PaletteState,
    ensure_contrast,
    new_palette_state,
)

DEFAULT_ITEM_PREFIX = "Option"

PALETTE_SOURCES = {
    "classic": EXTENDED_COLORS,
    "fun": FUN_COLORS,
}


@dataclass(frozen=True)
class Item:
    """One sector: label text and fill color."""
    text: str
    color: HexColor

    def to_dict(self) -> dict:
        return {"text": self.text, "color": self.color}

    @classmethod
    def from_dict(cls, data: Mapping) -> "Item":
        return cls(text=str(data.get("text", "")), color=ensure_contrast(str(data["color"])))


@dataclass(frozen=True)
class Wheel:
    """Wheel state.

    Attributes:
        items: Sectors in clockwise order starting at 12 o'clock
        rotation: Current rotation in degrees (grows across spins)
        spinning: True while a spin animation is running
        palette: Color assignment state for new items
        result: Text of the last outcome ("" when cleared)
    """
    items: Tuple[Item, ...] = ()
    rotation: float = 0.0
    spinning: bool = False
    palette: PaletteState = field(default_factory=PaletteState)
    result: str = ""

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


def default_items(colors: Sequence[HexColor] = BASE_COLORS) -> Tuple[Item, ...]:
    """Starter items "Option 1".."Option N", one per base color."""
    return tuple(
        Item(text=f"{DEFAULT_ITEM_PREFIX} {i + 1}", color=ensure_contrast(color))
        for i, color in enumerate(colors)
    )


def create_wheel(
    initial_items: Optional[Iterable[Item | Mapping]] = None,
    rng: Optional[random.Random] = None,
    palette: str = "classic",
) -> Wheel:
    """Build a wheel from saved items, or the starter set when none given.

    Args:
        initial_items: Items or {"text", "color"} mappings; None for defaults
        rng: Random source for the extended palette shuffle
        palette: Name of the extended palette ("classic" or "fun")

    Returns:
        New idle wheel at rotation 0
    """
    if initial_items is None:
        items = default_items()
    else:
        items = tuple(
            item if isinstance(item, Item) else Item.from_dict(item)
            for item in initial_items
        )

    source = PALETTE_SOURCES.get(palette, EXTENDED_COLORS)
    state = new_palette_state(rng, used=[item.color for item in items], source=source)
    return Wheel(items=items, palette=state)
