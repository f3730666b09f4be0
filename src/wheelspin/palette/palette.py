"""Curated wheel palettes and color assignment.

A fresh wheel is colored from BASE_COLORS. Items added later draw from an
"extended" sequence: a shuffled, contrast-adjusted copy of EXTENDED_COLORS.
The cursor into that sequence and the set of colors already handed out live
in an immutable PaletteState value that callers thread through, so two wheels
never share hidden color bookkeeping.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple
import logging
import random

from wheelspin.palette.contrast import HexColor, ensure_contrast, normalize_hex

logger = logging.getLogger(__name__)


# Starter colors for a new wheel
BASE_COLORS: Tuple[HexColor, ...] = (
    "#00B4D8",  # sky
    "#52B788",  # green
    "#FFD23F",  # yellow
    "#FF9F1C",  # orange
    "#E63946",  # red
)

# Colors for items added after the starter set
EXTENDED_COLORS: Tuple[HexColor, ...] = (
    "#7209B7",  # violet
    "#F72585",  # magenta
    "#06FFA5",  # neon green
    "#FF6B6B",  # coral
    "#4ECDC4",  # turquoise
    "#45B7D1",  # light blue
    "#96CEB4",  # mint
    "#FFEAA7",  # pale yellow
    "#DDA0DD",  # plum
    "#98D8C8",  # sea green
    "#F7DC6F",  # gold
    "#BB8FCE",  # lavender
    "#85C1E9",  # sky blue
    "#F8C471",  # peach
    "#82E0AA",  # lime
)

# Vivid set kept for themed wheels
FUN_COLORS: Tuple[HexColor, ...] = (
    "#FF6B6B",  # coral
    "#FF8E72",  # peach
    "#FFA62B",  # amber
    "#FFD166",  # sunflower
    "#8AC926",  # lime
    "#06D6A0",  # mint
    "#00BBF9",  # cyan
    "#118AB2",  # blue
    "#3A86FF",  # bright blue
    "#4D96FF",  # denim
    "#9D4EDD",  # violet
    "#C77DFF",  # lavender
    "#F72585",  # magenta
    "#FF006E",  # vivid magenta
    "#FB5607",  # orange
    "#FFD23F",  # vivid yellow
    "#80ED99",  # mint green
    "#00F5D4",  # aqua
    "#FFADAD",  # light red
    "#BDE0FE",  # baby blue
)


def shuffled(colors: Sequence[HexColor], rng: random.Random) -> List[HexColor]:
    """Fisher-Yates shuffle of a copy of colors."""
    result = list(colors)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def generate_palette(
    colors: Sequence[HexColor] = EXTENDED_COLORS,
    rng: Optional[random.Random] = None,
) -> Tuple[HexColor, ...]:
    """Produce a shuffled, white-text-safe palette.

    Args:
        colors: Curated source colors
        rng: Random source (module-level random if omitted)

    Returns:
        Tuple of contrast-adjusted colors in random order
    """
    rng = rng or random.Random()
    return tuple(ensure_contrast(color) for color in shuffled(colors, rng))


@dataclass(frozen=True)
class PaletteState:
    """Color assignment bookkeeping for one wheel.

    Attributes:
        colors: Current extended sequence (already contrast-adjusted)
        cursor: Index of the next color to hand out
        used: Colors already assigned to items
        source: Superset the sequence is regenerated from when exhausted
    """
    colors: Tuple[HexColor, ...] = ()
    cursor: int = 0
    used: frozenset = field(default_factory=frozenset)
    source: Tuple[HexColor, ...] = EXTENDED_COLORS

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.colors)

    def mark_used(self, colors: Iterable[HexColor]) -> "PaletteState":
        """Return a copy with colors added to the used set."""
        return replace(self, used=self.used | {normalize_hex(c) for c in colors})


def new_palette_state(
    rng: Optional[random.Random] = None,
    used: Iterable[HexColor] = (),
    source: Sequence[HexColor] = EXTENDED_COLORS,
) -> PaletteState:
    """Create palette state with a freshly shuffled extended sequence."""
    return PaletteState(
        colors=generate_palette(source, rng),
        cursor=0,
        used=frozenset(normalize_hex(c) for c in used),
        source=tuple(source),
    )


def next_color(
    state: PaletteState,
    rng: Optional[random.Random] = None,
) -> Tuple[HexColor, PaletteState]:
    """Pick the next color for a new item.

    Colors already in use are skipped while the current sequence lasts.
    Once it runs out the sequence is reshuffled from its source and the
    cursor restarts at zero. The used set then starts over with the new
    sequence, so the next cycle walks all of it before repeating.

    Args:
        state: Current palette state
        rng: Random source used when the sequence has to be regenerated

    Returns:
        Tuple of (color, new palette state)
    """
    cursor = state.cursor
    while cursor < len(state.colors) and state.colors[cursor] in state.used:
        cursor += 1

    if cursor < len(state.colors):
        color = state.colors[cursor]
        return color, replace(state, cursor=cursor + 1, used=state.used | {color})

    logger.debug("Extended palette exhausted, regenerating")
    colors = generate_palette(state.source, rng)
    color = colors[0]
    return color, replace(state, colors=colors, cursor=1, used=frozenset({color}))
