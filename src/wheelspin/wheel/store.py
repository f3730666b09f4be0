"""Wheel item store.

The pure functions here take a Wheel and return a new one; when nothing
changes they return the very same object, which is how WheelStore tells an
applied mutation from a silent no-op. Items cannot be changed while the
wheel is spinning, since the outcome depends on the item count the spin
started with.
"""

from dataclasses import replace
from typing import Callable, Iterable, Mapping, Optional
import logging
import random

from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.palette import next_color
from wheelspin.wheel.model import Item, Wheel, create_wheel

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]
RenderCallback = Callable[[Wheel], None]


def _in_range(wheel: Wheel, index: int) -> bool:
    return isinstance(index, int) and 0 <= index < wheel.count


def add_item(wheel: Wheel, text: str, rng: Optional[random.Random] = None) -> Wheel:
    """Append an item with the next palette color.

    Blank text and calls during a spin are ignored.
    """
    text = (text or "").strip()
    if not text:
        return wheel
    if wheel.spinning:
        logger.warning("Ignoring add while the wheel is spinning")
        return wheel

    color, palette = next_color(wheel.palette, rng)
    return replace(
        wheel,
        items=wheel.items + (Item(text=text, color=color),),
        palette=palette,
        result="",
    )


def edit_item(wheel: Wheel, index: int, text: str) -> Wheel:
    """Replace the text of the item at index; out-of-range is ignored."""
    if not _in_range(wheel, index):
        logger.debug(f"Ignoring edit of missing item {index}")
        return wheel
    if wheel.spinning:
        logger.warning("Ignoring edit while the wheel is spinning")
        return wheel

    items = list(wheel.items)
    items[index] = replace(items[index], text=text)
    return replace(wheel, items=tuple(items))


def remove_item(wheel: Wheel, index: int) -> Wheel:
    """Remove the item at index, shifting later items down.

    Also clears the displayed result. Out-of-range is ignored.
    """
    if not _in_range(wheel, index):
        logger.debug(f"Ignoring removal of missing item {index}")
        return wheel
    if wheel.spinning:
        logger.warning("Ignoring removal while the wheel is spinning")
        return wheel

    items = wheel.items[:index] + wheel.items[index + 1:]
    return replace(wheel, items=items, result="")


class WheelStore:
    """
    Holds the authoritative Wheel for one widget and wires collaborators.

    Each applied mutation calls on_change exactly once (the persistence
    hook), emits ITEMS_CHANGED on the event bus and calls on_render once.
    No-ops do none of these.
    """

    def __init__(
        self,
        name: str = "wheel",
        initial_items: Optional[Iterable[Item | Mapping]] = None,
        on_change: Optional[ChangeCallback] = None,
        on_render: Optional[RenderCallback] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        palette: str = "classic",
        placeholder: str = "Add option",
    ) -> None:
        self.name = name
        self.placeholder = placeholder
        self._rng = rng or random.Random()
        self._wheel = create_wheel(initial_items, self._rng, palette)
        self._on_change = on_change
        self._on_render = on_render
        self._event_bus = event_bus
        self._unsubscribers: list[Callable[[], None]] = []

        if event_bus is not None:
            self.attach(event_bus)

        logger.info(f"WheelStore[{name}] created with {self._wheel.count} items")

    @property
    def wheel(self) -> Wheel:
        return self._wheel

    @property
    def items(self) -> tuple[Item, ...]:
        return self._wheel.items

    def set_change_callback(self, callback: Optional[ChangeCallback]) -> None:
        self._on_change = callback

    def set_render_callback(self, callback: Optional[RenderCallback]) -> None:
        self._on_render = callback

    def add_item(self, text: str) -> bool:
        """Add an item. Returns True if the wheel changed."""
        return self._commit(add_item(self._wheel, text, self._rng), "added")

    def edit_item(self, index: int, text: str) -> bool:
        """Edit an item's text. Returns True if the wheel changed."""
        return self._commit(edit_item(self._wheel, index, text), "edited")

    def remove_item(self, index: int) -> bool:
        """Remove an item. Returns True if the wheel changed."""
        return self._commit(remove_item(self._wheel, index), "removed")

    def update_wheel(self, wheel: Wheel) -> None:
        """Swap in a new wheel value without change notification.

        Used by the spin engine for rotation and result updates, which are
        not part of the persisted item list.
        """
        self._wheel = wheel

    def render(self) -> None:
        if self._on_render is not None:
            self._on_render(self._wheel)

    def _commit(self, new_wheel: Wheel, action: str) -> bool:
        if new_wheel is self._wheel:
            return False

        self._wheel = new_wheel
        logger.debug(f"WheelStore[{self.name}] item {action}, {new_wheel.count} items")

        if self._on_change is not None:
            self._on_change()
        if self._event_bus is not None:
            self._event_bus.emit(Event(
                EventType.ITEMS_CHANGED,
                data={"items": [item.to_dict() for item in new_wheel.items]},
                source=self.name,
            ))
        self.render()
        return True

    # Event bus wiring

    def attach(self, event_bus: EventBus) -> None:
        """Listen for add/edit/remove requests addressed to this wheel."""
        self._event_bus = event_bus
        self._unsubscribers = [
            event_bus.subscribe(EventType.ADD_ITEM_REQUESTED, self._on_add_request),
            event_bus.subscribe(EventType.EDIT_ITEM_REQUESTED, self._on_edit_request),
            event_bus.subscribe(EventType.REMOVE_ITEM_REQUESTED, self._on_remove_request),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_add_request(self, event: Event) -> None:
        if event.source == self.name:
            self.add_item(event.data.get("text", ""))

    def _on_edit_request(self, event: Event) -> None:
        if event.source == self.name:
            self.edit_item(event.data.get("index", -1), event.data.get("text", ""))

    def _on_remove_request(self, event: Event) -> None:
        if event.source == self.name:
            self.remove_item(event.data.get("index", -1))
