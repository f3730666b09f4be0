"""Spin engine: rotation timeline and outcome resolution.

A spin always runs SPIN_DURATION_MS and covers at least FULL_SPINS turns
plus a random offset. The rotation shown at any moment is computed from
the elapsed time since the spin started (never by summing frame deltas),
so any scheduler can drive it: a pygame frame loop, an asyncio task, or a
fake clock in tests.

The pointer is fixed at 12 o'clock. Because sector 0 starts at -90 degrees
and the wheel turns clockwise, the sector under the pointer after a
rotation of ``a`` degrees is ``floor(((360 - a % 360 + 90) % 360) / (360 / N))``.
"""

from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple
import logging
import math
import random
import time

from wheelspin.animation.easing import Easing, interpolate
from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.core.state import SpinState, StateMachine
from wheelspin.wheel.model import Item, Wheel

logger = logging.getLogger(__name__)

SPIN_DURATION_MS = 5000.0
FULL_SPINS = 8
POINTER_OFFSET_DEG = 90.0

Clock = Callable[[], float]
ResultCallback = Callable[[str], None]


@dataclass(frozen=True)
class SpinFrame:
    """Wheel rotation at one point of a spin."""
    rotation: float
    progress: float
    done: bool


@dataclass(frozen=True)
class SpinTimeline:
    """Everything needed to animate and resolve one spin."""
    initial_rotation: float
    target_rotation: float
    item_count: int
    duration_ms: float = SPIN_DURATION_MS

    @property
    def degrees_per_item(self) -> float:
        return 360 / self.item_count

    def tick(self, elapsed_ms: float) -> SpinFrame:
        """Rotation after elapsed_ms, with quintic ease-out."""
        progress = min(max(elapsed_ms, 0.0) / self.duration_ms, 1.0)
        rotation = interpolate(
            self.initial_rotation, self.target_rotation, progress, Easing.EASE_OUT_QUINT
        )
        return SpinFrame(rotation=rotation, progress=progress, done=progress >= 1.0)


def plan_spin(wheel: Wheel, rng: Optional[random.Random] = None) -> Optional[SpinTimeline]:
    """Plan a spin, or None if the wheel is empty or already spinning."""
    if wheel.is_empty or wheel.spinning:
        return None

    rng = rng or random.Random()
    random_offset = rng.random() * 360
    initial = wheel.rotation % 360
    return SpinTimeline(
        initial_rotation=initial,
        target_rotation=initial + FULL_SPINS * 360 + random_offset,
        item_count=wheel.count,
    )


def start_spin(
    wheel: Wheel,
    rng: Optional[random.Random] = None,
) -> Tuple[Wheel, Optional[SpinTimeline]]:
    """Begin a spin: mark the wheel spinning and clear the last result.

    Returns:
        (new wheel, timeline), or (same wheel, None) if the spin is refused
    """
    timeline = plan_spin(wheel, rng)
    if timeline is None:
        return wheel, None
    return replace(wheel, spinning=True, result="", rotation=timeline.initial_rotation), timeline


def pointer_angle(rotation: float) -> float:
    """Angle in sector space that sits under the top pointer."""
    final_angle = rotation % 360
    return (360 - final_angle + POINTER_OFFSET_DEG) % 360


def resolve_sector(rotation: float, item_count: int) -> int:
    """Index of the sector under the pointer, or -1 for an empty wheel."""
    if item_count <= 0:
        return -1
    index = math.floor(pointer_angle(rotation) / (360 / item_count))
    return min(index, item_count - 1)


def outcome_text(items: Sequence[Item], index: int) -> str:
    """Text of items[index], or "" when index is out of bounds."""
    if 0 <= index < len(items):
        return items[index].text
    return ""


def finish_spin(wheel: Wheel, timeline: SpinTimeline, frame: SpinFrame) -> Tuple[Wheel, int, str]:
    """Settle the wheel on the frame's rotation and resolve the outcome.

    The index is computed with the item count the spin started with.

    Returns:
        (new wheel, sector index, outcome text)
    """
    index = resolve_sector(frame.rotation, timeline.item_count)
    result = outcome_text(wheel.items, index)
    return replace(wheel, rotation=frame.rotation, spinning=False, result=result), index, result


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class SpinController:
    """
    Runs spins for one WheelStore.

    Call request_spin() on user input and update() from any scheduler tick.
    The IDLE/SPINNING state machine refuses a second spin while one is
    running. On completion the outcome goes to on_result and out on the
    event bus as SPIN_COMPLETE, exactly once per spin.
    """

    def __init__(
        self,
        store,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
        event_bus: Optional[EventBus] = None,
        on_result: Optional[ResultCallback] = None,
    ) -> None:
        self.store = store
        self._rng = rng or random.Random()
        self._clock = clock or _monotonic_ms
        self._on_result = on_result
        self._event_bus = event_bus
        self._unsubscribers: list[Callable[[], None]] = []

        self.state_machine = StateMachine(SpinState.IDLE, wheel_name=store.name)
        self._timeline: Optional[SpinTimeline] = None
        self._started_at: float = 0.0

        if event_bus is not None:
            self.attach(event_bus)

    @property
    def is_spinning(self) -> bool:
        return self.state_machine.is_spinning

    @property
    def timeline(self) -> Optional[SpinTimeline]:
        return self._timeline

    def request_spin(self, now_ms: Optional[float] = None) -> bool:
        """Start a spin if idle and the wheel has items.

        Returns:
            True if a spin started
        """
        if self.is_spinning:
            logger.debug(f"Spin already running on {self.store.name}")
            return False

        wheel, timeline = start_spin(self.store.wheel, self._rng)
        if timeline is None:
            logger.debug(f"Nothing to spin on {self.store.name}")
            return False

        self.state_machine.transition(SpinState.SPINNING, last_result=None)
        self.store.update_wheel(wheel)
        self._timeline = timeline
        self._started_at = self._clock() if now_ms is None else now_ms

        logger.info(
            f"Spin started on {self.store.name}: {timeline.initial_rotation:.1f} -> "
            f"{timeline.target_rotation:.1f} deg over {timeline.item_count} items"
        )
        if self._event_bus is not None:
            self._event_bus.emit(Event(
                EventType.SPIN_STARTED,
                data={"target_rotation": timeline.target_rotation},
                source=self.store.name,
            ))
        return True

    def update(self, now_ms: Optional[float] = None) -> Optional[SpinFrame]:
        """Advance the running spin to now_ms.

        Returns:
            The frame computed, or None when idle
        """
        if not self.is_spinning or self._timeline is None:
            return None

        now = self._clock() if now_ms is None else now_ms
        frame = self._timeline.tick(now - self._started_at)

        if not frame.done:
            self.store.update_wheel(replace(self.store.wheel, rotation=frame.rotation))
            return frame

        self._complete(frame)
        return frame

    def _complete(self, frame: SpinFrame) -> None:
        timeline = self._timeline
        wheel, index, result = finish_spin(self.store.wheel, timeline, frame)
        self.store.update_wheel(wheel)
        self._timeline = None
        self.state_machine.transition(SpinState.IDLE, last_result=result)

        logger.info(f"Spin finished on {self.store.name}: sector {index} -> {result!r}")

        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception as e:
                logger.error(f"Error in spin result callback: {e}")
        if self._event_bus is not None:
            self._event_bus.emit(Event(
                EventType.SPIN_COMPLETE,
                data={"index": index, "result": result, "rotation": frame.rotation},
                source=self.store.name,
            ))

    # Event bus wiring

    def attach(self, event_bus: EventBus) -> None:
        """Listen for spin requests for this wheel and frame ticks."""
        self._event_bus = event_bus
        self._unsubscribers = [
            event_bus.subscribe(EventType.SPIN_REQUESTED, self._on_spin_request),
            event_bus.subscribe(EventType.TICK, self._on_tick),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_spin_request(self, event: Event) -> None:
        if event.source == self.store.name:
            self.request_spin(event.data.get("now_ms"))

    def _on_tick(self, event: Event) -> None:
        self.update(event.data.get("now_ms"))
