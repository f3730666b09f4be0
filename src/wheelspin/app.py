"""
Board: the wheels, scoreboard and timer of one session, wired together.

Builds one WheelStore + SpinController per configured wheel on a shared
EventBus, restores saved items and scores, and saves everything whenever a
wheel or score changes. Front-ends (the pygame simulator, scripts, tests)
talk to the board through the event bus or the public methods.
"""

from typing import Dict, Optional
import logging
import random

from wheelspin.config import Settings, get_settings
from wheelspin.core.events import Event, EventBus, EventType, tick_event
from wheelspin.exceptions import InvalidColorError
from wheelspin.storage import SavedState, StateStore
from wheelspin.wheel import Item, SpinController, WheelStore
from wheelspin.widgets import CountdownTimer, Scoreboard, TeamScore

logger = logging.getLogger(__name__)


class Board:
    """All widgets of one session."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        state_store: Optional[StateStore] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        clock=None,
    ) -> None:
        self.settings = settings or get_settings()
        self.event_bus = event_bus or EventBus()
        self.rng = rng or random.Random(self.settings.seed)
        self.state_store = state_store
        if self.state_store is None and self.settings.storage.enabled:
            self.state_store = StateStore(self.settings.storage.state_file)

        saved = self.state_store.load() if self.state_store else None

        self.stores: Dict[str, WheelStore] = {}
        self.spinners: Dict[str, SpinController] = {}
        for name, placeholder in self.settings.wheels.items():
            store = WheelStore(
                name=name,
                initial_items=self._saved_items(saved, name),
                on_change=self.save,
                event_bus=self.event_bus,
                rng=self.rng,
                palette=self.settings.wheel.palette,
                placeholder=placeholder,
            )
            self.stores[name] = store
            self.spinners[name] = SpinController(
                store, rng=self.rng, clock=clock, event_bus=self.event_bus
            )

        self.scoreboard = Scoreboard(
            [TeamScore.from_dict(s) for s in saved.scores] if saved else None,
            on_change=self._on_score_change,
        )
        self.timer = CountdownTimer(on_finished=self._on_timer_finished)
        self.event_bus.subscribe(EventType.TICK, self._on_tick)

        logger.info(f"Board ready with wheels: {', '.join(self.stores)}")

    def _saved_items(self, saved: Optional[SavedState], name: str):
        if saved is None or name not in saved.wheels:
            return None
        try:
            return [Item.from_dict(item) for item in saved.wheels[name]]
        except (InvalidColorError, KeyError) as e:
            logger.error(f"Ignoring saved items for wheel {name}: {e}")
            return None

    def snapshot(self) -> SavedState:
        """Current persistent state."""
        return SavedState(
            scores=self.scoreboard.to_list(),
            wheels={
                name: [item.to_dict() for item in store.items]
                for name, store in self.stores.items()
            },
        )

    def save(self) -> None:
        """Change notification hook: write the state file."""
        if self.state_store is not None:
            self.state_store.save(self.snapshot())

    def _on_score_change(self) -> None:
        self.event_bus.emit(Event(EventType.SCORE_CHANGED, data={"scores": self.scoreboard.to_list()}))
        self.save()

    def _on_timer_finished(self) -> None:
        self.event_bus.emit(Event(EventType.TIMER_FINISHED, source="timer"))

    def _on_tick(self, event: Event) -> None:
        self.timer.update(event.data["now_ms"])

    def update(self, now_ms: float, frame: int = 0) -> None:
        """Advance spins and the timer to now_ms (one scheduler tick)."""
        self.event_bus.emit(tick_event(now_ms, frame))
