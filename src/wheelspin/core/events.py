"""
Event bus for wheelspin.

Carries interaction requests (spin, add, edit, remove) from front-ends into
wheel stores, and change notifications and spin outcomes back out to
collaborators such as the state store.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable
from enum import Enum, auto
from collections import defaultdict
import asyncio
import inspect
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Interaction requests
    SPIN_REQUESTED = auto()
    ADD_ITEM_REQUESTED = auto()
    EDIT_ITEM_REQUESTED = auto()
    REMOVE_ITEM_REQUESTED = auto()

    # Wheel notifications
    ITEMS_CHANGED = auto()
    SPIN_STARTED = auto()
    SPIN_COMPLETE = auto()

    # Widget notifications
    SCORE_CHANGED = auto()
    TIMER_FINISHED = auto()

    # System events
    TICK = auto()  # Frame tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event (usually a wheel name)
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


SyncHandler = Callable[[Event], None]
AsyncHandler = Callable[[Event], Awaitable[None]]
Handler = SyncHandler | AsyncHandler


class EventBus:
    """
    Central event bus for component communication.

    Supports both synchronous and asynchronous handlers.
    Events can be emitted immediately or queued for the next frame.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType | str, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function (sync or async)

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def emit(self, event: Event) -> None:
        """
        Emit an event immediately (synchronous handlers only).

        For async handlers, use queue_event.
        """
        self._add_to_history(event)
        self._dispatch_sync(event)

    def queue_event(self, event: Event) -> None:
        """Queue an event for later processing."""
        self._queue.put_nowait(event)

    async def process_queue(self) -> None:
        """Process all queued events."""
        while not self._queue.empty():
            event = self._queue.get_nowait()
            self._add_to_history(event)
            await self._dispatch_async(event)
            self._queue.task_done()

    def _handlers_for(self, event: Event) -> list[Handler]:
        return list(self._handlers.get(event.type, []))

    def _dispatch_sync(self, event: Event) -> None:
        """Dispatch event to synchronous handlers only."""
        for handler in self._handlers_for(event):
            if inspect.iscoroutinefunction(handler):
                continue
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")

    async def _dispatch_async(self, event: Event) -> None:
        """Dispatch event to all handlers (sync and async)."""
        tasks = []
        for handler in self._handlers_for(event):
            if inspect.iscoroutinefunction(handler):
                tasks.append(asyncio.create_task(handler(event)))
            else:
                try:
                    handler(event)
                except Exception as e:
                    logger.error(f"Error in sync handler for {event.type}: {e}")

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error(f"Error in async handler: {result}")

    def _add_to_history(self, event: Event) -> None:
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(self, event_type: EventType | str | None = None, limit: int = 10) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


def spin_request(wheel: str) -> Event:
    """Create a spin request for a named wheel."""
    return Event(EventType.SPIN_REQUESTED, source=wheel)


def add_item_request(wheel: str, text: str) -> Event:
    """Create an add-item request for a named wheel."""
    return Event(EventType.ADD_ITEM_REQUESTED, data={"text": text}, source=wheel)


def edit_item_request(wheel: str, index: int, text: str) -> Event:
    """Create an edit-item request for a named wheel."""
    return Event(EventType.EDIT_ITEM_REQUESTED, data={"index": index, "text": text}, source=wheel)


def remove_item_request(wheel: str, index: int) -> Event:
    """Create a remove-item request for a named wheel."""
    return Event(EventType.REMOVE_ITEM_REQUESTED, data={"index": index}, source=wheel)


def tick_event(now_ms: float, frame: int) -> Event:
    """Create a frame tick event carrying the scheduler clock."""
    return Event(EventType.TICK, data={"now_ms": now_ms, "frame": frame})
