"""Minutes/seconds countdown timer.

The timer is scheduler driven like the spin engine: update(now_ms) applies
one tick per whole second elapsed since the last tick. It is never saved.
"""

from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)

TICK_MS = 1000.0


class CountdownTimer:
    """A start/stop/reset countdown that stops itself at 0:00."""

    def __init__(
        self,
        minutes: int = 0,
        seconds: int = 0,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        self.minutes = max(0, int(minutes))
        self.seconds = max(0, min(59, int(seconds)))
        self.running = False
        self._on_finished = on_finished
        self._last_tick_ms = 0.0

    @property
    def is_zero(self) -> bool:
        return self.minutes == 0 and self.seconds == 0

    def set_time(self, minutes: int, seconds: int) -> None:
        self.minutes = max(0, int(minutes))
        self.seconds = max(0, min(59, int(seconds)))

    def start(self, now_ms: float) -> None:
        """Start (or restart) ticking from now_ms."""
        self.running = True
        self._last_tick_ms = now_ms
        logger.info(f"Countdown started at {self.display()}")

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        self.running = False
        self.minutes = 0
        self.seconds = 0

    def tick(self) -> bool:
        """Count down one second.

        Returns:
            False if the timer was already at zero (and is now stopped)
        """
        if self.is_zero:
            self.running = False
            return False

        if self.seconds > 0:
            self.seconds -= 1
        else:
            self.minutes -= 1
            self.seconds = 59

        if self.is_zero:
            logger.info("Countdown finished")
            if self._on_finished is not None:
                self._on_finished()
        return True

    def update(self, now_ms: float) -> None:
        """Apply every whole-second tick due by now_ms."""
        if not self.running:
            return
        while self.running and now_ms - self._last_tick_ms >= TICK_MS:
            self._last_tick_ms += TICK_MS
            self.tick()

    def display(self) -> str:
        """Format as M:SS."""
        return f"{self.minutes}:{self.seconds:02d}"
