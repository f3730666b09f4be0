"""
Spin state machine.

States:
    IDLE: Wheel at rest; items may be edited and a spin may start
    SPINNING: Spin animation in progress; spin requests and edits are rejected
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any
import logging

logger = logging.getLogger(__name__)


class SpinState(Enum):
    """Wheel spin states."""
    IDLE = auto()
    SPINNING = auto()


@dataclass
class StateContext:
    """Context data carried alongside the state."""
    wheel_name: str = "wheel"
    last_result: str | None = None


class StateMachine:
    """
    Tracks whether a wheel is spinning.

    Only IDLE -> SPINNING and SPINNING -> IDLE are valid. A request to enter
    the state the machine is already in is refused, which is how a second
    spin request during an animation gets rejected instead of queued.
    """

    VALID_TRANSITIONS: list[tuple[SpinState, SpinState]] = [
        (SpinState.IDLE, SpinState.SPINNING),
        (SpinState.SPINNING, SpinState.IDLE),
    ]

    def __init__(self, initial_state: SpinState = SpinState.IDLE, wheel_name: str = "wheel") -> None:
        self._state = initial_state
        self._context = StateContext(wheel_name=wheel_name)
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine[{wheel_name}] initialized with state: {initial_state.name}")

    @property
    def state(self) -> SpinState:
        """Get current state."""
        return self._state

    @property
    def context(self) -> StateContext:
        """Get current context."""
        return self._context

    @property
    def is_spinning(self) -> bool:
        return self._state == SpinState.SPINNING

    def can_transition(self, to_state: SpinState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: SpinState, **context_updates: Any) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state
            **context_updates: Context attributes to set

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.debug(
                f"Rejected transition [{self._context.wheel_name}]: "
                f"{self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        for key, value in context_updates.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

        logger.info(f"Spin state [{self._context.wheel_name}]: {old_state.name} -> {to_state.name}")

        return True

