"""Easing curves for wheel animations.

All functions take a normalized time t (0.0 to 1.0) and return a normalized
value. The spin uses quintic ease-out: fast start, long slow finish.
"""

from enum import Enum, auto
from typing import Callable


class Easing(Enum):
    """Available easing function types."""
    LINEAR = auto()
    EASE_OUT_QUINT = auto()


EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_out_quint(t: float) -> float:
    """Decelerate to zero velocity (quintic)."""
    return 1 - pow(1 - t, 5)


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_QUINT: ease_out_quint,
}


def get_easing(easing: Easing | str) -> EasingFunc:
    """Get an easing function by enum or name (e.g. "ease_out_quint").

    Raises:
        ValueError: If easing name is not recognized
    """
    if isinstance(easing, str):
        try:
            easing = Easing[easing.upper()]
        except KeyError:
            raise ValueError(f"Unknown easing function: {easing}") from None

    return _EASING_FUNCTIONS[easing]


def interpolate(start: float, end: float, t: float, easing: Easing | str = Easing.LINEAR) -> float:
    """Interpolate between two values, clamping t to [0, 1]."""
    eased_t = get_easing(easing)(max(0.0, min(1.0, t)))
    return start + (end - start) * eased_t
