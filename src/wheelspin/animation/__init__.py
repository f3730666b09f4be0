"""Animation helpers for wheelspin."""

from wheelspin.animation.easing import Easing, get_easing, interpolate

__all__ = ["Easing", "get_easing", "interpolate"]
