"""Exceptions raised by wheelspin.

Everyday misuse (empty item text, out-of-range index, spinning an empty
wheel) is a silent no-op and never raises. These are for programmer errors.
"""


class WheelError(Exception):
    """Base class for wheelspin errors."""
    pass


class InvalidColorError(WheelError, ValueError):
    """A color string could not be parsed as a hex color."""
    pass
