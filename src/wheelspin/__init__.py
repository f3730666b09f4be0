"""wheelspin - an editable, spinnable wheel of choices."""

__version__ = "0.1.0"
