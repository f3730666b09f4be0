"""
Abstract render target.

The wheel core never draws anything itself: it produces draw commands
(wheelspin.wheel.geometry) and hands them to a RenderTarget. Targets apply
the wheel rotation as a whole-canvas transform, the way a CSS rotate() on
the wheel element would.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from wheelspin.wheel.geometry import DrawCommand, LabelCommand, WedgeCommand


class RenderTarget(ABC):
    """Abstract base class for wheel render targets."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Canvas width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Canvas height in pixels."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove everything drawn so far."""
        ...

    @abstractmethod
    def draw_wedge(self, wedge: WedgeCommand) -> None:
        """Draw one filled sector."""
        ...

    @abstractmethod
    def draw_label(self, label: LabelCommand) -> None:
        """Draw one sector label."""
        ...

    @abstractmethod
    def set_rotation(self, degrees: float) -> None:
        """Set the clockwise rotation applied to the whole wheel."""
        ...

    def show(self) -> None:
        """Flush drawing to the output. No-op by default."""
        pass

    def draw(self, commands: Iterable[DrawCommand]) -> None:
        """Clear and draw a full command list."""
        self.clear()
        for command in commands:
            if isinstance(command, WedgeCommand):
                self.draw_wedge(command)
            elif isinstance(command, LabelCommand):
                self.draw_label(command)
        self.show()
