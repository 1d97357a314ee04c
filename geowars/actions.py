"""Abstract input actions fed by the input manager."""

from dataclasses import dataclass

from geowars.geometry import Vec2

_UINT16_MASK = 0xFFFF


@dataclass(eq=False)
class ActionController:
    """Accumulates weighted input and remembers the last mouse position."""

    raw_value: float = 0.0
    x: int = 0
    y: int = 0

    def add(self, state):
        """Add a signed contribution to the accumulated input."""
        self.raw_value += state

    @property
    def value(self):
        """The accumulated input clamped to ``[-1, 1]``."""
        return max(-1.0, min(1.0, self.raw_value))

    def set_mouse_position(self, x, y):
        """Store the mouse position as unsigned 16-bit coordinates."""
        self.x = int(x) & _UINT16_MASK
        self.y = int(y) & _UINT16_MASK

    @property
    def clicked_position(self):
        """The last stored mouse position."""
        return Vec2(self.x, self.y)