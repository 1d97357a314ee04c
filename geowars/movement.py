"""Position and constant-velocity movement for entities."""

from geowars.entity import Component
from geowars.geometry import Vec2

PLAYFIELD_WIDTH = 1280
PLAYFIELD_HEIGHT = 720


def _as_vec2(value):
    return value if isinstance(value, Vec2) else Vec2(*value)


class MovementComponent(Component):
    """Tracks an entity's position and moves it by a constant velocity each update."""

    def __init__(self, start_position=Vec2(0, 0)):
        super().__init__()
        self.start_position = _as_vec2(start_position)
        self.position = self.start_position
        self.constant_move = Vec2(0, 0)

    @property
    def location(self):
        """The current position."""
        return self.position

    def init(self):
        """Move back to the origin."""
        self.position = Vec2(0, 0)

    def execute(self):
        self.constant_movement()

    def do_movement(self, move):
        """Move by a vector; leaving the playfield reverses the constant velocity.

        The reversed velocity is stored with whole-number components
        (truncated toward zero).
        """
        self.position = self.position + _as_vec2(move)
        if self.position.x > PLAYFIELD_WIDTH or self.position.x < 0:
            self._set_whole_constant_movement(-self.constant_move.x, self.constant_move.y)
        if self.position.y > PLAYFIELD_HEIGHT or self.position.y < 0:
            self._set_whole_constant_movement(self.constant_move.x, -self.constant_move.y)

    def do_integer_movement(self, x, y):
        """Move by whole steps; a coordinate leaving the playfield is negated."""
        new_x = self.position.x + x
        new_y = self.position.y + y
        if new_x > PLAYFIELD_WIDTH or new_x < 0:
            new_x = -new_x
        if new_y > PLAYFIELD_HEIGHT or new_y < 0:
            new_y = -new_y
        self.position = Vec2(new_x, new_y)

    def constant_movement(self):
        """Apply one step of the constant velocity."""
        self.do_movement(self.constant_move)

    def set_constant_movement(self, value):
        self.constant_move = _as_vec2(value)

    def _set_whole_constant_movement(self, x, y):
        self.constant_move = Vec2(int(x), int(y))

    def set_position(self, position):
        self.position = _as_vec2(position)