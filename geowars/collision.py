"""Collision masks, collidable components and the per-frame collision pass."""

from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations

from geowars.entity import Component
from geowars.geometry import Vec2
from geowars.movement import MovementComponent

PLAYER_RESPAWN_POSITION = Vec2(400, 400)


class CollideMask(IntEnum):
    """Kinds of collidable objects."""

    PLAYER = 0
    ENEMY = 1
    BULLET = 2
    ENEMYBULLET = 3
    POWERUP = 4


COLLISION_TABLE = (
    (CollideMask.ENEMY, CollideMask.ENEMYBULLET),
    (CollideMask.PLAYER, CollideMask.BULLET),
    (CollideMask.ENEMY,),
    (CollideMask.PLAYER,),
    (CollideMask.PLAYER,),
)


def can_collide(first, second):
    """Whether an object of mask ``first`` reacts to one of mask ``second``.

    The table is not symmetric: the order of the arguments matters.
    """
    return CollideMask(second) in COLLISION_TABLE[CollideMask(first)]


@dataclass(frozen=True)
class CollisionEvent:
    """Two components found colliding in the same frame."""

    first: "CollideComponent"
    second: "CollideComponent"


class CollideComponent(Component):
    """Makes an entity take part in collision checks."""

    def __init__(self, collision_manager, mask):
        super().__init__()
        self.collision_manager = collision_manager
        self.mask = CollideMask(mask)
        self.collision_radius = 0

    def init(self):
        """Nothing to reset."""

    def execute(self):
        """Register with the collision manager for this frame."""
        self.collision_manager.register_entity(self)

    def has_collision(self, other):
        """Approximate overlap test using twice the Manhattan distance."""
        if not (
            self.entity.has_component(MovementComponent)
            and other.entity.has_component(MovementComponent)
        ):
            return False
        own = self.entity.get_component(MovementComponent).location
        theirs = other.entity.get_component(MovementComponent).location
        spread = 2 * abs(own.x - theirs.x) + 2 * abs(own.y - theirs.y)
        return spread < 2 * (self.collision_radius + other.collision_radius)

    def on_collision(self):
        """Players are sent back to the respawn point; anything else is removed."""
        if self.mask != CollideMask.PLAYER:
            self.entity.remove_all_components()
        else:
            self.entity.get_component(MovementComponent).set_position(PLAYER_RESPAWN_POSITION)


class CollisionManager:
    """Collects registered components each frame and resolves their collisions."""

    def __init__(self):
        self.entities = []
        self.collisions = []

    def register_entity(self, component):
        self.entities.append(component)

    def update(self):
        """Find, resolve and forget this frame's collisions."""
        for first, second in combinations(self.entities, 2):
            if self.can_collide(first.mask, second.mask) and first.has_collision(second):
                self.collisions.append(CollisionEvent(first, second))
        for event in self.collisions:
            event.first.on_collision()
            event.second.on_collision()
        self.entities.clear()
        self.collisions.clear()

    def can_collide(self, first, second):
        return can_collide(first, second)