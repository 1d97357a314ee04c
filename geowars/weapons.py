"""Guns that turn a shot request into one or more bullet spawns."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from geowars.collision import CollideMask
from geowars.geometry import Vec2


def _unit_towards(origin, target):
    """Unit vector from ``origin`` to ``target``; zero when the points coincide."""
    distance = target.distance(origin)
    if distance == 0:
        return Vec2(0.0, 0.0)
    return (target - origin) / distance


@dataclass(eq=False)
class Weapon(ABC):
    """Bullet appearance, speed and firing rate shared by every gun."""

    bullet_behaviour: int = 0
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0
    speed: Vec2 = Vec2(1, 1)
    size: int = 10
    cooldown: float = 0.25
    mask: CollideMask = CollideMask.BULLET
    direction: Vec2 = Vec2(0, 0)

    @abstractmethod
    def gun_behaviour(self, spawner, spawn_position, click_position):
        """Spawn the bullets of one shot from ``spawn_position`` towards ``click_position``."""

    def set_mask(self, new_mask):
        """Change the collision mask given to the bullets this gun fires."""
        self.mask = CollideMask(new_mask)


@dataclass(eq=False)
class SingleShotGun(Weapon):
    """Fires one fast bullet straight at the target."""

    red: int = 0
    green: int = 255
    blue: int = 255
    alpha: int = 255
    speed: Vec2 = Vec2(3, 3)

    def gun_behaviour(self, spawner, spawn_position, click_position):
        self.direction = _unit_towards(spawn_position, click_position) * self.speed
        spawner.spawn_bullet(self, spawn_position)


@dataclass(eq=False)
class DoubleShotGun(Weapon):
    """Fires two parallel bullets, one on each side of the shooter."""

    red: int = 200
    green: int = 200
    blue: int = 200
    alpha: int = 170

    def gun_behaviour(self, spawner, spawn_position, click_position):
        self.direction = _unit_towards(spawn_position, click_position) * self.speed
        spawner.spawn_bullet(self, Vec2(spawn_position.x - 10, spawn_position.y))
        spawner.spawn_bullet(self, Vec2(spawn_position.x + 10, spawn_position.y))


@dataclass(eq=False)
class TripleShotGun(Weapon):
    """Fires a spread of three bullets from the same point."""

    red: int = 50
    green: int = 190
    blue: int = 20
    alpha: int = 255

    def gun_behaviour(self, spawner, spawn_position, click_position):
        self.direction = _unit_towards(spawn_position, click_position)
        spawner.spawn_bullet(self, spawn_position)
        self.direction = Vec2(self.direction.x + 0.5, self.direction.y)
        spawner.spawn_bullet(self, spawn_position)
        self.direction = Vec2(-self.direction.x, self.direction.y)
        spawner.spawn_bullet(self, spawn_position)


@dataclass(eq=False)
class EnemyGun(SingleShotGun):
    """Single-shot gun whose bullets only hurt the player."""

    red: int = 255
    green: int = 25
    blue: int = 10
    alpha: int = 255
    mask: CollideMask = CollideMask.ENEMYBULLET