"""Enemy AI behaviours and the component that drives them."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from geowars.entity import Component
from geowars.geometry import Vec2
from geowars.movement import MovementComponent
from geowars.randomness import random_int
from geowars.shooting import ShootComponent

SHOOTING_FRAME_TIME = 0.016


def _unit_towards(origin, target):
    """Unit vector from ``origin`` to ``target``; zero when the points coincide."""
    distance = target.distance(origin)
    if distance == 0:
        return Vec2(0.0, 0.0)
    return (target - origin) / distance


def _location(entity):
    return entity.get_component(MovementComponent).location


@dataclass(eq=False)
class EnemyBehaviour(ABC):
    """Appearance and movement rule for an AI-controlled entity."""

    bullet_behaviour: int = 0
    red: int = 125
    green: int = 255
    blue: int = 255
    alpha: int = 2
    speed: Vec2 = Vec2(1, 1)
    size: int = 10
    cooldown: int = 0
    movement_speed: float = 0.0
    shape: list = field(default_factory=list)
    player_position: Vec2 = Vec2(0, 0)

    @abstractmethod
    def update(self, enemy, player_position):
        """Return the movement the enemy should make this update."""


@dataclass(eq=False)
class Chaser(EnemyBehaviour):
    """Heads straight for the player."""

    alpha: int = 255
    speed: Vec2 = Vec2(5, 5)
    shape: list = field(
        default_factory=lambda: [Vec2(0, 20), Vec2(20, 0), Vec2(0, -20), Vec2(-20, 0)]
    )

    def update(self, enemy, player_position):
        return _unit_towards(_location(enemy), player_position) * self.speed


@dataclass(eq=False)
class RandomWalker(EnemyBehaviour):
    """Steps one unit in a random direction on each axis."""

    def update(self, enemy, player_position):
        return Vec2(random_int(-1, 1), random_int(-1, 1)) * self.speed


@dataclass(eq=False)
class ChaserWhenNear(EnemyBehaviour):
    """Chases the player only while within ``min_chase_distance``."""

    min_chase_distance: int = 100

    def update(self, enemy, player_position):
        position = _location(enemy)
        if position.distance(player_position) < self.min_chase_distance:
            return _unit_towards(position, player_position) * self.speed
        return Vec2(0, 0)


@dataclass(eq=False)
class Shooting(Chaser):
    """Chases the player while firing at them."""

    def update(self, enemy, player_position):
        movement = _unit_towards(_location(enemy), player_position) * self.speed
        enemy.get_component(ShootComponent).shoot(player_position, SHOOTING_FRAME_TIME)
        return movement


class EnemyBehaviourComponent(Component):
    """Moves its entity according to a behaviour, relative to the player."""

    def __init__(self, behaviour, player):
        super().__init__()
        self.behaviour = behaviour
        self.player = player

    def init(self):
        """Nothing to reset."""

    def execute(self):
        movement = self.behaviour.update(self.entity, _location(self.player))
        self.entity.get_component(MovementComponent).do_movement(movement)