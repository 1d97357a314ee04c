"""Top-level game state, update loop and enemy spawning."""

from enum import IntEnum

from geowars.actions import ActionController
from geowars.behaviours import Chaser, ChaserWhenNear, RandomWalker, Shooting
from geowars.collision import CollisionManager
from geowars.entity import EntityManager
from geowars.geometry import Vec2
from geowars.input import InputManager
from geowars.randomness import random_int
from geowars.rendering import RenderQueue
from geowars.spawner import GameObjectSpawner

KEY_SPACE = 44
DEFAULT_SPAWN_RATE = 0.5
SHOOTING_BEHAVIOUR = 3


class GameState(IntEnum):
    """Phases of a game session."""

    WELCOME = 0
    PLAYING = 1
    PAUSE = 2
    GAMEOVER = 3


class Game:
    """Owns the managers, runs the per-frame update and spawns enemies over time."""

    def __init__(self, play_sound=None):
        self.entity_manager = EntityManager()
        self.input_manager = InputManager()
        self.collision_manager = CollisionManager()
        self.renderer = RenderQueue()
        self.spawner = GameObjectSpawner(
            self.entity_manager,
            self.input_manager,
            self.collision_manager,
            self.renderer,
            play_sound,
        )
        self.state_handler = ActionController()
        self.behaviours = [Chaser(), RandomWalker(), ChaserWhenNear(), Shooting()]
        self.state = GameState.WELCOME
        self.last_spawn = 0.0
        self.spawn_rate = DEFAULT_SPAWN_RATE
        self.frame = []
        self.score = 0
        self.lives = 0
        self.reset()
        self.input_manager.add_key_control(KEY_SPACE, self.state_handler, 1.0)
        self.init_level()

    def reset(self):
        """Clear the score and lives."""
        self.score = 0
        self.lives = 0

    def init_level(self):
        """Place the player in the world."""
        return self.spawner.spawn_player()

    def update(self, delta_time):
        """Advance one frame and collect what is to be drawn in ``frame``."""
        if self.state == GameState.PLAYING:
            self.entity_manager.update()
            self.input_manager.update(delta_time)
            self.collision_manager.update()
            self._spawn_enemy(delta_time)
        elif self.state in (GameState.WELCOME, GameState.PAUSE):
            if self.state_handler.value >= 1:
                self.state = GameState.PLAYING

        queued = self.renderer.drain()
        self.frame = queued if self.state == GameState.PLAYING else []
        self.entity_manager.clean()

    def _spawn_enemy(self, delta_time):
        self.last_spawn += delta_time
        if self.last_spawn <= self.spawn_rate:
            return
        self.last_spawn = 0.0
        choice = random_int(0, SHOOTING_BEHAVIOUR)
        position = Vec2(random_int(10, 1270), random_int(10, 700))
        behaviour = self.behaviours[choice]
        if choice < SHOOTING_BEHAVIOUR:
            self.spawner.spawn_enemy(behaviour, position)
        else:
            self.spawner.spawn_shooting_enemy(behaviour, position)