"""Assembles entities into players, bullets and enemies."""

from geowars.behaviours import EnemyBehaviourComponent
from geowars.collision import CollideComponent, CollideMask
from geowars.geometry import DrawMode, Vec2
from geowars.input import (
    HORIZONTAL,
    PRIMARY_FIRE,
    TOGGLE_WEAPON,
    VERTICAL,
    InputComponent,
)
from geowars.movement import MovementComponent
from geowars.rendering import RenderComponent
from geowars.shooting import ShootComponent
from geowars.weapons import EnemyGun

KEY_A = 4
KEY_D = 7
KEY_R = 21
KEY_S = 22
KEY_W = 26
MOUSE_LEFT = 1

PLAYER_RADIUS = 10
BULLET_LINE_WIDTH = 7
ENEMY_LINE_WIDTH = 3
SHOOTING_ENEMY_LINE_WIDTH = 4
SHOOTING_ENEMY_SCALE = 2

LASER_SOUND = "laser"


class GameObjectSpawner:
    """Creates entities and fits them with the components of each game object."""

    def __init__(self, entity_manager, input_manager, collision_manager, renderer, play_sound=None):
        self.entity_manager = entity_manager
        self.input_manager = input_manager
        self.collision_manager = collision_manager
        self.renderer = renderer
        self.play_sound = play_sound
        self.player = None

    def _new_entity(self, position):
        entity = self.entity_manager.create_entity()
        entity.set_component(MovementComponent(position))
        return entity

    def spawn_player(self):
        """Create the player-controlled entity and bind its controls."""
        entity = self._new_entity(Vec2(0, 0))
        controls = entity.set_component(InputComponent())
        self.input_manager.add_input_component(controls)

        bind = self.input_manager.add_key_control
        bind(KEY_A, controls.action_controller(HORIZONTAL), -1.0)
        bind(KEY_D, controls.action_controller(HORIZONTAL), 1.0)
        bind(KEY_W, controls.action_controller(VERTICAL), -1.0)
        bind(KEY_S, controls.action_controller(VERTICAL), 1.0)
        self.input_manager.add_mouse_control(
            MOUSE_LEFT, controls.action_controller(PRIMARY_FIRE), 1.0
        )
        bind(KEY_R, controls.action_controller(TOGGLE_WEAPON), 1.0)

        entity.set_component(RenderComponent(self.renderer))
        collider = entity.set_component(
            CollideComponent(self.collision_manager, CollideMask.PLAYER)
        )
        collider.collision_radius = PLAYER_RADIUS
        entity.set_component(ShootComponent(self))

        self.player = entity
        return entity

    def spawn_bullet(self, weapon, spawn_position):
        """Create a bullet fired by ``weapon`` at ``spawn_position``."""
        entity = self._new_entity(spawn_position)
        entity.get_component(MovementComponent).set_constant_movement(
            weapon.direction * weapon.speed
        )
        render = entity.set_component(RenderComponent(self.renderer))
        collider = entity.set_component(
            CollideComponent(self.collision_manager, CollideMask(weapon.mask))
        )
        collider.collision_radius = weapon.size

        render.shape.line_width = BULLET_LINE_WIDTH
        render.shape.draw_mode = DrawMode.POINTS
        render.shape.set_shape([Vec2(0, 0)])
        render.set_color(weapon.red, weapon.green, weapon.blue, weapon.alpha)

        if self.play_sound is not None:
            self.play_sound(LASER_SOUND)
        return entity

    def _spawn_enemy_body(self, behaviour, spawn_position):
        if self.player is None:
            raise RuntimeError("cannot spawn an enemy before the player")
        entity = self._new_entity(spawn_position)
        render = entity.set_component(RenderComponent(self.renderer))
        return entity, render

    def _finish_enemy(self, entity, render, behaviour):
        render.set_color(behaviour.red, behaviour.green, behaviour.blue, behaviour.alpha)
        collider = entity.set_component(
            CollideComponent(self.collision_manager, CollideMask.ENEMY)
        )
        collider.collision_radius = behaviour.size
        entity.set_component(EnemyBehaviourComponent(behaviour, self.player))

    def spawn_enemy(self, behaviour, spawn_position):
        """Create an AI enemy that moves according to ``behaviour``."""
        entity, render = self._spawn_enemy_body(behaviour, spawn_position)
        render.shape.line_width = ENEMY_LINE_WIDTH
        self._finish_enemy(entity, render, behaviour)
        return entity

    def spawn_shooting_enemy(self, behaviour, spawn_position):
        """Create an AI enemy drawn with the behaviour's outline that also shoots."""
        entity, render = self._spawn_enemy_body(behaviour, spawn_position)
        render.shape.set_shape(behaviour.shape)
        render.shape.scale(SHOOTING_ENEMY_SCALE)
        render.shape.line_width = SHOOTING_ENEMY_LINE_WIDTH
        self._finish_enemy(entity, render, behaviour)
        shooter = entity.set_component(ShootComponent(self))
        shooter.set_weapon(EnemyGun())
        return entity