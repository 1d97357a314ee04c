import pytest

from geowars.collision import CollideMask
from geowars.geometry import Vec2
from geowars.weapons import (
    DoubleShotGun,
    EnemyGun,
    SingleShotGun,
    TripleShotGun,
    Weapon,
)


class RecordingSpawner:
    def __init__(self):
        self.bullets = []

    def spawn_bullet(self, weapon, spawn_position):
        self.bullets.append((spawn_position, weapon.direction))


def test_weapon_base_is_abstract():
    with pytest.raises(TypeError):
        Weapon()


def test_default_cooldown_and_mask():
    gun = DoubleShotGun()
    assert gun.cooldown == 0.25
    assert gun.mask == CollideMask.BULLET
    assert gun.size == 10


def test_single_shot_aims_at_target_scaled_by_speed():
    gun = SingleShotGun()
    spawner = RecordingSpawner()
    gun.gun_behaviour(spawner, Vec2(0, 0), Vec2(10, 0))
    assert spawner.bullets == [(Vec2(0, 0), Vec2(1, 0) * gun.speed)]


def test_single_shot_direction_length_matches_speed():
    gun = SingleShotGun()
    spawner = RecordingSpawner()
    gun.gun_behaviour(spawner, Vec2(5, 5), Vec2(40, -20))
    (_, direction), = spawner.bullets
    assert direction.length() == pytest.approx(gun.speed.x)


def test_double_shot_spawns_either_side():
    gun = DoubleShotGun()
    spawner = RecordingSpawner()
    gun.gun_behaviour(spawner, Vec2(100, 50), Vec2(100, 150))
    positions = [position for position, _ in spawner.bullets]
    assert positions == [Vec2(100 - 10, 50), Vec2(100 + 10, 50)]
    assert all(direction == Vec2(0, 1) for _, direction in spawner.bullets)


def test_triple_shot_spreads_three_bullets():
    gun = TripleShotGun()
    spawner = RecordingSpawner()
    gun.gun_behaviour(spawner, Vec2(0, 0), Vec2(0, 10))
    directions = [direction for _, direction in spawner.bullets]
    assert directions == [Vec2(0, 1), Vec2(0.5, 1), Vec2(-0.5, 1)]
    assert all(position == Vec2(0, 0) for position, _ in spawner.bullets)


def test_coincident_points_give_zero_direction():
    gun = SingleShotGun()
    spawner = RecordingSpawner()
    gun.gun_behaviour(spawner, Vec2(7, 7), Vec2(7, 7))
    assert spawner.bullets == [(Vec2(7, 7), Vec2(0, 0))]


def test_enemy_gun_colours_and_mask():
    gun = EnemyGun()
    assert (gun.red, gun.green, gun.blue, gun.alpha) == (255, 25, 10, 255)
    assert gun.mask == CollideMask.ENEMYBULLET
    assert gun.speed == SingleShotGun().speed


def test_set_mask_accepts_int():
    gun = SingleShotGun()
    gun.set_mask(3)
    assert gun.mask is CollideMask.ENEMYBULLET


def test_set_mask_rejects_unknown_value():
    gun = SingleShotGun()
    with pytest.raises(ValueError):
        gun.set_mask(42)


def test_each_gun_has_its_own_direction():
    first, second = SingleShotGun(), SingleShotGun()
    first.gun_behaviour(RecordingSpawner(), Vec2(0, 0), Vec2(0, 10))
    assert second.direction == Vec2(0, 0)
    assert first.direction == Vec2(0, 1) * first.speed