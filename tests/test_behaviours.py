import pytest

from geowars.behaviours import (
    Chaser,
    ChaserWhenNear,
    EnemyBehaviour,
    EnemyBehaviourComponent,
    RandomWalker,
    Shooting,
)
from geowars.entity import EntityManager
from geowars.geometry import Vec2
from geowars.movement import MovementComponent
from geowars.randomness import seed
from geowars.shooting import ShootComponent
from geowars.weapons import EnemyGun


class RecordingSpawner:
    def __init__(self):
        self.bullets = []

    def spawn_bullet(self, weapon, spawn_position):
        self.bullets.append((spawn_position, weapon.direction))


@pytest.fixture
def manager():
    return EntityManager()


def make_mover(manager, position):
    entity = manager.create_entity()
    entity.set_component(MovementComponent(position))
    return entity


def test_behaviour_base_is_abstract():
    with pytest.raises(TypeError):
        EnemyBehaviour()


def test_chaser_defaults():
    chaser = Chaser()
    assert chaser.alpha == 255
    assert chaser.size == 10
    assert chaser.shape == [Vec2(0, 20), Vec2(20, 0), Vec2(0, -20), Vec2(-20, 0)]


def test_chaser_heads_for_player(manager):
    enemy = make_mover(manager, Vec2(0, 0))
    chaser = Chaser()
    assert chaser.update(enemy, Vec2(10, 0)) == Vec2(1, 0) * chaser.speed


def test_chaser_step_length_is_speed(manager):
    enemy = make_mover(manager, Vec2(300, 200))
    chaser = Chaser()
    step = chaser.update(enemy, Vec2(17, 91))
    assert step.length() == pytest.approx(chaser.speed.x)


def test_chaser_when_near_ignores_distant_player(manager):
    enemy = make_mover(manager, Vec2(0, 0))
    behaviour = ChaserWhenNear()
    assert behaviour.update(enemy, Vec2(behaviour.min_chase_distance, 0)) == Vec2(0, 0)


def test_chaser_when_near_chases_close_player(manager):
    enemy = make_mover(manager, Vec2(0, 0))
    behaviour = ChaserWhenNear()
    step = behaviour.update(enemy, Vec2(0, 50))
    assert step == Vec2(0, 1) * behaviour.speed


def test_random_walker_steps_are_unit_grid(manager):
    seed(7)
    enemy = make_mover(manager, Vec2(0, 0))
    walker = RandomWalker()
    steps = {walker.update(enemy, Vec2(0, 0)) for _ in range(200)}
    components = {value for step in steps for value in step}
    assert components == {-1, 0, 1}


def test_random_walker_is_reproducible(manager):
    enemy = make_mover(manager, Vec2(0, 0))
    walker = RandomWalker()
    seed(3)
    first = [walker.update(enemy, Vec2(0, 0)) for _ in range(10)]
    seed(3)
    second = [walker.update(enemy, Vec2(0, 0)) for _ in range(10)]
    assert first == second


def test_shooting_chases_and_fires(manager):
    spawner = RecordingSpawner()
    enemy = make_mover(manager, Vec2(0, 0))
    shooter = enemy.set_component(ShootComponent(spawner))
    gun = EnemyGun()
    shooter.set_weapon(gun)
    shooter.current_time = gun.cooldown
    behaviour = Shooting()
    step = behaviour.update(enemy, Vec2(10, 0))
    assert step == Vec2(1, 0) * behaviour.speed
    assert spawner.bullets == [(Vec2(0, 0), Vec2(1, 0) * gun.speed)]


def test_shooting_accumulates_frame_time(manager):
    spawner = RecordingSpawner()
    enemy = make_mover(manager, Vec2(0, 0))
    shooter = enemy.set_component(ShootComponent(spawner))
    Shooting().update(enemy, Vec2(10, 0))
    assert spawner.bullets == []
    assert shooter.current_time == pytest.approx(0.016)


def test_component_moves_entity_towards_player(manager):
    player = make_mover(manager, Vec2(100, 0))
    enemy = make_mover(manager, Vec2(0, 0))
    chaser = Chaser()
    enemy.set_component(EnemyBehaviourComponent(chaser, player))
    enemy.update()
    assert enemy.get_component(MovementComponent).location == Vec2(1, 0) * chaser.speed


def test_component_follows_player_moves(manager):
    player = make_mover(manager, Vec2(0, 50))
    enemy = make_mover(manager, Vec2(0, 0))
    behaviour = enemy.set_component(EnemyBehaviourComponent(ChaserWhenNear(), player))
    behaviour.execute()
    first = enemy.get_component(MovementComponent).location
    player.get_component(MovementComponent).set_position(Vec2(500, 500))
    behaviour.execute()
    assert enemy.get_component(MovementComponent).location == first
    assert first == Vec2(0, 1)