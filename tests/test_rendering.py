from geowars.entity import Entity
from geowars.geometry import Vec2
from geowars.movement import MovementComponent
from geowars.rendering import DEFAULT_OUTLINE, RenderComponent, RenderQueue


def _rendered_entity(queue, position=None):
    entity = Entity(0)
    if position is not None:
        entity.set_component(MovementComponent(position))
    component = entity.set_component(RenderComponent(queue))
    return entity, component


def test_drain_returns_in_order_and_empties():
    queue = RenderQueue()
    queue.queue_to_render("a")
    queue.queue_to_render("b")
    assert queue.drain() == ["a", "b"]
    assert len(queue) == 0
    assert queue.drain() == []


def test_default_shape_is_square_outline():
    component = RenderComponent(RenderQueue())
    assert component.shape.points == [Vec2(*p) for p in DEFAULT_OUTLINE]


def test_location_without_movement_is_origin():
    _, component = _rendered_entity(RenderQueue())
    assert component.location() == Vec2(0, 0)


def test_location_follows_movement():
    _, component = _rendered_entity(RenderQueue(), Vec2(120, 80))
    assert component.location() == Vec2(120, 80)


def test_execute_queues_component_and_translates_shape():
    queue = RenderQueue()
    entity, component = _rendered_entity(queue, Vec2(120, 80))
    entity.update()
    assert queue.drain() == [component]
    shifted = [p + Vec2(120, 80) for p in component.shape.points]
    assert component.shape.transformed_points() == shifted


def test_repeated_execute_does_not_accumulate_translation():
    queue = RenderQueue()
    _, component = _rendered_entity(queue, Vec2(30, 40))
    component.execute()
    component.execute()
    assert len(queue) == 2
    shifted = [p + Vec2(30, 40) for p in component.shape.points]
    assert component.shape.transformed_points() == shifted


def test_set_color_normalises_channels():
    component = RenderComponent(RenderQueue())
    component.set_color(255, 0, 255, 255)
    assert component.shape.color == (1.0, 0.0, 1.0, 1.0)