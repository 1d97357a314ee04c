"""Per-frame render queue and the component that feeds it."""

from geowars.entity import Component
from geowars.geometry import Shape, Vec2
from geowars.movement import MovementComponent

DEFAULT_OUTLINE = ((-10, -10), (-10, 10), (10, 10), (10, -10))


class RenderQueue:
    """Collects the components that want to be drawn this frame."""

    def __init__(self):
        self.renderables = []

    def __len__(self):
        return len(self.renderables)

    def queue_to_render(self, component):
        self.renderables.append(component)

    def drain(self):
        """Return the queued components in order and empty the queue."""
        queued, self.renderables = self.renderables, []
        return queued


class RenderComponent(Component):
    """Positions a shape at its entity's location and queues it for drawing."""

    def __init__(self, renderer):
        super().__init__()
        self.renderer = renderer
        self.shape = Shape(list(DEFAULT_OUTLINE))

    def init(self):
        """Nothing to reset."""

    def execute(self):
        self.shape.reset_transformation()
        self.shape.translate(self.location())
        self.renderer.queue_to_render(self)

    def location(self):
        """The entity's position, or the origin when it cannot move."""
        if self.entity is not None and self.entity.has_component(MovementComponent):
            return self.entity.get_component(MovementComponent).location
        return Vec2(0, 0)

    def set_color(self, r, g, b, a):
        self.shape.set_color(r, g, b, a)