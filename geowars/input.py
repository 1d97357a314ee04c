"""Binding raw keys and mouse buttons to action controllers."""

from collections import defaultdict

from geowars.actions import ActionController
from geowars.entity import Component
from geowars.geometry import Vec2
from geowars.movement import MovementComponent
from geowars.shooting import ShootComponent

MAX_ACTIONS = 10
MOUSE_KEY_OFFSET = 512
MOUSE_BUTTON_TYPES = 5

HORIZONTAL = 0
VERTICAL = 1
PRIMARY_FIRE = 2
SECONDARY_FIRE = 3
TOGGLE_WEAPON = 4

MOVE_SPEED = 3


class InputComponent(Component):
    """Ties a fixed set of action controllers to an entity's movement and shooting."""

    def __init__(self):
        super().__init__()
        self.controllers = [ActionController() for _ in range(MAX_ACTIONS)]

    def init(self):
        """Nothing to reset."""

    def execute(self):
        """Input is applied by the input manager, not per update."""

    def action_controller(self, index):
        """The controller for an action slot in ``range(MAX_ACTIONS)``."""
        if not 0 <= index < MAX_ACTIONS:
            raise IndexError(f"action index {index} out of range 0..{MAX_ACTIONS - 1}")
        return self.controllers[index]

    def execute_input(self, delta_time):
        """Translate the controller values into movement and shots."""
        entity = self.entity
        if entity.has_component(MovementComponent):
            move = Vec2(
                self.action_controller(HORIZONTAL).value * MOVE_SPEED,
                self.action_controller(VERTICAL).value * MOVE_SPEED,
            )
            entity.get_component(MovementComponent).do_movement(move)
        fire = self.action_controller(PRIMARY_FIRE)
        if fire.value >= 1 and entity.has_component(ShootComponent):
            shooter = entity.get_component(ShootComponent)
            shooter.shoot(fire.clicked_position, delta_time)
            if self.action_controller(TOGGLE_WEAPON).value >= 1:
                shooter.next_weapon()


class InputManager:
    """Routes key and mouse events to the controllers bound to them."""

    def __init__(self):
        self.input_actions = defaultdict(list)
        self.input_components = []

    def on_key_down(self, key, repeated):
        self._update_input(key, 1.0, repeated)

    def on_key_up(self, key, repeated):
        self._update_input(key, -1.0, repeated)

    def on_mouse_down(self, button, clicks):
        self._update_input(MOUSE_KEY_OFFSET + button, 1.0, False)

    def on_mouse_up(self, button, clicks):
        self._update_input(MOUSE_KEY_OFFSET + button, -1.0, False)

    def on_mouse_move(self, x, y, delta_x, delta_y):
        """Tell every controller bound to a mouse button where the pointer is."""
        for button in range(1, MOUSE_BUTTON_TYPES):
            for _, controller in self.input_actions.get(MOUSE_KEY_OFFSET + button, ()):
                controller.set_mouse_position(x, y)

    def add_key_control(self, key, controller, weight):
        self.input_actions[key].append((weight, controller))

    def add_mouse_control(self, button, controller, weight):
        self.input_actions[MOUSE_KEY_OFFSET + button].append((weight, controller))

    def add_input_component(self, component):
        self.input_components.append(component)

    def remove_input_component(self, component):
        """Stop applying input to ``component``; unknown components are ignored."""
        self.input_components = [c for c in self.input_components if c is not component]

    def execute_input(self, delta_time):
        for component in list(self.input_components):
            component.execute_input(delta_time)

    def update(self, delta_time):
        self.execute_input(delta_time)

    def _update_input(self, code, direction, repeated):
        if repeated:
            return
        for weight, controller in self.input_actions.get(code, ()):
            controller.add(weight * direction)