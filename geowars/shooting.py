"""Shooting ability: cooldown handling and weapon selection."""

from geowars.entity import Component
from geowars.movement import MovementComponent
from geowars.weapons import DoubleShotGun, SingleShotGun, TripleShotGun

WEAPON_SLOTS = 3


class ShootComponent(Component):
    """Fires the current weapon through a bullet spawner, respecting its cooldown."""

    def __init__(self, bullet_spawner):
        super().__init__()
        self.bullet_spawner = bullet_spawner
        self.current_gun = 0
        self.weapons = [SingleShotGun(), DoubleShotGun(), TripleShotGun()]
        self.current_time = 0.0

    @property
    def weapon(self):
        """The weapon currently equipped."""
        return self.weapons[self.current_gun]

    def init(self):
        """Nothing to reset."""

    def execute(self):
        """Shooting happens on request, not per update."""

    def shoot(self, click_position, delta_time):
        """Fire at ``click_position`` once the cooldown has elapsed."""
        self.current_time += delta_time
        if self.current_time > self.weapon.cooldown:
            self.current_time = 0.0
            position = self.entity.get_component(MovementComponent).location
            self.weapon.gun_behaviour(self.bullet_spawner, position, click_position)

    def set_bullet_color(self, r, g, b, a):
        """Set the bullet colour of the current weapon."""
        weapon = self.weapon
        weapon.red, weapon.green, weapon.blue, weapon.alpha = r, g, b, a

    def set_weapon(self, weapon):
        """Replace the weapon in the current slot."""
        self.weapons[self.current_gun] = weapon

    def next_weapon(self):
        """Switch to the next slot; the new weapon is ready to fire at once."""
        self.current_gun = (self.current_gun + 1) % WEAPON_SLOTS
        self.current_time = self.weapon.cooldown

    def set_mask(self, new_mask):
        """Set the collision mask of the current weapon's bullets."""
        self.weapon.set_mask(new_mask)