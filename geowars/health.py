"""Health bookkeeping for entities."""

from geowars.entity import Component

DEFAULT_MAX_HEALTH = 100


class HealthComponent(Component):
    """Keeps the current and maximum health of an entity."""

    def __init__(self):
        super().__init__()
        self.current_health = 0
        self.max_health = 0

    def init(self):
        """Restore to full default health."""
        self.set_max_health(DEFAULT_MAX_HEALTH)
        self.set_current_health(self.max_health)

    def execute(self):
        """Keep the current health within the maximum."""
        self.current_health = min(self.current_health, self.max_health)

    def update_health(self, damage):
        """Reduce health by ``damage``; a negative value heals."""
        self.current_health -= damage

    def set_current_health(self, current_health):
        self.current_health = current_health

    def set_max_health(self, max_health):
        self.max_health = max_health

    def is_alive(self):
        """True once health has run out, meaning the component should be removed."""
        return self.current_health <= 0