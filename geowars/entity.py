"""Entities, their components and the manager that owns them."""

from abc import ABC, abstractmethod
from itertools import count


class Component(ABC):
    """Base for behaviour attached to an entity."""

    def __init__(self):
        self.entity = None
        self.remove = False

    def init(self):
        """Reset state when a component is reused; nothing to do by default."""

    @abstractmethod
    def execute(self):
        """Run the component's logic once per update."""


class Entity:
    """Holds at most one component per component type."""

    def __init__(self, entity_id):
        self.id = entity_id
        self.alive = True
        self._components = {}
        self._changed = True
        self._remove_all = False

    @property
    def components(self):
        return list(self._components.values())

    @property
    def is_active(self):
        return self.alive

    def set_component(self, component):
        """Attach a component, replacing any of the same type, and return it."""
        component.entity = self
        component.remove = False
        self._components[type(component)] = component
        self._changed = True
        return component

    def get_component(self, component_type):
        """The attached component of exactly this type, or None."""
        return self._components.get(component_type)

    def has_component(self, component_type):
        return component_type in self._components

    def remove_component(self, component_type):
        """Mark a component for removal at the next clean-up."""
        component = self._components.get(component_type)
        if component is not None:
            component.remove = True
            self._changed = True

    def remove_all_components(self):
        """Mark every component for removal at the next clean-up."""
        self._remove_all = True
        self._changed = True

    def update(self):
        for component in list(self._components.values()):
            component.execute()

    def clean_up(self):
        """Drop components marked for removal. Call after ``update``."""
        if not self._changed:
            return
        if self._remove_all:
            self._components.clear()
            self._remove_all = False
        self._components = {
            kind: component
            for kind, component in self._components.items()
            if not component.remove
        }
        self._changed = False


class EntityManager:
    """Creates, updates and prunes entities."""

    def __init__(self):
        self.entities = []
        self._ids = count()

    def __len__(self):
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)

    def create_entity(self):
        entity = Entity(next(self._ids))
        self.entities.append(entity)
        return entity

    def update(self):
        for entity in list(self.entities):
            entity.update()

    def clean(self):
        """Discard inactive entities and clean up the rest."""
        self.entities = [entity for entity in self.entities if entity.is_active]
        for entity in self.entities:
            entity.clean_up()