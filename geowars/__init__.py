"""Game logic for a Geometry Wars style arcade shooter on an entity-component system."""

__version__ = "0.1.0"