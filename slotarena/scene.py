"""Scenes: layered collections of game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .collision import CollisionManager
from .enums import Layer

if TYPE_CHECKING:
    from .gameobject import GameObject


class Scene(ABC):
    """Holds objects by layer and drives their per-frame updates."""

    def __init__(self) -> None:
        self._layers: dict[Layer, list[GameObject]] = {layer: [] for layer in Layer}
        self.collisions = CollisionManager()

    @abstractmethod
    def init(self) -> None:
        """Populate the scene."""

    def update(self, dt: float) -> None:
        """Update every live object; objects added meanwhile update this frame too."""
        for layer in Layer:
            for obj in self._layers[layer]:
                if not obj.is_dead:
                    obj.update(dt)

    def late_update(self, dt: float) -> None:
        for layer in Layer:
            for obj in self._layers[layer]:
                obj.late_update(dt)

    def purge_dead(self) -> list[GameObject]:
        """Remove dead objects from every layer and return them, in order."""
        removed: list[GameObject] = []
        for objects in self._layers.values():
            removed.extend(obj for obj in objects if obj.is_dead)
            objects[:] = [obj for obj in objects if not obj.is_dead]
        return removed

    def release(self) -> None:
        """Drop every object and clear the collision layer checks."""
        for objects in self._layers.values():
            objects.clear()
        self.collisions.check_reset()

    def add_object(self, obj: GameObject, layer: Layer) -> None:
        self._layers[Layer(layer)].append(obj)

    def layer_objects(self, layer: Layer) -> tuple[GameObject, ...]:
        return tuple(self._layers[Layer(layer)])