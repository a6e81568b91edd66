"""Game objects: positioned entities carrying components and stats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from .component import Component
from .vec2 import Vec2

if TYPE_CHECKING:
    from .collider import Collider

C = TypeVar("C", bound=Component)


@dataclass
class Stat:
    """Combat and movement figures of an object."""

    hp: int = 0
    move_speed: float = 0.0
    atk_range: float = 0.0
    atk_cooldown: float = 0.0
    atk_delay: float = 0.0
    atk_damage: int = 0


class GameObject(ABC):
    """An entity in a scene with a position, a size and components."""

    def __init__(self) -> None:
        self.pos = Vec2()
        self.size = Vec2()
        self.name = ""
        self.stat = Stat()
        self._dead = False
        self._components: list[Component] = []

    @property
    def is_dead(self) -> bool:
        return self._dead

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the object by ``dt`` seconds."""

    def late_update(self, dt: float) -> None:
        """Let every component run its late update."""
        for component in self._components:
            component.late_update(dt)

    def add_component(self, component: C) -> C:
        """Attach ``component`` to this object and return it."""
        component.owner = self
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """The first attached component of ``component_type``, or None."""
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )

    def enter_collision(self, other: Collider) -> None:
        """Called when a collision with ``other`` begins; ignored by default."""

    def stay_collision(self, other: Collider) -> None:
        """Called each frame a collision with ``other`` lasts; ignored by default."""

    def exit_collision(self, other: Collider) -> None:
        """Called when a collision with ``other`` ends; ignored by default."""

    def set_dead(self) -> None:
        self._dead = True

    def apply_damage(self, damage: int) -> None:
        self.stat.hp -= damage