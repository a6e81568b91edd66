"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

from abc import abstractmethod

from .collider import Collider
from .events import EventManager
from .gameobject import GameObject
from .vec2 import Vec2

PROJECTILE_SPEED = 500.0


class Projectile(GameObject):
    """A moving object that carries damage and removes itself off the top of the screen."""

    def __init__(self, events: EventManager) -> None:
        super().__init__()
        self.events = events
        self.angle = 0.0
        self.damage = 0.0
        self._direction = Vec2(1.0, 1.0)
        collider = self.add_component(Collider())
        collider.size = Vec2(20.0, 20.0)

    @property
    def direction(self) -> Vec2:
        return self._direction

    @direction.setter
    def direction(self, value: Vec2) -> None:
        self._direction = value.normalized()

    def update(self, dt: float) -> None:
        self.pos = self.pos + self._direction * (PROJECTILE_SPEED * dt)
        if self.pos.y < -self.size.y:
            self.events.delete_object(self)

    @abstractmethod
    def enter_collision(self, other: Collider) -> None:
        """React to hitting ``other``."""


class PlayerBullet(Projectile):
    """A player's shot; it disappears on hitting an enemy."""

    def __init__(self, events: EventManager) -> None:
        super().__init__(events)
        self.name = "PlayerBullet"

    def enter_collision(self, other: Collider) -> None:
        if other.owner is not None and other.owner.name == "Enemy":
            self.events.delete_object(self)


class EnemyBullet(Projectile):
    """An enemy's shot; it disappears on hitting the player."""

    def __init__(self, events: EventManager) -> None:
        super().__init__(events)
        self.name = "EnemyBullet"

    def enter_collision(self, other: Collider) -> None:
        if other.owner is not None and other.owner.name == "Player":
            self.events.delete_object(self)