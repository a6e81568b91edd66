"""Axis-aligned box collider attached to a game object."""

from __future__ import annotations

import itertools

from .component import Component
from .vec2 import Rect, Vec2, rect_make

_next_id = itertools.count()


class Collider(Component):
    """A box that follows its owner, offset by a fixed amount."""

    def __init__(self) -> None:
        super().__init__()
        self.id = next(_next_id)
        self.size = Vec2(30.0, 30.0)
        self.offset = Vec2(0.0, 0.0)
        self.position = Vec2(0.0, 0.0)
        self.show_debug = False

    def _require_owner(self):
        if self.owner is None:
            raise RuntimeError("collider is not attached to an object")
        return self.owner

    def late_update(self, dt: float) -> None:
        """Recompute the box position from the owner's position."""
        self.position = self._require_owner().pos + self.offset

    def bounds(self) -> Rect:
        """The integer rectangle covered by the box at its last position."""
        return rect_make(self.position, self.size)

    def enter_collision(self, other: Collider) -> None:
        self.show_debug = True
        self._require_owner().enter_collision(other)

    def stay_collision(self, other: Collider) -> None:
        self._require_owner().stay_collision(other)

    def exit_collision(self, other: Collider) -> None:
        self.show_debug = False
        self._require_owner().exit_collision(other)