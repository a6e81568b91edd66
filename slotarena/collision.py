"""Layer-based collision detection with enter, stay and exit callbacks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .collider import Collider
from .enums import Layer

if TYPE_CHECKING:
    from .scene import Scene


def is_collision(left: Collider, right: Collider) -> bool:
    """Whether the two colliders' integer boxes overlap with positive area."""
    a = left.bounds()
    b = right.bounds()
    return max(a.left, b.left) < min(a.right, b.right) and max(a.top, b.top) < min(
        a.bottom, b.bottom
    )


class CollisionManager:
    """Tracks which layer pairs collide and the contact state of collider pairs."""

    def __init__(self) -> None:
        self._masks = [0] * len(Layer)
        self._contacts: dict[tuple[int, int], bool] = {}

    @staticmethod
    def _cell(left: Layer, right: Layer) -> tuple[int, int]:
        row, col = sorted((int(left), int(right)))
        return row, col

    def check_layer(self, left: Layer, right: Layer) -> None:
        """Toggle collision checking between two layers."""
        row, col = self._cell(left, right)
        self._masks[row] ^= 1 << col

    def is_checked(self, left: Layer, right: Layer) -> bool:
        row, col = self._cell(left, right)
        return bool(self._masks[row] & (1 << col))

    def check_reset(self) -> None:
        """Turn off checking between all layers."""
        self._masks = [0] * len(Layer)

    def update(self, scene: Scene) -> None:
        """Test every checked layer pair of ``scene`` and fire callbacks."""
        for row in Layer:
            for col in Layer:
                if col >= row and self.is_checked(row, col):
                    self._update_pair(scene, row, col)

    def _update_pair(self, scene: Scene, left_layer: Layer, right_layer: Layer) -> None:
        right_objects = scene.layer_objects(right_layer)
        for left_obj in scene.layer_objects(left_layer):
            left = left_obj.get_component(Collider)
            if left is None:
                continue
            for right_obj in right_objects:
                right = right_obj.get_component(Collider)
                if right is None or right_obj is left_obj:
                    continue

                key = (left.id, right.id)
                touching = self._contacts.setdefault(key, False)
                either_dead = left_obj.is_dead or right_obj.is_dead

                if is_collision(left, right):
                    if touching:
                        if either_dead:
                            left.exit_collision(right)
                            right.exit_collision(left)
                            self._contacts[key] = False
                        else:
                            left.stay_collision(right)
                            right.stay_collision(left)
                    elif not either_dead:
                        left.enter_collision(right)
                        right.enter_collision(left)
                        self._contacts[key] = True
                elif touching:
                    left.exit_collision(right)
                    right.exit_collision(left)
                    self._contacts[key] = False