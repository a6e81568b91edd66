"""Component that walks its owner along an A* path."""

from __future__ import annotations

from .astar import AStarGrid, AStarNode
from .component import Component
from .vec2 import Vec2

ARRIVE_DISTANCE = 3.0
MOVE_SPEED = 100.0


class AStarPathFinder(Component):
    """Moves the owner toward a destination through an :class:`AStarGrid`."""

    def __init__(self, grid: AStarGrid) -> None:
        super().__init__()
        self.grid = grid
        self.is_stopped = True
        self.target_pos = Vec2()
        self.target_node: AStarNode | None = None
        self.waypoint = Vec2()
        self._path: list[Vec2] = []

    @property
    def path(self) -> tuple[Vec2, ...]:
        """Remaining waypoints, the next one last."""
        return tuple(self._path)

    def _require_owner(self):
        if self.owner is None:
            raise RuntimeError("path finder is not attached to an object")
        return self.owner

    def late_update(self, dt: float) -> None:
        """Step the owner toward the next waypoint."""
        if self.is_stopped or not self._path:
            return
        owner = self._require_owner()
        my_pos = owner.pos
        if (self.waypoint - my_pos).length() < ARRIVE_DISTANCE:
            self._path.pop()
            if not self._path:
                return
        self.waypoint = self._path[-1]
        direction = (self.waypoint - my_pos).normalized()
        owner.pos = my_pos + direction * dt * MOVE_SPEED

    def set_destination(self, pos: Vec2) -> None:
        """Aim at ``pos``; a new target cell triggers a new path search.

        The very first call only records the target cell.
        """
        owner = self._require_owner()
        node = self.grid.node_from_position(pos)
        if self.target_node is None:
            self.target_node = node
            return
        if node == self.target_node and self._path:
            self.is_stopped = False
            return
        self.target_pos = pos
        self.target_node = node
        self._path = self.grid.find_path(owner.pos, pos)
        self.start()

    def start(self) -> None:
        self.is_stopped = False

    def stop(self) -> None:
        self.is_stopped = True