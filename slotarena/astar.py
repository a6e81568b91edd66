"""Grid-based A* path search over the square play field."""

from __future__ import annotations

import math

from .enums import SCREEN_HEIGHT, SCREEN_WIDTH
from .vec2 import Vec2

DEFAULT_GRID_SIZE = 100


def _clamp(value, low, high):
    return max(low, min(value, high))


class AStarNode:
    """One cell of the search grid."""

    def __init__(self, x: int, y: int, pos: Vec2, is_walkable: bool = True) -> None:
        self.x = x
        self.y = y
        self.pos = pos
        self.g = 0.0
        self.h = 0.0
        self.is_walkable = is_walkable
        self.parent: AStarNode | None = None

    @property
    def f(self) -> float:
        """Total estimated cost: cost so far plus heuristic."""
        return self.g + self.h

    def distance_cost(self, other: AStarNode) -> int:
        """Squared grid distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AStarNode):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"AStarNode(x={self.x}, y={self.y}, walkable={self.is_walkable})"


class AStarGrid:
    """A square grid of nodes laid over the square map centred on the screen."""

    def __init__(self, size: int = DEFAULT_GRID_SIZE) -> None:
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        map_size = Vec2(SCREEN_WIDTH, SCREEN_WIDTH)
        map_pos = Vec2(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2) - map_size / 2
        node_size = map_size / size
        radius = node_size * 0.5
        self._rows = [
            [
                AStarNode(
                    x,
                    y,
                    Vec2(x * node_size.x + radius.x, y * node_size.y + radius.y) + map_pos,
                    True,
                )
                for x in range(size)
            ]
            for y in range(size)
        ]

    def node(self, x: int, y: int) -> AStarNode:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"node ({x}, {y}) is outside a {self.size}x{self.size} grid")
        return self._rows[y][x]

    def node_from_position(self, pos: Vec2) -> AStarNode:
        """The node nearest to a screen position, clamped to the grid."""
        percent_x = _clamp(pos.x / SCREEN_WIDTH, 0.0, 1.0)
        offset_y = (SCREEN_HEIGHT - SCREEN_WIDTH) // 2
        percent_y = _clamp((pos.y - offset_y) / SCREEN_WIDTH, 0.0, 1.0)
        x = math.floor((self.size - 1) * percent_x + 0.5)
        y = math.floor((self.size - 1) * percent_y + 0.5)
        return self._rows[y][x]

    def neighbours(self, node: AStarNode) -> list[AStarNode]:
        """Walkable cells around ``node``.

        Offsets are clamped to the grid, so at an edge the same cell (or the
        node itself) can appear more than once.
        """
        last = self.size - 1
        found = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                x = _clamp(node.x + dx, 0, last)
                y = _clamp(node.y + dy, 0, last)
                candidate = self._rows[y][x]
                if candidate.is_walkable:
                    found.append(candidate)
        return found

    def find_path(self, start_pos: Vec2, target_pos: Vec2) -> list[Vec2]:
        """Waypoints from the target back toward the start.

        The first item is the target cell's centre; the last is the cell next
        to the start. The start cell itself is not included. An empty list
        means the start is already the target or no path exists.
        """
        start = self.node_from_position(start_pos)
        start.g = 0
        target = self.node_from_position(target_pos)

        open_nodes: list[AStarNode] = []
        open_set: set[AStarNode] = set()
        closed: set[AStarNode] = set()
        current = start

        while current is not target:
            for neighbour in self.neighbours(current):
                if not neighbour.is_walkable or neighbour in closed:
                    continue
                neighbour.g = current.g + current.distance_cost(neighbour)
                neighbour.h = neighbour.distance_cost(target)
                neighbour.parent = current
                if neighbour not in open_set:
                    open_nodes.append(neighbour)
                    open_set.add(neighbour)

            if not open_nodes:
                return []

            best_index, best = 0, open_nodes[0]
            for index, candidate in enumerate(open_nodes):
                if candidate.f < best.f or (candidate.f == best.f and candidate.h < best.h):
                    best_index, best = index, candidate

            del open_nodes[best_index]
            open_set.discard(best)
            closed.add(best)
            current = best

        path = []
        node = target
        while node is not start:
            path.append(node.pos)
            node = node.parent
        return path