import pytest

from slotarena.astar import AStarGrid, AStarNode
from slotarena.enums import SCREEN_HEIGHT, SCREEN_WIDTH
from slotarena.vec2 import Vec2


def _cell(grid, pos):
    node = grid.node_from_position(pos)
    return node.x, node.y


def _assert_connected(grid, start, path):
    cells = [_cell(grid, p) for p in path] + [(start.x, start.y)]
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_node_equality_uses_coordinates_only():
    a = AStarNode(1, 2, Vec2(0, 0), True)
    b = AStarNode(1, 2, Vec2(50, 50), False)
    c = AStarNode(2, 1, Vec2(0, 0), True)
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_node_f_is_sum_of_costs():
    node = AStarNode(0, 0, Vec2(0, 0), True)
    node.g = 2
    node.h = 3
    assert node.f == 5


def test_distance_cost_is_squared_and_symmetric():
    a = AStarNode(0, 0, Vec2(0, 0), True)
    b = AStarNode(3, 4, Vec2(0, 0), True)
    assert a.distance_cost(b) == 25
    assert b.distance_cost(a) == a.distance_cost(b)
    assert a.distance_cost(a) == 0


def test_new_node_defaults():
    node = AStarNode(5, 6, Vec2(1, 1), True)
    assert node.g == 0 and node.h == 0
    assert node.parent is None


def test_invalid_grid_size():
    with pytest.raises(ValueError):
        AStarGrid(0)


def test_node_out_of_range_raises():
    grid = AStarGrid(5)
    with pytest.raises(IndexError):
        grid.node(5, 0)
    with pytest.raises(IndexError):
        grid.node(0, -1)


def test_nodes_are_symmetric_about_screen_centre():
    grid = AStarGrid(100)
    first = grid.node(0, 0).pos
    last_x = grid.node(99, 0).pos
    last_y = grid.node(0, 99).pos
    assert first.x + last_x.x == pytest.approx(SCREEN_WIDTH)
    assert first.y + last_y.y == pytest.approx(SCREEN_HEIGHT)


@pytest.mark.parametrize("size", [5, 100])
def test_node_from_position_round_trips(size):
    grid = AStarGrid(size)
    for x, y in [(0, 0), (size - 1, size - 1), (size // 2, 1), (1, size - 2)]:
        node = grid.node(x, y)
        assert grid.node_from_position(node.pos) is node


def test_node_from_position_clamps():
    grid = AStarGrid(10)
    assert grid.node_from_position(Vec2(-500, -500)) is grid.node(0, 0)
    assert grid.node_from_position(Vec2(10_000, 10_000)) is grid.node(9, 9)


def test_neighbours_of_interior_node():
    grid = AStarGrid(5)
    found = grid.neighbours(grid.node(2, 2))
    assert len(found) == 8
    assert {(n.x, n.y) for n in found} == {
        (x, y) for x in (1, 2, 3) for y in (1, 2, 3) if (x, y) != (2, 2)
    }


def test_neighbours_of_corner_are_clamped():
    grid = AStarGrid(5)
    found = grid.neighbours(grid.node(0, 0))
    assert len(found) == 8
    assert {(n.x, n.y) for n in found} == {(0, 0), (0, 1), (1, 0), (1, 1)}


def test_neighbours_skip_unwalkable():
    grid = AStarGrid(5)
    grid.node(3, 3).is_walkable = False
    found = grid.neighbours(grid.node(2, 2))
    assert (3, 3) not in {(n.x, n.y) for n in found}
    assert len(found) == 7


def test_path_to_same_cell_is_empty():
    grid = AStarGrid(10)
    pos = grid.node(4, 4).pos
    assert grid.find_path(pos, pos) == []


def test_path_to_adjacent_cell():
    grid = AStarGrid(10)
    start = grid.node(4, 4)
    target = grid.node(5, 4)
    assert grid.find_path(start.pos, target.pos) == [target.pos]


def test_path_is_connected_and_ends_at_target():
    grid = AStarGrid(100)
    start = grid.node(10, 10)
    target = grid.node(20, 15)
    path = grid.find_path(start.pos, target.pos)
    assert path[0] == target.pos
    assert start.pos not in path
    _assert_connected(grid, start, path)


def test_path_avoids_walls():
    grid = AStarGrid(5)
    for y in range(4):
        grid.node(2, y).is_walkable = False
    start = grid.node(0, 0)
    target = grid.node(4, 0)
    path = grid.find_path(start.pos, target.pos)
    assert path[0] == target.pos
    cells = [_cell(grid, p) for p in path]
    assert (2, 4) in cells
    assert all(grid.node(x, y).is_walkable for x, y in cells)
    _assert_connected(grid, start, path)


def test_path_blocked_returns_empty():
    grid = AStarGrid(5)
    for y in range(5):
        grid.node(2, y).is_walkable = False
    start = grid.node(0, 2)
    target = grid.node(4, 2)
    assert grid.find_path(start.pos, target.pos) == []