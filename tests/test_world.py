import pytest
from hypothesis import given, strategies as st

from proclab.maze.world import Direction, MazeWorld, NodeColor, Point


def test_point_arithmetic():
    assert Point(2, 3) + Point(-1, 4) == Point(1, 7)
    assert Point(2, 3) - Point(-1, 4) == Point(3, -1)


def test_direction_towards_and_opposite():
    for direction in Direction:
        assert Direction.towards(direction.delta) is direction
        assert direction.opposite.opposite is direction
        assert direction.delta + direction.opposite.delta == Point(0, 0)


def test_direction_towards_rejects_non_step():
    with pytest.raises(ValueError):
        Direction.towards(Point(0, 0))


def test_bounds():
    world = MazeWorld(5)
    assert world.side == 5
    assert world.contains(Point(-2, 2))
    assert not world.contains(Point(3, 0))
    assert len(list(world.points())) == 25
    assert next(iter(world.points())) == Point(-2, -2)


def test_invalid_size():
    with pytest.raises(ValueError):
        MazeWorld(0)


def test_fresh_world_has_all_walls_and_clear_color():
    world = MazeWorld(3)
    for point in world.points():
        assert world.node_color(point) is NodeColor.DARK_GRAY
        assert all(world.has_wall(point, d) for d in Direction)


def test_wall_is_shared_between_neighbours():
    world = MazeWorld(3)
    world.set_wall(Point(0, 0), Direction.NORTH, False)
    assert not world.has_wall(Point(0, -1), Direction.SOUTH)
    assert world.has_wall(Point(0, 0), Direction.EAST)
    world.set_wall(Point(0, -1), Direction.SOUTH, True)
    assert world.has_wall(Point(0, 0), Direction.NORTH)


@given(
    st.integers(min_value=-2, max_value=2),
    st.integers(min_value=-2, max_value=1),
)
def test_south_wall_equals_north_wall_of_cell_below(x, y):
    world = MazeWorld(5)
    here = Point(x, y)
    world.set_wall(here, Direction.SOUTH, False)
    below = here + Direction.SOUTH.delta
    assert world.has_wall(below, Direction.NORTH) is False


def test_outside_access_raises():
    world = MazeWorld(3)
    with pytest.raises(ValueError):
        world.has_wall(Point(5, 0), Direction.NORTH)
    with pytest.raises(ValueError):
        world.set_node_color(Point(0, 2), NodeColor.BLACK)


def test_colors_and_reset():
    world = MazeWorld(3)
    world.set_node_color(Point(1, 1), NodeColor.GREEN)
    world.set_wall(Point(1, 1), Direction.WEST, False)
    assert world.node_color(Point(1, 1)) is NodeColor.GREEN
    world.reset()
    assert world.node_color(Point(1, 1)) is NodeColor.DARK_GRAY
    assert world.has_wall(Point(1, 1), Direction.WEST)


def test_render_single_cell():
    assert MazeWorld(1).render() == "+-+\n| |\n+-+"


def test_render_shows_opened_wall():
    world = MazeWorld(3)
    closed = world.render()
    world.set_wall(Point(0, 0), Direction.EAST, False)
    opened = world.render()
    assert len(opened) == len(closed)
    assert opened.count("|") == closed.count("|") - 1