import pytest

from blockmaze.engine.walker import Walker, cell_to_position, direction_between
from blockmaze.errors import OutOfBounds
from blockmaze.grid import Direction, Grid
from blockmaze.mapgen.carve import binary_tree
from blockmaze.rng import Mulberry32

# Seed 12345, 4x4:
# +---+---+---+---+
# |               |
# +---+---+   +   +
# |           |   |
# +---+---+---+   +
# |               |
# +---+---+---+   +
# |               |
# +---+---+---+---+
def make_maze():
    return binary_tree(Grid(4, 4), Mulberry32(12345))

def test_walk_to_the_exit():
    g = make_maze()
    p = Walker(g, 3, 0, Direction.NORTH)
    assert not p.forward()          # wall above the start
    p.turn_right()
    assert p.direction is Direction.EAST
    for _ in range(3):
        assert p.forward()
    assert (p.row, p.column) == (3, 3)
    assert not p.forward()          # east boundary
    p.turn_left()
    for _ in range(3):
        assert p.forward()
    assert (p.row, p.column) == (0, 3)
    assert not p.forward()          # north boundary

def test_back_keeps_facing():
    g = make_maze()
    p = Walker(g, 0, 3, Direction.NORTH)
    assert p.back()
    assert (p.row, p.column) == (1, 3)
    assert p.direction is Direction.NORTH
    p.turn_left()                   # facing west, (1,2) is walled off
    assert not p.forward()
    assert not p.back()             # east of (1,3) is the boundary

def test_open_directions_follow_carve_order():
    g = make_maze()
    assert Walker(g, 2, 3).open_directions() == [Direction.WEST, Direction.NORTH, Direction.SOUTH]
    assert Walker(g, 3, 0).open_directions() == [Direction.EAST]

def test_wander_takes_an_open_passage():
    g = make_maze()
    m = Walker(g, 3, 0)
    assert m.wander(Mulberry32(1)) is Direction.EAST
    assert (m.row, m.column) == (3, 1)
    rng = Mulberry32(8)
    for _ in range(100):
        before = m.cell
        m.wander(rng)
        assert g.is_linked(before, m.cell)

def test_wander_without_passages():
    g = Grid(1, 1)
    m = Walker(g, 0, 0)
    assert m.wander(Mulberry32(1)) is None
    assert (m.row, m.column) == (0, 0)

def test_walker_outside_grid():
    with pytest.raises(OutOfBounds):
        Walker(Grid(2, 2), 2, 0)

def test_positions():
    assert cell_to_position(7, 0, 8, 5) == (0, 0, 0)
    assert cell_to_position(0, 3, 8, 5, height=1.8) == (15, 1.8, -35)
    g = make_maze()
    assert Walker(g, 3, 0).position() == (0, 0, 0)
    assert Walker(g, 0, 3).position(cell_size=2, height=1) == (6, 1, -6)

def test_direction_between():
    g = Grid(3, 3)
    mid = g.cell_at(1, 1)
    assert direction_between(mid, g.cell_at(0, 1)) is Direction.NORTH
    assert direction_between(mid, g.cell_at(1, 2)) is Direction.EAST
    assert direction_between(mid, g.cell_at(2, 1)) is Direction.SOUTH
    assert direction_between(mid, g.cell_at(1, 0)) is Direction.WEST
    assert direction_between(mid, g.cell_at(0, 0)) is None

def test_position_type_is_shared_with_walls():
    from blockmaze.engine import walker
    from blockmaze.mapgen import walls
    assert walker.Position is walls.Position
