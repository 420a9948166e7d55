# src/blockmaze/engine/walker.py
# Grid-locked agents: a player that turns and steps through passages, and
# monsters that wander. Walkers only read the grid.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..errors import OutOfBounds
from ..grid import Cell, Direction, Grid
from ..mapgen.walls import Position
from ..rng import Mulberry32

_STEP = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


def cell_to_position(row: int, column: int, rows: int, cell_size: float, height: float = 0) -> Position:
    """World anchor of a cell; the bottom-left cell sits at the origin."""
    return (column * cell_size, height, (row - (rows - 1)) * cell_size)


def direction_between(a: Cell, b: Cell) -> Optional[Direction]:
    """Direction from `a` to an adjacent `b`, None if they are not adjacent."""
    for direction, (dr, dc) in _STEP.items():
        if (a.row + dr, a.column + dc) == (b.row, b.column):
            return direction
    return None


@dataclass
class Walker:
    grid: Grid
    row: int
    column: int
    direction: Direction = Direction.NORTH

    def __post_init__(self) -> None:
        if not self.grid.in_bounds(self.row, self.column):
            raise OutOfBounds(f"walker placed outside the grid at ({self.row}, {self.column})")
        self.direction = Direction(self.direction)

    @property
    def cell(self) -> Cell:
        return self.grid.cell_at(self.row, self.column)

    def open_directions(self) -> List[Direction]:
        """Directions with a passage, in the order the passages were carved."""
        here = self.cell
        return [direction_between(here, linked) for linked in self.grid.links(here)]

    def can_move(self, direction: Direction) -> bool:
        here = self.cell
        return self.grid.is_linked(here, self.grid.neighbor(here, direction))

    def move(self, direction: Direction) -> None:
        # Unchecked step; callers test can_move first.
        dr, dc = _STEP[direction]
        self.row += dr
        self.column += dc

    def turn_left(self) -> None:
        self.direction = self.direction.left()

    def turn_right(self) -> None:
        self.direction = self.direction.right()

    def forward(self) -> bool:
        if not self.can_move(self.direction):
            return False
        self.move(self.direction)
        return True

    def back(self) -> bool:
        """Step away from the facing direction without turning around."""
        behind = self.direction.opposite
        if not self.can_move(behind):
            return False
        self.move(behind)
        return True

    def wander(self, rng: Mulberry32) -> Optional[Direction]:
        """Take a random open passage. Returns the direction moved, if any."""
        options = self.open_directions()
        if not options:
            return None
        direction = rng.sample(options)
        self.move(direction)
        return direction

    def position(self, cell_size: float = 5, height: float = 0) -> Position:
        return cell_to_position(self.row, self.column, self.grid.rows, cell_size, height)
