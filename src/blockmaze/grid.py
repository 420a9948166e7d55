# src/blockmaze/grid.py
# Rectangular cell lattice. Cells live in a flat arena and refer to each other
# by arena index, so adjacency and passages are plain integer sets.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import InvalidDimensions, OutOfBounds
from .rng import Mulberry32

Coord = Tuple[int, int]


class Direction(IntEnum):
    # Clockwise, so a right turn is +1 and the opposite side is +2.
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    def left(self) -> "Direction":
        return Direction((self - 1) % 4)

    def right(self) -> "Direction":
        return Direction((self + 1) % 4)


@dataclass(eq=False)
class Cell:
    row: int
    column: int
    index: int
    # Neighbour arena indices, None on the grid boundary. Fixed after construction.
    north: Optional[int] = None
    south: Optional[int] = None
    east: Optional[int] = None
    west: Optional[int] = None
    # Ordered set of linked arena indices (insertion order = link order).
    links: Dict[int, None] = field(default_factory=dict)

    @property
    def coord(self) -> Coord:
        return (self.row, self.column)

    def neighbor_index(self, direction: Direction) -> Optional[int]:
        return getattr(self, direction.name.lower())

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.column})"


class Grid:
    def __init__(self, rows: int, columns: int):
        for name, value in (("rows", rows), ("columns", columns)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensions(f"{name} must be a positive integer, got {value!r}")
        self.rows = rows
        self.columns = columns
        self.cells: List[Cell] = self._prepare_grid()
        self._configure_cells()
        # Filled in by the distance solver after carving.
        self.distances: Optional[Mapping[Coord, int]] = None

    # ------------- construction -------------
    def _prepare_grid(self) -> List[Cell]:
        return [
            Cell(r, c, r * self.columns + c)
            for r in range(self.rows)
            for c in range(self.columns)
        ]

    def _configure_cells(self) -> None:
        for cell in self.cells:
            r, c = cell.row, cell.column
            if self.in_bounds(r - 1, c):
                cell.north = self._index(r - 1, c)
            if self.in_bounds(r + 1, c):
                cell.south = self._index(r + 1, c)
            if self.in_bounds(r, c - 1):
                cell.west = self._index(r, c - 1)
            if self.in_bounds(r, c + 1):
                cell.east = self._index(r, c + 1)

    # ------------- lookup -------------
    def _index(self, row: int, column: int) -> int:
        return row * self.columns + column

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def cell_at(self, row: int, column: int) -> Cell:
        if not self.in_bounds(row, column):
            raise OutOfBounds(
                f"({row}, {column}) is outside a {self.rows}x{self.columns} grid"
            )
        return self.cells[self._index(row, column)]

    def __getitem__(self, coord: Coord) -> Cell:
        row, column = coord
        return self.cell_at(row, column)

    def __iter__(self) -> Iterator[Cell]:
        # Row-major.
        return iter(self.cells)

    def each_row(self) -> Iterator[List[Cell]]:
        for r in range(self.rows):
            start = r * self.columns
            yield self.cells[start:start + self.columns]

    def size(self) -> int:
        return self.rows * self.columns

    def random_cell(self, rng: Mulberry32) -> Cell:
        row = rng.randint(self.rows)
        column = rng.randint(self.columns)
        return self.cell_at(row, column)

    # ------------- adjacency -------------
    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        idx = cell.neighbor_index(direction)
        return None if idx is None else self.cells[idx]

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Existing neighbours in north, south, east, west order."""
        out = []
        for idx in (cell.north, cell.south, cell.east, cell.west):
            if idx is not None:
                out.append(self.cells[idx])
        return out

    # ------------- passages -------------
    def link(self, a: Cell, b: Cell, bidirectional: bool = True) -> None:
        # Adjacency is not checked; only the carver links cells.
        a.links.setdefault(b.index, None)
        if bidirectional:
            self.link(b, a, False)

    def unlink(self, a: Cell, b: Cell, bidirectional: bool = True) -> None:
        a.links.pop(b.index, None)
        if bidirectional:
            self.unlink(b, a, False)

    def is_linked(self, a: Cell, b: Optional[Cell]) -> bool:
        if b is None:
            return False
        return b.index in a.links

    def links(self, cell: Cell) -> List[Cell]:
        """Linked cells in the order the passages were opened."""
        return [self.cells[idx] for idx in cell.links]

    def link_count(self) -> int:
        """Number of passages, each bidirectional pair counted once."""
        return sum(len(cell.links) for cell in self.cells) // 2

    # ------------- display -------------
    def contents_of(self, cell: Cell) -> str:
        from .render.text import to_base36

        if self.distances is not None and cell.coord in self.distances:
            return to_base36(self.distances[cell.coord])
        return " "

    def __str__(self) -> str:
        from .render.text import render_text

        return render_text(self)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"
