# src/blockmaze/mapgen/distances.py
# Unit-weight flood fill over passages (breadth-first, one frontier at a time).

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Tuple

from ..errors import OutOfBounds
from ..grid import Cell, Coord, Grid


class Distances(Mapping[Coord, int]):
    """Hop counts from a root cell, keyed by (row, column)."""

    def __init__(self, grid: Grid, root: Cell):
        self.grid = grid
        self.root = root
        self._cells: Dict[Coord, int] = {root.coord: 0}

    def __getitem__(self, coord: Coord) -> int:
        return self._cells[coord]

    def __setitem__(self, coord: Coord, distance: int) -> None:
        self._cells[coord] = distance

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def max(self) -> Tuple[Coord, int]:
        """Farthest cell from the root (first one found on ties)."""
        best, best_d = self.root.coord, 0
        for coord, d in self._cells.items():
            if d > best_d:
                best, best_d = coord, d
        return best, best_d

    def path_to(self, goal: Coord) -> List[Coord]:
        """Coordinates from the root to `goal`, both ends included."""
        if goal not in self._cells:
            raise OutOfBounds(f"{goal} is not reachable from {self.root.coord}")
        current = self.grid[goal]
        path = [current.coord]
        while current is not self.root:
            here = self._cells[current.coord]
            for linked in self.grid.links(current):
                if self._cells.get(linked.coord) == here - 1:
                    current = linked
                    break
            else:
                raise OutOfBounds(f"no passage leads back from {current.coord} towards {self.root.coord}")
            path.append(current.coord)
        path.reverse()
        return path


def distances_from(grid: Grid, start: Cell) -> Distances:
    distances = Distances(grid, start)
    frontier = [start]
    while frontier:
        new_frontier = []
        for cell in frontier:
            for linked in grid.links(cell):
                if linked.coord in distances:
                    continue
                distances[linked.coord] = distances[cell.coord] + 1
                new_frontier.append(linked)
        frontier = new_frontier
    return distances
