# src/blockmaze/mapgen/carve.py
# Binary-tree carve: every cell opens a passage to its north or east neighbour.

import logging
from typing import List

from ..grid import Cell, Grid
from ..rng import Mulberry32

logger = logging.getLogger(__name__)


def carve_candidates(grid: Grid, cell: Cell) -> List[Cell]:
    """North first, then east; either may be missing on the boundary."""
    out = []
    if cell.north is not None:
        out.append(grid.cells[cell.north])
    if cell.east is not None:
        out.append(grid.cells[cell.east])
    return out


def binary_tree(grid: Grid, rng: Mulberry32) -> Grid:
    """
    Carve a perfect maze into `grid` in place (row-major) and return it.
    The top-right corner has no candidates: it links nothing and draws nothing
    from `rng`, so the stream stays aligned with the cells that do.
    Leaves exactly rows*columns - 1 passages.
    """
    for cell in grid:
        candidates = carve_candidates(grid, cell)
        if not candidates:
            continue
        grid.link(cell, rng.sample(candidates))
    logger.debug("carved %d passages in a %dx%d grid", grid.link_count(), grid.rows, grid.columns)
    return grid
