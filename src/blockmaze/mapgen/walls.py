# src/blockmaze/mapgen/walls.py
# Wall-block placement: one run of unit blocks along every walled cell edge.
#
# World layout: column -> +x, row -> +z, every cell is cell_size wide, and the
# whole maze is shifted so cell (rows-1, 0) is centred on the origin.
# North and west runs stop short of the far corner; south and east runs
# include it, so corner blocks can appear twice.

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..errors import InvalidConfig
from ..grid import Cell, Coord, Direction, Grid

Position = Tuple[float, float, float]

_EPS = 1e-9


@dataclass
class WallRun:
    cell: Coord
    side: Direction
    blocks: List[Position] = field(default_factory=list)


def _steps(start: float, stop: float, step: float, inclusive: bool) -> List[float]:
    # Count from the span; repeated float addition drifts for steps like 0.1.
    ratio = (stop - start) / step
    if inclusive:
        count = math.floor(ratio + _EPS) + 1
    else:
        count = math.ceil(ratio - _EPS)
    out = [start + i * step for i in range(count)]
    if inclusive and abs(out[-1] - stop) <= _EPS * step:
        out[-1] = stop
    return out


def extract_wall_runs(
    grid: Grid,
    cell_size: float = 5,
    wall_size: float = 1,
    opening: Optional[Coord] = None,
    height: float = 1,
) -> List[WallRun]:
    """
    Walk the grid row-major and emit a WallRun for each walled edge, checking
    north, west, south, east in that order. North/west only wall the grid
    boundary; south/east wall any edge without a passage. The east edge of
    `opening` (default: top-right cell) is always left open.
    """
    if cell_size <= 0 or wall_size <= 0:
        raise InvalidConfig("cell_size and wall_size must be positive")
    if opening is None:
        opening = (0, grid.columns - 1)

    offset_x = -0.5 * cell_size
    offset_z = -(grid.rows - 0.5) * cell_size

    runs: List[WallRun] = []
    for cell in grid:
        x1 = cell.column * cell_size
        x2 = (cell.column + 1) * cell_size
        z1 = cell.row * cell_size
        z2 = (cell.row + 1) * cell_size

        def along_x(z: float, inclusive: bool) -> List[Position]:
            return [(x + offset_x, height, z + offset_z) for x in _steps(x1, x2, wall_size, inclusive)]

        def along_z(x: float, inclusive: bool) -> List[Position]:
            return [(x + offset_x, height, z + offset_z) for z in _steps(z1, z2, wall_size, inclusive)]

        if cell.north is None:
            runs.append(WallRun(cell.coord, Direction.NORTH, along_x(z1, False)))
        if cell.west is None:
            runs.append(WallRun(cell.coord, Direction.WEST, along_z(x1, False)))
        if not grid.is_linked(cell, grid.neighbor(cell, Direction.SOUTH)):
            runs.append(WallRun(cell.coord, Direction.SOUTH, along_x(z2, True)))
        if cell.coord == opening:
            continue
        if not grid.is_linked(cell, grid.neighbor(cell, Direction.EAST)):
            runs.append(WallRun(cell.coord, Direction.EAST, along_z(x2, True)))
    return runs


def wall_blocks(runs: List[WallRun]) -> List[Position]:
    """Flatten runs into the ordered list of block anchors."""
    return [pos for run in runs for pos in run.blocks]


def has_wall(runs: List[WallRun], cell: Cell, side: Direction) -> bool:
    return any(run.cell == cell.coord and run.side == side for run in runs)
