# src/blockmaze/mapgen/generator.py
# Full pipeline: construct -> carve -> distances -> walls.

import logging
from dataclasses import dataclass
from typing import List

from ..config import MazeConfig
from ..grid import Grid
from ..rng import Mulberry32
from .carve import binary_tree
from .distances import Distances, distances_from
from .walls import Position, WallRun, extract_wall_runs, wall_blocks

logger = logging.getLogger(__name__)


@dataclass
class Maze:
    config: MazeConfig
    seed: int
    grid: Grid
    distances: Distances
    wall_runs: List[WallRun]

    @property
    def blocks(self) -> List[Position]:
        return wall_blocks(self.wall_runs)

    @property
    def text(self) -> str:
        return str(self.grid)


def generate_maze(config: MazeConfig = MazeConfig()) -> Maze:
    grid = Grid(config.rows, config.columns)
    # Resolve both special cells before touching the RNG so a bad one fails fast.
    start = grid.cell_at(*config.start)
    grid.cell_at(*config.exit)

    rng = Mulberry32(config.seed)
    logger.info("generating %dx%d maze, seed %d", grid.rows, grid.columns, rng.seed)

    binary_tree(grid, rng)
    grid.distances = distances_from(grid, start)
    runs = extract_wall_runs(
        grid,
        cell_size=config.cell_size,
        wall_size=config.wall_size,
        opening=config.exit,
        height=config.block_height,
    )
    logger.debug("maze:\n%s", grid)
    return Maze(config=config, seed=rng.seed, grid=grid, distances=grid.distances, wall_runs=runs)
