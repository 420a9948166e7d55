from dataclasses import dataclass, replace, fields
from typing import Any, Mapping, Optional, Tuple

from .errors import InvalidConfig

Coord = Tuple[int, int]

# Attribute-style keys (as a scene component would pass them) -> field names.
_ALIASES = {
    "cellSize": "cell_size",
    "wallSize": "wall_size",
    "startCell": "start_cell",
    "exitCell": "exit_cell",
    "blockHeight": "block_height",
}


@dataclass(frozen=True)
class MazeConfig:
    rows: int = 8
    columns: int = 8
    # None -> time-derived seed (logged, but not reproducible by default).
    seed: Optional[int] = None
    cell_size: float = 5
    wall_size: float = 1
    # None -> bottom-left (rows-1, 0).
    start_cell: Optional[Coord] = None
    # Cell whose east edge stays open. None -> top-right (0, columns-1).
    exit_cell: Optional[Coord] = None
    block_height: float = 1

    def __post_init__(self) -> None:
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfig(f"seed must be an integer, got {self.seed!r}")
        if self.cell_size <= 0 or self.wall_size <= 0:
            raise InvalidConfig("cell_size and wall_size must be positive")

    @property
    def start(self) -> Coord:
        return self.start_cell if self.start_cell is not None else (self.rows - 1, 0)

    @property
    def exit(self) -> Coord:
        return self.exit_cell if self.exit_cell is not None else (0, self.columns - 1)

    def with_overrides(self, **changes: Any) -> "MazeConfig":
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MazeConfig":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfig(f"unknown maze setting {key!r}")
            if name in ("start_cell", "exit_cell") and value is not None:
                value = tuple(value)
            kwargs[name] = value
        return cls(**kwargs)


DEFAULT_CONFIG = MazeConfig()
