# src/blockmaze/errors.py
# Error kinds raised by the maze core. All are raised immediately; nothing is retried.


class MazeError(Exception):
    """Base class for every error raised by blockmaze."""


class InvalidDimensions(MazeError, ValueError):
    """rows or columns is not a positive integer."""


class InvalidConfig(MazeError, ValueError):
    """A scale or placement setting is out of range."""


class EmptyInput(MazeError, ValueError):
    """A sampling operation was handed an empty sequence."""


class OutOfBounds(MazeError, IndexError):
    """A cell lookup fell outside [0, rows) x [0, columns)."""
