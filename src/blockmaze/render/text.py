# src/blockmaze/render/text.py
"""
Box-drawing text view of a grid. Each cell is three characters wide and shows
its distance from the start in base 36, or a blank when no distance is known.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..grid import Grid

DIGITS36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(n: int) -> str:
    """
    Lower-case base-36 numeral. Values >= 36 come out two or more characters
    wide and push the rest of the row out of alignment.
    """
    if n < 0:
        return "-" + to_base36(-n)
    out = DIGITS36[n % 36]
    n //= 36
    while n:
        out = DIGITS36[n % 36] + out
        n //= 36
    return out


def render_text(grid: "Grid") -> str:
    from ..grid import Direction

    output = "+" + "---+" * grid.columns + "\n"
    for row in grid.each_row():
        top = "|"
        bottom = "+"
        for cell in row:
            east = grid.neighbor(cell, Direction.EAST)
            south = grid.neighbor(cell, Direction.SOUTH)
            top += f" {grid.contents_of(cell)} " + (" " if grid.is_linked(cell, east) else "|")
            bottom += ("   " if grid.is_linked(cell, south) else "---") + "+"
        output += top + "\n" + bottom + "\n"
    return output
