# src/blockmaze/render/image.py
# Top-down raster of a maze using Pillow. Cells are shaded by distance from the
# start (dark = near, light = far) when distances are known.

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import Direction, Grid

RGBA = Tuple[int, int, int, int]

WALL = (0, 0, 0, 255)
FLOOR = (255, 255, 255, 255)
NEAR = (200, 40, 0, 255)
FAR = (255, 220, 120, 255)


def _blend(a: RGBA, b: RGBA, t: float) -> RGBA:
    return tuple(int(round(x + (y - x) * t)) for x, y in zip(a, b))


def cell_color(grid: Grid, row: int, column: int) -> RGBA:
    dist = grid.distances
    if not dist:
        return FLOOR
    d = dist.get((row, column))
    if d is None:
        return FLOOR
    longest = max(dist.values()) or 1
    return _blend(NEAR, FAR, d / longest)


def render_image(grid: Grid, tile: int = 16, margin: int = 4, opening: Optional[Tuple[int, int]] = None) -> Image.Image:
    """
    Draw `grid` onto a new RGBA image. Wall lines follow the same rules as
    the block extractor, including the open east edge of `opening`
    (default: top-right cell).
    """
    if opening is None:
        opening = (0, grid.columns - 1)
    w = grid.columns * tile + 2 * margin
    h = grid.rows * tile + 2 * margin
    img = Image.new("RGBA", (w + 1, h + 1), FLOOR)
    draw = ImageDraw.Draw(img)

    for cell in grid:
        x1 = margin + cell.column * tile
        y1 = margin + cell.row * tile
        x2, y2 = x1 + tile, y1 + tile
        draw.rectangle((x1, y1, x2, y2), fill=cell_color(grid, cell.row, cell.column))

    for cell in grid:
        x1 = margin + cell.column * tile
        y1 = margin + cell.row * tile
        x2, y2 = x1 + tile, y1 + tile
        if cell.north is None:
            draw.line((x1, y1, x2, y1), fill=WALL)
        if cell.west is None:
            draw.line((x1, y1, x1, y2), fill=WALL)
        if not grid.is_linked(cell, grid.neighbor(cell, Direction.SOUTH)):
            draw.line((x1, y2, x2, y2), fill=WALL)
        if cell.coord != opening and not grid.is_linked(cell, grid.neighbor(cell, Direction.EAST)):
            draw.line((x2, y1, x2, y2), fill=WALL)
    return img
