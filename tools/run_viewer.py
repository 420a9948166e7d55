#!/usr/bin/env python3
# Minimal interactive top-down maze viewer.
# - Arrow keys / WASD: turn left/right, step forward/back through passages
# - N: new maze (next seed)
# - Tab: distance overlay toggle
# - Monsters wander one cell every 5 seconds
# - 60 Hz fixed loop

import argparse
import pygame
from blockmaze.config import MazeConfig
from blockmaze.engine.walker import Walker
from blockmaze.grid import Direction
from blockmaze.mapgen.generator import generate_maze
from blockmaze.rng import Mulberry32

WALL = (0, 0, 0)
FLOOR = (40, 40, 40)
PLAYER = (80, 160, 255)
MONSTER = (255, 144, 2)
MONSTER_PERIOD_TICKS = 300  # 5 s @60Hz

# ---------- drawing ----------
def draw_maze(screen, maze, tile, font, show_distances):
    grid = maze.grid
    screen.fill(FLOOR)
    for cell in grid:
        x1, y1 = cell.column * tile, cell.row * tile
        x2, y2 = x1 + tile, y1 + tile
        if show_distances and cell.coord in maze.distances:
            img = font.render(grid.contents_of(cell), True, (200, 200, 200))
            screen.blit(img, img.get_rect(center=(x1 + tile // 2, y1 + tile // 2)))
        if cell.north is None:
            pygame.draw.line(screen, WALL, (x1, y1), (x2, y1), 3)
        if cell.west is None:
            pygame.draw.line(screen, WALL, (x1, y1), (x1, y2), 3)
        if not grid.is_linked(cell, grid.neighbor(cell, Direction.SOUTH)):
            pygame.draw.line(screen, WALL, (x1, y2), (x2, y2), 3)
        if cell.coord != maze.config.exit and not grid.is_linked(cell, grid.neighbor(cell, Direction.EAST)):
            pygame.draw.line(screen, WALL, (x2, y1), (x2, y2), 3)

def draw_walker(screen, walker, tile, color):
    cx = walker.column * tile + tile // 2
    cy = walker.row * tile + tile // 2
    pygame.draw.circle(screen, color, (cx, cy), tile // 3)
    dx, dy = {Direction.NORTH: (0, -1), Direction.EAST: (1, 0),
              Direction.SOUTH: (0, 1), Direction.WEST: (-1, 0)}[walker.direction]
    pygame.draw.line(screen, (255, 255, 255), (cx, cy), (cx + dx * tile // 3, cy + dy * tile // 3), 2)

# ---------- viewer ----------
def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=8)
    ap.add_argument("--columns", type=int, default=8)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--monsters", type=int, default=3)
    ap.add_argument("--tile", type=int, default=48, help="Cell size in pixels")
    args = ap.parse_args()

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.columns * args.tile + 2, args.rows * args.tile + 2))
    font = pygame.font.SysFont(None, max(10, args.tile // 2))

    seed = args.seed
    show_distances = True

    def new_game(seed):
        maze = generate_maze(MazeConfig(rows=args.rows, columns=args.columns, seed=seed))
        rng = Mulberry32(seed)
        player = Walker(maze.grid, *maze.config.start, direction=Direction.NORTH)
        monsters = [Walker(maze.grid, rng.randint(maze.grid.rows), rng.randint(maze.grid.columns))
                    for _ in range(args.monsters)]
        return maze, rng, player, monsters

    maze, rng, player, monsters = new_game(seed)
    ticks = 0
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_LEFT, pygame.K_a):
                    player.turn_left()
                elif ev.key in (pygame.K_RIGHT, pygame.K_d):
                    player.turn_right()
                elif ev.key in (pygame.K_UP, pygame.K_w):
                    player.forward()
                elif ev.key in (pygame.K_DOWN, pygame.K_s):
                    player.back()
                elif ev.key == pygame.K_n:
                    seed += 1
                    maze, rng, player, monsters = new_game(seed)
                elif ev.key == pygame.K_TAB:
                    show_distances = not show_distances

        ticks += 1
        if ticks % MONSTER_PERIOD_TICKS == 0:
            for m in monsters:
                m.wander(rng)

        draw_maze(screen, maze, args.tile, font, show_distances)
        for m in monsters:
            draw_walker(screen, m, args.tile, MONSTER)
        draw_walker(screen, player, args.tile, PLAYER)

        escaped = (player.row, player.column) == maze.config.exit
        pygame.display.set_caption(
            f"blockmaze viewer - {args.rows}x{args.columns}  seed {seed}"
            + ("  [at exit]" if escaped else "")
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
