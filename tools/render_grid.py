#!/usr/bin/env python3
# Render generated mazes to PNGs using Pillow.

import argparse, os
from blockmaze.config import MazeConfig
from blockmaze.errors import MazeError
from blockmaze.mapgen.generator import generate_maze
from blockmaze.render.image import render_image

def render_maze(config, out_png, tile_size=16, margin=4):
    maze = generate_maze(config)
    img = render_image(maze.grid, tile=tile_size, margin=margin, opening=config.exit)
    os.makedirs(os.path.dirname(out_png) or ".", exist_ok=True)
    img.save(out_png)
    return maze

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=8)
    ap.add_argument("--columns", type=int, default=8)
    ap.add_argument("--seed", type=int, required=True, help="First seed to render")
    ap.add_argument("--count", type=int, default=1, help="Render seeds seed..seed+count-1")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Cell size in pixels")
    args = ap.parse_args()

    for seed in range(args.seed, args.seed + args.count):
        png = os.path.join(args.outdir, f"{args.rows}x{args.columns}", f"{seed}.png")
        try:
            render_maze(MazeConfig(rows=args.rows, columns=args.columns, seed=seed), png, tile_size=args.tile)
        except MazeError as e:
            raise SystemExit(f"{png}: {e}")
    print(f"Wrote PNGs to {os.path.join(args.outdir, f'{args.rows}x{args.columns}')}")

if __name__ == "__main__":
    main()
