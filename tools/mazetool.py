#!/usr/bin/env python3
import argparse, csv, logging
from blockmaze.config import MazeConfig
from blockmaze.errors import MazeError
from blockmaze.mapgen.generator import generate_maze

def write_tsv(rows, path, header=None):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if header:
            w.writerow(header)
        for r in rows:
            w.writerow(r)

def config_from_args(args):
    return MazeConfig(
        rows=args.rows, columns=args.columns, seed=args.seed,
        cell_size=args.cell_size, wall_size=args.wall_size,
    )

def cmd_show(args):
    maze = generate_maze(config_from_args(args))
    print(maze.text, end='')
    print(f"seed {maze.seed}, {len(maze.blocks)} wall blocks")

def cmd_emit(args):
    maze = generate_maze(config_from_args(args))
    write_tsv(maze.blocks, args.out, header=['x', 'y', 'z'] if args.header else None)
    print(f"Wrote {len(maze.blocks)} blocks to {args.out}")

def cmd_distances(args):
    maze = generate_maze(config_from_args(args))
    rows = [(r, c, d) for (r, c), d in sorted(maze.distances.items())]
    write_tsv(rows, args.out, header=['row', 'column', 'distance'] if args.header else None)
    print(f"Wrote {len(rows)} distances to {args.out}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--rows', type=int, default=8)
    p.add_argument('--columns', type=int, default=8)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--cell-size', type=float, default=5)
    p.add_argument('--wall-size', type=float, default=1)
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('show')
    p1.set_defaults(func=cmd_show)
    p2 = sub.add_parser('emit')
    p2.add_argument('--out', type=str, required=True)
    p2.add_argument('--header', action='store_true')
    p2.set_defaults(func=cmd_emit)
    p3 = sub.add_parser('distances')
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--header', action='store_true')
    p3.set_defaults(func=cmd_distances)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        args.func(args)
    except MazeError as e:
        raise SystemExit(f"mazetool: {e}")

if __name__ == '__main__':
    main()
