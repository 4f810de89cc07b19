#!/usr/bin/env python3
# Host CLI: run a preset (or ad-hoc generator list) and emit the grid as ASCII or TSV.
import argparse, csv, inspect, logging, sys

from dungen.mapgen.generator import GENERATORS, PRESETS, generate, run_pipeline
from dungen.grid import Grid
from dungen.printer import print_grid


def write_tsv(grid, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(grid.width)))
        for r in grid.as_matrix():
            w.writerow([int(k) for k in r])


def required_args(fn):
    # everything past the grid that has no default
    params = list(inspect.signature(fn).parameters.values())[1:]
    return [p.name for p in params if p.default is inspect.Parameter.empty]


def parse_steps(parser, text):
    steps = []
    for name in text.split(','):
        fn = GENERATORS.get(name)
        if fn is None:
            parser.error(f"unknown generator {name!r}")
        missing = required_args(fn)
        if missing:
            parser.error(f"{name} needs arguments ({', '.join(missing)}); use a preset instead")
        steps.append((name, {}))
    return steps


def build(args):
    if args.steps:
        grid = Grid(args.width, args.height, seed=args.seed)
        run_pipeline(grid, args.steps)
        return grid
    return generate(args.width, args.height, preset=args.preset, seed=args.seed)


def cmd_emit(args):
    grid = build(args)
    if args.out:
        write_tsv(grid, args.out, include_header=args.header)
        print(f"Wrote {args.out}")
    else:
        print_grid(grid, sys.stdout)


def cmd_presets(args):
    for name, steps in PRESETS.items():
        print(f"{name}: {', '.join(s for s, _ in steps)}")


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--width', type=int, default=80)
    p1.add_argument('--height', type=int, default=80)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--preset', choices=sorted(PRESETS), default='dungeon')
    p1.add_argument('--steps', type=str, default=None,
                    help='comma separated generators to run instead of a preset')
    p1.add_argument('--out', type=str, default=None, help='TSV path (ASCII to stdout if omitted)')
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('presets')
    p2.set_defaults(func=cmd_presets)
    args = p.parse_args(argv)
    if args.cmd == 'emit' and args.steps:
        args.steps = parse_steps(p1, args.steps)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    args.func(args)


if __name__ == '__main__':
    main()
