import argparse
import logging
import os
import sys
import time

import numpy as np

import collinear_brute
import collinear_fast
from geometry import Point
from settings import (
    DEFAULT_DETECTION_METHOD,
    DEFAULT_GRID_SIZE,
    DEFAULT_SEED,
    DETECTION_METHODS,
    configure_logging,
)
from validation import InvalidInputError

logger = logging.getLogger(__name__)

DETECTORS = {
    "fast": collinear_fast.detect,
    "brute": collinear_brute.detect,
}


def read_points(filename: str) -> list[Point]:
    """
    Read points in the classic format: the number of points on the first
    line, then one `x y` pair of integers per line.
    """
    points = []
    with open(filename, 'r', encoding='utf-8') as f:
        n = int(f.readline().strip())
        for line in f:
            line = line.strip()
            if not line:
                continue
            x, y = map(int, line.split())
            points.append(Point(x, y))

    if len(points) != n:
        logger.warning(f"{os.path.basename(filename)}: header says {n} points, read {len(points)}")
    return points


def generate_points(n: int, grid: int = DEFAULT_GRID_SIZE, seed: int = DEFAULT_SEED) -> list[Point]:
    """
    Draw `n` distinct integer points from the grid [0, grid) x [0, grid).
    """
    if n > grid * grid:
        raise ValueError(f"cannot place {n} distinct points on a {grid}x{grid} grid")

    np.random.seed(seed)
    cells = np.random.choice(grid * grid, size=n, replace=False)
    return [Point(int(c % grid), int(c // grid)) for c in cells]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Find segments of 4 or more collinear points")
    parser.add_argument("file", nargs="?", help="input file: point count, then one 'x y' per line")
    parser.add_argument("--random", type=int, metavar="N", help="generate N random points instead")
    parser.add_argument("--grid", type=int, default=DEFAULT_GRID_SIZE,
                        help=f"grid size for random points (default: {DEFAULT_GRID_SIZE})")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help=f"random seed (default: {DEFAULT_SEED})")
    parser.add_argument("--method", choices=DETECTION_METHODS, default=DEFAULT_DETECTION_METHOD,
                        help=f"detection algorithm (default: {DEFAULT_DETECTION_METHOD})")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    if (args.file is None) == (args.random is None):
        parser.error("give either an input file or --random N")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.random is not None:
            points = generate_points(args.random, args.grid, args.seed)
        else:
            points = read_points(args.file)
    except (OSError, ValueError) as e:
        print(f"Cannot load points: {e}", file=sys.stderr)
        return 1

    start = time.time()
    try:
        count, segments = DETECTORS[args.method](points)
    except InvalidInputError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    logger.info(f"{args.method}: {len(points)} points processed in {time.time() - start:.3f}s")

    for segment in segments:
        print(segment)
    print(count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
