"""Command line entry point that generates a maze and prints it."""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional, Sequence

from proclab.maze.generators import GENERATORS, RecursiveBacktracker
from proclab.maze.world import MazeWorld

log = logging.getLogger(__name__)

DEFAULT_SIZE = 21


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze",
        description="Generate a maze step by step and print it as ASCII art.",
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_SIZE,
        help="cells along one side (default: %(default)s)",
    )
    parser.add_argument(
        "--generator", choices=sorted(GENERATORS), default=RecursiveBacktracker.name,
        help="generation algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="seed for the random number generator",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the chosen generator to completion and print the maze."""
    parser = _parser()
    args = parser.parse_args(None if argv is None else list(argv))

    try:
        world = MazeWorld(args.size)
    except ValueError as error:
        parser.error(str(error))

    generator = GENERATORS[args.generator](random.Random(args.seed))
    log.info("running %s on a maze of size %d", args.generator, args.size)
    steps = generator.run(world)
    log.info("finished after %d steps", steps)

    lines: List[str] = world.render().splitlines()
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())