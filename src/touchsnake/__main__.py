from __future__ import annotations

import argparse

from . import config


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="touchsnake", description="Snake with an on-screen touch pad.")
    parser.add_argument("--grid-size", type=int, default=config.GRID_SIZE, help="Cells per side of the square board.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds between simulation steps.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Render frame cap.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    args = parser.parse_args(argv)

    if args.grid_size < 3:
        parser.error("--grid-size must be at least 3")
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")

    config.GRID_SIZE = args.grid_size
    config.TICK_MS = args.tick_ms
    config.FPS = args.fps

    from .game import main as run

    run(seed=args.seed)


if __name__ == "__main__":
    main()
