from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .game import main as run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pixsnake", description="Snake on a wrapping grid.")
    parser.add_argument("--cell-count", type=int, default=config.CELL_COUNT, help="Cells per side of the grid.")
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Pixels per cell.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds between moves.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for fruit placement.")
    parser.add_argument(
        "--full-repaint",
        action="store_true",
        help="Repaint the whole grid every tick instead of only the changed cells.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> config.Settings:
    return config.Settings(
        cell_count=args.cell_count,
        cell_size=args.cell_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
        full_repaint=args.full_repaint,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        settings = build_settings(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2)
    run(settings)


if __name__ == "__main__":
    main()
