"""Command-line entry point: `advent2023 DAY`."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_INPUT_DIR, RunnerConfig
from .days import solutions
from .errors import AdventError
from .runner import Dispatcher

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="advent2023",
        description="Run an Advent of Code 2023 solution and print both answers with timings.",
    )
    parser.add_argument("day", type=int, help="Day of the puzzle to solve (1-25)")
    parser.add_argument(
        "--inputs",
        type=Path,
        default=DEFAULT_INPUT_DIR,
        metavar="DIR",
        help=f"Directory holding the dayNN.txt puzzle inputs (default: {DEFAULT_INPUT_DIR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = RunnerConfig(input_dir=args.inputs, log_level="DEBUG" if args.verbose else "WARNING")
    configure_logging(config.log_level)

    dispatcher = Dispatcher(solutions(), config)
    try:
        dispatcher.run(args.day)
    except AdventError as e:
        logger.debug(f"Day {args.day} failed with {type(e).__name__}")
        error_console = Console(stderr=True, highlight=False, soft_wrap=True)
        error_console.print(f"[bold red]error:[/] {escape(str(e))}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
