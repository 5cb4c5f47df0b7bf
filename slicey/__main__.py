#!/usr/bin/env python3
"""
Entry point for solving a puzzle from the command line.

Usage:
    python -m slicey PUZZLE [--input PATH] [--bench N] [--json] [--log-level LEVEL]
"""

import argparse
import logging
import os
import sys

from slicey.config import get_config
from slicey.constants import SLICEY_LOG_LEVEL
from slicey.run_result import RunResult
from slicey.runner import get_runner
from slicey.serializers import get_default_serializer
from slicey.slicey_error import SliceyError

_LOGGER = logging.getLogger(__name__)
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def main(argv: list[str] | None = None) -> int:
    config = get_config()
    runners = config.get_runners()

    parser = argparse.ArgumentParser(description="Solve an overlapping claims puzzle")
    parser.add_argument("puzzle", choices=sorted(runners), help="Puzzle to run")
    parser.add_argument("--input", help="Path to the claims file (default: stdin)")
    parser.add_argument("--bench", type=int, metavar="N", help="Also benchmark over N iterations")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv(SLICEY_LOG_LEVEL, "WARNING"),
        help="Log level (default: $SLICEY_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid ${SLICEY_LOG_LEVEL}: {args.log_level}")

    logging.basicConfig(level=args.log_level)
    _LOGGER.debug(f"Strict mode: {config.is_strict()}")

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as f:
                text = f.read()
        else:
            text = sys.stdin.read()

        runner = get_runner(args.puzzle, runners)
        result = runner.run(text)

        if args.json:
            serializer = get_default_serializer(RunResult)
            print(serializer.serialize(result).decode("utf-8"))
        else:
            print(result.value)

        if args.bench is not None:
            mean = runner.bench(runner.gen(text), args.bench)
            print(f"{args.bench} iterations, {mean * 1000:.3f} ms mean")
    except (SliceyError, OSError, ValueError) as e:
        _LOGGER.debug("Run failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
