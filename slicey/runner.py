"""Runners connecting puzzle solutions to the command line and benchmarks.

A runner pairs a puzzle identifier with the function that solves it. Runners are
looked up by name in a plain dispatch table rather than through a class hierarchy.
"""

import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Callable

from slicey.claim import Claim
from slicey.coverage import part1
from slicey.parser import parse
from slicey.run_result import RunResult
from slicey.slicey_error import (
    NoResultError,
    RunnerError,
    SliceyError,
    UnknownPuzzleError,
)
from slicey.survivor import part2

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Runner:
    """Build input once, run, and optionally benchmark a single puzzle"""

    name: str
    solve: Callable[[list[Claim]], int | None]

    def try_gen(self, text: str) -> list[Claim]:
        """Parse the input, propagating any ParseError"""
        return parse(text)

    def gen(self, text: str) -> list[Claim]:
        """Parse the input, raising a RunnerError if it cannot be parsed"""
        try:
            return self.try_gen(text)
        except SliceyError as e:
            raise RunnerError(f"{self.name}: failed to generate input: {e}") from e

    def try_run(self, claims: list[Claim]) -> int:
        """Solve the puzzle for parsed claims

        Raises:
            NoResultError: If the solution produced no value
        """
        value = self.solve(claims)
        if value is None:
            raise NoResultError(f"{self.name}: runner produced no value")
        return value

    def run(self, text: str) -> RunResult:
        """Parse the input and solve the puzzle, timing the solve"""
        claims = self.gen(text)
        start = time.perf_counter()
        value = self.try_run(claims)
        elapsed = time.perf_counter() - start
        _LOGGER.info(f"Ran {self.name} in {elapsed:.6f}s")
        return RunResult(puzzle=self.name, value=value, elapsed=elapsed)

    def bench(self, claims: list[Claim], iterations: int) -> float:
        """Solve the puzzle repeatedly and return the mean seconds per iteration"""
        if iterations < 1:
            raise ValueError(f"iterations must be positive: {iterations}")
        start = time.perf_counter()
        for _ in range(iterations):
            self.solve(claims)
        mean = (time.perf_counter() - start) / iterations
        _LOGGER.info(f"Benchmarked {self.name}: {iterations} iterations, {mean:.6f}s mean")
        return mean


def create_runners(strict: bool = False) -> dict[str, Runner]:
    return {
        "day3_part1": Runner("day3_part1", part1),
        "day3_part2": Runner("day3_part2", partial(part2, strict=strict)),
    }


RUNNERS = create_runners()


def get_runner(name: str, runners: dict[str, Runner] | None = None) -> Runner:
    if runners is None:
        runners = RUNNERS
    try:
        return runners[name]
    except KeyError:
        raise UnknownPuzzleError(
            f"unknown puzzle {name!r}, expected one of {sorted(runners)}"
        ) from None
