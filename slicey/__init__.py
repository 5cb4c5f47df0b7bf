"""
Slicey - Overlapping rectangular claims on a shared grid.

This package parses claim listings, finds the regions where claims overlap and
the claim that overlaps nothing, and exposes both through named runners.
"""

# Core types
from slicey.claim import Claim
from slicey.rectangle import Rectangle
from slicey.run_result import RunResult

# Solutions
from slicey.parser import parse, parse_line
from slicey.coverage import contested_cells, part1
from slicey.survivor import part2, survivors

# Runners
from slicey.runner import Runner, RUNNERS, create_runners, get_runner

# Errors
from slicey.slicey_error import (
    SliceyError,
    ParseError,
    NoResultError,
    AmbiguousResultError,
    UnknownPuzzleError,
    RunnerError,
)

__all__ = [
    # Core types
    'Claim',
    'Rectangle',
    'RunResult',

    # Solutions
    'parse',
    'parse_line',
    'contested_cells',
    'part1',
    'part2',
    'survivors',

    # Runners
    'Runner',
    'RUNNERS',
    'create_runners',
    'get_runner',

    # Errors
    'SliceyError',
    'ParseError',
    'NoResultError',
    'AmbiguousResultError',
    'UnknownPuzzleError',
    'RunnerError',
]
