from __future__ import annotations

from typing import Any

from ..solution import Solution
from . import day01, day02, day03, day04, day05, day06, day07, day08

_SOLUTIONS: tuple[Solution[Any], ...] = (
    day01.Day1(),
    day02.Day2(),
    day03.Day3(),
    day04.Day4(),
    day05.Day5(),
    day06.Day6(),
    day07.Day7(),
    day08.Day8(),
)


def solutions() -> dict[int, Solution[Any]]:
    """All implemented solutions, keyed by day."""
    return {solution.day: solution for solution in _SOLUTIONS}


__all__ = ("solutions",)
