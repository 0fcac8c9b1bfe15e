"""
--- Day 1: Trebuchet?! ---

Each line of the calibration document hides a calibration value: the first digit and the last
digit of the line, combined into a two-digit number. In the second part, digits may also be
spelled out with letters (`one`, `two`, ... `nine`), and spelled digits may overlap (`eightwo`).
"""
from __future__ import annotations

import operator
from functools import partial
from typing import Iterable

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution
from ..stream import Stream

DIGIT_NAMES = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _digit_at(line: str, index: int, spelled: bool) -> int | None:
    char = line[index]
    if "1" <= char <= "9":
        return int(char)
    if spelled:
        for value, name in enumerate(DIGIT_NAMES, 1):
            if line.startswith(name, index):
                return value
    return None


def _first_digit(line: str, indices: range, spelled: bool) -> int:
    for index in indices:
        if (digit := _digit_at(line, index, spelled)) is not None:
            return digit
    raise PuzzleInputError(f"No digit in calibration line {line!r}")


def calibration_value(line: str, spelled: bool = False) -> int:
    """Combine the first and last digit of a line into a two-digit number.

    Examples:
        >>> calibration_value("pqr3stu8vwx")
        38
        >>> calibration_value("xtwone3four", spelled=True)
        24
    """
    indices = range(len(line))
    return 10 * _first_digit(line, indices, spelled) + _first_digit(line, indices[::-1], spelled)


def sum_of_calibration_values(lines: Iterable[str]) -> int:
    return (Stream(lines) / calibration_value).reduce(operator.add, 0)


def sum_of_fixed_calibration_values(lines: Iterable[str]) -> int:
    return (Stream(lines) / partial(calibration_value, spelled=True)).reduce(operator.add, 0)


class Day1(Solution[list[str]]):
    day = 1

    def parse(self, puzzle: PuzzleInput) -> list[str]:
        return list(puzzle.lines() % bool)

    def part_one(self, model: list[str]) -> Answer:
        return Answer("Sum of all of the calibration values", sum_of_calibration_values(model))

    def part_two(self, model: list[str]) -> Answer:
        return Answer(
            "Sum of all of the fixed calibration values", sum_of_fixed_calibration_values(model)
        )
