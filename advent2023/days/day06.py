"""
--- Day 6: Wait For It ---

Holding a boat's button for `h` milliseconds of a `time` millisecond race moves it `h * (time - h)`
millimeters. The number of ways to win a race is the number of hold times that beat its record.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution


@dataclass(frozen=True)
class Race:
    time: int
    record: int

    def hold(self, hold_time: int) -> int:
        return hold_time * (self.time - hold_time)

    def min_hold_time(self) -> int | None:
        discriminant = self.time**2 - 4 * self.record
        if discriminant < 0:
            return None
        # Start from the smaller root of h * (time - h) = record and settle on the exact integer.
        hold_time = max(1, (self.time - math.isqrt(discriminant)) // 2)
        while hold_time > 1 and self.hold(hold_time - 1) > self.record:
            hold_time -= 1
        # The distance peaks at time // 2, past which holding longer cannot help.
        peak = self.time // 2
        while hold_time <= peak and self.hold(hold_time) <= self.record:
            hold_time += 1
        return hold_time if hold_time <= peak else None

    def max_hold_time(self) -> int | None:
        min_hold_time = self.min_hold_time()
        return None if min_hold_time is None else self.time - min_hold_time

    def ways_to_win_count(self) -> int:
        min_hold_time = self.min_hold_time()
        if min_hold_time is None:
            return 0
        return self.time - 2 * min_hold_time + 1


def ways_to_win_product(races: Iterable[Race]) -> int:
    return math.prod(race.ways_to_win_count() for race in races)


def _parse_line(line: str, label: str) -> list[str]:
    name, _, values = line.partition(":")
    if name != label:
        raise PuzzleInputError(f"Expected a {label!r} line, got {line!r}")
    return values.split()


@dataclass(frozen=True)
class RaceSheet:
    times: tuple[str, ...]
    distances: tuple[str, ...]

    @classmethod
    def parse(cls, lines: list[str]) -> RaceSheet:
        if len(lines) != 2:
            raise PuzzleInputError("The race sheet must have a `Time:` and a `Distance:` line")
        times = _parse_line(lines[0], "Time")
        distances = _parse_line(lines[1], "Distance")
        if not times or len(times) != len(distances):
            raise PuzzleInputError("Every race needs a time and a distance")
        if not all(value.isdecimal() for value in times + distances):
            raise PuzzleInputError("Race times and distances must be numbers")
        return cls(tuple(times), tuple(distances))

    def races(self) -> list[Race]:
        return [Race(int(time), int(record)) for time, record in zip(self.times, self.distances)]

    def single_race(self) -> Race:
        """The race obtained once the spaces between numbers are ignored."""
        return Race(int("".join(self.times)), int("".join(self.distances)))


class Day6(Solution[RaceSheet]):
    day = 6

    def parse(self, puzzle: PuzzleInput) -> RaceSheet:
        return RaceSheet.parse(list(puzzle.lines() % bool))

    def part_one(self, model: RaceSheet) -> Answer:
        return Answer("Product of all ways to win races", ways_to_win_product(model.races()))

    def part_two(self, model: RaceSheet) -> Answer:
        return Answer("Ways to win the race", model.single_race().ways_to_win_count())
