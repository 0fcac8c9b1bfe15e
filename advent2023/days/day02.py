"""
--- Day 2: Cube Conundrum ---
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution

_GAME_RE = re.compile(r"Game (\d+): (.*)")
_CUBES_RE = re.compile(r"(\d+) (red|green|blue)")


@dataclass(frozen=True)
class Draw:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, text: str) -> Draw:
        counts = {"red": 0, "green": 0, "blue": 0}
        for cubes in text.split(", "):
            if not (match := _CUBES_RE.fullmatch(cubes)):
                raise PuzzleInputError(f"Invalid cube draw: {cubes!r}")
            counts[match[2]] += int(match[1])
        return cls(**counts)


@dataclass(frozen=True)
class Game:
    number: int
    draws: tuple[Draw, ...]

    @classmethod
    def parse(cls, line: str) -> Game:
        """Parse a line such as `Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green`."""
        if not (match := _GAME_RE.fullmatch(line)):
            raise PuzzleInputError(f"Invalid game: {line!r}")
        draws = tuple(Draw.parse(draw) for draw in match[2].split("; ")) if match[2] else ()
        return cls(int(match[1]), draws)

    def _max(self, color: str) -> int:
        return max((getattr(draw, color) for draw in self.draws), default=0)

    def is_possible(self, red: int, green: int, blue: int) -> bool:
        return red >= self._max("red") and green >= self._max("green") and blue >= self._max("blue")

    def minimum_power(self) -> int:
        return self._max("red") * self._max("green") * self._max("blue")


def sum_of_possible_game_ids(games: Iterable[Game], red: int, green: int, blue: int) -> int:
    return sum(game.number for game in games if game.is_possible(red, green, blue))


def sum_of_minimum_powers(games: Iterable[Game]) -> int:
    return sum(game.minimum_power() for game in games)


class Day2(Solution[list[Game]]):
    day = 2

    def parse(self, puzzle: PuzzleInput) -> list[Game]:
        return list(puzzle.lines() % bool / Game.parse)

    def part_one(self, model: list[Game]) -> Answer:
        return Answer(
            "Sum of IDs of possible games for 12 reds, 13 greens, and 14 blues",
            sum_of_possible_game_ids(model, 12, 13, 14),
        )

    def part_two(self, model: list[Game]) -> Answer:
        return Answer("Sum of minimum powers of all games", sum_of_minimum_powers(model))
