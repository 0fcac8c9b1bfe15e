"""
--- Day 3: Gear Ratios ---

Any number adjacent to a symbol (diagonally included) is a part number. A `*` adjacent to exactly
two part numbers is a gear, and its gear ratio is the product of those two numbers.
"""
from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple

from ..inputs import PuzzleInput
from ..solution import Answer, Solution
from ..stream import Stream
from ..stream_utils import unique

_NUMBER_RE = re.compile(r"\d+")


class Position(NamedTuple):
    column: int
    line: int


@dataclass(frozen=True)
class SchematicNumber:
    value: int
    line: int
    start: int
    end: int

    def is_adjacent(self, position: Position) -> bool:
        return (
            self.start - 1 <= position.column <= self.end + 1
            and abs(position.line - self.line) <= 1
        )


@dataclass
class EngineSchematic:
    symbols: dict[Position, str] = field(default_factory=dict)
    numbers: dict[int, list[SchematicNumber]] = field(default_factory=lambda: defaultdict(list))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> EngineSchematic:
        schematic = cls()
        for line, content in enumerate(lines):
            for match in _NUMBER_RE.finditer(content):
                schematic.numbers[line].append(
                    SchematicNumber(int(match[0]), line, match.start(), match.end() - 1)
                )
            for column, char in enumerate(content):
                if char != "." and not char.isdigit():
                    schematic.symbols[Position(column, line)] = char
        return schematic

    def adjacent_numbers(self, position: Position) -> list[SchematicNumber]:
        return [
            number
            for line in range(position.line - 1, position.line + 2)
            for number in self.numbers.get(line, ())
            if number.is_adjacent(position)
        ]

    def part_numbers(self) -> list[int]:
        return list(
            Stream(self.symbols) // self.adjacent_numbers / unique() / (lambda number: number.value)
        )

    def gears(self) -> list[tuple[int, int]]:
        gears = []
        for position, symbol in self.symbols.items():
            if symbol != "*":
                continue
            numbers = self.adjacent_numbers(position)
            if len(numbers) == 2:
                gears.append((numbers[0].value, numbers[1].value))
        return gears


class Day3(Solution[EngineSchematic]):
    day = 3

    def parse(self, puzzle: PuzzleInput) -> EngineSchematic:
        return EngineSchematic.from_lines(puzzle.lines() % bool)

    def part_one(self, model: EngineSchematic) -> Answer:
        return Answer("Sum of all part numbers", sum(model.part_numbers()))

    def part_two(self, model: EngineSchematic) -> Answer:
        return Answer("Sum of all gear ratios", sum(n1 * n2 for n1, n2 in model.gears()))
