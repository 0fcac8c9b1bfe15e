"""
--- Day 4: Scratchcards ---
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution

_CARD_RE = re.compile(r"Card\s+(\d+):\s+([\d\s]*?)\s+\|\s+([\d\s]*)")


@dataclass(frozen=True)
class Scratchcard:
    number: int
    winning_numbers: frozenset[int]
    card_numbers: frozenset[int]

    @classmethod
    def parse(cls, line: str) -> Scratchcard:
        """Parse a line such as `Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53`."""
        if not (match := _CARD_RE.fullmatch(line)):
            raise PuzzleInputError(f"Invalid card: {line!r}")
        return cls(
            number=int(match[1]),
            winning_numbers=frozenset(map(int, match[2].split())),
            card_numbers=frozenset(map(int, match[3].split())),
        )

    def matching_numbers_count(self) -> int:
        return len(self.winning_numbers & self.card_numbers)

    def points(self) -> int:
        matches = self.matching_numbers_count()
        return 2 ** (matches - 1) if matches else 0


def compute_nb_scratchcards(scratchcards: Sequence[Scratchcard]) -> int:
    """Count the cards held once every card has been scratched, copies included.

    A card with `n` matching numbers wins a copy of each of the `n` cards below it. Copies are
    never won past the end of the table.
    """
    copies = [1] * len(scratchcards)
    for index, card in enumerate(scratchcards):
        won = range(index + 1, min(index + 1 + card.matching_numbers_count(), len(scratchcards)))
        for won_index in won:
            copies[won_index] += copies[index]
    return sum(copies)


class Day4(Solution[list[Scratchcard]]):
    day = 4

    def parse(self, puzzle: PuzzleInput) -> list[Scratchcard]:
        return list(puzzle.lines() % bool / Scratchcard.parse)

    def part_one(self, model: list[Scratchcard]) -> Answer:
        return Answer("Sum of all scratchcards points", sum(card.points() for card in model))

    def part_two(self, model: list[Scratchcard]) -> Answer:
        return Answer("Total number of scratchcards", compute_nb_scratchcards(model))
