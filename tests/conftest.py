from __future__ import annotations

import io
import textwrap
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from advent2023.inputs import PuzzleInput

EXAMPLES: dict[int, str] = {
    1: """
        two1nine
        abcone2threexyz
        xtwone3four
        4nineeightseven2
        zoneight234
        7pqrstsixteen
    """,
    2: """
        Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
        Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
        Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
        Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
        Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
    """,
    3: """
        467..114..
        ...*......
        ..35..633.
        ......#...
        617*......
        .....+.58.
        ..592.....
        ......755.
        ...$.*....
        .664.598..
    """,
    4: """
        Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
        Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
        Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
        Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
        Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
        Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
    """,
    5: """
        seeds: 79 14 55 13

        seed-to-soil map:
        50 98 2
        52 50 48

        soil-to-fertilizer map:
        0 15 37
        37 52 2
        39 0 15

        fertilizer-to-water map:
        49 53 8
        0 11 42
        42 0 7
        57 7 4

        water-to-light map:
        88 18 7
        18 25 70

        light-to-temperature map:
        45 77 23
        81 45 19
        68 64 13

        temperature-to-humidity map:
        0 69 1
        1 0 69

        humidity-to-location map:
        60 56 37
        56 93 4
    """,
    6: """
        Time:      7  15   30
        Distance:  9  40  200
    """,
    7: """
        32T3K 765
        T55J5 684
        KK677 28
        KTJJT 220
        QQQJA 483
    """,
    8: """
        LR

        11A = (11B, XXX)
        11B = (XXX, 11Z)
        11Z = (11B, XXX)
        22A = (22B, XXX)
        22B = (22C, 22C)
        22C = (22Z, 22Z)
        22Z = (22B, 22B)
        XXX = (XXX, XXX)
        AAA = (ZZZ, ZZZ)
        ZZZ = (ZZZ, ZZZ)
    """,
}


def example_text(day: int) -> str:
    return textwrap.dedent(EXAMPLES[day]).lstrip("\n")


@pytest.fixture
def make_puzzle() -> Callable[[int, str], PuzzleInput]:
    """Build a `PuzzleInput` from an indented multi-line string."""

    def _make(day: int, text: str) -> PuzzleInput:
        return PuzzleInput(day, textwrap.dedent(text).lstrip("\n"))

    return _make


@pytest.fixture
def inputs_dir(tmp_path: Path) -> Path:
    """A directory holding the example input of every implemented day."""
    directory = tmp_path / "inputs"
    directory.mkdir()
    for day in EXAMPLES:
        (directory / f"day{day:02d}.txt").write_text(example_text(day), encoding="utf-8")
    return directory


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), highlight=False, emoji=False, soft_wrap=True, width=200)


def console_output(console: Console) -> str:
    file = console.file
    assert isinstance(file, io.StringIO)
    return file.getvalue()
