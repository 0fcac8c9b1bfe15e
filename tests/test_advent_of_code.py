from __future__ import annotations

from typing import Any

import pytest
from conftest import example_text
from hypothesis import given, settings, strategies as st

from advent2023 import solutions
from advent2023.inputs import PuzzleInput
from advent2023.solution import Answer, Solution


@pytest.mark.parametrize(
    ("day", "part_one", "part_two"),
    (
        (1, 209, 198),
        (2, 8, 2286),
        (3, 4361, 467835),
        (4, 13, 30),
        (5, 35, 46),
        (6, 288, 71503),
        (7, 6440, 5905),
        (8, 1, 6),
    ),
)
def test_day(day: int, part_one: int, part_two: int) -> None:
    solution = solutions()[day]
    model = solution.parse(PuzzleInput(day, example_text(day)))

    assert solution.part_one(model).value == part_one
    assert solution.part_two(model).value == part_two


def test_registered_days() -> None:
    registry = solutions()
    assert sorted(registry) == list(range(1, 9))
    for day, solution in registry.items():
        assert isinstance(solution, Solution)
        assert solution.day == day


@pytest.mark.parametrize(
    ("day", "descriptions"),
    (
        (
            1,
            (
                "Sum of all of the calibration values",
                "Sum of all of the fixed calibration values",
            ),
        ),
        (
            2,
            (
                "Sum of IDs of possible games for 12 reds, 13 greens, and 14 blues",
                "Sum of minimum powers of all games",
            ),
        ),
        (3, ("Sum of all part numbers", "Sum of all gear ratios")),
        (4, ("Sum of all scratchcards points", "Total number of scratchcards")),
        (5, ("Minimal location", "Minimal location with ranges")),
        (6, ("Product of all ways to win races", "Ways to win the race")),
        (7, ("Total winnings", "Total winnings with jokers")),
        (8, ("Steps to traverse wasteland", "Steps to traverse wasteland as ghost")),
    ),
)
def test_answer_descriptions(day: int, descriptions: tuple[str, str]) -> None:
    solution = solutions()[day]
    model = solution.parse(PuzzleInput(day, example_text(day)))
    answers: tuple[Answer, Answer] = (solution.part_one(model), solution.part_two(model))

    assert tuple(answer.description for answer in answers) == descriptions


@settings(max_examples=16, deadline=None)
@given(day=st.integers(min_value=1, max_value=8))
def test_solutions_are_deterministic(day: int) -> None:
    solution: Solution[Any] = solutions()[day]
    puzzle = PuzzleInput(day, example_text(day))

    first = solution.parse(puzzle)
    second = solution.parse(puzzle)

    assert solution.part_one(first) == solution.part_one(second)
    assert solution.part_two(first) == solution.part_two(second)
