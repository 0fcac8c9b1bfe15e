from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from loguru import logger
from rich.console import Console

from .config import RunnerConfig
from .errors import InvalidDayError
from .inputs import PuzzleInput, load_input
from .solution import Answer, Solution
from .utils import Stopwatch, format_duration

FIRST_DAY = 1
LAST_DAY = 25


@dataclass(frozen=True)
class DayResult:
    """Both answers of a day, with how long each part took (in seconds)."""

    day: int
    part_one: Answer
    part_two: Answer
    part_one_duration: float
    part_two_duration: float
    total_duration: float

    @property
    def answers(self) -> tuple[Answer, Answer]:
        return self.part_one, self.part_two


def default_console() -> Console:
    return Console(highlight=False, emoji=False, soft_wrap=True)


def execute(
    solution: Solution[Any],
    puzzle: PuzzleInput,
    console: Console | None = None,
) -> DayResult:
    """Solve both parts of a puzzle in order, printing each answer and its timing as it is found.

    Parsing the input is accounted to part 1.
    """
    console = console or default_console()
    day = solution.day
    watch = Stopwatch()

    model = solution.parse(puzzle)
    part_one = solution.part_one(model)
    console.print(f"{day}:1 — {part_one}", markup=False)
    part_one_duration = watch.lap()
    console.print(f"Part 1 in {format_duration(part_one_duration)}", markup=False)
    logger.debug(f"Day {day} part 1 took {part_one_duration:.6f}s")

    part_two = solution.part_two(model)
    console.print(f"{day}:2 — {part_two}", markup=False)
    part_two_duration = watch.lap()
    console.print(f"Part 2 in {format_duration(part_two_duration)}", markup=False)
    logger.debug(f"Day {day} part 2 took {part_two_duration:.6f}s")

    total_duration = watch.elapsed()
    console.print(f"Done in {format_duration(total_duration)}", markup=False)

    return DayResult(
        day=day,
        part_one=part_one,
        part_two=part_two,
        part_one_duration=part_one_duration,
        part_two_duration=part_two_duration,
        total_duration=total_duration,
    )


class Dispatcher:
    """Selects the solution registered for a day and runs it against that day's input."""

    def __init__(
        self,
        solutions: Mapping[int, Solution[Any]],
        config: RunnerConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self._solutions = dict(solutions)
        self._config = config or RunnerConfig()
        self._console = console or default_console()

    @property
    def days(self) -> tuple[int, ...]:
        return tuple(sorted(self._solutions))

    def select(self, day: int) -> Solution[Any]:
        """Return the solution for `day`.

        Raises:
            InvalidDayError: If `day` is not an Advent of Code day or has no solution.
        """
        if not FIRST_DAY <= day <= LAST_DAY or day not in self._solutions:
            raise InvalidDayError(day, self._solutions)
        solution = self._solutions[day]
        logger.debug(f"Selected {solution!r}")
        return solution

    def run(self, day: int) -> DayResult:
        solution = self.select(day)
        puzzle = load_input(day, self._config.input_path(day))
        return execute(solution, puzzle, self._console)


__all__ = (
    "FIRST_DAY",
    "LAST_DAY",
    "DayResult",
    "Dispatcher",
    "default_console",
    "execute",
)
