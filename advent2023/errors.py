from __future__ import annotations

from pathlib import Path
from typing import Iterable


class AdventError(Exception):
    """Base class for errors reported by the runner."""


class InvalidDayError(AdventError):
    """No solution is registered for the requested day."""

    def __init__(self, day: int, registered: Iterable[int] = ()) -> None:
        self.day = day
        self.registered = tuple(sorted(registered))
        if not 1 <= day <= 25:
            message = f"Day {day} is out of range, Advent of Code days go from 1 to 25"
        else:
            message = f"No solution registered for day {day}"
        if self.registered:
            message += f" (available: {', '.join(map(str, self.registered))})"
        super().__init__(message)


class MissingInputError(AdventError):
    """The puzzle input file for a day does not exist."""

    def __init__(self, day: int, path: Path) -> None:
        self.day = day
        self.path = path
        super().__init__(f"Puzzle input for day {day} not found at {path}")


class PuzzleInputError(AdventError, ValueError):
    """The puzzle input does not have the shape a solution expects."""


__all__ = (
    "AdventError",
    "InvalidDayError",
    "MissingInputError",
    "PuzzleInputError",
)
