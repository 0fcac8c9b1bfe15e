from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

from .inputs import PuzzleInput

_ModelT = TypeVar("_ModelT")

AnswerValue = Union[int, str]


@dataclass(frozen=True)
class Answer:
    """The answer to one part of a puzzle, along with what it means."""

    description: str
    value: AnswerValue

    def __str__(self) -> str:
        return f"{self.description}: {self.value}"


class Solution(ABC, Generic[_ModelT]):
    """A day's puzzle solution.

    Subclasses set `day` and turn the raw input into a model with `parse`, which both parts then
    work from. `parse` runs once per invocation.
    """

    day: ClassVar[int]

    @abstractmethod
    def parse(self, puzzle: PuzzleInput) -> _ModelT:
        ...

    @abstractmethod
    def part_one(self, model: _ModelT) -> Answer:
        ...

    @abstractmethod
    def part_two(self, model: _ModelT) -> Answer:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} day={self.day}>"


__all__ = ("Answer", "AnswerValue", "Solution")
