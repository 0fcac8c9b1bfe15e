from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from loguru import logger

from .errors import MissingInputError
from .stream import Stream, stream
from .stream_utils import partition_by_element


@dataclass(frozen=True)
class PuzzleInput:
    """The raw text of a day's puzzle input."""

    day: int
    text: str

    def lines(self) -> Stream[str]:
        """The input's lines, with trailing whitespace stripped."""
        return from_text(self.text)

    def sections(self) -> list[list[str]]:
        """Groups of lines separated by blank lines."""
        return list(self.lines() / partition_by_element(""))


@stream
def from_text(text: str) -> Iterator[str]:
    for line in text.splitlines():
        yield line.rstrip()


def load_input(day: int, path: Path) -> PuzzleInput:
    """Read the puzzle input for `day` from `path`.

    Raises:
        MissingInputError: If `path` does not exist.
    """
    if not path.is_file():
        raise MissingInputError(day, path)
    text = path.read_text(encoding="utf-8")
    logger.debug(f"Loaded {len(text)} characters of input for day {day} from {path}")
    return PuzzleInput(day, text)


__all__ = ("PuzzleInput", "from_text", "load_input")
