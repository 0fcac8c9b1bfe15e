from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INPUT_DIR = Path("inputs")


@dataclass(frozen=True)
class RunnerConfig:
    """Settings for a single runner invocation.

    Attributes:
        input_dir: Directory holding one `dayNN.txt` puzzle input per day.
        log_level: Minimum level of the log records written to stderr.
    """

    input_dir: Path = field(default=DEFAULT_INPUT_DIR)
    log_level: str = "WARNING"

    def input_path(self, day: int) -> Path:
        return self.input_dir / f"day{day:02d}.txt"


__all__ = ("DEFAULT_INPUT_DIR", "RunnerConfig")
