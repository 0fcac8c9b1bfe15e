"""
--- Day 5: If You Give A Seed A Fertilizer ---

The almanac lists the seeds to plant, then seven maps (seed-to-soil, soil-to-fertilizer, ...,
humidity-to-location). Each map line `target source length` maps the `length` numbers starting at
`source` onto those starting at `target`; unmapped numbers map to themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Sequence

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution
from ..stream import Stream
from ..stream_utils import batched


@dataclass(frozen=True, order=True)
class MapEntry:
    source_start: int
    target_start: int
    range_length: int

    @classmethod
    def parse(cls, line: str) -> MapEntry:
        try:
            target_start, source_start, range_length = map(int, line.split())
        except ValueError:
            raise PuzzleInputError(f"Invalid map entry: {line!r}") from None
        return cls(source_start, target_start, range_length)

    @property
    def source_end(self) -> int:
        return self.source_start + self.range_length

    def matches(self, source: int) -> bool:
        return self.source_start <= source < self.source_end

    def map(self, source: int) -> int:
        return source - self.source_start + self.target_start


@dataclass(frozen=True)
class Map:
    entries: tuple[MapEntry, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Map:
        return cls(tuple(sorted(MapEntry.parse(line) for line in lines)))

    def map(self, source: int) -> int:
        for entry in self.entries:
            if entry.matches(source):
                return entry.map(source)
        return source

    def map_range(self, source: range) -> list[range]:
        """Map a whole range of numbers, splitting it wherever it crosses an entry boundary."""
        result = []
        current = source.start
        entries = iter(self.entries)
        entry = next(entries, None)
        while current < source.stop:
            if entry is not None and entry.source_end <= current:
                entry = next(entries, None)
            elif entry is not None and entry.source_start < source.stop:
                if current < entry.source_start:
                    result.append(range(current, entry.source_start))
                    current = entry.source_start
                start = entry.map(current)
                offset = current - entry.source_start
                length = min(entry.range_length - offset, source.stop - current)
                result.append(range(start, start + length))
                current += length
            else:
                result.append(range(current, source.stop))
                break
        return result


@dataclass(frozen=True)
class Almanac:
    seeds: tuple[int, ...]
    maps: tuple[Map, ...]

    @classmethod
    def parse(cls, sections: Sequence[Sequence[str]]) -> Almanac:
        if not sections or len(sections[0]) != 1 or not sections[0][0].startswith("seeds:"):
            raise PuzzleInputError("The almanac must start with a `seeds:` line")
        try:
            seeds = tuple(map(int, sections[0][0].removeprefix("seeds:").split()))
        except ValueError:
            raise PuzzleInputError(f"Invalid seeds: {sections[0][0]!r}") from None
        if not seeds:
            raise PuzzleInputError("The almanac lists no seeds")
        maps = []
        for header, *lines in sections[1:]:
            if not header.endswith("map:"):
                raise PuzzleInputError(f"Invalid map header: {header!r}")
            maps.append(Map.from_lines(lines))
        return cls(seeds, tuple(maps))

    def seed_ranges(self) -> list[range]:
        """Seeds read as `start length` pairs."""
        if len(self.seeds) % 2:
            raise PuzzleInputError("Seed ranges need a length for every start")
        return list(Stream(self.seeds) / batched(2) / (lambda pair: range(pair[0], sum(pair))))


def map_all(maps: Iterable[Map], source: int) -> int:
    return reduce(lambda value, map_: map_.map(value), maps, source)


def map_range_all(maps: Iterable[Map], ranges: list[range]) -> list[range]:
    return reduce(
        lambda current, map_: list(Stream(current) // map_.map_range),
        maps,
        ranges,
    )


class Day5(Solution[Almanac]):
    day = 5

    def parse(self, puzzle: PuzzleInput) -> Almanac:
        return Almanac.parse(puzzle.sections())

    def part_one(self, model: Almanac) -> Answer:
        min_location = min(map_all(model.maps, seed) for seed in model.seeds)
        return Answer("Minimal location", min_location)

    def part_two(self, model: Almanac) -> Answer:
        locations = map_range_all(model.maps, model.seed_ranges())
        if not locations:
            raise PuzzleInputError("Every seed range is empty")
        min_location = min(r.start for r in locations)
        return Answer("Minimal location with ranges", min_location)
