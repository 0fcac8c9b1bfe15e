"""
--- Day 8: Haunted Wasteland ---
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from itertools import cycle
from typing import Callable, Mapping, Sequence

from loguru import logger

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution
from ..stream import Stream

_NODE_RE = re.compile(r"([A-Z0-9]{3}) = \(([A-Z0-9]{3}), ([A-Z0-9]{3})\)")


class Instruction(Enum):
    LEFT = "L"
    RIGHT = "R"


def parse_instructions(text: str) -> list[Instruction]:
    try:
        return [Instruction(char) for char in text]
    except ValueError as e:
        raise PuzzleInputError(f"Invalid instructions {text!r}: {e}") from None


@dataclass(frozen=True)
class Node:
    id: str
    left: str
    right: str

    @classmethod
    def parse(cls, line: str) -> Node:
        """Parse a line such as `AAA = (BBB, CCC)`."""
        if not (match := _NODE_RE.fullmatch(line)):
            raise PuzzleInputError(f"Invalid node: {line!r}")
        return cls(*match.groups())

    def next_node(self, instruction: Instruction) -> str:
        return self.left if instruction is Instruction.LEFT else self.right


@dataclass(frozen=True)
class Network:
    instructions: tuple[Instruction, ...]
    nodes: Mapping[str, Node]

    @classmethod
    def parse(cls, sections: Sequence[Sequence[str]]) -> Network:
        if len(sections) != 2 or len(sections[0]) != 1:
            raise PuzzleInputError("Expected a line of instructions, a blank line, then the nodes")
        nodes = Stream(sections[1]) / Node.parse / (lambda node: (node.id, node))
        return cls(tuple(parse_instructions(sections[0][0])), dict(nodes))


def traverse_wasteland_from(
    instructions: Sequence[Instruction],
    nodes: Mapping[str, Node],
    start_node: str,
    is_end: Callable[[str], bool],
) -> int:
    if not instructions:
        raise PuzzleInputError("Cannot traverse the wasteland without instructions")
    steps = 0
    current_node = start_node
    visited: set[tuple[str, int]] = set()
    for position, instruction in cycle(enumerate(instructions)):
        if is_end(current_node):
            break
        # Standing on the same node at the same point of the instructions repeats a loop forever.
        if (current_node, position) in visited:
            raise PuzzleInputError(f"No end node can be reached from {start_node!r}")
        visited.add((current_node, position))
        try:
            current_node = nodes[current_node].next_node(instruction)
        except KeyError:
            raise PuzzleInputError(f"Unknown node {current_node!r}") from None
        steps += 1
    return steps


def traverse_wasteland(instructions: Sequence[Instruction], nodes: Mapping[str, Node]) -> int:
    return traverse_wasteland_from(instructions, nodes, "AAA", lambda node: node == "ZZZ")


def traverse_wasteland_as_ghost(
    instructions: Sequence[Instruction], nodes: Mapping[str, Node]
) -> int:
    """Steps until every ghost, one per `..A` node, stands on a `..Z` node at the same time."""
    cycle_lengths = [
        traverse_wasteland_from(instructions, nodes, node, lambda node: node.endswith("Z"))
        for node in nodes
        if node.endswith("A")
    ]
    logger.debug(f"Ghost cycle lengths: {cycle_lengths}")
    return math.lcm(*cycle_lengths)


class Day8(Solution[Network]):
    day = 8

    def parse(self, puzzle: PuzzleInput) -> Network:
        return Network.parse(puzzle.sections())

    def part_one(self, model: Network) -> Answer:
        return Answer(
            "Steps to traverse wasteland", traverse_wasteland(model.instructions, model.nodes)
        )

    def part_two(self, model: Network) -> Answer:
        return Answer(
            "Steps to traverse wasteland as ghost",
            traverse_wasteland_as_ghost(model.instructions, model.nodes),
        )
