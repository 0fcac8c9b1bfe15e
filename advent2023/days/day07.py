"""
--- Day 7: Camel Cards ---
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from ..errors import PuzzleInputError
from ..inputs import PuzzleInput
from ..solution import Answer, Solution


class Card(IntEnum):
    JOKER = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_label(cls, label: str) -> Card:
        try:
            return _CARDS_BY_LABEL[label]
        except KeyError:
            raise PuzzleInputError(f"Invalid card: {label!r}") from None


_CARDS_BY_LABEL = {
    **{str(value): Card(value) for value in range(2, 10)},
    "T": Card.TEN,
    "J": Card.JACK,
    "Q": Card.QUEEN,
    "K": Card.KING,
    "A": Card.ACE,
}


class HandType(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7

    @classmethod
    def of(cls, cards: Iterable[Card]) -> HandType:
        """Classify a hand. Jokers join whichever group of cards is largest."""
        counts = Counter(cards)
        jokers = counts.pop(Card.JOKER, 0)
        groups = sorted(counts.values(), reverse=True) or [0]
        groups[0] += jokers

        largest, distinct = groups[0], len(groups)
        if largest == 5:
            return cls.FIVE_OF_A_KIND
        if largest == 4:
            return cls.FOUR_OF_A_KIND
        if largest == 3:
            return cls.FULL_HOUSE if distinct == 2 else cls.THREE_OF_A_KIND
        if largest == 2:
            return cls.TWO_PAIRS if distinct == 3 else cls.ONE_PAIR
        return cls.HIGH_CARD


@dataclass(frozen=True)
class Hand:
    cards: tuple[Card, ...]
    bid: int
    hand_type: HandType

    @classmethod
    def new(cls, cards: Iterable[Card], bid: int) -> Hand:
        cards = tuple(cards)
        return cls(cards, bid, HandType.of(cards))

    @classmethod
    def parse(cls, line: str) -> Hand:
        """Parse a line such as `32T3K 765`."""
        labels, _, bid = line.partition(" ")
        if len(labels) != 5 or not bid.strip().isdecimal():
            raise PuzzleInputError(f"Invalid hand: {line!r}")
        return cls.new(map(Card.from_label, labels), int(bid))

    @property
    def strength(self) -> tuple[HandType, tuple[Card, ...]]:
        return self.hand_type, self.cards

    def to_jokers(self) -> Hand:
        cards = (Card.JOKER if card is Card.JACK else card for card in self.cards)
        return Hand.new(cards, self.bid)


def total_winnings(hands: Iterable[Hand]) -> int:
    ranked = sorted(hands, key=lambda hand: hand.strength)
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, 1))


class Day7(Solution[list[Hand]]):
    day = 7

    def parse(self, puzzle: PuzzleInput) -> list[Hand]:
        return list(puzzle.lines() % bool / Hand.parse)

    def part_one(self, model: list[Hand]) -> Answer:
        return Answer("Total winnings", total_winnings(model))

    def part_two(self, model: list[Hand]) -> Answer:
        with_jokers = (hand.to_jokers() for hand in model)
        return Answer("Total winnings with jokers", total_winnings(with_jokers))
