"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import IntEnum

from destiny_deck.core.card import Card


class HandRank(IntEnum):
    """Hand categories, ascending with strength."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


@dataclass(frozen=True)
class HandEvaluation:
    """
    Result of evaluating a five-card hand.

    Attributes:
        rank: Hand category
        score: Integer establishing a total order over all hands
        description: Human-readable description of the hand
        primary_cards: Cards forming the deciding combination
        kickers: Remaining cards, rank descending
    """
    rank: HandRank
    score: int
    description: str
    primary_cards: tuple[Card, ...] = ()
    kickers: tuple[Card, ...] = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.score < other.score

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.score > other.score

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.score <= other.score

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.score >= other.score
