"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(Enum):
    """Card suits."""
    SPADES = 's'
    HEARTS = 'h'
    CLUBS = 'c'
    DIAMONDS = 'd'

    def __str__(self) -> str:
        return self.value


class Rank(IntEnum):
    """Card ranks, valued so that integer comparison matches poker strength."""
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

    @property
    def code(self) -> str:
        """Single character code used in short card strings ('T' for ten)."""
        return RANK_CODES[self]

    def __str__(self) -> str:
        return self.code


RANK_CODES = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

_RANKS_BY_CODE = {code: rank for rank, code in RANK_CODES.items()}
_RANKS_BY_CODE['10'] = Rank.TEN


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values: two cards with the same suit and rank are
    equal and hash alike.

    Attributes:
        suit: Card suit
        rank: Card rank (2-14)
    """
    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank.code}{self.suit.value}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades; tens may be
                     written 'Th' or '10h'

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[:-1], card_str[-1]

        try:
            rank = _RANKS_BY_CODE[rank_str.upper()]
            suit = Suit(suit_str.lower())
        except (KeyError, ValueError):
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(suit=suit, rank=rank)


def parse_cards(card_strs: str) -> list[Card]:
    """Parse a whitespace separated list of card strings, e.g. 'As Kd 10c'."""
    return [Card.from_string(s) for s in card_strs.split()]
