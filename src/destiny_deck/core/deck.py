"""Deck construction, shuffling and drawing."""
import logging
from typing import Optional, Protocol, Sequence

from destiny_deck.config import get_default_rng
from destiny_deck.core.card import Card, Rank, Suit
from destiny_deck.core.errors import InsufficientCards

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class RandomSource(Protocol):
    """Anything that can pick a uniform integer in [a, b], e.g. random.Random."""

    def randint(self, a: int, b: int) -> int:
        ...


def create_deck() -> list[Card]:
    """
    Create a fresh 52-card deck in canonical order.

    Cards are ordered suit-major (spades, hearts, clubs, diamonds) and by
    ascending rank within each suit, so repeated calls return equal decks.
    """
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def shuffle_deck(
    deck: Optional[Sequence[Card]] = None,
    rng: Optional[RandomSource] = None
) -> list[Card]:
    """
    Return a shuffled copy of a deck.

    Uses a Fisher-Yates pass from the last index down to 1, swapping each
    position with a uniformly chosen index at or below it.

    Args:
        deck: Cards to shuffle; a fresh canonical deck when omitted
        rng: Random source; the process-wide generator when omitted

    Returns:
        New list holding the same cards in random order
    """
    cards = list(deck) if deck is not None else create_deck()
    if rng is None:
        rng = get_default_rng()

    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]

    logger.debug(f"Shuffled {len(cards)} cards")
    return cards


def draw_cards(cards: Sequence[Card], count: int) -> tuple[list[Card], list[Card]]:
    """
    Split cards into a drawn prefix and the remainder.

    Args:
        cards: Cards to draw from (not modified)
        count: Number of cards to draw from the top

    Returns:
        Tuple of (drawn, remaining), both in original order

    Raises:
        InsufficientCards: If count exceeds the number of cards
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Cannot draw a negative number of cards: {count}")
    if count > len(cards):
        raise InsufficientCards(count, len(cards))

    drawn = list(cards[:count])
    remaining = list(cards[count:])
    logger.debug(f"Drew {len(drawn)} cards, {len(remaining)} remaining")
    return drawn, remaining
