"""Tests for deck creation, shuffling and drawing."""
import random
from collections import Counter

import pytest
from destiny_deck.core.card import Card, Rank, Suit
from destiny_deck.core.deck import DECK_SIZE, create_deck, draw_cards, shuffle_deck
from destiny_deck.core.errors import DeckError, InsufficientCards


class FixedSource:
    """Random source that always picks the lowest index."""

    def __init__(self):
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return a


def test_deck_initialization():
    """Test basic deck creation."""
    deck = create_deck()
    assert len(deck) == DECK_SIZE == 52
    assert len(set(deck)) == 52


def test_deck_suit_and_rank_counts():
    """Each suit appears 13 times and each rank 4 times."""
    deck = create_deck()
    suit_counts = Counter(card.suit for card in deck)
    rank_counts = Counter(card.rank for card in deck)

    assert all(suit_counts[suit] == 13 for suit in Suit)
    assert all(rank_counts[rank] == 4 for rank in Rank)


def test_deck_canonical_order():
    """Decks are suit-major with ranks ascending and identical across calls."""
    deck = create_deck()
    assert deck == create_deck()
    assert deck[0] == Card(Suit.SPADES, Rank.TWO)
    assert deck[12] == Card(Suit.SPADES, Rank.ACE)
    assert deck[13] == Card(Suit.HEARTS, Rank.TWO)
    assert deck[-1] == Card(Suit.DIAMONDS, Rank.ACE)


def test_shuffle_preserves_cards():
    """A shuffle is a permutation of its input."""
    deck = create_deck()
    shuffled = shuffle_deck(deck, rng=random.Random(42))

    assert len(shuffled) == 52
    assert Counter(shuffled) == Counter(deck)


def test_shuffle_does_not_mutate_input():
    """Shuffling returns a new list."""
    deck = create_deck()
    original = list(deck)
    shuffled = shuffle_deck(deck, rng=random.Random(1))

    assert deck == original
    assert shuffled is not deck


def test_shuffle_without_deck_uses_fresh_deck():
    """Omitting the deck shuffles a canonical one."""
    shuffled = shuffle_deck(rng=random.Random(7))
    assert Counter(shuffled) == Counter(create_deck())


def test_shuffle_is_reproducible_with_seed():
    """Equal seeds give equal orders."""
    assert shuffle_deck(rng=random.Random(99)) == shuffle_deck(rng=random.Random(99))
    assert shuffle_deck(rng=random.Random(99)) != shuffle_deck(rng=random.Random(100))


def test_shuffle_walks_fisher_yates_bounds():
    """Each step draws from [0, i] for i from the last index down to 1."""
    source = FixedSource()
    shuffle_deck(create_deck(), rng=source)
    assert source.calls == [(0, i) for i in range(51, 0, -1)]


def test_shuffle_moves_most_cards():
    """Across repeated shuffles few positions keep their card."""
    deck = create_deck()
    rng = random.Random(2024)
    unchanged = 0
    trials = 50
    for _ in range(trials):
        shuffled = shuffle_deck(deck, rng=rng)
        unchanged += sum(1 for a, b in zip(deck, shuffled) if a == b)

    assert unchanged / (trials * 52) < 0.5


def test_shuffle_empty_and_single():
    """Short sequences shuffle without error."""
    assert shuffle_deck([], rng=random.Random(0)) == []
    card = Card(Suit.CLUBS, Rank.NINE)
    assert shuffle_deck([card], rng=random.Random(0)) == [card]


def test_draw_cards():
    """Drawing splits off the first cards in order."""
    deck = create_deck()
    drawn, remaining = draw_cards(deck, 5)

    assert drawn == deck[:5]
    assert remaining == deck[5:]
    assert len(remaining) == 47
    assert len(deck) == 52


def test_draw_all_and_none():
    """Edge counts return empty sides."""
    deck = create_deck()
    drawn, remaining = draw_cards(deck, 52)
    assert drawn == deck and remaining == []

    drawn, remaining = draw_cards(deck, 0)
    assert drawn == [] and remaining == deck


@pytest.mark.parametrize("count", [53, 100])
def test_draw_more_cards_than_available(count):
    """Over-drawing fails fast."""
    deck = create_deck()
    with pytest.raises(InsufficientCards, match="only 52 remaining") as excinfo:
        draw_cards(deck, count)

    assert excinfo.value.requested == count
    assert excinfo.value.available == 52
    assert isinstance(excinfo.value, DeckError)
    assert isinstance(excinfo.value, ValueError)


def test_draw_negative_count():
    """Negative counts are rejected."""
    with pytest.raises(ValueError, match="negative"):
        draw_cards(create_deck(), -1)
