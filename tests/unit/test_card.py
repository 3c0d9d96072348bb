"""Tests for card module."""
import dataclasses

import pytest
from destiny_deck.core.card import Card, Rank, Suit, parse_cards


def test_card_creation():
    """Test basic card creation."""
    card = Card(Suit.SPADES, Rank.ACE)
    assert card.rank == Rank.ACE
    assert card.suit == Suit.SPADES


def test_card_is_immutable():
    """Cards are frozen values."""
    card = Card(Suit.SPADES, Rank.ACE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = Rank.KING  # type: ignore[misc]


def test_card_equality_and_hash():
    """Cards with the same suit and rank are interchangeable."""
    card1 = Card(Suit.HEARTS, Rank.TEN)
    card2 = Card(Suit.HEARTS, Rank.TEN)
    card3 = Card(Suit.CLUBS, Rank.TEN)

    assert card1 == card2
    assert hash(card1) == hash(card2)
    assert card1 != card3
    assert len({card1, card2, card3}) == 2


def test_rank_values_follow_poker_strength():
    """Ranks are numbered 2-14 with Ace highest."""
    assert [int(r) for r in Rank] == list(range(2, 15))
    assert Rank.ACE > Rank.KING > Rank.TWO
    assert len(Suit) == 4


def test_card_string_representation():
    """Test string conversion of cards."""
    assert str(Card(Suit.SPADES, Rank.ACE)) == "As"
    assert str(Card(Suit.HEARTS, Rank.TEN)) == "Th"
    assert str(Card(Suit.DIAMONDS, Rank.TWO)) == "2d"


@pytest.mark.parametrize("card_str,expected_rank,expected_suit", [
    ("As", Rank.ACE, Suit.SPADES),
    ("2h", Rank.TWO, Suit.HEARTS),
    ("Td", Rank.TEN, Suit.DIAMONDS),
    ("10d", Rank.TEN, Suit.DIAMONDS),
    ("Kc", Rank.KING, Suit.CLUBS),
    ("aS", Rank.ACE, Suit.SPADES),
])
def test_card_from_string(card_str, expected_rank, expected_suit):
    """Test creating cards from string representation."""
    card = Card.from_string(card_str)
    assert card.rank == expected_rank
    assert card.suit == expected_suit


@pytest.mark.parametrize("invalid_str", [
    "",           # Empty string
    "A",          # Missing suit
    "AsH",        # Too long
    "Xx",         # Invalid rank
    "Ax",         # Invalid suit
    "1s",         # No rank one
    "11s",        # Not a ten
])
def test_card_from_string_invalid(invalid_str):
    """Test error handling for invalid card strings."""
    with pytest.raises(ValueError):
        Card.from_string(invalid_str)


def test_parse_cards():
    """Whitespace separated codes parse in order."""
    cards = parse_cards("As 10c  5d")
    assert cards == [
        Card(Suit.SPADES, Rank.ACE),
        Card(Suit.CLUBS, Rank.TEN),
        Card(Suit.DIAMONDS, Rank.FIVE),
    ]
