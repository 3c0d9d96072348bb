"""Text rendering for cards, hands and evaluations."""
from typing import Iterable

from destiny_deck.core.card import Card, Rank, Suit
from destiny_deck.evaluation.constants import HAND_RANK_NAMES
from destiny_deck.evaluation.types import HandEvaluation, HandRank

RANK_NAMES = {
    Rank.JACK: 'Jack',
    Rank.QUEEN: 'Queen',
    Rank.KING: 'King',
    Rank.ACE: 'Ace',
}

RANK_ABBREVIATIONS = {
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

SUIT_NAMES = {
    Suit.SPADES: 'Spades',
    Suit.HEARTS: 'Hearts',
    Suit.CLUBS: 'Clubs',
    Suit.DIAMONDS: 'Diamonds',
}

SUIT_SYMBOLS = {
    Suit.SPADES: '♠',
    Suit.HEARTS: '♥',
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
}


def rank_name(rank: Rank) -> str:
    """Full rank name: '2'..'10', 'Jack', 'Queen', 'King' or 'Ace'."""
    return RANK_NAMES.get(rank, str(int(rank)))


def rank_abbreviation(rank: Rank) -> str:
    """Short rank label: '2'..'10', 'J', 'Q', 'K' or 'A'."""
    return RANK_ABBREVIATIONS.get(rank, str(int(rank)))


def suit_name(suit: Suit) -> str:
    return SUIT_NAMES[suit]


def suit_symbol(suit: Suit) -> str:
    return SUIT_SYMBOLS[suit]


def hand_rank_name(rank: HandRank) -> str:
    return HAND_RANK_NAMES[rank]


def format_card(card: Card) -> str:
    """Render a card as rank abbreviation plus suit symbol, e.g. 'A♠' or '10♣'."""
    return f"{rank_abbreviation(card.rank)}{suit_symbol(card.suit)}"


def format_hand(cards: Iterable[Card]) -> str:
    """Render cards space separated, preserving their order."""
    return " ".join(format_card(card) for card in cards)


def format_evaluation(evaluation: HandEvaluation) -> str:
    """One-line summary of an evaluated hand for logs and the command line."""
    cards = evaluation.primary_cards + evaluation.kickers
    return f"{format_hand(cards)} - {evaluation.description} (score {evaluation.score})"
