"""Destiny deck: five-card poker hand engine."""

from destiny_deck.core.card import Card, Rank, Suit
from destiny_deck.core.deck import create_deck, draw_cards, shuffle_deck
from destiny_deck.core.errors import DeckError, InsufficientCards, InvalidHandSize
from destiny_deck.display import (
    format_card, format_evaluation, format_hand, hand_rank_name,
    rank_name, suit_name, suit_symbol
)
from destiny_deck.evaluation.evaluator import compare_hands, evaluate_hand, rank_hands
from destiny_deck.evaluation.types import HandEvaluation, HandRank

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "draw_cards",
    "DeckError",
    "InsufficientCards",
    "InvalidHandSize",
    "evaluate_hand",
    "compare_hands",
    "rank_hands",
    "HandEvaluation",
    "HandRank",
    "rank_name",
    "suit_name",
    "suit_symbol",
    "hand_rank_name",
    "format_card",
    "format_hand",
    "format_evaluation",
]
