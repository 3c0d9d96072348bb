"""Human-readable descriptions for evaluated poker hands."""
from typing import Sequence

from destiny_deck.core.card import Rank
from destiny_deck.display import hand_rank_name, rank_name
from destiny_deck.evaluation.types import HandRank


def plural_rank(rank: Rank) -> str:
    """Plural rank name: 'Aces', 'Kings', '10s'."""
    return f"{rank_name(rank)}s"


def describe_hand(hand_rank: HandRank, ranks: Sequence[Rank]) -> str:
    """
    Describe a hand from its category and deciding ranks.

    Args:
        hand_rank: Category of the hand
        ranks: Deciding ranks, most significant first (the straight's
               high card, the quads rank, trips then pair, etc.)

    Returns:
        Description such as 'Full House, 10s full of 5s' or 'Pair of Jacks'
    """
    name = hand_rank_name(hand_rank)

    if hand_rank == HandRank.ROYAL_FLUSH:
        return name
    if hand_rank in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT, HandRank.FLUSH):
        return f"{name}, {rank_name(ranks[0])} high"
    if hand_rank in (HandRank.FOUR_OF_A_KIND, HandRank.THREE_OF_A_KIND):
        return f"{name}, {plural_rank(ranks[0])}"
    if hand_rank == HandRank.FULL_HOUSE:
        return f"{name}, {plural_rank(ranks[0])} full of {plural_rank(ranks[1])}"
    if hand_rank == HandRank.TWO_PAIR:
        return f"{name}, {plural_rank(ranks[0])} and {plural_rank(ranks[1])}"
    if hand_rank == HandRank.PAIR:
        return f"{name} of {plural_rank(ranks[0])}"
    return f"{name}, {rank_name(ranks[0])}"
