"""Five-card hand classification, scoring and comparison."""
import logging
from typing import Iterable, Optional, Sequence

from destiny_deck.core.card import Card, Rank
from destiny_deck.core.errors import InvalidHandSize
from destiny_deck.evaluation.constants import (
    CATEGORY_BASE, HAND_SIZE, TIEBREAK_WEIGHTS, WHEEL_RANKS
)
from destiny_deck.evaluation.hand_description import describe_hand
from destiny_deck.evaluation.types import HandEvaluation, HandRank

logger = logging.getLogger(__name__)


def _group_by_rank(cards: Sequence[Card]) -> list[list[Card]]:
    """
    Group cards sharing a rank.

    Groups are ordered largest first, then by rank descending, so a full
    house yields [trips, pair] and two pair yields [high pair, low pair,
    kicker].
    """
    groups: dict[Rank, list[Card]] = {}
    for card in cards:
        groups.setdefault(card.rank, []).append(card)
    return sorted(groups.values(), key=lambda g: (len(g), g[0].rank), reverse=True)


def _straight_high(ranks: Sequence[Rank]) -> Optional[Rank]:
    """
    Return the high card of a straight, or None.

    Args:
        ranks: Five ranks sorted descending

    The wheel (A-5-4-3-2) is a straight whose high card is 5.
    """
    if list(ranks) == WHEEL_RANKS:
        return Rank.FIVE
    if all(ranks[i] - ranks[i + 1] == 1 for i in range(len(ranks) - 1)):
        return ranks[0]
    return None


def _encode_score(hand_rank: HandRank, tiebreak: Sequence[Rank]) -> int:
    """Fold the category and tie-break ranks into a single comparable integer."""
    value = sum(int(rank) * weight for rank, weight in zip(tiebreak, TIEBREAK_WEIGHTS))
    return int(hand_rank) * CATEGORY_BASE + value


def evaluate_hand(cards: Sequence[Card]) -> HandEvaluation:
    """
    Classify and score a five-card poker hand.

    Categories are checked strongest first; a hand takes the first
    category it satisfies, so a full house is never reported as a pair.

    Args:
        cards: Exactly five cards, in any order

    Returns:
        HandEvaluation with category, score, description, deciding cards
        and kickers

    Raises:
        InvalidHandSize: If the hand does not hold exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(len(cards), HAND_SIZE)

    sorted_cards = sorted(cards, key=lambda c: c.rank, reverse=True)
    ranks = [card.rank for card in sorted_cards]
    groups = _group_by_rank(sorted_cards)
    sizes = [len(g) for g in groups]

    is_flush = len({card.suit for card in sorted_cards}) == 1
    straight_high = _straight_high(ranks) if sizes[0] == 1 else None

    if straight_high == Rank.FIVE:
        # Ace plays low in the wheel
        sorted_cards = sorted_cards[1:] + sorted_cards[:1]

    if straight_high is not None and is_flush:
        if straight_high == Rank.ACE:
            hand_rank = HandRank.ROYAL_FLUSH
            tiebreak = []
        else:
            hand_rank = HandRank.STRAIGHT_FLUSH
            tiebreak = [straight_high]
        primary, kickers = sorted_cards, []
    elif sizes[0] >= 4:
        # Five of a rank (multi-deck hands) plays as quads with a matching kicker
        hand_rank = HandRank.FOUR_OF_A_KIND
        primary = groups[0][:4]
        kickers = groups[0][4:] + [card for g in groups[1:] for card in g]
        tiebreak = [primary[0].rank, kickers[0].rank]
    elif sizes[:2] == [3, 2]:
        hand_rank = HandRank.FULL_HOUSE
        primary, kickers = groups[0] + groups[1], []
        tiebreak = [groups[0][0].rank, groups[1][0].rank]
    elif is_flush:
        hand_rank = HandRank.FLUSH
        primary, kickers = sorted_cards, []
        tiebreak = ranks
    elif straight_high is not None:
        hand_rank = HandRank.STRAIGHT
        primary, kickers = sorted_cards, []
        tiebreak = [straight_high]
    elif sizes[0] == 3:
        hand_rank = HandRank.THREE_OF_A_KIND
        primary = groups[0]
        kickers = [card for g in groups[1:] for card in g]
        tiebreak = [g[0].rank for g in groups]
    elif sizes[:2] == [2, 2]:
        hand_rank = HandRank.TWO_PAIR
        primary, kickers = groups[0] + groups[1], groups[2]
        tiebreak = [g[0].rank for g in groups]
    elif sizes[0] == 2:
        hand_rank = HandRank.PAIR
        primary = groups[0]
        kickers = [card for g in groups[1:] for card in g]
        tiebreak = [g[0].rank for g in groups]
    else:
        hand_rank = HandRank.HIGH_CARD
        primary, kickers = sorted_cards[:1], sorted_cards[1:]
        tiebreak = ranks

    if hand_rank in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT, HandRank.FLUSH):
        described_ranks = [straight_high] if straight_high is not None else ranks
    elif hand_rank == HandRank.ROYAL_FLUSH:
        described_ranks = [Rank.ACE]
    else:
        described_ranks = [g[0].rank for g in groups]

    evaluation = HandEvaluation(
        rank=hand_rank,
        score=_encode_score(hand_rank, tiebreak),
        description=describe_hand(hand_rank, described_ranks),
        primary_cards=tuple(primary),
        kickers=tuple(kickers),
    )
    logger.debug(
        f"Evaluated {' '.join(str(c) for c in cards)} as {evaluation.description} "
        f"(score {evaluation.score})"
    )
    return evaluation


def compare_hands(first: HandEvaluation, second: HandEvaluation) -> int:
    """
    Compare two evaluated hands by score.

    Returns:
        1 if first is stronger, -1 if second is stronger, 0 if tied
    """
    if first.score > second.score:
        return 1
    if first.score < second.score:
        return -1
    return 0


def rank_hands(evaluations: Iterable[HandEvaluation]) -> list[HandEvaluation]:
    """Order evaluated hands strongest first; tied hands keep their input order."""
    return sorted(evaluations, key=lambda e: e.score, reverse=True)
