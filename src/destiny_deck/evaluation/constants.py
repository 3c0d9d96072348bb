"""Constants for poker hand evaluation."""
from destiny_deck.core.card import Rank
from destiny_deck.evaluation.types import HandRank

HAND_SIZE = 5

# Each category occupies its own block of scores
CATEGORY_BASE = 1_000_000

# Tie-break ranks are folded as base-15 digits. Ranks run up to 14, so a
# decimal base would let adjacent positions overlap. Five base-15 digits
# top out at 15**5 - 1 = 759_374, below CATEGORY_BASE.
TIEBREAK_BASE = 15
TIEBREAK_WEIGHTS = tuple(TIEBREAK_BASE ** power for power in range(HAND_SIZE - 1, -1, -1))

HAND_RANK_NAMES = {
    HandRank.ROYAL_FLUSH: 'Royal Flush',
    HandRank.STRAIGHT_FLUSH: 'Straight Flush',
    HandRank.FOUR_OF_A_KIND: 'Four of a Kind',
    HandRank.FULL_HOUSE: 'Full House',
    HandRank.FLUSH: 'Flush',
    HandRank.STRAIGHT: 'Straight',
    HandRank.THREE_OF_A_KIND: 'Three of a Kind',
    HandRank.TWO_PAIR: 'Two Pair',
    HandRank.PAIR: 'Pair',
    HandRank.HIGH_CARD: 'High Card',
}

# A-2-3-4-5 plays as a five-high straight
WHEEL_RANKS = [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]
