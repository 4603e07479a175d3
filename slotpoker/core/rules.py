"""
Three-slot poker rules and constants.

Each player splits a private hand into three slots of two cards. Every
slot is played against the same five community cards and settled on its
own, with a point multiplier that falls from slot 1 to slot 3:

1. A slot's losers each pay ``strength * multiplier`` points, where the
   strength comes from the winning hand's category (see BASE_STRENGTH).

2. The pot is split evenly between the slot's winners; the odd points go
   to the first winner in the order the winners were given.

3. A player who wins none of the three slots is a "total loser". Total
   losers share a fixed 60-point penalty that is paid out to everyone
   else, with the same floor/remainder rule.
"""

from enum import IntEnum
from typing import Dict


class HandCategory(IntEnum):
    """Hand categories, ascending strength. Never reorder."""
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9


HAND_CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


# Hand sizes
HAND_SIZE = 5        # Scored hand
SELECTION_SIZE = 7   # Two slot cards + five community cards
COMMUNITY_CARDS = 5
CARDS_PER_SLOT = 2

# Slots
SLOT_IDS = (1, 2, 3)
SLOT_COUNT = len(SLOT_IDS)

# Settlement strength of the winning hand, by category
BASE_STRENGTH: Dict[HandCategory, int] = {
    HandCategory.HIGH_CARD: 1,
    HandCategory.ONE_PAIR: 1,
    HandCategory.TWO_PAIR: 2,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.STRAIGHT: 4,
    HandCategory.FLUSH: 5,
    HandCategory.FULL_HOUSE: 6,
    HandCategory.FOUR_OF_A_KIND: 10,
    HandCategory.STRAIGHT_FLUSH: 15,
}
ROYAL_FLUSH_STRENGTH = 20
DEFAULT_STRENGTH = 1

SLOT_MULTIPLIERS: Dict[int, int] = {
    1: 5,
    2: 3,
    3: 1,
}
DEFAULT_MULTIPLIER = 1

# Points levied from total losers and paid to everyone else
TOTAL_LOSER_POOL = 60


def get_strength(category: HandCategory, is_royal: bool = False) -> int:
    """
    Settlement strength of a winning hand.

    Only a straight flush can be royal; the flag is ignored for every
    other category.
    """
    if category == HandCategory.STRAIGHT_FLUSH and is_royal:
        return ROYAL_FLUSH_STRENGTH
    return BASE_STRENGTH.get(category, DEFAULT_STRENGTH)


def get_slot_multiplier(slot_id: int) -> int:
    """Point multiplier for a slot; unknown slot ids count once."""
    return SLOT_MULTIPLIERS.get(slot_id, DEFAULT_MULTIPLIER)


def split_evenly(amount: int, parts: int) -> list:
    """
    Split ``amount`` into ``parts`` integer shares.

    Every share is ``amount // parts``; the remainder is added to the first
    share, so the shares always sum to ``amount``.

    Args:
        amount: Points to split (non-negative)
        parts: Number of recipients (at least 1)

    Returns:
        List of shares, in recipient order
    """
    if parts < 1:
        raise ValueError("Need at least one recipient")
    share, remainder = divmod(amount, parts)
    shares = [share] * parts
    shares[0] += remainder
    return shares
