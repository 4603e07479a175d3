"""
Hand Evaluation for three-slot poker.

This module scores exactly five cards, and picks the best five of exactly
seven. A score is a single integer that packs the hand category and five
tiebreak ranks, so comparing two scores is comparing the two hands:

    bits 20-23  category (1 High Card .. 9 Straight Flush)
    bits 16-19  tiebreak 0
    bits 12-15  tiebreak 1
    bits  8-11  tiebreak 2
    bits  4-7   tiebreak 3
    bits  0-3   tiebreak 4

Tiebreaks hold rank values 2..14, or 0 for an unused slot. Higher score =
better hand. For example the royal flush A♠ K♠ Q♠ J♠ 10♠ scores 0x9EDCBA.

Note: Ace is low in the A-2-3-4-5 straight (wheel), which is renumbered
5-4-3-2-1 and therefore ranks below a six-high straight.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple
from collections import Counter

from slotpoker.core.card import Card, Rank
from slotpoker.core.errors import InvalidHandSize
from slotpoker.core.rules import (
    HandCategory,
    HAND_CATEGORY_NAMES,
    HAND_SIZE,
    SELECTION_SIZE,
)


CATEGORY_SHIFT = 20
TIEBREAK_SLOTS = 5
TIEBREAK_BITS = 4
TIEBREAK_MASK = 0xF

WHEEL_VALUES = [14, 5, 4, 3, 2]
WHEEL_RENUMBERED = [5, 4, 3, 2, 1]


@dataclass(frozen=True)
class BestHand:
    """Best five-card hand picked from seven cards."""
    score: int
    cards: Tuple[Card, ...]

    @property
    def category(self) -> HandCategory:
        return category_of(self.score)

    @property
    def is_royal(self) -> bool:
        return is_royal_score(self.score)

    @property
    def hex(self) -> str:
        return score_to_hex(self.score)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "score": self.score,
            "hex": self.hex,
            "category": int(self.category),
            "category_name": HAND_CATEGORY_NAMES[self.category],
            "is_royal": self.is_royal,
            "description": describe_score(self.score),
            "cards": [c.short_str for c in self.cards],
        }


def score_hand(cards: Sequence[Card]) -> int:
    """
    Score exactly five cards.

    Args:
        cards: Five Card objects, in any order

    Returns:
        Packed integer score; higher is better

    Raises:
        InvalidHandSize: If not exactly 5 cards are given
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(HAND_SIZE, len(cards))

    values = sorted((c.rank_value for c in cards), reverse=True)
    is_flush = len({c.suit for c in cards}) == 1

    is_straight = all(values[i] - values[i + 1] == 1 for i in range(HAND_SIZE - 1))
    if not is_straight and values == WHEEL_VALUES:
        is_straight = True
        values = list(WHEEL_RENUMBERED)

    groups = _group_values(values)
    counts = [count for _, count in groups]
    group_values = [value for value, _ in groups]

    if is_flush and is_straight:
        category = HandCategory.STRAIGHT_FLUSH
        tiebreaks = values
    elif counts[0] == 4:
        category = HandCategory.FOUR_OF_A_KIND
        tiebreaks = group_values
    elif counts[0] == 3 and counts[1] == 2:
        category = HandCategory.FULL_HOUSE
        tiebreaks = group_values
    elif is_flush:
        category = HandCategory.FLUSH
        tiebreaks = values
    elif is_straight:
        category = HandCategory.STRAIGHT
        tiebreaks = values
    elif counts[0] == 3:
        category = HandCategory.THREE_OF_A_KIND
        tiebreaks = group_values
    elif counts[0] == 2 and counts[1] == 2:
        category = HandCategory.TWO_PAIR
        tiebreaks = group_values
    elif counts[0] == 2:
        category = HandCategory.ONE_PAIR
        tiebreaks = group_values
    else:
        category = HandCategory.HIGH_CARD
        tiebreaks = values

    return pack_score(category, tiebreaks)


def best_of_seven(cards: Sequence[Card]) -> BestHand:
    """
    Pick the best five-card hand out of exactly seven cards.

    Every one of the 21 ways to leave out two cards is scored. When several
    subsets share the top score, the first one found is kept.

    Raises:
        InvalidHandSize: If not exactly 7 cards are given
    """
    if len(cards) != SELECTION_SIZE:
        raise InvalidHandSize(SELECTION_SIZE, len(cards))

    best_score = -1
    best_cards: Tuple[Card, ...] = ()

    for i in range(SELECTION_SIZE):
        for j in range(i + 1, SELECTION_SIZE):
            subset = tuple(c for k, c in enumerate(cards) if k != i and k != j)
            score = score_hand(subset)
            if score > best_score:
                best_score = score
                best_cards = subset

    return BestHand(score=best_score, cards=best_cards)


def _group_values(values: List[int]) -> List[Tuple[int, int]]:
    """Group rank values by multiplicity: (value, count), count desc then value desc."""
    counter = Counter(values)
    return sorted(counter.items(), key=lambda item: (item[1], item[0]), reverse=True)


def pack_score(category: HandCategory, tiebreaks: Sequence[int]) -> int:
    """Pack a category and up to five tiebreak values into one integer."""
    padded = list(tiebreaks)[:TIEBREAK_SLOTS]
    padded += [0] * (TIEBREAK_SLOTS - len(padded))

    score = int(category) << CATEGORY_SHIFT
    for i, value in enumerate(padded):
        shift = TIEBREAK_BITS * (TIEBREAK_SLOTS - 1 - i)
        score |= (value & TIEBREAK_MASK) << shift
    return score


def category_of(score: int) -> HandCategory:
    """Hand category encoded in a score."""
    return HandCategory(score >> CATEGORY_SHIFT)


def tiebreaks_of(score: int) -> List[int]:
    """The five tiebreak values encoded in a score (0 = unused)."""
    return [
        (score >> (TIEBREAK_BITS * (TIEBREAK_SLOTS - 1 - i))) & TIEBREAK_MASK
        for i in range(TIEBREAK_SLOTS)
    ]


def is_royal_score(score: int) -> bool:
    """True for an ace-high straight flush."""
    return (
        category_of(score) == HandCategory.STRAIGHT_FLUSH
        and tiebreaks_of(score)[0] == Rank.ACE
    )


def score_to_hex(score: int) -> str:
    """Render a score the way the fixtures print it, e.g. '0x3D8E00'."""
    return f"0x{score:X}"


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """
    Compare two five-card hands.

    Returns:
        1 if cards1 wins, -1 if cards2 wins, 0 if tie
    """
    score1 = score_hand(cards1)
    score2 = score_hand(cards2)
    return (score1 > score2) - (score1 < score2)


def describe_score(score: int) -> str:
    """Get a human-readable description of a scored hand."""
    category = category_of(score)
    t = tiebreaks_of(score)

    if category == HandCategory.STRAIGHT_FLUSH:
        if is_royal_score(score):
            return "Royal Flush"
        return f"Straight Flush, {_value_name(t[0])} high"
    elif category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_value_name(t[0])}s"
    elif category == HandCategory.FULL_HOUSE:
        return f"Full House, {_value_name(t[0])}s full of {_value_name(t[1])}s"
    elif category == HandCategory.FLUSH:
        return f"Flush, {_value_name(t[0])} high"
    elif category == HandCategory.STRAIGHT:
        if t[0] == 5:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_value_name(t[0])} high"
    elif category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {_value_name(t[0])}s"
    elif category == HandCategory.TWO_PAIR:
        return f"Two Pair, {_value_name(t[0])}s and {_value_name(t[1])}s"
    elif category == HandCategory.ONE_PAIR:
        return f"Pair of {_value_name(t[0])}s"
    else:
        return f"High Card, {_value_name(t[0])}"


def _value_name(value: int) -> str:
    names = {
        2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six",
        7: "Seven", 8: "Eight", 9: "Nine", 10: "Ten",
        11: "Jack", 12: "Queen", 13: "King", 14: "Ace",
    }
    return names[value]
