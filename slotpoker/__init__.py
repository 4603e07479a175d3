"""
SlotPoker - Three-Slot Poker Scoring and Settlement Engine

A standalone scoring project with:
- Pure Python hand evaluation (5-card scores, best 5 of 7)
- Zero-sum slot and total-loser settlement
- FastAPI evaluation service for the surrounding game server

Usage:
    from slotpoker.core import Card, score_hand, best_of_seven
    from slotpoker.core import settle_slot, settle_total, settle_showdown
"""

__version__ = "0.1.0"

from slotpoker.core.card import Card, Rank, Suit, parse_cards
from slotpoker.core.rules import HandCategory
from slotpoker.core.hand import score_hand, best_of_seven
from slotpoker.core.settlement import settle_slot, settle_total
from slotpoker.core.showdown import settle_showdown

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "HandCategory",
    "score_hand",
    "best_of_seven",
    "settle_slot",
    "settle_total",
    "settle_showdown",
    "__version__",
]
