"""
SlotPoker Core - Hand Scoring and Settlement

This module contains all scoring and settlement logic without any network
dependencies.
"""

from slotpoker.core.card import Card, Rank, Suit, parse_cards
from slotpoker.core.errors import (
    SlotPokerError,
    InvalidHandSize,
    WinnerNotFound,
    WinnerStrengthMismatch,
    DuplicateCard,
)
from slotpoker.core.rules import HandCategory
from slotpoker.core.hand import BestHand, score_hand, best_of_seven
from slotpoker.core.settlement import (
    PlayerSlotInfo,
    SettlementResult,
    SlotSettlementResult,
    settle_slot,
    settle_total,
)
from slotpoker.core.showdown import SeatHand, settle_showdown

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "SlotPokerError",
    "InvalidHandSize",
    "WinnerNotFound",
    "WinnerStrengthMismatch",
    "DuplicateCard",
    "HandCategory",
    "BestHand",
    "score_hand",
    "best_of_seven",
    "PlayerSlotInfo",
    "SettlementResult",
    "SlotSettlementResult",
    "settle_slot",
    "settle_total",
    "SeatHand",
    "settle_showdown",
]
