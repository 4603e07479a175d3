"""
Showdown for a full game round.

At showdown every seat has placed up to two private cards in each of the
three slots. A slot is contested when the seat has not folded and the slot
holds exactly two cards; its hand is those two cards plus the five
community cards, reduced to the best five by best_of_seven.

This module builds the per-slot PlayerSlotInfo records and winner lists
from the cards and runs both settlement layers over them.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence
from dataclasses import dataclass, field
import logging

from slotpoker.core.card import Card, format_cards
from slotpoker.core.errors import DuplicateCard, InvalidHandSize
from slotpoker.core.hand import BestHand, best_of_seven
from slotpoker.core.rules import (
    CARDS_PER_SLOT,
    COMMUNITY_CARDS,
    HandCategory,
    SLOT_IDS,
)
from slotpoker.core.settlement import (
    PlayerSlotInfo,
    SettlementResult,
    SlotSettlementResult,
    check_unique_seats,
    settle_slot,
    settle_total,
)


logger = logging.getLogger(__name__)


@dataclass
class SeatHand:
    """
    The cards one seat committed to the slots.

    Attributes:
        seat_index: Seat position at the table
        slots: Slot id -> cards placed in that slot (at most 2)
        folded: Folded seats contest no slot
    """
    seat_index: int
    slots: Dict[int, List[Card]] = field(default_factory=dict)
    folded: bool = False

    def slot_cards(self, slot_id: int) -> List[Card]:
        return self.slots.get(slot_id, [])

    def all_cards(self) -> List[Card]:
        return [c for slot_id in SLOT_IDS for c in self.slot_cards(slot_id)]


@dataclass(frozen=True)
class SlotEntry:
    """One seat's evaluated hand in one slot."""
    seat_index: int
    slot_id: int
    has_played: bool
    best: Optional[BestHand] = None

    @property
    def score(self) -> int:
        return self.best.score if self.best else -1

    def to_slot_info(self) -> PlayerSlotInfo:
        """Reduce to the record settle_slot consumes."""
        if self.best is None:
            return PlayerSlotInfo(
                seat_index=self.seat_index,
                has_played=False,
                category=HandCategory.HIGH_CARD,
            )
        return PlayerSlotInfo(
            seat_index=self.seat_index,
            has_played=self.has_played,
            category=self.best.category,
            is_royal=self.best.is_royal,
        )


@dataclass(frozen=True)
class ShowdownResult:
    """Everything computed for one game round."""
    entries: Dict[int, List[SlotEntry]]
    winners: Dict[int, List[int]]
    slot_results: Dict[int, List[SettlementResult]]
    totals: List[SlotSettlementResult]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "slots": [
                {
                    "slot_id": slot_id,
                    "winners": self.winners[slot_id],
                    "entries": [
                        {
                            "seat_index": e.seat_index,
                            "has_played": e.has_played,
                            "best": e.best.to_dict() if e.best else None,
                        }
                        for e in self.entries[slot_id]
                    ],
                    "results": [r.to_dict() for r in self.slot_results[slot_id]],
                }
                for slot_id in SLOT_IDS
            ],
            "totals": [t.to_dict() for t in self.totals],
        }


def evaluate_seat(seat: SeatHand, community: Sequence[Card]) -> List[SlotEntry]:
    """
    Evaluate each of a seat's slots against the community cards.

    Raises:
        InvalidHandSize: If the board is not exactly five cards
        ValueError: If a slot holds more than two cards
    """
    if len(community) != COMMUNITY_CARDS:
        raise InvalidHandSize(COMMUNITY_CARDS, len(community))

    entries = []
    for slot_id in SLOT_IDS:
        cards = seat.slot_cards(slot_id)
        if len(cards) > CARDS_PER_SLOT:
            raise ValueError(
                f"Seat {seat.seat_index} slot {slot_id} holds {len(cards)} cards, "
                f"max is {CARDS_PER_SLOT}"
            )
        if seat.folded or len(cards) != CARDS_PER_SLOT:
            entries.append(SlotEntry(seat.seat_index, slot_id, has_played=False))
            continue
        best = best_of_seven(list(cards) + list(community))
        entries.append(SlotEntry(seat.seat_index, slot_id, has_played=True, best=best))
    return entries


def find_winners(entries: Sequence[SlotEntry]) -> List[int]:
    """
    Seats of the contested entries holding the top score.

    The result keeps the order of ``entries``, which decides who gets the
    remainder of an uneven split.
    """
    played = [e for e in entries if e.has_played]
    if not played:
        return []
    top = max(e.score for e in played)
    return [e.seat_index for e in played if e.score == top]


def check_unique_cards(seats: Sequence[SeatHand], community: Sequence[Card]) -> None:
    """Raise DuplicateCard if any card is used twice."""
    seen = set()
    for card in list(community) + [c for seat in seats for c in seat.all_cards()]:
        if card in seen:
            raise DuplicateCard(card)
        seen.add(card)


def settle_showdown(
    seats: Sequence[SeatHand],
    community: Sequence[Card],
) -> ShowdownResult:
    """
    Evaluate and settle a full game round.

    Args:
        seats: Every seat in the round, in remainder order
        community: The five community cards

    Returns:
        ShowdownResult with per-slot entries, winners and deltas, and the
        final per-seat totals
    """
    check_unique_seats(seat.seat_index for seat in seats)
    check_unique_cards(seats, community)
    logger.info(
        f"Showdown for seats {[s.seat_index for s in seats]}, board {format_cards(community)}"
    )

    by_seat = {seat.seat_index: evaluate_seat(seat, community) for seat in seats}

    entries: Dict[int, List[SlotEntry]] = {}
    winners: Dict[int, List[int]] = {}
    slot_results: Dict[int, List[SettlementResult]] = {}
    for i, slot_id in enumerate(SLOT_IDS):
        entries[slot_id] = [by_seat[seat.seat_index][i] for seat in seats]
        winners[slot_id] = find_winners(entries[slot_id])
        slot_results[slot_id] = settle_slot(
            [e.to_slot_info() for e in entries[slot_id]],
            winners[slot_id],
            slot_id,
        )
        logger.debug(f"Slot {slot_id} winners: {winners[slot_id]}")

    totals = settle_total(
        [slot_results[slot_id] for slot_id in SLOT_IDS],
        [seat.seat_index for seat in seats],
    )
    return ShowdownResult(
        entries=entries,
        winners=winners,
        slot_results=slot_results,
        totals=totals,
    )
