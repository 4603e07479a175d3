"""
Slot and total settlement.

Settlement turns showdown outcomes into integer point transfers. It runs
in two layers:

- settle_slot: one slot's losers pay the winning hand's strength times the
  slot multiplier; the pot is split between that slot's winners.
- settle_total: after all three slots, players who won nothing share a
  fixed penalty that is paid to everyone else.

Both layers are zero-sum: the deltas they return always add up to 0.
Remainders from uneven splits go to the first seat of the group, in the
order the caller supplied.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence
from dataclasses import dataclass
import logging

from slotpoker.core.errors import WinnerNotFound, WinnerStrengthMismatch
from slotpoker.core.rules import (
    HandCategory,
    SLOT_COUNT,
    TOTAL_LOSER_POOL,
    get_slot_multiplier,
    get_strength,
    split_evenly,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerSlotInfo:
    """
    One player's showdown result for one slot.

    Attributes:
        seat_index: Seat of the player
        has_played: False if the player folded or left the slot unfilled;
            such players neither win nor lose in this slot
        category: Category of the player's best hand in this slot
        is_royal: Ace-high straight flush; only changes settlement strength
    """
    seat_index: int
    has_played: bool
    category: HandCategory
    is_royal: bool = False

    @property
    def strength(self) -> int:
        return get_strength(self.category, self.is_royal)


@dataclass(frozen=True)
class SettlementResult:
    """Net point change for one player in one slot."""
    seat_index: int
    score_delta: int = 0

    def to_dict(self) -> dict:
        return {"seat_index": self.seat_index, "score_delta": self.score_delta}


@dataclass(frozen=True)
class SlotSettlementResult:
    """Per-player outcome of a full game round (three slots + total)."""
    seat_index: int
    slot1_delta: int
    slot2_delta: int
    slot3_delta: int
    total_loser_delta: int
    total_delta: int
    is_total_loser: bool

    def to_dict(self) -> dict:
        return {
            "seat_index": self.seat_index,
            "slot1_delta": self.slot1_delta,
            "slot2_delta": self.slot2_delta,
            "slot3_delta": self.slot3_delta,
            "total_loser_delta": self.total_loser_delta,
            "total_delta": self.total_delta,
            "is_total_loser": self.is_total_loser,
        }


def settle_slot(
    players: Sequence[PlayerSlotInfo],
    winner_seats: Sequence[int],
    slot_id: int,
    strict: bool = True,
) -> List[SettlementResult]:
    """
    Settle a single slot.

    Args:
        players: Every player at the table for this slot
        winner_seats: Seats holding the best hand, in the order that should
            receive any remainder (first seat gets it)
        slot_id: 1, 2 or 3; selects the multiplier
        strict: Require every winner to have the same strength as the first

    Returns:
        One SettlementResult per player, in the order of ``players``

    Raises:
        WinnerNotFound: If a winner seat did not play this slot
        ValueError: If a seat index appears twice in players
        WinnerStrengthMismatch: In strict mode, if the winners' strengths differ
    """
    check_unique_seats(p.seat_index for p in players)
    deltas: Dict[int, int] = {p.seat_index: 0 for p in players}

    active = {p.seat_index: p for p in players if p.has_played}
    if not winner_seats or not active:
        return _slot_results(players, deltas)

    winner_set = set(winner_seats)
    losers = [p for seat, p in active.items() if seat not in winner_set]
    if not losers:
        logger.debug(f"Slot {slot_id}: every active player won, no pot")
        return _slot_results(players, deltas)

    # Winners must have contested the slot; strength and shares come from
    # their active entries, not just from being listed in players.
    for seat in winner_seats:
        if seat not in active:
            raise WinnerNotFound(seat)

    reference = active[winner_seats[0]]
    strength = reference.strength
    if strict:
        for seat in winner_seats[1:]:
            other = active[seat].strength
            if other != strength:
                raise WinnerStrengthMismatch(seat, strength, other)

    unit_loss = strength * get_slot_multiplier(slot_id)
    for loser in losers:
        deltas[loser.seat_index] -= unit_loss
    pot = unit_loss * len(losers)

    for seat, share in zip(winner_seats, split_evenly(pot, len(winner_seats))):
        deltas[seat] += share

    logger.debug(
        f"Slot {slot_id}: strength={strength} unit_loss={unit_loss} "
        f"pot={pot} winners={list(winner_seats)}"
    )
    return _slot_results(players, deltas)


def check_unique_seats(seats: Iterable[int]) -> None:
    """Raise ValueError if a seat index appears more than once."""
    seen = set()
    for seat in seats:
        if seat in seen:
            raise ValueError(f"Duplicate seat index: {seat}")
        seen.add(seat)


def _slot_results(
    players: Sequence[PlayerSlotInfo], deltas: Dict[int, int]
) -> List[SettlementResult]:
    return [SettlementResult(p.seat_index, deltas[p.seat_index]) for p in players]


def settle_total(
    slot_results: Sequence[Sequence[SettlementResult]],
    all_seats: Sequence[int],
) -> List[SlotSettlementResult]:
    """
    Combine three slot settlements and apply the total-loser adjustment.

    A seat that won no slot (no positive delta anywhere) is a total loser.
    When there are both total losers and other players, the total losers
    pay TOTAL_LOSER_POOL between them and the others receive the same
    amount between them.

    Args:
        slot_results: Exactly three lists of SettlementResult, slots 1..3
        all_seats: Every seat in the game round, in remainder order

    Returns:
        One SlotSettlementResult per seat, in the order of ``all_seats``
    """
    if len(slot_results) != SLOT_COUNT:
        raise ValueError(f"Need {SLOT_COUNT} slot results, got {len(slot_results)}")
    check_unique_seats(all_seats)

    slot_deltas = [
        {r.seat_index: r.score_delta for r in results} for results in slot_results
    ]
    has_won = {
        seat: any(deltas.get(seat, 0) > 0 for deltas in slot_deltas)
        for seat in all_seats
    }

    total_losers = [seat for seat in all_seats if not has_won[seat]]
    others = [seat for seat in all_seats if has_won[seat]]

    adjustment = {seat: 0 for seat in all_seats}
    if total_losers and others:
        for seat, penalty in zip(total_losers, split_evenly(TOTAL_LOSER_POOL, len(total_losers))):
            adjustment[seat] -= penalty
        for seat, bonus in zip(others, split_evenly(TOTAL_LOSER_POOL, len(others))):
            adjustment[seat] += bonus
        logger.info(
            f"Total losers {total_losers} pay {TOTAL_LOSER_POOL} to {others}"
        )

    totals = []
    for seat in all_seats:
        slot1, slot2, slot3 = (deltas.get(seat, 0) for deltas in slot_deltas)
        totals.append(SlotSettlementResult(
            seat_index=seat,
            slot1_delta=slot1,
            slot2_delta=slot2,
            slot3_delta=slot3,
            total_loser_delta=adjustment[seat],
            total_delta=slot1 + slot2 + slot3 + adjustment[seat],
            is_total_loser=not has_won[seat],
        ))

    logger.debug(f"Total settlement: {[t.to_dict() for t in totals]}")
    return totals
