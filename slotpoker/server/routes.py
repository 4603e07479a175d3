"""
HTTP API Routes for SlotPoker.

The routes are stateless: every request carries the cards or outcomes to
evaluate, and the response carries the scores or point deltas. Seating,
dealing and broadcasting stay with the game server that calls them.
"""

from typing import Any, Dict, List
import logging

from fastapi import APIRouter, HTTPException

from slotpoker import __version__
from slotpoker.core.card import Card, parse_cards
from slotpoker.core.hand import best_of_seven, describe_score, category_of, score_hand, score_to_hex
from slotpoker.core.rules import HAND_CATEGORY_NAMES, HandCategory
from slotpoker.core.settlement import (
    PlayerSlotInfo,
    SettlementResult,
    settle_slot,
    settle_total,
)
from slotpoker.core.showdown import SeatHand, settle_showdown
from slotpoker.server.schemas import (
    BestHandRequest,
    BestHandSchema,
    ScoreHandRequest,
    ScoreSchema,
    SettleSlotRequest,
    SettleTotalRequest,
    SettlementResultSchema,
    ShowdownRequest,
    ShowdownSchema,
    SlotSettlementResultSchema,
)


logger = logging.getLogger(__name__)

router = APIRouter()


def _parse(cards: List[str]) -> List[Card]:
    """Parse card strings, turning bad input into a 400."""
    try:
        return parse_cards(cards)
    except ValueError as e:
        logger.warning(f"Rejected cards {cards}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Liveness check."""
    return {"status": "ok", "version": __version__}


@router.post("/hands/score", response_model=ScoreSchema)
async def score(req: ScoreHandRequest) -> Dict[str, Any]:
    """
    Score exactly five cards.

    The score is a packed integer; higher is better.
    """
    cards = _parse(req.cards)
    try:
        value = score_hand(cards)
    except ValueError as e:
        logger.warning(f"Cannot score {req.cards}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    category = category_of(value)
    return {
        "score": value,
        "hex": score_to_hex(value),
        "category": int(category),
        "category_name": HAND_CATEGORY_NAMES[category],
        "description": describe_score(value),
    }


@router.post("/hands/best", response_model=BestHandSchema)
async def best_hand(req: BestHandRequest) -> Dict[str, Any]:
    """Pick the best five-card hand out of exactly seven cards."""
    cards = _parse(req.cards)
    try:
        best = best_of_seven(cards)
    except ValueError as e:
        logger.warning(f"Cannot pick best hand of {req.cards}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return best.to_dict()


@router.post("/settlement/slot", response_model=List[SettlementResultSchema])
async def slot_settlement(req: SettleSlotRequest) -> List[Dict[str, Any]]:
    """
    Settle a single slot.

    Winner seats are taken in the order given; the first receives any
    remainder of the pot split.
    """
    players = [
        PlayerSlotInfo(
            seat_index=p.seat_index,
            has_played=p.has_played,
            category=HandCategory(p.category),
            is_royal=p.is_royal,
        )
        for p in req.players
    ]
    try:
        results = settle_slot(players, req.winner_seats, req.slot_id, strict=req.strict)
    except ValueError as e:
        logger.warning(f"Cannot settle slot {req.slot_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return [r.to_dict() for r in results]


@router.post("/settlement/total", response_model=List[SlotSettlementResultSchema])
async def total_settlement(req: SettleTotalRequest) -> List[Dict[str, Any]]:
    """Combine three slot settlements and apply the total-loser adjustment."""
    slot_results = [
        [SettlementResult(r.seat_index, r.score_delta) for r in results]
        for results in req.slot_results
    ]
    try:
        totals = settle_total(slot_results, req.all_seats)
    except ValueError as e:
        logger.warning(f"Cannot settle total: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return [t.to_dict() for t in totals]


@router.post("/showdown", response_model=ShowdownSchema)
async def showdown(req: ShowdownRequest) -> Dict[str, Any]:
    """
    Evaluate every seat's slots against the board and settle the round.

    Winners of each slot are the seats with the top score, in the order
    the seats were sent.
    """
    community = _parse(req.community)
    seats = [
        SeatHand(
            seat_index=s.seat_index,
            slots={slot_id: _parse(cards) for slot_id, cards in s.slots.items()},
            folded=s.folded,
        )
        for s in req.seats
    ]
    try:
        result = settle_showdown(seats, community)
    except ValueError as e:
        logger.warning(f"Cannot settle showdown: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()
