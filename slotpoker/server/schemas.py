"""
Pydantic schemas for API request/response validation.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


# ============= Request Schemas =============

class ScoreHandRequest(BaseModel):
    """Request to score a five-card hand."""
    cards: List[str] = Field(..., description="Card strings such as 'As', '10h', 'K♥'")


class BestHandRequest(BaseModel):
    """Request to pick the best five of seven cards."""
    cards: List[str]


class PlayerSlotInfoSchema(BaseModel):
    """One player's showdown result for one slot."""
    seat_index: int
    has_played: bool = True
    category: int = Field(..., ge=1, le=9, description="1 High Card .. 9 Straight Flush")
    is_royal: bool = False


class SettleSlotRequest(BaseModel):
    """Request to settle a single slot."""
    players: List[PlayerSlotInfoSchema]
    winner_seats: List[int] = []
    slot_id: int = Field(..., ge=1, le=3)
    strict: bool = True


class SettlementResultSchema(BaseModel):
    """Net point change for one player in one slot."""
    seat_index: int
    score_delta: int


class SettleTotalRequest(BaseModel):
    """Request to combine three slot settlements."""
    slot_results: List[List[SettlementResultSchema]] = Field(..., min_length=3, max_length=3)
    all_seats: List[int]


class SeatHandSchema(BaseModel):
    """Cards one seat placed in each slot."""
    seat_index: int
    slots: Dict[int, List[str]] = {}
    folded: bool = False


class ShowdownRequest(BaseModel):
    """Request to evaluate and settle a full game round."""
    community: List[str]
    seats: List[SeatHandSchema]


# ============= Response Schemas =============

class ScoreSchema(BaseModel):
    """A scored five-card hand."""
    score: int
    hex: str
    category: int
    category_name: str
    description: str


class BestHandSchema(ScoreSchema):
    """The best five-card hand out of seven."""
    is_royal: bool
    cards: List[str]


class SlotSettlementResultSchema(BaseModel):
    """Per-seat outcome of a game round."""
    seat_index: int
    slot1_delta: int
    slot2_delta: int
    slot3_delta: int
    total_loser_delta: int
    total_delta: int
    is_total_loser: bool


class SlotEntrySchema(BaseModel):
    """One seat's evaluated hand in one slot."""
    seat_index: int
    has_played: bool
    best: Optional[BestHandSchema] = None


class SlotShowdownSchema(BaseModel):
    """Entries, winners and deltas for one slot."""
    slot_id: int
    winners: List[int]
    entries: List[SlotEntrySchema]
    results: List[SettlementResultSchema]


class ShowdownSchema(BaseModel):
    """Settlement of a full game round."""
    slots: List[SlotShowdownSchema]
    totals: List[SlotSettlementResultSchema]
