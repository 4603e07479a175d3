"""
Pytest configuration and shared fixtures for SlotPoker tests.
"""

import pytest
from slotpoker.core.card import Card, Rank, Suit, parse_cards
from slotpoker.core.rules import HandCategory
from slotpoker.core.settlement import PlayerSlotInfo, SettlementResult


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.THREE, Suit.DIAMONDS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.SPADES),
    ]


@pytest.fixture
def six_high_straight():
    """Create the lowest straight above the wheel (2-3-4-5-6)."""
    return parse_cards("2h 3d 4c 5s 6h")


@pytest.fixture
def make_player():
    """Factory for PlayerSlotInfo with played=True by default."""
    def _make(seat_index, category, has_played=True, is_royal=False):
        return PlayerSlotInfo(
            seat_index=seat_index,
            has_played=has_played,
            category=HandCategory(category),
            is_royal=is_royal,
        )
    return _make


@pytest.fixture
def make_results():
    """Factory turning {seat: delta} into a list of SettlementResult."""
    def _make(deltas):
        return [SettlementResult(seat, delta) for seat, delta in deltas.items()]
    return _make
