"""
Tests for slot settlement and total-loser settlement.

These tests verify:
- Unit loss = winner strength x slot multiplier
- Pot splitting with the remainder to the first winner
- Players who did not play a slot are left out
- The 60-point total-loser adjustment
- Every settlement is zero-sum
"""

import pytest
from slotpoker.core.errors import WinnerNotFound, WinnerStrengthMismatch
from slotpoker.core.rules import HandCategory, get_strength, get_slot_multiplier, split_evenly
from slotpoker.core.settlement import (
    PlayerSlotInfo, SettlementResult, settle_slot, settle_total,
)


def _delta(results, seat):
    return next(r.score_delta for r in results if r.seat_index == seat)


def _total(results, seat):
    return next(r for r in results if r.seat_index == seat)


class TestRules:
    """Tests for the strength and multiplier tables."""

    @pytest.mark.parametrize("category, strength", [
        (HandCategory.HIGH_CARD, 1),
        (HandCategory.ONE_PAIR, 1),
        (HandCategory.TWO_PAIR, 2),
        (HandCategory.THREE_OF_A_KIND, 3),
        (HandCategory.STRAIGHT, 4),
        (HandCategory.FLUSH, 5),
        (HandCategory.FULL_HOUSE, 6),
        (HandCategory.FOUR_OF_A_KIND, 10),
        (HandCategory.STRAIGHT_FLUSH, 15),
    ])
    def test_base_strength(self, category, strength):
        assert get_strength(category) == strength

    def test_royal_strength(self):
        assert get_strength(HandCategory.STRAIGHT_FLUSH, is_royal=True) == 20
        # Royal flag means nothing outside straight flushes
        assert get_strength(HandCategory.FLUSH, is_royal=True) == 5

    def test_slot_multipliers(self):
        assert get_slot_multiplier(1) == 5
        assert get_slot_multiplier(2) == 3
        assert get_slot_multiplier(3) == 1
        assert get_slot_multiplier(7) == 1

    def test_split_evenly(self):
        assert split_evenly(15, 2) == [8, 7]
        assert split_evenly(60, 7) == [12, 8, 8, 8, 8, 8, 8]
        assert split_evenly(0, 3) == [0, 0, 0]
        with pytest.raises(ValueError):
            split_evenly(10, 0)


class TestSettleSlot:
    """Tests for settle_slot."""

    def test_single_winner_slot_1(self, make_player):
        """Four of a kind (10) x slot 1 (5) = 50."""
        players = [
            make_player(1, HandCategory.FOUR_OF_A_KIND),
            make_player(2, HandCategory.FULL_HOUSE),
        ]
        result = settle_slot(players, [1], 1)

        assert _delta(result, 1) == 50
        assert _delta(result, 2) == -50

    def test_split_remainder_to_first(self, make_player):
        """Flush (5) x slot 2 (3) = 15, split 8 / 7."""
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.FLUSH),
            make_player(3, HandCategory.STRAIGHT),
        ]
        result = settle_slot(players, [1, 2], 2)

        assert _delta(result, 3) == -15
        assert _delta(result, 1) == 8
        assert _delta(result, 2) == 7

    def test_remainder_follows_winner_order(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.FLUSH),
            make_player(3, HandCategory.STRAIGHT),
        ]
        result = settle_slot(players, [2, 1], 2)

        assert _delta(result, 2) == 8
        assert _delta(result, 1) == 7

    def test_royal_flush_slot_3(self, make_player):
        players = [
            make_player(1, HandCategory.STRAIGHT_FLUSH, is_royal=True),
            make_player(2, HandCategory.STRAIGHT_FLUSH),
        ]
        result = settle_slot(players, [1], 3)

        assert _delta(result, 1) == 20
        assert _delta(result, 2) == -20

    def test_non_player_untouched(self, make_player):
        players = [
            make_player(1, HandCategory.ONE_PAIR),
            make_player(2, HandCategory.HIGH_CARD),
            make_player(3, HandCategory.HIGH_CARD, has_played=False),
        ]
        result = settle_slot(players, [1], 3)

        assert _delta(result, 1) == 1
        assert _delta(result, 2) == -1
        assert _delta(result, 3) == 0

    def test_multiple_losers(self, make_player):
        """Each loser pays the unit loss; the winner takes the whole pot."""
        players = [
            make_player(0, HandCategory.THREE_OF_A_KIND),
            make_player(1, HandCategory.TWO_PAIR),
            make_player(2, HandCategory.ONE_PAIR),
            make_player(3, HandCategory.HIGH_CARD),
        ]
        result = settle_slot(players, [0], 1)

        assert [r.score_delta for r in result] == [45, -15, -15, -15]

    def test_full_chop_is_zero(self, make_player):
        players = [
            make_player(1, HandCategory.HIGH_CARD),
            make_player(2, HandCategory.HIGH_CARD),
        ]
        result = settle_slot(players, [1, 2], 1)

        assert [r.score_delta for r in result] == [0, 0]

    def test_no_winners_is_zero(self, make_player):
        players = [make_player(1, HandCategory.FLUSH), make_player(2, HandCategory.ONE_PAIR)]
        result = settle_slot(players, [], 1)

        assert [r.score_delta for r in result] == [0, 0]

    def test_nobody_played_is_zero(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH, has_played=False),
            make_player(2, HandCategory.ONE_PAIR, has_played=False),
        ]
        result = settle_slot(players, [1], 1)

        assert [r.score_delta for r in result] == [0, 0]

    def test_result_order_matches_players(self, make_player):
        players = [
            make_player(5, HandCategory.HIGH_CARD),
            make_player(2, HandCategory.FLUSH),
            make_player(8, HandCategory.HIGH_CARD, has_played=False),
        ]
        result = settle_slot(players, [2], 2)

        assert [r.seat_index for r in result] == [5, 2, 8]
        assert all(isinstance(r, SettlementResult) for r in result)

    def test_winner_not_found(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.ONE_PAIR),
        ]
        with pytest.raises(WinnerNotFound) as exc_info:
            settle_slot(players, [9], 1)
        assert exc_info.value.seat_index == 9

    def test_winner_that_did_not_play(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH, has_played=False),
            make_player(2, HandCategory.ONE_PAIR),
        ]
        with pytest.raises(WinnerNotFound):
            settle_slot(players, [1], 1)

    def test_second_winner_not_found(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.ONE_PAIR),
        ]
        with pytest.raises(WinnerNotFound):
            settle_slot(players, [1, 4], 1)

    def test_inactive_co_winner(self, make_player):
        """A listed co-winner who did not play this slot is rejected."""
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.FLUSH, has_played=False),
            make_player(3, HandCategory.ONE_PAIR),
        ]
        with pytest.raises(WinnerNotFound) as exc_info:
            settle_slot(players, [1, 2], 1)
        assert exc_info.value.seat_index == 2

    def test_duplicate_seat_rejected(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.HIGH_CARD),
            make_player(2, HandCategory.HIGH_CARD),
        ]
        with pytest.raises(ValueError, match="Duplicate seat"):
            settle_slot(players, [1], 1)

    def test_strict_rejects_unequal_winners(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.STRAIGHT),
            make_player(3, HandCategory.HIGH_CARD),
        ]
        with pytest.raises(WinnerStrengthMismatch) as exc_info:
            settle_slot(players, [1, 2], 1)
        assert exc_info.value.seat_index == 2
        assert exc_info.value.expected == 5
        assert exc_info.value.got == 4

    def test_strict_allows_equal_strength_categories(self, make_player):
        """High card and one pair share strength 1."""
        players = [
            make_player(1, HandCategory.ONE_PAIR),
            make_player(2, HandCategory.HIGH_CARD),
            make_player(3, HandCategory.HIGH_CARD),
        ]
        result = settle_slot(players, [1, 2], 3)

        assert [r.score_delta for r in result] == [1, 0, -1]

    def test_permissive_uses_first_winner(self, make_player):
        players = [
            make_player(1, HandCategory.FLUSH),
            make_player(2, HandCategory.STRAIGHT),
            make_player(3, HandCategory.HIGH_CARD),
        ]
        result = settle_slot(players, [1, 2], 1, strict=False)

        # Flush (5) x slot 1 (5) = 25, split 13 / 12
        assert [r.score_delta for r in result] == [13, 12, -25]

    @pytest.mark.parametrize("slot_id", [1, 2, 3])
    def test_zero_sum(self, make_player, slot_id):
        players = [
            make_player(0, HandCategory.FULL_HOUSE),
            make_player(1, HandCategory.FULL_HOUSE),
            make_player(2, HandCategory.FULL_HOUSE),
            make_player(3, HandCategory.TWO_PAIR),
            make_player(4, HandCategory.ONE_PAIR),
            make_player(5, HandCategory.FLUSH, has_played=False),
        ]
        result = settle_slot(players, [2, 0, 1], slot_id)

        assert sum(r.score_delta for r in result) == 0
        assert _delta(result, 5) == 0


class TestSettleTotal:
    """Tests for settle_total."""

    def test_one_total_loser(self, make_results):
        slot_results = [
            make_results({1: 50, 2: -50, 3: 0}),
            make_results({1: -30, 2: 30, 3: 0}),
            make_results({1: 0, 2: 0, 3: 0}),
        ]
        result = settle_total(slot_results, [1, 2, 3])

        assert _total(result, 1).total_delta == 50
        assert _total(result, 2).total_delta == 10
        assert _total(result, 3).total_delta == -60
        assert _total(result, 3).total_loser_delta == -60
        assert _total(result, 1).total_loser_delta == 30
        assert _total(result, 2).total_loser_delta == 30
        assert _total(result, 3).is_total_loser
        assert not _total(result, 1).is_total_loser
        assert sum(r.total_delta for r in result) == 0

    def test_everyone_total_loser(self, make_results):
        slot_results = [make_results({1: 0, 2: 0}) for _ in range(3)]
        result = settle_total(slot_results, [1, 2])

        assert [r.total_delta for r in result] == [0, 0]
        assert all(r.is_total_loser for r in result)
        assert all(r.total_loser_delta == 0 for r in result)

    def test_no_total_loser(self, make_results):
        slot_results = [
            make_results({1: 50, 2: -50}),
            make_results({1: -30, 2: 30}),
            make_results({1: 0, 2: 0}),
        ]
        result = settle_total(slot_results, [1, 2])

        assert _total(result, 1).total_delta == 20
        assert _total(result, 2).total_delta == -20
        assert not any(r.is_total_loser for r in result)

    def test_one_winner_two_total_losers(self, make_results):
        slot_results = [
            make_results({1: 50, 2: -25, 3: -25}),
            make_results({1: 0, 2: 0, 3: 0}),
            make_results({1: 0, 2: 0, 3: 0}),
        ]
        result = settle_total(slot_results, [1, 2, 3])

        assert _total(result, 1).total_delta == 110
        assert _total(result, 2).total_delta == -55
        assert _total(result, 3).total_delta == -55

    def test_penalty_remainder_to_first_total_loser(self, make_results):
        """60 over 7 total losers: first pays 12, the rest 8."""
        seats = list(range(8))
        first = {seat: 0 for seat in seats}
        first[0] = 7
        for seat in range(1, 8):
            first[seat] = -1
        slot_results = [make_results(first), make_results({}), make_results({})]
        result = settle_total(slot_results, seats)

        assert _total(result, 0).total_loser_delta == 60
        assert _total(result, 1).total_loser_delta == -12
        assert all(_total(result, s).total_loser_delta == -8 for s in range(2, 8))
        assert sum(r.total_delta for r in result) == 0

    def test_bonus_remainder_follows_seat_order(self, make_results):
        """Bonus of 60 over 7 winners goes 12 to the first listed seat."""
        seats = [7, 6, 5, 4, 3, 2, 1, 0]
        first = {seat: 1 for seat in range(1, 8)}
        first[0] = -7
        slot_results = [make_results(first), make_results({}), make_results({})]
        result = settle_total(slot_results, seats)

        assert [r.seat_index for r in result] == seats
        assert _total(result, 7).total_loser_delta == 12
        assert _total(result, 1).total_loser_delta == 8
        assert _total(result, 0).total_loser_delta == -60

    def test_absent_seat_counts_as_zero(self, make_results):
        """Seat 3 only appears in slot 2."""
        slot_results = [
            make_results({1: 5, 2: -5}),
            make_results({1: -3, 2: -3, 3: 6}),
            make_results({1: 1, 2: -1}),
        ]
        result = settle_total(slot_results, [1, 2, 3])

        seat3 = _total(result, 3)
        assert (seat3.slot1_delta, seat3.slot2_delta, seat3.slot3_delta) == (0, 6, 0)
        assert _total(result, 2).is_total_loser
        assert _total(result, 2).total_delta == -5 - 3 - 1 - 60
        assert sum(r.total_delta for r in result) == 0

    def test_total_is_sum_of_parts(self, make_results):
        slot_results = [
            make_results({1: 50, 2: -50, 3: 0}),
            make_results({1: -30, 2: 30, 3: 0}),
            make_results({1: 4, 2: -2, 3: -2}),
        ]
        for r in settle_total(slot_results, [1, 2, 3]):
            assert r.total_delta == (
                r.slot1_delta + r.slot2_delta + r.slot3_delta + r.total_loser_delta
            )

    def test_requires_three_slots(self, make_results):
        with pytest.raises(ValueError):
            settle_total([make_results({1: 0})], [1])

    def test_duplicate_seat_rejected(self, make_results):
        slot_results = [
            make_results({1: 5, 2: -5}),
            make_results({1: 0, 2: 0}),
            make_results({1: 0, 2: 0}),
        ]
        with pytest.raises(ValueError, match="Duplicate seat"):
            settle_total(slot_results, [1, 2, 2])


class TestFullRound:
    """Slot settlement feeding total settlement."""

    def test_round_is_zero_sum(self, make_player):
        slots = {
            1: ([make_player(0, HandCategory.FLUSH), make_player(1, HandCategory.FLUSH),
                 make_player(2, HandCategory.STRAIGHT), make_player(3, HandCategory.ONE_PAIR)], [0, 1]),
            2: ([make_player(0, HandCategory.TWO_PAIR), make_player(1, HandCategory.FULL_HOUSE),
                 make_player(2, HandCategory.HIGH_CARD), make_player(3, HandCategory.HIGH_CARD, has_played=False)], [1]),
            3: ([make_player(0, HandCategory.ONE_PAIR), make_player(1, HandCategory.HIGH_CARD),
                 make_player(2, HandCategory.HIGH_CARD), make_player(3, HandCategory.HIGH_CARD)], [0]),
        }
        slot_results = [settle_slot(players, winners, slot_id) for slot_id, (players, winners) in slots.items()]
        for results in slot_results:
            assert sum(r.score_delta for r in results) == 0

        totals = settle_total(slot_results, [0, 1, 2, 3])
        assert sum(r.total_delta for r in totals) == 0
        assert [r.is_total_loser for r in totals] == [False, False, True, True]
        assert [r.total_loser_delta for r in totals] == [30, 30, -30, -30]
