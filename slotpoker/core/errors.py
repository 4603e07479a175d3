"""
Exceptions raised by the scoring and settlement core.

All of them derive from ValueError, so callers that already guard
card parsing with ``except ValueError`` also catch these.
"""


class SlotPokerError(ValueError):
    """Base class for scoring and settlement failures."""


class InvalidHandSize(SlotPokerError):
    """A scoring call received the wrong number of cards."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Hand must contain exactly {expected} cards, got {got}")


class WinnerNotFound(SlotPokerError):
    """A declared winner seat has no matching active player."""

    def __init__(self, seat_index: int):
        self.seat_index = seat_index
        super().__init__(f"Winner seat {seat_index} is not among the players who played")


class WinnerStrengthMismatch(SlotPokerError):
    """Declared co-winners of a slot do not share the same strength."""

    def __init__(self, seat_index: int, expected: int, got: int):
        self.seat_index = seat_index
        self.expected = expected
        self.got = got
        super().__init__(
            f"Winner seat {seat_index} has strength {got}, expected {expected}"
        )


class DuplicateCard(SlotPokerError):
    """The same card appears more than once in a showdown."""

    def __init__(self, card):
        self.card = card
        super().__init__(f"Duplicate card: {card}")
