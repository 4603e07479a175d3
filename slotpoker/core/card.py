"""
Card model for three-slot poker.

A card is an immutable (rank, suit) value. Ranks carry their poker value
directly (2..14, Ace high), so hand scoring can read ``int(card.rank)``
without a lookup table.
"""

from __future__ import annotations
from typing import Iterable, List, Union
from enum import IntEnum


class Suit(IntEnum):
    """Card suits."""
    SPADES = 0    # ♠
    HEARTS = 1    # ♥
    CLUBS = 2     # ♣
    DIAMONDS = 3  # ♦


class Rank(IntEnum):
    """Card ranks, valued 2 (lowest) to 14 (Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
}

SUIT_CHARS = {
    Suit.SPADES: "s",
    Suit.HEARTS: "h",
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
}

# Labels as printed on the card face
RANK_LABELS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

LABEL_TO_RANK = {v: k for k, v in RANK_LABELS.items()}
LABEL_TO_RANK["T"] = Rank.TEN
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


class Card:
    """
    A playing card.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), "10h", "Td" or "K♥"

    Cards are compared for equality by (rank, suit) and ordered by rank
    only, which is all sorting inside the scorer needs.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "_rank", Rank(rank))
        object.__setattr__(self, "_suit", Suit(suit))

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __reduce__(self):
        return (self.__class__, (self._rank, self._suit))

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank_value(self) -> int:
        """Poker value of the rank, 2..14 with the Ace high."""
        return int(self._rank)

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        The suit is the last character (letter or symbol), everything
        before it is the rank label.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in LABEL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(LABEL_TO_RANK[rank_part], suit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return False

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __lt__(self, other: Card) -> bool:
        return self._rank < other._rank

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_LABELS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_LABELS[self._rank]}{SUIT_CHARS[self._suit]}"

    @property
    def color(self) -> str:
        return "red" if self._suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_LABELS[self._rank],
            "suit": SUIT_SYMBOLS[self._suit],
            "text": str(self),
            "color": self.color,
        }


def parse_cards(cards: Union[str, Iterable[str]]) -> List[Card]:
    """
    Parse several cards.

    Accepts a space-separated string ("As Kh 10d") or an iterable of
    single-card strings (["As", "K♥"]).
    """
    if isinstance(cards, str):
        cards = cards.split()
    return [Card.from_string(c) for c in cards]


def format_cards(cards: Iterable[Card]) -> str:
    """Render cards as a space-separated string, e.g. 'A♠ K♠ Q♠'."""
    return " ".join(str(c) for c in cards)
