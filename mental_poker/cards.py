"""Card identifiers and their slot in the canonical deck ordering."""

from __future__ import annotations

from enum import IntEnum, Enum


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"


class Rank(IntEnum):
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


RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

_SUITS = list(Suit)
_RANKS = list(Rank)

DECK_SIZE = len(_SUITS) * len(_RANKS)


class Card:
    __slots__ = ("rank", "suit")

    def __init__(self, rank: Rank, suit: Suit) -> None:
        self.rank = rank
        self.suit = suit

    def __repr__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{self.suit.value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    @property
    def index(self) -> int:
        """Slot of this card in the suit-major deck ordering (0..51)."""
        return _SUITS.index(self.suit) * len(_RANKS) + _RANKS.index(self.rank)

    def to_dict(self) -> dict:
        return {"rank": self.rank.value, "suit": self.suit.value}

    @classmethod
    def from_dict(cls, data: dict) -> Card:
        return cls(Rank(data["rank"]), Suit(data["suit"]))

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Parse 'Ah', 'Ts', '2c' etc."""
        rank_char = s[0].upper()
        suit_char = s[1].lower()
        rank_map = {v: k for k, v in RANK_SYMBOLS.items()}
        return cls(rank_map[rank_char], Suit(suit_char))

    @classmethod
    def from_index(cls, index: int) -> Card:
        if not 0 <= index < DECK_SIZE:
            raise ValueError(f"Card index out of range: {index}")
        suit_idx, rank_idx = divmod(index, len(_RANKS))
        return cls(_RANKS[rank_idx], _SUITS[suit_idx])


def standard_deck() -> list[Card]:
    """All 52 cards in index order. No shuffling happens here."""
    return [Card.from_index(i) for i in range(DECK_SIZE)]
