"""Compact records for storing cards, hands, bids and play."""

from __future__ import annotations

from dataclasses import dataclass, field

HAND_SIZE = 13
TRICKS = 13
CARDS_PER_TRICK = 4


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")


@dataclass
class BidT:
    """Stored record of a bid."""


@dataclass
class CardT:
    """A card stored as two one-byte values."""

    suit: int = 0
    rank: int = 0

    def __post_init__(self) -> None:
        _check_byte("suit", self.suit)
        _check_byte("rank", self.rank)


@dataclass
class HandT:
    """A stored hand with its summary features."""

    hcp: int = 0
    spade_count: int = 0
    heart_count: int = 0
    diamond_count: int = 0
    club_count: int = 0
    longest_suit: int = 0
    is_balanced: bool = False
    has_4_card_major: bool = False
    hand: list[CardT] = field(
        default_factory=lambda: [CardT() for _ in range(HAND_SIZE)]
    )

    def __post_init__(self) -> None:
        for name in (
            "hcp",
            "spade_count",
            "heart_count",
            "diamond_count",
            "club_count",
            "longest_suit",
        ):
            _check_byte(name, getattr(self, name))
        if len(self.hand) != HAND_SIZE:
            raise ValueError(f"a hand holds {HAND_SIZE} cards")


@dataclass
class PlayT:
    """Stored play: thirteen tricks of four cards."""

    tricks: list[list[CardT]] = field(
        default_factory=lambda: [
            [CardT() for _ in range(CARDS_PER_TRICK)] for _ in range(TRICKS)
        ]
    )