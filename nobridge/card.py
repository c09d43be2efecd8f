"""Playing cards: suits, ranks and their coloured terminal rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Card suits in ascending bridge order."""

    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4


class Rank(IntEnum):
    """Card ranks, valued by their pip count with ace high."""

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


SUIT_TEXTS: dict[Suit, str] = {
    Suit.CLUBS: "\033[32m♣",
    Suit.DIAMONDS: "\033[31m♦",
    Suit.HEARTS: "\033[31m♥",
    Suit.SPADES: "\033[35m♠",
}

RANK_TEXTS: dict[Rank, str] = {
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

RESET = "\033[0m"


@dataclass
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        self.suit = Suit(self.suit)
        self.rank = Rank(self.rank)

    def __str__(self) -> str:
        return f"{SUIT_TEXTS[self.suit]}{RANK_TEXTS[self.rank]}{RESET}"