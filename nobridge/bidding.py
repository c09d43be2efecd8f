"""Bids, the bidding history and the resulting contract."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from nobridge.card import Suit
from nobridge.player import Player


class BidType(IntEnum):
    """Kinds of call that can be made during the auction."""

    PASS = 1
    DOUBLE = 2
    REDOUBLE = 3
    ALERT = 4
    NORMAL = 5
    CONVENTIONAL = 6


@dataclass
class Bid:
    """A single call in the auction."""

    type: BidType
    level: int = 0
    suit: Suit | None = None
    bidder: Player | None = None


@dataclass
class BidEngine:
    """Keeps the ordered history of bids."""

    history: list[Bid] = field(default_factory=list)

    def add(self, bid: Bid) -> None:
        """Append a bid to the history."""
        self.history.append(bid)

    def __iter__(self) -> Iterator[Bid]:
        return iter(self.history)

    def __len__(self) -> int:
        return len(self.history)


@dataclass
class Contract:
    """The final contract reached by the auction."""

    level: int
    suit: Suit | None = None
    declarer: Player | None = None