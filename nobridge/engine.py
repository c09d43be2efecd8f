"""The table engine tying together deck, players, auction and play."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from nobridge.bidding import BidEngine
from nobridge.deck import Deck
from nobridge.player import Player
from nobridge.trick import Trick

SEATS = 4


@dataclass
class PlayEngine:
    """Keeps the tricks played so far."""

    tricks: list[Trick] = field(default_factory=list)

    def add_trick(self, trick: Trick) -> None:
        """Record a played trick."""
        self.tricks.append(trick)


class ScoreEngine:
    """Scoring component of the table."""


class BridgeEngine:
    """Holds the deck, the four seats and the auction, play and scoring."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.deck = Deck(rng)
        self._players: list[Player | None] = [None] * SEATS
        self.bids = BidEngine()
        self.play = PlayEngine()
        self.scoring = ScoreEngine()

    def add_player(self, player: Player) -> None:
        """Place ``player`` into every seat that is still empty."""
        self._players = [
            player if seat is None else seat for seat in self._players
        ]

    def players(self) -> tuple[Player | None, ...]:
        """Return a copy of the four seats."""
        return tuple(self._players)