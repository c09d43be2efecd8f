"""A trick: up to four cards played in turn."""

from __future__ import annotations

from dataclasses import dataclass, field

from nobridge.card import Card
from nobridge.player import Player


@dataclass
class Trick:
    """Cards played to one trick and the player who led it."""

    leader: Player | None = None
    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card, player: Player | None = None) -> None:
        """Add a card; the first player given becomes the leader."""
        self.cards.append(card)
        if player is not None and self.leader is None:
            self.leader = player