"""Players sitting at the bridge table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from nobridge.card import Card


class PlayerType(IntEnum):
    """Who controls a seat."""

    HUMAN = 1
    COMPUTER = 2


class Direction(IntEnum):
    """Compass positions around the table."""

    WEST = 1
    NORTH = 2
    EAST = 3
    SOUTH = 4


@dataclass
class Player:
    """A player with a seat and a hand of cards."""

    type: PlayerType = PlayerType.HUMAN
    direction: Direction = Direction.NORTH
    hand: list[Card] = field(default_factory=list)