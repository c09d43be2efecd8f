"""Data model of a Portable Bridge Notation file.

A game has an identification section, an auction section, a play section
and a supplemental section.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Auction:
    """The auction section: its raw text and the individual calls."""

    auction: str = ""
    bids: list[str] = field(default_factory=list)


@dataclass
class Deal:
    """The four hands together with dealer and vulnerability."""

    hands: list[str] = field(default_factory=lambda: ["", "", "", ""])
    dealer: str = ""
    vulnerable: str = ""


@dataclass
class Play:
    """The play section, one entry per trick."""

    tricks: list[str] = field(default_factory=list)


@dataclass
class Game:
    """One game record with its tags and sections."""

    deal: Deal = field(default_factory=Deal)
    auction: Auction = field(default_factory=Auction)
    play: Play = field(default_factory=Play)
    board: int = 0
    result: str = ""
    declarer: str = ""
    contract: str = ""
    scoring: str = ""
    west: str = ""
    north: str = ""
    east: str = ""
    south: str = ""
    event: str = ""
    site: str = ""
    date: str = ""


@dataclass
class Pbn:
    """A collection of games."""

    games: list[Game] = field(default_factory=list)

    def add_game(self, game: Game) -> None:
        """Append a game."""
        self.games.append(game)

    def __iter__(self) -> Iterator[Game]:
        return iter(self.games)

    def __len__(self) -> int:
        return len(self.games)