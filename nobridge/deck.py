"""A shuffled 52-card deck."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from typing import TextIO

from nobridge.card import Card, Rank, Suit

DECK_SIZE = 52
HAND_SIZE = 13
HANDS = 4
SHUFFLE_SWAPS = 256


class Deck:
    """Fifty-two cards, shuffled on creation."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.SystemRandom()
        self._cards = [Card(suit, rank) for suit in Suit for rank in Rank]
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle by swapping randomly chosen pairs of cards."""
        for _ in range(SHUFFLE_SWAPS):
            a = self._rng.randint(0, DECK_SIZE - 1)
            b = self._rng.randint(0, DECK_SIZE - 1)
            if a != b:
                self._cards[a], self._cards[b] = self._cards[b], self._cards[a]

    def print(self, file: TextIO | None = None) -> None:
        """Write the deck as four rows of thirteen cards."""
        out = file if file is not None else sys.stdout
        for i, card in enumerate(self._cards):
            if i % HAND_SIZE == 0:
                print(file=out)
            print(card, end=" ", file=out)
        print(file=out)

    def deal(self) -> list[list[Card]]:
        """Split the deck into four hands of thirteen cards."""
        return [
            self._cards[start : start + HAND_SIZE]
            for start in range(0, HANDS * HAND_SIZE, HAND_SIZE)
        ]

    def at(self, index: int) -> Card | None:
        """Return the card at ``index``, or None when it is out of range."""
        if 0 <= index < len(self._cards):
            return self._cards[index]
        return None

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)