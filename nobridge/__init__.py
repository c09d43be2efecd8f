"""Contract bridge building blocks: cards, a shuffled deck, players, bids, tricks and PBN game records."""

__version__ = "0.1.0"