# nobridge

Building blocks for a contract bridge program. The package has playing cards and a shuffled 52-card deck. It also has simple records for the parts of a game: players, bids, contracts, tricks and the tables that hold them. A set of dataclasses gives the shape of Portable Bridge Notation (PBN) game records.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
nobridge
```

This builds a freshly shuffled deck and prints it as four rows of thirteen cards. Each card is shown as a suit symbol, coloured with terminal escape codes, followed by its rank letter (`2`–`9`, `T`, `J`, `Q`, `K`, `A`). `nobridge --help` shows the usage. The command takes no other options.

## Library use

### Cards and the deck

```python
from nobridge.card import Card, Suit, Rank
from nobridge.deck import Deck

card = Card(Suit.SPADES, Rank.ACE)
print(str(card))       # coloured spade symbol, then "A", then a colour reset

deck = Deck()          # 52 cards, shuffled on creation
len(deck)              # 52
deck.at(0)             # the Card at index 0, or None for an index out of range
hands = deck.deal()    # four lists of thirteen cards, in deck order
deck.shuffle()         # 256 random swaps of card pairs
deck.print()           # thirteen cards per line, to stdout or deck.print(file=...)
for c in deck: ...     # iterate over the cards
```

`Suit` and `Rank` are integer enums: suits run `CLUBS` (1) to `SPADES` (4), and ranks run `TWO` (2) to `ACE` (14). `Card` turns plain integers into these enums and raises `ValueError` for values outside them.

By default the deck draws from the system's random source. Pass your own generator to get a repeatable order:

```python
import random
from nobridge.deck import Deck

deck = Deck(rng=random.Random(7))
```

### Game pieces

- `nobridge.player`: `Player` (a `type`, a `direction` and a `hand` of cards), `PlayerType` (`HUMAN`, `COMPUTER`) and `Direction` (`WEST`, `NORTH`, `EAST`, `SOUTH`).
- `nobridge.bidding`: `BidType`, `Bid`, `Contract`, and `BidEngine`, an ordered bid history with `add(bid)`, iteration and `len()`.
- `nobridge.trick`: `Trick`. `add_card(card, player=None)` appends the card. The first player given becomes the trick's `leader`.
- `nobridge.engine`:
  - `BridgeEngine` holds a `deck`, four seats, `bids` (a `BidEngine`), `play` (a `PlayEngine`) and `scoring` (a `ScoreEngine`).
  - `add_player(player)` places the player into every seat that is still empty. `players()` returns the four seats as a tuple.
  - `PlayEngine` keeps the played tricks through `add_trick(trick)`.
- `nobridge.pbn`: `Pbn` is a collection of `Game` records, with `add_game(game)`, iteration and `len()`. Each `Game` holds a `Deal`, an `Auction`, a `Play`, and string fields for board, result, declarer, contract, scoring, the four players, event, site and date.
- `nobridge.storage`: compact records `CardT`, `HandT`, `BidT` and `PlayT`. Numeric fields of `CardT` and `HandT` must fit in one byte, and a `HandT` must hold exactly thirteen cards. Both raise `ValueError` otherwise.

## What the package does not do

- It does not read or write PBN files. The `nobridge.pbn` classes only hold game data in memory.
- It does not score. `ScoreEngine` has no scoring method.
- It has no auction rules. `BidEngine` records bids without checking whether they are legal, and nothing turns an auction into a `Contract`.
- It has no rules of play. Tricks do not check following suit and do not pick a winner.
- It does not compute hand features. `HandT` stores values such as `hcp` or `is_balanced` but does not derive them from the cards.
- The command line only shows a shuffled deck. There is no interactive game.