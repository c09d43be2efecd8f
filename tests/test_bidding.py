from nobridge.bidding import Bid, BidEngine, BidType, Contract
from nobridge.card import Suit
from nobridge.player import Direction, Player


def test_bid_type_values():
    engine = BidEngine()
    bids = [Bid(BidType(value)) for value in range(1, 7)]
    for bid in bids:
        engine.add(bid)
    assert len(engine) == 6
    assert list(engine) == bids
    assert [b.name for b in BidType] == [
        "PASS",
        "DOUBLE",
        "REDOUBLE",
        "ALERT",
        "NORMAL",
        "CONVENTIONAL",
    ]


def test_engine_starts_empty():
    engine = BidEngine()
    assert len(engine) == 0
    assert list(engine) == []


def test_engine_keeps_order():
    engine = BidEngine()
    bids = [
        Bid(BidType.NORMAL, 1, Suit.CLUBS),
        Bid(BidType.PASS),
        Bid(BidType.DOUBLE),
    ]
    for bid in bids:
        engine.add(bid)
    assert len(engine) == 3
    assert list(engine) == bids


def test_bid_records_bidder():
    north = Player(direction=Direction.NORTH)
    bid = Bid(BidType.NORMAL, 3, Suit.HEARTS, north)
    assert bid.bidder is north
    assert bid.level == 3


def test_contract_fields():
    declarer = Player(direction=Direction.SOUTH)
    contract = Contract(4, Suit.SPADES, declarer)
    assert contract.level == 4
    assert contract.suit is Suit.SPADES
    assert contract.declarer is declarer