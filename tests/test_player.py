from nobridge.card import Card, Rank, Suit
from nobridge.player import Direction, Player, PlayerType


def test_enum_values_follow_source():
    player = Player(PlayerType(2), Direction(1))
    assert player.type is PlayerType.COMPUTER
    assert player.direction is Direction.WEST
    assert Player(PlayerType(1), Direction(4)).direction is Direction.SOUTH
    assert [d.name for d in Direction] == ["WEST", "NORTH", "EAST", "SOUTH"]


def test_default_hand_is_empty_and_independent():
    first = Player()
    second = Player()
    first.hand.append(Card(Suit.SPADES, Rank.ACE))
    assert len(first.hand) == 1
    assert second.hand == []


def test_player_holds_given_fields():
    hand = [Card(Suit.CLUBS, Rank.TWO)]
    player = Player(PlayerType.COMPUTER, Direction.WEST, hand)
    assert player.type is PlayerType.COMPUTER
    assert player.direction is Direction.WEST
    assert player.hand == hand