import pytest

from exceptions import InvalidGameStateError
from holdem.player import Player
from holdem.table import Table
from tests.test_helpers import make_players


def test_table_initialization(three_players):
    """The last seat starts with the dealer flag so seat 0 deals first."""
    table = Table(three_players)
    assert table.players == three_players
    assert table.dealer_index == 2
    assert [p.is_dealer for p in table] == [False, False, True]
    assert len(table) == 3


def test_empty_table_rejected():
    with pytest.raises(InvalidGameStateError):
        Table([])


def test_duplicate_names_rejected():
    with pytest.raises(InvalidGameStateError):
        Table([Player("Ann", 50), Player("Ann", 50)])


def test_rotate_dealer_wraps(three_players):
    """Exactly one dealer flag, moving one seat per rotation."""
    table = Table(three_players)
    assert table.rotate_dealer() is three_players[0]
    assert table.rotate_dealer() is three_players[1]
    assert table.rotate_dealer() is three_players[2]
    assert table.rotate_dealer() is three_players[0]
    assert sum(p.is_dealer for p in table) == 1


def test_blind_positions(three_players):
    table = Table(three_players)
    table.rotate_dealer()
    assert table.small_blind_index == 1
    assert table.big_blind_index == 2


def test_heads_up_dealer_posts_big_blind():
    table = Table(make_players(50, 50))
    table.rotate_dealer()
    assert table.dealer_index == 0
    assert table.small_blind_index == 1
    assert table.big_blind_index == 0


def test_showdown_order_starts_left_of_dealer(three_players):
    table = Table(three_players)
    table.rotate_dealer()
    assert [p.name for p in table.showdown_order()] == ["P1", "P2", "P0"]


def test_player_queries(three_players):
    table = Table(three_players)
    three_players[0].fold()
    three_players[1].place_bet(50)
    assert table.active_players() == [three_players[2]]
    assert table.in_hand_players() == [three_players[1], three_players[2]]
    assert table.all_in_players() == [three_players[1]]
    assert table.folded_players() == [three_players[0]]


def test_contributions_and_total(three_players):
    table = Table(three_players)
    three_players[0].place_bet(5)
    three_players[2].place_bet(7)
    assert table.contributions() == {"P0": 5, "P1": 0, "P2": 7}
    assert table.total_chips() == 150


def test_remove_broke_players():
    players = make_players(10, 0, 30, 0)
    table = Table(players)
    removed = table.remove_broke_players()
    assert [p.name for p in removed] == ["P1", "P3"]
    assert [p.name for p in table] == ["P0", "P2"]


def test_removing_the_dealer_keeps_rotation():
    """When the dealer busts, the next rotation gives the button to the next live seat."""
    players = make_players(10, 20, 30)
    table = Table(players)
    table.rotate_dealer()
    table.rotate_dealer()  # P1 deals
    players[1].chips = 0
    table.remove_broke_players()
    assert sum(p.is_dealer for p in table) == 1
    assert table.dealer.name == "P0"
    assert table.rotate_dealer().name == "P2"


def test_nothing_to_remove(three_players):
    table = Table(three_players)
    assert table.remove_broke_players() == []
    assert len(table) == 3


def test_opponent_states_are_hidden_snapshots(three_players):
    """Agents see the other seats as frozen snapshots without hole cards."""
    table = Table(three_players)
    viewer, folder, all_in = three_players
    folder.fold()
    all_in.place_bet(50)

    states = table.opponent_states(viewer)

    assert [s.name for s in states] == [folder.name, all_in.name]
    assert states[0].folded and not states[0].is_all_in
    assert states[1].is_all_in and states[1].total_bet == 50
    assert all(s.hand is None for s in states)
    assert all(s is not p for s, p in zip(states, three_players[1:]))
