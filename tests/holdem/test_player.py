from unittest.mock import Mock

import pytest

from data.states.player_state import PlayerState
from holdem.player import Player
from tests.test_helpers import cards


class TestPlayer:
    @pytest.fixture
    def player(self):
        return Player("TestPlayer", 50)

    def test_player_initialization(self, player):
        """Test that a player is initialized with correct default values"""
        assert player.name == "TestPlayer"
        assert player.chips == 50
        assert player.total_bet == 0
        assert player.folded is False
        assert player.is_dealer is False
        assert player.hole_cards == []
        assert not player.is_all_in

    @pytest.mark.parametrize("name", ["", "   "])
    def test_invalid_name(self, name):
        with pytest.raises(ValueError):
            Player(name, 50)

    def test_negative_chips(self):
        with pytest.raises(ValueError):
            Player("Bad", -1)

    def test_place_bet_normal(self, player):
        assert player.place_bet(20) == 20
        assert player.chips == 30
        assert player.total_bet == 20

    def test_place_bet_capped_at_stack(self, player):
        """Asking for more than the stack puts the player all-in."""
        assert player.place_bet(80) == 50
        assert player.chips == 0
        assert player.total_bet == 50
        assert player.is_all_in
        assert not player.can_act

    def test_negative_bet(self, player):
        with pytest.raises(ValueError):
            player.place_bet(-5)

    def test_call_adds_only_the_difference(self, player):
        player.place_bet(2)
        assert player.call(10) == 8
        assert player.total_bet == 10
        assert player.call(10) == 0

    def test_raise_bet_calls_then_raises(self, player):
        player.place_bet(2)
        assert player.raise_bet(10, 5) == 13
        assert player.total_bet == 15
        assert player.chips == 35

    def test_fold(self, player):
        player.fold()
        assert player.folded
        assert not player.can_act
        assert not player.is_all_in

    def test_collect(self, player):
        player.collect(15)
        assert player.chips == 65
        with pytest.raises(ValueError):
            player.collect(-1)

    def test_reset_for_new_round(self, player):
        player.take_card(cards("As")[0])
        player.place_bet(10)
        player.fold()
        player.total_bet = 0
        player.reset_for_new_round()
        assert player.hole_cards == []
        assert player.total_bet == 0
        assert not player.folded

    def test_hand_with_community(self, player):
        for hole in cards("As Ah"):
            player.take_card(hole)
        hand = player.hand_with(cards("Ad 7c 2h"))
        assert len(hand) == 5
        assert hand.describe() == "a three-of-a-kind of Aces"

    def test_decide_action_not_implemented(self, player):
        with pytest.raises(NotImplementedError):
            player.decide_action(Mock())

    def test_get_state(self, player):
        player.take_card(cards("Ks")[0])
        player.place_bet(5)
        state = player.get_state()
        assert isinstance(state, PlayerState)
        assert state.name == "TestPlayer"
        assert state.chips == 45
        assert state.total_bet == 5
        assert state.hand is None

        private = player.get_state(private_attributes=True)
        assert private.hand == ["King of Spades"]

    def test_state_is_frozen(self, player):
        state = player.get_state()
        with pytest.raises(Exception):
            state.chips = 10

    def test_equality_by_name(self):
        assert Player("Same", 10) == Player("Same", 40)
        assert Player("Same", 10) != Player("Other", 10)
        assert len({Player("Same", 10), Player("Same", 40)}) == 1
