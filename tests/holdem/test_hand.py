import pytest

from data.types.hand_rank import HandCategory
from exceptions import InvalidHandError
from holdem.hand import Hand, join_cards
from tests.test_helpers import cards


class TestHand:
    def test_empty_hand(self):
        hand = Hand()
        assert len(hand) == 0
        assert not hand.can_evaluate()
        assert hand.describe() == "not enough cards yet"

    def test_add_cards_and_evaluate(self):
        hand = Hand(cards("Qs Qh"))
        hand.add_cards(cards("Qd 4s 4h"))
        assert hand.can_evaluate()
        assert hand.evaluate().category == HandCategory.FULL_HOUSE
        assert hand.describe() == "a full house, Queens over 4s"

    def test_adding_cards_refreshes_evaluation(self):
        hand = Hand(cards("2s 2h 9d Kc 5h"))
        assert hand.evaluate().category == HandCategory.ONE_PAIR
        hand.add_cards(cards("2d"))
        assert hand.evaluate().category == HandCategory.THREE_OF_KIND

    def test_add_cards_rejects_non_cards(self):
        hand = Hand()
        with pytest.raises(TypeError):
            hand.add_cards(None)
        with pytest.raises(TypeError):
            hand.add_cards(["As"])

    def test_more_than_seven_cards(self):
        hand = Hand(cards("As Ks Qs Js Ts 9s 8s"))
        with pytest.raises(InvalidHandError):
            hand.add_cards(cards("7s"))

    def test_evaluate_needs_five_cards(self):
        with pytest.raises(InvalidHandError):
            Hand(cards("As Ks")).evaluate()

    def test_clear(self):
        hand = Hand(cards("As Ks Qs Js Ts"))
        hand.evaluate()
        hand.clear()
        assert len(hand) == 0
        assert not hand.can_evaluate()

    def test_comparison_operators(self):
        flush = Hand(cards("Ad Jd 8d 6d 2d"))
        pair = Hand(cards("2s 2h Ad Kc 9h"))
        assert flush > pair
        assert pair < flush
        assert flush.compare_to(pair) == 1
        assert pair.compare_to(Hand(cards("2c 2d As Kd 9s"))) == 0

    def test_show_reads_like_the_table(self):
        hand = Hand(cards("As Th 2c"))
        assert hand.show() == "Ace of Spades, 10 of Hearts, and 2 of Clubs"
        assert str(hand) == hand.show()


def test_join_cards():
    assert join_cards([]) == "no cards"
    assert join_cards(cards("As")) == "Ace of Spades"
    assert join_cards(cards("As Kd")) == "Ace of Spades, and King of Diamonds"
