import pytest

from data.enums import Suit
from holdem.card import Card, rank_name


def test_card_string_uses_face_names():
    assert str(Card(14, Suit.SPADES)) == "Ace of Spades"
    assert str(Card(12, Suit.HEARTS)) == "Queen of Hearts"
    assert str(Card(10, Suit.HEARTS)) == "10 of Hearts"
    assert str(Card(2, Suit.CLUBS)) == "2 of Clubs"


def test_card_short_label():
    assert Card(14, Suit.SPADES).short == "A♠"
    assert Card(10, Suit.DIAMONDS).short == "10♦"


def test_rank_names():
    """Deuce and faces are spelled out, the low ace reads as Ace."""
    assert rank_name(2) == "Deuce"
    assert rank_name(7) == "7"
    assert rank_name(11) == "Jack"
    assert rank_name(14) == "Ace"
    assert rank_name(1) == "Ace"


@pytest.mark.parametrize("rank", [0, 1, 15, -3])
def test_invalid_rank_rejected(rank):
    with pytest.raises(ValueError):
        Card(rank, Suit.SPADES)


def test_invalid_suit_rejected():
    with pytest.raises(ValueError):
        Card(5, "spades")


def test_cards_from_different_decks_are_distinct():
    """Equality includes the deck index so multi-deck games keep cards apart."""
    assert Card(14, Suit.SPADES) == Card(14, Suit.SPADES)
    assert Card(14, Suit.SPADES, 0) != Card(14, Suit.SPADES, 1)
    assert len({Card(14, Suit.SPADES, 0), Card(14, Suit.SPADES, 1)}) == 2


def test_cards_are_immutable():
    card = Card(9, Suit.HEARTS)
    with pytest.raises(AttributeError):
        card.rank = 10
