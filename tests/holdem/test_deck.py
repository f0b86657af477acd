import random

import pytest

from exceptions import DeckExhaustedError
from holdem.deck import Deck


def test_new_deck_has_52_unique_cards():
    deck = Deck()
    assert len(deck) == 52
    assert len(set(deck.cards)) == 52


def test_multiple_decks_stay_distinct():
    """Two decks give 104 cards, none equal to another."""
    deck = Deck(num_decks=2)
    assert deck.remaining() == 104
    assert len(set(deck.cards)) == 104


def test_invalid_deck_count():
    with pytest.raises(ValueError):
        Deck(num_decks=0)


def test_shuffle_is_reproducible_with_seed():
    first = Deck(rng=random.Random(7))
    second = Deck(rng=random.Random(7))
    first.shuffle()
    second.shuffle()
    assert first.cards == second.cards
    assert first.cards != Deck().cards


def test_shuffle_keeps_every_card():
    deck = Deck(rng=random.Random(3))
    before = set(deck.cards)
    deck.shuffle()
    assert set(deck.cards) == before


def test_deal_from_top():
    deck = Deck()
    top = deck.cards[0]
    assert deck.deal_card() == top
    assert deck.remaining() == 51
    assert deck.dealt_cards == [top]


def test_deal_multiple():
    deck = Deck()
    dealt = deck.deal(5)
    assert len(dealt) == 5
    assert deck.remaining() == 47


def test_burn_moves_card_aside():
    """A burned card is neither in the deck nor among the dealt cards."""
    deck = Deck()
    burned = deck.burn()
    assert deck.burned_cards == [burned]
    assert burned not in deck.dealt_cards
    assert burned not in deck.cards


def test_exhausted_deck_raises():
    deck = Deck()
    deck.deal(52)
    with pytest.raises(DeckExhaustedError):
        deck.deal_card()
    with pytest.raises(DeckExhaustedError):
        Deck().deal(53)


def test_str_reports_counts():
    deck = Deck()
    deck.deal(2)
    deck.burn()
    assert str(deck) == "Deck: 49 cards remaining, 2 dealt, 1 burned"
