import random
from typing import List, Optional

from data.enums import Suit
from exceptions import DeckExhaustedError
from loggers.deck_logger import DeckLogger

from .card import RANKS, Card


class Deck:
    """One or more standard 52-card decks shuffled together, dealt from the top."""

    suits = [Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES, Suit.CLUBS]
    ranks = RANKS

    def __init__(self, num_decks: int = 1, rng: Optional[random.Random] = None):
        """Build the cards for ``num_decks`` decks (unshuffled).

        Args:
            num_decks: Number of 52-card decks combined
            rng: Random source used by ``shuffle``; defaults to a fresh ``random.Random``
        """
        if num_decks < 1:
            raise ValueError("A deck needs at least one set of 52 cards")
        self.num_decks = num_decks
        self.rng = rng or random.Random()
        self.cards: List[Card] = [
            Card(rank, suit, deck)
            for deck in range(num_decks)
            for suit in self.suits
            for rank in self.ranks
        ]
        self.dealt_cards: List[Card] = []
        self.burned_cards: List[Card] = []

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self.rng.shuffle(self.cards)
        DeckLogger.log_shuffle(len(self.cards))

    def deal_card(self) -> Card:
        """Remove and return the top card.

        Raises:
            DeckExhaustedError: If no cards are left
        """
        if not self.cards:
            DeckLogger.log_deal_error(1, 0)
            raise DeckExhaustedError("Cannot deal a card from an empty deck")
        card = self.cards.pop(0)
        self.dealt_cards.append(card)
        return card

    def deal(self, num: int = 1) -> List[Card]:
        """
        Deal a specified number of cards from the deck.

        Raises:
            DeckExhaustedError: If requesting more cards than available
        """
        if num > len(self.cards):
            DeckLogger.log_deal_error(num, len(self.cards))
            raise DeckExhaustedError(
                f"Cannot deal {num} cards. Only {len(self.cards)} cards remaining."
            )
        return [self.deal_card() for _ in range(num)]

    def burn(self) -> Card:
        """Discard the top card unseen before revealing community cards."""
        card = self.deal_card()
        self.dealt_cards.pop()
        self.burned_cards.append(card)
        DeckLogger.log_burn(len(self.cards))
        return card

    def remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        """Return string representation of current deck state."""
        return (
            f"Deck: {len(self.cards)} cards remaining, "
            f"{len(self.dealt_cards)} dealt, "
            f"{len(self.burned_cards)} burned"
        )
