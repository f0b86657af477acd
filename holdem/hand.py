from typing import List, Optional

from exceptions import InvalidHandError

from .card import Card
from .comparator import compare_hands
from .evaluator import MAX_CARDS, MIN_CARDS, HandRank, evaluate_hand


class Hand:
    """
    A player's hole cards combined with the community cards revealed so far.

    A hand holds between 2 and 7 cards. It can only be evaluated once at least
    five cards are known; the evaluation is cached until the cards change.

    Attributes:
        cards (List[Card]): Cards currently in the hand
        _rank (Optional[HandRank]): Cached evaluation result
    """

    def __init__(self, cards: Optional[List[Card]] = None) -> None:
        self.cards: List[Card] = list(cards) if cards is not None else []
        self._rank: Optional[HandRank] = None

    def __lt__(self, other: "Hand") -> bool:
        return self.compare_to(other) < 0

    def __gt__(self, other: "Hand") -> bool:
        return self.compare_to(other) > 0

    def __len__(self) -> int:
        return len(self.cards)

    def add_cards(self, cards: List[Card]) -> None:
        """Add cards to the hand and invalidate the cached rank."""
        if cards is None:
            raise TypeError("Cannot add None as cards")
        if any(not isinstance(card, Card) for card in cards):
            raise TypeError("All elements must be Card objects")
        if len(self.cards) + len(cards) > MAX_CARDS:
            raise InvalidHandError(f"A hand cannot hold more than {MAX_CARDS} cards")
        self.cards.extend(cards)
        self._rank = None

    def clear(self) -> None:
        """Drop all cards at the end of a round."""
        self.cards = []
        self._rank = None

    def can_evaluate(self) -> bool:
        return MIN_CARDS <= len(self.cards) <= MAX_CARDS

    def evaluate(self) -> HandRank:
        """Evaluate the best five-card hand, caching the result.

        Raises:
            InvalidHandError: If fewer than five cards are known or cards repeat
        """
        if self._rank is None:
            self._rank = evaluate_hand(self.cards)
        return self._rank

    def compare_to(self, other: "Hand") -> int:
        """Compare this hand to another hand.

        Returns:
            int: Positive if this hand is better, negative if worse, 0 if equal
        """
        return compare_hands(self.evaluate(), other.evaluate())

    def describe(self) -> str:
        """Description of the best hand, or "not enough cards yet" before the flop."""
        if not self.can_evaluate():
            return "not enough cards yet"
        return self.evaluate().description

    def show(self) -> str:
        """Cards joined the way they are read out at the table."""
        return join_cards(self.cards)

    def __str__(self) -> str:
        return self.show()


def join_cards(cards: List[Card]) -> str:
    """"A, B, and C" style listing of card names."""
    names = [str(card) for card in cards]
    if not names:
        return "no cards"
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]}, and {names[1]}"
    return ", ".join(names[:-1]) + f", and {names[-1]}"
