from dataclasses import dataclass
from typing import Dict

from data.enums import Suit

ACE = 14
RANKS = list(range(2, ACE + 1))

RANK_NAMES: Dict[int, str] = {
    2: "Deuce",
    11: "Jack",
    12: "Queen",
    13: "King",
    14: "Ace",
}


def rank_name(rank: int) -> str:
    """Convert numeric rank to its spoken name (2 -> 'Deuce', 12 -> 'Queen', 7 -> '7')."""
    if rank == 1:  # low ace
        return RANK_NAMES[ACE]
    return RANK_NAMES.get(rank, str(rank))


@dataclass(frozen=True)
class Card:
    """
    Represents a single playing card with rank and suit.

    A card is immutable after creation and compared by value. When more than one
    deck is in play, ``deck`` tells otherwise identical cards apart so that every
    card dealt in a round stays distinct.

    Attributes:
        rank (int): 2-10, 11 (Jack), 12 (Queen), 13 (King), 14 (Ace)
        suit (Suit): One of the four suits
        deck (int): Index of the physical deck the card came from
    """

    rank: int
    suit: Suit
    deck: int = 0

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def short(self) -> str:
        """Compact label such as ``A♠`` or ``10♥``."""
        face = {11: "J", 12: "Q", 13: "K", 14: "A"}.get(self.rank, str(self.rank))
        return f"{face}{self.suit.symbol}"

    def __str__(self) -> str:
        """Card in format "Ace of Spades"."""
        name = RANK_NAMES[self.rank] if self.rank > 10 else str(self.rank)
        return f"{name} of {self.suit.value}"
