from typing import TYPE_CHECKING, List

from data.states.player_state import PlayerState
from data.types.action_decision import ActionDecision
from loggers.player_logger import PlayerLogger

from .card import Card
from .hand import Hand

if TYPE_CHECKING:
    from .game import HoldemGame


class Player:
    """
    Represents a seat at the table: a chip stack, this round's contribution and
    the private cards.

    Chips persist across rounds. ``total_bet`` is what the player has put in this
    round and can only come back through settlement; it is reset after the
    awards are applied.

    Attributes:
        name (str): The player's display name, unique at the table
        chips (int): Chips behind (not yet wagered)
        total_bet (int): Chips contributed this round
        folded (bool): Whether the player has folded in the current round
        is_dealer (bool): Whether the player holds the dealer flag
        hole_cards (List[Card]): The two private cards
    """

    name: str
    chips: int
    total_bet: int
    folded: bool
    is_dealer: bool
    hole_cards: List[Card]

    def __init__(self, name: str, chips: int = 50) -> None:
        """
        Initialize a new player with a name and starting chips.

        Raises:
            ValueError: If name is empty or chips is negative
        """
        if not name or name.isspace():
            raise ValueError("Player name cannot be empty or whitespace")
        if not isinstance(chips, int):
            raise ValueError("Chips must be an integer value")
        if chips < 0:
            raise ValueError("Cannot initialize player with negative chips")

        self.name = name
        self.chips = chips
        self.total_bet = 0
        self.folded = False
        self.is_dealer = False
        self.hole_cards = []

        PlayerLogger.log_player_creation(name, chips)

    @property
    def is_all_in(self) -> bool:
        """A player with an empty stack still in the round cannot wager further."""
        return self.chips == 0 and not self.folded

    @property
    def can_act(self) -> bool:
        return not self.folded and self.chips > 0

    def decide_action(self, game: "HoldemGame") -> ActionDecision:
        """Choose a betting action. Implemented by the agents."""
        raise NotImplementedError(f"{type(self).__name__} cannot make decisions")

    def take_card(self, card: Card) -> None:
        """Receive a hole card."""
        self.hole_cards.append(card)

    def hand_with(self, community_cards: List[Card]) -> Hand:
        """Hole cards plus the community cards, ready for evaluation."""
        return Hand(self.hole_cards + list(community_cards))

    def place_bet(self, amount: int) -> int:
        """
        Move chips from the stack into this round's contribution.

        The amount is capped at the stack, so asking for more than the player
        has puts the player all-in.

        Returns:
            int: Chips actually added
        """
        if amount < 0:
            PlayerLogger.log_invalid_bet(self.name, "Cannot place negative bet")
            raise ValueError("Cannot place negative bet")

        amount = min(amount, self.chips)
        self.chips -= amount
        self.total_bet += amount

        PlayerLogger.log_bet_placement(self.name, amount, self.total_bet, self.chips)
        if self.chips == 0 and amount > 0:
            PlayerLogger.log_all_in(self.name, self.total_bet)
        return amount

    def call(self, highest_bet: int) -> int:
        """Match ``highest_bet`` (or go all-in trying). Returns chips added."""
        return self.place_bet(max(0, highest_bet - self.total_bet))

    def raise_bet(self, highest_bet: int, raise_amount: int) -> int:
        """Call ``highest_bet`` and put ``raise_amount`` more on top. Returns chips added."""
        return self.place_bet(max(0, highest_bet - self.total_bet) + raise_amount)

    def fold(self) -> None:
        """Mark the player as folded for the current round."""
        self.folded = True
        PlayerLogger.log_fold(self.name)

    def collect(self, amount: int) -> None:
        """Add settlement winnings to the stack."""
        if amount < 0:
            raise ValueError("Cannot collect a negative amount")
        old_chips = self.chips
        self.chips += amount
        PlayerLogger.log_chips_update(self.name, old_chips, self.chips, "settlement")

    def reset_for_new_round(self) -> None:
        """Reset player state for a new round."""
        self.total_bet = 0
        self.folded = False
        self.hole_cards = []

        PlayerLogger.log_state_reset(self.name, context="new round")

    def get_state(self, private_attributes: bool = False) -> PlayerState:
        """Get an immutable snapshot of this player."""
        return PlayerState.from_player(self, private_attributes)

    def __str__(self) -> str:
        return f"{self.name} (chips: {self.chips}, folded: {self.folded})"

    def __eq__(self, other):
        """Players are considered equal if they have the same name."""
        if not isinstance(other, Player):
            return False
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)
