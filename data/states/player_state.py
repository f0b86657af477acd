from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from holdem.player import Player


class PlayerState(BaseModel):
    """Immutable snapshot of a seat, handed to components that must not mutate players.

    Attributes:
        name: Player's display name (unique at the table)
        chips: Chips behind, i.e. not yet wagered this round
        total_bet: Chips contributed this round, reclaimable only via settlement
        folded: Whether the player folded this round
        is_all_in: Whether the player has no chips left after contributing
        is_dealer: Whether the player holds the dealer flag
        hand: Card strings of the player's hole cards, when private attributes are shown
    """

    model_config = ConfigDict(frozen=True)

    name: str
    chips: int
    total_bet: int = 0
    folded: bool = False
    is_all_in: bool = False
    is_dealer: bool = False
    hand: Optional[List[str]] = None

    @classmethod
    def from_player(
        cls, player: "Player", private_attributes: bool = False
    ) -> "PlayerState":
        """Create a PlayerState instance from a Player object.

        Args:
            player: The player instance to create state from
            private_attributes: Whether to include the hole cards

        Returns:
            PlayerState: A new PlayerState instance representing the player's current state
        """
        return cls(
            name=player.name,
            chips=player.chips,
            total_bet=player.total_bet,
            folded=player.folded,
            is_all_in=player.is_all_in,
            is_dealer=player.is_dealer,
            hand=(
                [str(card) for card in player.hole_cards]
                if private_attributes
                else None
            ),
        )
