from typing import Dict, List

from pydantic import BaseModel, Field

from data.types.pot_types import SidePot


class RoundOutcome(BaseModel):
    """How a round ended and who was paid.

    Attributes:
        round_number: The round this outcome belongs to
        folded_out: True when everyone but one player folded
        tie_groups: Players ranked best first, equal hands grouped together
        descriptions: Player name to hand description, showdown players only
        cards: Player name to the cards the hand was built from
        awards: Player name to chips awarded (zero for losers)
        pots: Pots resolved during settlement, in order
    """

    round_number: int
    folded_out: bool = False
    tie_groups: List[List[str]]
    descriptions: Dict[str, str] = Field(default_factory=dict)
    cards: Dict[str, str] = Field(default_factory=dict)
    awards: Dict[str, int] = Field(default_factory=dict)
    pots: List[SidePot] = Field(default_factory=list)

    @property
    def winners(self) -> List[str]:
        """Members of the best tie group."""
        return list(self.tie_groups[0]) if self.tie_groups else []

    @property
    def total_awarded(self) -> int:
        return sum(self.awards.values())
