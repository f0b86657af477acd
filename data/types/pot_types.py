from typing import Dict, List

from pydantic import BaseModel, Field


class SidePot(BaseModel):
    """One pot resolved during settlement.

    Attributes:
        amount: Chips in this pot
        eligible_players: Tie-group members who shared the pot
        winners: Members who actually received a share (all of the eligible ones)
        odd_chips: Remainder that went to the first winner
    """

    amount: int
    eligible_players: List[str]
    winners: List[str] = []
    odd_chips: int = 0


class Showdown(BaseModel):
    """Showdown outcome: tie groups of player names, best group first."""

    tie_groups: List[List[str]]


class FoldOut(BaseModel):
    """Fold-out outcome: everyone but ``winner`` folded."""

    winner: str


class SettlementResult(BaseModel):
    """Chips awarded to each contributor plus the pots that produced them."""

    awards: Dict[str, int] = Field(default_factory=dict)
    pots: List[SidePot] = Field(default_factory=list)
    refunds: Dict[str, int] = Field(default_factory=dict)

    @property
    def total_awarded(self) -> int:
        return sum(self.awards.values())

    def winners(self) -> List[str]:
        """Names of players who received more than zero chips."""
        return [name for name, amount in self.awards.items() if amount > 0]
