from dataclasses import dataclass, field
from typing import List, Optional

from data.enums import RoundPhase


@dataclass
class RoundState:
    """Represents the state of a single deal."""

    phase: RoundPhase
    round_number: int
    highest_bet: int = 0
    raise_count: int = 0
    dealer_position: Optional[int] = None
    small_blind_position: Optional[int] = None
    big_blind_position: Optional[int] = None
    community_cards: List[str] = field(default_factory=list)
    last_raiser: Optional[str] = None
    winner_by_folding: bool = False
    is_complete: bool = False

    def __post_init__(self):
        """Validate the state after initialization."""
        self.validate_non_negative()

    def validate_non_negative(self) -> None:
        """Validate that numeric fields are non-negative."""
        for field_name in ["highest_bet", "round_number", "raise_count"]:
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"{field_name} cannot be negative")

    @classmethod
    def new_round(cls, round_number: int) -> "RoundState":
        """Create a new round state for the start of a deal."""
        return cls(phase=RoundPhase.PRE_FLOP, round_number=round_number)

    def advance_phase(self, phase: RoundPhase) -> None:
        """Move to the next betting phase and clear per-phase tracking."""
        self.phase = phase
        self.raise_count = 0
        self.last_raiser = None

