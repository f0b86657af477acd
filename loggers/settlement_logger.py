import logging
from typing import Dict, List

from data.types.pot_types import SidePot

logger = logging.getLogger(__name__)


class SettlementLogger:
    """Handles all logging operations for pot settlement."""

    @staticmethod
    def log_fold_out(winner_name: str, amount: int) -> None:
        """Log a pot collected without a showdown."""
        logger.debug(f"Fold-out: {winner_name} collects ${amount}")

    @staticmethod
    def log_pot_resolved(
        pot_number: int,
        amount: int,
        winners: List[str],
        odd_chips: int,
        capped_player: str,
    ) -> None:
        """Log one pot (main or side) being split between its winners."""
        winners_str = ", ".join(winners)
        logger.debug(
            f"Pot {pot_number}: ${amount} capped by {capped_player}, "
            f"shared by {winners_str}"
        )
        if odd_chips:
            logger.debug(f"  Odd chips: ${odd_chips} to {capped_player}")

    @staticmethod
    def log_refund(player_name: str, amount: int) -> None:
        """Log uncontested chips returned to their owner."""
        logger.debug(f"Returning uncontested ${amount} to {player_name}")

    @staticmethod
    def log_side_pots_info(side_pots: List[SidePot]) -> None:
        """Log detailed side pot information."""
        if len(side_pots) < 2:
            return
        logger.info("\nPots:")
        for i, pot in enumerate(side_pots, 1):
            players_str = ", ".join(pot.winners)
            logger.info(f"  Pot {i}: ${pot.amount} (Won by: {players_str})")

    @staticmethod
    def log_invalid_contribution(player_name: str, amount: int) -> None:
        """Log a negative contribution handed to settlement."""
        logger.error(f"Invalid contribution for {player_name}: {amount}")

    @staticmethod
    def log_conservation_error(contributed: int, awarded: int) -> None:
        """Log a settlement whose awards do not add up to the contributions."""
        logger.error(
            f"Chip mismatch - Contributed: {contributed}, Awarded: {awarded}"
        )

    @staticmethod
    def log_chip_mismatch(initial: int, current: int, players: Dict[str, int]) -> None:
        """Log chip total mismatch errors."""
        logger.error(f"Total chips mismatch - Initial: {initial}, Current: {current}")
        logger.error(f"Player chips: {players}")
