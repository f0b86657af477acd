import logging
from typing import List

logger = logging.getLogger(__name__)


class TableLogger:
    """Handles all logging operations for seating, the dealer flag and blinds."""

    @staticmethod
    def log_table_creation(num_players: int) -> None:
        """Log when a new table is created."""
        logger.info(f"New table created with {num_players} players")

    @staticmethod
    def log_dealer_position(position: int, player_name: str) -> None:
        """Log dealer button position."""
        logger.info(f"Dealer button at position {position} ({player_name})")

    @staticmethod
    def log_player_states(
        active: List[str], all_in: List[str], folded: List[str]
    ) -> None:
        """Log current state of all players at the table."""
        logger.debug("Table state:")
        logger.debug(f"  Active players: {', '.join(active)}")
        if all_in:
            logger.debug(f"  All-in players: {', '.join(all_in)}")
        if folded:
            logger.debug(f"  Folded players: {', '.join(folded)}")

    @staticmethod
    def log_player_removed(player_name: str) -> None:
        logger.info(f"{player_name} has no chips left and leaves the table")

    @staticmethod
    def log_seating_error(reason: str) -> None:
        logger.error(f"Invalid seating: {reason}")
