import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class ShowdownLogger:
    """Handles all logging operations for showdown-related actions."""

    @staticmethod
    def log_showdown_start() -> None:
        """Log the start of showdown phase."""
        logger.info("\n=== Showdown ===")

    @staticmethod
    def log_player_hand(player_name: str, cards: str, hand_description: str) -> None:
        """Log a player's hand at showdown."""
        logger.info(f"{player_name} shows {cards}: {hand_description}")

    @staticmethod
    def log_single_winner(winner_name: str, amount: int) -> None:
        """Log when there's a single winner (others folded)."""
        logger.info(f"{winner_name} wins {amount} (all others folded)")

    @staticmethod
    def log_tie_groups(tie_groups: List[List[str]]) -> None:
        """Log the ranking of the showdown players, best first."""
        ranking = " > ".join(" = ".join(group) for group in tie_groups)
        logger.debug(f"Showdown ranking: {ranking}")

    @staticmethod
    def log_pot_win(winner_name: str, amount: int, is_split: bool = False) -> None:
        """Log when a player wins chips."""
        action = "splits" if is_split else "wins"
        logger.info(f"{winner_name} {action} {amount}")

    @staticmethod
    def log_evaluation_error(player_name: str, error: Exception) -> None:
        """Log errors during hand evaluation."""
        logger.error(f"Error evaluating {player_name}'s hand: {str(error)}")

    @staticmethod
    def log_chip_movements(
        player_name: str, initial_chips: int, final_chips: int
    ) -> None:
        """Log chip movements for a player."""
        difference = final_chips - initial_chips
        if difference == 0:
            return
        direction = "gains" if difference > 0 else "loses"
        logger.info(
            f"{player_name} {direction} {abs(difference)} "
            f"({initial_chips} -> {final_chips})"
        )

    @staticmethod
    def log_awards(awards: Dict[str, int]) -> None:
        logger.debug(f"Awards: {awards}")
