import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class BettingLogger:
    """Handles all logging operations for betting-related actions."""

    @staticmethod
    def log_betting_round_start(phase: str, first_to_act: str, highest_bet: int) -> None:
        logger.info(f"\n--- {phase} betting, {first_to_act} to act first (highest bet {highest_bet}) ---")

    @staticmethod
    def log_player_turn(
        player_name: str,
        chips: int,
        current_bet: int,
        highest_bet: int,
        active_players: List[str],
        last_raiser: Optional[str] = None,
    ) -> None:
        """Log the start of a player's turn with all relevant information."""
        logger.debug(f"---- {player_name} is active ----")
        logger.debug(f"  Active players: {active_players}")
        logger.debug(f"  Last raiser: {last_raiser if last_raiser else 'None'}")
        logger.debug(f"  Player chips: {chips}")
        logger.debug(f"  Player current bet: {current_bet}")
        logger.debug(f"  Highest bet: {highest_bet}")

    @staticmethod
    def log_player_action(
        player_name: str,
        action: str,
        amount: int = 0,
        is_all_in: bool = False,
    ) -> None:
        """Log a player's betting action."""
        status = " (all in)" if is_all_in else ""

        if action == "fold":
            logger.info(f"{player_name} folds")
        elif action == "check":
            logger.info(f"{player_name} checks")
        elif action == "call":
            logger.info(f"{player_name} calls {amount}{status}")
        elif action == "raise":
            logger.info(f"{player_name} raises to {amount}{status}")

    @staticmethod
    def log_invalid_action(player_name: str, requested: str, replacement: str) -> None:
        """Log an action that is not legal in the current spot and what replaced it."""
        logger.warning(
            f"{player_name} cannot {requested} now, converting to {replacement}"
        )

    @staticmethod
    def log_blind(
        player_name: str,
        amount: int,
        actual_amount: int,
        is_small_blind: bool = False,
    ) -> None:
        """Log blind postings."""
        action_type = "small blind" if is_small_blind else "big blind"
        status = " (all in)" if amount > actual_amount else ""

        if actual_amount < amount:
            logger.info(
                f"{player_name} posts partial {action_type} of {actual_amount}{status}"
            )
        else:
            logger.info(f"{player_name} posts {action_type} of {actual_amount}{status}")

    @staticmethod
    def log_skip_betting(reason: str) -> None:
        logger.info(f"No betting this street: {reason}")

    @staticmethod
    def log_round_complete(reason: str) -> None:
        """Log when a betting round is complete."""
        logger.info(f"Betting round complete: {reason}")
