import logging

logger = logging.getLogger(__name__)


class PlayerLogger:
    """Handles all logging operations for player-related actions."""

    @staticmethod
    def log_player_creation(name: str, starting_chips: int) -> None:
        """Log when a new player is created."""
        logger.info(f"New player created: {name} with {starting_chips} chips")

    @staticmethod
    def log_bet_placement(
        player_name: str, amount: int, total_bet: int, chips_remaining: int
    ) -> None:
        """Log when a player puts chips in."""
        logger.debug(
            f"{player_name} bets {amount} "
            f"(total bet: {total_bet}, chips remaining: {chips_remaining})"
        )

    @staticmethod
    def log_invalid_bet(player_name: str, reason: str) -> None:
        """Log when an invalid bet is attempted."""
        logger.warning(f"Invalid bet by {player_name}: {reason}")

    @staticmethod
    def log_all_in(player_name: str, amount: int) -> None:
        """Log when a player goes all-in."""
        logger.info(f"{player_name} is all-in with {amount}")

    @staticmethod
    def log_fold(player_name: str) -> None:
        logger.debug(f"{player_name} folds")

    @staticmethod
    def log_state_reset(player_name: str, context: str = "new round") -> None:
        """Log when a player's state is reset."""
        logger.debug(f"{player_name}'s state reset for {context}")

    @staticmethod
    def log_chips_update(
        player_name: str, old_amount: int, new_amount: int, reason: str
    ) -> None:
        """Log when a player's chip count changes."""
        logger.debug(f"{player_name}'s chips: {old_amount} -> {new_amount} ({reason})")
