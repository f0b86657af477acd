import logging

logger = logging.getLogger(__name__)


class DeckLogger:
    """Handles all logging operations for deck-related actions."""

    @staticmethod
    def log_shuffle(remaining_cards: int) -> None:
        """Log deck shuffling."""
        logger.debug(f"Shuffling deck with {remaining_cards} cards")

    @staticmethod
    def log_deal_error(requested: int, available: int) -> None:
        """Log error when trying to deal too many cards."""
        logger.error(
            f"Cannot deal {requested} cards. Only {available} cards remaining."
        )

    @staticmethod
    def log_burn(remaining_cards: int) -> None:
        """Log a burned card."""
        logger.debug(f"Burned a card, {remaining_cards} cards remaining")
