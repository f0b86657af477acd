import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class GameLogger:
    """Handles all logging operations for the main game flow and state changes."""

    @staticmethod
    def log_game_config(
        players: List[str],
        starting_chips: int,
        small_blind: int,
        big_blind: int,
        num_decks: int,
        max_rounds: Optional[int],
        session_id: Optional[str],
    ) -> None:
        """Log the initial game configuration."""
        logger.info(f"\n{'='*50}")
        logger.info("Game Configuration")
        logger.info(f"{'='*50}")
        logger.info(f"Players: {', '.join(players)}")
        logger.info(f"Starting chips: {starting_chips}")
        logger.info(f"Blinds: {small_blind}/{big_blind}")
        if num_decks > 1:
            logger.info(f"Decks: {num_decks}")
        if max_rounds:
            logger.info(f"Max rounds: {max_rounds}")
        if session_id:
            logger.info(f"Session ID: {session_id}")
        logger.info(f"{'='*50}\n")

    @staticmethod
    def log_round_header(round_number: int, dealer_name: str) -> None:
        """Log the start of a new round."""
        logger.info(f"\n{'='*50}")
        logger.info(f"Round {round_number} (dealer: {dealer_name})")
        logger.info(f"{'='*50}")

    @staticmethod
    def log_chip_counts(chips_dict: Dict[str, int], message: str) -> None:
        """Log chip counts for all players."""
        logger.info(f"\n{message}:")
        for player_name, chips in sorted(
            chips_dict.items(), key=lambda x: x[1], reverse=True
        ):
            logger.info(f"  {player_name}: {chips}")

    @staticmethod
    def log_phase_header(phase: str) -> None:
        """Log the start of a game phase."""
        logger.info(f"\n====== {phase} ======\n")

    @staticmethod
    def log_community_cards(cards: List[str]) -> None:
        logger.info(f"Community cards: {', '.join(cards)}")

    @staticmethod
    def log_player_elimination(player_name: str) -> None:
        """Log when a player is eliminated."""
        logger.info(f"\n{player_name} is eliminated (out of chips)!")

    @staticmethod
    def log_game_winner(winner_name: str, chips: int) -> None:
        """Log the game winner."""
        logger.info(f"\nGame Over! {winner_name} wins with {chips} chips!")

    @staticmethod
    def log_max_rounds_reached(rounds: int) -> None:
        """Log when maximum rounds is reached."""
        logger.info(f"\nGame ended after {rounds} rounds!")

    @staticmethod
    def log_game_summary(rounds_played: int, final_standings: Dict[str, int]) -> None:
        """Log the final game summary."""
        logger.info("\n=== Game Summary ===")
        logger.info(f"Total rounds played: {rounds_played}")
        logger.info("\nFinal Standings:")
        for i, (name, chips) in enumerate(
            sorted(final_standings.items(), key=lambda x: x[1], reverse=True), 1
        ):
            logger.info(f"{i}. {name}: {chips}")

    @staticmethod
    def log_deck_status(remaining_cards: int, context: str = "") -> None:
        """Log the current deck status."""
        context_str = f" for {context}" if context else ""
        logger.debug(f"Cards remaining{context_str}: {remaining_cards}")
