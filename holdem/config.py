from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """
    Configuration parameters for a hold'em game.

    Attributes:
        starting_chips (int): Initial chip amount for each player (default: 50)
        small_blind (int): Small blind amount (default: 1)
        big_blind (int): Big blind amount (default: 2)
        num_decks (int): Number of 52-card decks shuffled together (default: 1)
        min_players (int): Fewest players a game can start with (default: 2)
        max_players (int): Most players a game can seat (default: 10)
        max_rounds (Optional[int]): Maximum number of rounds to play, None for unlimited (default: None)
        session_id (Optional[str]): Unique identifier for the game session (default: None)

    Raises:
        ValueError: If any of the numerical parameters are invalid
    """

    starting_chips: int = 50
    small_blind: int = 1
    big_blind: int = 2
    num_decks: int = 1
    min_players: int = 2
    max_players: int = 10
    max_rounds: Optional[int] = None
    session_id: Optional[str] = None

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.starting_chips <= 0:
            raise ValueError("Starting chips must be positive")
        if self.small_blind <= 0 or self.big_blind <= 0:
            raise ValueError("Blinds must be positive")
        if self.big_blind < self.small_blind:
            raise ValueError("Big blind cannot be smaller than the small blind")
        if self.num_decks <= 0:
            raise ValueError("Number of decks must be positive")
        if self.min_players < 2:
            raise ValueError("A game needs at least two players")
        if self.max_players < self.min_players:
            raise ValueError("max_players cannot be less than min_players")
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError("max_rounds must be positive when given")

    def validate_player_count(self, count: int) -> None:
        """Raise ValueError when ``count`` players cannot be seated."""
        if not self.min_players <= count <= self.max_players:
            raise ValueError(
                f"Number of players must be between {self.min_players} "
                f"and {self.max_players}, got {count}"
            )
