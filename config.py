import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Process-wide settings read from the environment (and a local .env file)."""

    def __init__(
        self,
        stats_file: Optional[str] = None,
        log_file: Optional[str] = None,
        log_level: Optional[str] = None,
        starting_chips: Optional[int] = None,
    ):
        # Output locations
        self.STATS_FILE: str = stats_file or os.getenv(
            "HOLDEM_STATS_FILE", "game_stats.txt"
        )
        self.LOG_FILE: str = log_file or os.getenv("HOLDEM_LOG_FILE", "holdem.log")

        # Logging
        self.LOG_LEVEL: str = (
            log_level or os.getenv("HOLDEM_LOG_LEVEL", "INFO")
        ).upper()

        # Game defaults
        env_chips = os.getenv("HOLDEM_STARTING_CHIPS")
        if starting_chips is not None:
            self.STARTING_CHIPS: int = starting_chips
        elif env_chips:
            try:
                self.STARTING_CHIPS = int(env_chips)
            except ValueError:
                raise ValueError(
                    f"HOLDEM_STARTING_CHIPS must be an integer, got {env_chips!r}"
                )
        else:
            self.STARTING_CHIPS = 50
