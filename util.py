import logging
import sys
from datetime import datetime
from typing import Union

logger = logging.getLogger(__name__)


def setup_logging(
    session_id: str,
    log_file: str = "holdem.log",
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging with UTF-8 encoding support and session management.

    Sets up a logging system that outputs to both console and file, with UTF-8 encoding.
    The log file is overwritten for every session.

    Args:
        session_id (str): Unique identifier for this game session.
        log_file (str): Path of the log file.
        level: Root log level, a logging constant or a level name.

    Side Effects:
        - Clears existing logging handlers
        - Creates/overwrites ``log_file``
        - Logs session start information with timestamp
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    # Clear any existing handlers
    logging.getLogger().handlers = []

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            # mode="w" ensures the file is cleared each time
            logging.FileHandler(log_file, encoding="utf-8", mode="w"),
        ],
    )

    logging.info(f"\n{'='*70}")
    logging.info(f"New Hold'em Session Started - ID: {session_id}")
    logging.info(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.info(f"{'='*70}\n")
