import argparse
import logging
import random
import sys
from datetime import datetime
from typing import Callable, List, Optional

from agents import HumanAgent, RandomAgent
from config import Settings
from data.round_log import RoundLog
from exceptions import PokerGameError
from holdem.config import GameConfig
from holdem.game import HoldemGame
from holdem.player import Player
from loggers.config import configure_loggers
from util import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal Texas hold'em")
    parser.add_argument("--players", type=int, help="Number of human players (asked if omitted)")
    parser.add_argument("--names", nargs="+", help="Human player names (asked if omitted)")
    parser.add_argument("--bots", type=int, default=0, help="Number of random bots to seat")
    parser.add_argument("--chips", type=int, help="Starting chips per player")
    parser.add_argument("--small-blind", type=int, default=1)
    parser.add_argument("--big-blind", type=int, default=2)
    parser.add_argument("--decks", type=int, default=1, help="Number of 52-card decks")
    parser.add_argument("--seed", type=int, help="Seed for shuffling and bots")
    parser.add_argument("--max-rounds", type=int, help="Stop after this many rounds")
    parser.add_argument("--stats-file", help="Where round winners are appended")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def ask_player_count(
    config: GameConfig,
    bots: int,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> int:
    """Ask how many people are playing until the total seat count is valid."""
    low = max(0, config.min_players - bots)
    high = config.max_players - bots
    while True:
        answer = input_func(f"How many players are there? ({low}-{high}): ")
        try:
            count = int(answer.strip())
        except ValueError:
            output_func("Please enter a whole number.")
            continue
        if low <= count <= high:
            return count
        output_func(f"The number of players must be between {low} and {high}.")


def ask_player_names(
    count: int,
    taken: Optional[List[str]] = None,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> List[str]:
    """Ask for ``count`` non-empty names, none repeating a name already taken."""
    names: List[str] = []
    taken = list(taken or [])
    while len(names) < count:
        name = input_func(f"Enter the name of player {len(names) + 1}: ").strip()
        if not name:
            output_func("Names cannot be empty.")
        elif name in names or name in taken:
            output_func(f"{name} is already taken, please choose another name.")
        else:
            names.append(name)
    return names


def create_players(
    names: List[str],
    bots: int,
    chips: int,
    rng: random.Random,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> List[Player]:
    """Human seats first, then the bots named Bot 1, Bot 2, ..."""
    players: List[Player] = [
        HumanAgent(name, chips, input_func=input_func, output_func=output_func)
        for name in names
    ]
    for i in range(1, bots + 1):
        bot_name = f"Bot {i}"
        while bot_name in names:
            bot_name += "'"
        players.append(RandomAgent(bot_name, chips, rng=random.Random(rng.randrange(2**32))))
    return players


def main(
    argv: Optional[List[str]] = None,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings(
        stats_file=args.stats_file,
        log_level=args.log_level,
        starting_chips=args.chips,
    )

    session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    setup_logging(session_id, settings.LOG_FILE, settings.LOG_LEVEL)
    configure_loggers(base_level=settings.LOG_LEVEL)

    try:
        config = GameConfig(
            starting_chips=settings.STARTING_CHIPS,
            small_blind=args.small_blind,
            big_blind=args.big_blind,
            num_decks=args.decks,
            max_rounds=args.max_rounds,
            session_id=session_id,
        )

        names = args.names
        if names is None:
            count = args.players
            if count is None:
                count = ask_player_count(config, args.bots, input_func, output_func)
            names = ask_player_names(count, input_func=input_func, output_func=output_func)
        elif len(set(names)) != len(names):
            raise ValueError("Player names must be unique")

        rng = random.Random(args.seed)
        players = create_players(
            names, args.bots, config.starting_chips, rng, input_func, output_func
        )
        game = HoldemGame(
            players,
            config=config,
            round_log=RoundLog(settings.STATS_FILE),
            rng=rng,
        )
        game.play_game()
    except (PokerGameError, ValueError) as e:
        logger.error(f"Game aborted: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
