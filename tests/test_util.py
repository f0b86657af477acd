import logging

import pytest

from loggers.config import DEFAULT_LOG_LEVELS, configure_loggers
from loggers.game_logger import GameLogger
from loggers.player_logger import PlayerLogger
from util import setup_logging


@pytest.fixture
def live_logging(tmp_path):
    """Turn logging back on and restore the root and concern loggers afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    logging.disable(logging.NOTSET)
    yield str(tmp_path / "holdem.log")
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)
    configure_loggers()
    logging.disable(logging.CRITICAL)


def test_warning_level_hides_round_output(live_logging, capsys):
    setup_logging("session", live_logging, "WARNING")
    configure_loggers(base_level="WARNING")
    capsys.readouterr()

    GameLogger.log_round_header(1, "Ann")

    assert capsys.readouterr().out == ""


def test_info_level_shows_round_output(live_logging, capsys):
    setup_logging("session", live_logging, "INFO")
    configure_loggers(base_level="INFO")
    capsys.readouterr()

    GameLogger.log_round_header(1, "Ann")

    assert "Round 1" in capsys.readouterr().out


def test_debug_level_reaches_every_concern(live_logging, capsys):
    setup_logging("session", live_logging, "DEBUG")
    configure_loggers(base_level="DEBUG")
    capsys.readouterr()

    PlayerLogger.log_fold("Ann")

    assert "Ann" in capsys.readouterr().out
    for name in DEFAULT_LOG_LEVELS:
        assert logging.getLogger(f"loggers.{name}_logger").level == logging.DEBUG


def test_info_base_keeps_quiet_defaults():
    configure_loggers(base_level=logging.INFO)
    assert logging.getLogger("loggers.player_logger").level == logging.WARNING
    assert logging.getLogger("loggers.game_logger").level == logging.INFO


def test_explicit_level_wins_over_base():
    configure_loggers({"betting": "DEBUG"}, base_level="ERROR")
    assert logging.getLogger("loggers.betting_logger").level == logging.DEBUG
    assert logging.getLogger("loggers.table_logger").level == logging.ERROR
    configure_loggers()


def test_session_banner_written_to_file(live_logging):
    setup_logging("abc123", live_logging, logging.INFO)
    for handler in logging.getLogger().handlers:
        handler.flush()
    with open(live_logging, encoding="utf-8") as f:
        assert "Session Started - ID: abc123" in f.read()
