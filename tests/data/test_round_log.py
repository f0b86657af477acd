import pytest

from data.round_log import RoundLog
from data.types.round_outcome import RoundOutcome


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "game_stats.txt"


@pytest.fixture
def round_log(log_path):
    return RoundLog(str(log_path))


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


class TestRoundLog:
    def test_showdown_line(self, round_log, log_path):
        outcome = RoundOutcome(
            round_number=2,
            tie_groups=[["Ann"], ["Bob"]],
            descriptions={"Ann": "a pair of Deuces", "Bob": "a high card, Ace"},
            cards={"Ann": "2 of Spades, 2 of Hearts, and Ace of Clubs"},
        )

        round_log.record_outcome(outcome)

        assert read_lines(log_path) == [
            "Ann won round 2 with a pair of Deuces, using the cards: "
            "2 of Spades, 2 of Hearts, and Ace of Clubs"
        ]

    def test_split_pot_names_every_winner(self, round_log, log_path):
        outcome = RoundOutcome(
            round_number=5,
            tie_groups=[["Ann", "Bob"]],
            descriptions={"Ann": "a straight, 9 high", "Bob": "a straight, 9 high"},
            cards={"Ann": "cards of Ann", "Bob": "cards of Bob"},
        )

        line = round_log.record_outcome(outcome)

        assert line == "Ann and Bob won round 5 with a straight, 9 high, using the cards: cards of Ann"

    def test_fold_out_line(self, round_log, log_path):
        outcome = RoundOutcome(round_number=1, folded_out=True, tie_groups=[["Cid"]])
        round_log.record_outcome(outcome)
        assert read_lines(log_path) == ["Cid won round 1 because everyone else folded."]

    def test_game_winner_lines(self, round_log, log_path):
        round_log.record_game_winner("Ann", 150)
        assert read_lines(log_path) == [
            "Ann won the game!",
            "Ann managed to win a total of 150 chips. Congratulations!",
        ]
        assert round_log.lines_written == 2

    def test_lines_are_appended(self, round_log, log_path):
        log_path.write_text("earlier game\n", encoding="utf-8")
        round_log.record_fold_out("Ann", 1)
        round_log.record_fold_out("Bob", 2)
        assert read_lines(log_path) == [
            "earlier game",
            "Ann won round 1 because everyone else folded.",
            "Bob won round 2 because everyone else folded.",
        ]

    def test_unwritable_path_is_not_fatal(self, tmp_path):
        """A directory cannot be opened for appending; the error is only logged."""
        round_log = RoundLog(str(tmp_path))
        assert round_log.record_fold_out("Ann", 1) is None
        assert round_log.lines_written == 0

    def test_empty_showdown_writes_nothing(self, round_log, log_path):
        outcome = RoundOutcome(round_number=1, tie_groups=[])
        assert round_log.record_showdown(outcome) is None
        assert not log_path.exists()
