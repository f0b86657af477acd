"""Append-only, human-readable record of round and game winners.

The log is informational. A file that cannot be written is logged as an error
and the game carries on.
"""

import logging
from typing import Optional

from data.types.round_outcome import RoundOutcome

logger = logging.getLogger(__name__)


class RoundLog:
    """Writes one line per round outcome to a text file (``game_stats.txt`` by default).

    Attributes:
        path: File the lines are appended to
        lines_written: Number of lines successfully written by this instance
    """

    def __init__(self, path: str = "game_stats.txt") -> None:
        self.path = path
        self.lines_written = 0

    def record_outcome(self, outcome: RoundOutcome) -> Optional[str]:
        """Record a showdown or a fold-out, whichever ``outcome`` is."""
        if outcome.folded_out:
            return self.record_fold_out(outcome.winners[0], outcome.round_number)
        return self.record_showdown(outcome)

    def record_showdown(self, outcome: RoundOutcome) -> Optional[str]:
        """``"<names> won round <n> with <hand>, using the cards: A, B, and C"``.

        A split pot names every member of the best tie group; the hand and cards
        are those of the first of them.
        """
        winners = outcome.winners
        if not winners:
            return None
        first = winners[0]
        names = first if len(winners) == 1 else " and ".join(winners)
        line = (
            f"{names} won round {outcome.round_number} with "
            f"{outcome.descriptions.get(first, 'an unknown hand')}, "
            f"using the cards: {outcome.cards.get(first, 'no cards')}"
        )
        return self._append(line)

    def record_fold_out(self, winner: str, round_number: int) -> Optional[str]:
        return self._append(
            f"{winner} won round {round_number} because everyone else folded."
        )

    def record_game_winner(self, winner: str, chips: int) -> Optional[str]:
        """Two closing lines naming the last player standing."""
        first = self._append(f"{winner} won the game!")
        self._append(
            f"{winner} managed to win a total of {chips} chips. Congratulations!"
        )
        return first

    def _append(self, line: str) -> Optional[str]:
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error(f"Could not write to {self.path}: {str(e)}")
            return None
        self.lines_written += 1
        return line
