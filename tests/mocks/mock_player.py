from typing import List, Optional

from data.enums import ActionType
from data.types.action_decision import ActionDecision
from holdem.player import Player


class ScriptedPlayer(Player):
    """A player that replays a fixed list of decisions.

    When the script runs out it checks when it can and calls otherwise.

    Attributes:
        script (List[ActionDecision]): Decisions still to be made, in order
        seen_highest_bets (List[int]): Highest bet at every decision, for assertions
    """

    def __init__(
        self, name: str, chips: int = 50, script: Optional[List[ActionDecision]] = None
    ):
        super().__init__(name, chips)
        self.script = list(script or [])
        self.seen_highest_bets: List[int] = []

    def decide_action(self, game) -> ActionDecision:
        highest_bet = game.round_state.highest_bet
        self.seen_highest_bets.append(highest_bet)
        if self.script:
            return self.script.pop(0)
        if self.total_bet >= highest_bet:
            return ActionDecision(action_type=ActionType.CHECK)
        return ActionDecision(action_type=ActionType.CALL)


def fold() -> ActionDecision:
    return ActionDecision(action_type=ActionType.FOLD)


def check() -> ActionDecision:
    return ActionDecision(action_type=ActionType.CHECK)


def call() -> ActionDecision:
    return ActionDecision(action_type=ActionType.CALL)


def raise_by(amount: int) -> ActionDecision:
    return ActionDecision(action_type=ActionType.RAISE, raise_amount=amount)
