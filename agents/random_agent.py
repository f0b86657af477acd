import logging
import random
from typing import TYPE_CHECKING, Optional

from data.types.action_decision import ActionDecision, ActionType
from holdem.betting import get_call_amount, legal_actions
from holdem.player import Player

if TYPE_CHECKING:
    from holdem.game import HoldemGame

logger = logging.getLogger(__name__)


class RandomAgent(Player):
    """A seat that picks uniformly among its legal actions.

    It never folds when checking is free. Raises are between one chip and
    three big blinds, capped by the stack.
    """

    def __init__(
        self, name: str, chips: int = 50, rng: Optional[random.Random] = None
    ):
        """Initialize the random agent.

        Args:
            rng: Random source, seeded for reproducible games
        """
        super().__init__(name, chips)
        self.rng = rng or random.Random()

    def decide_action(self, game: "HoldemGame") -> ActionDecision:
        """Randomly decide an action based on valid options."""
        highest_bet = game.round_state.highest_bet
        others = game.table.opponent_states(self)
        others_can_act = any(not s.folded and s.chips > 0 for s in others)
        actions = legal_actions(self, highest_bet, others_can_act)
        if ActionType.CHECK in actions:
            actions.remove(ActionType.FOLD)

        action = self.rng.choice(actions)

        if action == ActionType.RAISE:
            room = self.chips - get_call_amount(self, highest_bet)
            raise_amount = self.rng.randint(1, max(1, min(room, game.config.big_blind * 3)))
            logger.debug(f"{self.name} randomly decided to raise {raise_amount}")
            return ActionDecision(
                action_type=ActionType.RAISE,
                raise_amount=raise_amount,
                reasoning="random",
            )

        logger.debug(f"{self.name} randomly decided to {action.value}")
        return ActionDecision(action_type=action, reasoning="random")
