import logging
from typing import TYPE_CHECKING, Callable, List, Optional

from data.types.action_decision import ActionDecision, ActionType
from holdem.betting import get_call_amount, legal_actions
from holdem.hand import join_cards
from holdem.player import Player

if TYPE_CHECKING:
    from holdem.game import HoldemGame

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class HumanAgent(Player):
    """A seat played from the terminal, several people sharing one screen.

    Before showing anything private the screen is cleared and the next player
    is asked to press enter, so the previous player's cards are not visible
    while the computer is passed around.

    Attributes:
        input_func: Reads one line of input given a prompt
        output_func: Writes one line of output
        clear_screen: Whether to clear the terminal between seats
    """

    def __init__(
        self,
        name: str,
        chips: int = 50,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        clear_screen: bool = True,
    ):
        super().__init__(name, chips)
        self.input_func = input_func
        self.output_func = output_func
        self.clear_screen = clear_screen

    def decide_action(self, game: "HoldemGame") -> ActionDecision:
        """Show the table to this player and ask for a decision until it is valid."""
        highest_bet = game.round_state.highest_bet
        others = game.table.opponent_states(self)
        others_can_act = any(not s.folded and s.chips > 0 for s in others)
        actions = legal_actions(self, highest_bet, others_can_act)

        self._pass_screen()
        for line in self.render_table(game):
            self.output_func(line)

        options = self._options_text(actions)
        choice = self.input_func(f"{self.name} must decide to {options}.\n").strip().lower()
        while not self._is_valid_choice(choice, actions):
            self.output_func("That is not a valid choice, please enter again.")
            choice = self.input_func(f"Choose to {options}.\n").strip().lower()

        if choice == "f":
            return ActionDecision(action_type=ActionType.FOLD)
        if choice == "c":
            if ActionType.CHECK in actions:
                return ActionDecision(action_type=ActionType.CHECK)
            return ActionDecision(action_type=ActionType.CALL)

        return ActionDecision(
            action_type=ActionType.RAISE,
            raise_amount=self._ask_raise_amount(highest_bet),
        )

    def render_table(self, game: "HoldemGame") -> List[str]:
        """Lines describing the table from this player's point of view."""
        lines = []
        if game.community_cards:
            lines.append(f"The community hand includes the {join_cards(game.community_cards)}")
        elif game.round_number > 1:
            lines.append(f"Start of round {game.round_number}")

        others = game.table.opponent_states(self)
        all_in = [s.name for s in others if s.is_all_in]
        if all_in:
            lines.append(f"All-in: {', '.join(all_in)}")
        folded = [s.name for s in others if s.folded]
        if folded:
            lines.append(f"Folded: {', '.join(folded)}")

        lines.append(f"{self.name} currently has the {join_cards(self.hole_cards)}")
        lines.append(
            f"The current highest a player has bet is {game.round_state.highest_bet}, "
            f"and {self.name} has currently bet {self.total_bet}"
        )
        lines.append(f"{self.name} has {self.chips} chips remaining.")
        return lines

    def _pass_screen(self) -> None:
        if self.clear_screen:
            self.output_func(CLEAR_SCREEN)
        self.input_func(f"It is now {self.name}'s turn. Press 'enter' to continue...\n")
        if self.clear_screen:
            self.output_func(CLEAR_SCREEN)

    def _ask_raise_amount(self, highest_bet: int) -> int:
        most = self.chips - get_call_amount(self, highest_bet)
        prompt = f"How much would you like to raise? (Enter a number between 1 and {most}): "
        while True:
            amount = self._parse_amount(self.input_func(prompt), most)
            if amount is not None:
                return amount
            prompt = f"Not a valid raise amount. Enter a number between 1 and {most}: "

    @staticmethod
    def _parse_amount(text: str, most: int) -> Optional[int]:
        try:
            amount = int(text.strip())
        except ValueError:
            return None
        if 1 <= amount <= most:
            return amount
        return None

    @staticmethod
    def _options_text(actions: List[ActionType]) -> str:
        parts = []
        if ActionType.RAISE in actions:
            parts.append("(r)aise")
        parts.append("(c)heck" if ActionType.CHECK in actions else "(c)all")
        parts.append("(f)old")
        return ", ".join(parts[:-1]) + " or " + parts[-1]

    @staticmethod
    def _is_valid_choice(choice: str, actions: List[ActionType]) -> bool:
        if choice == "r":
            return ActionType.RAISE in actions
        return choice in ("c", "f")
