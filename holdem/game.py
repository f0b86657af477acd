import random
from typing import Callable, List, Optional

from data.enums import RoundPhase
from data.round_log import RoundLog
from data.states.round_state import RoundState
from data.types.round_outcome import RoundOutcome
from exceptions import InvalidGameStateError
from loggers.game_logger import GameLogger

from . import betting, showdown
from .card import Card
from .config import GameConfig
from .deck import Deck
from .player import Player
from .table import Table

# Community cards revealed on each street after the pre-flop betting
STREETS = [
    (RoundPhase.FLOP, 3),
    (RoundPhase.TURN, 1),
    (RoundPhase.RIVER, 1),
]


class HoldemGame:
    """
    Runs a community-card hold'em game from the first deal to the last player standing.

    Each round:
    1. Rotate the dealer flag and post the blinds
    2. Deal two hole cards to every seat, one at a time around the table
    3. Pre-flop betting
    4. Flop, turn and river: burn a card, reveal 3/1/1 community cards, bet
    5. Fold-out or showdown settlement, applied to the stacks
    6. Record the outcome and remove players with no chips left

    Once the betting is over because fewer than two players can act, the
    remaining community cards are still dealt so the showdown has five.

    Attributes:
        table (Table): The seats in play
        config (GameConfig): Configuration parameters for the game
        deck (Deck): Deck for the current round
        community_cards (List[Card]): Community cards revealed so far this round
        round_number (int): Current round number (increments at start of each round)
        round_state (RoundState): Betting state of the current round
        round_log (Optional[RoundLog]): Where outcomes are recorded
        outcomes (List[RoundOutcome]): Outcome of every round played
        eliminated (List[Player]): Players removed after running out of chips

    Example:
        >>> players = [RandomAgent("Alice"), RandomAgent("Bob")]
        >>> game = HoldemGame(players, config=GameConfig(max_rounds=10))
        >>> game.play_game()
    """

    table: Table
    config: GameConfig
    deck: Deck
    community_cards: List[Card]
    round_number: int
    round_state: RoundState
    round_log: Optional[RoundLog]
    outcomes: List[RoundOutcome]
    eliminated: List[Player]

    def __init__(
        self,
        players: List[Player],
        config: Optional[GameConfig] = None,
        round_log: Optional[RoundLog] = None,
        rng: Optional[random.Random] = None,
        deck_factory: Optional[Callable[[], Deck]] = None,
    ) -> None:
        """Seat the players and validate the configuration.

        Args:
            players: Seats in clockwise order
            config: Game parameters, defaults to ``GameConfig()``
            round_log: Destination for round outcome lines, None to skip
            rng: Random source for shuffling, seeded for reproducible games
            deck_factory: Builds the deck for each round; overrides ``rng``

        Raises:
            ValueError: If the player count is outside the configured bounds
            InvalidGameStateError: If player names repeat
        """
        self.config = config or GameConfig()
        self.config.validate_player_count(len(players))

        self.table = Table(players)
        self.round_log = round_log
        self.rng = rng or random.Random()
        self._deck_factory = deck_factory or (
            lambda: Deck(num_decks=self.config.num_decks, rng=self.rng)
        )
        self.deck = self._deck_factory()
        self.community_cards = []
        self.round_number = 0
        self.round_state = RoundState.new_round(0)
        self.outcomes = []
        self.eliminated = []
        self.initial_chips = self.table.total_chips()

        GameLogger.log_game_config(
            players=[p.name for p in self.table],
            starting_chips=self.config.starting_chips,
            small_blind=self.config.small_blind,
            big_blind=self.config.big_blind,
            num_decks=self.config.num_decks,
            max_rounds=self.config.max_rounds,
            session_id=self.config.session_id,
        )

    @property
    def players(self) -> List[Player]:
        return self.table.players

    def play_game(self) -> Optional[Player]:
        """
        Play rounds until one player holds every chip or ``max_rounds`` is reached.

        Returns:
            Optional[Player]: The winner, or None when the round limit ended the game
                with more than one player left
        """
        while len(self.table) > 1:
            if self.config.max_rounds and self.round_number >= self.config.max_rounds:
                GameLogger.log_max_rounds_reached(self.round_number)
                break
            self.play_round()

        GameLogger.log_game_summary(
            self.round_number, {p.name: p.chips for p in self.table}
        )

        if len(self.table) != 1:
            return None

        winner = self.table.players[0]
        GameLogger.log_game_winner(winner.name, winner.chips)
        if self.round_log:
            self.round_log.record_game_winner(winner.name, winner.chips)
        return winner

    def play_round(self) -> RoundOutcome:
        """Play a single round and return how it ended."""
        self._start_new_round()

        GameLogger.log_phase_header("Pre-flop")
        in_play = betting.handle_betting_round(self)

        for phase, count in STREETS:
            if not in_play:
                break
            self.round_state.advance_phase(phase)
            self._deal_community(phase, count)
            in_play = betting.handle_betting_round(self)

        if len(self.table.in_hand_players()) == 1:
            outcome = showdown.handle_fold_out(self.table, self.round_number)
        else:
            self.round_state.advance_phase(RoundPhase.SHOWDOWN)
            outcome = showdown.handle_showdown(
                self.table, self.community_cards, self.round_number
            )

        self.round_state.winner_by_folding = outcome.folded_out
        self.round_state.is_complete = True
        self.outcomes.append(outcome)
        if self.round_log:
            self.round_log.record_outcome(outcome)

        self._end_round()
        return outcome

    def _start_new_round(self) -> None:
        self.round_number += 1
        self.round_state = RoundState.new_round(self.round_number)
        self.community_cards = []
        for player in self.table:
            player.reset_for_new_round()

        dealer = self.table.rotate_dealer()
        GameLogger.log_round_header(self.round_number, dealer.name)
        GameLogger.log_chip_counts(
            {p.name: p.chips for p in self.table}, "Starting stacks"
        )

        betting.collect_blinds(self)

        self.deck = self._deck_factory()
        self.deck.shuffle()
        self._deal_hole_cards()

    def _deal_hole_cards(self) -> None:
        """Two passes around the table starting left of the dealer, one card each."""
        order = self.table.showdown_order()
        for _ in range(2):
            for player in order:
                player.take_card(self.deck.deal_card())
        GameLogger.log_deck_status(self.deck.remaining(), "after hole cards")

    def _deal_community(self, phase: RoundPhase, count: int) -> None:
        GameLogger.log_phase_header(phase.value.capitalize())
        self.deck.burn()
        cards = self.deck.deal(count)
        self.community_cards.extend(cards)
        self.round_state.community_cards = [str(c) for c in self.community_cards]
        GameLogger.log_community_cards(self.round_state.community_cards)

    def _end_round(self) -> None:
        """Check chip conservation, then drop players with no chips left."""
        total = self.table.total_chips()
        if total != self.initial_chips:
            raise InvalidGameStateError(
                f"Chip total changed from {self.initial_chips} to {total}"
            )

        for player in self.table.remove_broke_players():
            self.eliminated.append(player)
            GameLogger.log_player_elimination(player.name)
