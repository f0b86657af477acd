"""Hold'em betting rounds.

This module handles all betting-related logic for a round, including:
- Posting the small and big blinds
- Running one betting round (street) in clockwise order
- Converting actions that are not legal in the current spot
- Handling short stacks that can only go all-in

The main components are:
- collect_blinds: Forced contributions before any card is dealt
- handle_betting_round: Entry point for one street of betting
- legal_actions: What a seat may do right now, shared with the agents

Bets are tracked per round, not per street: ``Player.total_bet`` keeps growing
across streets and ``RoundState.highest_bet`` is the largest such total. A
player is matched when its total equals the highest bet.

A street ends when every player who can still act has acted since the last
raise and matched the highest bet, or when only one player has not folded.
"""

from typing import TYPE_CHECKING, List, Set

from data.enums import ActionType, RoundPhase
from data.types.action_decision import ActionDecision
from exceptions import InvalidActionError
from loggers.betting_logger import BettingLogger

from .player import Player

if TYPE_CHECKING:
    from .game import HoldemGame


def collect_blinds(game: "HoldemGame") -> int:
    """Post the small and big blinds for the current dealer.

    A player who cannot cover a blind posts what it has and is all-in.

    Returns:
        int: The highest bet after the blinds
    """
    table = game.table
    state = game.round_state

    state.dealer_position = table.dealer_index
    state.small_blind_position = table.small_blind_index
    state.big_blind_position = table.big_blind_index

    small_player = table.players[table.small_blind_index]
    big_player = table.players[table.big_blind_index]

    posted = small_player.place_bet(game.config.small_blind)
    BettingLogger.log_blind(
        small_player.name, game.config.small_blind, posted, is_small_blind=True
    )
    posted = big_player.place_bet(game.config.big_blind)
    BettingLogger.log_blind(big_player.name, game.config.big_blind, posted)

    state.highest_bet = max(p.total_bet for p in table.players)
    return state.highest_bet


def get_call_amount(player: Player, highest_bet: int) -> int:
    """Chips the player must add to match ``highest_bet``, capped at its stack."""
    return min(max(0, highest_bet - player.total_bet), player.chips)


def legal_actions(
    player: Player, highest_bet: int, others_can_act: bool = True
) -> List[ActionType]:
    """The actions a seat may choose from in the current spot.

    Args:
        player: The seat about to act
        highest_bet: Largest round contribution at the table
        others_can_act: Whether anyone else could still answer a raise

    Returns:
        List[ActionType]: Legal actions, fold always first
    """
    actions = [ActionType.FOLD]
    owes = highest_bet - player.total_bet
    if owes <= 0:
        actions.append(ActionType.CHECK)
    else:
        actions.append(ActionType.CALL)
    if others_can_act and player.chips > max(0, owes):
        actions.append(ActionType.RAISE)
    return actions


def handle_betting_round(game: "HoldemGame") -> bool:
    """Run one street of betting.

    Before the flop the seat after the big blind acts first; on later streets
    the seat after the dealer does. Betting is skipped when fewer than two
    players can act and nobody still owes chips.

    Args:
        game: Game object with ``table``, ``round_state`` and ``config``

    Returns:
        bool: Whether more than one player is still in the hand
    """
    table = game.table
    state = game.round_state

    if len(table.in_hand_players()) <= 1:
        return False

    actors = table.active_players()
    owing = [p for p in actors if p.total_bet < state.highest_bet]
    if len(actors) < 2 and not owing:
        BettingLogger.log_skip_betting("fewer than two players can act")
        return True

    offset = 3 if state.phase == RoundPhase.PRE_FLOP else 1
    index = table.seat_after(table.dealer_index, offset)
    pending: Set[str] = {p.name for p in actors}

    BettingLogger.log_betting_round_start(
        state.phase.value, table.players[index].name, state.highest_bet
    )

    while pending and len(table.in_hand_players()) > 1:
        player = table.players[index]
        index = table.seat_after(index)

        if player.name not in pending:
            continue
        pending.discard(player.name)
        if not player.can_act:
            continue

        BettingLogger.log_player_turn(
            player_name=player.name,
            chips=player.chips,
            current_bet=player.total_bet,
            highest_bet=state.highest_bet,
            active_players=[p.name for p in table.in_hand_players()],
            last_raiser=state.last_raiser,
        )

        others_can_act = any(p.can_act for p in table.players if p is not player)
        decision = player.decide_action(game)
        action = _legalize(decision, player, state.highest_bet, others_can_act)

        if _apply_action(game, player, action, decision):
            pending = {p.name for p in table.active_players() if p is not player}

    table.log_state()
    remaining = len(table.in_hand_players())
    BettingLogger.log_round_complete(
        "only one player left" if remaining <= 1 else "all bets matched"
    )
    return remaining > 1


def _legalize(
    decision: ActionDecision, player: Player, highest_bet: int, others_can_act: bool
) -> ActionType:
    """Map the requested action onto a legal one for this spot."""
    if not isinstance(decision, ActionDecision):
        raise InvalidActionError(
            f"{player.name} returned {decision!r} instead of an ActionDecision"
        )

    requested = decision.action_type
    legal = legal_actions(player, highest_bet, others_can_act)
    if requested in legal:
        return requested

    if requested == ActionType.CHECK:
        replacement = ActionType.CALL
    elif ActionType.CHECK in legal:
        replacement = ActionType.CHECK
    else:
        replacement = ActionType.CALL

    BettingLogger.log_invalid_action(player.name, requested.value, replacement.value)
    return replacement


def _apply_action(
    game: "HoldemGame",
    player: Player,
    action: ActionType,
    decision: ActionDecision,
) -> bool:
    """Execute a legal action. Returns True when the action raised the highest bet."""
    state = game.round_state

    if action == ActionType.FOLD:
        player.fold()
        BettingLogger.log_player_action(player.name, "fold")
        return False

    if action == ActionType.CHECK:
        BettingLogger.log_player_action(player.name, "check")
        return False

    if action == ActionType.CALL:
        added = player.call(state.highest_bet)
        BettingLogger.log_player_action(
            player.name, "call", added, is_all_in=player.is_all_in
        )
        return False

    player.raise_bet(state.highest_bet, decision.raise_amount)
    state.highest_bet = player.total_bet
    state.raise_count += 1
    state.last_raiser = player.name
    BettingLogger.log_player_action(
        player.name, "raise", player.total_bet, is_all_in=player.is_all_in
    )
    return True
