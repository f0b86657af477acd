"""End of a round: evaluate the hands still in, settle the contributions and pay out.

Settlement itself is pure; this module is where its result is applied to the
players. Awards are credited only after the result has been checked against the
table's contributions, and every ``total_bet`` is then reset to zero.
"""

from typing import Dict, List

from data.types.pot_types import FoldOut, SettlementResult, Showdown
from data.types.round_outcome import RoundOutcome
from exceptions import InvalidGameStateError, InvalidHandError
from loggers.settlement_logger import SettlementLogger
from loggers.showdown_logger import ShowdownLogger

from .card import Card
from .comparator import rank_tie_groups
from .evaluator import HandRank
from .player import Player
from .settlement import settle
from .table import Table


def handle_showdown(
    table: Table, community_cards: List[Card], round_number: int
) -> RoundOutcome:
    """Rank every player who has not folded and distribute the contributions.

    Players are evaluated in seat order starting left of the dealer, which is
    the order ties are broken in.

    Args:
        table: The table, with contributions still in ``total_bet``
        community_cards: The five community cards
        round_number: Number of the round, for the outcome record

    Returns:
        RoundOutcome: Ranking, hand descriptions and awards

    Raises:
        InvalidHandError: If a player's cards cannot be evaluated
        InvalidGameStateError: If the settlement does not conserve chips
    """
    ShowdownLogger.log_showdown_start()

    evaluations: Dict[str, HandRank] = {}
    descriptions: Dict[str, str] = {}
    cards: Dict[str, str] = {}
    for player in table.showdown_order():
        if player.folded:
            continue
        hand = player.hand_with(community_cards)
        try:
            evaluations[player.name] = hand.evaluate()
        except InvalidHandError as e:
            ShowdownLogger.log_evaluation_error(player.name, e)
            raise
        descriptions[player.name] = hand.describe()
        cards[player.name] = hand.show()
        ShowdownLogger.log_player_hand(player.name, cards[player.name], descriptions[player.name])

    if not evaluations:
        raise InvalidGameStateError("Showdown with every player folded")

    tie_groups = rank_tie_groups(evaluations)
    ShowdownLogger.log_tie_groups(tie_groups)

    result = settle(table.contributions(), Showdown(tie_groups=tie_groups))
    _apply_awards(table, result)

    return RoundOutcome(
        round_number=round_number,
        tie_groups=tie_groups,
        descriptions=descriptions,
        cards=cards,
        awards=result.awards,
        pots=result.pots,
    )


def handle_fold_out(table: Table, round_number: int) -> RoundOutcome:
    """Pay the whole round to the only player who has not folded.

    Raises:
        InvalidGameStateError: If not exactly one player is left in the hand
    """
    remaining = table.in_hand_players()
    if len(remaining) != 1:
        raise InvalidGameStateError(
            f"Fold-out needs exactly one player left, found {len(remaining)}"
        )
    winner = remaining[0]

    result = settle(table.contributions(), FoldOut(winner=winner.name))
    ShowdownLogger.log_single_winner(winner.name, result.awards[winner.name])
    _apply_awards(table, result)

    return RoundOutcome(
        round_number=round_number,
        folded_out=True,
        tie_groups=[[winner.name]],
        awards=result.awards,
        pots=result.pots,
    )


def _apply_awards(table: Table, result: SettlementResult) -> None:
    """Credit awards to stacks and clear contributions."""
    players: Dict[str, Player] = {p.name: p for p in table.players}
    unknown = [name for name in result.awards if name not in players]
    if unknown:
        raise InvalidGameStateError(f"Awards for players not at the table: {unknown}")

    chips_before = table.total_chips()
    initial = {p.name: p.chips + p.total_bet for p in table.players}
    ShowdownLogger.log_awards(result.awards)

    winners_paid = [name for name, amount in result.awards.items() if amount > 0]
    for player in table.players:
        award = result.awards.get(player.name, 0)
        player.total_bet = 0
        player.collect(award)
        if award:
            ShowdownLogger.log_pot_win(player.name, award, is_split=len(winners_paid) > 1)

    chips_after = table.total_chips()
    if chips_after != chips_before:
        SettlementLogger.log_chip_mismatch(
            chips_before, chips_after, {p.name: p.chips for p in table.players}
        )
        raise InvalidGameStateError(
            f"Chips not conserved: {chips_before} before, {chips_after} after"
        )

    for player in table.players:
        ShowdownLogger.log_chip_movements(player.name, initial[player.name], player.chips)
