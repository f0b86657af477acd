"""Distribution of a round's contributions back to the players.

``settle`` is pure: it reads a contributions mapping and an outcome and returns
a ``SettlementResult`` without touching any player. The Round Controller applies
the awards afterwards.

Showdown settlement walks the tie groups best first. Inside a group the member
with the smallest remaining contribution caps the pot: every contributor at the
table pays in at most that cap, the members still covering it share the pot,
and the capped member takes any odd chips. Whatever richer players contributed
above the cap stays on the table for the next member or the next group, which
is how side pots come about.
"""

from typing import Dict, List, Mapping, Union

from data.types.pot_types import FoldOut, SettlementResult, Showdown, SidePot
from exceptions import InvalidGameStateError
from loggers.settlement_logger import SettlementLogger

Outcome = Union[Showdown, FoldOut]


def settle(contributions: Mapping[str, int], outcome: Outcome) -> SettlementResult:
    """Compute the chips each player is awarded this round.

    Args:
        contributions: Player name to chips contributed this round
        outcome: ``Showdown`` with tie groups (best first) or ``FoldOut`` with the
            single remaining player

    Returns:
        SettlementResult: awards for every contributor (zero for losers) whose sum
            equals the sum of contributions

    Raises:
        InvalidGameStateError: On negative contributions, an empty tie-group list,
            a player listed in two tie groups or an unknown fold-out winner
    """
    _validate_contributions(contributions)

    if isinstance(outcome, FoldOut):
        result = _settle_fold_out(contributions, outcome)
    elif isinstance(outcome, Showdown):
        result = _settle_showdown(contributions, outcome)
    else:
        raise InvalidGameStateError(f"Unknown settlement outcome: {outcome!r}")

    total_in = sum(contributions.values())
    if result.total_awarded != total_in:
        SettlementLogger.log_conservation_error(total_in, result.total_awarded)
        raise InvalidGameStateError(
            f"Settlement lost chips: contributed={total_in}, awarded={result.total_awarded}"
        )
    return result


def _validate_contributions(contributions: Mapping[str, int]) -> None:
    for name, amount in contributions.items():
        if amount < 0:
            SettlementLogger.log_invalid_contribution(name, amount)
            raise InvalidGameStateError(
                f"Contribution cannot be negative: {name}={amount}"
            )


def _settle_fold_out(
    contributions: Mapping[str, int], outcome: FoldOut
) -> SettlementResult:
    winner = outcome.winner
    if winner not in contributions:
        raise InvalidGameStateError(f"Fold-out winner {winner} made no contribution")

    awards = {name: 0 for name in contributions}
    pot = sum(contributions.values())
    awards[winner] = pot

    SettlementLogger.log_fold_out(winner, pot)
    return SettlementResult(
        awards=awards,
        pots=[SidePot(amount=pot, eligible_players=[winner], winners=[winner])],
    )


def _settle_showdown(
    contributions: Mapping[str, int], outcome: Showdown
) -> SettlementResult:
    tie_groups = outcome.tie_groups
    if not tie_groups or not any(tie_groups):
        raise InvalidGameStateError("Showdown requires at least one tie group")

    seen = set()
    for group in tie_groups:
        for name in group:
            if name in seen:
                raise InvalidGameStateError(f"{name} appears in more than one tie group")
            seen.add(name)

    remaining: Dict[str, int] = dict(contributions)
    awards: Dict[str, int] = {name: 0 for name in contributions}
    for name in seen:
        awards.setdefault(name, 0)
    pots: List[SidePot] = []

    for group in tie_groups:
        members = [name for name in group if remaining.get(name, 0) > 0]

        while members:
            # Stable sort keeps seat order among equal contributions
            members.sort(key=lambda name: remaining[name])
            capped = members[0]
            cap = remaining[capped]

            pot = sum(min(amount, cap) for amount in remaining.values() if amount > 0)
            sharers = [name for name in members if remaining[name] >= cap]
            share, odd_chips = divmod(pot, len(sharers))

            for name in sharers:
                awards[name] += share
            awards[capped] += odd_chips

            for name, amount in remaining.items():
                if amount > 0:
                    remaining[name] = max(0, amount - cap)

            pots.append(
                SidePot(
                    amount=pot,
                    eligible_players=list(group),
                    winners=sharers,
                    odd_chips=odd_chips,
                )
            )
            SettlementLogger.log_pot_resolved(len(pots), pot, sharers, odd_chips, capped)

            members = [name for name in members if remaining[name] > 0]

    # Whatever is left was never contested by a showdown player. It goes back
    # to its owner even when that owner folded, so chips are conserved.
    refunds = {name: amount for name, amount in remaining.items() if amount > 0}
    for name, amount in refunds.items():
        awards[name] += amount
        SettlementLogger.log_refund(name, amount)

    SettlementLogger.log_side_pots_info(pots)
    return SettlementResult(awards=awards, pots=pots, refunds=refunds)
