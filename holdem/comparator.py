"""Total ordering of evaluated hands and grouping of players into tie groups."""

from functools import cmp_to_key
from typing import List, Mapping

from .evaluator import HandRank


def compare_hands(a: HandRank, b: HandRank) -> int:
    """Compare two evaluated hands.

    Returns:
        int: 1 if ``a`` is better, -1 if ``b`` is better, 0 if they tie
    """
    if a.category != b.category:
        return 1 if a.category.value > b.category.value else -1

    for a_value, b_value in zip(a.tiebreakers, b.tiebreakers):
        if a_value != b_value:
            return 1 if a_value > b_value else -1

    return 0


def rank_tie_groups(evaluations: Mapping[str, HandRank]) -> List[List[str]]:
    """Order players best hand first and group equal hands together.

    The sort is stable, so players inside a tie group keep the order in which
    they appear in ``evaluations`` (the caller passes seat order).

    Args:
        evaluations: Player name to evaluated hand, in seat order

    Returns:
        List[List[str]]: Tie groups, best first
    """
    ordered = sorted(
        evaluations.items(),
        key=cmp_to_key(lambda x, y: compare_hands(y[1], x[1])),
    )

    groups: List[List[str]] = []
    previous = None
    for name, hand_rank in ordered:
        if previous is not None and compare_hands(previous, hand_rank) == 0:
            groups[-1].append(name)
        else:
            groups.append([name])
        previous = hand_rank
    return groups
