from collections import Counter, defaultdict
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from data.enums import Suit
from data.types.hand_rank import HandCategory
from exceptions import InvalidHandError

from .card import ACE, Card, rank_name

MIN_CARDS = 5
MAX_CARDS = 7
TIEBREAKER_LENGTH = 5


class HandRank(NamedTuple):
    """
    The value of the best five-card hand found in a set of cards.

    Attributes:
        category (HandCategory): Hand category from HIGH_CARD to ROYAL_FLUSH
        tiebreakers (Tuple[int, ...]): Exactly five rank values, defining ranks first,
            then kickers, zero padded. Aces always count as 14 here, except as the
            top of the 5-4-3-2-A straight whose top card is 5.
    """

    category: HandCategory
    tiebreakers: Tuple[int, int, int, int, int]

    @property
    def description(self) -> str:
        return describe_hand(self)


def evaluate_hand(cards: Sequence[Card]) -> HandRank:
    """
    Rank the best five-card poker hand that can be formed from 5 to 7 cards.

    Categories are tried from strongest to weakest and the first one that the
    cards satisfy wins:

        1. Royal / Straight Flush - five consecutive cards of one suit
        2. Four of a Kind         - [quad, kicker]
        3. Full House             - [triplet, pair]
        4. Flush                  - five best ranks of the suit
        5. Straight               - [top card]
        6. Three of a Kind        - [triplet, two kickers]
        7. Two Pair               - [high pair, low pair, kicker]
        8. One Pair               - [pair, three kickers]
        9. High Card              - five best ranks

    The Ace plays high (14) everywhere and low only to complete 5-4-3-2-A.

    Args:
        cards: Between 5 and 7 distinct cards, in any order.

    Returns:
        HandRank: category plus a five-entry tiebreaker tuple

    Raises:
        InvalidHandError: If the card count is outside 5-7, an element is not a
            Card, or a card appears twice.

    Example:
        >>> evaluate_hand([Card(14, Suit.SPADES), Card(13, Suit.SPADES), Card(12, Suit.SPADES),
        ...                Card(11, Suit.SPADES), Card(10, Suit.SPADES)])
        HandRank(category=<HandCategory.ROYAL_FLUSH: 10>, tiebreakers=(14, 0, 0, 0, 0))
    """
    _validate(cards)

    ranks = sorted((card.rank for card in cards), reverse=True)
    counts = Counter(ranks)

    suited: Dict[Suit, List[int]] = defaultdict(list)
    for card in cards:
        suited[card.suit].append(card.rank)
    flush_ranks = _flush_ranks(suited)

    # Straight flush: best run among suits holding five or more cards
    straight_flush_top = None
    for suit_ranks in suited.values():
        if len(suit_ranks) < 5:
            continue
        top = _straight_top(suit_ranks)
        if top is not None and (straight_flush_top is None or top > straight_flush_top):
            straight_flush_top = top
    if straight_flush_top == ACE:
        return _rank(HandCategory.ROYAL_FLUSH, [ACE])
    if straight_flush_top is not None:
        return _rank(HandCategory.STRAIGHT_FLUSH, [straight_flush_top])

    quads = sorted((r for r, c in counts.items() if c >= 4), reverse=True)
    trips = sorted((r for r, c in counts.items() if c == 3), reverse=True)
    pairs = sorted((r for r, c in counts.items() if c == 2), reverse=True)

    if quads:
        quad = quads[0]
        return _rank(HandCategory.FOUR_OF_KIND, [quad] + _kickers(ranks, [quad], 1))

    if trips and (len(trips) > 1 or pairs):
        triplet = trips[0]
        # Second triplet or best real pair, whichever ranks higher
        pair = max(trips[1:] + pairs)
        return _rank(HandCategory.FULL_HOUSE, [triplet, pair])

    if flush_ranks:
        return _rank(HandCategory.FLUSH, flush_ranks[:5])

    straight_top = _straight_top(ranks)
    if straight_top is not None:
        return _rank(HandCategory.STRAIGHT, [straight_top])

    if trips:
        triplet = trips[0]
        return _rank(
            HandCategory.THREE_OF_KIND, [triplet] + _kickers(ranks, [triplet], 2)
        )

    if len(pairs) >= 2:
        high_pair, low_pair = pairs[0], pairs[1]
        return _rank(
            HandCategory.TWO_PAIR,
            [high_pair, low_pair] + _kickers(ranks, [high_pair, low_pair], 1),
        )

    if pairs:
        pair = pairs[0]
        return _rank(HandCategory.ONE_PAIR, [pair] + _kickers(ranks, [pair], 3))

    return _rank(HandCategory.HIGH_CARD, _kickers(ranks, [], 5))


def describe_hand(hand_rank: HandRank) -> str:
    """Human readable description, e.g. "a full house, Queens over 4s"."""
    category = hand_rank.category
    first = rank_name(hand_rank.tiebreakers[0])
    second = rank_name(hand_rank.tiebreakers[1])

    if category == HandCategory.ROYAL_FLUSH:
        return "a royal flush"
    if category == HandCategory.STRAIGHT_FLUSH:
        return f"a straight flush, {first} high"
    if category == HandCategory.FOUR_OF_KIND:
        return f"a four-of-a-kind of {first}s"
    if category == HandCategory.FULL_HOUSE:
        return f"a full house, {first}s over {second}s"
    if category == HandCategory.FLUSH:
        return f"a flush, {first} high"
    if category == HandCategory.STRAIGHT:
        return f"a straight, {first} high"
    if category == HandCategory.THREE_OF_KIND:
        return f"a three-of-a-kind of {first}s"
    if category == HandCategory.TWO_PAIR:
        return f"two pair, {first}s over {second}s"
    if category == HandCategory.ONE_PAIR:
        return f"a pair of {first}s"
    return f"a high card, {first}"


def _validate(cards: Sequence[Card]) -> None:
    if cards is None:
        raise InvalidHandError("No cards to evaluate")
    if not MIN_CARDS <= len(cards) <= MAX_CARDS:
        raise InvalidHandError(
            f"Hand must contain between {MIN_CARDS} and {MAX_CARDS} cards, got {len(cards)}"
        )
    seen = set()
    for card in cards:
        if not isinstance(card, Card):
            raise InvalidHandError(f"Not a card: {card!r}")
        if card in seen:
            raise InvalidHandError(f"Duplicate card found: {card}")
        seen.add(card)


def _rank(category: HandCategory, values: List[int]) -> HandRank:
    padded = list(values) + [0] * (TIEBREAKER_LENGTH - len(values))
    return HandRank(category, tuple(padded[:TIEBREAKER_LENGTH]))


def _kickers(ranks: Iterable[int], used: List[int], count: int) -> List[int]:
    """Highest distinct ranks not already consumed by the category."""
    kickers: List[int] = []
    for rank in sorted(set(ranks), reverse=True):
        if rank in used:
            continue
        kickers.append(rank)
        if len(kickers) == count:
            break
    return kickers


def _flush_ranks(suited: Dict[Suit, List[int]]) -> Optional[List[int]]:
    best = None
    for suit_ranks in suited.values():
        if len(suit_ranks) >= 5:
            candidate = sorted(suit_ranks, reverse=True)
            if best is None or candidate[:5] > best[:5]:
                best = candidate
    return best


def _straight_top(ranks: Iterable[int]) -> Optional[int]:
    """Top card of the highest five-card run, treating an Ace as 1 only here."""
    distinct = set(ranks)
    if ACE in distinct:
        distinct.add(1)
    for top in range(ACE, 4, -1):
        if all(top - offset in distinct for offset in range(5)):
            return top
    return None
