"""
Hand Evaluation for Texas Hold'em.

``evaluate`` classifies exactly 5 cards. ``best_hand`` picks the best 5-card
combination out of 5-7 cards. Both return a ``HandRank``: a category name
plus the tie-break fields needed to order hands of the same category.

Hand Rankings (best to worst):
1. Royal Flush: 10 J Q K A, same suit
2. Straight Flush: 5 consecutive cards of same suit (from, to)
3. Four of a Kind: 4 cards of same rank (of, kicker)
4. Full House: 3 of a kind + pair (of, and)
5. Flush: 5 cards of same suit (high, kickers)
6. Straight: 5 consecutive cards (from, to)
7. Three of a Kind: 3 cards of same rank (of, kickers)
8. Two Pair: 2 different pairs (of, and, kicker)
9. One Pair: 2 cards of same rank (of, kickers)
10. High Card: No made hand (rank, kickers)

Note: Ace can be low in A-2-3-4-5 straight (wheel). Nowhere else.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from collections import Counter

from pokertable.core.card import Card, CardLike, Rank
from pokertable.core.errors import CardValidationError
from pokertable.core.rules import HAND_SIZE, MAX_HAND_CARDS


class HandCategory(str, Enum):
    """Hand categories, best first. Values are the wire names."""
    ROYAL_FLUSH = "royal flush"
    STRAIGHT_FLUSH = "straight flush"
    FOUR_OF_A_KIND = "4 of a kind"
    FULL_HOUSE = "full house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "3 of a kind"
    TWO_PAIR = "2 pair"
    ONE_PAIR = "1 pair"
    HIGH_CARD = "high card"

    @property
    def strength(self) -> int:
        """9 for a royal flush down to 0 for high card."""
        return HAND_STRENGTH[self]


HAND_STRENGTH = {
    category: strength
    for strength, category in enumerate(reversed(list(HandCategory)))
}

# Output fields per category, in tie-break order
CATEGORY_FIELDS = {
    HandCategory.ROYAL_FLUSH: (),
    HandCategory.STRAIGHT_FLUSH: ("from", "to"),
    HandCategory.FOUR_OF_A_KIND: ("of", "kicker"),
    HandCategory.FULL_HOUSE: ("of", "and"),
    HandCategory.FLUSH: ("high", "kickers"),
    HandCategory.STRAIGHT: ("from", "to"),
    HandCategory.THREE_OF_A_KIND: ("of", "kickers"),
    HandCategory.TWO_PAIR: ("of", "and", "kicker"),
    HandCategory.ONE_PAIR: ("of", "kickers"),
    HandCategory.HIGH_CARD: ("rank", "kickers"),
}

# "from" and "and" are keywords
_ATTRIBUTES = {"from": "from_", "and": "and_"}


@dataclass(frozen=True)
class HandRank:
    """
    The result of evaluating a hand.

    Only the fields listed for the category in CATEGORY_FIELDS are set;
    ``to_dict`` emits exactly those under their wire names.
    """
    name: HandCategory
    from_: Optional[Rank] = None
    to: Optional[Rank] = None
    of: Optional[Rank] = None
    and_: Optional[Rank] = None
    high: Optional[Rank] = None
    rank: Optional[Rank] = None
    kicker: Optional[Rank] = None
    kickers: Tuple[Rank, ...] = ()

    @property
    def strength(self) -> int:
        return self.name.strength

    def get(self, field_name: str) -> Any:
        """Look up a field by its wire name ("from", "and", ...)."""
        return getattr(self, _ATTRIBUTES.get(field_name, field_name))

    def key(self) -> Tuple[int, Tuple[int, ...]]:
        """
        Sort key: larger is better.

        Straights are ordered by their top card, so the wheel counts as
        5-high. Kickers always count ace high.
        """
        values: List[int] = []
        for field_name in CATEGORY_FIELDS[self.name]:
            if field_name == "from":
                continue
            value = self.get(field_name)
            if isinstance(value, tuple):
                values.extend(rank.value_high for rank in value)
            else:
                values.append(value.value_high)
        return self.strength, tuple(values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization and hand history."""
        result: Dict[str, Any] = {"name": self.name.value}
        for field_name in CATEGORY_FIELDS[self.name]:
            value = self.get(field_name)
            if isinstance(value, tuple):
                result[field_name] = [rank.value for rank in value]
            else:
                result[field_name] = value.value
        return result

    def __str__(self) -> str:
        return describe_hand(self)


def evaluate(cards: Sequence[CardLike]) -> HandRank:
    """
    Evaluate exactly 5 cards.

    Args:
        cards: Card objects, ``{"rank", "suit"}`` mappings or strings like "Ac"

    Returns:
        The hand's HandRank

    Raises:
        CardValidationError: If not exactly 5 distinct valid cards
    """
    hand = _coerce_cards(cards, HAND_SIZE, HAND_SIZE)

    rank_counts = Counter(card.rank for card in hand)
    # Most copies first, then highest rank first
    groups = sorted(
        rank_counts.items(),
        key=lambda item: (item[1], item[0].value_high),
        reverse=True,
    )
    counts = [count for _, count in groups]
    ordered = [rank for rank, _ in groups]

    is_flush = len({card.suit for card in hand}) == 1
    straight = _find_straight(ordered) if len(ordered) == HAND_SIZE else None

    if is_flush and straight:
        low, high = straight
        if low is Rank.TEN:
            return HandRank(HandCategory.ROYAL_FLUSH)
        return HandRank(HandCategory.STRAIGHT_FLUSH, from_=low, to=high)

    if counts == [4, 1]:
        return HandRank(HandCategory.FOUR_OF_A_KIND, of=ordered[0], kicker=ordered[1])

    if counts == [3, 2]:
        return HandRank(HandCategory.FULL_HOUSE, of=ordered[0], and_=ordered[1])

    if is_flush:
        return HandRank(HandCategory.FLUSH, high=ordered[0], kickers=tuple(ordered[1:]))

    if straight:
        low, high = straight
        return HandRank(HandCategory.STRAIGHT, from_=low, to=high)

    if counts == [3, 1, 1]:
        return HandRank(
            HandCategory.THREE_OF_A_KIND, of=ordered[0], kickers=tuple(ordered[1:])
        )

    if counts == [2, 2, 1]:
        return HandRank(
            HandCategory.TWO_PAIR, of=ordered[0], and_=ordered[1], kicker=ordered[2]
        )

    if counts == [2, 1, 1, 1]:
        return HandRank(HandCategory.ONE_PAIR, of=ordered[0], kickers=tuple(ordered[1:]))

    return HandRank(HandCategory.HIGH_CARD, rank=ordered[0], kickers=tuple(ordered[1:]))


def _find_straight(ranks: Sequence[Rank]) -> Optional[Tuple[Rank, Rank]]:
    """
    Check whether 5 distinct ranks form a run.

    Tried with ace high first, then ace low for the wheel.

    Returns:
        (from, to) of the run, or None
    """
    for value_of in (lambda r: r.value_high, lambda r: r.value_low):
        run = sorted(ranks, key=value_of)
        if value_of(run[-1]) - value_of(run[0]) == HAND_SIZE - 1:
            return run[0], run[-1]
    return None


def _coerce_cards(cards: Iterable[CardLike], minimum: int, maximum: int) -> List[Card]:
    if isinstance(cards, (str, bytes)) or not isinstance(cards, Iterable):
        raise CardValidationError(f"Expected a sequence of cards, got {cards!r}")

    hand = [Card.coerce(card) for card in cards]
    if not minimum <= len(hand) <= maximum:
        expected = str(minimum) if minimum == maximum else f"{minimum}-{maximum}"
        raise CardValidationError(f"Need {expected} cards, got {len(hand)}")
    if len(set(hand)) != len(hand):
        raise CardValidationError(f"Duplicate cards in hand: {hand}")
    return hand


def best_hand(cards: Sequence[CardLike]) -> Tuple[HandRank, List[Card]]:
    """
    Find the best 5-card hand out of 5-7 cards (hole cards + board).

    Returns:
        Tuple of (hand rank, the 5 cards that make it)
    """
    pool = _coerce_cards(cards, HAND_SIZE, MAX_HAND_CARDS)

    best: Optional[Tuple[HandRank, List[Card]]] = None
    for combo in combinations(pool, HAND_SIZE):
        hand_rank = evaluate(combo)
        if best is None or hand_rank.key() > best[0].key():
            best = (hand_rank, list(combo))
    return best


def compare_hands(a: HandRank, b: HandRank) -> int:
    """
    Compare two evaluated hands.

    Returns:
        -1 if a wins, 1 if b wins, 0 if tie
    """
    key_a, key_b = a.key(), b.key()
    if key_a > key_b:
        return -1
    elif key_a < key_b:
        return 1
    else:
        return 0


def _rank_name(rank: Rank) -> str:
    """Display name of a rank: 'Ace', 'King', ..., '10', ..., '2'."""
    if rank in (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK):
        return rank.value.capitalize()
    return rank.value


HAND_DESCRIPTIONS = {
    HandCategory.ROYAL_FLUSH: lambda h: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: lambda h: f"Straight Flush, {_rank_name(h.to)} high",
    HandCategory.FOUR_OF_A_KIND: lambda h: f"Four {_rank_name(h.of)}s",
    HandCategory.FULL_HOUSE: lambda h: (
        f"Full House, {_rank_name(h.of)}s over {_rank_name(h.and_)}s"
    ),
    HandCategory.FLUSH: lambda h: f"Flush, {_rank_name(h.high)} high",
    HandCategory.STRAIGHT: lambda h: f"Straight, {_rank_name(h.to)} high",
    HandCategory.THREE_OF_A_KIND: lambda h: f"Three {_rank_name(h.of)}s",
    HandCategory.TWO_PAIR: lambda h: (
        f"Two Pair, {_rank_name(h.of)}s and {_rank_name(h.and_)}s"
    ),
    HandCategory.ONE_PAIR: lambda h: f"Pair of {_rank_name(h.of)}s",
    HandCategory.HIGH_CARD: lambda h: f"{_rank_name(h.rank)} High",
}


def describe_hand(hand_rank: HandRank) -> str:
    """Get a human-readable description of an evaluated hand."""
    return HAND_DESCRIPTIONS[hand_rank.name](hand_rank)
