"""
Card and Deck for the poker table.

Cards are immutable values named the way they travel over the wire:
rank is one of "ace", "2".."10", "jack", "queen", "king" and suit is one of
"hearts", "clubs", "diamonds", "spades".

The deck is a value too: dealing never alters a Deck in place, it returns
the remaining pool together with the cards drawn. Draws come from an
injected ``random.Random`` so a fixed seed reproduces a deal exactly.
"""

from __future__ import annotations
import logging
import random
from enum import Enum
from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from pokertable.core.errors import CardValidationError, EmptyDeckError


logger = logging.getLogger(__name__)


class Suit(str, Enum):
    """Card suits."""
    HEARTS = "hearts"
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    SPADES = "spades"


class Rank(str, Enum):
    """Card ranks, declared in deck order (ace first)."""
    ACE = "ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"

    @property
    def value_high(self) -> int:
        """Numeric value with ace high (2..14)."""
        return RANK_VALUES[self]

    @property
    def value_low(self) -> int:
        """Numeric value with ace low (1..13). Only straights use this."""
        return 1 if self is Rank.ACE else RANK_VALUES[self]


RANK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
}

# Short notation, e.g. "Ac", "10h", "Td"
RANK_CHARS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_CHARS = {
    Suit.HEARTS: "h",
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.SPADES: "s",
}

SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.SPADES: "♠",
}

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["T"] = Rank.TEN  # Also accept "T"
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


CardLike = Union["Card", Mapping[str, Any], str]


class Card:
    """
    An immutable playing card.

    Cards can be created from:
    - Enums or their string values: Card(Rank.ACE, "spades")
    - Short notation: Card.from_string("As"), Card.from_string("10h")
    - A wire mapping: Card.from_dict({"rank": "ace", "suit": "spades"})

    Anything outside the rank/suit domain raises CardValidationError.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Union[Rank, str], suit: Union[Suit, str]):
        try:
            object.__setattr__(self, "_rank", Rank(rank))
        except ValueError:
            raise CardValidationError(f"Invalid rank: {rank!r}") from None
        try:
            object.__setattr__(self, "_suit", Suit(suit))
        except ValueError:
            raise CardValidationError(f"Invalid suit: {suit!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Card is immutable")

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from short notation.

        Accepts "As", "Kh", "10d", "Td" or a suit symbol ("A♠").
        """
        s = s.strip()
        if len(s) < 2:
            raise CardValidationError(f"Invalid card string: {s!r}")

        rank_part, suit_part = s[:-1].upper(), s[-1]
        if rank_part not in CHAR_TO_RANK:
            raise CardValidationError(f"Invalid rank: {rank_part!r}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise CardValidationError(f"Invalid suit: {suit_part!r}")

        return cls(CHAR_TO_RANK[rank_part], suit)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Card:
        """Create a card from its wire form ``{"rank": ..., "suit": ...}``."""
        if not isinstance(data, Mapping) or set(data) != {"rank", "suit"}:
            raise CardValidationError(f"Invalid card: {data!r}")
        return cls(data["rank"], data["suit"])

    @classmethod
    def coerce(cls, value: CardLike) -> Card:
        """Accept a Card, a wire mapping or short notation."""
        if isinstance(value, Card):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise CardValidationError(f"Not a card: {value!r}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank is other._rank and self._suit is other._suit
        return False

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only, ace high (for sorting)."""
        return self._rank.value_high < other._rank.value_high

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', '10h'."""
        return f"{RANK_CHARS[self._rank]}{SUIT_CHARS[self._suit]}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"rank": self._rank.value, "suit": self._suit.value}


def full_deck() -> List[Card]:
    """All 52 cards, suit by suit, in rank declaration order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class DealResult(NamedTuple):
    """Outcome of a deal: the pool left over and the cards drawn, in draw order."""
    remaining: Deck
    dealt: List[Card]


class Deck:
    """
    The pool of undealt cards.

    A Deck never changes once built. ``deal`` hands back a new Deck for
    the remaining cards; callers replace their stored deck with it.

    Usage:
        deck = Deck.create()
        deck, hole_cards = deck.deal(2, rng)
    """

    __slots__ = ("_cards",)

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(set(cards)) != len(cards):
            raise CardValidationError("Deck contains duplicate cards")
        self._cards: Tuple[Card, ...] = cards

    @classmethod
    def create(cls) -> Deck:
        """A fresh deck holding all 52 cards exactly once."""
        return cls(full_deck())

    def deal(self, count: int = 1, rng: Optional[random.Random] = None) -> DealResult:
        """
        Draw ``count`` cards uniformly at random without replacement.

        Args:
            count: Number of cards to draw
            rng: Random source; a fresh unseeded ``random.Random`` if omitted

        Raises:
            EmptyDeckError: If fewer than ``count`` cards remain.
        """
        if count < 1:
            raise EmptyDeckError(f"Cannot deal {count} cards")
        if count > len(self._cards):
            raise EmptyDeckError(
                f"Cannot deal {count} cards, only {len(self._cards)} remain"
            )
        if rng is None:
            rng = random.Random()

        pool = list(self._cards)
        dealt = []
        for _ in range(count):
            dealt.append(pool.pop(rng.randrange(len(pool))))

        logger.debug(f"Dealt {[c.short_str for c in dealt]}, {len(pool)} remain")
        return DealResult(Deck(pool), dealt)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def deal(deck: Deck, count: int = 1, rng: Optional[random.Random] = None) -> DealResult:
    """Function form of ``Deck.deal``."""
    return deck.deal(count, rng)


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "Ac Kc Qc Jc 10c".

    Returns:
        List of Card objects
    """
    return [Card.from_string(s) for s in cards_str.split()]
