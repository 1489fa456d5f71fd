"""
Seat occupancy for the poker table.

A row of seats holds ``None`` for an empty seat and a ``Seat`` record for an
occupied one. The record carries:
- the player identifier
- hole cards (0-2 while dealing preflop)
- stack (chip count)
- whether the player has folded
"""

from __future__ import annotations
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field

from pokertable.core.card import Card
from pokertable.core.rules import HOLE_CARDS


EMPTY = "empty"


@dataclass
class Seat:
    """
    An occupied seat.

    Attributes:
        player: Identifier of the seated player
        cards: Hole cards in the order they were dealt
        stack: Current chip count
        folded: Whether the player has folded this hand
    """
    player: str
    cards: List[Card] = field(default_factory=list)
    stack: int = 0
    folded: bool = False

    def receive(self, card: Card) -> None:
        """Take one hole card."""
        if len(self.cards) >= HOLE_CARDS:
            raise ValueError(f"Seat for {self.player} already holds {HOLE_CARDS} cards")
        self.cards.append(card)

    @property
    def has_hole_cards(self) -> bool:
        return len(self.cards) == HOLE_CARDS

    def to_dict(self, hide_cards: bool = False) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, report how many cards are held but not which
        """
        return {
            "player": self.player,
            "cards": [] if hide_cards else [card.to_dict() for card in self.cards],
            "card_count": len(self.cards),
            "stack": self.stack,
            "folded": self.folded,
        }

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards) if self.cards else "??"
        return f"Seat {self.player} [{cards_str}] ${self.stack}"


def is_occupied(seat: Optional[Seat]) -> bool:
    """Predicate for seat searches."""
    return seat is not None
