"""
Poker Table - Texas Hold'em rules engine

- Hand ranking for any 5 cards, best hand out of 7
- Seat-by-seat dealing state machine with a seedable deck
- Pydantic snapshots for whatever transport broadcasts the table

Usage:
    from pokertable.core import create, seat, deal, evaluate
"""

__version__ = "0.1.0"

from pokertable.core.card import Card, Deck
from pokertable.core.game import Game, ActionName, create, seat, deal
from pokertable.core.hand import HandRank, evaluate, best_hand

__all__ = [
    "Card",
    "Deck",
    "Game",
    "ActionName",
    "create",
    "seat",
    "deal",
    "HandRank",
    "evaluate",
    "best_hand",
    "__version__",
]
