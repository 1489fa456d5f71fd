"""
Poker Table Core - Pure Python rules engine

Cards and deck, hand ranking, seat search and the dealing state machine.
No network dependencies.
"""

from pokertable.core.card import Card, Deck, Rank, Suit, DealResult
from pokertable.core.errors import (
    PokerTableError, SeatRangeError, SeatOccupiedError, EmptyDeckError,
    CardValidationError, ActionInProgressError, ActionNotInProgressError,
    ActionPreconditionError,
)
from pokertable.core.player import Seat
from pokertable.core.hand import (
    HandRank, HandCategory, evaluate, best_hand, compare_hands, describe_hand,
)
from pokertable.core.rng import create_rng
from pokertable.core.game import (
    Game, ActionName, SeatProgress, BoardProgress, ACTIONS, deal,
    create, seat, start_action, next_action, run_action,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "DealResult",
    "PokerTableError",
    "SeatRangeError",
    "SeatOccupiedError",
    "EmptyDeckError",
    "CardValidationError",
    "ActionInProgressError",
    "ActionNotInProgressError",
    "ActionPreconditionError",
    "Seat",
    "HandRank",
    "HandCategory",
    "evaluate",
    "best_hand",
    "compare_hands",
    "describe_hand",
    "create_rng",
    "Game",
    "ActionName",
    "SeatProgress",
    "BoardProgress",
    "ACTIONS",
    "deal",
    "create",
    "seat",
    "start_action",
    "next_action",
    "run_action",
]
