"""
Errors raised by the poker table core.

All of them are raised synchronously at the offending call and none are
retried. Each one also derives from the builtin exception a caller would
naturally catch for that kind of mistake.
"""


class PokerTableError(Exception):
    """Base class for every table error."""


class SeatRangeError(PokerTableError, IndexError):
    """Seat index outside ``0 <= index < len(seats)``."""


class SeatOccupiedError(PokerTableError, ValueError):
    """A player was seated on a seat that is already taken."""


class EmptyDeckError(PokerTableError, ValueError):
    """More cards were requested than the deck holds."""


class CardValidationError(PokerTableError, ValueError):
    """A card, or a hand of cards, is malformed."""


class ActionInProgressError(PokerTableError, RuntimeError):
    """An action was started while the same action is still in flight."""


class ActionNotInProgressError(PokerTableError, RuntimeError):
    """An action was advanced without being started."""


class ActionPreconditionError(PokerTableError, RuntimeError):
    """The table is not in a state where the action can start."""
