"""
Table rules and constants.

Default stakes follow the house table: ante 5, small blind 25, big blind 50,
six seats. Hole cards are dealt one at a time, clockwise, starting with the
first occupied seat after the button.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class BlindStructure:
    """Forced bets for a table. Posting them is not part of the dealer."""
    ante: int
    small: int
    big: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


# Default table settings
DEFAULT_SEATS = 6
MIN_SEATS = 2
MAX_SEATS = 10
DEFAULT_ANTE = 5
DEFAULT_SMALL_BLIND = 25
DEFAULT_BIG_BLIND = 50

# Cards per street
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = FLOP_CARDS + TURN_CARDS + RIVER_CARDS

# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand
MAX_HAND_CARDS = HOLE_CARDS + TOTAL_COMMUNITY_CARDS
