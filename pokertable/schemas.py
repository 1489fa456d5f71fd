"""
Pydantic schemas for table configuration and game snapshots.

Configuration is validated on the way in; snapshots are what the transport
layer broadcasts to clients.
"""

from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from pokertable.core.card import Rank, Suit
from pokertable.core.rules import (
    DEFAULT_ANTE, DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND,
    DEFAULT_SEATS, MIN_SEATS, MAX_SEATS,
)


# ============= Configuration Schemas =============

class BlindsSchema(BaseModel):
    """Forced bets for the table."""
    model_config = ConfigDict(extra="forbid")

    ante: int = Field(ge=0, default=DEFAULT_ANTE)
    small: int = Field(gt=0, default=DEFAULT_SMALL_BLIND)
    big: int = Field(gt=0, default=DEFAULT_BIG_BLIND)

    @model_validator(mode="after")
    def check_order(self) -> "BlindsSchema":
        if self.big < self.small:
            raise ValueError("big blind must not be smaller than small blind")
        return self


class GameConfig(BaseModel):
    """Settings for a new table."""
    model_config = ConfigDict(extra="forbid")

    seats: int = Field(ge=MIN_SEATS, le=MAX_SEATS, default=DEFAULT_SEATS)
    blinds: BlindsSchema = Field(default_factory=BlindsSchema)


# ============= Snapshot Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: Rank
    suit: Suit


class SeatSchema(BaseModel):
    """An occupied seat. Hidden seats report card_count but no cards."""
    player: str
    cards: List[CardSchema] = []
    card_count: int = 0
    stack: int = 0
    folded: bool = False


class GameSnapshot(BaseModel):
    """Complete table state as broadcast to clients."""
    button: int
    blinds: BlindsSchema
    seats: List[Union[Literal["empty"], SeatSchema]]
    board: List[CardSchema] = []
    deck_size: int
    actions: Dict[str, Dict[str, int]] = {}


class HandRankSchema(BaseModel):
    """An evaluated hand, as recorded in hand history."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    from_: Optional[Rank] = Field(default=None, alias="from")
    to: Optional[Rank] = None
    of: Optional[Rank] = None
    and_: Optional[Rank] = Field(default=None, alias="and")
    high: Optional[Rank] = None
    rank: Optional[Rank] = None
    kicker: Optional[Rank] = None
    kickers: Optional[List[Rank]] = None
