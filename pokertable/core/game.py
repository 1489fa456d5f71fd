"""
Poker Table State Machine.

A ``Game`` owns the seats, button, blinds, deck, board and the registry of
actions in flight. Multi-step actions (dealing hole cards, dealing the
board) all follow one convention:

- ``start`` puts a progress record into ``game.actions`` under the action's
  name; starting an action that is already in flight is an error
- ``next`` performs exactly one step and updates the record
- the record is removed on the step that completes the action

Every operation mutates the Game it is given and returns that same object.
A Game has a single writer: whoever owns it (e.g. the transport layer) must
serialize calls into it.

Usage:
    game = create({"seats": 6})
    seat(game, seat=0, player="alice")
    seat(game, seat=3, player="bob")
    deal.preflop.start(game)
    while ActionName.DEAL_PREFLOP in game.actions:
        deal.preflop.next(game)
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Union
from dataclasses import dataclass, asdict
from enum import Enum
from types import SimpleNamespace
import logging
import random

from pokertable.core.card import Card, Deck
from pokertable.core.errors import (
    ActionInProgressError, ActionNotInProgressError, ActionPreconditionError,
    SeatOccupiedError, SeatRangeError,
)
from pokertable.core.player import EMPTY, Seat, is_occupied
from pokertable.core.rng import create_rng
from pokertable.core.rules import (
    BlindStructure, FLOP_CARDS, TURN_CARDS, RIVER_CARDS,
)
from pokertable.core.seats import advance, find_from
from pokertable.schemas import GameConfig, GameSnapshot


logger = logging.getLogger(__name__)


class ActionName(str, Enum):
    """Names of the multi-step actions a table can run."""
    DEAL_PREFLOP = "deal.preflop"
    DEAL_FLOP = "deal.flop"
    DEAL_TURN = "deal.turn"
    DEAL_RIVER = "deal.river"


@dataclass
class SeatProgress:
    """Progress of an action that visits seats in turn."""
    next: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class BoardProgress:
    """Progress of a community-card deal."""
    remaining: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


ActionProgress = Union[SeatProgress, BoardProgress]


class Game:
    """
    One table.

    Attributes:
        button: Dealer seat index, always 0 <= button < len(seats)
        blinds: Forced bet amounts
        seats: ``None`` for an empty seat, otherwise a Seat
        deck: Cards not yet dealt
        board: Community cards
        actions: Progress of each action in flight, keyed by name
        rng: Random source used for every deal at this table
    """

    def __init__(
        self,
        num_seats: int,
        blinds: BlindStructure,
        rng: random.Random,
    ):
        self.button = 0
        self.blinds = blinds
        self.seats: List[Optional[Seat]] = [None] * num_seats
        self.deck = Deck.create()
        self.board: List[Card] = []
        self.actions: Dict[ActionName, ActionProgress] = {}
        self.rng = rng

    @property
    def num_seats(self) -> int:
        return len(self.seats)

    @property
    def occupied_seats(self) -> List[int]:
        """Indices of occupied seats, in seat order."""
        return [i for i, s in enumerate(self.seats) if is_occupied(s)]

    def is_idle(self) -> bool:
        """True when no action is in flight."""
        return not self.actions

    def seat(self, index: int, player: str, stack: int = 0) -> Game:
        """
        Occupy a seat. The player starts with no cards.

        Raises:
            SeatRangeError: If index is out of bounds
            SeatOccupiedError: If the seat is taken
        """
        if not 0 <= index < self.num_seats:
            raise SeatRangeError(
                f"Seat {index} out of range, table has {self.num_seats} seats"
            )
        if is_occupied(self.seats[index]):
            raise SeatOccupiedError(
                f"Seat {index} is taken by {self.seats[index].player}"
            )

        self.seats[index] = Seat(player=player, stack=stack)
        logger.info(f"Seated {player} at seat {index}")
        return self

    def draw(self, count: int = 1) -> List[Card]:
        """Deal ``count`` cards from the deck and keep the remainder."""
        self.deck, dealt = self.deck.deal(count, self.rng)
        return dealt

    def next_seat(self, after: int, predicate=is_occupied) -> Optional[int]:
        """First seat clockwise after ``after`` satisfying ``predicate``."""
        return find_from(self.seats, predicate, advance(self.seats, after))

    def to_dict(self, hide_cards: bool = False, for_player: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, hide every seat's hole cards ...
            for_player: ... except this player's own
        """
        seats = []
        for s in self.seats:
            if s is None:
                seats.append(EMPTY)
            else:
                seats.append(s.to_dict(hide_cards=hide_cards and s.player != for_player))

        return {
            "button": self.button,
            "blinds": self.blinds.to_dict(),
            "seats": seats,
            "board": [card.to_dict() for card in self.board],
            "deck_size": len(self.deck),
            "actions": {
                name.value: progress.to_dict()
                for name, progress in self.actions.items()
            },
        }

    def snapshot(self, hide_cards: bool = False, for_player: Optional[str] = None) -> GameSnapshot:
        """Validated snapshot for broadcasting."""
        return GameSnapshot.model_validate(self.to_dict(hide_cards, for_player))

    def __repr__(self) -> str:
        return (
            f"Game(seats={self.num_seats}, occupied={len(self.occupied_seats)}, "
            f"button={self.button}, actions={[n.value for n in self.actions]})"
        )


class Action:
    """
    A named multi-step action.

    Subclasses provide ``begin`` (check preconditions, build the progress
    record) and ``step`` (do one unit of work, return True when finished).
    """

    name: ActionName

    def start(self, game: Game) -> Game:
        """
        Put this action in flight.

        Raises:
            ActionInProgressError: If it is already in flight
            ActionPreconditionError: If the table is not ready for it
        """
        if self.name in game.actions:
            logger.warning(f"Refusing to start {self.name.value}: already in progress")
            raise ActionInProgressError(f"{self.name.value} is already in progress")

        progress = self.begin(game)
        game.actions[self.name] = progress
        logger.info(f"Started {self.name.value}")
        return game

    def next(self, game: Game) -> Game:
        """
        Perform one step; remove the action on the step that completes it.

        Raises:
            ActionNotInProgressError: If the action was not started
        """
        progress = game.actions.get(self.name)
        if progress is None:
            raise ActionNotInProgressError(f"{self.name.value} is not in progress")

        if self.step(game, progress):
            del game.actions[self.name]
            logger.info(f"Completed {self.name.value}")
        return game

    def begin(self, game: Game) -> ActionProgress:
        raise NotImplementedError

    def step(self, game: Game, progress: ActionProgress) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name.value})"


def _needs_hole_card(seat: Optional[Seat]) -> bool:
    return is_occupied(seat) and not seat.has_hole_cards


class DealPreflop(Action):
    """
    Deal hole cards one at a time, clockwise, like a dealer going round the
    table, starting with the first occupied seat after the button.

    Every ``next`` deals exactly one card. The call that deals the last hole
    card also completes the action, so k occupied seats take 2k calls.
    """

    name = ActionName.DEAL_PREFLOP

    def begin(self, game: Game) -> SeatProgress:
        if not game.occupied_seats:
            logger.warning(f"Refusing to start {self.name.value}: no occupied seats")
            raise ActionPreconditionError("No occupied seats to deal to")

        first = game.next_seat(game.button, _needs_hole_card)
        if first is None:
            logger.warning(f"Refusing to start {self.name.value}: hole cards already dealt")
            raise ActionPreconditionError("Hole cards have already been dealt")
        return SeatProgress(next=first)

    def step(self, game: Game, progress: SeatProgress) -> bool:
        seat = game.seats[progress.next]
        [card] = game.draw(1)
        seat.receive(card)
        logger.debug(f"Dealt {card.short_str} to seat {progress.next} ({seat.player})")

        following = game.next_seat(progress.next, _needs_hole_card)
        if following is None:
            return True
        progress.next = following
        return False


class DealBoard(Action):
    """Deal one street of community cards, one card per ``next``."""

    def __init__(self, name: ActionName, cards: int, board_before: int):
        self.name = name
        self.cards = cards
        self.board_before = board_before

    def begin(self, game: Game) -> BoardProgress:
        if ActionName.DEAL_PREFLOP in game.actions:
            logger.warning(f"Refusing to start {self.name.value}: preflop deal in progress")
            raise ActionPreconditionError("Hole cards are still being dealt")
        if len(game.board) != self.board_before:
            logger.warning(
                f"Refusing to start {self.name.value}: board has {len(game.board)} cards"
            )
            raise ActionPreconditionError(
                f"{self.name.value} needs {self.board_before} board cards, "
                f"found {len(game.board)}"
            )
        return BoardProgress(remaining=self.cards)

    def step(self, game: Game, progress: BoardProgress) -> bool:
        [card] = game.draw(1)
        game.board.append(card)
        progress.remaining -= 1
        logger.debug(f"Dealt {card.short_str} to the board")
        return progress.remaining == 0


ACTIONS: Dict[ActionName, Action] = {
    action.name: action
    for action in (
        DealPreflop(),
        DealBoard(ActionName.DEAL_FLOP, FLOP_CARDS, 0),
        DealBoard(ActionName.DEAL_TURN, TURN_CARDS, FLOP_CARDS),
        DealBoard(ActionName.DEAL_RIVER, RIVER_CARDS, FLOP_CARDS + TURN_CARDS),
    )
}

# deal.preflop.start(game), deal.flop.next(game), ...
deal = SimpleNamespace(
    preflop=ACTIONS[ActionName.DEAL_PREFLOP],
    flop=ACTIONS[ActionName.DEAL_FLOP],
    turn=ACTIONS[ActionName.DEAL_TURN],
    river=ACTIONS[ActionName.DEAL_RIVER],
)


def create(
    config: Union[GameConfig, Mapping[str, Any], None] = None,
    rng: Optional[random.Random] = None,
) -> Game:
    """
    Create a table with every seat empty, a full deck and the button on seat 0.

    Args:
        config: ``{"seats": int, "blinds": {"ante", "small", "big"}}``; missing
                keys take the defaults (6 seats, blinds 5/25/50)
        rng: Random source for dealing; see ``create_rng``

    Raises:
        pydantic.ValidationError: If the config is invalid
    """
    if not isinstance(config, GameConfig):
        config = GameConfig.model_validate(config or {})

    blinds = BlindStructure(**config.blinds.model_dump())
    game = Game(num_seats=config.seats, blinds=blinds, rng=rng or create_rng())
    logger.info(f"Created table with {config.seats} seats, blinds {blinds}")
    return game


def seat(game: Game, seat: int, player: str, stack: int = 0) -> Game:
    """Seat ``player`` at index ``seat``. See ``Game.seat``."""
    return game.seat(seat, player, stack)


def start_action(game: Game, name: Union[ActionName, str]) -> Game:
    return ACTIONS[ActionName(name)].start(game)


def next_action(game: Game, name: Union[ActionName, str]) -> Game:
    return ACTIONS[ActionName(name)].next(game)


def run_action(game: Game, name: Union[ActionName, str]) -> Game:
    """Start an action and step it until it completes."""
    action = ACTIONS[ActionName(name)]
    action.start(game)
    while action.name in game.actions:
        action.next(game)
    return game
