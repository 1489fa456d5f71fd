"""
Pytest configuration and shared fixtures for Poker Table tests.
"""

import random

import pytest
from pokertable.core.card import Card, Deck, Rank, Suit, parse_cards
from pokertable.core.game import create, seat


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def deck():
    """Create a fresh full deck."""
    return Deck.create()


@pytest.fixture
def empty_game(rng):
    """Create a default 6-seat table with nobody seated."""
    return create(rng=rng)


@pytest.fixture
def two_player_game(rng):
    """Create a 6-seat table with players on seats 0 and 1."""
    game = create(rng=rng)
    seat(game, seat=0, player="p1")
    seat(game, seat=1, player="p2")
    return game


@pytest.fixture
def scattered_game(rng):
    """Create a 6-seat table with players on seats 1, 3 and 4."""
    game = create(rng=rng)
    for index, player in ((1, "alice"), (3, "bob"), (4, "carol")):
        seat(game, seat=index, player=player, stack=1000)
    return game


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return parse_cards("Ac Kc Qc Jc 10c")


@pytest.fixture
def straight_flush():
    """Create a straight flush (3 to 7)."""
    return parse_cards("3h 4h 5h 6h 7h")


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.CLUBS),
        Card(Rank.TWO, Suit.DIAMONDS),
        Card(Rank.THREE, Suit.HEARTS),
        Card(Rank.FOUR, Suit.SPADES),
        Card(Rank.FIVE, Suit.HEARTS),
    ]
