"""
Circular search over a fixed row of seats.

Seats wrap around the table: the seat after the last one is seat 0.
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Sequence


def advance(seats: Sequence[Any], index: int, increment: int = 1) -> int:
    """Index ``increment`` places clockwise from ``index``."""
    return (index + increment) % len(seats)


def find_from(
    seats: Sequence[Any],
    predicate: Callable[[Any], bool],
    start: int = 0,
) -> Optional[int]:
    """
    Find the first seat, scanning clockwise from ``start`` inclusive,
    for which ``predicate(seat)`` holds.

    At most one lap is scanned.

    Returns:
        The matching index, or None if no seat matches
    """
    if not seats:
        return None

    current = start % len(seats)
    for _ in range(len(seats)):
        if predicate(seats[current]):
            return current
        current = advance(seats, current)
    return None
