"""
Random source for dealing.

The deck never reads the module-level ``random`` state. Instead a game owns
its own ``random.Random`` built here, seeded from an explicit value or
from the ``RNG_SEED`` environment variable, so test runs can replay a deal.
"""

from __future__ import annotations
import logging
import os
import random
from typing import Optional


logger = logging.getLogger(__name__)

RNG_SEED_ENV = "RNG_SEED"


def create_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create a random source for one game.

    Args:
        seed: Explicit seed. If None, ``RNG_SEED`` is consulted; if that is
              unset or not an integer, the generator is seeded from OS entropy.

    Returns:
        A private ``random.Random`` instance
    """
    if seed is None:
        env_seed = os.environ.get(RNG_SEED_ENV)
        if env_seed:
            try:
                seed = int(env_seed)
            except ValueError:
                logger.warning(f"Ignoring non-integer {RNG_SEED_ENV}={env_seed!r}")

    if seed is not None:
        logger.debug(f"Using seeded PRNG (seed={seed})")
    return random.Random(seed)
