#!/usr/bin/env python3
"""
Poker Table - Demo Script

Seats players, deals a full hand and prints the table snapshot.

Usage:
    python run.py [--seats N] [--players N] [--seed SEED] [--evaluate]
"""

import argparse
import json
import logging

from pokertable.core.game import ActionName, create, seat, run_action
from pokertable.core.hand import best_hand, describe_hand
from pokertable.core.rng import create_rng
from pokertable.schemas import HandRankSchema


def main():
    parser = argparse.ArgumentParser(description="Poker Table dealer demo")
    parser.add_argument("--seats", type=int, default=6, help="Seats at the table")
    parser.add_argument("--players", type=int, default=3, help="Players to seat")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a repeatable deal")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--evaluate", action="store_true", help="Print each player's best hand")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    game = create({"seats": args.seats}, rng=create_rng(args.seed))
    for i in range(min(args.players, args.seats)):
        seat(game, seat=i, player=f"p{i + 1}")

    for name in ActionName:
        run_action(game, name)

    print(game.snapshot().model_dump_json(indent=2))

    if args.evaluate:
        for s in game.seats:
            if s is None:
                continue
            hand_rank, cards = best_hand(s.cards + game.board)
            record = HandRankSchema.model_validate(hand_rank.to_dict())
            print(f"{s.player}: {describe_hand(hand_rank)} "
                  f"[{' '.join(c.short_str for c in cards)}] "
                  f"{json.dumps(record.model_dump(mode='json', by_alias=True, exclude_none=True))}")


if __name__ == "__main__":
    main()
