"""Headless ASCII demo for the rules engine.

Run with: `python -m blockfall`

Plays a number of pieces with random moves followed by a hard drop and prints
the final board, useful as a smoke test of the whole lock/clear/spawn cycle.
"""

from __future__ import annotations

import argparse
import logging
import random

from . import Command, ControlLoop, GameState, SevenBag, format_grid


LOGGER = logging.getLogger(__name__)

_MOVES = (
    Command.MOVE_LEFT,
    Command.MOVE_RIGHT,
    Command.ROTATE_CW,
    Command.ROTATE_CCW,
    Command.GRAVITY_TICK,
)


def play(pieces: int, seed: int) -> GameState:
    state = GameState(bag=SevenBag(seed=seed))
    state.reset_game()
    loop = ControlLoop(state)
    moves = random.Random(seed)
    while state.pieces < pieces and not state.game_over:
        for _ in range(moves.randrange(8)):
            loop.submit(moves.choice(_MOVES))
        loop.submit(Command.HARD_DROP)
        loop.run_pending()
    LOGGER.info(
        "Played %d piece(s), cleared %d row(s)%s",
        state.pieces,
        state.lines,
        " before topping out" if state.game_over else "",
    )
    return state


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pieces", type=int, default=30, help="Number of pieces to drop.")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the bag and the moves.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    state = play(args.pieces, args.seed)
    print(format_grid(state.board))


if __name__ == "__main__":
    main()
