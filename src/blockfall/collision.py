"""Collision detection for candidate piece positions."""

from __future__ import annotations

from enum import Enum
from typing import Collection, Iterable, Optional

from .board import EMPTY, Board, Coordinate


class Direction(Enum):
    """Direction of a unit shift."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Collision(Enum):
    """Reason a candidate position was rejected.

    ``BORDER`` means the move is geometrically invalid and nothing changed.
    ``BOTTOM`` means the piece has come to rest and must be locked.
    """

    BORDER = "border"
    BOTTOM = "bottom"


def collides(
    candidate: Iterable[Coordinate],
    board: Board,
    direction: Direction,
    ignore: Collection[Coordinate] = (),
) -> Optional[Collision]:
    """Return ``None`` if ``candidate`` fits on ``board`` or the blocking reason.

    ``ignore`` lists cells the moving piece currently occupies; they are
    passable since the piece vacates them when the move is committed.  Rows
    outside the board or occupied cells stop a downward move as ``BOTTOM``;
    in every other direction they are a ``BORDER`` case, as are columns
    outside the board.
    """

    blocked = Collision.BOTTOM if direction is Direction.DOWN else Collision.BORDER
    for col, row in candidate:
        if not 0 <= row < board.height:
            return blocked
        if not 0 <= col < board.width:
            return Collision.BORDER
        if (col, row) in ignore:
            continue
        if board.state[row, col] != EMPTY:
            return blocked
    return None
