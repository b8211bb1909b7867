"""Tetromino shapes in their spawn orientation."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Tuple

Body = Tuple[Tuple[int, int], ...]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    O = "O"
    I = "I"
    J = "J"
    L = "L"
    S = "S"
    Z = "Z"
    T = "T"


class Color(IntEnum):
    """Colour tags stored in the board.  ``0`` is reserved for empty cells."""

    YELLOW = 1
    CYAN = 2
    GRAY = 3
    BLUE = 4
    GREEN = 5
    RED = 6
    WHITE = 7


# ``(col, row)`` offsets before spawning.  The first entry is the rotation
# pivot.  Rows already describe the spawn rows at the top of the board.
SPAWN_BODIES: Dict[TetrominoType, Body] = {
    TetrominoType.O: ((0, 0), (0, 1), (1, 0), (1, 1)),
    TetrominoType.I: ((1, 0), (2, 0), (0, 0), (3, 0)),
    TetrominoType.J: ((1, 1), (0, 1), (0, 0), (2, 1)),
    TetrominoType.L: ((1, 1), (0, 1), (2, 1), (2, 0)),
    TetrominoType.S: ((1, 1), (0, 1), (1, 0), (2, 0)),
    TetrominoType.Z: ((1, 1), (1, 0), (0, 0), (2, 1)),
    TetrominoType.T: ((1, 1), (0, 1), (1, 0), (2, 1)),
}

SHAPE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.O: Color.YELLOW,
    TetrominoType.I: Color.CYAN,
    TetrominoType.J: Color.GRAY,
    TetrominoType.L: Color.BLUE,
    TetrominoType.S: Color.GREEN,
    TetrominoType.Z: Color.RED,
    TetrominoType.T: Color.WHITE,
}


def horizontal_extent(body: Body) -> int:
    """Return the number of columns spanned by ``body``."""

    cols = [c for c, _ in body]
    return max(cols) - min(cols) + 1
