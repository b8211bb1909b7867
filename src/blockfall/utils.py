"""Read-only helpers for renderers."""

from __future__ import annotations

from typing import List

import numpy as np

from .board import ACTIVE, EMPTY, Board


def render_grid(board: Board) -> List[List[int]]:
    """Return a copy of the board as colour tags, ``0`` for empty cells.

    Renderers draw from this snapshot without holding a reference to the live
    board arrays.
    """

    tags = np.where(board.state != EMPTY, board.colors, 0)
    return tags.tolist()


def format_grid(board: Board) -> str:
    """Return an ASCII frame: ``.`` empty, ``@`` falling, ``#`` locked."""

    lines = []
    for row in board.state:
        lines.append(
            "".join("." if cell == EMPTY else "@" if cell == ACTIVE else "#" for cell in row)
        )
    return "\n".join(lines)
