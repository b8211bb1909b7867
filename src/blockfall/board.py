"""Board representation for the playfield.

The board is the single source of truth for every occupied cell, both the
cells of the currently falling piece (``ACTIVE``) and the cells of pieces that
have come to rest (``LOCKED``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray


# Dimensions of the standard board.
WIDTH = 10
HEIGHT = 20

# Values stored in ``Board.state``.
EMPTY = 0
ACTIVE = 1
LOCKED = 2

Grid = NDArray[np.uint8]
Coordinate = Tuple[int, int]  # (col, row)


@dataclass(frozen=True)
class Cell:
    """Read-only view of a single non-empty cell."""

    active: bool
    color: int


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Rectangular occupancy matrix holding falling and locked cells.

    Two arrays of identical shape back the board: ``state`` stores one of
    ``EMPTY``, ``ACTIVE`` or ``LOCKED`` per cell and ``colors`` stores the
    colour tag of the piece owning the cell.  Both are indexed ``[row, col]``
    while piece bodies use ``(col, row)`` coordinates.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self.width = int(width)
        self.height = int(height)
        self.state: Grid = create_empty_grid(self.width, self.height)
        self.colors: Grid = create_empty_grid(self.width, self.height)

    @property
    def x_midpoint(self) -> int:
        """Column index of the horizontal midpoint of the playable width."""

        return self.width // 2

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Safely return the cell at ``(row, col)`` or ``None`` if empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError("Cell out of bounds")
        value = int(self.state[row, col])
        if value == EMPTY:
            return None
        return Cell(active=value == ACTIVE, color=int(self.colors[row, col]))

    def set_cell(self, row: int, col: int, cell: Optional[Cell]) -> None:
        """Safely set the cell at ``(row, col)``; ``None`` empties it.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError("Cell out of bounds")
        if cell is None:
            self.state[row, col] = EMPTY
            self.colors[row, col] = 0
        else:
            self.state[row, col] = ACTIVE if cell.active else LOCKED
            self.colors[row, col] = np.uint8(cell.color)

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        if self.in_bounds(row, col):
            return bool(self.state[row, col] == EMPTY)
        return False

    def _indices(self, body: Iterable[Coordinate]) -> Tuple[NDArray, NDArray]:
        coordinates = np.asarray(list(body), dtype=np.int16).reshape(-1, 2)
        cols, rows = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")
        return rows, cols

    def place_active(self, body: Iterable[Coordinate], color: int) -> None:
        """Mark every cell of ``body`` as part of the falling piece."""

        rows, cols = self._indices(body)
        self.state[rows, cols] = ACTIVE
        self.colors[rows, cols] = np.uint8(color)

    def move_active(
        self,
        old_body: Iterable[Coordinate],
        new_body: Iterable[Coordinate],
        color: int,
    ) -> None:
        """Move the falling piece from ``old_body`` to ``new_body``.

        Both bodies are validated before anything is written, so a failing
        call leaves the board untouched.
        """

        old_rows, old_cols = self._indices(old_body)
        new_rows, new_cols = self._indices(new_body)
        self.state[old_rows, old_cols] = EMPTY
        self.colors[old_rows, old_cols] = 0
        self.state[new_rows, new_cols] = ACTIVE
        self.colors[new_rows, new_cols] = np.uint8(color)

    def lock_cells(self, body: Iterable[Coordinate]) -> None:
        """Turn the cells of ``body`` into permanently locked cells."""

        rows, cols = self._indices(body)
        occupied = self.state[rows, cols] != EMPTY
        self.state[rows[occupied], cols[occupied]] = LOCKED

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Every row above a cleared row drops by one per cleared row beneath
        it, so simultaneous clears cascade.
        """

        full_rows = np.all(self.state != EMPTY, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            new_rows = np.zeros((cleared, self.width), dtype=np.uint8)
            self.state = np.vstack((new_rows, self.state[~full_rows]))
            self.colors = np.vstack((new_rows, self.colors[~full_rows]))
        return cleared

    def clear_lines(self) -> bool:
        """Clear completed rows and report whether at least one was removed."""

        return self.clear_full_rows() > 0

    def active_cells(self) -> List[Coordinate]:
        """Return the ``(col, row)`` coordinates of all active cells."""

        rows, cols = np.nonzero(self.state == ACTIVE)
        return sorted((int(c), int(r)) for r, c in zip(rows, cols))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.state != EMPTY))

    def row_is_empty(self, row: int) -> bool:
        return bool(np.all(self.state[row] == EMPTY))
