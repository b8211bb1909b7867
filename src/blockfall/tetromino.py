"""Falling piece and the operations that move it.

A :class:`Tetromino` and the :class:`~blockfall.board.Board` are mutated
together: every successful move rewrites the piece's cells on the board in the
same call, so the board always mirrors the piece's body.  Failed moves change
neither.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .board import Board, Coordinate
from .collision import Collision, Direction, collides
from .kicks import RotationState, kick_offsets
from .shapes import SHAPE_COLORS, SPAWN_BODIES, TetrominoType, horizontal_extent

Body = Tuple[Coordinate, ...]

_SHIFTS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    # Left moves towards higher column indices and Right towards lower ones.
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}


class SpawnBlockedError(RuntimeError):
    """Raised when a new piece cannot be placed because its cells are taken."""


def _translate(body: Body, dx: int, dy: int) -> Body:
    return tuple((col + dx, row + dy) for col, row in body)


@dataclass
class Tetromino:
    """Active falling piece in the game."""

    shape: TetrominoType
    body: Body = ()
    rotation: RotationState = RotationState.R0
    color: int = 0
    spawned: bool = field(default=False, compare=False)
    locked: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        self.shape = TetrominoType(self.shape)
        if not self.body:
            self.body = SPAWN_BODIES[self.shape]
        self.body = tuple((int(c), int(r)) for c, r in self.body)
        if len(self.body) != 4:
            raise ValueError("A tetromino body has exactly four cells")
        if not self.color:
            self.color = int(SHAPE_COLORS[self.shape])

    @property
    def pivot(self) -> Coordinate:
        return self.body[0]

    def _check_movable(self) -> None:
        if self.locked:
            raise RuntimeError("Cannot move a locked tetromino")
        if not self.spawned:
            raise RuntimeError("Tetromino has not been spawned")

    def spawn(self, board: Board) -> None:
        """Centre the piece horizontally at the top of ``board``.

        Raises:
            SpawnBlockedError: If any target cell is already occupied.  The
                board and the piece are left unchanged.
        """

        offset = board.x_midpoint - horizontal_extent(self.body) // 2
        body = _translate(self.body, offset, 0)
        if collides(body, board, Direction.UP) is not None:
            raise SpawnBlockedError(f"Cannot spawn {self.shape.value} at {body}")
        board.place_active(body, self.color)
        self.body = body
        self.spawned = True

    def _commit(self, board: Board, new_body: Body) -> None:
        board.move_active(self.body, new_body, self.color)
        self.body = new_body

    def shift(self, board: Board, direction: Direction) -> Optional[Collision]:
        """Move the piece one cell in ``direction``.

        Returns ``None`` on success, otherwise the :class:`Collision` that
        blocked the move, in which case nothing changes.
        """

        self._check_movable()
        dx, dy = _SHIFTS[direction]
        new_body = _translate(self.body, dx, dy)
        if any(col < 0 or row < 0 for col, row in new_body):
            return Collision.BORDER
        blocked = collides(new_body, board, direction, ignore=self.body)
        if blocked is not None:
            return blocked
        self._commit(board, new_body)
        return None

    def hard_drop(self, board: Board) -> Collision:
        """Drop the piece as far as it goes and signal that it must be locked."""

        self._check_movable()
        trial = self.body
        while True:
            lower = _translate(trial, 0, 1)
            if collides(lower, board, Direction.DOWN, ignore=self.body) is not None:
                break
            trial = lower
        if trial != self.body:
            self._commit(board, trial)
        return Collision.BOTTOM

    def rotated_body(self, clockwise: bool) -> Body:
        """Return the body turned 90 degrees about the pivot, before kicks."""

        pivot_col, pivot_row = self.pivot
        rotated = []
        for col, row in self.body:
            rel_col, rel_row = row - pivot_row, col - pivot_col
            if clockwise:
                rel_col = -rel_col
            else:
                rel_row = -rel_row
            rotated.append((rel_col + pivot_col, rel_row + pivot_row))
        return tuple(rotated)

    def rotate(self, board: Board, clockwise: bool = True) -> bool:
        """Rotate the piece, trying each wall kick in order.

        The first kicked position that fits is committed and the rotation
        state advances.  When none fits the rotation is dropped silently.
        Returns whether the piece actually turned; the O piece accepts the
        request without any geometric effect.
        """

        self._check_movable()
        if self.shape is TetrominoType.O:
            return True
        target = self.rotation.turned(clockwise)
        candidate = self.rotated_body(clockwise)
        for dx, dy in kick_offsets(self.shape, self.rotation, target):
            kicked = _translate(candidate, dx, -dy)
            if collides(kicked, board, Direction.UP, ignore=self.body) is None:
                self._commit(board, kicked)
                self.rotation = target
                return True
        return False

    def lock(self, board: Board) -> None:
        """Lock the piece's cells into the board; the piece is done afterwards."""

        self._check_movable()
        board.lock_cells(self.body)
        self.locked = True
