"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging

from .bag import SevenBag
from .board import Board, HEIGHT, WIDTH
from .collision import Collision, Direction
from .tetromino import SpawnBlockedError, Tetromino


LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state for one game session.

    Owns the board, the bag and the single falling piece.  Whenever a move
    reports :attr:`Collision.BOTTOM` the piece is locked, full rows are
    cleared and the next piece from the bag is spawned.  Spawning onto
    occupied cells ends the game.
    """

    width: int = WIDTH
    height: int = HEIGHT
    bag: SevenBag = field(default_factory=SevenBag)
    board: Board = field(init=False)
    active: Optional[Tetromino] = field(default=None, init=False)
    game_over: bool = field(default=False, init=False)
    pieces: int = field(default=0, init=False)
    lines: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.board = Board(self.width, self.height)

    def spawn_tetromino(self) -> Optional[Tetromino]:
        """Spawn the next piece from the bag and make it the active one.

        Returns ``None`` and flags :attr:`game_over` when the spawn cells are
        already occupied.
        """

        piece = self.bag.next()
        try:
            piece.spawn(self.board)
        except SpawnBlockedError:
            LOGGER.warning("Top out: no room to spawn %s after %d pieces", piece.shape.value, self.pieces)
            self.active = None
            self.game_over = True
            return None
        LOGGER.debug("Spawned %s at %s", piece.shape.value, piece.body)
        self.active = piece
        return piece

    def lock_and_continue(self) -> int:
        """Lock the active piece, clear rows and spawn the next piece.

        Returns the number of rows cleared.
        """

        if self.active is None:
            return 0
        self.active.lock(self.board)
        self.active = None
        self.pieces += 1
        cleared = self.board.clear_full_rows()
        if cleared:
            self.lines += cleared
            LOGGER.info("Cleared %d row(s), %d in total", cleared, self.lines)
        self.spawn_tetromino()
        return cleared

    def shift(self, direction: Direction) -> Optional[Collision]:
        """Shift the active piece; a bottom collision locks it."""

        if self.active is None:
            return None
        result = self.active.shift(self.board, direction)
        if result is Collision.BOTTOM:
            self.lock_and_continue()
        return result

    def rotate(self, clockwise: bool = True) -> bool:
        if self.active is None:
            return False
        return self.active.rotate(self.board, clockwise)

    def hard_drop(self) -> Optional[Collision]:
        if self.active is None:
            return None
        result = self.active.hard_drop(self.board)
        self.lock_and_continue()
        return result

    def reset_game(self, seed: Optional[int] = None) -> None:
        """Reset the entire game state for a new game."""

        if seed is not None:
            self.bag.seed(seed)
        self.board = Board(self.width, self.height)
        self.active = None
        self.game_over = False
        self.pieces = 0
        self.lines = 0
        self.spawn_tetromino()
