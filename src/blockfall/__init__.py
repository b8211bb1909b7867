"""Rules engine for a falling-block puzzle game."""

from .board import Board, Cell
from .bag import SevenBag
from .collision import Collision, Direction, collides
from .control import Command, ControlLoop
from .game_state import GameState
from .kicks import RotationState, kick_offsets
from .shapes import Color, TetrominoType
from .tetromino import SpawnBlockedError, Tetromino
from .utils import format_grid, render_grid

__all__ = [
    "Board",
    "Cell",
    "SevenBag",
    "Collision",
    "Direction",
    "collides",
    "Command",
    "ControlLoop",
    "GameState",
    "RotationState",
    "kick_offsets",
    "Color",
    "TetrominoType",
    "SpawnBlockedError",
    "Tetromino",
    "format_grid",
    "render_grid",
]
