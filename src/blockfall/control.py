"""Serialized command stream feeding a :class:`GameState`.

Input pollers and gravity timers may run anywhere, but they never touch the
game directly: they :meth:`ControlLoop.submit` commands into one queue, and
the thread that owns the game calls :meth:`ControlLoop.run_pending` to apply
them in order.
"""

from __future__ import annotations

from enum import Enum
from queue import Empty, SimpleQueue
from typing import Callable, Dict, List, Optional
import logging

from .collision import Collision, Direction
from .game_state import GameState


LOGGER = logging.getLogger(__name__)


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    HARD_DROP = "hard_drop"
    GRAVITY_TICK = "gravity_tick"


class ControlLoop:
    """Apply queued commands to ``state`` one at a time.

    A gravity tick that directly follows a successful manual down move in
    the same batch is dropped so the piece does not fall twice.
    """

    def __init__(self, state: GameState) -> None:
        self.state = state
        self._queue: "SimpleQueue[Command]" = SimpleQueue()
        self._handlers: Dict[Command, Callable[[], object]] = {
            Command.MOVE_LEFT: lambda: self.state.shift(Direction.LEFT),
            Command.MOVE_RIGHT: lambda: self.state.shift(Direction.RIGHT),
            Command.MOVE_DOWN: lambda: self.state.shift(Direction.DOWN),
            Command.ROTATE_CW: lambda: self.state.rotate(clockwise=True),
            Command.ROTATE_CCW: lambda: self.state.rotate(clockwise=False),
            Command.HARD_DROP: self.state.hard_drop,
            Command.GRAVITY_TICK: lambda: self.state.shift(Direction.DOWN),
        }

    def submit(self, command: Command) -> None:
        """Queue ``command``; safe to call from any thread."""

        if not isinstance(command, Command):
            raise ValueError(f"Unknown command: {command!r}")
        self._queue.put(command)

    def pending(self) -> int:
        return self._queue.qsize()

    def _drain(self) -> List[Command]:
        batch: List[Command] = []
        while True:
            try:
                batch.append(self._queue.get_nowait())
            except Empty:
                return batch

    def apply(self, command: Command) -> Optional[object]:
        """Apply a single command immediately and return the handler result."""

        return self._handlers[command]()

    def run_pending(self) -> int:
        """Apply every queued command in submission order.

        Returns the number of commands that were applied.
        """

        applied = 0
        went_down = False
        for command in self._drain():
            if command is Command.GRAVITY_TICK:
                skip = went_down
                went_down = False
                if skip:
                    LOGGER.debug("Gravity tick skipped after manual down move")
                    continue
            if self.state.game_over:
                LOGGER.debug("Ignoring %s after game over", command.name)
                continue
            result = self.apply(command)
            applied += 1
            if command is Command.MOVE_DOWN:
                went_down = result is None
            if isinstance(result, Collision):
                LOGGER.debug("%s blocked: %s", command.name, result.value)
        return applied
