"""Wall-kick data for rotations.

Each shape family has one offset table: for every rotation state, five
``(dx, dy)`` offsets.  The kicks tried for a transition ``a -> b`` are
``offset[a][i] - offset[b][i]`` for ``i`` in ``0..4``, in that order.  Offsets
use a y-up convention, so a kick is applied to a body as ``col + dx`` and
``row - dy``.

The O piece never rotates and has no table.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

from .shapes import TetrominoType

Kick = Tuple[int, int]
OffsetTable = Tuple[Tuple[Kick, ...], ...]

KICKS_PER_TRANSITION = 5


class RotationState(IntEnum):
    """Orientation of a piece, in clockwise order."""

    R0 = 0
    R90 = 1
    R180 = 2
    R270 = 3

    def turned(self, clockwise: bool) -> "RotationState":
        step = 1 if clockwise else -1
        return RotationState((self + step) % 4)


# Indexed by ``RotationState`` ordinal.
I_OFFSETS: OffsetTable = (
    ((0, 0), (-1, 0), (2, 0), (-1, 0), (2, 0)),
    ((-1, 0), (0, 0), (0, 0), (0, 1), (0, -2)),
    ((-1, 1), (1, 1), (-2, 1), (1, 0), (-2, 0)),
    ((0, 1), (0, 1), (0, 1), (0, -1), (0, 2)),
)

JLSTZ_OFFSETS: OffsetTable = (
    ((0, 0), (0, 0), (0, 0), (0, 0), (0, 0)),
    ((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
    ((0, 0), (0, 0), (0, 0), (0, 0), (0, 0)),
    ((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
)

OFFSET_TABLES: Dict[TetrominoType, OffsetTable] = {
    TetrominoType.I: I_OFFSETS,
    TetrominoType.J: JLSTZ_OFFSETS,
    TetrominoType.L: JLSTZ_OFFSETS,
    TetrominoType.S: JLSTZ_OFFSETS,
    TetrominoType.Z: JLSTZ_OFFSETS,
    TetrominoType.T: JLSTZ_OFFSETS,
}

Transition = Tuple[RotationState, RotationState]


def _transition_kicks(table: OffsetTable, start: RotationState, end: RotationState) -> Tuple[Kick, ...]:
    return tuple(
        (x_from - x_to, y_from - y_to)
        for (x_from, y_from), (x_to, y_to) in zip(table[start], table[end])
    )


def _build_kick_table() -> Dict[TetrominoType, Dict[Transition, Tuple[Kick, ...]]]:
    """Pre-compute the kicks for every clockwise and counter-clockwise turn."""

    kick_table: Dict[TetrominoType, Dict[Transition, Tuple[Kick, ...]]] = {}
    for shape, table in OFFSET_TABLES.items():
        transitions: Dict[Transition, Tuple[Kick, ...]] = {}
        for state in RotationState:
            for clockwise in (True, False):
                end = state.turned(clockwise)
                transitions[(state, end)] = _transition_kicks(table, state, end)
        kick_table[shape] = transitions
    return kick_table


KICK_TABLE = _build_kick_table()


def kick_offsets(shape: TetrominoType, start: RotationState, end: RotationState) -> Tuple[Kick, ...]:
    """Return the ordered kicks to try when ``shape`` turns from ``start`` to ``end``.

    Raises:
        KeyError: For the O piece or for non-adjacent states.
    """

    return KICK_TABLE[shape][(start, end)]
