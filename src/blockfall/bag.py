"""7-bag piece randomizer."""

from __future__ import annotations

from typing import Iterator, List, Optional
import random

from .shapes import TetrominoType
from .tetromino import Tetromino


BAG_SIZE = len(TetrominoType)


class SevenBag:
    """Deal every shape exactly once per seven draws.

    The random source is injectable so sequences can be reproduced: pass a
    ``random.Random`` instance or a ``seed``.  A fresh permutation is shuffled
    each time the previous one is used up, including before the first draw.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        seed: Optional[int] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)
        self._shapes: List[TetrominoType] = list(TetrominoType)
        self._index = BAG_SIZE

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the random source and discard the current permutation."""

        self._rng.seed(seed)
        self._shapes = list(TetrominoType)
        self._index = BAG_SIZE

    def shuffle(self) -> None:
        """Draw a new permutation and rewind the cursor."""

        self._rng.shuffle(self._shapes)
        self._index = 0

    @property
    def remaining(self) -> int:
        """Number of shapes left before the next reshuffle."""

        return BAG_SIZE - self._index

    def next_shape(self) -> TetrominoType:
        if self._index >= BAG_SIZE:
            self.shuffle()
        shape = self._shapes[self._index]
        self._index += 1
        return shape

    def next(self) -> Tetromino:
        """Return a fresh, not yet spawned piece of the next shape."""

        return Tetromino(self.next_shape())

    def __iter__(self) -> Iterator[Tetromino]:
        return self

    def __next__(self) -> Tetromino:
        return self.next()
