from __future__ import annotations

import random

import pytest

from blockfall.bag import SevenBag
from blockfall.game_state import GameState


class InOrderRandom(random.Random):
    """Random source whose shuffle keeps the bag in declaration order."""

    def shuffle(self, x, *args, **kwargs) -> None:
        return None


@pytest.fixture
def ordered_state() -> GameState:
    """Game whose pieces arrive as O, I, J, L, S, Z, T."""

    state = GameState(bag=SevenBag(rng=InOrderRandom()))
    state.reset_game()
    return state
