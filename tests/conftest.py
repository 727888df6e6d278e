import random

import pytest

from config import FLOOR_Y, FLOOR_H, WIDTH
from delve.core.game import Game
from delve.core.geometry import Rect


class ScriptedRandom:
    """Randomness source that replays a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        if self.calls >= len(self.values):
            raise AssertionError(f"ScriptedRandom exhausted after {self.calls} draws")
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def floor():
    return Rect(0, FLOOR_Y, WIDTH, FLOOR_H)


@pytest.fixture
def arena_game(floor):
    """A game whose level is replaced by a bare floor, no enemies and a far-away door."""
    game = Game(rng=random.Random(1234))
    game.platforms = (floor,)
    game.enemies = []
    game.door = Rect(WIDTH - 16, 0, 16, 32)
    game.player.x, game.player.y = 100.0, float(FLOOR_Y - game.player.h)
    game.player.vx = game.player.vy = 0
    game.player.on_ground = True
    return game
