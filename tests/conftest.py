import random

import pytest

from neonsnake.food import FoodPlacer
from neonsnake.grid import Point
from neonsnake.model import Direction, SessionState


class FixedPlacer:
    """Placer stub that always answers with the same cell and records calls."""

    def __init__(self, cell=Point(0, 0)):
        self.cell = cell
        self.calls = []

    def place(self, occupied):
        self.calls.append(tuple(occupied))
        return self.cell


def make_state(snake, direction=Direction.UP, food=Point(0, 0), **kwargs):
    """A running state built from plain (x, y) pairs."""
    kwargs.setdefault("last_direction", direction)
    kwargs.setdefault("is_paused", False)
    return SessionState(
        snake=tuple(Point(x, y) for x, y in snake),
        food=None if food is None else Point(*food),
        direction=direction,
        **kwargs,
    )


@pytest.fixture
def placer():
    return FoodPlacer(rng=random.Random(1234))


@pytest.fixture
def fixed_placer():
    return FixedPlacer()
