import os
import random

import pytest

# Headless display for the render tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from touchsnake.logic import GameEngine
from touchsnake.state import Direction, Position


class FakeTicker:
    def __init__(self):
        self.starts = 0
        self.stops = 0

    def start(self):
        self.starts += 1

    def stop(self):
        self.stops += 1


def _place(engine, snake, food, direction=Direction.RIGHT):
    """Put the engine into a hand-built position."""
    engine.snake = [Position(*p) for p in snake]
    engine.food = Position(*food) if food is not None else None
    engine.direction = direction
    engine.pending_direction = direction
    return engine


@pytest.fixture
def place():
    return _place


@pytest.fixture
def engine():
    return GameEngine(20, rng=random.Random(1234))


@pytest.fixture
def ticker():
    return FakeTicker()
