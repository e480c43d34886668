from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Position(NamedTuple):
    x: int
    y: int


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Position:
    return Position(a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    # (dx, dy), y grows downwards
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reverse_of(self, other: Direction) -> bool:
        return other is self.opposite


class State(NamedTuple):
    """Read-only snapshot handed to the renderer after each tick."""

    snake: tuple[Position, ...]
    food: Position | None
    direction: Direction
    score: int
    is_over: bool
