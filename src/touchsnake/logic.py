from __future__ import annotations

import random

from . import config
from .state import Direction, Position, State, add_vectors


class GameEngine:
    """Owns the grid state and advances it one tick at a time.

    The tick source and the renderer live outside: something calls
    :meth:`advance` on a fixed interval and draws the returned snapshot.
    Input handlers call :meth:`set_direction` between ticks.
    """

    def __init__(self, grid_size: int = config.GRID_SIZE, rng: random.Random | None = None, ticker=None):
        if grid_size < 3:
            raise ValueError(f"grid_size must be at least 3, got {grid_size}")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else random.Random()
        self.ticker = ticker

        self.snake: list[Position] = []
        self.food: Position | None = None
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.score = 0
        self.is_over = False

        self.reset()

    @property
    def head(self) -> Position:
        return self.snake[0]

    def reset(self) -> State:
        mid = self.grid_size // 2
        self.snake = [Position(mid, mid), Position(mid - 1, mid), Position(mid - 2, mid)]
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.score = 0
        self.is_over = False
        self.spawn_food()
        self.start_ticking()
        return self.snapshot()

    def set_direction(self, direction: Direction) -> bool:
        # Checked against the committed direction, not the buffered one.
        if direction.is_reverse_of(self.direction):
            return False
        self.pending_direction = direction
        return True

    def advance(self) -> State:
        if self.is_over:
            return self.snapshot()

        self.direction = self.pending_direction
        new_head = add_vectors(self.head, self.direction.value)

        # The colliding head is never committed to the snake.
        if not self.in_bounds(new_head) or new_head in self.snake:
            self.game_over()
            return self.snapshot()

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += config.FOOD_POINTS
            self.spawn_food()
        else:
            self.snake.pop()
        return self.snapshot()

    def in_bounds(self, pos: tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def spawn_food(self) -> Position | None:
        if len(self.snake) >= self.grid_size * self.grid_size:
            # Board is full: nowhere left to put food.
            self.food = None
            self.game_over()
            return None

        occupied = set(self.snake)
        while True:
            pos = Position(
                self.rng.randint(0, self.grid_size - 1),
                self.rng.randint(0, self.grid_size - 1),
            )
            if pos not in occupied:
                self.food = pos
                return pos

    def game_over(self) -> None:
        self.is_over = True
        self.stop_ticking()

    def start_ticking(self) -> None:
        if self.ticker is not None:
            self.ticker.start()

    def stop_ticking(self) -> None:
        if self.ticker is not None:
            self.ticker.stop()

    def snapshot(self) -> State:
        return State(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            is_over=self.is_over,
        )
