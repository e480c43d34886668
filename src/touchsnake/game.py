from __future__ import annotations

import random
import sys

import pygame

from . import config
from .controls import RESTART_KEYS, ControlPad, direction_for_key, finger_to_pixels
from .logic import GameEngine
from .render import draw_state, layout
from .tick import Ticker


def handle_press(engine: GameEngine, pad: ControlPad, pos: tuple[int, int]) -> None:
    if engine.is_over:
        if pad.hit_restart(pos):
            engine.reset()
        return
    direction = pad.hit(pos)
    if direction is not None:
        engine.set_direction(direction)


def handle_key(engine: GameEngine, key: int) -> None:
    if key in RESTART_KEYS:
        if engine.is_over:
            engine.reset()
        return
    direction = direction_for_key(key)
    if direction is not None:
        engine.set_direction(direction)


def main(seed: int | None = None) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
    pygame.display.set_caption("touchsnake")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 40)

    board, pad_area = layout(screen.get_size())
    pad = ControlPad(pad_area)

    ticker = Ticker(config.TICK_MS)
    engine = GameEngine(config.GRID_SIZE, rng=random.Random(seed), ticker=ticker)
    reported = False

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit()
                    sys.exit()
                else:
                    handle_key(engine, event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                handle_press(engine, pad, event.pos)
            elif event.type == pygame.FINGERDOWN:
                handle_press(engine, pad, finger_to_pixels(event, screen.get_size()))

        if not engine.is_over:
            reported = False
        for _ in range(ticker.due(pygame.time.get_ticks())):
            engine.advance()
        state = engine.snapshot()

        if state.is_over and not reported:
            print("Game Over! Score:", state.score)
            reported = True

        draw_state(screen, state, board, pad, font, engine.grid_size)
        clock.tick(config.FPS)
