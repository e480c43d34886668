from __future__ import annotations

import pygame

from . import config
from .controls import ControlPad
from .state import State

HEADER = 70


def layout(size: tuple[int, int]) -> tuple[pygame.Rect, pygame.Rect]:
    """Board and control-pad areas for a window of ``size``."""
    w, h = size
    side = int(min(w * 0.85, h * 0.55))
    board = pygame.Rect(0, HEADER, side, side)
    board.centerx = w // 2
    pad = pygame.Rect(0, board.bottom + 20, w, max(0, h - board.bottom - 40))
    return board, pad


def draw_state(screen: pygame.Surface, state: State, board: pygame.Rect, pad: ControlPad, font: pygame.font.Font, grid_size: int) -> None:
    screen.fill(config.BLACK)
    cell = board.width / grid_size

    pygame.draw.rect(screen, config.GREY, board)
    pygame.draw.rect(screen, config.BORDER, board, 3)

    for i, (x, y) in enumerate(state.snake):
        rect = pygame.Rect(
            int(board.x + x * cell) + 1,
            int(board.y + y * cell) + 1,
            max(1, int(cell) - 2),
            max(1, int(cell) - 2),
        )
        pygame.draw.rect(screen, config.GREEN if i == 0 else config.DARK_GREEN, rect)

    if state.food is not None:
        fx, fy = state.food
        center = (int(board.x + (fx + 0.5) * cell), int(board.y + (fy + 0.5) * cell))
        pygame.draw.circle(screen, config.RED, center, max(1, int(cell / 2) - 2))

    score = font.render(f"Score: {state.score}", True, config.WHITE)
    screen.blit(score, (20, 20))

    if state.is_over:
        banner = font.render("GAME OVER", True, config.RED)
        screen.blit(banner, (screen.get_width() - banner.get_width() - 20, 20))
        _draw_button(screen, font, pad.restart, "Restart", config.GREEN)
    else:
        for direction, button in pad.buttons.items():
            _draw_button(screen, font, button, direction.name[0], config.GREY)

    pygame.display.flip()


def _draw_button(screen, font, rect, label, colour) -> None:
    pygame.draw.rect(screen, colour, rect, border_radius=15)
    pygame.draw.rect(screen, config.WHITE, rect, 2, border_radius=15)
    text = font.render(label, True, config.WHITE)
    screen.blit(text, text.get_rect(center=rect.center))
