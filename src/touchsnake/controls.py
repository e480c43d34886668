from __future__ import annotations

import pygame

from .state import Direction

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

RESTART_KEYS = (pygame.K_RETURN, pygame.K_SPACE)


def direction_for_key(key: int) -> Direction | None:
    return KEY_TO_DIRECTION.get(key)


def finger_to_pixels(event, size: tuple[int, int]) -> tuple[int, int]:
    """FINGERDOWN events carry coordinates normalised to [0, 1]."""
    w, h = size
    return int(event.x * w), int(event.y * h)


class ControlPad:
    """On-screen arrow pad laid out as a cross inside ``rect``.

    After game over the renderer swaps the pad for a single restart button
    centred in the same area.
    """

    def __init__(self, rect: pygame.Rect):
        self.rect = pygame.Rect(rect)
        size = min(self.rect.width, self.rect.height) // 3
        cx, cy = self.rect.center

        self.buttons: dict[Direction, pygame.Rect] = {}
        for direction in Direction:
            dx, dy = direction.value
            button = pygame.Rect(0, 0, size, size)
            button.center = (cx + dx * size, cy + dy * size)
            self.buttons[direction] = button

        self.restart = pygame.Rect(0, 0, size * 2, size // 2 + size // 4)
        self.restart.center = (cx, cy)

    def hit(self, pos: tuple[int, int]) -> Direction | None:
        for direction, button in self.buttons.items():
            if button.collidepoint(pos):
                return direction
        return None

    def hit_restart(self, pos: tuple[int, int]) -> bool:
        return bool(self.restart.collidepoint(pos))
