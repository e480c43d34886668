from types import SimpleNamespace

import pygame
import pytest

from touchsnake.controls import ControlPad, direction_for_key, finger_to_pixels
from touchsnake.game import handle_key, handle_press
from touchsnake.render import layout
from touchsnake.state import Direction


@pytest.fixture
def pad():
    return ControlPad(pygame.Rect(0, 0, 300, 300))


class TestKeys:
    """Tests for keyboard mapping."""

    @pytest.mark.parametrize(
        "key, direction",
        [
            (pygame.K_UP, Direction.UP),
            (pygame.K_DOWN, Direction.DOWN),
            (pygame.K_LEFT, Direction.LEFT),
            (pygame.K_RIGHT, Direction.RIGHT),
            (pygame.K_w, Direction.UP),
            (pygame.K_d, Direction.RIGHT),
        ],
    )
    def test_mapped_keys(self, key, direction):
        """Arrows and WASD map to directions."""
        assert direction_for_key(key) is direction

    def test_unmapped_key(self):
        """Other keys map to nothing."""
        assert direction_for_key(pygame.K_x) is None


class TestControlPad:
    """Tests for the on-screen pad layout."""

    @pytest.mark.parametrize(
        "pos, direction",
        [
            ((150, 50), Direction.UP),
            ((150, 250), Direction.DOWN),
            ((50, 150), Direction.LEFT),
            ((250, 150), Direction.RIGHT),
        ],
    )
    def test_buttons_form_a_cross(self, pad, pos, direction):
        """Each arm of the cross maps to its direction."""
        assert pad.hit(pos) is direction

    def test_centre_and_corners_are_empty(self, pad):
        """Taps between buttons do nothing."""
        assert pad.hit((150, 150)) is None
        assert pad.hit((10, 10)) is None

    def test_restart_button(self, pad):
        """The restart button sits in the middle of the pad area."""
        assert pad.hit_restart((150, 150)) is True
        assert pad.hit_restart((10, 10)) is False

    def test_finger_to_pixels(self):
        """Normalised touch coordinates scale to the window."""
        event = SimpleNamespace(x=0.5, y=0.25)
        assert finger_to_pixels(event, (400, 800)) == (200, 200)


class TestPress:
    """Tests for routing taps into the engine."""

    def test_tap_turns_snake(self, engine, pad):
        """Tapping an arrow buffers that direction."""
        handle_press(engine, pad, (150, 50))
        assert engine.pending_direction is Direction.UP

    def test_tap_restart(self, engine, pad):
        """Tapping restart after game over starts a new game."""
        engine.score = 40
        engine.game_over()
        handle_press(engine, pad, (150, 150))
        assert engine.is_over is False
        assert engine.score == 0

    def test_arrows_ignored_after_game_over(self, engine, pad):
        """Arrow taps do nothing once the game has ended."""
        engine.game_over()
        handle_press(engine, pad, (150, 50))
        assert engine.pending_direction is Direction.RIGHT


class TestLayout:
    """Tests for the window layout."""

    def test_board_and_pad(self):
        """The board is square, centred, and sits above the pad."""
        board, pad = layout((480, 800))
        assert board.width == board.height == 408
        assert board.centerx == 240
        assert pad.top > board.bottom
        assert pad.bottom <= 800


class TestKeyPress:
    """Tests for routing key presses into the engine."""

    def test_arrow_buffers_direction(self, engine):
        """An arrow key buffers its direction."""
        handle_key(engine, pygame.K_UP)
        assert engine.pending_direction is Direction.UP

    def test_unmapped_key_is_ignored(self, engine):
        """Keys with no binding change nothing."""
        handle_key(engine, pygame.K_x)
        assert engine.pending_direction is Direction.RIGHT

    @pytest.mark.parametrize("key", [pygame.K_RETURN, pygame.K_SPACE])
    def test_restart_during_play_is_ignored(self, engine, key):
        """Restart keys do nothing while the game runs."""
        engine.score = 30
        handle_key(engine, key)
        assert engine.score == 30
        assert engine.is_over is False

    @pytest.mark.parametrize("key", [pygame.K_RETURN, pygame.K_SPACE])
    def test_restart_after_game_over(self, engine, key):
        """Restart keys start a new game once the last one has ended."""
        engine.score = 30
        engine.game_over()
        handle_key(engine, key)
        assert engine.is_over is False
        assert engine.score == 0
