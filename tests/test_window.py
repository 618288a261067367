import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from pixelplay.window import GameWindow


@pytest.fixture
def window():
    win = GameWindow(320, 240, "test")
    yield win
    win.close()


def test_size_matches_request(window):
    assert window.size() == (320, 240)


def test_new_window_is_open_and_close_closes(window):
    assert window.is_open() is True
    window.close()
    assert window.is_open() is False


def test_clear_fills_with_color(window):
    window.clear((10, 20, 30))
    assert tuple(window.surface.get_at((0, 0)))[:3] == (10, 20, 30)
    assert tuple(window.surface.get_at((319, 239)))[:3] == (10, 20, 30)


def test_draw_blits_at_position(window):
    window.clear((0, 0, 0))
    patch = pygame.Surface((4, 4))
    patch.fill((255, 0, 0))
    window.draw(patch, (5, 5))
    assert tuple(window.surface.get_at((5, 5)))[:3] == (255, 0, 0)
    assert tuple(window.surface.get_at((8, 8)))[:3] == (255, 0, 0)
    assert tuple(window.surface.get_at((4, 4)))[:3] == (0, 0, 0)
    assert tuple(window.surface.get_at((9, 9)))[:3] == (0, 0, 0)


def test_poll_events_returns_posted_quit(window):
    window.poll_events()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    types = [event.type for event in window.poll_events()]
    assert pygame.QUIT in types


def test_context_manager_closes():
    with GameWindow(100, 80, "ctx") as win:
        assert win.is_open() is True
    assert win.is_open() is False