"""A keyboard-driven character: a square, optionally with an animated sprite."""

from __future__ import annotations

from pathlib import Path

import pygame

from pixelplay.animation import FrameAnimator
from pixelplay.window import GameWindow

SQUARE_SIZE = 50
SPEED = 0.1
RED = (255, 0, 0)
PIKACHU_PATH = Path("assets/images/pikachu.png")


def _load_sprite(path):
    if path is None:
        return None
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError):
        return None


class Character:
    """A coloured square that can move and carry an animated sprite."""

    def __init__(self, position, color, sprite_path=None):
        self.position = (float(position[0]), float(position[1]))
        self.color = color
        self.sprite = _load_sprite(sprite_path)
        self.animator = FrameAnimator()

    def move(self, dx, dy):
        x, y = self.position
        self.position = (x + dx, y + dy)

    def update(self, elapsed):
        """Advance the sprite animation by ``elapsed`` seconds."""
        return self.animator.update(elapsed)

    def draw(self, surface):
        x, y = round(self.position[0]), round(self.position[1])
        pygame.draw.rect(surface, self.color, pygame.Rect(x, y, SQUARE_SIZE, SQUARE_SIZE))
        if self.sprite is not None:
            surface.blit(self.sprite, (x, y), self.animator.rect())


def keyboard_offset(left, right, up, down, speed=SPEED):
    """Return the (dx, dy) a frame of arrow-key input moves by."""
    dx = 0.0
    dy = 0.0
    if left:
        dx -= speed
    if right:
        dx += speed
    if up:
        dy -= speed
    if down:
        dy += speed
    return dx, dy


def _run(sprite_path, animate):
    window = GameWindow(800, 600, "DinoChrome")
    character = Character((400, 300), RED, sprite_path)
    clock = pygame.time.Clock()
    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
        if not window.is_open():
            break
        elapsed = clock.tick() / 1000.0
        keys = pygame.key.get_pressed()
        character.move(
            *keyboard_offset(
                keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN]
            )
        )
        if animate:
            character.update(elapsed)
        window.clear()
        character.draw(window.surface)
        window.display()
    return 0


def run_square(argv=None):
    """Move a red square with the arrow keys."""
    return _run(None, animate=False)


def run_pikachu(argv=None):
    """Move an animated sprite with the arrow keys."""
    return _run(PIKACHU_PATH, animate=True)


if __name__ == "__main__":
    raise SystemExit(run_pikachu())