"""Frame-by-frame sprite sheet animation."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional
import sys

import pygame

from pixelplay.window import GameWindow

PIKACHU_PATH = Path("assets/images/pikachu.png")
FRAME_TIME = 0.1
NUM_FRAMES = 4


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


def frame_rect(frame):
    """Return the sheet region that holds the given animation frame."""
    return Rect(frame * 64 + 17, 133, 64, 36)


class FrameAnimator:
    """Cycles through a fixed number of frames at a fixed rate."""

    def __init__(self, frame_time=FRAME_TIME, num_frames=NUM_FRAMES):
        if num_frames < 1:
            raise ValueError("num_frames must be at least 1")
        if frame_time <= 0:
            raise ValueError("frame_time must be positive")
        self.frame_time = frame_time
        self.num_frames = num_frames
        self.current_frame = 0
        self._elapsed = 0.0
        self._started = False

    def update(self, elapsed):
        """Advance the clock by ``elapsed`` seconds; return True on a frame change."""
        self._elapsed += elapsed
        if self._elapsed < self.frame_time:
            return False
        self.current_frame = (self.current_frame + 1) % self.num_frames
        self._started = True
        self._elapsed = 0.0
        return True

    def rect(self) -> Optional[Rect]:
        """The region to show, or None for the whole sheet before the first change."""
        if not self._started:
            return None
        return frame_rect(self.current_frame)


def main(argv=None):
    """Show an animated sprite until the window is closed."""
    window = GameWindow(800, 600, "Sprite Animado")
    try:
        texture = pygame.image.load(str(PIKACHU_PATH))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"cannot load {PIKACHU_PATH}: {exc}", file=sys.stderr)
        window.close()
        return 1

    animator = FrameAnimator()
    clock = pygame.time.Clock()
    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
        if not window.is_open():
            break
        animator.update(clock.tick() / 1000.0)
        window.clear()
        window.surface.blit(texture, (400, 300), animator.rect())
        window.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())