"""A logo bouncing around the window edges."""

from __future__ import annotations

from pathlib import Path
import sys

import pygame

from pixelplay.window import GameWindow

DVD_PATH = Path("assets/images/Dvd.png")
SCALE = 0.5


class Bouncer:
    """A point moving at constant speed that reverses at the bounds."""

    def __init__(self, position, velocity, bounds):
        self.position = (float(position[0]), float(position[1]))
        self.velocity = (float(velocity[0]), float(velocity[1]))
        self.bounds = (bounds[0], bounds[1])
        self.direction = (1, 1)

    def step(self):
        """Move one frame and return the new position."""
        x, y = self.position
        vx, vy = self.velocity
        dx, dy = self.direction
        x += vx * dx
        y += vy * dy
        width, height = self.bounds
        if x <= 0 or x >= width:
            dx = -dx
        if y <= 0 or y >= height:
            dy = -dy
        self.position = (x, y)
        self.direction = (dx, dy)
        return self.position


def main(argv=None):
    """Bounce the logo until the window is closed."""
    window = GameWindow(800, 600, "DVD Animation")
    try:
        texture = pygame.image.load(str(DVD_PATH))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"cannot load {DVD_PATH}: {exc}", file=sys.stderr)
        window.close()
        return 1

    width, height = texture.get_size()
    logo = pygame.transform.smoothscale(texture, (round(width * SCALE), round(height * SCALE)))
    offset = ((width // 2) * SCALE, (height // 2) * SCALE)
    bouncer = Bouncer((400, 300), (5, 3), window.size())
    clock = pygame.time.Clock()

    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
        if not window.is_open():
            break
        x, y = bouncer.step()
        window.clear((0, 0, 0))
        window.draw(logo, (round(x - offset[0]), round(y - offset[1])))
        window.display()
        clock.tick(60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())