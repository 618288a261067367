"""A thin window wrapper and the simplest demo: a green circle."""

from __future__ import annotations

import pygame

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)


class GameWindow:
    """A titled display surface that can be cleared, drawn on and shown."""

    def __init__(self, width, height, title):
        pygame.display.init()
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._open = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def surface(self):
        """The surface everything is drawn on."""
        return self._surface

    def is_open(self):
        return self._open

    def close(self):
        if self._open:
            self._open = False
            pygame.display.quit()

    def clear(self, color=BLACK):
        self._surface.fill(color)

    def display(self):
        pygame.display.flip()

    def draw(self, surface, position=(0, 0)):
        self._surface.blit(surface, position)

    def poll_events(self):
        """Return every event waiting in the queue."""
        return pygame.event.get()

    def size(self):
        return self._surface.get_size()


def main(argv=None):
    """Open a small window showing a green circle until it is closed."""
    window = GameWindow(200, 200, "Window works!")
    radius = 100
    circle = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    pygame.draw.circle(circle, GREEN, (radius, radius), radius)

    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
        if not window.is_open():
            break
        window.clear()
        window.draw(circle, (0, 0))
        window.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())