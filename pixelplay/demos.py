"""Small display demos: an image, text, music and basic shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
import enum
from pathlib import Path
import sys

import pygame

from pixelplay.window import GameWindow

IMAGE_PATH = Path("assets/images/pikachu.png")
MINECRAFT_FONT = Path("assets/fonts/Minecraft.ttf")
RING_FONT = Path("assets/fonts/Ring.ttf")
MUSIC_PATH = Path("assets/music/musica.ogg")

WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@dataclass(frozen=True)
class TextItem:
    """A line of text and how to show it."""

    font_path: Path
    text: str
    size: int
    color: tuple = WHITE
    position: tuple = (0, 0)


class ShapeKind(enum.Enum):
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    POLYGON = "polygon"


@dataclass(frozen=True)
class Primitive:
    """A filled shape: a circle or rectangle in a box, or a polygon by its points."""

    kind: ShapeKind
    color: tuple
    position: tuple = (0, 0)
    size: tuple = (0, 0)
    points: tuple = field(default_factory=tuple)

    def draw(self, surface):
        if self.kind is ShapeKind.POLYGON:
            pygame.draw.polygon(surface, self.color, self.points)
            return
        rect = pygame.Rect(self.position, self.size)
        if self.kind is ShapeKind.CIRCLE:
            pygame.draw.ellipse(surface, self.color, rect)
        else:
            pygame.draw.rect(surface, self.color, rect)


def text_items():
    """The two lines of text the text demo shows."""
    return [
        TextItem(MINECRAFT_FONT, "Ejemplo texto Minecraft!", 29, WHITE, (0, 0)),
        TextItem(RING_FONT, "Ejemplo texto LOTR", 40, WHITE, (100, 100)),
    ]


def primitive_shapes():
    """A red circle, a green rectangle and a blue triangle."""
    radius = 50
    return [
        Primitive(ShapeKind.CIRCLE, RED, (100, 100), (radius * 2, radius * 2)),
        Primitive(ShapeKind.RECTANGLE, GREEN, (300, 200), (200, 100)),
        Primitive(ShapeKind.POLYGON, BLUE, points=((100, 300), (200, 300), (150, 400))),
    ]


def _run(window, draw, keep_going=lambda: True):
    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
        if not window.is_open():
            break
        window.clear()
        draw(window.surface)
        window.display()
        if not keep_going():
            window.close()
    return 0


def show_image(argv=None):
    """Show an image until the window is closed."""
    window = GameWindow(800, 600, "Image")
    try:
        image = pygame.image.load(str(IMAGE_PATH))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"cannot load {IMAGE_PATH}: {exc}", file=sys.stderr)
        window.close()
        return 1
    return _run(window, lambda surface: surface.blit(image, (0, 0)))


def show_text(argv=None):
    """Show two lines of text in different fonts."""
    window = GameWindow(800, 600, "Texto")
    pygame.font.init()
    rendered = []
    try:
        for item in text_items():
            font = pygame.font.Font(str(item.font_path), item.size)
            rendered.append((font.render(item.text, True, item.color), item.position))
    except (pygame.error, FileNotFoundError, OSError) as exc:
        print(f"cannot load font: {exc}", file=sys.stderr)
        window.close()
        return 1

    def draw(surface):
        for image, position in rendered:
            surface.blit(image, position)

    return _run(window, draw)


def play_music(argv=None):
    """Play a music file; the window closes when the music ends."""
    window = GameWindow(800, 600, "Reproductor de musica")
    try:
        pygame.mixer.init()
        pygame.mixer.music.load(str(MUSIC_PATH))
    except (pygame.error, FileNotFoundError) as exc:
        print(f"cannot play {MUSIC_PATH}: {exc}", file=sys.stderr)
        window.close()
        return 1
    pygame.mixer.music.play()
    try:
        return _run(window, lambda surface: None, pygame.mixer.music.get_busy)
    finally:
        pygame.mixer.quit()


def draw_primitives(argv=None):
    """Draw a circle, a rectangle and a triangle."""
    window = GameWindow(800, 600, "Primitives")
    shapes = primitive_shapes()

    def draw(surface):
        for shape in shapes:
            shape.draw(surface)

    return _run(window, draw)


if __name__ == "__main__":
    raise SystemExit(draw_primitives())