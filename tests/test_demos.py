import pygame
import pytest

from pixelplay.demos import (
    ShapeKind,
    play_music,
    primitive_shapes,
    show_image,
    show_text,
    text_items,
)


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    yield
    pygame.quit()


def test_text_items_match_source_strings():
    items = text_items()
    assert [item.text for item in items] == ["Ejemplo texto Minecraft!", "Ejemplo texto LOTR"]
    assert [item.size for item in items] == [29, 40]
    assert items[1].position == (100, 100)
    assert [item.font_path.name for item in items] == ["Minecraft.ttf", "Ring.ttf"]


def test_primitive_shapes_kinds_and_triangle():
    shapes = primitive_shapes()
    assert [shape.kind for shape in shapes] == [
        ShapeKind.CIRCLE,
        ShapeKind.RECTANGLE,
        ShapeKind.POLYGON,
    ]
    assert shapes[2].points == ((100, 300), (200, 300), (150, 400))
    assert shapes[1].position == (300, 200)
    assert shapes[1].size == (200, 100)


def test_shapes_draw_their_colors():
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    for shape in primitive_shapes():
        shape.draw(surface)
    assert surface.get_at((150, 150))[:3] == (255, 0, 0)
    assert surface.get_at((400, 250))[:3] == (0, 255, 0)
    assert surface.get_at((150, 320))[:3] == (0, 0, 255)
    assert surface.get_at((700, 550))[:3] == (0, 0, 0)


def test_show_image_missing_file(headless):
    assert show_image() == 1


def test_show_text_missing_font(headless):
    assert show_text() == 1


def test_play_music_missing_file(headless):
    assert play_music() == 1