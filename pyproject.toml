[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelplay"
version = "0.1.0"
description = "Small pygame demos: a window, an image, sprite animation, keyboard movement, text, music, primitive shapes, a falling-ball physics demo, two-player Tron and a bouncing DVD logo."
requires-python = ">=3.10"
keywords = ["pygame", "games", "demos", "tron", "sprites", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelplay-window = "pixelplay.window:main"
pixelplay-image = "pixelplay.demos:show_image"
pixelplay-sprite = "pixelplay.animation:main"
pixelplay-keyboard = "pixelplay.character:run_square"
pixelplay-pikachu = "pixelplay.character:run_pikachu"
pixelplay-text = "pixelplay.demos:show_text"
pixelplay-audio = "pixelplay.demos:play_music"
pixelplay-primitives = "pixelplay.demos:draw_primitives"
pixelplay-physics = "pixelplay.physics:main"
pixelplay-tron = "pixelplay.tron:main"
pixelplay-dvd = "pixelplay.dvd:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelplay"]

[tool.pytest.ini_options]
addopts = "-ra"
