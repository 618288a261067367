"""Two-player light-cycle game on a wrapping grid."""

from __future__ import annotations

import enum
from itertools import zip_longest

import pygame

from pixelplay.window import GameWindow

BLOCKS = 90
BLOCK_SIZE = 7
WIDTH = BLOCKS * BLOCK_SIZE
HEIGHT = BLOCKS * BLOCK_SIZE
UPDATE_INTERVAL = 0.03

RED = (255, 0, 0)
BLUE = (0, 0, 255)


class Direction(enum.Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))


class Player:
    """A light cycle: a head followed by every square it has passed through."""

    def __init__(self, color, position):
        self.color = color
        self.direction = Direction.UP
        self.body = [(int(position[0]), int(position[1]))]

    @property
    def head(self):
        return self.body[0]

    def _cell(self):
        x, y = self.head
        return int(x / BLOCK_SIZE), int(y / BLOCK_SIZE)

    def move(self):
        gx, gy = self._cell()
        self.body[0] = ((gx + self.direction.dx) * BLOCK_SIZE, (gy + self.direction.dy) * BLOCK_SIZE)

    def add_tail(self):
        self.body.append(self.head)

    def check_bounds(self):
        gx, gy = self._cell()
        if gx >= BLOCKS:
            gx = 0
        if gx < 0:
            gx = BLOCKS
        if gy >= BLOCKS:
            gy = 0
        if gy < 0:
            gy = BLOCKS
        self.body[0] = (gx * BLOCK_SIZE, gy * BLOCK_SIZE)

    def hits_self(self):
        """Count trail squares the head lies on."""
        return sum(1 for segment in self.body[1:] if segment == self.head)

    def hits(self, other):
        """Count squares of ``other`` the head lies on."""
        return sum(1 for segment in other.body if segment == self.head)

    def change_direction(self, requested):
        if requested is not self.direction.opposite:
            self.direction = requested

    def update(self, enemy):
        """Advance one step; return the number of collisions, each a point for the enemy."""
        self.move()
        collisions = self.hits_self() + self.hits(enemy)
        self.add_tail()
        self.check_bounds()
        return collisions


class TronGame:
    """Round state and running scores for the red and blue players."""

    def __init__(self):
        self.red_score = 0
        self.blue_score = 0
        self.reset()

    def reset(self):
        """Start a new round, keeping the scores."""
        self.red = Player(RED, (WIDTH // 4, HEIGHT // 2))
        self.blue = Player(BLUE, (WIDTH - WIDTH // 4, HEIGHT // 2))
        self.game_over = False
        self._elapsed = 0.0

    def steer(self, red_direction, blue_direction):
        if self.game_over:
            return
        if red_direction is not None:
            self.red.change_direction(red_direction)
        if blue_direction is not None:
            self.blue.change_direction(blue_direction)

    def tick(self, elapsed):
        """Advance the clock; return True if the players moved."""
        if self.game_over:
            return False
        self._elapsed += elapsed
        if self._elapsed <= UPDATE_INTERVAL:
            return False
        self._elapsed = 0.0
        blue_points = self.red.update(self.blue)
        red_points = self.blue.update(self.red)
        self.blue_score += blue_points
        self.red_score += red_points
        if blue_points or red_points:
            self.game_over = True
        return True


_RED_KEYS = (
    (pygame.K_w, Direction.UP),
    (pygame.K_s, Direction.DOWN),
    (pygame.K_a, Direction.LEFT),
    (pygame.K_d, Direction.RIGHT),
)
_BLUE_KEYS = (
    (pygame.K_UP, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_RIGHT, Direction.RIGHT),
)


def _pressed(keys, bindings):
    return [direction for key, direction in bindings if keys[key]]


def _announce(game):
    print("\033[2J\033[H", end="")
    print(f"Red:  {game.red_score}")
    print(f"Blue: {game.blue_score}")


def main(argv=None):
    """Play until the window is closed; R starts the next round."""
    window = GameWindow(WIDTH, HEIGHT, "Snake")
    game = TronGame()
    _announce(game)
    clock = pygame.time.Clock()

    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and game.game_over:
                game.reset()
                clock.tick()
                _announce(game)
        if not window.is_open():
            break

        elapsed = clock.tick() / 1000.0
        if not game.game_over:
            keys = pygame.key.get_pressed()
            for red, blue in zip_longest(_pressed(keys, _RED_KEYS), _pressed(keys, _BLUE_KEYS)):
                game.steer(red, blue)
            if game.tick(elapsed) and game.game_over:
                print("Press 'R' to go to the next round")

        window.clear((0, 0, 0))
        for player in (game.red, game.blue):
            for x, y in player.body:
                pygame.draw.rect(window.surface, player.color, (x, y, BLOCK_SIZE, BLOCK_SIZE))
        window.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())