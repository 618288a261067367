"""A small rigid-body world: a static ground box and balls falling onto it."""

from __future__ import annotations

import math

import pygame

from pixelplay.window import GameWindow

GRAVITY = (0.0, 10.0)
TIME_STEP = 1.0 / 60.0
FORCE = 1

WHITE = (255, 255, 255)
RED = (255, 0, 0)


class Ground:
    """A static axis-aligned box given by its centre and size."""

    def __init__(self, center, width, height, friction=1.0):
        if width <= 0 or height <= 0:
            raise ValueError("ground width and height must be positive")
        self.center = (float(center[0]), float(center[1]))
        self.width = float(width)
        self.height = float(height)
        self.friction = float(friction)

    def top(self):
        """The y coordinate of the upper face."""
        return self.center[1] - self.height / 2.0

    @property
    def left(self):
        return self.center[0] - self.width / 2.0

    @property
    def right(self):
        return self.center[0] + self.width / 2.0

    def rect(self):
        """The box as a pygame rectangle."""
        return pygame.Rect(
            round(self.left), round(self.top()), round(self.width), round(self.height)
        )


class Ball:
    """A dynamic circle with uniform density."""

    def __init__(self, position, radius, density, friction=0.7):
        if radius <= 0:
            raise ValueError("radius must be positive")
        if density <= 0:
            raise ValueError("density must be positive")
        self.position = (float(position[0]), float(position[1]))
        self.velocity = (0.0, 0.0)
        self.radius = float(radius)
        self.density = float(density)
        self.friction = float(friction)

    def mass(self):
        return self.density * math.pi * self.radius**2

    def apply_impulse(self, impulse):
        """Change the velocity by ``impulse`` divided by the mass."""
        m = self.mass()
        vx, vy = self.velocity
        self.velocity = (vx + impulse[0] / m, vy + impulse[1] / m)


class World:
    """Integrates balls under gravity and stops them on the ground."""

    def __init__(self, gravity=GRAVITY, ground=None):
        self.gravity = (float(gravity[0]), float(gravity[1]))
        self.ground = ground
        self.balls = []

    def add_ball(self, ball):
        self.balls.append(ball)
        return ball

    def step(self, dt=TIME_STEP):
        """Advance every ball by ``dt`` seconds."""
        if dt <= 0:
            raise ValueError("time step must be positive")
        gx, gy = self.gravity
        for ball in self.balls:
            vx, vy = ball.velocity
            vx += gx * dt
            vy += gy * dt
            x, y = ball.position
            x += vx * dt
            y += vy * dt
            ball.position = (x, y)
            ball.velocity = (vx, vy)
            if self.ground is not None:
                self._resolve(ball)

    def _resolve(self, ball):
        ground = self.ground
        x, y = ball.position
        if not ground.left <= x <= ground.right:
            return
        if y > ground.center[1]:
            return
        top = ground.top()
        if y + ball.radius < top:
            return
        ball.position = (x, top - ball.radius)
        vx, vy = ball.velocity
        if vy <= 0:
            return
        mu = math.sqrt(ball.friction * ground.friction)
        max_change = mu * vy
        if abs(vx) <= max_change:
            vx = 0.0
        else:
            vx -= math.copysign(max_change, vx)
        ball.velocity = (vx, 0.0)


def impulse_from_keys(left, right, up, down, force=FORCE):
    """Return the impulse a frame of arrow-key input applies."""
    ix = 0.0
    iy = 0.0
    if left:
        ix -= force
    if right:
        ix += force
    if up:
        iy -= force
    if down:
        iy += force
    return ix, iy


def main(argv=None):
    """Drop a ball on the ground and push it with the arrow keys."""
    window = GameWindow(800, 600, "Ejemplo de Fisica")
    ground = Ground((400, 500), 600, 10, friction=1.0)
    world = World(GRAVITY, ground)
    ball = world.add_ball(Ball((400, 300), 25, 0.01, friction=0.7))

    while window.is_open():
        for event in window.poll_events():
            if event.type == pygame.QUIT:
                window.close()
        if not window.is_open():
            break

        keys = pygame.key.get_pressed()
        impulse = impulse_from_keys(
            keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_UP], keys[pygame.K_DOWN]
        )
        if impulse != (0.0, 0.0):
            ball.apply_impulse(impulse)
        world.step(TIME_STEP)
        x, y = ball.position
        print(f"Posicion de la bola: {x:g}, {y:g}")

        window.clear()
        pygame.draw.rect(window.surface, WHITE, ground.rect())
        pygame.draw.circle(window.surface, RED, (round(x), round(y)), round(ball.radius))
        window.display()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())