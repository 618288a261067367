import pytest

from pixelplay.physics import Ball, Ground, World, impulse_from_keys


def make_world():
    ground = Ground((400, 500), 600, 10, friction=1.0)
    world = World((0.0, 10.0), ground)
    ball = world.add_ball(Ball((400, 300), 25, 0.01, friction=0.7))
    return world, ground, ball


def test_ground_top():
    assert Ground((400, 500), 600, 10).top() == 495.0


def test_mass_scales_with_density_and_area():
    base = Ball((0, 0), 5, 1.0).mass()
    assert Ball((0, 0), 5, 2.0).mass() == pytest.approx(2 * base)
    assert Ball((0, 0), 10, 1.0).mass() == pytest.approx(4 * base)


def test_apply_impulse_changes_momentum_by_impulse():
    ball = Ball((0, 0), 25, 0.01)
    ball.apply_impulse((3.0, -2.0))
    vx, vy = ball.velocity
    assert vx * ball.mass() == pytest.approx(3.0)
    assert vy * ball.mass() == pytest.approx(-2.0)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ((True, False, False, False), (-1, 0)),
        ((False, True, False, False), (1, 0)),
        ((False, False, True, False), (0, -1)),
        ((False, False, False, True), (0, 1)),
        ((True, True, True, True), (0, 0)),
    ],
)
def test_impulse_from_keys(keys, expected):
    assert impulse_from_keys(*keys) == expected


def test_impulse_from_keys_uses_force():
    ix, iy = impulse_from_keys(False, True, True, False, force=3)
    assert (ix, iy) == (3, -3)


def test_ball_falls_under_gravity():
    world, _, ball = make_world()
    start_y = ball.position[1]
    world.step(1 / 60)
    assert ball.velocity[1] > 0
    assert ball.position[1] > start_y
    assert ball.position[0] == pytest.approx(400)


def test_ball_comes_to_rest_on_ground():
    world, ground, ball = make_world()
    for _ in range(2000):
        world.step(1 / 60)
    assert ball.position[1] + ball.radius == pytest.approx(ground.top())
    assert ball.velocity[1] == 0.0


def test_friction_slows_ball_on_ground():
    world, ground, ball = make_world()
    for _ in range(2000):
        world.step(1 / 60)
    ball.apply_impulse((ball.mass() * 5.0, 0.0))
    speed_before = ball.velocity[0]
    for _ in range(10):
        world.step(1 / 60)
    assert 0 <= ball.velocity[0] < speed_before


def test_ball_beside_ground_keeps_falling():
    ground = Ground((400, 500), 600, 10)
    world = World((0.0, 10.0), ground)
    ball = world.add_ball(Ball((50, 300), 25, 0.01))
    for _ in range(2000):
        world.step(1 / 60)
    assert ball.position[1] > ground.top()


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        Ball((0, 0), 0, 1.0)
    with pytest.raises(ValueError):
        Ball((0, 0), 1, 0)
    with pytest.raises(ValueError):
        Ground((0, 0), 0, 10)
    world, _, _ = make_world()
    with pytest.raises(ValueError):
        world.step(0)