from pixelplay.dvd import Bouncer


def test_step_moves_by_velocity():
    bouncer = Bouncer((400, 300), (5, 3), (800, 600))
    assert bouncer.step() == (405.0, 303.0)
    assert bouncer.direction == (1, 1)


def test_bounces_off_right_edge():
    bouncer = Bouncer((796, 300), (5, 3), (800, 600))
    first_x, _ = bouncer.step()
    assert first_x >= 800
    assert bouncer.direction[0] == -1
    second_x, _ = bouncer.step()
    assert second_x == first_x - 5


def test_bounces_off_top_edge():
    bouncer = Bouncer((400, 2), (5, 3), (800, 600))
    bouncer.direction = (1, -1)
    _, y = bouncer.step()
    assert y <= 0
    assert bouncer.direction[1] == 1
    _, y2 = bouncer.step()
    assert y2 == y + 3


def test_stays_near_bounds_over_time():
    bouncer = Bouncer((400, 300), (5, 3), (800, 600))
    for _ in range(5000):
        x, y = bouncer.step()
        assert -5 <= x <= 805
        assert -3 <= y <= 603