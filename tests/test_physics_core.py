import pytest

from flappy.constants import FLAP_IMPULSE, TERMINAL_VELOCITY
from flappy.data_models import Bird, Pipe
from flappy.physics_core import PhysicsCore

core = PhysicsCore()


def test_gravity_single_frame():
    y, v = core.apply_gravity_and_movement(300, 0.0, 1.0)
    assert v == 0.5
    assert y == 300.5


def test_deltas_scale_with_dt():
    y, v = core.apply_gravity_and_movement(100, 0.0, 2.0)
    assert v == 1.0
    assert y == 102.0


def test_falling_speed_is_clamped():
    y, v = core.apply_gravity_and_movement(0, 11.8, 1.0)
    assert v == TERMINAL_VELOCITY
    assert y == TERMINAL_VELOCITY


def test_rising_speed_is_not_clamped():
    _, v = core.apply_gravity_and_movement(300, -20.0, 1.0)
    assert v == -19.5


def test_flap_overrides_velocity():
    assert core.flap() == FLAP_IMPULSE == -8


def test_rotation_eases_toward_target():
    assert core.update_rotation(0.0, 12) == pytest.approx(0.06)
    # Upward tilt is capped at 0.5 rad
    assert core.update_rotation(0.0, -20) == pytest.approx(-0.05)
    # Downward tilt is capped at pi/2
    assert core.update_rotation(0.0, 1000) == pytest.approx(0.1 * 1.5707963267948966)


def test_integrate_updates_bird_in_place():
    bird = Bird()
    core.integrate(bird, 1.0)
    assert (bird.y, bird.velocity) == (300.5, 0.5)
    assert bird.rotation == pytest.approx(0.0025)


def test_no_collision_in_open_air():
    assert not core.check_collision(Bird(y=300), [])


def test_ground_collision():
    assert core.check_collision(Bird(y=595), [])
    assert core.check_collision(Bird(y=505), [])      # bottom == 520
    assert not core.check_collision(Bird(y=504.9), [])


def test_ground_collision_ignores_pipes():
    pipe = Pipe(x=50, gap_y=560)
    assert core.check_collision(Bird(y=595), [pipe])


def test_ceiling_collision():
    assert core.check_collision(Bird(y=15), [])       # top == 0
    assert not core.check_collision(Bird(y=16), [])


def test_pipe_without_horizontal_overlap_is_ignored():
    # Bird spans x 65..95
    assert not core.check_collision(Bird(y=100), [Pipe(x=95, gap_y=400)])
    assert not core.check_collision(Bird(y=100), [Pipe(x=5, gap_y=400)])


def test_bird_inside_gap_is_safe():
    pipe = Pipe(x=94, gap_y=300)                      # gap band 225..375
    assert not core.check_collision(Bird(y=300), [pipe])
    assert not core.check_collision(Bird(y=240), [pipe])   # top exactly on gap top
    assert not core.check_collision(Bird(y=360), [pipe])   # bottom exactly on gap bottom


def test_bird_outside_gap_collides():
    pipe = Pipe(x=50, gap_y=300)
    assert core.check_collision(Bird(y=239.9), [pipe])
    assert core.check_collision(Bird(y=360.1), [pipe])


def test_bounding_extent_is_used_at_gap_corners():
    # The circle would miss the pipe corner at (94, 225); its bounding box does not
    pipe = Pipe(x=94, gap_y=300)
    assert core.check_collision(Bird(y=235), [pipe])


def test_any_pipe_is_enough():
    safe = Pipe(x=50, gap_y=300)
    deadly = Pipe(x=70, gap_y=450)
    assert core.check_collision(Bird(y=300), [safe, deadly])


def test_respawn():
    bird = Bird(y=12, velocity=7, rotation=1.2)
    core.respawn(bird)
    assert (bird.y, bird.velocity, bird.rotation) == (300, 0.0, 0.0)
