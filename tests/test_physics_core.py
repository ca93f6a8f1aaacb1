import pytest

from flappy.physics_core import PhysicsCore


def test_gravity_accumulates_in_fixed_steps():
    y, velocity = 10, 0.0
    for _ in range(5):
        y, velocity = PhysicsCore.apply_gravity_and_movement(y, velocity)
    assert velocity == 1.0
    # 0.2 .. 0.8 truncate to 0 rows, only the fifth step moves
    assert y == 11


def test_velocity_is_capped_at_terminal_velocity():
    _, velocity = PhysicsCore.apply_gravity_and_movement(10, 1.9)
    assert velocity == 2.0

    y, velocity = PhysicsCore.apply_gravity_and_movement(10, 2.0)
    assert velocity == 2.0
    assert y == 12


def test_row_never_goes_above_the_top_edge():
    y, velocity = PhysicsCore.apply_gravity_and_movement(0, -2.0)
    assert velocity == pytest.approx(-1.8)
    assert y == 0


def test_upward_movement_truncates_toward_zero():
    y, velocity = PhysicsCore.apply_gravity_and_movement(10, -0.4)
    assert velocity == pytest.approx(-0.2)
    assert y == 10


def test_flap_velocity():
    assert PhysicsCore.flap() == -2.0


@pytest.mark.parametrize("score, size", [(0, 20), (1, 19), (17, 3), (18, 2), (25, 2), (1000, 2)])
def test_gap_size_shrinks_to_a_floor(score, size):
    assert PhysicsCore.gap_size(score) == size


def test_gap_band():
    assert PhysicsCore.gap_band(20, 10) == (15, 25)
    assert PhysicsCore.gap_band(20, 3) == (19, 21)


@pytest.mark.parametrize("player_y, hit", [
    (10, True), (14, True), (15, False), (20, False), (25, False), (26, True),
])
def test_collision_only_outside_gap_band(player_y, hit):
    assert PhysicsCore.check_collision(30, player_y, 30, 20, 10) is hit


@pytest.mark.parametrize("player_x", [29, 31, 0, 1000])
def test_no_collision_when_columns_differ(player_x):
    assert PhysicsCore.check_collision(player_x, 0, 30, 20, 10) is False
