"""Tests for the geometry helpers."""

import math

import pytest

from game.circles.utils import (
    angle_to,
    velocity_from_angle,
    circles_overlap,
    clamp,
    is_finite_point,
)


class TestAngleTo:
    def test_cardinal_directions(self):
        assert angle_to(0, 0, 1, 0) == pytest.approx(0.0)
        assert angle_to(0, 0, 0, 1) == pytest.approx(math.pi / 2)
        assert angle_to(0, 0, -1, 0) == pytest.approx(math.pi)

    def test_argument_order_reverses_direction(self):
        forward = angle_to(3, 4, 10, -2)
        backward = angle_to(10, -2, 3, 4)
        diff = (forward - backward) % (2 * math.pi)
        assert diff == pytest.approx(math.pi)

    def test_offset_origin(self):
        assert angle_to(100, 100, 200, 100) == pytest.approx(0.0)


class TestVelocityFromAngle:
    def test_zero_angle(self):
        vx, vy = velocity_from_angle(0.0, 7.0)
        assert vx == pytest.approx(7.0)
        assert vy == pytest.approx(0.0)

    def test_magnitude_is_speed(self):
        vx, vy = velocity_from_angle(1.234, 3.5)
        assert math.hypot(vx, vy) == pytest.approx(3.5)

    def test_quarter_turn(self):
        vx, vy = velocity_from_angle(math.pi / 2, 2.0)
        assert vx == pytest.approx(0.0, abs=1e-12)
        assert vy == pytest.approx(2.0)


class TestCirclesOverlap:
    def test_touching_counts(self):
        assert circles_overlap(0, 0, 5, 20, 0, 15)

    def test_just_apart(self):
        assert not circles_overlap(0, 0, 5, 20.001, 0, 15)

    def test_concentric(self):
        assert circles_overlap(1, 1, 1, 1, 1, 1)

    def test_flips_once_as_distance_grows(self):
        r1, r2 = 5.0, 15.0
        results = [circles_overlap(0, 0, r1, d * 0.5, 0, r2) for d in range(0, 100)]
        flips = sum(1 for a, b in zip(results, results[1:]) if a != b)
        assert results[0] is True
        assert results[-1] is False
        assert flips == 1

    def test_diagonal_distance(self):
        # 3-4-5 triangle
        assert circles_overlap(0, 0, 2, 3, 4, 3)
        assert not circles_overlap(0, 0, 2, 3, 4, 2.9)


def test_clamp():
    assert clamp(5, 0, 1) == 1
    assert clamp(-5, 0, 1) == 0
    assert clamp(0.5, 0, 1) == 0.5


def test_is_finite_point():
    assert is_finite_point(1.0, 2)
    assert not is_finite_point(float("nan"), 0)
    assert not is_finite_point(0, float("inf"))
    assert not is_finite_point(None, 0)
