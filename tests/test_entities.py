"""Tests for the entity dataclasses."""

import dataclasses

import pytest

from game.circles.entities import Player, Projectile, Enemy, advance


def test_advance_adds_velocity():
    p = Projectile(x=10, y=10, vx=5, vy=-2)
    advance(p)
    assert (p.x, p.y) == (15, 8)
    advance(p)
    assert (p.x, p.y) == (20, 6)


def test_enemy_velocity_is_never_recomputed():
    e = Enemy(x=0, y=0, vx=1, vy=0)
    for _ in range(10):
        advance(e)
    assert (e.vx, e.vy) == (1, 0)
    assert e.x == 10


def test_default_radii():
    assert Player(0, 0).radius == 30.0
    assert Projectile(0, 0, 0, 0).radius == 5.0
    assert Enemy(0, 0, 0, 0).radius == 15.0


def test_player_is_immutable():
    player = Player(400, 300)
    with pytest.raises(dataclasses.FrozenInstanceError):
        player.x = 0


def test_movers_compare_by_identity():
    a = Enemy(0, 0, 0, 0)
    b = Enemy(0, 0, 0, 0)
    assert a != b
    assert a in [a]
