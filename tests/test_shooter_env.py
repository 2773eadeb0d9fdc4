"""Tests for the gymnasium wrapper."""

import numpy as np
import pytest

from game.circles import ShooterEnv
from game.circles.entities import Enemy
from rl.configs.shooter_config import ENV_CONFIG, REWARD_CONFIG

NO_SHOT = [0, 0]


@pytest.fixture
def env():
    env = ShooterEnv()
    env.reset(seed=7)
    yield env
    env.close()


def test_reset_observation_in_space(env):
    obs, info = env.reset(seed=3)
    assert env.observation_space.contains(obs)
    assert obs.shape == (5 * 4 + 2,)
    assert info == {
        "kills": 0,
        "num_enemies": 0,
        "num_projectiles": 0,
        "step": 0,
        "game_over": False,
    }


def test_builds_from_config():
    env = ShooterEnv(reward_config=REWARD_CONFIG, **ENV_CONFIG)
    obs, _ = env.reset(seed=0)
    assert env.observation_space.contains(obs)
    assert env.spawn_every == 120
    env.close()


def test_invalid_action_rejected(env):
    with pytest.raises(ValueError):
        env.step([2, 0])
    with pytest.raises(ValueError):
        env.step([0, 8])


def test_spawns_on_simulated_clock(env):
    for _ in range(env.spawn_every - 1):
        env.step(NO_SHOT)
    assert env.sim.state.spawned == 0

    _, _, _, _, info = env.step(NO_SHOT)
    assert env.sim.state.spawned == 1
    assert info["num_enemies"] == 1

    for _ in range(env.spawn_every):
        env.step(NO_SHOT)
    assert env.sim.state.spawned == 2


def test_shooting_fires_in_aim_direction(env):
    _, reward, _, _, info = env.step([1, 2])  # aim index 2 == +y
    p = env.sim.state.projectiles[0]
    assert info["num_projectiles"] == 1
    assert p.vx == pytest.approx(0, abs=1e-9)
    assert p.vy == pytest.approx(7)
    assert reward == pytest.approx(-env.reward_config["R_SHOT"])


def test_kill_is_rewarded(env):
    player = env.sim.player
    env.sim.state.enemies.append(Enemy(x=player.x + 50, y=player.y, vx=0, vy=0))

    _, reward, terminated, _, info = env.step([1, 0])  # aim index 0 == +x

    assert info["kills"] == 1
    assert not terminated
    r = env.reward_config
    assert reward == pytest.approx(r["R_KILL"] - r["R_SHOT"])


def test_game_over_terminates_and_sticks(env):
    player = env.sim.player
    env.sim.state.enemies.append(Enemy(x=player.x + 40, y=player.y, vx=0, vy=0))

    obs, reward, terminated, truncated, info = env.step(NO_SHOT)
    assert terminated
    assert not truncated
    assert info["game_over"]
    assert reward == pytest.approx(-env.reward_config["R_DEATH"])

    step = info["step"]
    obs2, reward2, terminated2, _, info2 = env.step([1, 3])
    assert terminated2
    assert reward2 == 0.0
    assert info2["step"] == step
    assert info2["num_projectiles"] == 0
    np.testing.assert_array_equal(obs, obs2)


def test_truncates_at_max_steps():
    env = ShooterEnv(max_steps=5)
    env.reset(seed=1)
    results = [env.step(NO_SHOT) for _ in range(5)]
    assert [r[3] for r in results] == [False] * 4 + [True]
    env.close()


def test_projectiles_in_flight_stay_bounded(env):
    for _ in range(300):
        _, _, terminated, _, info = env.step([1, 4])
        if terminated:
            break
    # each shot leaves reach after about 99 ticks
    assert info["num_projectiles"] < 100
    assert env.sim.state.fired > info["num_projectiles"]


def test_nearest_enemy_first_in_observation(env):
    player = env.sim.player
    env.sim.state.enemies.extend([
        Enemy(x=player.x + 400, y=player.y, vx=-1, vy=0),
        Enemy(x=player.x, y=player.y - 200, vx=0, vy=1),
    ])
    obs = env._get_obs()
    assert obs[0] == pytest.approx(0.0)
    assert obs[1] == pytest.approx(-200 / env.height)
    assert obs[3] == pytest.approx(1.0)
    assert obs[4] == pytest.approx(400 / env.width)
    assert np.all(obs[8:20] == 0.0)


def test_same_seed_same_spawns():
    a, b = ShooterEnv(spawn_interval=0.1), ShooterEnv(spawn_interval=0.1)
    a.reset(seed=11)
    b.reset(seed=11)
    for _ in range(30):
        a.step(NO_SHOT)
        b.step(NO_SHOT)
    assert [(e.x, e.y) for e in a.sim.state.enemies] == [(e.x, e.y) for e in b.sim.state.enemies]
    a.close()
    b.close()


def test_reset_starts_a_fresh_session(env):
    env.step([1, 0])
    old = env.sim
    env.reset(seed=2)
    assert env.sim is not old
    assert env.sim.state.projectiles == []
    assert old.state.projectiles == []
