"""
ShooterEnv - gymnasium wrapper around the circle shooter simulation
-------------------------------------------------------------------
- One env step == one simulation tick (the frame clock)
- Enemy spawning runs on a simulated clock: every spawn_interval * frame_rate steps
- Discrete MultiDiscrete action space: [shoot(2), aim(8)]
- Vector observation: top-K nearest enemies (relative position + velocity)
- Episode terminates when an enemy reaches the player

Quick test:
    python -m game.circles.shooter_env
"""

from __future__ import annotations

import math
import random
from typing import List, Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .utils import clamp, vec_len, seed_everything
from .simulation import Simulation


class ShooterEnv(gym.Env):
    """Circle shooter as a gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        frame_rate: int = 60,
        spawn_interval: float = 2.0,  # seconds
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 5,
        max_projectiles: int = 20,
        bullet_speed: float = 7.0,
        bullet_radius: float = 5.0,
        player_radius: float = 30.0,
        enemy_radius: float = 15.0,
        enemy_speed: float = 1.0,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        # Arena
        self.width = width
        self.height = height
        self.frame_rate = frame_rate
        self.max_steps = max_steps

        # Spawn clock in ticks
        self.spawn_interval = spawn_interval
        self.spawn_every = max(1, int(round(spawn_interval * frame_rate)))

        # Observation config
        self.k_enemies = k_enemies
        self.max_projectiles = max_projectiles

        self._sim_kwargs = dict(
            bullet_speed=bullet_speed,
            bullet_radius=bullet_radius,
            player_radius=player_radius,
            enemy_radius=enemy_radius,
            enemy_speed=enemy_speed,
        )
        self.enemy_speed = enemy_speed

        self.reward_config = {
            "R_KILL": 1.0,
            "R_SHOT": 0.01,
            "R_TIME": 0.0,
            "R_DEATH": 5.0,
        }
        if reward_config:
            self.reward_config.update(
                {k: v for k, v in reward_config.items() if k.startswith("R_")}
            )

        # Action space:
        # shoot: 0/1
        # aim: 0..7 (8 directions)
        self.action_space = spaces.MultiDiscrete([2, 8])

        # Observation space (vector)
        # Each enemy: rel pos(2) vel(2)
        # Projectiles in flight(1), spawn clock(1)
        obs_dim = self.k_enemies * 4 + 2
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        # Precompute aim directions (8-way)
        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append((math.cos(ang), math.sin(ang)))

        # Arcade rendering state
        self._window = None

        self.sim: Simulation = None  # type: ignore
        self._step_count = 0
        self._spawn_timer = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        if self.sim is not None:
            self.sim.close()

        sink = None
        if self.render_mode == "human":
            sink = self._get_window().sink

        rng = random.Random(int(self.np_random.integers(2 ** 32)))
        self.sim = Simulation(self.width, self.height, sink=sink, rng=rng, **self._sim_kwargs)
        if self._window is not None:
            self._window.attach(self.sim)

        self._step_count = 0
        self._spawn_timer = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        action = np.asarray(action, dtype=np.int64)
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r} for {self.action_space}")

        if self.sim.is_over:
            # Terminal state is sticky; nothing moves any more
            return self._get_obs(), 0.0, True, False, self._get_info()

        shoot, aim = int(action[0]), int(action[1])

        shots = 0
        if shoot == 1:
            dx, dy = self._aim_dirs[aim]
            player = self.sim.player
            reach = player.radius * 2
            if self.sim.fire(player.x + dx * reach, player.y + dy * reach) is not None:
                shots = 1

        self._spawn_timer += 1
        if self._spawn_timer >= self.spawn_every:
            self._spawn_timer = 0
            self.sim.spawn_enemy()

        report = self.sim.tick()

        r = self.reward_config
        reward = r["R_KILL"] * report.kills - r["R_SHOT"] * shots - r["R_TIME"]
        if report.game_over:
            reward -= r["R_DEATH"]

        terminated = self.sim.is_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        player = self.sim.player
        speed = max(1e-6, self.enemy_speed)

        enemies_sorted = sorted(
            self.sim.state.enemies,
            key=lambda e: vec_len(e.x - player.x, e.y - player.y),
        )

        obs_parts: List[float] = []
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                dx = (e.x - player.x) / self.width
                dy = (e.y - player.y) / self.height
                obs_parts += [
                    clamp(dx, -1, 1),
                    clamp(dy, -1, 1),
                    clamp(e.vx / speed, -1, 1),
                    clamp(e.vy / speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        in_flight = len(self.sim.state.projectiles) / max(1, self.max_projectiles)
        obs_parts.append(clamp(in_flight, 0, 1) * 2 - 1)
        obs_parts.append((self._spawn_timer / self.spawn_every) * 2 - 1)

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        state = self.sim.state
        return {
            "kills": state.kills,
            "num_enemies": len(state.enemies),
            "num_projectiles": len(state.projectiles),
            "step": self._step_count,
            "game_over": state.is_over,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def _get_window(self):
        if self._window is None:
            # Imported here so headless training never needs a display
            from .window import ShooterWindow

            self._window = ShooterWindow(
                self.width, self.height, frame_rate=self.frame_rate, autoplay=False
            )
        return self._window

    def render(self):
        if self.render_mode is None:
            return None

        window = self._get_window()
        window.dispatch_events()
        window.on_draw()
        window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
            self.sim = None  # type: ignore
        elif self.sim is not None:
            self.sim.close()
            self.sim = None  # type: ignore


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random-policy episode"""
    env = ShooterEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(1 / env.frame_rate)

    print(f"Random episode return: {total:.2f}  kills: {info['kills']}  steps: {info['step']}")
    env.close()
    return total, info


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run one random-policy episode")
    parser.add_argument("--no-render", action="store_true", help="Disable rendering")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    run_random_episode(render=not args.no_render, seed=args.seed)
