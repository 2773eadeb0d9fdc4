"""
Training script for the circle shooter environment using Stable-Baselines3 PPO.
"""

import os
import argparse
from typing import Optional

from stable_baselines3 import PPO
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize
from stable_baselines3.common.callbacks import CheckpointCallback
from stable_baselines3.common.monitor import Monitor

from game.circles import ShooterEnv
from rl.configs.shooter_config import ENV_CONFIG, REWARD_CONFIG, PPO_CONFIG, TRAINING_CONFIG
from rl.metrics_callback import MetricsCallback


def make_env(render_mode: Optional[str] = None, seed: Optional[int] = None):
    """Factory function to create the environment"""
    def _init():
        env = ShooterEnv(render_mode=render_mode, reward_config=REWARD_CONFIG, **ENV_CONFIG)
        env = Monitor(env)
        if seed is not None:
            env.reset(seed=seed)
        return env
    return _init


def train_ppo(
    total_timesteps: Optional[int] = None,
    save_dir: str = "./models/ppo",
    log_dir: str = "./logs/ppo",
    tensorboard_log: Optional[str] = None,
    n_envs: int = 4,
    seed: int = 0,
):
    """Train PPO agent on the circle shooter environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    # Create directories
    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Training PPO for {total_timesteps:,} timesteps...")
    print(f"Using {n_envs} parallel environments")
    print(f"{'='*60}\n")

    # Create vectorized environments
    env = DummyVecEnv([make_env(seed=seed + i) for i in range(n_envs)])

    # Normalize observations and rewards
    env = VecNormalize(env, norm_obs=True, norm_reward=True)

    checkpoint_callback = CheckpointCallback(
        save_freq=max(1, TRAINING_CONFIG["save_freq"] // n_envs),
        save_path=save_dir,
        name_prefix="ppo_shooter",
    )

    metrics_callback = MetricsCallback(
        log_dir=log_dir,
        algo_name="ppo",
        verbose=1,
    )

    model = PPO(
        env=env,
        tensorboard_log=tensorboard_log,
        seed=seed,
        **PPO_CONFIG
    )

    model.learn(
        total_timesteps=total_timesteps,
        callback=[checkpoint_callback, metrics_callback],
    )

    # Save final model
    final_path = os.path.join(save_dir, "ppo_shooter_final")
    model.save(final_path)
    env.save(os.path.join(save_dir, "vec_normalize.pkl"))

    print(f"\n{'='*60}")
    print(f"PPO Training complete! Model saved to {final_path}")
    summary = metrics_callback.get_summary()
    if summary:
        print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        print(f"Mean Kills: {summary['mean_kills']:.2f}")
        print(f"Survival Rate: {summary['survival_rate']:.2%}")
        print(f"Total Episodes: {summary['total_episodes']}")
    print(f"{'='*60}\n")

    return model, metrics_callback


def main():
    parser = argparse.ArgumentParser(description="Train PPO on the circle shooter")
    parser.add_argument(
        "--timesteps",
        type=int,
        default=None,
        help=f"Total timesteps (default: {TRAINING_CONFIG['total_timesteps']:,})",
    )
    parser.add_argument(
        "--n-envs",
        type=int,
        default=4,
        help="Number of parallel environments (default: 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed (default: 0)",
    )
    parser.add_argument(
        "--tensorboard",
        action="store_true",
        help="Write TensorBoard logs",
    )
    args = parser.parse_args()

    train_ppo(
        total_timesteps=args.timesteps,
        save_dir=os.path.join(TRAINING_CONFIG["model_dir"], "ppo"),
        log_dir=os.path.join(TRAINING_CONFIG["log_dir"], "ppo"),
        tensorboard_log=TRAINING_CONFIG["tensorboard_log"] if args.tensorboard else None,
        n_envs=args.n_envs,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
