"""
Configuration for the circle shooter game and its training runs
"""

# Game parameters (shared by the arcade window and the environment)
GAME_CONFIG = {
    "width": 800,
    "height": 600,
    "frame_rate": 60,
    "spawn_interval": 2.0,   # seconds between enemy spawns
    "bullet_speed": 7.0,     # px per tick
    "bullet_radius": 5.0,
    "player_radius": 30.0,
    "enemy_radius": 15.0,
    "enemy_speed": 1.0,      # px per tick
}

# Environment parameters
ENV_CONFIG = {
    **GAME_CONFIG,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "max_projectiles": 20,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "name": "baseline",
    "description": "Reward kills, small cost per shot, large penalty for losing",
    "R_KILL": 1.0,       # Reward for destroying an enemy
    "R_SHOT": 0.01,      # Penalty for shooting (encourage aiming)
    "R_TIME": 0.0,       # No time penalty, surviving is the point
    "R_DEATH": 5.0,      # Enemy reached the player
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
