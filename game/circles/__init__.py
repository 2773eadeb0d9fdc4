"""Circle shooter - stationary player, drifting enemies, click-to-shoot"""

from .simulation import Simulation, SimulationState, TickReport
from .shooter_env import ShooterEnv, run_random_episode

__all__ = ['Simulation', 'SimulationState', 'TickReport', 'ShooterEnv', 'run_random_episode']
