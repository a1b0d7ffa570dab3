"""
Random agent for Diamond Miners.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects actions uniformly at random.

    This provides a baseline for comparing the explorer agent.
    """

    def __init__(
        self,
        grid_height: int = 8,
        grid_width: int = 16,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            grid_height: Number of rows in the playing field.
            grid_width: Number of columns in the playing field.
            seed: Random seed for reproducibility.
        """
        super().__init__(grid_height, grid_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Without a mask every action is considered valid.
        """
        if valid_actions is None:
            valid_actions = np.ones(self.num_actions, dtype=bool)

        valid_indices = np.where(valid_actions)[0]

        if len(valid_indices) == 0:
            # Nothing changes the game, return any action (will be invalid)
            return 0

        return int(self.rng.choice(valid_indices))
