"""
Base agent interface for Diamond Miners.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from diamond_miners.environment import NUM_ACTIONS


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Diamond Miners agents.

    All agents must implement the select_action method to choose
    the next move, turn or break based on the current observation.
    """

    def __init__(self, grid_height: int, grid_width: int) -> None:
        """
        Initialize the agent.

        Args:
            grid_height: Number of rows in the playing field.
            grid_width: Number of columns in the playing field.
        """
        self.grid_height = grid_height
        self.grid_width = grid_width
        self.num_actions = NUM_ACTIONS

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of display codes indexed [y, x].
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """
        pass

    def find_player(self, observation: np.ndarray) -> Optional[Tuple[int, int]]:
        """Locate the player marker, returning (x, y) or None."""
        ys, xs = np.nonzero(observation == 1)
        if len(xs) == 0:
            return None
        return int(xs[0]), int(ys[0])

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
