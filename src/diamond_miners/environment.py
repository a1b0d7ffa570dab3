"""
Gymnasium environment wrapper for Diamond Miners.

Provides a standard RL interface for exploring agents.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .display import DisplayBuffer
from .game import GameState
from .grid import DIRECTIONS, GridConfig
from .square import DisplayCode


NUM_MOVE_ACTIONS = len(DIRECTIONS)
BREAK_ACTION = 2 * NUM_MOVE_ACTIONS
NUM_ACTIONS = BREAK_ACTION + 1

INVALID_ACTION_PENALTY = -0.1


# ============================================================================
# Diamond Miners Environment
# ============================================================================

class DiamondMinersEnv(gym.Env):
    """
    Gymnasium environment for Diamond Miners.

    Observation:
        2D int8 array indexed [y, x] where:
        - 6 = undiscovered square
        - 0, 3, 4, 5 = discovered terrain
        - 1 = the player

    Actions:
        - 0-3: move up, down, right, left
        - 4-7: turn up, down, right, left
        - 8: break the wall being faced

    Rewards:
        - +1 per newly discovered square
        - -0.1 for an action that changed nothing

    The game never ends on its own, so episodes only finish by
    truncation after max_steps.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        render_mode: Optional[str] = None,
        max_steps: int = 200,
    ) -> None:
        """
        Initialize the Diamond Miners environment.

        Args:
            config: Grid configuration (default: the starting layout).
            render_mode: How to render the environment.
            max_steps: Steps before an episode is truncated.
        """
        super().__init__()

        self.config = config or GridConfig()
        self.render_mode = render_mode
        self.max_steps = max_steps

        self.observation_space = spaces.Box(
            low=0,
            high=int(DisplayCode.UNDISCOVERED),
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(NUM_ACTIONS)

        self._steps = 0
        self.game = self._new_game()

    def _new_game(self) -> GameState:
        self.display = DisplayBuffer(self.config.width, self.config.height)
        game = GameState(self.config, self.display)
        game.initialize()
        return game

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed (the layout itself is fixed).
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game = self._new_game()
        self._steps = 0
        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")
        self._steps += 1

        reward = self._apply_action(int(action))

        terminated = self.game.is_game_over()
        truncated = self._steps >= self.max_steps

        return (
            self.game.get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def _apply_action(self, action: int) -> float:
        """Perform an action and calculate its reward."""
        before = self.game.grid.count_discovered()

        if action < NUM_MOVE_ACTIONS:
            changed = self.game.move(*DIRECTIONS[action])
        elif action < BREAK_ACTION:
            direction = DIRECTIONS[action - NUM_MOVE_ACTIONS]
            changed = direction != self.game.facing
            self.game.turn(*direction)
        else:
            changed = self.game.break_facing()

        if not changed:
            return INVALID_ACTION_PENALTY
        return float(self.game.grid.count_discovered() - before)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "discovered": self.game.grid.count_discovered(),
            "total_cells": self.game.grid.total_cells,
            "walls_broken": self.game.walls_broken,
            "position": self.game.player,
            "facing": self.game.facing,
        }

    def render(self) -> Optional[str]:
        """Render the current display buffer."""
        if self.render_mode == "ansi":
            return self.display.to_ansi()
        if self.render_mode == "human":
            print(self.display.to_ansi())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for i, (dx, dy) in enumerate(DIRECTIONS):
            mask[i] = self.game.can_move(dx, dy)
            mask[NUM_MOVE_ACTIONS + i] = (dx, dy) != self.game.facing
        mask[BREAK_ACTION] = self.game.can_break()
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[GridConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Grid configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> DiamondMinersEnv:
        return DiamondMinersEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
