"""
Explorer agent for Diamond Miners.

Walks to the nearest breakable wall and breaks it, so each break opens
up more of the playing field to the visibility search.
"""
from collections import deque
from typing import Dict, List, Optional, Tuple

import numpy as np

from diamond_miners.environment import BREAK_ACTION, NUM_MOVE_ACTIONS
from diamond_miners.grid import DIRECTIONS
from diamond_miners.square import DisplayCode

from .base_agent import BaseAgent


WALKABLE = (int(DisplayCode.EMPTY), int(DisplayCode.DIAMOND), int(DisplayCode.PLAYER))


# ============================================================================
# Explorer Agent
# ============================================================================

class ExplorerAgent(BaseAgent):
    """
    Greedy exploring agent.

    Strategy:
        1. If a breakable wall is next to the player, turn to it and
           break it.
        2. Otherwise move one step along the shortest discovered path
           towards a square next to a breakable wall.
        3. If no breakable wall is known, pick the first valid action.
    """

    def __init__(self, grid_height: int = 8, grid_width: int = 16) -> None:
        super().__init__(grid_height, grid_width)
        self._pending_break = False

    def reset(self) -> None:
        """Forget any half-finished turn-then-break."""
        self._pending_break = False

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Select the next action towards the nearest breakable wall."""
        if valid_actions is not None and valid_actions[BREAK_ACTION]:
            self._pending_break = False
            return BREAK_ACTION
        if self._pending_break:
            self._pending_break = False
            return BREAK_ACTION

        player = self.find_player(observation)
        if player is None:
            return self._fallback(valid_actions)

        adjacent = self._adjacent_breakable(observation, player)
        if adjacent is not None:
            self._pending_break = True
            return NUM_MOVE_ACTIONS + adjacent

        step = self._first_step_to_wall(observation, player)
        if step is not None:
            return step
        return self._fallback(valid_actions)

    # ========================================================================
    # Search Helpers
    # ========================================================================

    def _code(self, observation: np.ndarray, x: int, y: int) -> Optional[int]:
        if 0 <= x < self.grid_width and 0 <= y < self.grid_height:
            return int(observation[y, x])
        return None

    def _adjacent_breakable(
        self, observation: np.ndarray, pos: Tuple[int, int]
    ) -> Optional[int]:
        """Index of a direction from pos holding a breakable wall."""
        x, y = pos
        for i, (dx, dy) in enumerate(DIRECTIONS):
            if self._code(observation, x + dx, y + dy) == int(DisplayCode.BREAKABLE_WALL):
                return i
        return None

    def _first_step_to_wall(
        self, observation: np.ndarray, start: Tuple[int, int]
    ) -> Optional[int]:
        """
        Breadth-first search over walkable squares.

        Returns:
            Move action for the first step towards the closest square
            next to a breakable wall, or None if there is none.
        """
        first_step: Dict[Tuple[int, int], int] = {start: -1}
        queue = deque([start])
        while queue:
            pos = queue.popleft()
            if pos != start and self._adjacent_breakable(observation, pos) is not None:
                return first_step[pos]
            for i, (dx, dy) in enumerate(DIRECTIONS):
                nxt = (pos[0] + dx, pos[1] + dy)
                if nxt in first_step:
                    continue
                if self._code(observation, *nxt) not in WALKABLE:
                    continue
                first_step[nxt] = i if pos == start else first_step[pos]
                queue.append(nxt)
        return None

    def _fallback(self, valid_actions: Optional[np.ndarray]) -> int:
        if valid_actions is None:
            return 0
        choices: List[int] = list(np.where(valid_actions)[0])
        return int(choices[0]) if choices else 0
