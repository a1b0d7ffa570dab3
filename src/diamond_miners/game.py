"""
Game state for Diamond Miners.

Owns the playing field, the player position and facing indicator, and
implements movement, turning, wall breaking and the facing blink.
"""
import logging
from typing import Optional, Tuple

import numpy as np

from .display import DisplayBuffer, Renderer
from .grid import DIRECTIONS, Grid, GridConfig
from .square import DisplayCode, Terrain
from .visibility import reveal

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

UP: XY = (0, 1)
DOWN: XY = (0, -1)
RIGHT: XY = (1, 0)
LEFT: XY = (-1, 0)


# ============================================================================
# Game State
# ============================================================================

class GameState:
    """
    A single game of Diamond Miners.

    All rendering goes through the renderer given at construction; the
    state never touches a display directly. Breaking walls is an
    explicit action: the player turns to face a breakable wall and calls
    break_facing(). Walking into any wall is rejected.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        """
        Initialize the game state.

        Args:
            config: Grid configuration (default: the 16x8 starting layout).
            renderer: Display sink (default: a new DisplayBuffer).
        """
        self.config = config or GridConfig()
        self.grid = Grid(self.config)
        self.renderer = renderer or DisplayBuffer(
            self.config.width, self.config.height
        )

        self.player_x, self.player_y = self.config.start
        self.facing_dx, self.facing_dy = self.config.start_facing
        self.facing_visible = False
        self.walls_broken = 0
        self._stale_facing: Optional[XY] = None
        self._initialized = False

    # ========================================================================
    # Startup
    # ========================================================================

    def initialize(self) -> None:
        """
        Draw the starting display.

        Every square starts undiscovered, then visibility is explored from
        the player's starting location and the player and facing markers
        are drawn on top.
        """
        if self._initialized:
            return
        self._initialized = True

        for x in range(self.grid.width):
            for y in range(self.grid.height):
                self.renderer.render(x, y, DisplayCode.UNDISCOVERED)

        reveal(self.grid, self.player_x, self.player_y, self.renderer)
        self.renderer.render(self.player_x, self.player_y, DisplayCode.PLAYER)
        self._show_facing()

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def player(self) -> XY:
        return (self.player_x, self.player_y)

    @property
    def facing(self) -> XY:
        return (self.facing_dx, self.facing_dy)

    @property
    def facing_target(self) -> XY:
        """Square adjacent to the player in the facing direction."""
        return (self.player_x + self.facing_dx, self.player_y + self.facing_dy)

    def can_move(self, dx: int, dy: int) -> bool:
        """Check if a move in direction (dx, dy) would be accepted."""
        if (dx, dy) not in DIRECTIONS:
            return False
        nx, ny = self.player_x + dx, self.player_y + dy
        if not self.grid.is_discovered(nx, ny):
            return False
        return self.grid.terrain_at(nx, ny).is_open

    def can_break(self) -> bool:
        """Check if the facing square is a breakable wall."""
        fx, fy = self.facing_target
        return self.grid.terrain_at(fx, fy) == Terrain.BREAKABLE_WALL

    def is_game_over(self) -> bool:
        # the game never ends
        return False

    def get_observation(self) -> np.ndarray:
        """
        Get the known playing field with the player drawn on it.

        Returns:
            2D int8 array indexed [y, x]; see Grid.get_observation.
        """
        obs = self.grid.get_observation()
        obs[self.player_y, self.player_x] = int(DisplayCode.PLAYER)
        return obs

    # ========================================================================
    # Player Actions
    # ========================================================================

    def move(self, dx: int, dy: int) -> bool:
        """
        Move the player one square in direction (dx, dy).

        The move is rejected if the direction is not one of the four
        orthogonal unit vectors, or the target is off the grid or a wall.
        A rejected move changes nothing and renders nothing.
        An accepted move renders only the old and new player squares; if
        the direction changed, a facing marker left on the old target is
        cleared by the next toggle_facing_blink().

        Returns:
            True if the player moved.
        """
        if (dx, dy) not in DIRECTIONS:
            logger.debug("Rejected move with invalid direction (%r,%r)", dx, dy)
            return False
        if not self.can_move(dx, dy):
            logger.debug(
                "Blocked move from (%d,%d) towards (%d,%d)",
                self.player_x, self.player_y, dx, dy,
            )
            return False

        old_target = self.facing_target
        if self.facing_visible and old_target != (self.player_x + dx, self.player_y + dy):
            self._stale_facing = old_target

        # replace the player with whatever is underneath
        self._render_terrain(self.player_x, self.player_y)

        self.player_x += dx
        self.player_y += dy
        self.facing_dx, self.facing_dy = dx, dy
        # the new facing square shows its terrain until the next blink
        self.facing_visible = False

        self.renderer.render(self.player_x, self.player_y, DisplayCode.PLAYER)
        logger.debug("Player moved to (%d,%d)", self.player_x, self.player_y)
        return True

    def turn(self, dx: int, dy: int) -> bool:
        """
        Face direction (dx, dy) without moving.

        Returns:
            True if the direction was valid.
        """
        if (dx, dy) not in DIRECTIONS:
            logger.debug("Rejected turn with invalid direction (%r,%r)", dx, dy)
            return False
        if (dx, dy) == self.facing:
            return True

        self._hide_facing()
        self.facing_dx, self.facing_dy = dx, dy
        self._show_facing()
        return True

    def break_facing(self) -> bool:
        """
        Break the wall the player is facing.

        Only breakable walls can be broken. The opened square is
        revealed again so anything behind it becomes discovered.

        Returns:
            True if a wall was broken.
        """
        fx, fy = self.facing_target
        if not self.grid.break_wall(fx, fy):
            return False

        self.walls_broken += 1
        logger.debug("Broke wall at (%d,%d)", fx, fy)
        reveal(self.grid, fx, fy, self.renderer, force=True)
        self.facing_visible = False
        return True

    def toggle_facing_blink(self) -> None:
        """
        Alternate the facing square between the facing marker and its
        terrain. Does nothing if the square is off the grid or has not
        been discovered.
        """
        self._clear_stale_facing()
        fx, fy = self.facing_target
        if not self.grid.is_discovered(fx, fy):
            return
        if self.facing_visible:
            self._render_terrain(fx, fy)
        else:
            self.renderer.render(fx, fy, DisplayCode.FACING)
        self.facing_visible = not self.facing_visible

    # ========================================================================
    # Rendering Helpers
    # ========================================================================

    def _render_terrain(self, x: int, y: int) -> None:
        terrain = self.grid.terrain_at(x, y)
        self.renderer.render(x, y, DisplayCode.for_terrain(terrain))

    def _show_facing(self) -> None:
        fx, fy = self.facing_target
        if self.grid.is_discovered(fx, fy):
            self.renderer.render(fx, fy, DisplayCode.FACING)
            self.facing_visible = True
        else:
            self.facing_visible = False

    def _clear_stale_facing(self) -> None:
        if self._stale_facing is None:
            return
        sx, sy = self._stale_facing
        self._stale_facing = None
        if (sx, sy) == self.player or (sx, sy) == self.facing_target:
            return
        if self.grid.is_discovered(sx, sy):
            self._render_terrain(sx, sy)

    def _hide_facing(self) -> None:
        if not self.facing_visible:
            return
        fx, fy = self.facing_target
        self._render_terrain(fx, fy)
        self.facing_visible = False
