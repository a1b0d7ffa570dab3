"""
Square module for Diamond Miners.

Represents individual squares of the playing field with their terrain
and discovery state, plus the display codes sent to the renderer.
"""
from dataclasses import dataclass
from enum import IntEnum


# ============================================================================
# Constants
# ============================================================================

class Terrain(IntEnum):
    """Terrain kinds a square can hold (values match the display codes)."""

    EMPTY = 0
    BREAKABLE_WALL = 3
    UNBREAKABLE_WALL = 4
    DIAMOND = 5

    @property
    def is_open(self) -> bool:
        """Open terrain continues the visibility search and can be walked on."""
        return self in (Terrain.EMPTY, Terrain.DIAMOND)

    @property
    def is_wall(self) -> bool:
        """Check if terrain is either kind of wall."""
        return not self.is_open


class DisplayCode(IntEnum):
    """Codes passed to the renderer for each square."""

    EMPTY = 0
    PLAYER = 1
    FACING = 2
    BREAKABLE_WALL = 3
    UNBREAKABLE_WALL = 4
    DIAMOND = 5
    UNDISCOVERED = 6

    @classmethod
    def for_terrain(cls, terrain: Terrain) -> "DisplayCode":
        """Get the display code showing a terrain kind."""
        return cls(int(terrain))


# ============================================================================
# Square Data Class
# ============================================================================

@dataclass
class Square:
    """
    Represents a single square of the playing field.

    Attributes:
        terrain: What is currently located at this square.
        discovered: Whether the visibility search has reached this square.
    """

    terrain: Terrain = Terrain.EMPTY
    discovered: bool = False

    def discover(self) -> bool:
        """
        Mark this square as discovered.

        Returns:
            True if the square was newly discovered, False if it
            already was.
        """
        if self.discovered:
            return False
        self.discovered = True
        return True

    def break_wall(self) -> bool:
        """
        Break a breakable wall, leaving an empty square.

        Returns:
            True if the wall was broken, False for any other terrain.
        """
        if self.terrain != Terrain.BREAKABLE_WALL:
            return False
        self.terrain = Terrain.EMPTY
        return True

    @property
    def is_open(self) -> bool:
        """Check if square can be walked on."""
        return self.terrain.is_open

    @property
    def display_code(self) -> DisplayCode:
        """Display code of the underlying terrain."""
        return DisplayCode.for_terrain(self.terrain)

    def to_observation(self) -> int:
        """
        Convert square to observation value for agents.

        Returns:
            6: Undiscovered square
            0, 3, 4, 5: Discovered square showing its terrain
        """
        if not self.discovered:
            return int(DisplayCode.UNDISCOVERED)
        return int(self.display_code)
