"""
Grid module for Diamond Miners.

Implements the playing field: layout loading, bounds-safe terrain
queries, wall breaking and per-square discovery flags.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from .square import DisplayCode, Square, Terrain


# ============================================================================
# Constants
# ============================================================================

WIDTH = 16
HEIGHT = 8

DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))

# Laid out the way it looks on screen: the first row is the top visual row,
# so layout[HEIGHT - 1 - y][x] is the terrain at game coordinate (x, y).
STARTING_LAYOUT: Tuple[Tuple[int, ...], ...] = (
    (0, 3, 0, 3, 0, 0, 0, 4, 4, 0, 0, 4, 0, 4, 0, 4),
    (0, 4, 0, 4, 0, 0, 0, 3, 4, 4, 3, 4, 0, 3, 0, 4),
    (0, 4, 0, 4, 4, 4, 4, 0, 3, 0, 0, 0, 0, 4, 0, 4),
    (5, 4, 0, 4, 0, 0, 3, 0, 0, 4, 0, 0, 0, 4, 0, 0),
    (4, 4, 3, 4, 5, 0, 4, 0, 0, 4, 3, 4, 0, 0, 4, 4),
    (0, 0, 0, 4, 4, 4, 4, 0, 4, 0, 0, 0, 4, 3, 0, 4),
    (0, 0, 0, 3, 0, 0, 3, 0, 3, 0, 3, 0, 3, 0, 0, 4),
    (0, 0, 0, 4, 0, 0, 3, 0, 4, 0, 0, 3, 3, 0, 5, 4),
)


@dataclass
class GridConfig:
    """
    Configuration for a playing field.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        layout: Terrain codes, top visual row first.
        start: Player starting coordinate (x, y).
        start_facing: Initial facing direction (dx, dy).
    """

    width: int = WIDTH
    height: int = HEIGHT
    layout: Sequence[Sequence[int]] = STARTING_LAYOUT
    start: Tuple[int, int] = (0, 0)
    start_facing: Tuple[int, int] = (1, 0)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Grid dimensions must be positive")
        if len(self.layout) != self.height or any(
            len(row) != self.width for row in self.layout
        ):
            raise ValueError(
                f"Layout must have {self.height} rows of {self.width} squares"
            )
        valid_codes = {int(t) for t in Terrain}
        for row in self.layout:
            for code in row:
                if code not in valid_codes:
                    raise ValueError(f"Unknown terrain code {code}")
        x, y = self.start
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError("Start position is out of bounds")
        if self.terrain_at_start().is_wall:
            raise ValueError("Start position cannot be a wall")
        if tuple(self.start_facing) not in DIRECTIONS:
            raise ValueError("Start facing must be an orthogonal unit vector")

    def terrain_at_start(self) -> Terrain:
        """Terrain under the starting position."""
        x, y = self.start
        return Terrain(self.layout[self.height - 1 - y][x])

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        start: Tuple[int, int] = (0, 0),
        start_facing: Tuple[int, int] = (1, 0),
    ) -> "GridConfig":
        """
        Build a configuration from text rows, top visual row first.

        Characters: '.' empty, '*' diamond, '+' breakable wall,
        '#' unbreakable wall.
        """
        symbols = {
            ".": Terrain.EMPTY,
            "*": Terrain.DIAMOND,
            "+": Terrain.BREAKABLE_WALL,
            "#": Terrain.UNBREAKABLE_WALL,
        }
        try:
            layout = tuple(
                tuple(int(symbols[ch]) for ch in row) for row in rows
            )
        except KeyError as exc:
            raise ValueError(f"Unknown layout symbol {exc.args[0]!r}") from exc
        width = len(layout[0]) if layout else 0
        return cls(
            width=width,
            height=len(layout),
            layout=layout,
            start=start,
            start_facing=start_facing,
        )


DEFAULT_CONFIG = GridConfig()


# ============================================================================
# Grid Class
# ============================================================================

@dataclass
class Grid:
    """
    Diamond Miners playing field.

    Owns the terrain of every square and whether it has been
    discovered. Never renders anything itself.
    """

    config: GridConfig = field(default_factory=GridConfig)
    _squares: List[List[Square]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the squares after dataclass creation."""
        self._init_squares()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_squares(self) -> None:
        """Create undiscovered squares from the starting layout."""
        height = self.config.height
        self._squares = [
            [
                Square(Terrain(self.config.layout[height - 1 - y][x]))
                for x in range(self.config.width)
            ]
            for y in range(height)
        ]

    # ========================================================================
    # Bounds and Neighbors (Low-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within the playing field."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds orthogonal neighbors of a square.

        Args:
            x: Column of center square.
            y: Row of center square (0 is the bottom row).

        Returns:
            List of (x, y) tuples.
        """
        result = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def get_square(self, x: int, y: int) -> Optional[Square]:
        """Get square at position, or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._squares[y][x]

    # ========================================================================
    # Terrain (Mid-level)
    # ========================================================================

    def terrain_at(self, x: int, y: int) -> Terrain:
        """
        Get terrain at a position.

        Anything outside the grid is considered an unbreakable wall.
        """
        if not self.in_bounds(x, y):
            return Terrain.UNBREAKABLE_WALL
        return self._squares[y][x].terrain

    def break_wall(self, x: int, y: int) -> bool:
        """
        Replace a breakable wall with an empty square.

        Returns:
            True if a wall was broken, False if the square is out of
            bounds or not a breakable wall.
        """
        if not self.in_bounds(x, y):
            return False
        return self._squares[y][x].break_wall()

    # ========================================================================
    # Discovery (Mid-level)
    # ========================================================================

    def is_discovered(self, x: int, y: int) -> bool:
        """Check if a square has been discovered; False outside the grid."""
        if not self.in_bounds(x, y):
            return False
        return self._squares[y][x].discovered

    def discover(self, x: int, y: int) -> bool:
        """Mark a square discovered, returning True if it was new."""
        if not self.in_bounds(x, y):
            return False
        return self._squares[y][x].discover()

    def discovered_cells(self) -> Set[Tuple[int, int]]:
        """Get the set of discovered (x, y) positions."""
        return {
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._squares[y][x].discovered
        }

    def count_discovered(self) -> int:
        return sum(
            1 for row in self._squares for square in row if square.discovered
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def total_cells(self) -> int:
        return self.config.width * self.config.height

    def count_terrain(self, terrain: Terrain) -> int:
        """Count squares currently holding a terrain kind."""
        return sum(
            1 for row in self._squares for square in row
            if square.terrain == terrain
        )

    def get_observation(self) -> np.ndarray:
        """
        Get the known playing field as a numpy array.

        Returns:
            2D int8 array indexed [y, x] where undiscovered squares are
            6 and discovered squares hold their terrain's display code.
        """
        obs = np.full(
            (self.config.height, self.config.width),
            int(DisplayCode.UNDISCOVERED),
            dtype=np.int8,
        )
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._squares[y][x].to_observation()
        return obs
