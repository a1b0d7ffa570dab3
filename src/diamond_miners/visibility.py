"""
Visibility search for Diamond Miners.

Discovers every square reachable from a seed through open squares,
rendering each one as it is found. Walls are discovered but stop the
search.
"""
import logging
from typing import List, Tuple

from .display import Renderer
from .grid import Grid
from .square import DisplayCode

logger = logging.getLogger(__name__)


def reveal(grid: Grid, x: int, y: int, renderer: Renderer, *, force: bool = False) -> int:
    """
    Depth-first search making squares reachable from (x, y) discovered.

    Uses an explicit stack rather than recursion; the discovered flags
    ensure each square is rendered at most once, so the search stops
    after at most width * height visits.

    Args:
        grid: Playing field to search. Only discovery flags are written.
        x: Seed column.
        y: Seed row.
        renderer: Receives one render call per discovered square.
        force: Process the seed even if it is already discovered. Used
            after a wall is broken so the opened square is redrawn and
            the search continues through it.

    Returns:
        Number of squares rendered.
    """
    if not grid.in_bounds(x, y):
        return 0
    if grid.is_discovered(x, y) and not force:
        return 0

    rendered = 0
    stack: List[Tuple[int, int]] = [(x, y)]
    seed_pending = force
    while stack:
        cx, cy = stack.pop()
        newly = grid.discover(cx, cy)
        if not newly and not seed_pending:
            # pushed twice before being reached
            continue
        seed_pending = False

        terrain = grid.terrain_at(cx, cy)
        renderer.render(cx, cy, DisplayCode.for_terrain(terrain))
        rendered += 1

        if terrain.is_open:
            for nx, ny in grid.neighbors(cx, cy):
                if not grid.is_discovered(nx, ny):
                    stack.append((nx, ny))

    logger.debug("Reveal from (%d,%d) rendered %d squares", x, y, rendered)
    return rendered
