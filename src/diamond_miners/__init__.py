"""
Diamond Miners game module.

Provides the core game logic: the playing field, the visibility search
and player movement.
"""
from .square import Square, Terrain, DisplayCode
from .grid import Grid, GridConfig, DEFAULT_CONFIG, DIRECTIONS, STARTING_LAYOUT
from .display import DisplayBuffer, Renderer
from .visibility import reveal
from .game import GameState, UP, DOWN, LEFT, RIGHT
from .environment import DiamondMinersEnv, make_vec_env

__all__ = [
    "Square",
    "Terrain",
    "DisplayCode",
    "Grid",
    "GridConfig",
    "DEFAULT_CONFIG",
    "DIRECTIONS",
    "STARTING_LAYOUT",
    "DisplayBuffer",
    "Renderer",
    "reveal",
    "GameState",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "DiamondMinersEnv",
    "make_vec_env",
]
