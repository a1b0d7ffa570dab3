"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from diamond_miners import DisplayBuffer, DisplayCode, GameState, Grid, GridConfig


# ============================================================================
# Renderer Fixtures
# ============================================================================

class RecordingRenderer:
    """Renderer that remembers every call in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, int, DisplayCode]] = []

    def render(self, x: int, y: int, code: DisplayCode) -> None:
        self.calls.append((x, y, code))

    def clear(self) -> None:
        self.calls = []


@pytest.fixture
def recorder() -> RecordingRenderer:
    """Create an empty recording renderer."""
    return RecordingRenderer()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config() -> GridConfig:
    """The 16x8 starting layout."""
    return GridConfig()


@pytest.fixture
def pocket_config() -> GridConfig:
    """
    Small 4x4 layout with a walled pocket around the start.

    Top visual row first, so (0, 0) is the bottom-left '.'.
    """
    return GridConfig.from_rows([
        "#.#.",
        "..+.",
        ".##.",
        "..#*",
    ])


@pytest.fixture
def open_config() -> GridConfig:
    """A large grid with no walls at all."""
    return GridConfig.from_rows(["." * 40] * 30)


@pytest.fixture
def diamond_config() -> GridConfig:
    """A single corridor with a diamond at the far end."""
    return GridConfig.from_rows([".." + "*"])


# ============================================================================
# Grid and Game Fixtures
# ============================================================================

@pytest.fixture
def default_grid(default_config: GridConfig) -> Grid:
    """Create a grid from the default layout."""
    return Grid(default_config)


@pytest.fixture
def game(default_config: GridConfig) -> GameState:
    """Create an initialized game drawing into a DisplayBuffer."""
    state = GameState(
        default_config,
        DisplayBuffer(default_config.width, default_config.height),
    )
    state.initialize()
    return state


@pytest.fixture
def recorded_game(
    default_config: GridConfig, recorder: RecordingRenderer
) -> GameState:
    """Create an initialized game whose render log starts empty."""
    state = GameState(default_config, recorder)
    state.initialize()
    recorder.clear()
    return state
