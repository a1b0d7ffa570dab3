"""
Unit tests for Square, Terrain and DisplayCode.

Tests discovery, wall breaking and observation conversion.
"""
import pytest
from diamond_miners import DisplayCode, Square, Terrain


# ============================================================================
# Terrain Tests
# ============================================================================

class TestTerrain:
    """Test terrain classification."""

    @pytest.mark.parametrize("terrain", [Terrain.EMPTY, Terrain.DIAMOND])
    def test_open_terrain(self, terrain: Terrain) -> None:
        """Empty squares and diamonds continue the search."""
        assert terrain.is_open is True
        assert terrain.is_wall is False

    @pytest.mark.parametrize(
        "terrain", [Terrain.BREAKABLE_WALL, Terrain.UNBREAKABLE_WALL]
    )
    def test_wall_terrain(self, terrain: Terrain) -> None:
        """Both wall kinds stop the search."""
        assert terrain.is_open is False
        assert terrain.is_wall is True

    def test_terrain_codes_match_display(self) -> None:
        """Each terrain shows as the display code with the same value."""
        for terrain in Terrain:
            assert int(DisplayCode.for_terrain(terrain)) == int(terrain)


# ============================================================================
# Square Tests
# ============================================================================

class TestSquare:
    """Test square state changes."""

    def test_default_square_is_undiscovered_empty(self) -> None:
        """New square should be empty and undiscovered."""
        square = Square()
        assert square.terrain == Terrain.EMPTY
        assert square.discovered is False

    def test_discover_returns_true_once(self) -> None:
        """Discovering twice only reports the first time."""
        square = Square()
        assert square.discover() is True
        assert square.discover() is False
        assert square.discovered is True

    def test_break_breakable_wall(self) -> None:
        """A breakable wall becomes empty."""
        square = Square(Terrain.BREAKABLE_WALL)
        assert square.break_wall() is True
        assert square.terrain == Terrain.EMPTY

    @pytest.mark.parametrize(
        "terrain", [Terrain.EMPTY, Terrain.DIAMOND, Terrain.UNBREAKABLE_WALL]
    )
    def test_break_other_terrain_fails(self, terrain: Terrain) -> None:
        """Only breakable walls can be broken."""
        square = Square(terrain)
        assert square.break_wall() is False
        assert square.terrain == terrain

    def test_undiscovered_observation(self) -> None:
        """Undiscovered squares hide their terrain."""
        assert Square(Terrain.DIAMOND).to_observation() == 6

    def test_discovered_observation_shows_terrain(self) -> None:
        """Discovered squares show their terrain code."""
        square = Square(Terrain.DIAMOND, discovered=True)
        assert square.to_observation() == int(DisplayCode.DIAMOND)
