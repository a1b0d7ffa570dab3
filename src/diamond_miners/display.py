"""
Display sink for Diamond Miners.

The engine only ever calls render(x, y, code); DisplayBuffer is the
in-memory implementation used by the environment, the CLI and tests.
"""
from typing import Dict, Protocol

import numpy as np

from .square import DisplayCode


SYMBOLS: Dict[DisplayCode, str] = {
    DisplayCode.EMPTY: " ",
    DisplayCode.PLAYER: "@",
    DisplayCode.FACING: "o",
    DisplayCode.BREAKABLE_WALL: "+",
    DisplayCode.UNBREAKABLE_WALL: "#",
    DisplayCode.DIAMOND: "*",
    DisplayCode.UNDISCOVERED: ".",
}


class Renderer(Protocol):
    """Anything that can show a display code at a grid position."""

    def render(self, x: int, y: int, code: DisplayCode) -> None: ...


class DisplayBuffer:
    """
    Records the last display code drawn on every square.

    Starts blank (undiscovered) and counts render calls so callers can
    check which squares an operation touched.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.codes = np.full(
            (height, width), int(DisplayCode.UNDISCOVERED), dtype=np.int8
        )
        self.calls = 0

    def render(self, x: int, y: int, code: DisplayCode) -> None:
        self.calls += 1
        # Squares off the grid (e.g. a facing target past the edge) are ignored
        if 0 <= x < self.width and 0 <= y < self.height:
            self.codes[y, x] = int(code)

    def code_at(self, x: int, y: int) -> DisplayCode:
        return DisplayCode(int(self.codes[y, x]))

    def to_ansi(self) -> str:
        """Render buffer as ASCII string, top visual row first."""
        lines = []
        for y in reversed(range(self.height)):
            lines.append(" ".join(
                SYMBOLS[DisplayCode(int(self.codes[y, x]))]
                for x in range(self.width)
            ))
        return "\n".join(lines)
