"""Shared constants and enumerations for the peg solitaire generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CellState(str, Enum):
    """All supported cell states in the grid."""

    PEG = "PEG"
    EMPTY = "EMPTY"
    BLOCKED = "BLOCKED"


class BoardType(str, Enum):
    """Board shapes a game can be started with."""

    CROSS = "cross"
    OCTAGON = "octagon"
    RANDOM = "random"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# Unit steps along the four axes, (dx, dy).
AXIS_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))

# A jump touches its anchor and the two cells beyond it.
MOVE_SPAN = 3

MAX_MOVE_COST = 2
MIN_BOARD_SIZE = 4
PRESET_SIZE = 7


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
