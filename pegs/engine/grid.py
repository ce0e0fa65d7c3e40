"""Mutable grid representation used while a board is being generated."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..core.constants import Bounds, CellState, MIN_BOARD_SIZE
from ..core.models import Board, GenerationMove


class PegGrid:
    """Rectangular array of tri-state cells with bounds-checked access."""

    def __init__(self, width: int, height: int, fill: CellState = CellState.BLOCKED) -> None:
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ValueError("Width and height must both be greater than three")
        self.bounds = Bounds(width=width, height=height)
        self.cells: List[List[CellState]] = [
            [fill for _ in range(width)] for _ in range(height)
        ]

    @classmethod
    def seeded(cls, width: int, height: int) -> "PegGrid":
        """An all-blocked grid holding a single peg at the centre."""
        grid = cls(width, height)
        grid.set(width // 2, height // 2, CellState.PEG)
        return grid

    @classmethod
    def from_board(cls, board: Board) -> "PegGrid":
        grid = cls(board.width, board.height)
        for y, row in enumerate(board.rows()):
            grid.cells[y] = list(row)
        return grid

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def contains(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def get(self, x: int, y: int) -> CellState:
        if not self.bounds.contains(x, y):
            raise IndexError(f"Cell outside grid: {(x, y)}")
        return self.cells[y][x]

    def set(self, x: int, y: int, state: CellState) -> None:
        if not self.bounds.contains(x, y):
            raise IndexError(f"Cell outside grid: {(x, y)}")
        self.cells[y][x] = state

    def iter_cells(self) -> Iterator[Tuple[int, int, CellState]]:
        for y, row in enumerate(self.cells):
            for x, state in enumerate(row):
                yield x, y, state

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def apply(self, move: GenerationMove) -> List[Tuple[int, int]]:
        """Play a generation move and return the three cells it wrote."""

        anchor, middle, far = move.cells
        self.set(*anchor, CellState.EMPTY)
        self.set(*middle, CellState.PEG)
        self.set(*far, CellState.PEG)
        return [anchor, middle, far]

    # ------------------------------------------------------------------
    # Hand-off
    # ------------------------------------------------------------------
    def freeze(self) -> Board:
        return Board(
            width=self.width,
            height=self.height,
            cells=tuple(state for row in self.cells for state in row),
        )
