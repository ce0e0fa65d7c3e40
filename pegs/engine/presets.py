"""Fixed board shapes computed from closed-form coordinate predicates."""

from __future__ import annotations

from typing import Callable, Dict

from ..core.constants import BoardType, CellState
from ..core.models import Board


def _cross_cell(x: int, y: int, width: int, height: int) -> CellState:
    cx = abs(x - width // 2)
    cy = abs(y - height // 2)
    if cx == 0 and cy == 0:
        return CellState.EMPTY
    if cx > 1 and cy > 1:
        return CellState.BLOCKED
    return CellState.PEG


def _octagon_cell(x: int, y: int, width: int, height: int) -> CellState:
    cx = abs(x - width // 2)
    cy = abs(y - height // 2)
    if cx == 0 and cy == 0:
        return CellState.EMPTY
    if cx + cy > 1 + max(width, height) // 2:
        return CellState.BLOCKED
    return CellState.PEG


PRESET_SHAPES: Dict[BoardType, Callable[[int, int, int, int], CellState]] = {
    BoardType.CROSS: _cross_cell,
    BoardType.OCTAGON: _octagon_cell,
}


def preset_board(board_type: BoardType, width: int, height: int) -> Board:
    """Build a fixed-shape board with every cell but the centre pegged."""

    try:
        shape = PRESET_SHAPES[board_type]
    except KeyError:
        raise ValueError(f"No fixed shape for board type {board_type.value!r}") from None
    cells = tuple(shape(x, y, width, height) for y in range(height) for x in range(width))
    return Board(width=width, height=height, cells=cells)
