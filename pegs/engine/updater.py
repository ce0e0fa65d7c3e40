"""Incremental maintenance of the move catalog after single-cell writes."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..core.constants import AXIS_STEPS, CellState, MOVE_SPAN
from ..core.models import GenerationMove
from .catalog import MoveCatalog
from .grid import PegGrid


def candidate_moves(grid: PegGrid, x: int, y: int) -> Iterator[Tuple[int, int, int, int]]:
    """Yield ``(ax, ay, dx, dy)`` for every in-bounds move that touches ``(x, y)``.

    The cell can be the anchor, the midpoint or the far cell of a move in any
    of the four axis directions, so there are at most twelve candidates.
    """

    for dx, dy in AXIS_STEPS:
        for offset in range(MOVE_SPAN):
            ax, ay = x - offset * dx, y - offset * dy
            if not grid.contains(ax, ay):
                continue
            if not grid.contains(ax + 2 * dx, ay + 2 * dy):
                continue
            yield ax, ay, dx, dy


def move_cost(grid: PegGrid, x: int, y: int, dx: int, dy: int) -> Optional[int]:
    """Cost of the move anchored at ``(x, y)``, or ``None`` when it is not legal."""

    anchor = grid.get(x, y)
    middle = grid.get(x + dx, y + dy)
    far = grid.get(x + 2 * dx, y + 2 * dy)
    if anchor != CellState.PEG or middle == CellState.PEG or far == CellState.PEG:
        return None
    return (middle == CellState.BLOCKED) + (far == CellState.BLOCKED)


def update_moves(grid: PegGrid, x: int, y: int, catalog: MoveCatalog) -> None:
    """Reconcile every catalog entry that references ``(x, y)`` with the grid."""

    for ax, ay, dx, dy in candidate_moves(grid, x, y):
        cost = move_cost(grid, ax, ay, dx, dy)
        if cost is None:
            catalog.discard(ax, ay, dx, dy)
        else:
            catalog.put(GenerationMove(x=ax, y=ay, dx=dx, dy=dy, cost=cost))


def seed_catalog(grid: PegGrid, catalog: MoveCatalog) -> None:
    """Populate an empty catalog from every peg currently on the grid."""

    for x, y, state in grid.iter_cells():
        if state == CellState.PEG:
            update_moves(grid, x, y, catalog)


def enumerate_legal_moves(grid: PegGrid) -> List[GenerationMove]:
    """Full scan of the grid for legal moves, in identity order."""

    moves: List[GenerationMove] = []
    for y in range(grid.height):
        for x in range(grid.width):
            for dx, dy in sorted(AXIS_STEPS, key=lambda step: (step[1], step[0])):
                if not grid.contains(x + 2 * dx, y + 2 * dy):
                    continue
                cost = move_cost(grid, x, y, dx, dy)
                if cost is not None:
                    moves.append(GenerationMove(x=x, y=y, dx=dx, dy=dy, cost=cost))
    return moves
