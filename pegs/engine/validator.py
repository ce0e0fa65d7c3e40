"""Deterministic rule validation for generated boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import CellState
from ..core.exceptions import GenerationError
from ..core.models import Board
from ..utils.logger import get_logger
from .catalog import MoveCatalog
from .grid import PegGrid
from .updater import enumerate_legal_moves


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class BoardValidator:
    """Runs deterministic validation over a finished board."""

    def validate(self, board: Board) -> ValidationResult:
        messages: List[str] = []
        if not self.has_full_extent(board):
            messages.append("Board shape does not reach every edge")
        return ValidationResult(ok=not messages, messages=messages)

    @staticmethod
    def has_full_extent(board: Board) -> bool:
        """Each of the four edges holds at least one non-blocked cell."""

        last_x, last_y = board.width - 1, board.height - 1
        left = any(board.at(0, y) != CellState.BLOCKED for y in range(board.height))
        right = any(board.at(last_x, y) != CellState.BLOCKED for y in range(board.height))
        top = any(board.at(x, 0) != CellState.BLOCKED for x in range(board.width))
        bottom = any(board.at(x, last_y) != CellState.BLOCKED for x in range(board.width))
        return left and right and top and bottom

    @staticmethod
    def check_catalog(grid: PegGrid, catalog: MoveCatalog) -> None:
        """Raise if the catalog disagrees with a full rescan of the grid."""

        if not catalog.in_sync():
            raise GenerationError("Move catalog indices are out of sync")
        expected = enumerate_legal_moves(grid)
        actual = list(catalog)
        if expected != actual:
            missing = [move for move in expected if move not in actual]
            stale = [move for move in actual if move not in expected]
            LOGGER.error("Catalog drift: missing=%s stale=%s", missing, stale)
            raise GenerationError(
                f"Move catalog drifted from grid ({len(missing)} missing, {len(stale)} stale)"
            )
