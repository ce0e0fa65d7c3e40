"""Random board generation by playing peg solitaire backwards.

Generation starts from a board holding a single peg and repeatedly makes
random reverse jumps. Every board produced this way is solvable down to one
peg: playing the recorded reverse jumps forwards, last first, is a solution.

Two refinements keep the result usable:
  1. Moves that reuse existing holes are preferred over moves that annex
     blocked cells, and once half the rectangle's worth of moves has been
     made, moves that would annex two blocked cells are refused.
  2. Finished boards whose shape does not reach all four edges of the
     rectangle are discarded and generation starts again from scratch.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.constants import MAX_MOVE_COST, MIN_BOARD_SIZE
from ..core.exceptions import GenerationError
from ..core.models import Board, ForwardMove, GenerationMove
from ..utils.logger import get_logger
from .catalog import MoveCatalog
from .grid import PegGrid
from .updater import seed_catalog, update_moves
from .validator import BoardValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int
    height: int
    seed: Optional[int] = None
    max_attempts: Optional[int] = None
    expansion_divisor: int = 2
    verify_catalog: bool = False

    def __post_init__(self) -> None:
        if self.width < MIN_BOARD_SIZE or self.height < MIN_BOARD_SIZE:
            raise ValueError("Width and height must both be greater than three")
        if self.expansion_divisor < 1:
            raise ValueError("expansion_divisor must be positive")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be positive when given")

    @property
    def expansion_move_limit(self) -> int:
        """Moves after which two-cost moves are no longer accepted."""
        return (self.width * self.height) // self.expansion_divisor


@dataclass
class GenerationResult:
    board: Board
    moves: List[GenerationMove] = field(default_factory=list)
    attempts: int = 1
    seed: Optional[int] = None

    def solution(self) -> List[ForwardMove]:
        """Forward jumps that reduce ``board`` to a single peg."""
        return [move.inverse() for move in reversed(self.moves)]


class BoardGenerator:
    """Retry driver around the reverse-jump generation loop."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.validator = BoardValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> GenerationResult:
        attempt = 0
        while self.config.max_attempts is None or attempt < self.config.max_attempts:
            attempt += 1
            grid = PegGrid.seeded(self.config.width, self.config.height)
            moves = self.generate_moves(grid)
            board = grid.freeze()
            validation = self.validator.validate(board)
            if validation.ok:
                LOGGER.info(
                    "Generated %sx%s board in %s attempt(s) with %s moves",
                    self.config.width,
                    self.config.height,
                    attempt,
                    len(moves),
                )
                return GenerationResult(
                    board=board, moves=moves, attempts=attempt, seed=self.config.seed
                )
            LOGGER.debug("Attempt %s rejected: %s", attempt, "; ".join(validation.messages))
        raise GenerationError(
            f"Unable to generate a {self.config.width}x{self.config.height} board "
            f"after {attempt} attempts"
        )

    # ------------------------------------------------------------------
    # Generation loop
    # ------------------------------------------------------------------
    def generate_moves(self, grid: PegGrid) -> List[GenerationMove]:
        """Make random reverse jumps on ``grid`` until none is acceptable."""

        catalog = MoveCatalog()
        seed_catalog(grid, catalog)
        moves: List[GenerationMove] = []

        while True:
            move = self._choose_move(catalog, len(moves))
            if move is None:
                break
            for x, y in grid.apply(move):
                update_moves(grid, x, y, catalog)
            moves.append(move)
            if self.config.verify_catalog:
                self.validator.check_catalog(grid, catalog)

        LOGGER.debug("Generation loop finished after %s moves", len(moves))
        return moves

    def _choose_move(self, catalog: MoveCatalog, moves_applied: int) -> Optional[GenerationMove]:
        """Uniformly random move among the cheapest tier, or ``None`` when exhausted."""

        max_cost = MAX_MOVE_COST if moves_applied < self.config.expansion_move_limit else 1
        for cost in range(max_cost + 1):
            available = catalog.count_at_most(cost)
            if available:
                return catalog.select(self.rng.randrange(available))
        return None


def generate_board(width: int, height: int, rng: Optional[random.Random] = None) -> Board:
    """Produce a solvable board touching every edge of a ``width`` x ``height`` rectangle."""

    return BoardGenerator(GeneratorConfig(width=width, height=height), rng).generate().board
