"""Forward moves made during play on a finished board."""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import CellState
from ..core.exceptions import IllegalMoveError
from ..core.models import Board, ForwardMove
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def check_forward_move(board: Board, move: ForwardMove) -> Optional[str]:
    """Return why ``move`` is illegal on ``board``, or ``None`` if it is legal."""

    if not board.contains(move.sx, move.sy):
        return "source out of range"
    if not board.contains(move.tx, move.ty):
        return "target out of range"
    dx = abs(move.tx - move.sx)
    dy = abs(move.ty - move.sy)
    if max(dx, dy) != 2 or min(dx, dy) != 0:
        return "move length was wrong"
    if (
        board.at(move.sx, move.sy) != CellState.PEG
        or board.at(*move.midpoint) != CellState.PEG
        or board.at(move.tx, move.ty) != CellState.EMPTY
    ):
        return "grid contents were invalid"
    return None


def execute_move(board: Board, move: ForwardMove) -> Board:
    """Jump a peg and return the resulting board; ``board`` is left untouched."""

    reason = check_forward_move(board, move)
    if reason is not None:
        raise IllegalMoveError(f"Illegal move {move.encode()}: {reason}")
    return board.replace(
        {
            (move.sx, move.sy): CellState.EMPTY,
            move.midpoint: CellState.EMPTY,
            (move.tx, move.ty): CellState.PEG,
        }
    )


def legal_forward_moves(board: Board) -> List[ForwardMove]:
    moves: List[ForwardMove] = []
    for sy in range(board.height):
        for sx in range(board.width):
            if board.at(sx, sy) != CellState.PEG:
                continue
            for tx, ty in ((sx, sy - 2), (sx - 2, sy), (sx + 2, sy), (sx, sy + 2)):
                move = ForwardMove(sx=sx, sy=sy, tx=tx, ty=ty)
                if check_forward_move(board, move) is None:
                    moves.append(move)
    return moves


def is_solved(board: Board) -> bool:
    return board.count(CellState.PEG) == 1


def replay(board: Board, moves: List[ForwardMove]) -> Board:
    """Apply ``moves`` in order; the first illegal one raises."""

    for index, move in enumerate(moves):
        try:
            board = execute_move(board, move)
        except IllegalMoveError:
            LOGGER.warning("Replay stopped at move %s of %s", index + 1, len(moves))
            raise
    return board
