"""Per-cell board description strings: ``P`` peg, ``H`` hole, ``O`` obstacle."""

from __future__ import annotations

from typing import Dict

from ..core.constants import CellState
from ..core.exceptions import DescriptionError
from ..core.models import Board
from .params import GameParams


STATE_TO_CHAR: Dict[CellState, str] = {
    CellState.PEG: "P",
    CellState.EMPTY: "H",
    CellState.BLOCKED: "O",
}
CHAR_TO_STATE: Dict[str, CellState] = {char: state for state, char in STATE_TO_CHAR.items()}


def encode_board(board: Board) -> str:
    return "".join(STATE_TO_CHAR[cell] for cell in board.cells)


def validate_description(params: GameParams, description: str) -> None:
    if len(description) != params.width * params.height:
        raise DescriptionError("Game description is wrong length")
    if any(char not in CHAR_TO_STATE for char in description):
        raise DescriptionError("Invalid character in game description")


def decode_board(params: GameParams, description: str) -> Board:
    validate_description(params, description)
    return Board(
        width=params.width,
        height=params.height,
        cells=tuple(CHAR_TO_STATE[char] for char in description),
    )
