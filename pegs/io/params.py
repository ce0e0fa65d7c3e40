"""Game parameters: the compact ``WxHtype`` string form, validation and presets."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..core.constants import BoardType, MIN_BOARD_SIZE, PRESET_SIZE
from ..core.exceptions import ParamsError


PARAMS_PATTERN = re.compile(r"^(\d*)(?:x(\d*))?(.*)$", re.DOTALL)


@dataclass(frozen=True)
class GameParams:
    width: int = PRESET_SIZE
    height: int = PRESET_SIZE
    board_type: BoardType = BoardType.CROSS

    @property
    def display_name(self) -> str:
        if self.board_type == BoardType.RANDOM:
            return f"{self.board_type.display_name} {self.width}x{self.height}"
        return self.board_type.display_name


PRESETS: Tuple[GameParams, ...] = (
    GameParams(PRESET_SIZE, PRESET_SIZE, BoardType.CROSS),
    GameParams(PRESET_SIZE, PRESET_SIZE, BoardType.OCTAGON),
    GameParams(5, 5, BoardType.RANDOM),
    GameParams(7, 7, BoardType.RANDOM),
    GameParams(9, 9, BoardType.RANDOM),
)


def list_presets() -> List[Tuple[str, GameParams]]:
    return [(params.display_name, params) for params in PRESETS]


def _leading_int(digits: Optional[str]) -> int:
    return int(digits) if digits else 0


def decode_params(text: str, base: Optional[GameParams] = None) -> GameParams:
    """Parse ``"9x7random"``-style strings.

    A missing height copies the width. A missing or unknown type suffix keeps
    the board type of ``base`` (the default parameters when omitted).
    """

    base = base or GameParams()
    match = PARAMS_PATTERN.match(text.strip())
    if match is None:
        raise ParamsError(f"Unreadable parameter string: {text!r}")
    width_digits, height_digits, suffix = match.groups()
    width = _leading_int(width_digits)
    height = _leading_int(height_digits) if height_digits is not None else width

    board_type = base.board_type
    for candidate in BoardType:
        if suffix == candidate.value:
            board_type = candidate
    return replace(base, width=width, height=height, board_type=board_type)


def encode_params(params: GameParams, full: bool = True) -> str:
    text = f"{params.width}x{params.height}"
    if full:
        text += params.board_type.value
    return text


def validate_params(params: GameParams) -> None:
    if params.width < MIN_BOARD_SIZE or params.height < MIN_BOARD_SIZE:
        raise ParamsError("Width and height must both be greater than three")
    if params.board_type in (BoardType.CROSS, BoardType.OCTAGON):
        if params.width != PRESET_SIZE or params.height != PRESET_SIZE:
            raise ParamsError(f"This board type is only supported at {PRESET_SIZE}x{PRESET_SIZE}")
