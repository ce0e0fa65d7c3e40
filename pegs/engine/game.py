"""Starting boards for a game, whatever its board type."""

from __future__ import annotations

import random
from typing import Optional

from ..core.constants import BoardType
from ..core.models import Board
from ..io.description import encode_board
from ..io.params import GameParams, validate_params
from ..utils.logger import get_logger
from .generator import BoardGenerator, GenerationResult, GeneratorConfig
from .presets import preset_board


LOGGER = get_logger(__name__)


def new_generation(params: GameParams, rng: Optional[random.Random] = None) -> GenerationResult:
    """Generate a random board for ``params``, keeping the move history."""

    validate_params(params)
    if params.board_type != BoardType.RANDOM:
        raise ValueError(f"Board type {params.board_type.value!r} is not generated")
    config = GeneratorConfig(width=params.width, height=params.height)
    return BoardGenerator(config, rng).generate()


def new_board(params: GameParams, rng: Optional[random.Random] = None) -> Board:
    validate_params(params)
    if params.board_type == BoardType.RANDOM:
        return new_generation(params, rng).board
    LOGGER.debug("Building fixed %s board", params.board_type.value)
    return preset_board(params.board_type, params.width, params.height)


def new_game_description(params: GameParams, rng: Optional[random.Random] = None) -> str:
    return encode_board(new_board(params, rng))
