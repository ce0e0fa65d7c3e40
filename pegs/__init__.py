"""Peg solitaire board generator.

This package exposes the public API surface via:

- ``pegs.engine.generator.BoardGenerator``: builds random boards that are
  solvable by construction.
- ``pegs.engine.game``: starting boards for every board type.
- ``pegs.engine.play``: forward-move legality during play.
"""

from .engine.generator import BoardGenerator, GenerationResult, GeneratorConfig, generate_board
from .engine.game import new_board, new_game_description
from .io.params import GameParams, decode_params, encode_params

__all__ = [
    "BoardGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "generate_board",
    "new_board",
    "new_game_description",
    "GameParams",
    "decode_params",
    "encode_params",
]

__version__ = "0.1.0"
