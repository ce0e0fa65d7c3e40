"""CLI entrypoint for the peg solitaire board generator."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict

from pegs.core.constants import BoardType
from pegs.core.exceptions import ParamsError
from pegs.engine.board_store import BoardStore, DEFAULT_STORE_DIR
from pegs.engine.game import new_board, new_generation
from pegs.io.description import encode_board
from pegs.io.params import GameParams, decode_params, encode_params, list_presets, validate_params
from pegs.utils.logger import configure_logging
from pegs.utils.pretty import format_board, pretty_print_board, print_generation_stats, print_solution


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate peg solitaire starting boards",
    )
    parser.add_argument(
        "--params",
        type=str,
        help="Compact parameter string such as 7x7cross or 9x7random",
    )
    parser.add_argument("--width", type=int, help="Board width in cells")
    parser.add_argument("--height", type=int, help="Board height in cells")
    parser.add_argument(
        "--type",
        type=str,
        choices=[t.value for t in BoardType],
        help="Board type (fixed cross/octagon or generated random)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the preset parameter strings and exit",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Print the board as text instead of JSON",
    )
    parser.add_argument(
        "--solution",
        action="store_true",
        help="Include the forward solution of a generated board",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Persist generated random boards as JSON documents",
    )
    parser.add_argument(
        "--store-dir",
        type=Path,
        default=DEFAULT_STORE_DIR,
        help="Directory for saved board documents",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_params(args: argparse.Namespace) -> GameParams:
    params = decode_params(args.params) if args.params else GameParams()
    if args.type:
        params = GameParams(params.width, params.height, BoardType(args.type))
    if args.width is not None:
        params = GameParams(args.width, params.height, params.board_type)
    if args.height is not None:
        params = GameParams(params.width, args.height, params.board_type)
    validate_params(params)
    return params


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.list_presets:
        for name, preset in list_presets():
            print(f"{encode_params(preset):<14} {name}")
        return

    try:
        params = resolve_params(args)
    except ParamsError as exc:
        parser.error(str(exc))

    if (args.solution or args.save) and params.board_type != BoardType.RANDOM:
        parser.error("--solution and --save only apply to random boards")
    if args.text and args.output:
        parser.error("--output writes JSON and cannot be combined with --text")

    rng = random.Random(args.seed)
    payload: Dict[str, Any] = {"params": encode_params(params)}
    if params.board_type == BoardType.RANDOM:
        result = new_generation(params, rng)
        result.seed = args.seed
        board = result.board
        if args.solution:
            payload["solution"] = [move.encode() for move in result.solution()]
        if args.save:
            payload["id"] = BoardStore(args.store_dir).save(result, params)
        if args.text:
            print_generation_stats(result)
            if args.solution:
                print_solution(result)
    else:
        board = new_board(params, rng)
        if args.text:
            pretty_print_board(board, label=params.display_name)

    if args.text:
        return

    payload["description"] = encode_board(board)
    payload["grid"] = format_board(board).splitlines()

    output_text = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
