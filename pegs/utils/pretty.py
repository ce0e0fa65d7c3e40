"""Pretty-print helpers for peg solitaire boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

from ..core.constants import CellState
from ..core.models import Board

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult


# Compact form used for plain-text export.
TEXT_SYMBOLS = {
    CellState.EMPTY: "-",
    CellState.PEG: "*",
    CellState.BLOCKED: " ",
}

GRID_SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.PEG: "o",
    CellState.BLOCKED: "#",
}


def format_board(board: Board) -> str:
    """One newline-terminated line per row."""
    return "".join(
        "".join(TEXT_SYMBOLS[cell] for cell in row) + "\n" for row in board.rows()
    )


def format_board_grid(board: Board) -> str:
    header_cells = [f"{x:>2}" for x in range(board.width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * board.width - 1))
    for y, row in enumerate(board.rows()):
        row_render = " ".join(f"{GRID_SYMBOLS[cell]:>2}" for cell in row)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board_grid(board), file=stream)


def print_generation_stats(result: GenerationResult, *, stream=None) -> None:
    """Print grid + summary stats for a generated board."""

    stream = stream or sys.stdout
    board = result.board
    print(format_board_grid(board), file=stream)

    total_cells = board.width * board.height
    pegs = board.count(CellState.PEG)
    holes = board.count(CellState.EMPTY)
    obstacles = board.count(CellState.BLOCKED)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {board.width} x {board.height} ({total_cells} cells)", file=stream)
    print(f"  Pegs:          {pegs}", file=stream)
    print(f"  Holes:         {holes}", file=stream)
    print(f"  Obstacles:     {obstacles} ({obstacles / total_cells * 100:.0f}%)", file=stream)

    costs = Counter(move.cost for move in result.moves)
    print(file=stream)
    print("--- Generation ---", file=stream)
    print(f"  Attempts:      {result.attempts}", file=stream)
    print(f"  Moves:         {len(result.moves)}", file=stream)
    if costs:
        dist_parts = [f"{cost}:{count}" for cost, count in sorted(costs.items())]
        print(f"  Cost mix:      {' '.join(dist_parts)}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)


def print_solution(result: GenerationResult, *, stream=None) -> None:
    """Print the forward solution, one ``sx,sy-tx,ty`` move per line."""

    stream = stream or sys.stdout
    print(file=stream)
    print("--- Solution ---", file=stream)
    for move in result.solution():
        print(move.encode(), file=stream)
