"""Data models supporting the peg solitaire generator."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Tuple

from .constants import CellState
from .exceptions import IllegalMoveError


MOVE_PATTERN = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*-\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


@dataclass(frozen=True)
class GenerationMove:
    """A reversed jump: the peg at the anchor splits into two pegs further out.

    ``cost`` counts the blocked cells among the midpoint and far cell at the
    time the move was catalogued.
    """

    x: int
    y: int
    dx: int
    dy: int
    cost: int = 0

    @property
    def identity(self) -> Tuple[int, int, int, int]:
        return (self.y, self.x, self.dy, self.dx)

    @property
    def cost_key(self) -> Tuple[int, int, int, int, int]:
        return (self.cost, self.y, self.x, self.dy, self.dx)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """Anchor, midpoint and far cell, in that order."""
        return [(self.x + i * self.dx, self.y + i * self.dy) for i in range(3)]

    def inverse(self) -> "ForwardMove":
        """The forward jump that undoes this move during play."""
        return ForwardMove(
            sx=self.x + 2 * self.dx,
            sy=self.y + 2 * self.dy,
            tx=self.x,
            ty=self.y,
        )

    def to_jsonable(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y, "dx": self.dx, "dy": self.dy, "cost": self.cost}


@dataclass(frozen=True)
class ForwardMove:
    """A live-play jump from ``(sx, sy)`` over a peg into ``(tx, ty)``."""

    sx: int
    sy: int
    tx: int
    ty: int

    @classmethod
    def parse(cls, text: str) -> "ForwardMove":
        match = MOVE_PATTERN.match(text)
        if not match:
            raise IllegalMoveError(f"Malformed move string: {text!r}")
        sx, sy, tx, ty = (int(value) for value in match.groups())
        return cls(sx=sx, sy=sy, tx=tx, ty=ty)

    def encode(self) -> str:
        return f"{self.sx},{self.sy}-{self.tx},{self.ty}"

    @property
    def midpoint(self) -> Tuple[int, int]:
        return ((self.sx + self.tx) // 2, (self.sy + self.ty) // 2)


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of a finished or in-play board, row-major."""

    width: int
    height: int
    cells: Tuple[CellState, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Board of {self.width}x{self.height} needs {self.width * self.height} cells, "
                f"got {len(self.cells)}"
            )

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> CellState:
        if not self.contains(x, y):
            raise IndexError(f"Cell outside board: {(x, y)}")
        return self.cells[y * self.width + x]

    def count(self, state: CellState) -> int:
        return sum(1 for cell in self.cells if cell == state)

    def rows(self) -> Iterator[Tuple[CellState, ...]]:
        for y in range(self.height):
            yield self.cells[y * self.width:(y + 1) * self.width]

    def replace(self, updates: Mapping[Tuple[int, int], CellState]) -> "Board":
        cells = list(self.cells)
        for (x, y), state in updates.items():
            if not self.contains(x, y):
                raise IndexError(f"Cell outside board: {(x, y)}")
            cells[y * self.width + x] = state
        return Board(width=self.width, height=self.height, cells=tuple(cells))
