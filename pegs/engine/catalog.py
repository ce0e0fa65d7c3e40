"""Catalog of currently legal generation moves.

The catalog keeps every live :class:`GenerationMove` in two ordered indices:

- ``by_move`` orders records by identity ``(y, x, dy, dx)`` and answers
  existence checks and removals;
- ``by_cost`` orders the same records by ``(cost, y, x, dy, dx)`` and answers
  rank queries, so counting the moves at or below a cost and picking the
  k-th of them are both logarithmic.

Both indices hold the same record objects and are only ever mutated together
through :meth:`MoveCatalog._insert` and :meth:`MoveCatalog._remove`.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from sortedcontainers import SortedDict, SortedKeyList

from ..core.models import GenerationMove


MoveIdentity = Tuple[int, int, int, int]


def move_identity(x: int, y: int, dx: int, dy: int) -> MoveIdentity:
    return (y, x, dy, dx)


class MoveCatalog:
    """Dual-indexed set of legal generation moves."""

    def __init__(self) -> None:
        self._by_move: SortedDict = SortedDict()
        self._by_cost: SortedKeyList = SortedKeyList(key=lambda move: move.cost_key)

    def __len__(self) -> int:
        return len(self._by_move)

    def __contains__(self, identity: object) -> bool:
        return identity in self._by_move

    def __iter__(self) -> Iterator[GenerationMove]:
        return iter(self._by_move.values())

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get(self, x: int, y: int, dx: int, dy: int) -> Optional[GenerationMove]:
        return self._by_move.get(move_identity(x, y, dx, dy))

    def by_cost(self) -> List[GenerationMove]:
        """Records in cost-index order."""
        return list(self._by_cost)

    def count_at_most(self, cost: int) -> int:
        """Number of catalogued moves whose cost is ``<= cost``."""
        return self._by_cost.bisect_key_left((cost + 1,))

    def select(self, rank: int) -> GenerationMove:
        """The ``rank``-th record of the cost index."""
        if not 0 <= rank < len(self._by_cost):
            raise IndexError(f"Move rank {rank} outside catalog of {len(self._by_cost)}")
        return self._by_cost[rank]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def put(self, move: GenerationMove) -> None:
        """Insert ``move``, replacing any entry with the same identity and another cost."""

        existing = self._by_move.get(move.identity)
        if existing is not None:
            if existing.cost == move.cost:
                return
            self._remove(existing)
        self._insert(move)

    def discard(self, x: int, y: int, dx: int, dy: int) -> None:
        existing = self._by_move.get(move_identity(x, y, dx, dy))
        if existing is not None:
            self._remove(existing)

    def in_sync(self) -> bool:
        """Whether both indices hold exactly the same records."""
        if len(self._by_move) != len(self._by_cost):
            return False
        return all(self._by_move.get(move.identity) is move for move in self._by_cost)

    def _insert(self, move: GenerationMove) -> None:
        self._by_move[move.identity] = move
        self._by_cost.add(move)

    def _remove(self, move: GenerationMove) -> None:
        del self._by_move[move.identity]
        self._by_cost.remove(move)
