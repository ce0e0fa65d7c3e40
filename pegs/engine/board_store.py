"""Persistent board document store.

Every generated board is saved as a JSON document under
``local_db/collections/boards/``. The documents carry the description string
a game is started from, plus the generation history and its solution.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.constants import CellState
from ..core.models import Board
from ..io.description import encode_board
from ..io.params import GameParams, encode_params
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import GenerationResult


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/boards")


class BoardStore:
    """Save generated boards as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(self, result: "GenerationResult", params: GameParams) -> str:
        """Persist a generation result and return its document ID."""
        doc_id = self._new_id()
        now = datetime.now(timezone.utc).isoformat()

        doc = {
            "id": doc_id,
            "created_at": now,
            "params": encode_params(params),
            "description": encode_board(result.board),
            "seed": result.seed,
            "attempts": result.attempts,
            "moves": [move.to_jsonable() for move in result.moves],
            "solution": [move.encode() for move in result.solution()],
            "stats": self._compute_stats(result.board),
        }

        path = self.store_dir / f"{doc_id}.json"
        path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
        LOGGER.info("Board saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> dict:
        path = self.store_dir / f"{doc_id}.json"
        return json.loads(path.read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _compute_stats(board: Board) -> dict:
        return {
            "width": board.width,
            "height": board.height,
            "pegs": board.count(CellState.PEG),
            "holes": board.count(CellState.EMPTY),
            "obstacles": board.count(CellState.BLOCKED),
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
