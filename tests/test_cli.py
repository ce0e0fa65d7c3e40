import contextlib
import io
import json
import random
import tempfile
import unittest
from pathlib import Path

from main import build_parser, main, resolve_params
from pegs.core.constants import BoardType, CellState
from pegs.core.models import ForwardMove
from pegs.engine.board_store import BoardStore
from pegs.engine.game import new_generation
from pegs.engine.play import is_solved, replay
from pegs.io.description import decode_board
from pegs.io.params import GameParams, decode_params


class BoardStoreTests(unittest.TestCase):
    def test_save_and_load_round_trip(self) -> None:
        params = GameParams(6, 6, BoardType.RANDOM)
        result = new_generation(params, random.Random(8))
        with tempfile.TemporaryDirectory() as tmpdir:
            store = BoardStore(Path(tmpdir) / "boards")
            doc_id = store.save(result, params)
            doc = store.load(doc_id)

        self.assertEqual(doc["params"], "6x6random")
        self.assertEqual(doc["attempts"], result.attempts)
        self.assertEqual(len(doc["moves"]), len(result.moves))
        self.assertEqual(doc["stats"]["pegs"], result.board.count(CellState.PEG))

        board = decode_board(params, doc["description"])
        solution = [ForwardMove.parse(text) for text in doc["solution"]]
        self.assertTrue(is_solved(replay(board, solution)))


class CliTests(unittest.TestCase):
    def test_resolve_params_applies_overrides(self) -> None:
        args = build_parser().parse_args(["--params", "5x5random", "--width", "8"])
        self.assertEqual(resolve_params(args), GameParams(8, 5, BoardType.RANDOM))

    def test_random_board_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "board.json"
            main([
                "--params", "7x5random",
                "--seed", "42",
                "--solution",
                "--output", str(output),
                "--log-level", "WARNING",
            ])
            payload = json.loads(output.read_text(encoding="utf-8"))

        self.assertEqual(payload["params"], "7x5random")
        self.assertEqual(len(payload["grid"]), 5)
        board = decode_board(decode_params(payload["params"]), payload["description"])
        solution = [ForwardMove.parse(text) for text in payload["solution"]]
        self.assertTrue(is_solved(replay(board, solution)))

    def test_fixed_board_text_output(self) -> None:
        stream = io.StringIO()
        with contextlib.redirect_stdout(stream):
            main(["--type", "octagon", "--text", "--log-level", "WARNING"])
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], "Octagon")
        self.assertTrue(lines[6].startswith(" 3 |"))
        self.assertIn(".", lines[6])

    def test_random_board_text_output_lists_solution(self) -> None:
        stream = io.StringIO()
        with contextlib.redirect_stdout(stream):
            main(["--params", "7x7random", "--seed", "1", "--text", "--solution", "--log-level", "WARNING"])
        lines = stream.getvalue().splitlines()
        self.assertIn("--- Solution ---", lines)
        printed = lines[lines.index("--- Solution ---") + 1:]

        expected = new_generation(GameParams(7, 7, BoardType.RANDOM), random.Random(1))
        self.assertEqual(printed, [move.encode() for move in expected.solution()])
        self.assertGreater(len(printed), 0)
        for text in printed:
            self.assertRegex(text, r"^\d+,\d+-\d+,\d+$")

    def test_text_with_output_is_a_usage_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "board.json"
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    main(["--params", "7x7random", "--text", "--output", str(output)])
            self.assertFalse(output.exists())

    def test_invalid_params_exit_with_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--params", "9x9cross", "--log-level", "WARNING"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
