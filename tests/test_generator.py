import random
import unittest
from typing import List

from pegs.core.constants import CellState
from pegs.core.exceptions import GenerationError
from pegs.core.models import Board, GenerationMove
from pegs.engine.catalog import MoveCatalog
from pegs.engine.generator import BoardGenerator, GeneratorConfig, generate_board
from pegs.engine.grid import PegGrid
from pegs.engine.play import is_solved, replay
from pegs.engine.validator import BoardValidator, ValidationResult


class RecordingSource:
    """Random source that remembers every draw it hands out."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)
        self.draws: List[int] = []

    def randrange(self, n: int) -> int:
        value = self._rng.randrange(n)
        self.draws.append(value)
        return value


class ReplaySource:
    def __init__(self, draws: List[int]) -> None:
        self._draws = iter(draws)

    def randrange(self, n: int) -> int:
        value = next(self._draws)
        if not 0 <= value < n:
            raise AssertionError(f"Replayed draw {value} outside [0, {n})")
        return value


class GeneratorConfigTests(unittest.TestCase):
    def test_rejects_small_boards(self) -> None:
        with self.assertRaises(ValueError):
            GeneratorConfig(width=3, height=9)

    def test_expansion_limit_is_half_the_area(self) -> None:
        self.assertEqual(GeneratorConfig(width=5, height=5).expansion_move_limit, 12)
        self.assertEqual(GeneratorConfig(width=9, height=7).expansion_move_limit, 31)
        self.assertEqual(
            GeneratorConfig(width=8, height=8, expansion_divisor=4).expansion_move_limit, 16
        )


class BoardGeneratorTests(unittest.TestCase):
    SIZES = ((4, 4), (5, 5), (7, 7), (9, 6), (12, 10))

    def test_generated_boards_are_solvable_by_reversal(self) -> None:
        for width, height in self.SIZES:
            for seed in range(5):
                with self.subTest(width=width, height=height, seed=seed):
                    result = BoardGenerator(
                        GeneratorConfig(width=width, height=height, seed=seed)
                    ).generate()
                    final = replay(result.board, result.solution())
                    self.assertTrue(is_solved(final))
                    self.assertEqual(final.at(width // 2, height // 2), CellState.PEG)
                    self.assertEqual(
                        final.count(CellState.BLOCKED), result.board.count(CellState.BLOCKED)
                    )
                    self.assertEqual(
                        final.count(CellState.EMPTY) + 1,
                        width * height - result.board.count(CellState.BLOCKED),
                    )

    def test_generated_boards_reach_every_edge(self) -> None:
        for width, height in self.SIZES:
            with self.subTest(width=width, height=height):
                board = generate_board(width, height, random.Random(width * 31 + height))
                self.assertTrue(BoardValidator.has_full_extent(board))

    def test_no_two_cost_moves_after_expansion_limit(self) -> None:
        for seed in range(10):
            config = GeneratorConfig(width=8, height=6, seed=seed)
            result = BoardGenerator(config).generate()
            for index, move in enumerate(result.moves):
                if index >= config.expansion_move_limit:
                    self.assertLess(move.cost, 2)

    def test_catalog_stays_consistent_during_generation(self) -> None:
        config = GeneratorConfig(width=7, height=6, seed=11, verify_catalog=True)
        result = BoardGenerator(config).generate()
        self.assertGreater(len(result.moves), 0)

    def test_same_seed_gives_identical_board(self) -> None:
        first = BoardGenerator(GeneratorConfig(width=9, height=9, seed=1234)).generate()
        second = BoardGenerator(GeneratorConfig(width=9, height=9, seed=1234)).generate()
        self.assertEqual(first.board, second.board)
        self.assertEqual(first.moves, second.moves)

    def test_replayed_draws_give_identical_board(self) -> None:
        source = RecordingSource(seed=99)
        config = GeneratorConfig(width=7, height=5)
        recorded = BoardGenerator(config, source).generate()
        replayed = BoardGenerator(config, ReplaySource(source.draws)).generate()
        self.assertEqual(recorded.board, replayed.board)
        self.assertEqual(recorded.attempts, replayed.attempts)

    def test_five_by_five_scenario(self) -> None:
        result = BoardGenerator(GeneratorConfig(width=5, height=5), random.Random(2024)).generate()
        board = result.board
        self.assertIn(board.at(2, 2), (CellState.PEG, CellState.EMPTY))
        self.assertLess(board.count(CellState.BLOCKED), 5 * 5 - 1)
        self.assertEqual(result.moves[0].x, 2)
        self.assertEqual(result.moves[0].y, 2)
        self.assertTrue(is_solved(replay(board, result.solution())))

    def test_retry_budget_exhaustion_raises(self) -> None:
        generator = BoardGenerator(GeneratorConfig(width=5, height=5, seed=3, max_attempts=3))
        generator.validator.validate = lambda board: ValidationResult(ok=False, messages=["nope"])
        with self.assertRaises(GenerationError):
            generator.generate()


class BoardValidatorTests(unittest.TestCase):
    def test_full_extent_passes_without_pegs_or_holes(self) -> None:
        validator = BoardValidator()
        no_pegs = Board(4, 4, (CellState.EMPTY,) * 16)
        no_holes = Board(4, 4, (CellState.PEG,) * 16)
        self.assertTrue(validator.validate(no_pegs).ok)
        self.assertTrue(validator.validate(no_holes).ok)

    def test_missing_edge_is_rejected(self) -> None:
        cells = [CellState.BLOCKED] * 16
        cells[1 * 4 + 1] = CellState.PEG
        result = BoardValidator().validate(Board(4, 4, tuple(cells)))
        self.assertFalse(result.ok)
        self.assertEqual(result.messages, ["Board shape does not reach every edge"])


class GenerationLoopTests(unittest.TestCase):
    def test_move_choice_prefers_cheapest_tier(self) -> None:
        generator = BoardGenerator(GeneratorConfig(width=6, height=6, seed=5))
        catalog = MoveCatalog()
        catalog.put(GenerationMove(x=1, y=1, dx=1, dy=0, cost=2))
        catalog.put(GenerationMove(x=3, y=3, dx=0, dy=-1, cost=1))
        for _ in range(10):
            self.assertEqual(generator._choose_move(catalog, 0).cost, 1)

    def test_move_choice_refuses_two_cost_late(self) -> None:
        generator = BoardGenerator(GeneratorConfig(width=6, height=6, seed=5))
        catalog = MoveCatalog()
        catalog.put(GenerationMove(x=1, y=1, dx=1, dy=0, cost=2))
        self.assertIsNotNone(generator._choose_move(catalog, 17))
        self.assertIsNone(generator._choose_move(catalog, 18))

    def test_loop_stops_when_no_moves_remain(self) -> None:
        generator = BoardGenerator(GeneratorConfig(width=4, height=4, seed=1))
        grid = PegGrid(4, 4, fill=CellState.EMPTY)
        self.assertEqual(generator.generate_moves(grid), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
