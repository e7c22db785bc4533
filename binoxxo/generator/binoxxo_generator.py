import logging
import os
import random
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Set, Tuple, Union

from binoxxo.core.board import Board
from binoxxo.core.editable_mask import EditableMask
from binoxxo.core.field import Field
from binoxxo.core.models import DifficultyConfig
from binoxxo.core.rules import is_board_valid
from binoxxo.src.base_generator import BaseGenerator
from .difficulty import Difficulty, merge_difficulty_config
from .search import SearchLimitExceeded, count_solutions, solve_first

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("BINOXXO_LOGGING_LEVEL", "WARN"))


class GenerationError(RuntimeError):
    """No solution board could be built within the retry budget."""
    pass


@dataclass
class Puzzle:
    """A generated game: the player-facing board, its mask and the solved board."""
    board: Board
    editable: EditableMask
    solution: Board
    difficulty: Optional[Difficulty] = None

    @property
    def given_count(self) -> int:
        return self.board.size() ** 2 - len(self.editable)


class BinoxxoGenerator(BaseGenerator):
    def __init__(self,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None,
                 difficulty_config: Optional[Mapping[Difficulty, DifficultyConfig]] = None,
                 max_attempts: int = 10,
                 max_steps: int = 500_000,
                 max_solver_steps: int = 50_000):
        """
        Args:
            rng: Random source for cell order and given selection. Takes
                precedence over ``seed``.
            seed: Seed for a private ``random.Random`` when ``rng`` is not given.
            difficulty_config: Per-difficulty overrides of the default table.
            max_attempts: Number of solution searches before giving up.
            max_steps: Placement budget of a single solution search.
            max_solver_steps: Placement budget of a uniqueness check.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng = rng if rng is not None else random.Random(seed)
        self.difficulty_config = merge_difficulty_config(difficulty_config)
        self.max_attempts = max_attempts
        self.max_steps = max_steps
        self.max_solver_steps = max_solver_steps

    def generate(self, difficulty: Union[Difficulty, str]) -> Tuple[Board, EditableMask]:
        """Start a new game: the puzzle board and the cells the player may edit."""
        puzzle = self.generate_puzzle(difficulty)
        return puzzle.board, puzzle.editable

    def generate_puzzle(self, difficulty: Union[Difficulty, str]) -> Puzzle:
        if isinstance(difficulty, str):
            difficulty = Difficulty.parse(difficulty)
        params = self._get_difficulty_params(difficulty)
        puzzle = self.generate_single_puzzle(
            size=params.size,
            given_count=params.given_count,
            unique_attempts=params.unique_attempts,
        )
        puzzle.difficulty = difficulty
        logger.info(f"Generated {difficulty} puzzle (size={params.size}, givens={puzzle.given_count})")
        return puzzle

    def _get_difficulty_params(self, difficulty: Difficulty) -> DifficultyConfig:
        try:
            return self.difficulty_config[difficulty]
        except KeyError:
            raise ValueError(f"No configuration for difficulty {difficulty!r}")

    def generate_single_puzzle(self, size: int, given_count: int, unique_attempts: int = 0) -> Puzzle:
        """
        Build a solution of the given size and cut a puzzle out of it.

        Up to ``unique_attempts`` given selections are tried; the first one
        whose puzzle has a single solution wins. Otherwise the last selection
        is used, which is still solvable since it comes from ``solution``.
        """
        total = size * size
        if not 0 < given_count < total:
            raise ValueError(f"given_count must be between 1 and {total - 1}, got {given_count}")

        solution = self.generate_solution(size)
        for attempt in range(1, max(1, unique_attempts) + 1):
            givens = self._select_givens(size, given_count)
            board, editable = self._mask_solution(solution, givens)
            if unique_attempts == 0:
                break
            if count_solutions(board, limit=2, max_steps=self.max_solver_steps) == 1:
                logger.debug(f"Unique puzzle found on selection {attempt}/{unique_attempts}")
                break
        else:
            logger.debug(f"No unique selection in {unique_attempts} tries, keeping the last one")

        return Puzzle(board=board, editable=editable, solution=solution)

    def generate_solution(self, size: int) -> Board:
        """
        Fill an empty board with a complete rule-valid solution.

        Raises:
            GenerationError: if every bounded search attempt fails.
        """
        empty = Board(size).to_lists()
        for attempt in range(1, self.max_attempts + 1):
            try:
                values = solve_first(empty, rng=self.rng, max_steps=self.max_steps)
            except SearchLimitExceeded as e:
                logger.warning(f"Solution search attempt {attempt}/{self.max_attempts} failed: {e}")
                continue
            if values is None:
                break

            solution = Board.from_lists(values)
            if not is_board_valid(solution):
                raise GenerationError(f"Search produced an invalid {size}x{size} board")
            logger.debug(f"Solution found on attempt {attempt}")
            return solution

        raise GenerationError(
            f"Could not build a {size}x{size} solution in {self.max_attempts} attempts")

    def _select_givens(self, size: int, given_count: int) -> Set[Tuple[int, int]]:
        """
        Pick the ``(col, row)`` cells that stay visible. With at least ``size``
        givens, the first ``size`` form a permutation so every row and column
        keeps one given.
        """
        coordinates = [(col, row) for row in range(size) for col in range(size)]
        if given_count < size:
            return set(self.rng.sample(coordinates, given_count))

        columns = list(range(size))
        self.rng.shuffle(columns)
        givens = {(columns[row], row) for row in range(size)}
        rest = [cell for cell in coordinates if cell not in givens]
        givens.update(self.rng.sample(rest, given_count - size))
        return givens

    @staticmethod
    def _mask_solution(solution: Board, givens: Set[Tuple[int, int]]) -> Tuple[Board, EditableMask]:
        board = solution.copy()
        editable = [cell for cell in solution.coordinates() if cell not in givens]
        for col, row in editable:
            board.set(col, row, Field.EMPTY)
        return board, EditableMask(solution.size(), editable)


def generate(difficulty: Union[Difficulty, str], seed: Optional[int] = None) -> Tuple[Board, EditableMask]:
    """Shortcut for ``BinoxxoGenerator(seed=seed).generate(difficulty)``."""
    return BinoxxoGenerator(seed=seed).generate(difficulty)
