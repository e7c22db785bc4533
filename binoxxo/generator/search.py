"""
Bounded backtracking over the empty cells of a board.

The search keeps an explicit stack of candidate lists, one frame per empty
cell in row-major order, instead of recursing. Each frame holds the symbols
not yet tried for its cell. Row/column symbol counts are tracked
incrementally so a placement check only looks at the cell's own row and
column.
"""

import logging
import os
import random
from typing import Iterator, List, Optional

from binoxxo.core.board import Board
from binoxxo.core.field import Field
from binoxxo.core.rules import is_board_valid

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("BINOXXO_LOGGING_LEVEL", "WARN"))

EMPTY = Field.EMPTY.value
SYMBOLS = (Field.X.value, Field.O.value)


class SearchLimitExceeded(RuntimeError):
    """The search tried more placements than its step budget allows."""

    def __init__(self, steps: int):
        super().__init__(f"Backtracking search stopped after {steps} steps")
        self.steps = steps


class _SearchState:
    def __init__(self, values: List[List[int]]):
        self.grid = [list(row) for row in values]
        self.size = len(self.grid)
        self.half = self.size // 2
        # counts[line][symbol], index 0 unused
        self.row_counts = [[0, 0, 0] for _ in range(self.size)]
        self.col_counts = [[0, 0, 0] for _ in range(self.size)]
        for row in range(self.size):
            for col in range(self.size):
                value = self.grid[row][col]
                if value != EMPTY:
                    self.row_counts[row][value] += 1
                    self.col_counts[col][value] += 1

    @staticmethod
    def _filled(counts: List[int]) -> int:
        return counts[1] + counts[2]

    def column(self, col: int) -> List[int]:
        return [line[col] for line in self.grid]

    def can_place(self, row: int, col: int, value: int) -> bool:
        n = self.size
        if self.row_counts[row][value] >= self.half or self.col_counts[col][value] >= self.half:
            return False

        line = self.grid[row]
        if col >= 2 and line[col - 1] == value and line[col - 2] == value:
            return False
        if 1 <= col <= n - 2 and line[col - 1] == value and line[col + 1] == value:
            return False
        if col <= n - 3 and line[col + 1] == value and line[col + 2] == value:
            return False

        grid = self.grid
        if row >= 2 and grid[row - 1][col] == value and grid[row - 2][col] == value:
            return False
        if 1 <= row <= n - 2 and grid[row - 1][col] == value and grid[row + 1][col] == value:
            return False
        if row <= n - 3 and grid[row + 1][col] == value and grid[row + 2][col] == value:
            return False

        # The cell is the last empty one of its row: the completed row must be new
        if self._filled(self.row_counts[row]) == n - 1:
            completed = line[:col] + [value] + line[col + 1:]
            for other in range(n):
                if other != row and self._filled(self.row_counts[other]) == n and grid[other] == completed:
                    return False

        if self._filled(self.col_counts[col]) == n - 1:
            completed = self.column(col)
            completed[row] = value
            for other in range(n):
                if other != col and self._filled(self.col_counts[other]) == n and self.column(other) == completed:
                    return False

        return True

    def place(self, row: int, col: int, value: int):
        self.grid[row][col] = value
        self.row_counts[row][value] += 1
        self.col_counts[col][value] += 1

    def remove(self, row: int, col: int):
        value = self.grid[row][col]
        self.grid[row][col] = EMPTY
        self.row_counts[row][value] -= 1
        self.col_counts[col][value] -= 1


def iter_solutions(values: List[List[int]], rng: Optional[random.Random] = None,
                   max_steps: Optional[int] = None) -> Iterator[List[List[int]]]:
    """
    Yield every completion of a partial grid.

    Args:
        values: Cell values ``[row][col]``; the filled cells must already
            satisfy the rules.
        rng: When given, the candidate order of every cell is shuffled with
            it; otherwise X is tried before O.
        max_steps: Maximum number of candidate placements to try.

    Yields:
        Completed grids as fresh nested lists.

    Raises:
        SearchLimitExceeded: when ``max_steps`` is used up.
    """
    state = _SearchState(values)
    empties = [(row, col)
               for row in range(state.size)
               for col in range(state.size)
               if state.grid[row][col] == EMPTY]

    def candidates() -> List[int]:
        options = list(SYMBOLS)
        if rng is not None:
            rng.shuffle(options)
        # popped from the end
        options.reverse()
        return options

    if not empties:
        yield [list(row) for row in state.grid]
        return

    frames = [candidates()]
    steps = 0
    while frames:
        depth = len(frames) - 1
        row, col = empties[depth]
        if state.grid[row][col] != EMPTY:
            state.remove(row, col)

        options = frames[-1]
        if not options:
            frames.pop()
            continue

        value = options.pop()
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise SearchLimitExceeded(steps - 1)
        if not state.can_place(row, col, value):
            continue

        state.place(row, col, value)
        if depth + 1 == len(empties):
            yield [list(line) for line in state.grid]
        else:
            frames.append(candidates())

    logger.debug(f"Search space exhausted after {steps} steps")


def solve_first(values: List[List[int]], rng: Optional[random.Random] = None,
                max_steps: Optional[int] = None) -> Optional[List[List[int]]]:
    """Return the first completion found, or None when there is none."""
    return next(iter_solutions(values, rng=rng, max_steps=max_steps), None)


def count_solutions(board: Board, limit: int = 2, max_steps: Optional[int] = None) -> int:
    """
    Count completions of ``board``, stopping at ``limit``.

    A board that already breaks a rule has no completion. Running out of
    steps is reported as ``limit`` since uniqueness could not be shown.
    """
    if not is_board_valid(board):
        return 0

    count = 0
    try:
        for _ in iter_solutions(board.to_lists(), max_steps=max_steps):
            count += 1
            if count >= limit:
                break
    except SearchLimitExceeded as e:
        logger.debug(f"Solution count gave up: {e}")
        return limit
    return count
