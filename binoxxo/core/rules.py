"""
Binoxxo rule checks.

All functions are pure: they read the board and never modify it. Rows and
columns are handled the same way by checking the grid and its transpose.

Rules:
1. No more than two adjacent identical symbols in a line.
2. A line never holds more than N/2 of either symbol, so a full line holds
   exactly N/2 of each.
3. No two fully-filled rows (or columns) are identical. Lines with empty
   cells are never compared.
"""

from typing import Iterator, List

import numpy as np

from .board import Board
from .field import Field
from .models import RuleViolation, ValidityResult

EMPTY = Field.EMPTY.value
SYMBOL_X = Field.X.value
SYMBOL_O = Field.O.value

AXES = (("row", False), ("column", True))


def _oriented(grid: np.ndarray, transpose: bool) -> np.ndarray:
    return grid.T if transpose else grid


def _adjacency_lines(grid: np.ndarray) -> np.ndarray:
    """Per line: True when three consecutive cells hold the same symbol."""
    first, middle, last = grid[:, :-2], grid[:, 1:-1], grid[:, 2:]
    triples = (first == middle) & (middle == last) & (first != EMPTY)
    return triples.any(axis=1)


def _balance_lines(grid: np.ndarray) -> np.ndarray:
    """Per line: True when either symbol occurs more than N/2 times."""
    half = grid.shape[1] // 2
    return ((grid == SYMBOL_X).sum(axis=1) > half) | ((grid == SYMBOL_O).sum(axis=1) > half)


def _duplicate_lines(grid: np.ndarray) -> Iterator[tuple]:
    """Yield ``(index, first_index)`` for every full line repeating an earlier one."""
    seen = {}
    full = np.all(grid != EMPTY, axis=1)
    for index in np.flatnonzero(full).tolist():
        key = grid[index].tobytes()
        if key in seen:
            yield index, seen[key]
        else:
            seen[key] = index


def is_board_full(board: Board) -> bool:
    return not bool(np.any(board.grid == EMPTY))


def find_violations(board: Board) -> List[RuleViolation]:
    """List every broken rule, rows first, then columns."""
    violations = []
    for axis, transpose in AXES:
        grid = _oriented(board.grid, transpose)
        for index in np.flatnonzero(_adjacency_lines(grid)).tolist():
            violations.append(RuleViolation(rule="adjacency", axis=axis, index=index))
        for index in np.flatnonzero(_balance_lines(grid)).tolist():
            violations.append(RuleViolation(rule="balance", axis=axis, index=index))
        for index, other in _duplicate_lines(grid):
            violations.append(RuleViolation(rule="uniqueness", axis=axis, index=index, other=other))
    return violations


def is_board_valid(board: Board) -> bool:
    for _, transpose in AXES:
        grid = _oriented(board.grid, transpose)
        if _adjacency_lines(grid).any() or _balance_lines(grid).any():
            return False
        if next(_duplicate_lines(grid), None) is not None:
            return False
    return True


def check_board(board: Board) -> ValidityResult:
    return ValidityResult(is_full=is_board_full(board), is_valid=is_board_valid(board))


def _line_accepts(grid: np.ndarray, index: int) -> bool:
    line = grid[index:index + 1]
    if _adjacency_lines(line)[0] or _balance_lines(line)[0]:
        return False
    if np.all(line != EMPTY):
        full = np.all(grid != EMPTY, axis=1)
        full[index] = False
        if np.any(np.all(grid[full] == line, axis=1)):
            return False
    return True


def can_place(board: Board, col: int, row: int, field: Field) -> bool:
    """
    Check whether writing ``field`` at ``(col, row)`` keeps the row and the
    column of that cell within the rules. The rest of the board is not
    inspected.
    """
    trial = board.copy()
    trial.set(col, row, field)
    return _line_accepts(trial.grid, row) and _line_accepts(trial.grid.T, col)
