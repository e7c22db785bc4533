from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .field import Field


class Board:
    """
    Square Binoxxo grid.

    Cells are stored in a numpy int8 matrix indexed ``[row, col]`` holding
    ``Field.value``; the public API always takes ``(col, row)``. The board is
    pure storage: it never checks the puzzle rules, see ``binoxxo.core.rules``.
    """

    def __init__(self, size: int):
        """
        Create an empty board.

        Args:
            size: Edge length, must be a positive even integer.

        Raises:
            ValueError: if ``size`` is odd or not positive.
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"Board size must be an integer, got {size!r}")
        if size <= 0 or size % 2 != 0:
            raise ValueError(f"Board size must be positive and even, got {size}")
        self._size = int(size)
        self.grid = np.full((self._size, self._size), Field.EMPTY.value, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Field]]) -> "Board":
        """Build a board from a list of rows, each a sequence of Field."""
        size = len(rows)
        board = cls(size)
        for row_index, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Row {row_index} has {len(row)} cells, expected {size}")
            for col_index, field in enumerate(row):
                board.set(col_index, row_index, field)
        return board

    def size(self) -> int:
        return self._size

    def _check_coordinates(self, col: int, row: int):
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise IndexError(
                f"Cell ({col}, {row}) is outside the {self._size}x{self._size} board")

    def get(self, col: int, row: int) -> Field:
        self._check_coordinates(col, row)
        return Field(int(self.grid[row, col]))

    def set(self, col: int, row: int, field: Field):
        """Overwrite a cell. No rule or editability check is done here."""
        self._check_coordinates(col, row)
        if not isinstance(field, Field):
            raise TypeError(f"Expected a Field, got {type(field).__name__}")
        self.grid[row, col] = field.value

    def row(self, index: int) -> List[Field]:
        self._check_coordinates(0, index)
        return [Field(int(v)) for v in self.grid[index, :]]

    def column(self, index: int) -> List[Field]:
        self._check_coordinates(index, 0)
        return [Field(int(v)) for v in self.grid[:, index]]

    def rows(self) -> List[List[Field]]:
        return [self.row(i) for i in range(self._size)]

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield every ``(col, row)`` pair in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield col, row

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.grid == Field.EMPTY.value))

    def to_lists(self) -> List[List[int]]:
        """Raw cell values as nested lists, ``[row][col]``."""
        return self.grid.tolist()

    @classmethod
    def from_lists(cls, values: Sequence[Sequence[int]]) -> "Board":
        board = cls(len(values))
        grid = np.asarray(values, dtype=np.int8)
        if grid.shape != board.grid.shape:
            raise ValueError(f"Grid shape must be {board.grid.shape}, got {grid.shape}")
        if not np.isin(grid, [field.value for field in Field]).all():
            raise ValueError("Grid contains values that are not Field values")
        board.grid = grid.copy()
        return board

    def copy(self) -> "Board":
        board = Board(self._size)
        board.grid = self.grid.copy()
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self):
        rows = "/".join("".join(field.symbol for field in row) for row in self.rows())
        return f"Board(size={self._size}, rows={rows!r})"
