from typing import Iterable, Iterator, Tuple

import numpy as np

from .board import Board
from .field import Field


class EditableMask:
    """
    Read-only record of the cells a player may change.

    Produced once by the generator; every coordinate not in the mask is a
    given. Callers must consult ``is_editable`` before ``Board.set``: the
    board itself does not know about the mask.
    """

    def __init__(self, size: int, coordinates: Iterable[Tuple[int, int]] = ()):
        if size <= 0:
            raise ValueError(f"Mask size must be positive, got {size}")
        cells = np.zeros((size, size), dtype=bool)
        for col, row in coordinates:
            if not (0 <= col < size and 0 <= row < size):
                raise ValueError(f"Coordinate ({col}, {row}) is outside a {size}x{size} board")
            cells[row, col] = True
        cells.flags.writeable = False
        self._size = size
        self._cells = cells

    @classmethod
    def from_empty_cells(cls, board: Board) -> "EditableMask":
        """Mark every currently empty cell of ``board`` as editable."""
        rows, cols = np.nonzero(board.grid == Field.EMPTY.value)
        return cls(board.size(), zip(cols.tolist(), rows.tolist()))

    def size(self) -> int:
        return self._size

    def is_editable(self, col: int, row: int) -> bool:
        if not (0 <= col < self._size and 0 <= row < self._size):
            raise IndexError(
                f"Cell ({col}, {row}) is outside the {self._size}x{self._size} board")
        return bool(self._cells[row, col])

    def __contains__(self, coordinate) -> bool:
        """Same as ``is_editable``, including the ``IndexError`` off the board."""
        col, row = coordinate
        return self.is_editable(col, row)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        rows, cols = np.nonzero(self._cells)
        return iter(list(zip(cols.tolist(), rows.tolist())))

    def __len__(self) -> int:
        return int(np.count_nonzero(self._cells))

    def __eq__(self, other):
        if not isinstance(other, EditableMask):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self):
        return hash((self._size, self._cells.tobytes()))

    def __repr__(self):
        return f"EditableMask(size={self._size}, editable={len(self)})"
