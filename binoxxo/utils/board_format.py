from typing import Optional

from binoxxo.core.board import Board
from binoxxo.core.editable_mask import EditableMask
from binoxxo.core.field import Field


def format_board(board: Board) -> str:
    """Format the board as rows of space separated symbols ('X', 'O', '_')."""
    return '\n'.join(' '.join(field.symbol for field in row) for row in board.rows())


def format_puzzle(board: Board, editable: Optional[EditableMask] = None) -> str:
    """
    Like ``format_board``, but cells the player may edit are written in lower
    case so they can be told apart from the givens.
    """
    if editable is None:
        return format_board(board)
    lines = []
    for row in range(board.size()):
        cells = []
        for col in range(board.size()):
            symbol = board.get(col, row).symbol
            cells.append(symbol.lower() if editable.is_editable(col, row) else symbol)
        lines.append(' '.join(cells))
    return '\n'.join(lines)


def parse_board(text: str) -> Board:
    """
    Parse a board written one row per line.

    Cells are 'X', 'O' and '_' (or '.') for empty, either separated by spaces
    or written together ("XO_O"). Blank lines are ignored.

    Raises:
        ValueError: on unknown symbols, ragged rows or a grid that is not
            square with an even size.
    """
    rows = []
    for line_num, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        tokens = line.split() if any(ch.isspace() for ch in line) else list(line)
        try:
            rows.append([Field.from_symbol(token) for token in tokens])
        except ValueError as e:
            raise ValueError(f"Line {line_num}: {e}")

    if not rows:
        raise ValueError("Board text is empty")
    size = len(rows)
    for index, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(f"Row {index + 1} has {len(row)} cells, expected {size} for a square board")
    return Board.from_rows(rows)
