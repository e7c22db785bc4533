import logging
import os
from typing import Optional, Union

from binoxxo.core.board import Board
from binoxxo.core.editable_mask import EditableMask
from binoxxo.core.field import Field
from binoxxo.core.models import GameStatus, ValidityResult
from binoxxo.core.rules import check_board
from binoxxo.generator.binoxxo_generator import BinoxxoGenerator
from binoxxo.generator.difficulty import Difficulty

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("BINOXXO_LOGGING_LEVEL", "WARN"))


class GameSession:
    """
    State of one running game: the board, the editable cells and the
    difficulty it was generated with.

    Player edits go through ``toggle``/``set_field``, which refuse to touch
    given cells. A refused edit changes nothing and returns False.
    """

    def __init__(self, difficulty: Union[Difficulty, str] = Difficulty.EASY,
                 generator: Optional[BinoxxoGenerator] = None):
        self.generator = generator if generator is not None else BinoxxoGenerator()
        self.difficulty: Difficulty = Difficulty.EASY
        self.board: Board
        self.editable: EditableMask
        self.new_game(difficulty)

    def new_game(self, difficulty: Union[Difficulty, str, None] = None):
        """Replace the current board and mask with a freshly generated game."""
        if difficulty is None:
            difficulty = self.difficulty
        elif isinstance(difficulty, str):
            difficulty = Difficulty.parse(difficulty)
        board, editable = self.generator.generate(difficulty)
        self.board = board
        self.editable = editable
        self.difficulty = difficulty
        logger.info(f"New {difficulty} game, {len(editable)} cells to fill")

    def size(self) -> int:
        return self.board.size()

    def get(self, col: int, row: int) -> Field:
        return self.board.get(col, row)

    def is_editable(self, col: int, row: int) -> bool:
        return self.editable.is_editable(col, row)

    def set_field(self, col: int, row: int, field: Field) -> bool:
        if not self.editable.is_editable(col, row):
            logger.warning(f"Rejected edit of given cell ({col}, {row})")
            return False
        self.board.set(col, row, field)
        return True

    def toggle(self, col: int, row: int) -> bool:
        """Cycle an editable cell EMPTY -> X -> O -> EMPTY."""
        if not self.editable.is_editable(col, row):
            logger.warning(f"Rejected toggle of given cell ({col}, {row})")
            return False
        self.board.set(col, row, self.board.get(col, row).next())
        return True

    def clear(self):
        """Empty every editable cell; givens stay."""
        for col, row in self.editable:
            self.board.set(col, row, Field.EMPTY)

    def validity(self) -> ValidityResult:
        return check_board(self.board)

    @property
    def status(self) -> GameStatus:
        return self.validity().status
