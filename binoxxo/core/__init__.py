from .field import Field
from .board import Board
from .editable_mask import EditableMask
from .models import DifficultyConfig, GameStatus, RuleViolation, ValidityResult
from .rules import can_place, check_board, find_violations, is_board_full, is_board_valid

__all__ = [
    "Field",
    "Board",
    "EditableMask",
    "DifficultyConfig",
    "GameStatus",
    "RuleViolation",
    "ValidityResult",
    "can_place",
    "check_board",
    "find_violations",
    "is_board_full",
    "is_board_valid",
]
