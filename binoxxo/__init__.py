from .core import (
    Board,
    DifficultyConfig,
    EditableMask,
    Field,
    GameStatus,
    RuleViolation,
    ValidityResult,
    can_place,
    check_board,
    find_violations,
    is_board_full,
    is_board_valid,
)
from .generator import BinoxxoGenerator, Difficulty, GenerationError, Puzzle, count_solutions, generate
from .game import GameSession

__all__ = [
    "Board",
    "DifficultyConfig",
    "EditableMask",
    "Field",
    "GameStatus",
    "RuleViolation",
    "ValidityResult",
    "can_place",
    "check_board",
    "find_violations",
    "is_board_full",
    "is_board_valid",
    "BinoxxoGenerator",
    "Difficulty",
    "GenerationError",
    "Puzzle",
    "count_solutions",
    "generate",
    "GameSession",
]

__version__ = "1.0.0"
