from .difficulty import DEFAULT_DIFFICULTY_CONFIG, Difficulty, merge_difficulty_config
from .search import SearchLimitExceeded, count_solutions, iter_solutions, solve_first
from .binoxxo_generator import BinoxxoGenerator, GenerationError, Puzzle, generate

__all__ = [
    "DEFAULT_DIFFICULTY_CONFIG",
    "Difficulty",
    "merge_difficulty_config",
    "SearchLimitExceeded",
    "count_solutions",
    "iter_solutions",
    "solve_first",
    "BinoxxoGenerator",
    "GenerationError",
    "Puzzle",
    "generate",
]
