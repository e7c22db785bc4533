from enum import Enum
from typing import Dict, Mapping, Optional

from binoxxo.core.models import DifficultyConfig


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {name!r}, expected one of: {choices}")

    def __str__(self):
        return self.value.capitalize()


# Harder tiers use larger boards with fewer given cells in absolute terms.
# Hard skips the single-solution search: its puzzles are only guaranteed solvable.
DEFAULT_DIFFICULTY_CONFIG: Dict[Difficulty, DifficultyConfig] = {
    Difficulty.EASY: DifficultyConfig(size=6, given_ratio=0.6, unique_attempts=10),
    Difficulty.MEDIUM: DifficultyConfig(size=8, given_ratio=0.3, unique_attempts=5),
    Difficulty.HARD: DifficultyConfig(size=10, given_ratio=0.17, unique_attempts=0),
}


def merge_difficulty_config(overrides: Optional[Mapping[Difficulty, DifficultyConfig]] = None
                            ) -> Dict[Difficulty, DifficultyConfig]:
    """Defaults with ``overrides`` applied per difficulty."""
    config = dict(DEFAULT_DIFFICULTY_CONFIG)
    if overrides:
        config.update(overrides)
    return config
