"""
数据模型定义
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as ModelField, field_validator


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    FAILED = "failed"


class ValidityResult(BaseModel):
    """Derived board status: full or not, valid or not."""
    model_config = ConfigDict(frozen=True)

    is_full: bool
    is_valid: bool

    @property
    def is_won(self) -> bool:
        return self.is_full and self.is_valid

    @property
    def is_failed(self) -> bool:
        return self.is_full and not self.is_valid

    @property
    def in_progress(self) -> bool:
        return not self.is_full

    @property
    def status(self) -> GameStatus:
        if not self.is_full:
            return GameStatus.IN_PROGRESS
        return GameStatus.WON if self.is_valid else GameStatus.FAILED


class RuleViolation(BaseModel):
    """One broken rule on one line (for uniqueness: on a pair of lines)."""
    model_config = ConfigDict(frozen=True)

    rule: str  # adjacency | balance | uniqueness
    axis: str  # row | column
    index: int
    other: Optional[int] = None

    def describe(self) -> str:
        line = f"{self.axis.capitalize()} {self.index + 1}"
        if self.rule == "adjacency":
            return f"{line} has more than two adjacent identical symbols"
        if self.rule == "balance":
            return f"{line} holds more Xs or Os than half its length"
        return f"{line} is identical to {self.axis} {self.other + 1}"


class DifficultyConfig(BaseModel):
    """Board size and given-cell density for one difficulty tier."""
    model_config = ConfigDict(frozen=True)

    size: int = ModelField(ge=2)
    given_ratio: float = ModelField(gt=0.0, lt=1.0)
    unique_attempts: int = ModelField(default=0, ge=0)

    @field_validator("size")
    @classmethod
    def size_must_be_even(cls, value: int) -> int:
        if value % 2 != 0:
            raise ValueError("Grid size must be even for Binoxxo puzzle.")
        return value

    @property
    def given_count(self) -> int:
        total = self.size * self.size
        return max(1, min(total - 1, round(self.given_ratio * total)))
