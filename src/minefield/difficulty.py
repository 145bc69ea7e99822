"""
Difficulty module for Minesweeper boards.

Maps each difficulty tier to the threshold used when seeding mines: a
cell becomes a mine when a uniform draw in [0, 100) exceeds it.
"""
from enum import Enum
from typing import Dict, Union


# ============================================================================
# Difficulty Tiers
# ============================================================================

class Difficulty(Enum):
    """Named difficulty presets."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def threshold(self) -> int:
        """Mine threshold out of 100 for this tier."""
        return MINE_THRESHOLDS[self]

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Coerce a tier or tier name into a Difficulty.

        Args:
            value: A Difficulty, or its name in any case.

        Returns:
            The matching Difficulty.

        Raises:
            ValueError: If the name matches no tier.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(tier.value for tier in cls)
            raise ValueError(
                f"Unknown difficulty {value!r} (expected one of: {names})"
            ) from None


# Lower threshold means more mines
MINE_THRESHOLDS: Dict[Difficulty, int] = {
    Difficulty.EASY: 90,
    Difficulty.MEDIUM: 80,
    Difficulty.HARD: 70,
}
