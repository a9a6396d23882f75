"""
Board configuration for Minesweeper.

Holds board dimensions, mine count and the optional shuffle seed, plus
the standard difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict, Optional


# ============================================================================
# Constants
# ============================================================================

MAX_SEED = 2 ** 64


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
        seed: Shuffle seed, or None to draw one from entropy.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")
        if self.seed is not None and not 0 <= self.seed < MAX_SEED:
            raise ValueError("Seed must be an unsigned 64-bit integer")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @classmethod
    def custom(
        cls,
        rows: int,
        cols: int,
        mines: int,
        seed: Optional[int] = None,
    ) -> "BoardConfig":
        """
        Build a custom board, clamping the mine count.

        At least one safe cell always remains, so a mine count of
        rows * cols or more is reduced to rows * cols - 1.

        Raises:
            ValueError: If dimensions are not positive or mines is
                negative.
        """
        if rows < 1 or cols < 1:
            raise ValueError("Board dimensions must be positive")
        return cls(rows, cols, min(mines, rows * cols - 1), seed)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
ADVANCED = BoardConfig(16, 30, 99)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "advanced": ADVANCED,
}
