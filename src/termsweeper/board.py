"""
Board module for Minesweeper game.

Implements the grid of cells with seeded mine placement, neighbor
lookup, adjacency counting and first-click mine relocation.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell
from .config import BoardConfig, MAX_SEED


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class BadGameState(RuntimeError):
    """Raised when the board reaches a state that valid input cannot produce."""


def draw_seed() -> int:
    """Draw an unsigned 64-bit seed from the OS entropy source."""
    return int(np.random.SeedSequence().entropy) % MAX_SEED


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper mine field.

    Owns the grid of cells and the mine layout. Mines are placed at
    construction by shuffling every cell index with a generator seeded
    from the configuration (or from entropy when no seed is given) and
    taking the first ``mines`` indices.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: int = field(init=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid and lay out the mines."""
        self.seed = self.config.seed if self.config.seed is not None else draw_seed()
        self._init_grid()
        self._place_mines()
        self.recompute_adjacent_mines()
        logger.debug(
            "Created %dx%d board with %d mines (seed %d)",
            self.rows, self.cols, self.config.mines, self.seed,
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def _place_mines(self) -> None:
        """Place mines at the first shuffled cell indices."""
        rng = np.random.default_rng(self.seed)
        order = rng.permutation(self.config.total_cells)
        for index in order[:self.config.mines]:
            row, col = divmod(int(index), self.cols)
            self._grid[row][col].has_mine = True

    def recompute_adjacent_mines(self) -> None:
        """Recalculate adjacent mine counts for every cell."""
        for row, col, cell in self.cells():
            cell.adjacent_mines = self.count_adjacent_mines(row, col)

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for neighbor_row, neighbor_col in self.neighbors(row, col)
            if self._grid[neighbor_row][neighbor_col].has_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Mine Relocation (Mid-level)
    # ========================================================================

    def first_safe_cell(self) -> Position:
        """
        Find the first mine-free cell in row-major order.

        Raises:
            BadGameState: If every cell holds a mine.
        """
        for row, col, cell in self.cells():
            if not cell.has_mine:
                return row, col
        raise BadGameState("No safe cells present in board")

    def relocate_mine(self, row: int, col: int) -> Position:
        """
        Move the mine at (row, col) to the first mine-free cell.

        Every adjacency count is recomputed afterwards. The number of
        mines on the board is unchanged.

        Returns:
            Position the mine was moved to.
        """
        target_row, target_col = self.first_safe_cell()
        self._grid[target_row][target_col].has_mine = True
        self.cell(row, col).has_mine = False
        self.recompute_adjacent_mines()
        logger.debug(
            "Relocated mine from (%d, %d) to (%d, %d)",
            row, col, target_row, target_col,
        )
        return target_row, target_col

    # ========================================================================
    # Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is outside the board.
        """
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} board"
            )
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row, grid_row in enumerate(self._grid):
            for col, cell in enumerate(grid_row):
                yield row, col, cell

    def mine_positions(self) -> List[Position]:
        """List positions of every mine in row-major order."""
        return [(row, col) for row, col, cell in self.cells() if cell.has_mine]

    def packed(self) -> np.ndarray:
        """
        Get the packed byte of every cell.

        Returns:
            2D uint8 array of shape (rows, cols). See ``Cell.to_byte``.
        """
        packed = np.zeros((self.rows, self.cols), dtype=np.uint8)
        for row, col, cell in self.cells():
            packed[row, col] = cell.to_byte()
        return packed
