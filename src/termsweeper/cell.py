"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/opened/flagged/marked) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Packed byte layout, from MSB to LSB: mine, opened, flagged, marked,
# then four bits of adjacent mine count.
MINE_BIT = 1 << 7
OPEN_BIT = 1 << 6
FLAG_BIT = 1 << 5
MARK_BIT = 1 << 4
COUNT_MASK = 0b1111


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    OPENED = auto()
    FLAGGED = auto()
    MARKED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Opened, flagged and marked are states of one field, so no two of
    them can hold at once.

    Attributes:
        has_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state.
    """

    has_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Open this cell.

        Returns:
            True if cell was opened, False if already open, flagged
            or marked.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.OPENED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell, clearing any mark first.

        Returns:
            True if flag was toggled, False if cell is open.
        """
        if self.state == CellState.OPENED:
            return False
        if self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN
        else:
            self.state = CellState.FLAGGED
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle the uncertain mark on this cell, clearing any flag first.

        Returns:
            True if mark was toggled, False if cell is open.
        """
        if self.state == CellState.OPENED:
            return False
        if self.state == CellState.MARKED:
            self.state = CellState.HIDDEN
        else:
            self.state = CellState.MARKED
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is closed with neither flag nor mark."""
        return self.state == CellState.HIDDEN

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.state == CellState.OPENED

    @property
    def has_flag(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def has_mark(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    def to_byte(self) -> int:
        """
        Pack the cell into a single byte.

        Returns:
            Integer in [0, 255] laid out as mine, opened, flagged,
            marked bits followed by the adjacent mine count.
        """
        value = self.adjacent_mines & COUNT_MASK
        if self.has_mine:
            value |= MINE_BIT
        if self.state == CellState.OPENED:
            value |= OPEN_BIT
        elif self.state == CellState.FLAGGED:
            value |= FLAG_BIT
        elif self.state == CellState.MARKED:
            value |= MARK_BIT
        return value
