"""
Game module for Minesweeper.

Wraps a Board with the session state of one round: open and flag
counters, the elapsed-time clock, and win/loss detection. This is the
command/query interface a presentation layer drives.
"""
import logging
import time
from enum import Enum, auto
from typing import Callable, Optional

import numpy as np

from .board import Board
from .cell import Cell
from .config import BoardConfig
from .timer import Timer


logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One round of Minesweeper.

    Commands return True when they changed the board and False when
    they were a no-op. Once the game is won or lost every command is a
    no-op. Coordinates outside the board raise IndexError; keeping the
    cursor in range is the caller's job.

    Win detection is left to the caller: call ``check_win`` after each
    ``open_cell`` or ``chord_cell``, or use ``reveal`` which does both.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize a new round.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            clock: Monotonic time source for the elapsed-time clock.
        """
        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self._timer = Timer(clock)
        self._state = GameState.PLAYING
        self._opened_count = 0
        self._flagged_count = 0

    # ========================================================================
    # Commands
    # ========================================================================

    def open_cell(self, row: int, col: int) -> bool:
        """
        Open a cell, flood-filling through cells with no adjacent mines.

        The first cell opened in a round never loses: if it holds a
        mine, that mine is moved to the first mine-free cell and the
        adjacency counts are rebuilt. Any later mine ends the game.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            True if at least one cell was opened.
        """
        cell = self.board.cell(row, col)
        if self.is_over or not cell.is_hidden:
            return False

        if self._opened_count == 0:
            self._timer.start()

        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            current = self.board.cell(current_row, current_col)
            if not current.open():
                continue
            self._opened_count += 1

            if current.has_mine:
                if self._opened_count == 1:
                    self.board.relocate_mine(current_row, current_col)
                else:
                    self._lose(current_row, current_col)
                    return True

            if current.adjacent_mines == 0:
                pending.extend(self.board.neighbors(current_row, current_col))
        return True

    def chord_cell(self, row: int, col: int) -> bool:
        """
        Open every neighbor of an open cell whose flags match its number.

        Each neighbor goes through ``open_cell``, so a misplaced flag
        can still lose the game.

        Returns:
            True if any neighbor was opened.
        """
        cell = self.board.cell(row, col)
        if self.is_over or not cell.is_open:
            return False
        if self._count_adjacent_flags(row, col) != cell.adjacent_mines:
            return False

        opened_any = False
        for neighbor_row, neighbor_col in self.board.neighbors(row, col):
            if self.open_cell(neighbor_row, neighbor_col):
                opened_any = True
        return opened_any

    def flag_cell(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a closed cell, clearing any mark.

        Returns:
            True if the flag was toggled.
        """
        cell = self.board.cell(row, col)
        if self.is_over:
            return False
        return self._toggle_flag(cell)

    def mark_cell(self, row: int, col: int) -> bool:
        """
        Toggle the uncertain mark on a cell, clearing any flag.

        Marking an open cell is accepted but changes nothing.

        Returns:
            True if the mark was toggled.
        """
        cell = self.board.cell(row, col)
        if self.is_over:
            return False
        had_flag = cell.has_flag
        if not cell.toggle_mark():
            return False
        if had_flag:
            self._flagged_count -= 1
        return True

    def check_win(self, row: int, col: int) -> bool:
        """
        Check for a win after acting on (row, col).

        The game is won when every safe cell is open and the cell just
        acted on is not a mine. On a win every mine still unflagged is
        flagged.

        Returns:
            True if the game has been won.
        """
        cell = self.board.cell(row, col)
        if self.is_over:
            return self.has_won

        all_safe_open = (
            self._opened_count + self.mine_count == self.config.total_cells
        )
        if not all_safe_open or cell.has_mine:
            return False

        self._state = GameState.WON
        self._timer.stop()
        for mine_row, mine_col in self.board.mine_positions():
            mine = self.board.cell(mine_row, mine_col)
            if not mine.has_flag:
                self._toggle_flag(mine)
        logger.debug("Game won in %.3f seconds", self.elapsed_time())
        return True

    def reveal(self, row: int, col: int) -> bool:
        """
        Chord an open cell or open a closed one, then check for a win.

        Returns:
            True if the command changed the board.
        """
        if self.board.cell(row, col).is_open:
            changed = self.chord_cell(row, col)
        else:
            changed = self.open_cell(row, col)
        self.check_win(row, col)
        return changed

    def _toggle_flag(self, cell: Cell) -> bool:
        """Toggle a flag and keep the flag counter in step."""
        if not cell.toggle_flag():
            return False
        self._flagged_count += 1 if cell.has_flag else -1
        return True

    def _lose(self, row: int, col: int) -> None:
        """End the game after opening the mine at (row, col)."""
        self._state = GameState.LOST
        self._timer.stop()
        logger.debug("Mine opened at (%d, %d), game lost", row, col)

    def _count_adjacent_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to position."""
        return sum(
            1 for neighbor_row, neighbor_col in self.board.neighbors(row, col)
            if self.board.cell(neighbor_row, neighbor_col).has_flag
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return self.config.mines

    @property
    def seed(self) -> int:
        """Seed the mine layout was shuffled with."""
        return self.board.seed

    @property
    def flags(self) -> int:
        """Number of cells currently flagged."""
        return self._flagged_count

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        return self.mine_count - self._flagged_count

    @property
    def opened_count(self) -> int:
        """Number of cells currently open."""
        return self._opened_count

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state != GameState.PLAYING

    @property
    def has_won(self) -> bool:
        """Check if the game was won."""
        return self._state == GameState.WON

    def elapsed_time(self) -> float:
        """Seconds since the first cell was opened, frozen at game end."""
        return self._timer.elapsed()

    # ========================================================================
    # Cell Queries
    # ========================================================================

    def has_mine(self, row: int, col: int) -> bool:
        return self.board.cell(row, col).has_mine

    def is_open(self, row: int, col: int) -> bool:
        return self.board.cell(row, col).is_open

    def has_flag(self, row: int, col: int) -> bool:
        return self.board.cell(row, col).has_flag

    def has_mark(self, row: int, col: int) -> bool:
        return self.board.cell(row, col).has_mark

    def adjacent_mine_count(self, row: int, col: int) -> int:
        return self.board.cell(row, col).adjacent_mines

    def packed(self) -> np.ndarray:
        """Packed byte of every cell, for debug dumps only."""
        return self.board.packed()
