"""
Unit tests for Cell class.

Tests cell state management, open/flag/mark behavior, and byte packing.
"""
from termsweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.has_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_open is False
        assert cell.has_flag is False
        assert cell.has_mark is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Open Tests
# ============================================================================

class TestCellOpen:
    """Test cell open behavior."""

    def test_open_hidden_cell(self, hidden_cell: Cell) -> None:
        """Opening a hidden cell should succeed."""
        assert hidden_cell.open() is True
        assert hidden_cell.is_open is True

    def test_open_already_open_returns_false(self, hidden_cell: Cell) -> None:
        """Opening an open cell should fail."""
        hidden_cell.open()
        assert hidden_cell.open() is False

    def test_open_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot open a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.open() is False
        assert hidden_cell.has_flag is True

    def test_open_marked_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot open a marked cell."""
        hidden_cell.toggle_mark()
        assert hidden_cell.open() is False
        assert hidden_cell.has_mark is True


# ============================================================================
# Cell Flag and Mark Tests
# ============================================================================

class TestCellFlagAndMark:
    """Test flag and mark toggling."""

    def test_flag_toggles_on_and_off(self, hidden_cell: Cell) -> None:
        """Flagging twice should return the cell to hidden."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.has_flag is True
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_hidden is True

    def test_mark_toggles_on_and_off(self, hidden_cell: Cell) -> None:
        """Marking twice should return the cell to hidden."""
        assert hidden_cell.toggle_mark() is True
        assert hidden_cell.has_mark is True
        assert hidden_cell.toggle_mark() is True
        assert hidden_cell.is_hidden is True

    def test_flag_replaces_mark(self, hidden_cell: Cell) -> None:
        """Flagging a marked cell clears the mark."""
        hidden_cell.toggle_mark()
        hidden_cell.toggle_flag()
        assert hidden_cell.has_flag is True
        assert hidden_cell.has_mark is False

    def test_mark_replaces_flag(self, hidden_cell: Cell) -> None:
        """Marking a flagged cell clears the flag."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_mark()
        assert hidden_cell.has_mark is True
        assert hidden_cell.has_flag is False

    def test_open_cell_cannot_be_flagged_or_marked(
        self, hidden_cell: Cell
    ) -> None:
        """Open cells ignore flag and mark toggles."""
        hidden_cell.open()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.toggle_mark() is False
        assert hidden_cell.is_open is True


# ============================================================================
# Cell Packing Tests
# ============================================================================

class TestCellPacking:
    """Test the packed byte form of a cell."""

    def test_hidden_empty_cell_packs_to_zero(self, hidden_cell: Cell) -> None:
        """A blank cell packs to 0."""
        assert hidden_cell.to_byte() == 0

    def test_mine_bit_is_msb(self, mine_cell: Cell) -> None:
        """Mine is stored in bit 7."""
        assert mine_cell.to_byte() == 0x80

    def test_open_numbered_cell(self) -> None:
        """Open flag in bit 6, count in the low nibble."""
        cell = Cell(adjacent_mines=3)
        cell.open()
        assert cell.to_byte() == 0x43

    def test_flagged_mine_with_count(self) -> None:
        """Flag in bit 5 combines with mine and count."""
        cell = Cell(has_mine=True, adjacent_mines=8)
        cell.toggle_flag()
        assert cell.to_byte() == 0xA8

    def test_marked_cell(self, hidden_cell: Cell) -> None:
        """Mark is stored in bit 4."""
        hidden_cell.toggle_mark()
        assert hidden_cell.to_byte() == 0x10
