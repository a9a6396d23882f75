"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termsweeper import Board, BoardConfig, Cell, Game


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def build_game(
    rows: int,
    cols: int,
    mines_at: Iterable[Tuple[int, int]],
    clock: Optional[Callable[[], float]] = None,
) -> Game:
    """Create a game and replace its shuffled layout with fixed mines."""
    mines_at = list(mines_at)
    config = BoardConfig(rows, cols, len(mines_at), seed=0)
    game = Game(config) if clock is None else Game(config, clock=clock)
    for _, _, cell in game.board.cells():
        cell.has_mine = False
    for row, col in mines_at:
        game.board.cell(row, col).has_mine = True
    game.board.recompute_adjacent_mines()
    return game


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Factory for games with a fixed mine layout."""
    return build_game


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock that only moves when told to."""
    return FakeClock(100.0)


@pytest.fixture
def default_game() -> Game:
    """Create a seeded 9x9 game with 10 mines."""
    return Game(BoardConfig(9, 9, 10, seed=1234))


@pytest.fixture
def empty_game() -> Game:
    """Create a game with no mines for flood fill testing."""
    return Game(BoardConfig(5, 5, 0, seed=0))


@pytest.fixture
def walled_game() -> Game:
    """3x5 game with a column of mines splitting it in two."""
    return build_game(3, 5, [(0, 2), (1, 2), (2, 2)])


@pytest.fixture
def chord_game() -> Game:
    """3x3 game with mines in opposite corners."""
    return build_game(3, 3, [(0, 0), (2, 2)])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 9, 10, seed=1234))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
