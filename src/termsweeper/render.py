"""
Plain-text rendering of a Minesweeper game.

Turns the query side of a Game into glyph rows, a status header and a
hex dump of the packed cells.
"""
from typing import List

from .game import Game


# ============================================================================
# Glyphs
# ============================================================================

HIDDEN = "."
EMPTY = " "
MINE = "@"
FLAG = "P"
WRONG_FLAG = "X"
MARK = "?"


def cell_glyph(game: Game, row: int, col: int) -> str:
    """
    Pick the character shown for one cell.

    After a loss every unopened mine is shown, and after either ending
    a flag on a safe cell is shown as wrong.
    """
    if game.is_open(row, col):
        if game.has_mine(row, col):
            return MINE
        count = game.adjacent_mine_count(row, col)
        return str(count) if count > 0 else EMPTY
    if game.is_over and not game.has_won and game.has_mine(row, col):
        return MINE
    if game.has_flag(row, col):
        if game.is_over and not game.has_mine(row, col):
            return WRONG_FLAG
        return FLAG
    if game.has_mark(row, col):
        return MARK
    return HIDDEN


def format_time(seconds: float) -> str:
    """
    Format elapsed time as [m:]ss.mmm.

    Minutes are only shown from one minute on.
    """
    millis = int(round(seconds * 1000))
    minutes, millis = divmod(millis, 60000)
    secs, millis = divmod(millis, 1000)
    if minutes:
        return f"{minutes}:{secs:02d}.{millis:03d}"
    return f"{secs}.{millis:03d}"


def render_board(game: Game) -> str:
    """Render the grid with column and row indices."""
    width = len(str(game.rows - 1))
    header = " " * (width + 1) + " ".join(
        str(col % 10) for col in range(game.cols)
    )
    lines = [header]
    for row in range(game.rows):
        glyphs = " ".join(cell_glyph(game, row, col) for col in range(game.cols))
        lines.append(f"{row:>{width}} {glyphs}")
    return "\n".join(lines)


def render_status(game: Game) -> str:
    """Render the mine counter and timer header."""
    return (
        f"Mines remaining: {game.mines_remaining}\n"
        f"Time: {format_time(game.elapsed_time())}"
    )


def render_debug(game: Game) -> str:
    """Render the packed byte of every cell in hex."""
    lines: List[str] = []
    for packed_row in game.packed():
        lines.append(" ".join(f"{int(value):02x}" for value in packed_row))
    return "\n".join(lines)


def render(game: Game, debug: bool = False) -> str:
    """Render status, board and optionally the hex dump."""
    parts = [render_status(game), render_board(game)]
    if debug:
        parts.append(f"Seed: {game.seed}")
        parts.append(render_debug(game))
    return "\n\n".join(parts)
