"""
Command-line front end for termsweeper.

Usage:
    termsweeper [--difficulty {beginner,intermediate,advanced}] [--seed N]
    termsweeper --rows R --cols C --mines M [--seed N]

Commands at the prompt:
    o ROW COL   open a cell, or chord an open one
    f ROW COL   toggle a flag
    m ROW COL   toggle an uncertain mark
    q           quit the round

After each round the same board settings can be replayed; a fixed seed
gives the same layout again.
"""
import argparse
import logging
from typing import List, Optional, Tuple

from .board import BadGameState
from .config import BoardConfig, PRESETS
from .game import Game
from .render import render


logger = logging.getLogger(__name__)

COMMANDS = {
    "o": "reveal",
    "f": "flag_cell",
    "m": "mark_cell",
}
QUIT_COMMANDS = ("q", "quit")

WIN_MESSAGE = "You swept through the minefield safely. You won!"
LOSS_MESSAGE = "You exploded. Game over."


def parse_command(line: str, game: Game) -> Tuple[str, int, int]:
    """
    Parse a prompt line into a Game method name and position.

    Raises:
        ValueError: If the line is malformed or the position is off the
            board.
    """
    parts = line.split()
    if len(parts) != 3 or parts[0].lower() not in COMMANDS:
        raise ValueError("expected 'o|f|m ROW COL'")
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        raise ValueError("row and column must be integers") from None
    if not game.board.is_valid_position(row, col):
        raise ValueError(
            f"position must be within {game.rows} rows and {game.cols} columns"
        )
    return COMMANDS[parts[0].lower()], row, col


def play(game: Game, debug: bool = False) -> None:
    """Run the prompt loop until the game ends or the player quits."""
    while not game.is_over:
        print(render(game, debug))
        try:
            line = input("> ").strip()
        except EOFError:
            line = "q"

        if line.lower() in QUIT_COMMANDS:
            print(f"Seed: {game.seed}")
            return
        try:
            action, row, col = parse_command(line, game)
        except ValueError as error:
            print(f"Invalid command: {error}")
            continue
        getattr(game, action)(row, col)

    print(render(game, debug))
    print(f"Seed: {game.seed}")
    print(WIN_MESSAGE if game.has_won else LOSS_MESSAGE)


def ask_play_again() -> bool:
    """
    Ask whether to start another round until the answer is y or n.

    End of input counts as no.
    """
    while True:
        try:
            answer = input("Play again? (y/n) ").strip().lower()
        except EOFError:
            return False
        if answer in ("y", "n"):
            return answer == "y"


def build_config(args: argparse.Namespace) -> BoardConfig:
    """
    Build the board configuration from parsed arguments.

    A custom board needs rows, columns and mines together; its mine
    count is clamped so one safe cell remains.

    Raises:
        ValueError: If custom board options are incomplete or invalid.
    """
    custom = (args.rows, args.cols, args.mines)
    if any(value is not None for value in custom):
        if any(value is None for value in custom):
            raise ValueError("Cannot specify rows, cols, or mines as blank")
        return BoardConfig.custom(args.rows, args.cols, args.mines, args.seed)

    preset = PRESETS[args.difficulty]
    return BoardConfig(preset.rows, preset.cols, preset.mines, args.seed)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="termsweeper",
        description="Terminal Minesweeper",
    )
    parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        default="beginner",
        help="Preset board size",
    )
    parser.add_argument("--rows", type=int, help="Rows of a custom board")
    parser.add_argument("--cols", type=int, help="Columns of a custom board")
    parser.add_argument("--mines", type=int, help="Mines on a custom board")
    parser.add_argument(
        "--seed", type=int, help="Seed for a reproducible mine layout"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show seed and packed cell dump"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play rounds until the player stops."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = build_config(args)
    except ValueError as error:
        parser.error(str(error))

    try:
        while True:
            play(Game(config), debug=args.debug)
            if not ask_play_again():
                break
    except BadGameState as error:
        logger.error("Board reached an invalid state: %s", error)
        print(f"Error: {error}")
        return 1
    return 0
