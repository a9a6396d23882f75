"""
Terminal Minesweeper.

Provides the board engine (cells, mine layout, game state machine) and
a plain-text front end that drives it.
"""
from .cell import Cell, CellState
from .config import BoardConfig, BEGINNER, INTERMEDIATE, ADVANCED, PRESETS
from .board import Board, BadGameState
from .timer import Timer
from .game import Game, GameState

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "ADVANCED",
    "PRESETS",
    "Board",
    "BadGameState",
    "Timer",
    "Game",
    "GameState",
]
