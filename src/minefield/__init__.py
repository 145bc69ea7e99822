"""
Minesweeper board engine.

Provides the board state machine, cell state, move results, text
rendering and a Gymnasium wrapper.
"""
from .cell import Cell, CellState, CellView, Mark
from .difficulty import Difficulty, MINE_THRESHOLDS
from .result import MoveResult
from .board import Board, BoardConfig, GameState, new_board
from .render import render_board, render_solution, describe
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Mark",
    "Difficulty",
    "MINE_THRESHOLDS",
    "MoveResult",
    "Board",
    "BoardConfig",
    "GameState",
    "new_board",
    "render_board",
    "render_solution",
    "describe",
    "MinesweeperEnv",
]
