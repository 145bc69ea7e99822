"""
Text presentation for Minesweeper boards.

Turns cell views and move results into strings for a terminal. Nothing
here mutates a board.
"""
from typing import List

from .board import Board
from .cell import CellState, CellView
from .result import MoveResult


SYMBOLS = {
    CellState.HIDDEN: ".",
    CellState.FLAGGED: "f",
    CellState.QUESTIONED: "?",
    CellState.MINE: "x",
}


def cell_symbol(view: CellView) -> str:
    """Single character for one cell."""
    if view.state == CellState.REVEALED:
        return str(view.adjacent_mines)
    return SYMBOLS[view.state]


def _grid_lines(board: Board, rows: List[List[str]]) -> List[str]:
    """Lay out symbols under a header of column indices."""
    lines = ["\\ " + " ".join(str(x) for x in range(board.width))]
    for y, row in enumerate(rows):
        lines.append(f"{y} " + " ".join(row))
    return lines


def render_board(board: Board, show_mines: bool = False) -> str:
    """
    Render the board as the player sees it.

    Args:
        board: Board to render.
        show_mines: Also show concealed mines (finished games only).

    Returns:
        Multi-line string, one line per row plus a header.
    """
    rows = [
        [cell_symbol(view) for view in row]
        for row in board.views(show_mines=show_mines)
    ]
    return "\n".join(["Board:"] + _grid_lines(board, rows))


def render_solution(board: Board) -> str:
    """
    Render every mine and count, ignoring reveal state and marks.

    Raises:
        RuntimeError: If the game is still in progress.
    """
    rows = [
        ["x" if count is None else str(count) for count in row]
        for row in board.solution()
    ]
    return "\n".join(["Full Board:"] + _grid_lines(board, rows))


def describe(result: MoveResult) -> str:
    """Message to show the player for a move result."""
    return result.message
