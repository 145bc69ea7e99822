"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, Difficulty, Mark


# ============================================================================
# Layouts
# ============================================================================

# Mines at (0, 0), (3, 0) and (1, 2)
MIXED_LAYOUT = [
    [True, False, False, True],
    [False, False, False, False],
    [False, True, False, False],
]

# Column x=2 is solid mines, splitting the board in two
WALL_LAYOUT = [
    [False, False, True, False, False],
    [False, False, True, False, False],
    [False, False, True, False, False],
]


def layout_with_mines(width: int, height: int, *mines: tuple) -> list:
    """Build a layout with mines at the given (x, y) positions."""
    return [[(x, y) in mines for x in range(width)] for y in range(height)]


def cell_at(board: Board, x: int, y: int) -> Cell:
    """Live cell behind the board's read surface."""
    return board._cell(x, y)


def mine_layout(board: Board) -> list:
    """Where the mines sit, one list of booleans per row."""
    return [
        [cell_at(board, x, y).is_mine for x in range(board.width)]
        for y in range(board.height)
    ]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 easy board with a fixed seed."""
    return Board(BoardConfig(9, 9, Difficulty.EASY, seed=1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board.from_layout(layout_with_mines(5, 5))


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.from_layout(layout_with_mines(3, 3, (1, 1)))


@pytest.fixture
def mixed_board() -> Board:
    """Create a 4x3 board with three mines."""
    return Board.from_layout(MIXED_LAYOUT)


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x3 board split by a column of mines."""
    return Board.from_layout(WALL_LAYOUT)


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
    return Cell(is_mine=True)


@pytest.fixture
def flagged_cell() -> Cell:
    """Create a flagged cell."""
    cell = Cell(adjacent_mines=2)
    cell.set_mark(Mark.FLAGGED)
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, Difficulty.MEDIUM, seed=7)
