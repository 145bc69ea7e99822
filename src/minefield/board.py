"""
Board module for Minesweeper game.

Implements the game board with mine seeding, cell revealing, marking
and win/lose bookkeeping. Coordinates are (x, y) = (column, row).
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .cell import Cell, CellView, Mark
from .difficulty import Difficulty
from .result import MoveResult

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        difficulty: Tier controlling mine density.
        seed: Seed for mine placement, None for a fresh game each time.
    """

    width: int = 9
    height: int = 9
    difficulty: Union[Difficulty, str] = Difficulty.EASY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()
        self.difficulty = Difficulty.parse(self.difficulty)

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Moves never raise: they return a
    MoveResult that is truthy only when the board changed.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    layout: Optional[Sequence[Sequence[bool]]] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mine_count: int = 0
    _revealed_count: int = 0
    _lost: bool = False

    def __post_init__(self) -> None:
        """Seed the grid after dataclass creation."""
        if self.layout is None:
            mines = self._draw_mines()
        else:
            mines = np.asarray(self.layout, dtype=bool)
            if mines.shape != (self.height, self.width):
                raise ValueError(
                    f"Layout shape {mines.shape} does not match "
                    f"{self.height}x{self.width} board"
                )
        self._init_grid(mines)
        logger.info(
            "New %dx%d board (%s): %d mines",
            self.width,
            self.height,
            self.config.difficulty.value,
            self._mine_count,
        )

    @classmethod
    def from_layout(cls, mines: Sequence[Sequence[bool]]) -> "Board":
        """
        Build a board from a fixed mine layout instead of random draws.

        Args:
            mines: Rows of booleans, True where a mine sits.

        Returns:
            A fresh board with counts computed from the layout.
        """
        rows = [list(row) for row in mines]
        if not rows or not rows[0]:
            raise ValueError("Layout must have at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Layout rows must all have the same length")
        return cls(BoardConfig(width, len(rows)), layout=rows)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _draw_mines(self) -> np.ndarray:
        """Draw one value in [0, 100) per cell; above threshold is a mine."""
        rng = np.random.default_rng(self.config.seed)
        draws = rng.integers(0, 100, size=(self.height, self.width))
        return draws > self.config.difficulty.threshold

    def _init_grid(self, mines: np.ndarray) -> None:
        """Create cells, then count neighbours once every mine is placed."""
        self._grid = [
            [Cell(is_mine=bool(mines[y, x])) for x in range(self.width)]
            for y in range(self.height)
        ]
        self._calculate_adjacent_mines()
        self._mine_count = int(np.count_nonzero(mines))
        self._revealed_count = 0
        self._lost = False

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for y in range(self.height):
            for x in range(self.width):
                self._grid[y][x].adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for nx, ny in self._neighbors(x, y) if self._grid[ny][nx].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yield in-bounds neighbours in row-major order.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Yields:
            (x, y) tuples for each of the up to 8 surrounding cells.
        """
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    yield new_x, new_y

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> MoveResult:
        """
        Reveal the cell at column x, row y.

        A blank cell opens its whole blank region plus the numbered
        border. Revealing a mine loses the game.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            MoveResult.OK if the board changed, otherwise the rejection.
        """
        result = self._check_reveal(x, y)
        if not result:
            logger.debug("reveal(%d, %d) rejected: %s", x, y, result.message)
            return result

        self._flood_reveal(x, y)
        if self._grid[y][x].is_mine:
            self._lost = True
            logger.info("Mine revealed at (%d, %d): game lost", x, y)
        elif self.is_won:
            logger.info("All %d safe cells revealed: game won", self.safe_cells)
        return result

    def _check_reveal(self, x: int, y: int) -> MoveResult:
        """Check, in order, whether a cell can be revealed."""
        if self.is_finished:
            return MoveResult.GAME_OVER
        if not self._is_valid_position(x, y):
            return MoveResult.OUT_OF_BOUNDS
        cell = self._grid[y][x]
        if cell.mark is not Mark.NONE:
            return MoveResult.MARKED
        if cell.revealed:
            return MoveResult.ALREADY_REVEALED
        return MoveResult.OK

    def _reveal_cell(self, x: int, y: int) -> Cell:
        """Reveal a single cell and count it if it is safe."""
        cell = self._grid[y][x]
        cell.reveal()
        if not cell.is_mine:
            self._revealed_count += 1
        return cell

    def _flood_reveal(self, x: int, y: int) -> None:
        """
        Reveal the root, then spread through connected blank cells.

        Uses an explicit stack; the revealed flag doubles as the visited
        set so each cell is pushed at most once.
        """
        if not self._reveal_cell(x, y).is_blank:
            return

        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            for nx, ny in self._neighbors(cx, cy):
                neighbor = self._grid[ny][nx]
                if neighbor.is_mine or not neighbor.is_hidden:
                    continue
                self._reveal_cell(nx, ny)
                if neighbor.is_blank:
                    stack.append((nx, ny))

    def set_flag(self, x: int, y: int, mark: Mark = Mark.FLAGGED) -> MoveResult:
        """
        Put a mark on a concealed cell.

        Mark.NONE clears an existing mark. Marks have no effect on
        winning.

        Args:
            x: Column index.
            y: Row index.
            mark: Mark to set.

        Returns:
            MoveResult.OK if the mark changed, otherwise the rejection.
        """
        result = self._check_mark(x, y, mark)
        if not result:
            logger.debug("set_flag(%d, %d) rejected: %s", x, y, result.message)
            return result
        self._grid[y][x].set_mark(mark)
        return result

    def _check_mark(self, x: int, y: int, mark: Mark) -> MoveResult:
        """Check, in order, whether a cell can take the given mark."""
        if not self._is_valid_position(x, y):
            return MoveResult.OUT_OF_BOUNDS
        cell = self._grid[y][x]
        if cell.revealed:
            return MoveResult.ALREADY_REVEALED
        if cell.mark is mark:
            return MoveResult.SAME_MARK
        return MoveResult.OK

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return self._mine_count

    @property
    def revealed_count(self) -> int:
        """Number of safe cells revealed so far."""
        return self._revealed_count

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.width * self.height - self._mine_count

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._lost:
            return GameState.LOST
        if self._revealed_count == self.safe_cells:
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_finished(self) -> bool:
        """Check if game is won or lost."""
        return self.game_state != GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._lost

    def _cell(self, x: int, y: int) -> Optional[Cell]:
        """Get the live cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def view(self, x: int, y: int, show_mines: bool = False) -> CellView:
        """
        Describe one cell for a renderer.

        Args:
            x: Column index.
            y: Row index.
            show_mines: Expose concealed mines; only allowed once the
                game is finished.

        Raises:
            IndexError: If the position is off the board.
            RuntimeError: If show_mines is requested mid-game.
        """
        if not self._is_valid_position(x, y):
            raise IndexError(f"Cell ({x}, {y}) is off the board")
        self._check_show_mines(show_mines)
        return self._grid[y][x].view(show_mines)

    def views(self, show_mines: bool = False) -> List[List[CellView]]:
        """Describe every cell, one list per row."""
        self._check_show_mines(show_mines)
        return [[cell.view(show_mines) for cell in row] for row in self._grid]

    def solution(self) -> List[List[Optional[int]]]:
        """
        Full layout for a finished game: None for a mine, else its count.

        Raises:
            RuntimeError: If the game is still in progress.
        """
        self._check_show_mines(True)
        return [
            [None if cell.is_mine else cell.adjacent_mines for cell in row]
            for row in self._grid
        ]

    def _check_show_mines(self, show_mines: bool) -> None:
        if show_mines and self.is_playing:
            raise RuntimeError("Mines can only be shown once the game is over")

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for automated players.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                -3 = questioned
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for y in range(self.height):
            for x in range(self.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells a reveal would accept.

        Returns:
            List of (x, y) positions, empty once the game is over.
        """
        if self.is_finished:
            return []
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self._grid[y][x].is_hidden
        ]


def new_board(
    width: int,
    height: int,
    difficulty: Union[Difficulty, str] = Difficulty.EASY,
    seed: Optional[int] = None,
) -> Board:
    """Create a randomly seeded board."""
    return Board(BoardConfig(width, height, difficulty, seed))
