"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/number), reveal state and player mark.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import NamedTuple, Optional


# ============================================================================
# Constants
# ============================================================================

class Mark(Enum):
    """Player annotations on a concealed cell."""

    NONE = auto()
    FLAGGED = auto()
    QUESTIONED = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    QUESTIONED = auto()
    REVEALED = auto()
    MINE = auto()


class CellView(NamedTuple):
    """What a renderer may know about one cell."""

    state: CellState
    adjacent_mines: Optional[int] = None


_MARK_STATES = {
    Mark.FLAGGED: CellState.FLAGGED,
    Mark.QUESTIONED: CellState.QUESTIONED,
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        revealed: Whether the cell has been uncovered.
        mark: Player mark, only meaningful while concealed.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    revealed: bool = False
    mark: Mark = Mark.NONE

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or marked.
        """
        if self.revealed or self.mark is not Mark.NONE:
            return False
        self.revealed = True
        return True

    def set_mark(self, mark: Mark) -> bool:
        """
        Set the mark on this cell.

        Returns:
            True if the mark changed, False if cell is revealed or already
            holds this mark.
        """
        if self.revealed or self.mark is mark:
            return False
        self.mark = mark
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is concealed and unmarked."""
        return not self.revealed and self.mark is Mark.NONE

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.revealed

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.mark is Mark.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell is marked with a question."""
        return self.mark is Mark.QUESTIONED

    @property
    def is_blank(self) -> bool:
        """Check if cell is a non-mine with no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    def view(self, show_mine: bool = False) -> CellView:
        """
        Describe this cell for rendering.

        Marks win over everything else, and a concealed mine is only
        exposed when show_mine is set.
        """
        if self.mark is not Mark.NONE:
            return CellView(_MARK_STATES[self.mark])
        if self.is_mine and (self.revealed or show_mine):
            return CellView(CellState.MINE)
        if not self.revealed:
            return CellView(CellState.HIDDEN)
        return CellView(CellState.REVEALED, self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for automated players.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.mark is Mark.FLAGGED:
            return -2
        if self.mark is Mark.QUESTIONED:
            return -3
        if not self.revealed:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
