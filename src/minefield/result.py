"""
Move results returned by board actions.

Every reveal or mark request yields a MoveResult instead of raising, so
callers can branch on the reason without parsing text.
"""
from enum import Enum


class MoveResult(Enum):
    """Outcome of a reveal or mark request."""

    OK = "ok"
    GAME_OVER = "game_over"
    OUT_OF_BOUNDS = "out_of_bounds"
    MARKED = "marked"
    ALREADY_REVEALED = "already_revealed"
    SAME_MARK = "same_mark"

    def __bool__(self) -> bool:
        return self is MoveResult.OK

    @property
    def accepted(self) -> bool:
        """Check if the move changed the board."""
        return self is MoveResult.OK

    @property
    def message(self) -> str:
        """Human-readable reason for this result."""
        return _MESSAGES[self]


_MESSAGES = {
    MoveResult.OK: "OK",
    MoveResult.GAME_OVER: "The game is already over!",
    MoveResult.OUT_OF_BOUNDS: "Tile out of bounds!",
    MoveResult.MARKED: "Cannot reveal a flagged tile!",
    MoveResult.ALREADY_REVEALED: "Tile is already revealed!",
    MoveResult.SAME_MARK: "Tile already holds this flag!",
}
