"""Core enumerations for the blockade domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """Player identity.  ``X`` moves first."""

    X = 0
    O = 1  # noqa: E741

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as int by default; messages want the symbol.
        return format(self.name, format_spec)


class Cell(IntEnum):
    """Content of a single board square."""

    EMPTY = 0
    PLAYER_X = 1
    PLAYER_O = 2
    OBSTACLE = 3

    @classmethod
    def piece_of(cls, side: Side) -> Cell:
        return cls.PLAYER_X if side == Side.X else cls.PLAYER_O

    @property
    def side(self) -> Side | None:
        """Owner of the piece on this cell, or None for empty/obstacle."""
        if self == Cell.PLAYER_X:
            return Side.X
        if self == Cell.PLAYER_O:
            return Side.O
        return None

    @property
    def is_piece(self) -> bool:
        return self in (Cell.PLAYER_X, Cell.PLAYER_O)

    def __str__(self) -> str:
        return _CELL_CHARS[self]


_CELL_CHARS: dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.PLAYER_X: "X",
    Cell.PLAYER_O: "O",
    Cell.OBSTACLE: "#",
}


class Rejection(str, Enum):
    """Reason an attempted action was refused."""

    # Move checks, in evaluation order
    OFF_BOARD = "off-board"
    BLOCKED = "blocked"
    OCCUPIED_BY_OPPONENT = "occupied-by-opponent"
    NOT_ADJACENT = "not-adjacent"

    # Obstacle checks, in evaluation order
    NO_OBSTACLES_LEFT = "no-obstacles-left"
    OCCUPIED = "occupied"

    # Turn / lifecycle
    NOT_YOUR_PIECE = "not-your-piece"
    GAME_OVER = "game-over"

    def __str__(self) -> str:
        return self.value


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    X_WINS = 1
    O_WINS = 2

    @classmethod
    def won_by(cls, side: Side) -> GameResult:
        return cls.X_WINS if side == Side.X else cls.O_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.X_WINS:
            return Side.X
        if self == GameResult.O_WINS:
            return Side.O
        return None
