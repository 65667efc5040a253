"""Core domain layer — pure blockade rules with zero external dependencies.

Quick start::

    from blockade.core import Board, Rules, Side, A5, I5, label_to_coord

    board = Board.initial(A5, I5)
    reason = Rules.move_rejection(board, Side.X, A5, label_to_coord("B5"))
    assert reason is None
"""

from blockade.core.action import ActionResult, Move, ObstaclePlacement
from blockade.core.board import Board, BoardSnapshot
from blockade.core.enums import Cell, GameResult, Rejection, Side
from blockade.core.errors import (
    BlockadeError,
    GameNotStartedError,
    GameOverError,
    InvalidCoordinateError,
)
from blockade.core.rules import Rules
from blockade.core.types import (
    A5,
    BOARD_SIZE,
    I5,
    Coord,
    coord_to_label,
    is_on_board,
    label_to_coord,
)

__all__ = [
    # Enums
    "Cell",
    "GameResult",
    "Rejection",
    "Side",
    # Types / helpers
    "A5",
    "BOARD_SIZE",
    "I5",
    "Coord",
    "coord_to_label",
    "is_on_board",
    "label_to_coord",
    # Domain objects
    "ActionResult",
    "Board",
    "BoardSnapshot",
    "Move",
    "ObstaclePlacement",
    "Rules",
    # Errors
    "BlockadeError",
    "GameNotStartedError",
    "GameOverError",
    "InvalidCoordinateError",
]
