"""Legality rules for moves and obstacle placements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blockade.core.enums import Cell, Rejection, Side
from blockade.core.types import Coord, all_coords, is_on_board, manhattan_distance

if TYPE_CHECKING:
    from blockade.core.board import Board


class Rules:
    """Static rule-checker operating on a :class:`Board`.

    Each check returns ``None`` when the action is legal, otherwise the
    first failing :class:`Rejection`.  Checks run in a fixed order so the
    reported reason is deterministic.
    """

    @staticmethod
    def move_rejection(
        board: Board, side: Side, from_sq: Coord, to_sq: Coord
    ) -> Rejection | None:
        """Why *side* may not step from *from_sq* to *to_sq*, if anything."""
        if not is_on_board(*to_sq):
            return Rejection.OFF_BOARD

        target = board[to_sq]
        if target == Cell.OBSTACLE:
            return Rejection.BLOCKED
        if target == Cell.piece_of(side.opposite):
            return Rejection.OCCUPIED_BY_OPPONENT

        if manhattan_distance(from_sq, to_sq) != 1:
            return Rejection.NOT_ADJACENT

        return None

    @staticmethod
    def obstacle_rejection(
        board: Board, obstacles_remaining: int, square: Coord
    ) -> Rejection | None:
        """Why an obstacle may not go on *square*, if anything.

        There is no path-existence rule: an obstacle may wall a piece in.
        """
        if obstacles_remaining <= 0:
            return Rejection.NO_OBSTACLES_LEFT
        if not board.is_empty(square):
            return Rejection.OCCUPIED
        return None

    @staticmethod
    def legal_destinations(board: Board, side: Side, from_sq: Coord) -> list[Coord]:
        """Every square *side* could step to from *from_sq*."""
        return [
            sq
            for sq in all_coords()
            if Rules.move_rejection(board, side, from_sq, sq) is None
        ]

    @staticmethod
    def has_reached(position: Coord, objective: Coord) -> bool:
        return position == objective
