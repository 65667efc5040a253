"""Board - cell contents on a 9x9 grid."""

from __future__ import annotations

from blockade.core.enums import Cell, Side
from blockade.core.types import BOARD_SIZE, Coord, validate_coord

BoardSnapshot = tuple[tuple[Cell, ...], ...]


class Board:
    """Mutable 81-square board with a cached piece index."""

    __slots__ = ("_cells", "_piece_squares")

    def __init__(self) -> None:
        self._cells: list[list[Cell]] = [
            [Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [side] -> square of that side's piece (None if not placed).
        self._piece_squares: list[Coord | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coord) -> Cell:
        row, col = validate_coord(coord)
        return self._cells[row][col]

    def __setitem__(self, coord: Coord, cell: Cell) -> None:
        row, col = validate_coord(coord)
        old_side = self._cells[row][col].side
        if old_side is not None and self._piece_squares[old_side] == (row, col):
            self._piece_squares[old_side] = None

        side = cell.side
        if side is not None:
            # A side owns exactly one piece; drop the stale copy.
            prev = self._piece_squares[side]
            if prev is not None:
                self._cells[prev[0]][prev[1]] = Cell.EMPTY
            self._piece_squares[side] = (row, col)

        self._cells[row][col] = cell

    def is_empty(self, coord: Coord) -> bool:
        return self[coord] == Cell.EMPTY

    # -- Query helpers ------------------------------------------------------

    def piece_square(self, side: Side) -> Coord:
        """Return the square holding *side*'s piece."""
        sq = self._piece_squares[int(side)]
        if sq is None:
            raise ValueError(f"No {side} piece on board")
        return sq

    def snapshot(self) -> BoardSnapshot:
        """Immutable row-major view of every cell."""
        return tuple(tuple(row) for row in self._cells)

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, from_sq: Coord, to_sq: Coord) -> None:
        """Relocate the piece on *from_sq* to *to_sq*; caller checks legality."""
        cell = self[from_sq]
        if not cell.is_piece:
            raise ValueError(f"No piece on {from_sq!r}")
        self[from_sq] = Cell.EMPTY
        self[to_sq] = cell

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, x_start: Coord, o_start: Coord) -> Board:
        """Empty board with both pieces on their starting squares."""
        b = cls()
        b[x_start] = Cell.PLAYER_X
        b[o_start] = Cell.PLAYER_O
        return b

    def __repr__(self) -> str:
        rows = ["  " + " ".join("987654321")]
        for r, letter in enumerate("ABCDEFGHI"):
            rows.append(f"{letter} {' '.join(str(c) for c in self._cells[r])}")
        return "\n".join(rows)
