"""Coordinate type alias and label helpers.

Board layout (row letter, reversed column digit)::

        9  8  7  6  5  4  3  2  1
    A  (0,0)                (0,8)
    B
    ...
    I  (8,0)                (8,8)

Rows ``A``..``I`` map to indices 0..8 top to bottom.  Column digits run
the other way: index 0 is ``'9'`` and index 8 is ``'1'``.
"""

from __future__ import annotations

from typing import TypeAlias

from blockade.core.errors import InvalidCoordinateError

Coord: TypeAlias = tuple[int, int]  # (row, col), each 0–8

BOARD_SIZE = 9

_ROW_LETTERS = "ABCDEFGHI"
_COL_DIGITS = "987654321"  # indexed by column


def is_on_board(row: int, col: int) -> bool:
    """Check whether (row, col) lies on the 9×9 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def as_coord(coord: object) -> Coord:
    """Return *coord* as a ``(row, col)`` tuple of ints, on the board or not."""
    try:
        row, col = coord  # type: ignore[misc]
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Invalid coordinate: {coord!r}") from None
    if not (isinstance(row, int) and isinstance(col, int)):
        raise InvalidCoordinateError(f"Invalid coordinate: {coord!r}")
    return row, col


def validate_coord(coord: Coord) -> Coord:
    """Return *coord* as a tuple, or raise if it is not a board square."""
    row, col = as_coord(coord)
    if not is_on_board(row, col):
        raise InvalidCoordinateError(f"Coordinate off the board: {coord!r}")
    return row, col


def coord_to_label(coord: Coord) -> str:
    """Human-readable label, e.g. (0, 4) → 'A5', (8, 0) → 'I9'."""
    row, col = validate_coord(coord)
    return _ROW_LETTERS[row] + _COL_DIGITS[col]


def label_to_coord(label: str) -> Coord:
    """Parse a square label, e.g. 'A5' → (0, 4).  The letter is case-insensitive."""
    if len(label) != 2:
        raise InvalidCoordinateError(f"Invalid square label: {label!r}")
    letter, digit = label[0].upper(), label[1]
    if letter not in _ROW_LETTERS or digit not in _COL_DIGITS:
        raise InvalidCoordinateError(f"Invalid square label: {label!r}")
    return _ROW_LETTERS.index(letter), _COL_DIGITS.index(digit)


def manhattan_distance(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def all_coords() -> list[Coord]:
    """Every board square in row-major order."""
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named squares ───────────────────────────────────────────────────────────

A5: Coord = (0, 4)  # X starts here, O's objective
I5: Coord = (8, 4)  # O starts here, X's objective
