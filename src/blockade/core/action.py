"""Action value objects: piece moves, obstacle placements and their results."""

from __future__ import annotations

from dataclasses import dataclass

from blockade.core.enums import Rejection
from blockade.core.types import Coord, coord_to_label, is_on_board


def _label_or_raw(sq: Coord) -> str:
    # Off-board destinations are legal to *attempt*; keep them printable.
    return coord_to_label(sq) if is_on_board(*sq) else str(sq)


@dataclass(frozen=True, slots=True)
class Move:
    """A single orthogonal step of a piece."""

    from_sq: Coord
    to_sq: Coord

    def __str__(self) -> str:
        return f"{_label_or_raw(self.from_sq)}-{_label_or_raw(self.to_sq)}"

    @property
    def from_label(self) -> str:
        return coord_to_label(self.from_sq)

    @property
    def to_label(self) -> str:
        return coord_to_label(self.to_sq)


@dataclass(frozen=True, slots=True)
class ObstaclePlacement:
    """An obstacle dropped on an empty square."""

    square: Coord

    def __str__(self) -> str:
        return f"#{coord_to_label(self.square)}"

    @property
    def label(self) -> str:
        return coord_to_label(self.square)


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome of an attempted action: ``ok`` or a specific rejection."""

    ok: bool
    reason: Rejection | None = None

    @classmethod
    def accepted(cls) -> ActionResult:
        return cls(True)

    @classmethod
    def rejected(cls, reason: Rejection) -> ActionResult:
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.ok
