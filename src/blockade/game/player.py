"""Per-player mutable state."""

from __future__ import annotations

from dataclasses import dataclass

from blockade.core.enums import Side
from blockade.core.types import Coord


@dataclass
class PlayerState:
    """Position, fixed objective and remaining obstacle budget of one side.

    ``position`` mirrors the board; only the engine mutates it.
    """

    side: Side
    position: Coord
    objective: Coord
    obstacles_remaining: int

    def spend_obstacle(self) -> None:
        if self.obstacles_remaining <= 0:
            raise ValueError(f"{self.side} has no obstacles left")
        self.obstacles_remaining -= 1
