"""Shared game-layer types: phases, action modes and rule configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from blockade.core.types import A5, I5, Coord, validate_coord

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a match."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    GAME_OVER = auto()


class ActionMode(IntEnum):
    """What a board click means to the input session."""

    MOVE = auto()
    OBSTACLE = auto()


# ── Rule configuration ───────────────────────────────────────────────────────


DEFAULT_OBSTACLE_BUDGET = 3


@dataclass(frozen=True)
class GameConfig:
    """Immutable rule knobs for one match.

    Args:
        obstacle_budget: Obstacles each player may place.
        x_start: X's starting square (and O's objective).
        o_start: O's starting square (and X's objective).
    """

    obstacle_budget: int = DEFAULT_OBSTACLE_BUDGET
    x_start: Coord = A5
    o_start: Coord = I5

    def __post_init__(self) -> None:
        if self.obstacle_budget < 0:
            raise ValueError(f"obstacle_budget must be >= 0, got {self.obstacle_budget}")
        # Frozen: normalise list squares to tuples so objectives compare equal.
        object.__setattr__(self, "x_start", validate_coord(self.x_start))
        object.__setattr__(self, "o_start", validate_coord(self.o_start))
        if self.x_start == self.o_start:
            raise ValueError("Both pieces cannot start on the same square")

    @classmethod
    def standard(cls) -> GameConfig:
        return cls()
