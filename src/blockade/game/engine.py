"""GameEngine — the single source of truth for a blockade match.

Owns the board, both players, the turn pointer and the game phase, and
arbitrates every state transition.  Emits events via simple callbacks so
the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from blockade.core.action import ActionResult, Move, ObstaclePlacement
from blockade.core.board import Board, BoardSnapshot
from blockade.core.enums import Cell, GameResult, Rejection, Side
from blockade.core.errors import GameNotStartedError, GameOverError
from blockade.core.rules import Rules
from blockade.core.types import Coord, as_coord, validate_coord
from blockade.game.interfaces import GameConfig, GamePhase
from blockade.game.player import PlayerState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Side], None]  # move, mover
ObstacleCallback = Callable[[ObstaclePlacement, Side], None]  # placement, placer
TurnCallback = Callable[[Side], None]  # new current player
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_obstacle: list[ObstacleCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine:
    """Board + players + turn, with rule enforcement.

    The engine knows nothing about selection or action mode: callers
    supply fully-formed moves and placements.  Rule violations come back
    as :class:`ActionResult` rejections; misuse (bad coordinates, acting
    before ``new_game`` or after a win) raises.

    Thread-safety: one engine per match, driven from a single thread.
    """

    __slots__ = (
        "_config",
        "_board",
        "_players",
        "_current",
        "_phase",
        "_result",
        "events",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig.standard()
        self._board = Board()
        self._players: dict[Side, PlayerState] = {}
        self._current = Side.X
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self.events = GameEvents()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Initialise (or reset) the match: pieces home, full budgets, X to move."""
        cfg = self._config
        self._board = Board.initial(cfg.x_start, cfg.o_start)
        self._players = {
            Side.X: PlayerState(Side.X, cfg.x_start, cfg.o_start, cfg.obstacle_budget),
            Side.O: PlayerState(Side.O, cfg.o_start, cfg.x_start, cfg.obstacle_budget),
        }
        self._current = Side.X
        self._phase = GamePhase.IN_PROGRESS
        self._result = GameResult.IN_PROGRESS
        _LOGGER.info("New game started; %s to move", self._current)

    # ── Actions ──────────────────────────────────────────────────────────

    def attempt_move(self, from_sq: Coord, to_sq: Coord) -> ActionResult:
        """Step the current player's piece from *from_sq* to *to_sq*.

        Checks run in order: off-board, blocked, occupied-by-opponent,
        not-adjacent.  On rejection nothing changes.  A move that lands on
        the mover's objective ends the game; the turn is *not* advanced
        here (see :meth:`play_move`).
        """
        self._require_started()
        if self.is_game_over:
            return self._reject(Rejection.GAME_OVER, (from_sq, to_sq))

        # Off-board targets are a rule rejection, malformed ones are not.
        move = Move(validate_coord(from_sq), as_coord(to_sq))
        side = self._current
        if self._board[move.from_sq] != Cell.piece_of(side):
            return self._reject(Rejection.NOT_YOUR_PIECE, move)

        reason = Rules.move_rejection(self._board, side, move.from_sq, move.to_sq)
        if reason is not None:
            return self._reject(reason, move)

        self._board.move_piece(move.from_sq, move.to_sq)
        self._players[side].position = self._board.piece_square(side)
        _LOGGER.info(
            "Player %s moved from %s to %s", side, move.from_label, move.to_label
        )
        self._emit_move(move, side)

        if self.check_win(side):
            self._declare_winner(side)
        return ActionResult.accepted()

    def attempt_place_obstacle(self, square: Coord) -> ActionResult:
        """Spend one of the current player's obstacles on an empty *square*."""
        self._require_started()
        if self.is_game_over:
            return self._reject(Rejection.GAME_OVER, square)

        placement = ObstaclePlacement(validate_coord(square))
        side = self._current
        player = self._players[side]

        reason = Rules.obstacle_rejection(
            self._board, player.obstacles_remaining, placement.square
        )
        if reason is not None:
            return self._reject(reason, placement)

        self._board[placement.square] = Cell.OBSTACLE
        player.spend_obstacle()
        _LOGGER.info(
            "Player %s placed an obstacle on %s (%d left)",
            side,
            placement.label,
            player.obstacles_remaining,
        )
        self._emit_obstacle(placement, side)
        return ActionResult.accepted()

    def check_win(self, side: Side) -> bool:
        """Whether *side* stands on its objective.  Pure query."""
        self._require_started()
        return Rules.has_reached(
            self._players[side].position, self._players[side].objective
        )

    def advance_turn(self) -> Side:
        """Hand the turn to the other player and return them."""
        self._require_started()
        if self.is_game_over:
            raise GameOverError(f"Game already won by {self.winner}")
        self._current = self._current.opposite
        for cb in self.events.on_turn_changed:
            cb(self._current)
        return self._current

    # ── Turn helpers ─────────────────────────────────────────────────────

    def play_move(self, from_sq: Coord, to_sq: Coord) -> ActionResult:
        """Attempt a move, then pass the turn unless it won the game."""
        result = self.attempt_move(from_sq, to_sq)
        if result.ok and not self.is_game_over:
            self.advance_turn()
        return result

    def play_obstacle(self, square: Coord) -> ActionResult:
        """Attempt an obstacle placement, then pass the turn."""
        result = self.attempt_place_obstacle(square)
        if result.ok:
            self.advance_turn()
        return result

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> BoardSnapshot:
        """Read-only 9×9 view of every cell."""
        return self._board.snapshot()

    def cell(self, coord: Coord) -> Cell:
        return self._board[coord]

    @property
    def current_player(self) -> Side:
        return self._current

    def player(self, side: Side) -> PlayerState:
        """Copy of *side*'s state; mutating it does not affect the game."""
        self._require_started()
        return replace(self._players[side])

    def obstacles_remaining(self, side: Side) -> int:
        self._require_started()
        return self._players[side].obstacles_remaining

    def legal_destinations(self, from_sq: Coord) -> list[Coord]:
        """Squares the piece on *from_sq* may step to this turn."""
        self._require_started()
        from_sq = validate_coord(from_sq)
        if self.is_game_over or self._board[from_sq] != Cell.piece_of(self._current):
            return []
        return Rules.legal_destinations(self._board, self._current, from_sq)

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def winner(self) -> Side | None:
        return self._result.winner

    @property
    def is_started(self) -> bool:
        return self._phase != GamePhase.NOT_STARTED

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Internal ─────────────────────────────────────────────────────────

    def _require_started(self) -> None:
        if not self.is_started:
            raise GameNotStartedError("Call new_game() first")

    def _reject(self, reason: Rejection, action: object) -> ActionResult:
        _LOGGER.debug("Rejected %s action %s: %s", self._current, action, reason)
        return ActionResult.rejected(reason)

    def _declare_winner(self, side: Side) -> None:
        self._result = GameResult.won_by(side)
        self._phase = GamePhase.GAME_OVER
        _LOGGER.info("Player %s reached the objective and wins", side)
        for cb in self.events.on_game_over:
            cb(self._result)

    def _emit_move(self, move: Move, side: Side) -> None:
        for cb in self.events.on_move:
            cb(move, side)

    def _emit_obstacle(self, placement: ObstaclePlacement, side: Side) -> None:
        for cb in self.events.on_obstacle:
            cb(placement, side)
