"""Click-driven input handling, independent of any widget toolkit.

Tracks the action mode and the armed piece square, turns board clicks
into complete engine calls and describes the outcome in the active
locale.  The engine never sees selection state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from blockade.core.enums import Cell
from blockade.core.types import Coord, coord_to_label
from blockade.game.engine import GameEngine
from blockade.game.interfaces import ActionMode
from blockade.ui.i18n import t


class MessageKind(str, Enum):
    """Severity of a status message; doubles as a style class name."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ClickOutcome:
    """What a click did and what the UI should show next."""

    message: str
    kind: MessageKind = MessageKind.INFO
    selected: Coord | None = None
    valid_targets: tuple[Coord, ...] = field(default_factory=tuple)
    board_changed: bool = False


class InputSession:
    """Presentation-side state machine sitting in front of a :class:`GameEngine`."""

    __slots__ = ("_engine", "_mode", "_armed")

    def __init__(self, engine: GameEngine) -> None:
        self._engine = engine
        self._mode = ActionMode.MOVE
        self._armed: Coord | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def mode(self) -> ActionMode:
        return self._mode

    @property
    def armed(self) -> Coord | None:
        return self._armed

    # ── Commands ─────────────────────────────────────────────────────────

    def reset(self) -> str:
        """Start a fresh game and return the welcome text."""
        self._engine.new_game()
        self._mode = ActionMode.MOVE
        self._armed = None
        return self.welcome()

    def set_mode(self, mode: ActionMode) -> str:
        """Switch action mode, dropping any selection; returns a prompt."""
        self._mode = mode
        self._armed = None
        return self.prompt()

    def click(self, square: Coord) -> ClickOutcome:
        if self._engine.is_game_over:
            return ClickOutcome(self._win_message(), MessageKind.SUCCESS)
        if self._mode == ActionMode.OBSTACLE:
            return self._click_obstacle(square)
        if self._armed is None:
            return self._click_select(square)
        return self._click_destination(square)

    # ── Messages ─────────────────────────────────────────────────────────

    def welcome(self) -> str:
        cfg = self._engine.config
        return t().welcome.format(
            x_start=coord_to_label(cfg.x_start),
            x_goal=coord_to_label(cfg.o_start),
            o_start=coord_to_label(cfg.o_start),
            o_goal=coord_to_label(cfg.x_start),
        )

    def prompt(self) -> str:
        """Mode-specific instruction for the current player."""
        if self._engine.is_game_over:
            return self._win_message()
        s = t()
        player = self._engine.current_player
        turn = s.turn.format(player=player)
        if self._mode == ActionMode.OBSTACLE:
            return s.prompt_obstacle.format(
                turn=turn, count=self._engine.obstacles_remaining(player)
            )
        return s.prompt_move.format(turn=turn)

    # ── Internal ─────────────────────────────────────────────────────────

    def _click_select(self, square: Coord) -> ClickOutcome:
        player = self._engine.current_player
        if self._engine.cell(square) != Cell.piece_of(player):
            return ClickOutcome(t().click_own_piece)

        self._armed = square
        return ClickOutcome(
            t().piece_selected.format(player=player, square=coord_to_label(square)),
            selected=square,
            valid_targets=tuple(self._engine.legal_destinations(square)),
        )

    def _click_destination(self, square: Coord) -> ClickOutcome:
        from_sq = self._armed
        assert from_sq is not None
        player = self._engine.current_player

        result = self._engine.play_move(from_sq, square)
        if not result.ok:
            # The piece stays armed so another destination can be tried.
            assert result.reason is not None
            return ClickOutcome(
                t().rejection(result.reason),
                MessageKind.ERROR,
                selected=from_sq,
                valid_targets=tuple(self._engine.legal_destinations(from_sq)),
            )

        self._armed = None
        if self._engine.is_game_over:
            return ClickOutcome(
                self._win_message(), MessageKind.SUCCESS, board_changed=True
            )
        return ClickOutcome(
            t().moved.format(
                player=player,
                from_sq=coord_to_label(from_sq),
                to_sq=coord_to_label(square),
            ),
            MessageKind.SUCCESS,
            board_changed=True,
        )

    def _click_obstacle(self, square: Coord) -> ClickOutcome:
        player = self._engine.current_player
        result = self._engine.play_obstacle(square)
        if not result.ok:
            assert result.reason is not None
            return ClickOutcome(t().rejection(result.reason), MessageKind.ERROR)
        return ClickOutcome(
            t().placed_obstacle.format(player=player, square=coord_to_label(square)),
            MessageKind.SUCCESS,
            board_changed=True,
        )

    def _win_message(self) -> str:
        return t().wins.format(player=self._engine.winner)
