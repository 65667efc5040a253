"""Tests for GameEngine — rules enforcement, turns and win detection."""

import logging

import pytest

from blockade.core.action import Move, ObstaclePlacement
from blockade.core.enums import Cell, GameResult, Rejection, Side
from blockade.core.errors import GameNotStartedError, GameOverError, InvalidCoordinateError
from blockade.core.types import A5, I5, Coord
from blockade.game.engine import GameEngine
from blockade.game.interfaces import GameConfig, GamePhase


def _pieces(engine: GameEngine) -> int:
    return sum(cell.is_piece for row in engine.board for cell in row)


def _walk_x_to_goal(engine: GameEngine) -> list[bool]:
    """X walks A5→I5 down the middle column while O shuffles along row I."""
    wins: list[bool] = []
    o_pos, o_alt = I5, (8, 3)
    for row in range(1, 9):
        assert engine.attempt_move((row - 1, 4), (row, 4)).ok
        wins.append(engine.check_win(Side.X))
        if engine.is_game_over:
            break
        engine.advance_turn()
        # Seven shuffles leave O on (8, 3), clear of X's objective.
        assert engine.play_move(o_pos, o_alt).ok
        o_pos, o_alt = o_alt, o_pos
    return wins


class TestLifecycle:
    def test_not_started(self) -> None:
        eng = GameEngine()
        assert eng.phase == GamePhase.NOT_STARTED
        assert not eng.is_started
        with pytest.raises(GameNotStartedError):
            eng.attempt_move(A5, (1, 4))
        with pytest.raises(GameNotStartedError):
            eng.attempt_place_obstacle((4, 4))
        with pytest.raises(GameNotStartedError):
            eng.advance_turn()
        with pytest.raises(GameNotStartedError):
            eng.check_win(Side.X)

    def test_new_game_state(self, engine: GameEngine) -> None:
        assert engine.phase == GamePhase.IN_PROGRESS
        assert engine.result == GameResult.IN_PROGRESS
        assert engine.current_player == Side.X
        assert engine.cell(A5) == Cell.PLAYER_X
        assert engine.cell(I5) == Cell.PLAYER_O
        assert _pieces(engine) == 2

    def test_players(self, engine: GameEngine) -> None:
        x, o = engine.player(Side.X), engine.player(Side.O)
        assert (x.position, x.objective, x.obstacles_remaining) == (A5, I5, 3)
        assert (o.position, o.objective, o.obstacles_remaining) == (I5, A5, 3)

    def test_player_is_a_copy(self, engine: GameEngine) -> None:
        engine.player(Side.X).obstacles_remaining = 0
        assert engine.obstacles_remaining(Side.X) == 3

    def test_no_win_at_start(self, engine: GameEngine) -> None:
        assert not engine.check_win(Side.X)
        assert not engine.check_win(Side.O)

    def test_new_game_resets(self, engine: GameEngine) -> None:
        engine.play_move(A5, (1, 4))
        engine.play_obstacle((4, 4))
        engine.new_game()
        assert engine.current_player == Side.X
        assert engine.cell(A5) == Cell.PLAYER_X
        assert engine.cell((4, 4)) == Cell.EMPTY
        assert engine.obstacles_remaining(Side.O) == 3

    def test_custom_config(self) -> None:
        eng = GameEngine(GameConfig(obstacle_budget=1, x_start=(0, 0), o_start=(8, 8)))
        eng.new_game()
        assert eng.player(Side.X).objective == (8, 8)
        assert eng.obstacles_remaining(Side.O) == 1


class TestAttemptMove:
    def test_legal_move_updates_board(self, engine: GameEngine) -> None:
        before = engine.board
        result = engine.attempt_move(A5, (1, 4))
        assert result.ok and result.reason is None
        after = engine.board
        changed = [
            (r, c) for r in range(9) for c in range(9) if before[r][c] != after[r][c]
        ]
        assert sorted(changed) == [A5, (1, 4)]
        assert after[0][4] == Cell.EMPTY
        assert after[1][4] == Cell.PLAYER_X
        assert engine.player(Side.X).position == (1, 4)
        assert _pieces(engine) == 2

    @pytest.mark.parametrize("target", [None, "B5", (1.5, 4), (1, 4, 0)])
    def test_malformed_target_raises(self, engine: GameEngine, target: object) -> None:
        before = engine.board
        with pytest.raises(InvalidCoordinateError):
            engine.attempt_move(A5, target)  # type: ignore[arg-type]
        assert engine.board == before
        assert engine.current_player == Side.X

    def test_rejection_log_names_the_move(
        self, engine: GameEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="blockade.game.engine"):
            engine.attempt_move(A5, (-1, 4))
        assert "A5-(-1, 4): off-board" in caplog.text

    def test_attempt_does_not_advance_turn(self, engine: GameEngine) -> None:
        engine.attempt_move(A5, (1, 4))
        assert engine.current_player == Side.X

    @pytest.mark.parametrize(
        ("target", "reason"),
        [
            ((-1, 4), Rejection.OFF_BOARD),
            ((2, 4), Rejection.NOT_ADJACENT),
            ((1, 5), Rejection.NOT_ADJACENT),
            (A5, Rejection.NOT_ADJACENT),
        ],
    )
    def test_rejections_leave_board_unchanged(
        self, engine: GameEngine, target: Coord, reason: Rejection
    ) -> None:
        before = engine.board
        result = engine.attempt_move(A5, target)
        assert not result.ok
        assert result.reason == reason
        assert engine.board == before
        assert engine.player(Side.X).position == A5

    def test_blocked(self, engine: GameEngine) -> None:
        engine.play_obstacle((1, 4))  # X blocks its own path
        engine.play_obstacle((4, 4))  # O
        result = engine.attempt_move(A5, (1, 4))
        assert result.reason == Rejection.BLOCKED

    def test_occupied_by_opponent(self) -> None:
        eng = GameEngine(GameConfig(x_start=(4, 4), o_start=(5, 4)))
        eng.new_game()
        result = eng.attempt_move((4, 4), (5, 4))
        assert result.reason == Rejection.OCCUPIED_BY_OPPONENT

    def test_diagonal_two_step_rejected_regardless_of_contents(
        self, engine: GameEngine
    ) -> None:
        engine.play_obstacle((2, 2))
        engine.play_obstacle((2, 6))
        engine.play_move(A5, (1, 4))
        engine.play_move(I5, (7, 4))
        assert engine.attempt_move((1, 4), (2, 5)).reason == Rejection.NOT_ADJACENT
        assert engine.attempt_move((1, 4), (0, 3)).reason == Rejection.NOT_ADJACENT

    def test_opponent_piece_not_accepted(self, engine: GameEngine) -> None:
        result = engine.attempt_move(I5, (7, 4))
        assert result.reason == Rejection.NOT_YOUR_PIECE
        assert engine.cell(I5) == Cell.PLAYER_O

    def test_empty_origin_not_accepted(self, engine: GameEngine) -> None:
        assert engine.attempt_move((4, 4), (4, 5)).reason == Rejection.NOT_YOUR_PIECE

    def test_off_board_origin_raises(self, engine: GameEngine) -> None:
        with pytest.raises(InvalidCoordinateError):
            engine.attempt_move((-1, 4), A5)

    def test_list_coordinates_are_normalised(self, engine: GameEngine) -> None:
        assert engine.attempt_move([0, 4], [1, 4]).ok  # type: ignore[arg-type]
        assert engine.player(Side.X).position == (1, 4)

    def test_move_event_and_log(
        self, engine: GameEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        seen: list[tuple[Move, Side]] = []
        engine.events.on_move.append(lambda m, s: seen.append((m, s)))
        with caplog.at_level(logging.INFO, logger="blockade.game.engine"):
            engine.attempt_move(A5, (1, 4))
        assert seen == [(Move(A5, (1, 4)), Side.X)]
        assert "Player X moved from A5 to B5" in caplog.text

    def test_rejection_emits_nothing(self, engine: GameEngine) -> None:
        seen: list[object] = []
        engine.events.on_move.append(lambda m, s: seen.append(m))
        engine.attempt_move(A5, (3, 4))
        assert seen == []


class TestAttemptPlaceObstacle:
    def test_place(self, engine: GameEngine) -> None:
        result = engine.attempt_place_obstacle((4, 4))
        assert result.ok
        assert engine.cell((4, 4)) == Cell.OBSTACLE
        assert engine.obstacles_remaining(Side.X) == 2
        assert engine.obstacles_remaining(Side.O) == 3

    def test_occupied_by_piece(self, engine: GameEngine) -> None:
        assert engine.attempt_place_obstacle(I5).reason == Rejection.OCCUPIED
        assert engine.obstacles_remaining(Side.X) == 3

    def test_occupied_by_obstacle(self, engine: GameEngine) -> None:
        engine.play_obstacle((4, 4))
        assert engine.attempt_place_obstacle((4, 4)).reason == Rejection.OCCUPIED
        assert engine.obstacles_remaining(Side.O) == 3

    def test_fourth_obstacle_rejected(self, engine: GameEngine) -> None:
        squares = [(3, 0), (3, 1), (3, 2)]
        for i, sq in enumerate(squares):
            assert engine.play_obstacle(sq).ok  # X
            assert engine.play_obstacle((5, i)).ok  # O
        assert engine.obstacles_remaining(Side.X) == 0
        before = engine.board

        result = engine.attempt_place_obstacle((3, 3))
        assert result.reason == Rejection.NO_OBSTACLES_LEFT
        assert engine.obstacles_remaining(Side.X) == 0
        assert engine.board == before
        assert engine.current_player == Side.X

    def test_off_board_raises(self, engine: GameEngine) -> None:
        with pytest.raises(InvalidCoordinateError):
            engine.attempt_place_obstacle((9, 9))

    @pytest.mark.parametrize("square", [(1.5, 4), "E5", None])
    def test_malformed_square_raises(self, engine: GameEngine, square: object) -> None:
        with pytest.raises(InvalidCoordinateError):
            engine.attempt_place_obstacle(square)  # type: ignore[arg-type]
        assert engine.obstacles_remaining(Side.X) == 3

    def test_obstacle_event(self, engine: GameEngine) -> None:
        seen: list[tuple[ObstaclePlacement, Side]] = []
        engine.events.on_obstacle.append(lambda p, s: seen.append((p, s)))
        engine.attempt_place_obstacle((2, 6))
        assert seen == [(ObstaclePlacement((2, 6)), Side.X)]

    def test_obstacles_only_grow(self, engine: GameEngine) -> None:
        counts = []
        for sq in [(3, 0), (5, 0), (3, 1), (5, 1)]:
            engine.play_obstacle(sq)
            counts.append(sum(c == Cell.OBSTACLE for row in engine.board for c in row))
        assert counts == [1, 2, 3, 4]


class TestTurns:
    def test_advance_turn_alternates(self, engine: GameEngine) -> None:
        assert engine.advance_turn() == Side.O
        assert engine.advance_turn() == Side.X

    def test_play_helpers_alternate(self, engine: GameEngine) -> None:
        order = [engine.current_player]
        engine.play_move(A5, (1, 4))
        order.append(engine.current_player)
        engine.play_obstacle((4, 4))
        order.append(engine.current_player)
        engine.play_move((1, 4), (2, 4))
        order.append(engine.current_player)
        assert order == [Side.X, Side.O, Side.X, Side.O]

    def test_rejection_keeps_turn(self, engine: GameEngine) -> None:
        engine.play_move(A5, (5, 5))
        engine.play_obstacle(I5)
        assert engine.current_player == Side.X

    def test_turn_event(self, engine: GameEngine) -> None:
        seen: list[Side] = []
        engine.events.on_turn_changed.append(seen.append)
        engine.play_move(A5, (1, 4))
        assert seen == [Side.O]


class TestWin:
    def test_walk_wins_exactly_on_arrival(self, engine: GameEngine) -> None:
        wins = _walk_x_to_goal(engine)
        assert wins[-1] is True
        assert not any(wins[:-1])
        assert engine.player(Side.X).position == I5

    def test_play_move_walk_ends_on_objective(self, engine: GameEngine) -> None:
        for row in range(1, 8):
            engine.play_move((row - 1, 4), (row, 4))
            o_from = I5 if row % 2 else (8, 3)
            o_to = (8, 3) if row % 2 else I5
            engine.play_move(o_from, o_to)
        # After seven O shuffles O stands on (8, 3); I5 is free.
        assert engine.cell(I5) == Cell.EMPTY
        assert engine.play_move((7, 4), I5).ok
        assert engine.is_game_over
        assert engine.current_player == Side.X

    def test_game_over_state(self, engine: GameEngine) -> None:
        results: list[GameResult] = []
        engine.events.on_game_over.append(results.append)
        _walk_x_to_goal(engine)
        assert engine.phase == GamePhase.GAME_OVER
        assert engine.result == GameResult.X_WINS
        assert engine.winner == Side.X
        assert results == [GameResult.X_WINS]
        assert engine.current_player == Side.X

    def test_post_win_operations_refused(self, engine: GameEngine) -> None:
        _walk_x_to_goal(engine)
        before = engine.board
        assert engine.attempt_move(I5, (7, 4)).reason == Rejection.GAME_OVER
        assert engine.attempt_place_obstacle((4, 0)).reason == Rejection.GAME_OVER
        with pytest.raises(GameOverError):
            engine.advance_turn()
        assert engine.board == before
        assert engine.legal_destinations(I5) == []

    def test_o_reaches_vacated_objective(self) -> None:
        eng = GameEngine(GameConfig(x_start=(0, 0), o_start=(0, 2)))
        eng.new_game()
        eng.play_move((0, 0), (1, 0))
        assert eng.play_move((0, 2), (0, 1)).ok
        eng.play_move((1, 0), (2, 0))
        assert eng.play_move((0, 1), (0, 0)).ok
        assert eng.check_win(Side.O)
        assert eng.result == GameResult.O_WINS

    def test_list_config_reaches_win(self) -> None:
        cfg = GameConfig(x_start=[0, 0], o_start=[0, 2])  # type: ignore[arg-type]
        eng = GameEngine(cfg)
        eng.new_game()
        eng.play_move([0, 0], [1, 0])  # type: ignore[arg-type]
        eng.play_move([0, 2], [0, 1])  # type: ignore[arg-type]
        eng.play_move([1, 0], [2, 0])  # type: ignore[arg-type]
        assert eng.play_move([0, 1], [0, 0]).ok  # type: ignore[arg-type]
        assert eng.player(Side.O).objective == (0, 0)
        assert eng.is_game_over
        assert eng.winner == Side.O


class TestLegalDestinations:
    def test_for_current_piece(self, engine: GameEngine) -> None:
        assert sorted(engine.legal_destinations(A5)) == [(0, 3), (0, 5), (1, 4)]

    def test_empty_for_opponent_piece(self, engine: GameEngine) -> None:
        assert engine.legal_destinations(I5) == []
