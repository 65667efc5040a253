"""Game management layer — engine, player state, phases and rule config.

Quick start::

    from blockade.game import GameEngine

    engine = GameEngine()
    engine.new_game()
    result = engine.play_move((0, 4), (1, 4))
    assert result.ok and engine.current_player == Side.O
"""

from blockade.game.engine import GameEngine, GameEvents
from blockade.game.interfaces import (
    DEFAULT_OBSTACLE_BUDGET,
    ActionMode,
    GameConfig,
    GamePhase,
)
from blockade.game.player import PlayerState

__all__ = [
    # Interfaces
    "ActionMode",
    "DEFAULT_OBSTACLE_BUDGET",
    "GameConfig",
    "GamePhase",
    # Concrete
    "GameEngine",
    "GameEvents",
    "PlayerState",
]
