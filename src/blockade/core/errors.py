"""Exceptions raised for caller bugs.

Gameplay rejections are not exceptions; they are reported as
:class:`~blockade.core.enums.Rejection` values.
"""

from __future__ import annotations


class BlockadeError(Exception):
    """Base class for all errors raised by the game layers."""


class InvalidCoordinateError(BlockadeError, ValueError):
    """A malformed label or a coordinate that is not on the board."""


class GameNotStartedError(BlockadeError, RuntimeError):
    """A mutating operation was called before ``new_game``."""


class GameOverError(BlockadeError, RuntimeError):
    """A mutating operation was called after the game was won."""
