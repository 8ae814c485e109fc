"""
Game Errors - The closed set of failures the engine reports.

Two families:
1. Construction errors (InvalidConfig) - fatal, raised before play starts
2. Move errors (MoveError subclasses) - recoverable, the turn is retried
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Position


class GameError(Exception):
    """Base class for all engine errors."""


class InvalidConfig(GameError):
    """Raised when a game cannot be built from the given configuration."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class MoveError(GameError):
    """A move was rejected. The game state is unchanged."""


class OutOfRange(MoveError):
    """Position lies outside the board."""

    def __init__(self, position: Position, size: int):
        self.position = position
        self.size = size
        super().__init__(
            f"position {position} out of range, board has size {size}x{size}"
        )


class NotEmpty(MoveError):
    """Position already carries a mark."""

    def __init__(self, position: Position, occupant: int):
        self.position = position
        self.occupant = occupant
        super().__init__(f"position {position} is not empty")


class WrongTurn(MoveError):
    """A player tried to move out of turn."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"not player {actual}'s turn, player {expected} is next")
