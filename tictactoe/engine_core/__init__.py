"""
Engine Core - Board, turn management and move validation.

The engine:
1. Validates a GameConfig
2. Builds the Board, PlayerCounter and actors
3. Applies moves through Game.move()
4. Reports rejected moves as MoveError
"""

from .board import Board, Position, EMPTY
from .counter import PlayerCounter
from .config import GameConfig
from .game import Game, new_game
from .errors import GameError, InvalidConfig, MoveError, OutOfRange, NotEmpty, WrongTurn

__all__ = [
    "Board",
    "Position",
    "EMPTY",
    "PlayerCounter",
    "GameConfig",
    "Game",
    "new_game",
    "GameError",
    "InvalidConfig",
    "MoveError",
    "OutOfRange",
    "NotEmpty",
    "WrongTurn",
]
