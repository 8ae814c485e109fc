"""
Session Module - Runs games turn by turn.

The loop is synchronous: every call to Game.move() completes
before the next actor is asked for its move.
"""

from .game_loop import GameLoop, LoopState, TurnResult, LoopResult

__all__ = [
    "GameLoop",
    "LoopState",
    "TurnResult",
    "LoopResult",
]
