"""
Game Loop - Drives a game from first move to full board.

The loop:
1. Ask the current actor for a position
2. Apply it through Game.move()
3. If refused, tell a human actor why and ask again
4. Repeat until the board is full or the turn limit is hit

There is no win detection; a game ends when no empty cell is left.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from ..engine_core.errors import MoveError

if TYPE_CHECKING:
    from ..engine_core.board import Position
    from ..engine_core.game import Game


class LoopState(Enum):
    """State of the game loop."""
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """Outcome of one step of the loop."""
    success: bool
    loop_state: LoopState
    player: int | None = None
    position: Position | None = None
    error: MoveError | None = None


@dataclass
class LoopResult:
    """Outcome of a run of the loop."""
    loop_state: LoopState
    moves: int = 0
    rejected: int = 0
    turns: list[TurnResult] = field(default_factory=list)


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(game)
        result = loop.run()
        print(game.board)
    """

    def __init__(self, game: Game):
        self.game = game
        self.state = LoopState.GAME_OVER if game.is_over else LoopState.AWAITING_MOVE

    def step(self) -> TurnResult:
        """
        Play a single turn.

        A refused move from a human is reported back to it and the
        turn stays with the same player. A refused move from a computer
        is a bug in the actor and is raised.
        """
        if self.game.is_over:
            self.state = LoopState.GAME_OVER
            return TurnResult(success=False, loop_state=self.state)

        player = self.game.current_player.next
        actor = self.game.current_actor
        position = actor.propose_move(self.game.board.get())

        try:
            self.game.move(position, player)
        except MoveError as e:
            logger.warning("{} proposed {}: {}", actor.get_name(), position, e)
            if not actor.is_human:
                raise
            actor.reject(e)
            return TurnResult(
                success=False,
                loop_state=self.state,
                player=player,
                position=position,
                error=e,
            )

        if self.game.is_over:
            self.state = LoopState.GAME_OVER

        return TurnResult(
            success=True,
            loop_state=self.state,
            player=player,
            position=position,
        )

    def run(self, max_turns: int | None = None) -> LoopResult:
        """Step until the game is over or max_turns moves were applied."""
        result = LoopResult(loop_state=self.state)

        while self.state != LoopState.GAME_OVER:
            if max_turns is not None and result.moves >= max_turns:
                break

            turn = self.step()
            result.turns.append(turn)
            if turn.success:
                result.moves += 1
            else:
                result.rejected += 1

        result.loop_state = self.state
        logger.info(
            "Loop stopped after {} moves ({} rejected), state {}",
            result.moves,
            result.rejected,
            self.state.value,
        )
        return result
