"""
Game - Board, turn counter and actors put together.

The game is the single point of state mutation during play:
- move() validates the turn, writes the mark, advances the counter
- a rejected move leaves board and counter exactly as they were
- actors only propose moves, they never touch the board
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from loguru import logger

from .board import Board, Position
from .config import GameConfig
from .counter import PlayerCounter
from .errors import WrongTurn

if TYPE_CHECKING:
    from ..bots.actor import Actor
    from ..session.game_loop import LoopResult


@dataclass
class Game:
    """
    A game in progress.

    players[i] plays with id i + 1.
    """
    board: Board
    current_player: PlayerCounter
    players: list[Actor] = field(default_factory=list)

    # (position, player) in the order the moves were applied
    history: list[tuple[Position, int]] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        config: GameConfig,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> Game:
        """Build a fresh game from a validated configuration."""
        from ..bots.actor import Computer, Human

        players: list[Actor] = []
        for player_id in range(1, config.human_players + 1):
            players.append(Human(id=player_id, input_fn=input_fn, output_fn=output_fn))

        for player_id in range(config.human_players + 1, config.total_players + 1):
            seed = None if config.seed is None else config.seed + player_id
            players.append(Computer(id=player_id, players=config.total_players, seed=seed))

        logger.debug(
            "New {size}x{size} game with {total} players ({humans} human)",
            size=config.size,
            total=config.total_players,
            humans=config.human_players,
        )

        return cls(
            board=Board.create(config.size),
            current_player=PlayerCounter(next=1, total=config.total_players),
            players=players,
        )

    @property
    def current_actor(self) -> Actor:
        return self.players[self.current_player.next - 1]

    @property
    def is_over(self) -> bool:
        """True once no empty cell is left."""
        return self.board.is_full

    def legal_moves(self) -> list[Position]:
        return self.board.empty_positions()

    def move(self, position: Position, player: int) -> None:
        """
        Make a mark for player at position and pass the turn on.

        Raises WrongTurn if player is not next, OutOfRange or NotEmpty
        if the board refuses the position. Nothing changes on failure.
        """
        if player != self.current_player.next:
            raise WrongTurn(expected=self.current_player.next, actual=player)

        self.board.put(position, player)
        self.history.append((position, player))
        self.current_player.inc()

        logger.debug("Player {} marked {}", player, position)

    def loop(self, max_turns: int | None = None) -> LoopResult:
        """Let the actors play until the board is full or max_turns moves were made."""
        from ..session.game_loop import GameLoop

        return GameLoop(self).run(max_turns=max_turns)


def new_game(
    size: int,
    total_players: int,
    human_players: int,
    *,
    seed: int | None = None,
    input_fn: Callable[[str], str] | None = None,
    output_fn: Callable[[str], None] | None = None,
) -> Game:
    """
    Create a game with a size x size board.

    Players 1..human_players are humans, the rest are computers.
    Raises InvalidConfig if the setup is not playable.
    """
    config = GameConfig.build(
        size=size,
        total_players=total_players,
        human_players=human_players,
        seed=seed,
    )
    return Game.create(config, input_fn=input_fn, output_fn=output_fn)
