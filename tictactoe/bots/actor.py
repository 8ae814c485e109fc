"""
Actors - Who decides the next move.

An Actor looks at the board and proposes a position.
It never writes to the board itself; the game validates and applies
the proposal, and calls reject() if it was refused.

Provided actors:
- Human: asks through an input function (stdin by default)
- Computer: picks uniformly at random among the empty cells
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable
import random
import re

from ..engine_core.board import Position

if TYPE_CHECKING:
    from ..engine_core.board import Board
    from ..engine_core.errors import MoveError

_COORDINATES = re.compile(r"^\s*(-?\d+)\s*[,\s]\s*(-?\d+)\s*$")


class Actor(ABC):
    """
    Abstract base class for actors.

    Every actor plays as exactly one player id.
    """
    id: int

    @abstractmethod
    def propose_move(self, board: Board) -> Position:
        """
        Choose where to put the next mark.

        Args:
            board: Copy of the current board, safe to inspect

        Returns:
            The proposed position
        """
        pass

    @property
    def is_human(self) -> bool:
        return False

    def reject(self, error: MoveError) -> None:
        """Called when the proposed move was refused."""

    def get_name(self) -> str:
        return f"{self.__class__.__name__} {self.id}"


@dataclass
class Human(Actor):
    """
    A player at the keyboard.

    Positions are entered as "x y" or "x,y".
    """
    id: int
    input_fn: Callable[[str], str] | None = field(default=None, compare=False, repr=False)
    output_fn: Callable[[str], None] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.input_fn is None:
            self.input_fn = input
        if self.output_fn is None:
            self.output_fn = print

    @property
    def is_human(self) -> bool:
        return True

    def propose_move(self, board: Board) -> Position:
        self.output_fn(f"\n{board}\n")
        while True:
            answer = self.input_fn(f"Player {self.id}, your move (x y): ")
            position = parse_position(answer)
            if position is not None:
                return position
            self.output_fn(f"Cannot read {answer!r}, enter two numbers like: 1 2")

    def reject(self, error: MoveError) -> None:
        self.output_fn(f"Move refused: {error}")


@dataclass
class Computer(Actor):
    """
    Random computer player.

    players is the total number of players in the game;
    the random policy does not use it for its choice.
    """
    id: int
    players: int
    seed: int | None = field(default=None, compare=False)
    rng: random.Random = field(default=None, compare=False, repr=False)  # type: ignore

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.seed)

    def propose_move(self, board: Board) -> Position:
        empty = board.empty_positions()
        if not empty:
            raise ValueError("No empty position left on the board")
        return self.rng.choice(empty)


def parse_position(text: str) -> Position | None:
    """Read "x y" or "x,y". Returns None if text is not two integers."""
    match = _COORDINATES.match(text)
    if not match:
        return None
    return Position(int(match.group(1)), int(match.group(2)))
