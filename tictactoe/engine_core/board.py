"""
Board - The square grid the game is played on.

The board is always quadratic; its edge length is fixed at creation.
Marks are stored line by line (row-major): 0 means the cell is empty,
any other value is the id of the player who marked it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy

from .errors import InvalidConfig, MoveError, NotEmpty, OutOfRange

EMPTY = 0


@dataclass(frozen=True)
class Position:
    """A cell on the board. The top-left corner is (0, 0)."""
    x: int
    y: int

    @classmethod
    def from_index(cls, index: int, size: int) -> Position:
        """Create a Position from an index into the marks of a size x size board."""
        return cls(index % size, index // size)

    def to_index(self, size: int) -> int:
        return self.y * size + self.x

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class Board:
    """
    The board state: edge length plus the players' marks.

    All writes go through put(), which refuses out-of-range
    and occupied cells.
    """
    size: int
    marks: list[int] = field(default_factory=list)

    def __post_init__(self):
        if self.size < 1:
            raise InvalidConfig(f"board size must be >= 1, got {self.size}")
        if not self.marks:
            self.marks = [EMPTY] * (self.size * self.size)
        if len(self.marks) != self.size * self.size:
            raise InvalidConfig(
                f"board of size {self.size} needs {self.size * self.size} marks, "
                f"got {len(self.marks)}"
            )

    @classmethod
    def create(cls, size: int) -> Board:
        """Create an empty size x size board."""
        return cls(size=size)

    def __setattr__(self, name, value):
        # Edge length is fixed once the board exists
        if name == "size" and "size" in self.__dict__:
            raise AttributeError("board size cannot be changed")
        super().__setattr__(name, value)

    def in_range(self, position: Position) -> bool:
        return 0 <= position.x < self.size and 0 <= position.y < self.size

    def is_writable(self, position: Position) -> MoveError | None:
        """
        Check if a mark can be made at position.

        Returns the error put() would raise, or None if writable.
        """
        if not self.in_range(position):
            return OutOfRange(position, self.size)

        occupant = self.marks[position.to_index(self.size)]
        if occupant != EMPTY:
            return NotEmpty(position, occupant)

        return None

    def put(self, position: Position, player: int) -> None:
        """
        Make a mark for player at position.

        Raises OutOfRange or NotEmpty and leaves the board untouched
        if the position cannot be written.
        """
        error = self.is_writable(position)
        if error:
            raise error

        self.marks[position.to_index(self.size)] = player

    def get(self) -> Board:
        """Return an independent copy of the board."""
        return deepcopy(self)

    def get_mark(self, position: Position) -> int:
        if not self.in_range(position):
            raise OutOfRange(position, self.size)
        return self.marks[position.to_index(self.size)]

    def empty_positions(self) -> list[Position]:
        """All empty cells, in row-major order."""
        return [
            Position.from_index(i, self.size)
            for i, mark in enumerate(self.marks)
            if mark == EMPTY
        ]

    @property
    def is_full(self) -> bool:
        return EMPTY not in self.marks

    def rows(self) -> list[list[int]]:
        return [
            self.marks[y * self.size:(y + 1) * self.size]
            for y in range(self.size)
        ]

    def __str__(self) -> str:
        width = len(str(max(self.marks))) if self.marks else 1
        return "\n".join(
            " ".join(str(mark).rjust(width) if mark else ".".rjust(width) for mark in row)
            for row in self.rows()
        )
