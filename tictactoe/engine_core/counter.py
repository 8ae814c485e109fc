"""
Player Counter - Tracks whose turn it is.

Player ids run from 1 to total; after the last player the
counter wraps back to the first.
"""

from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidConfig


@dataclass
class PlayerCounter:
    """Cyclic counter over player ids 1..total."""
    next: int = 1
    total: int = 2

    def __post_init__(self):
        if self.total < 1:
            raise InvalidConfig(f"player count must be >= 1, got {self.total}")
        if not 1 <= self.next <= self.total:
            raise InvalidConfig(
                f"next player must be between 1 and {self.total}, got {self.next}"
            )

    def inc(self) -> int:
        """Advance to the next player and return its id."""
        self.next = self.next % self.total + 1
        return self.next
