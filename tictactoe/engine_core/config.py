"""
Game Configuration - Validated settings for a new game.

The rules for a playable setup:
- at least two players
- no more humans than players
- the board edge must be longer than the number of players
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from .errors import InvalidConfig

MIN_PLAYERS = 2


class GameConfig(BaseModel):
    """Settings a Game is built from."""
    size: int = Field(default=3, description="Edge length of the square board")
    total_players: int = Field(default=2, description="Number of players")
    human_players: int = Field(default=1, description="Players 1..N controlled by humans")
    seed: Optional[int] = Field(default=None, description="Seed for computer players")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_playable(self) -> GameConfig:
        problems: list[str] = []

        if self.total_players < MIN_PLAYERS:
            problems.append(
                f"at least {MIN_PLAYERS} players are required, got {self.total_players}"
            )
        if self.human_players < 0:
            problems.append(f"human players must be >= 0, got {self.human_players}")
        if self.human_players > self.total_players:
            problems.append(
                f"{self.human_players} human players exceed "
                f"{self.total_players} players in total"
            )
        if self.size <= self.total_players:
            problems.append(
                f"board of size {self.size}x{self.size} is too small "
                f"for {self.total_players} players"
            )

        if problems:
            raise ValueError("; ".join(problems))
        return self

    @classmethod
    def build(cls, **settings) -> GameConfig:
        """Validate settings, raising InvalidConfig instead of ValidationError."""
        try:
            return cls(**settings)
        except ValidationError as e:
            raise InvalidConfig(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        msg = item["msg"].removeprefix("Value error, ")
        loc = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)
