"""
Pytest fixtures for tictactoe tests.
"""

import pytest

from ..engine_core import Board, Game, new_game


@pytest.fixture
def board() -> Board:
    """Create an empty 3x3 board."""
    return Board.create(3)


@pytest.fixture
def computer_game() -> Game:
    """Create a 3x3 game between two seeded computers."""
    return new_game(3, 2, 0, seed=42)


class ScriptedInput:
    """Feeds prepared answers to a Human actor and records what it prints."""

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def scripted():
    """Factory for scripted human input."""
    return ScriptedInput
