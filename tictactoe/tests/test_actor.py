"""
Tests for actors.

Tests:
- Computer only proposes empty cells
- Human input parsing and re-prompting
"""

import pytest

from ..bots import Computer, Human, parse_position
from ..engine_core import Board, Position
from ..engine_core.errors import NotEmpty


class TestComputer:
    """Tests for the random computer actor."""

    def test_proposes_empty_cells(self, board):
        """Every proposal is writable."""
        computer = Computer(id=1, players=2, seed=42)
        board.put(Position(0, 0), 2)
        board.put(Position(2, 2), 2)

        for _ in range(20):
            position = computer.propose_move(board)
            assert board.is_writable(position) is None

    def test_only_choice(self):
        """With one empty cell left, that cell is chosen."""
        board = Board(size=2, marks=[1, 2, 0, 1])
        computer = Computer(id=2, players=2)

        assert computer.propose_move(board) == Position(0, 1)

    def test_full_board_fails(self):
        """No proposal is possible on a full board."""
        board = Board(size=2, marks=[1, 2, 2, 1])
        computer = Computer(id=1, players=2)

        with pytest.raises(ValueError):
            computer.propose_move(board)

    def test_covers_all_empty_cells(self, board):
        """Over many draws the whole empty set is reached."""
        computer = Computer(id=1, players=2, seed=3)
        seen = {computer.propose_move(board) for _ in range(200)}

        assert seen == set(board.empty_positions())

    def test_is_not_human(self):
        """Computers are flagged as such."""
        computer = Computer(id=3, players=3)
        assert not computer.is_human
        assert computer.get_name() == "Computer 3"


class TestHuman:
    """Tests for the keyboard actor."""

    def test_reads_position(self, board, scripted):
        """Input "x y" becomes a position."""
        io = scripted(["2 1"])
        human = Human(id=1, input_fn=io.input, output_fn=io.print)

        assert human.propose_move(board) == Position(2, 1)
        assert io.prompts == ["Player 1, your move (x y): "]
        assert str(board) in io.output[0]

    def test_reprompts_on_bad_input(self, board, scripted):
        """Unreadable answers are reported and asked again."""
        io = scripted(["here", "1", "0,2"])
        human = Human(id=2, input_fn=io.input, output_fn=io.print)

        assert human.propose_move(board) == Position(0, 2)
        assert len(io.prompts) == 3
        assert any("Cannot read 'here'" in line for line in io.output)

    def test_reject_reports_reason(self, scripted):
        """A refused move is explained to the player."""
        io = scripted([])
        human = Human(id=1, input_fn=io.input, output_fn=io.print)

        human.reject(NotEmpty(Position(1, 1), 2))

        assert io.output == ["Move refused: position (1, 1) is not empty"]

    def test_end_of_input_propagates(self, board, scripted):
        """Running out of input ends the prompt."""
        io = scripted([])
        human = Human(id=1, input_fn=io.input, output_fn=io.print)

        with pytest.raises(EOFError):
            human.propose_move(board)

    def test_is_human(self):
        """Humans are flagged as such."""
        assert Human(id=1).is_human


class TestParsePosition:
    """Tests for reading coordinates."""

    def test_accepted_formats(self):
        """Space or comma separated integers are read."""
        assert parse_position("1 2") == Position(1, 2)
        assert parse_position("1,2") == Position(1, 2)
        assert parse_position(" 3 ,  4 ") == Position(3, 4)
        assert parse_position("-1 0") == Position(-1, 0)

    def test_rejected_formats(self):
        """Anything else is refused."""
        for text in ["", "1", "12", "a b", "1 2 3", "1.5 2"]:
            assert parse_position(text) is None
