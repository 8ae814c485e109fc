"""
Tictactoe - N-player mark-placing game on a square grid.

The package provides:
- Board and turn management
- Move validation
- Human and random computer actors
- A synchronous game loop and CLI
"""

__version__ = "0.1.0"
