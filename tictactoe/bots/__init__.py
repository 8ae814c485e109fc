"""
Bots module - Actors that choose moves.

Provides:
- Actor: Interface for move selection
- Human: Keyboard-driven actor
- Computer: Uniform random actor
"""

from .actor import Actor, Human, Computer, parse_position

__all__ = [
    "Actor",
    "Human",
    "Computer",
    "parse_position",
]
