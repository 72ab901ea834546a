"""Retrograde solver for a four-heap Nim-style game."""

from .common import Conclusion, State, parity
from .solver import RetrogradeSolver, solve
from .space import GameStateSpace

__all__ = [
    "Conclusion",
    "GameStateSpace",
    "RetrogradeSolver",
    "State",
    "parity",
    "solve",
]
