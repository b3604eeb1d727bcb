from tileslide.models.board import (
    Board,
    Direction,
    MalformedBoardError,
    Position,
    adjacent_positions,
    board_problems,
    is_adjacent,
)
from tileslide.models.move import Move
from tileslide.models.results import Outcome, PuzzleError, Validation

__all__ = [
    "Board",
    "Direction",
    "MalformedBoardError",
    "Move",
    "Outcome",
    "Position",
    "PuzzleError",
    "Validation",
    "adjacent_positions",
    "board_problems",
    "is_adjacent",
]
