"""Progress and difficulty metrics.

All figures are hints for display; nothing here is an exact solution
length.
"""

from __future__ import annotations

from dataclasses import dataclass

from tileslide.config import DIFFICULTY_THRESHOLDS, EMPTY_TILE, HARDEST_LABEL
from tileslide.engine.gamevalidator import MoveValidator
from tileslide.models.board import Board


@dataclass(frozen=True)
class Progress:
    completion: float
    correct_tiles: int
    total_tiles: int
    manhattan_distance: int
    linear_conflicts: int
    estimated_moves: int
    difficulty: str
    solved: bool


def _goal(value: int, size: int) -> tuple[int, int]:
    return (value - 1) // size, (value - 1) % size


def _reversed_pairs(targets: list[int]) -> int:
    """Pairs whose goal order disagrees with their current order."""
    count = 0
    for i in range(len(targets)):
        for j in range(i + 1, len(targets)):
            if targets[i] > targets[j]:
                count += 1
    return count


class ProgressAnalyzer:
    """Stateless analyzer; all methods are static."""

    @staticmethod
    def manhattan_distance(board: Board) -> int:
        n = board.size
        distance = 0
        for r in range(n):
            for c in range(n):
                value = board.get_tile(r, c)
                if value == EMPTY_TILE:
                    continue
                tr, tc = _goal(value, n)
                distance += abs(r - tr) + abs(c - tc)
        return distance

    @staticmethod
    def linear_conflicts(board: Board) -> int:
        """Count tile pairs sharing a goal row (or column) in reversed order.

        Each such pair must pass the other, which costs at least two moves
        beyond the Manhattan distance.
        """
        n = board.size
        conflicts = 0

        for r in range(n):
            goal_cols = []
            for c in range(n):
                value = board.get_tile(r, c)
                if value != EMPTY_TILE and _goal(value, n)[0] == r:
                    goal_cols.append(_goal(value, n)[1])
            conflicts += _reversed_pairs(goal_cols)

        for c in range(n):
            goal_rows = []
            for r in range(n):
                value = board.get_tile(r, c)
                if value != EMPTY_TILE and _goal(value, n)[1] == c:
                    goal_rows.append(_goal(value, n)[0])
            conflicts += _reversed_pairs(goal_rows)

        return conflicts

    @staticmethod
    def estimated_moves(board: Board) -> int:
        return (
            ProgressAnalyzer.manhattan_distance(board)
            + 2 * ProgressAnalyzer.linear_conflicts(board)
        )

    @staticmethod
    def classify(manhattan_distance: int, size: int) -> str:
        ratio = manhattan_distance / (size * size * 2)
        for upper, label in DIFFICULTY_THRESHOLDS:
            if ratio < upper:
                return label
        return HARDEST_LABEL

    @staticmethod
    def difficulty_label(board: Board) -> str:
        """Coarse Easy/Medium/Hard label for display."""
        return ProgressAnalyzer.classify(
            ProgressAnalyzer.manhattan_distance(board), board.size
        )

    @staticmethod
    def analyze(board: Board) -> Progress:
        win = MoveValidator.win_condition(board)
        manhattan = ProgressAnalyzer.manhattan_distance(board)
        conflicts = ProgressAnalyzer.linear_conflicts(board)
        return Progress(
            completion=round(win.completion, 2),
            correct_tiles=win.correct_tiles,
            total_tiles=win.total_tiles,
            manhattan_distance=manhattan,
            linear_conflicts=conflicts,
            estimated_moves=manhattan + 2 * conflicts,
            difficulty=ProgressAnalyzer.classify(manhattan, board.size),
            solved=win.solved,
        )
