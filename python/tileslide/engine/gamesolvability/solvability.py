"""Permutation-parity solvability analysis."""

from __future__ import annotations

from tileslide.config import EMPTY_TILE
from tileslide.models.board import Board


class Solvability:
    """Stateless analyzer; all methods are static."""

    @staticmethod
    def count_inversions(board: Board) -> int:
        """Pairs of tiles (blank excluded) in reversed row-major order."""
        flat = [v for v in board.flatten() if v != EMPTY_TILE]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state by legal slides.

        Odd widths need an even inversion count. Even widths also depend on
        the blank's row counted 1-based from the bottom: an odd row needs
        even inversions, an even row needs odd inversions.
        """
        inversions = Solvability.count_inversions(board)
        if board.size % 2 == 1:
            return inversions % 2 == 0

        empty_row_from_bottom = board.size - board.blank_pos.row
        if empty_row_from_bottom % 2 == 1:
            return inversions % 2 == 0
        return inversions % 2 == 1
