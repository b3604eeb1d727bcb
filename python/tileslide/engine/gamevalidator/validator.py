"""Move legality and win-condition checks, independent of any session."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tileslide.config import EMPTY_TILE
from tileslide.models.board import (
    OFFSETS,
    Board,
    Direction,
    Position,
    board_problems,
    is_adjacent,
)
from tileslide.models.results import PuzzleError, Validation


@dataclass(frozen=True)
class ValidMove:
    position: Position
    tile: int
    direction: Direction  # side of the blank the tile sits on


@dataclass(frozen=True)
class Misplaced:
    position: Position
    current: int
    expected: int


@dataclass(frozen=True)
class WinCondition:
    solved: bool
    correct_tiles: int
    total_tiles: int
    misplaced: list[Misplaced] = field(default_factory=list)

    @property
    def completion(self) -> float:
        """Percentage of cells holding their goal value."""
        return self.correct_tiles / self.total_tiles * 100


class MoveValidator:
    """Stateless validator; all methods are static."""

    @staticmethod
    def validate_move(board: Board, row: int, col: int) -> Validation:
        """Check whether the tile at (*row*, *col*) may slide into the blank."""
        if not board.in_bounds(row, col):
            return Validation(False, PuzzleError.OUT_OF_BOUNDS)

        tile = board.get_tile(row, col)
        if tile == EMPTY_TILE:
            return Validation(False, PuzzleError.EMPTY_TILE_SELECTED)

        tile_pos = Position(row, col)
        empty_pos = board.find_empty()
        if not is_adjacent(tile_pos, empty_pos):
            return Validation(False, PuzzleError.NOT_ADJACENT)

        return Validation(
            True, tile=tile, tile_pos=tile_pos, empty_pos=empty_pos
        )

    @staticmethod
    def validate_value(board: Board, tile: int) -> Validation:
        """Like ``validate_move`` but addresses the tile by its number."""
        if (
            isinstance(tile, bool)
            or not isinstance(tile, int)
            or not 0 < tile < board.size * board.size
        ):
            return Validation(False, PuzzleError.INVALID_TILE_VALUE)
        pos = board.find_value(tile)
        if pos is None:
            return Validation(False, PuzzleError.INVALID_TILE_VALUE)
        return MoveValidator.validate_move(board, pos.row, pos.col)

    @staticmethod
    def valid_moves(board: Board) -> list[ValidMove]:
        """Tiles that can slide into the blank, ordered up, down, left, right."""
        br, bc = board.find_empty()
        moves: list[ValidMove] = []
        for direction, (dr, dc) in OFFSETS.items():
            r, c = br + dr, bc + dc
            if board.in_bounds(r, c):
                moves.append(
                    ValidMove(Position(r, c), board.get_tile(r, c), direction)
                )
        return moves

    @staticmethod
    def win_condition(board: Board) -> WinCondition:
        """Compare every cell with the solved board of the same size."""
        goal = Board.solved(board.size)
        correct = 0
        misplaced: list[Misplaced] = []
        for r in range(board.size):
            for c in range(board.size):
                current = board.get_tile(r, c)
                expected = goal.get_tile(r, c)
                if current == expected:
                    correct += 1
                else:
                    misplaced.append(Misplaced(Position(r, c), current, expected))

        total = board.size * board.size
        return WinCondition(
            solved=correct == total,
            correct_tiles=correct,
            total_tiles=total,
            misplaced=misplaced,
        )

    @staticmethod
    def check_board(rows: Sequence[Sequence[int]]) -> list[str]:
        """List structural problems with a raw grid; empty when well formed."""
        return board_problems(rows)
