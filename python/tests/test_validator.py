"""Stateless move validation and win detection."""

from __future__ import annotations

import pytest

from tileslide.engine.gamevalidator import Misplaced, MoveValidator, ValidMove
from tileslide.models.board import Board, Direction, Position
from tileslide.models.results import PuzzleError


# -- validate_move ------------------------------------------------------------


def test_adjacent_tile_is_valid(one_away: Board) -> None:
    check = MoveValidator.validate_move(one_away, 2, 2)
    assert check
    assert check.error is None
    assert check.tile == 8
    assert check.tile_pos == Position(2, 2)
    assert check.empty_pos == Position(2, 1)
    assert check.reason == "Valid move"


@pytest.mark.parametrize(
    "row, col, error",
    [
        (3, 0, PuzzleError.OUT_OF_BOUNDS),
        (0, 3, PuzzleError.OUT_OF_BOUNDS),
        (-1, 1, PuzzleError.OUT_OF_BOUNDS),
        (2, 1, PuzzleError.EMPTY_TILE_SELECTED),
        (0, 0, PuzzleError.NOT_ADJACENT),
        (1, 0, PuzzleError.NOT_ADJACENT),
    ],
)
def test_invalid_moves(one_away: Board, row: int, col: int, error: PuzzleError) -> None:
    check = MoveValidator.validate_move(one_away, row, col)
    assert not check
    assert check.error is error
    assert check.reason == error.reason


@pytest.mark.parametrize(
    "tile, error",
    [
        (8, None),
        (5, None),
        (1, PuzzleError.NOT_ADJACENT),
        (0, PuzzleError.INVALID_TILE_VALUE),
        (9, PuzzleError.INVALID_TILE_VALUE),
        (-3, PuzzleError.INVALID_TILE_VALUE),
        (True, PuzzleError.INVALID_TILE_VALUE),
    ],
)
def test_validate_value(one_away: Board, tile: int, error: PuzzleError | None) -> None:
    assert MoveValidator.validate_value(one_away, tile).error is error


# -- valid_moves --------------------------------------------------------------


def test_valid_moves_fixed_order(one_away: Board) -> None:
    assert MoveValidator.valid_moves(one_away) == [
        ValidMove(Position(1, 1), 5, Direction.UP),
        ValidMove(Position(2, 0), 7, Direction.LEFT),
        ValidMove(Position(2, 2), 8, Direction.RIGHT),
    ]


def test_valid_moves_from_top_left_corner() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 4, 5, 6, 7, 8])
    moves = MoveValidator.valid_moves(board)
    assert [(m.tile, m.direction) for m in moves] == [
        (3, Direction.DOWN),
        (1, Direction.RIGHT),
    ]


def test_every_valid_move_validates() -> None:
    for move in MoveValidator.valid_moves(Board.solved(5)):
        assert MoveValidator.validate_move(Board.solved(5), *move.position)


# -- win_condition ------------------------------------------------------------


@pytest.mark.parametrize("size", [3, 4, 5])
def test_solved_board_wins(size: int) -> None:
    win = MoveValidator.win_condition(Board.solved(size))
    assert win.solved
    assert win.correct_tiles == win.total_tiles == size * size
    assert win.misplaced == []
    assert win.completion == 100


def test_one_away_does_not_win(one_away: Board) -> None:
    win = MoveValidator.win_condition(one_away)
    assert not win.solved
    assert win.correct_tiles == 7
    assert win.misplaced == [
        Misplaced(Position(2, 1), current=0, expected=8),
        Misplaced(Position(2, 2), current=8, expected=0),
    ]


# -- check_board --------------------------------------------------------------


def test_check_board_well_formed() -> None:
    assert MoveValidator.check_board([[1, 2, 3], [4, 5, 6], [7, 8, 0]]) == []


def test_check_board_reports_duplicates_and_missing() -> None:
    problems = MoveValidator.check_board([[1, 1, 3], [4, 5, 6], [7, 8, 0]])
    assert "duplicate values: 1" in problems
    assert "missing values: 2" in problems
