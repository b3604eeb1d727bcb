"""Board construction, lookup and immutability."""

from __future__ import annotations

import pytest

from tileslide.models.board import (
    Board,
    MalformedBoardError,
    Position,
    adjacent_positions,
    is_adjacent,
)


# -- construction -------------------------------------------------------------


def test_solved_3x3() -> None:
    assert Board.solved(3).to_rows() == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


@pytest.mark.parametrize("size", [3, 4, 5])
def test_solved_is_row_major_then_blank(size: int) -> None:
    board = Board.solved(size)
    assert board.flatten() == list(range(1, size * size)) + [0]
    assert board.find_empty() == (size - 1, size - 1)
    assert board.is_solved()


def test_from_flat_matches_from_rows(one_away: Board) -> None:
    assert Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8]) == one_away


@pytest.mark.parametrize(
    "rows",
    [
        [[1, 2, 3], [4, 5, 6], [7, 8, 8]],
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
        [[1, 2, 3], [4, 5, 6], [7, 0]],
        [[1, 2, 3], [4, 5, 6]],
        [[1, 2], [3, 0]],
        [],
        [[1, 2, 3], [4, 5, 6], None],
        [[1, 2, 3], [4, 5, 6], "780"],
        None,
    ],
    ids=[
        "duplicate", "out-of-range", "short-row", "not-square", "too-small",
        "empty", "none-row", "string-row", "no-rows",
    ],
)
def test_malformed_boards_are_rejected(rows: list[list[int]]) -> None:
    with pytest.raises(MalformedBoardError) as excinfo:
        Board.from_rows(rows)
    assert excinfo.value.problems


def test_malformed_board_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="Malformed board"):
        Board.from_flat(3, [1, 2, 3])


def test_declared_size_must_match_rows() -> None:
    with pytest.raises(MalformedBoardError):
        Board(size=4, tiles=Board.solved(3).tiles)


# -- queries ------------------------------------------------------------------


def test_find_value(one_away: Board) -> None:
    assert one_away.find_value(8) == Position(2, 2)
    assert one_away.find_value(0) == one_away.find_empty() == Position(2, 1)
    assert one_away.find_value(42) is None


def test_is_tile_correct(one_away: Board) -> None:
    assert one_away.is_tile_correct(0, 0)
    assert not one_away.is_tile_correct(2, 2)
    assert not one_away.is_tile_correct(2, 1)


def test_str_leaves_blank_empty(one_away: Board) -> None:
    assert str(one_away) == "1 2 3\n4 5 6\n7   8"


# -- immutability -------------------------------------------------------------


def test_swap_returns_new_board(one_away: Board) -> None:
    swapped = one_away.swap((2, 1), (2, 2))
    assert swapped.is_solved()
    assert swapped.find_empty() == (2, 2)
    assert one_away.to_rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]


def test_to_rows_is_a_copy(one_away: Board) -> None:
    rows = one_away.to_rows()
    rows[0][0] = 99
    assert one_away.get_tile(0, 0) == 1


def test_boards_compare_and_hash_by_value() -> None:
    a = Board.solved(4)
    b = Board.from_flat(4, list(range(1, 16)) + [0])
    assert a == b
    assert len({a, b}) == 1


# -- adjacency ----------------------------------------------------------------


def test_adjacent_positions_center_order() -> None:
    assert adjacent_positions((1, 1), 3) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_adjacent_positions_corner() -> None:
    assert adjacent_positions((0, 0), 3) == [(1, 0), (0, 1)]
    assert adjacent_positions((4, 4), 5) == [(3, 4), (4, 3)]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 0), (0, 1), True),
        ((1, 1), (0, 1), True),
        ((0, 0), (1, 1), False),
        ((0, 0), (0, 2), False),
        ((2, 2), (2, 2), False),
    ],
)
def test_is_adjacent(a: tuple[int, int], b: tuple[int, int], expected: bool) -> None:
    assert is_adjacent(a, b) is expected
