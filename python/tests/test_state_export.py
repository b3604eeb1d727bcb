"""Session export/import."""

from __future__ import annotations

import json

import pytest

from tileslide.config import DEFAULT_MOVE_BUDGET
from tileslide.engine.events import GameEvent
from tileslide.engine.gameplay import GamePlay
from tileslide.engine.gamestate import SessionStatus
from tileslide.models.board import Board, MalformedBoardError
from tileslide.models.results import PuzzleError

EXPORT_KEYS = {
    "size",
    "current_board",
    "initial_board",
    "move_history",
    "move_count",
    "move_budget",
    "start_time",
    "end_time",
    "completed",
}


def test_export_is_plain_json(long_game: GamePlay, clock) -> None:
    long_game.move(2, 1)
    data = json.loads(json.dumps(long_game.export_state()))

    assert set(data) == EXPORT_KEYS
    assert data["size"] == 3
    assert data["current_board"] == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert data["initial_board"] == [[1, 2, 3], [4, 5, 6], [0, 7, 8]]
    assert data["move_count"] == 1
    assert data["move_budget"] == 10
    assert data["start_time"] == clock.now
    assert data["end_time"] is None
    assert data["completed"] is False
    assert data["move_history"][0]["tile"] == 7
    assert data["move_history"][0]["source"] == [2, 1]


def test_export_does_not_alias_session(long_game: GamePlay, two_away: Board) -> None:
    data = long_game.export_state()
    data["current_board"][0][0] = 99
    assert long_game.current_board() == two_away


def test_round_trip_then_continue(long_game: GamePlay, clock) -> None:
    long_game.move(2, 1)
    data = json.loads(json.dumps(long_game.export_state()))

    restored = GamePlay.from_export(data, clock=clock)
    assert restored.current_board() == long_game.current_board()
    assert restored.initial_board() == long_game.initial_board()
    assert restored.move_count == 1
    assert restored.moves_remaining() == 9
    assert restored.status is SessionStatus.ACTIVE
    assert restored.move_history() == long_game.move_history()

    assert restored.move(2, 2)
    assert restored.status is SessionStatus.SOLVED


def test_undo_after_import_uses_saved_snapshot(long_game: GamePlay, two_away: Board) -> None:
    long_game.move(2, 1)
    restored = GamePlay.from_export(long_game.export_state())
    assert restored.undo()
    assert restored.current_board() == two_away


def test_import_emits_event(game: GamePlay, long_game: GamePlay) -> None:
    seen = []
    game.events.on(GameEvent.PUZZLE_IMPORTED, seen.append)
    assert game.import_state(long_game.export_state())
    assert seen[0]["board"] == [[1, 2, 3], [4, 5, 6], [0, 7, 8]]


def test_import_malformed_board_raises(game: GamePlay, one_away: Board) -> None:
    data = game.export_state()
    data["current_board"] = [[1, 1, 3], [4, 5, 6], [7, 0, 8]]
    with pytest.raises(MalformedBoardError):
        game.import_state(data)
    assert game.current_board() == one_away


def test_import_size_mismatch_raises(game: GamePlay) -> None:
    data = game.export_state()
    data["size"] = 4
    with pytest.raises(MalformedBoardError):
        game.import_state(data)


def test_import_unsolvable_board_fails(game: GamePlay, one_away: Board) -> None:
    data = game.export_state()
    data["current_board"] = [[2, 1, 3], [4, 5, 6], [7, 8, 0]]
    outcome = game.import_state(data)
    assert outcome.error is PuzzleError.UNSOLVABLE_BOARD
    assert game.current_board() == one_away

    with pytest.raises(ValueError):
        GamePlay.from_export(data)


def test_import_exhausted_session(two_away: Board) -> None:
    game = GamePlay.from_board(two_away, move_budget=1)
    game.move(2, 1)
    restored = GamePlay.from_export(game.export_state())
    assert restored.status is SessionStatus.EXHAUSTED
    assert not restored.move(2, 2)


def test_import_can_change_size(game: GamePlay) -> None:
    other = GamePlay(5, shuffle_steps=0)
    assert game.import_state(other.export_state())
    assert game.size == 5
    assert game.solved_board() == Board.solved(5)


# -- hardening ----------------------------------------------------------------


def test_import_rejects_history_snapshot_of_other_size(long_game: GamePlay, two_away: Board) -> None:
    long_game.move(2, 1)
    data = long_game.export_state()
    data["move_history"][0]["board_before"] = Board.solved(4).to_rows()

    with pytest.raises(MalformedBoardError, match="board_before"):
        long_game.import_state(data)
    assert long_game.size == 3
    assert long_game.undo()
    assert long_game.current_board() == two_away


def test_import_rejects_row_that_is_not_a_list(game: GamePlay, one_away: Board) -> None:
    data = game.export_state()
    data["current_board"] = [[1, 2, 3], [4, 5, 6], None]
    with pytest.raises(MalformedBoardError):
        game.import_state(data)
    assert game.current_board() == one_away


@pytest.mark.parametrize("budget", [0, -5], ids=["zero", "negative"])
def test_import_rejects_budget_below_one(game: GamePlay, budget: int) -> None:
    data = game.export_state()
    data["move_budget"] = budget
    with pytest.raises(ValueError, match="move_budget"):
        game.import_state(data)
    assert game.moves_remaining() == 10


@pytest.mark.parametrize("count", [-3, 2], ids=["negative", "more-than-history"])
def test_import_rejects_inconsistent_move_count(long_game: GamePlay, count: int) -> None:
    long_game.move(2, 1)
    data = long_game.export_state()
    data["move_count"] = count
    with pytest.raises(ValueError, match="move_count"):
        long_game.import_state(data)
    assert long_game.move_count == 1


def test_import_without_budget_uses_default(game: GamePlay) -> None:
    data = game.export_state()
    del data["move_budget"]
    assert game.import_state(data)
    assert game.moves_remaining() == DEFAULT_MOVE_BUDGET
