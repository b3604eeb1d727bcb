"""Shared fixtures for the engine test suite."""

from __future__ import annotations

import pytest

from tileslide.engine.gameplay import GamePlay
from tileslide.models.board import Board


class FakeClock:
    """Manually advanced stand-in for ``time.time``."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def one_away() -> Board:
    """3×3 board solved by sliding tile 8 left."""
    return Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])


@pytest.fixture
def two_away() -> Board:
    """3×3 board solved by sliding 7 then 8 left."""
    return Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]])


@pytest.fixture
def game(one_away: Board, clock: FakeClock) -> GamePlay:
    return GamePlay.from_board(one_away, move_budget=10, clock=clock)


@pytest.fixture
def long_game(two_away: Board, clock: FakeClock) -> GamePlay:
    return GamePlay.from_board(two_away, move_budget=10, clock=clock)
