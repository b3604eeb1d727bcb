"""Tracks the mutable state of a puzzle session."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any

from tileslide.config import DEFAULT_MOVE_BUDGET
from tileslide.engine.gameanalysis import ProgressAnalyzer
from tileslide.models.board import Board, MalformedBoardError
from tileslide.models.move import Move

Clock = Callable[[], float]


class SessionStatus(StrEnum):
    IDLE = "idle"
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.SOLVED, SessionStatus.EXHAUSTED)


@dataclass(frozen=True)
class PuzzleStatistics:
    size: int
    move_count: int
    move_budget: int
    moves_remaining: int
    elapsed_time: float
    status: SessionStatus
    is_complete: bool
    is_solved: bool
    difficulty: str
    manhattan_distance: int
    linear_conflicts: int
    efficiency: float

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = str(self.status)
        return data


class GameState:
    """Holds the boards, move history, counters and timing of one session.

    ``GamePlay`` is the only writer; everything handed out is either an
    immutable ``Board`` or a fresh container.
    """

    def __init__(
        self,
        board: Board,
        move_budget: int = DEFAULT_MOVE_BUDGET,
        clock: Clock = time.time,
    ) -> None:
        self.clock = clock
        self.restart(board, move_budget)

    def restart(self, board: Board, move_budget: int) -> None:
        """Adopt *board* as both initial and current board and clear progress."""
        if move_budget < 1:
            raise ValueError(f"move_budget must be >= 1, got {move_budget}.")
        self.size = board.size
        self.move_budget = move_budget
        self.initial_board = board
        self.rewind()

    def rewind(self) -> None:
        """Return to the initial board, keeping the budget."""
        self.board = self.initial_board
        self.history: list[Move] = []
        self.moves: int = 0
        self.start_time: float | None = None
        self.end_time: float | None = None
        self.completed: bool = False

    # -- time tracking --------------------------------------------------------

    def now(self) -> float:
        return self.clock()

    def start_clock(self) -> None:
        if self.start_time is None:
            self.start_time = self.clock()

    def stop_clock(self) -> None:
        self.end_time = self.clock()

    @property
    def elapsed_time(self) -> float:
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else self.clock()
        return end - self.start_time

    # -- moves ----------------------------------------------------------------

    def record(self, move: Move) -> None:
        self.board = move.board_after
        self.history.append(move)
        self.moves += 1

    def pop(self) -> Move:
        move = self.history.pop()
        self.board = move.board_before
        self.moves -= 1
        return move

    @property
    def moves_remaining(self) -> int:
        return max(0, self.move_budget - self.moves)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

    @property
    def status(self) -> SessionStatus:
        if self.completed:
            return SessionStatus.SOLVED
        if self.moves >= self.move_budget:
            return SessionStatus.EXHAUSTED
        if self.moves > 0:
            return SessionStatus.ACTIVE
        return SessionStatus.IDLE

    def statistics(self) -> PuzzleStatistics:
        progress = ProgressAnalyzer.analyze(self.board)
        if self.moves > 0:
            efficiency = (self.move_budget - self.moves) / self.move_budget
        else:
            efficiency = 1.0
        return PuzzleStatistics(
            size=self.size,
            move_count=self.moves,
            move_budget=self.move_budget,
            moves_remaining=self.moves_remaining,
            elapsed_time=self.elapsed_time,
            status=self.status,
            is_complete=self.completed,
            is_solved=progress.solved,
            difficulty=progress.difficulty,
            manhattan_distance=progress.manhattan_distance,
            linear_conflicts=progress.linear_conflicts,
            efficiency=efficiency,
        )

    # -- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "current_board": self.board.to_rows(),
            "initial_board": self.initial_board.to_rows(),
            "move_history": [m.to_dict() for m in self.history],
            "move_count": self.moves,
            "move_budget": self.move_budget,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock = time.time) -> GameState:
        """Rebuild a session from ``to_dict`` output.

        Every board, recorded snapshots included, is structurally re-checked
        and must match *size* (``MalformedBoardError``). Counters that cannot
        belong to a real session raise ``ValueError``. Moves are not replayed.
        """
        size = int(data["size"])
        current = Board.from_rows(data["current_board"])
        initial = Board.from_rows(data.get("initial_board") or data["current_board"])
        history = [Move.from_dict(m) for m in data.get("move_history") or []]

        boards = [("current_board", current), ("initial_board", initial)]
        for i, move in enumerate(history):
            boards.append((f"move_history[{i}].board_before", move.board_before))
            boards.append((f"move_history[{i}].board_after", move.board_after))
        wrong = [
            f"{name} is {board.size}x{board.size}, expected {size}x{size}"
            for name, board in boards
            if board.size != size
        ]
        if wrong:
            raise MalformedBoardError(wrong)

        move_count = int(data.get("move_count", len(history)))
        if move_count != len(history):
            raise ValueError(
                f"move_count {move_count} does not match "
                f"{len(history)} recorded move(s)."
            )

        state = cls(initial, int(data.get("move_budget", DEFAULT_MOVE_BUDGET)), clock)
        state.board = current
        state.history = history
        state.moves = move_count
        state.start_time = data.get("start_time")
        state.end_time = data.get("end_time")
        state.completed = bool(data.get("completed", False))
        return state
