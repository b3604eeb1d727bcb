"""Core gameplay logic: processes moves and checks win condition."""

from __future__ import annotations

import logging
import random
import time
from typing import Any

from tileslide.config import (
    DEFAULT_MOVE_BUDGET,
    DEFAULT_SHUFFLE_STEPS,
    MAX_SIZE,
    MIN_SIZE,
    Difficulty,
)
from tileslide.engine.events import EventEmitter, GameEvent
from tileslide.engine.gameanalysis import ProgressAnalyzer
from tileslide.engine.gamegenerator import GameGenerator
from tileslide.engine.gamesolvability import Solvability
from tileslide.engine.gamestate import GameState, PuzzleStatistics, SessionStatus
from tileslide.engine.gamestate.state import Clock
from tileslide.engine.gamevalidator import MoveValidator, ValidMove
from tileslide.models.board import OFFSETS, Board, Direction, Position
from tileslide.models.move import Move
from tileslide.models.results import Outcome, PuzzleError

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session.

    The session is ``IDLE`` until the first move, ``ACTIVE`` while moves are
    being made, and ends ``SOLVED`` or ``EXHAUSTED``. Terminal sessions
    reject ``move`` and ``undo`` but can be reset or regenerated.
    """

    def __init__(
        self,
        size: int,
        shuffle_steps: int | None = DEFAULT_SHUFFLE_STEPS,
        move_budget: int = DEFAULT_MOVE_BUDGET,
        *,
        rng: random.Random | None = None,
        clock: Clock = time.time,
    ) -> None:
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(
                f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}."
            )
        self.size = size
        self.events = EventEmitter()
        self._rng = rng
        self.state = GameState(Board.solved(size), move_budget, clock)
        if shuffle_steps is not None:
            self.generate(shuffle_steps, move_budget)

    @classmethod
    def from_board(
        cls,
        board: Board,
        move_budget: int = DEFAULT_MOVE_BUDGET,
        *,
        clock: Clock = time.time,
    ) -> GamePlay:
        """Create a session from an existing board, which must be solvable."""
        if not Solvability.is_solvable(board):
            raise ValueError(PuzzleError.UNSOLVABLE_BOARD.reason)
        game = cls(board.size, shuffle_steps=None, move_budget=move_budget, clock=clock)
        game.state.restart(board, move_budget)
        return game

    @classmethod
    def from_difficulty(
        cls,
        difficulty: Difficulty,
        *,
        rng: random.Random | None = None,
        clock: Clock = time.time,
    ) -> GamePlay:
        return cls(
            difficulty.size,
            difficulty.shuffle_moves,
            difficulty.max_moves,
            rng=rng,
            clock=clock,
        )

    @classmethod
    def from_export(cls, data: dict[str, Any], *, clock: Clock = time.time) -> GamePlay:
        """Create a session from ``export_state`` output.

        Raises ``ValueError`` when the saved current board is unsolvable.
        """
        game = cls(int(data["size"]), shuffle_steps=None, clock=clock)
        outcome = game.import_state(data)
        if not outcome:
            raise ValueError(outcome.reason)
        return game

    # -- session setup --------------------------------------------------------

    def generate(self, shuffle_steps: int, move_budget: int | None = None) -> None:
        """Replace the board with a freshly shuffled one and reset progress."""
        budget = self.state.move_budget if move_budget is None else move_budget
        board = GameGenerator.generate(self.size, shuffle_steps, rng=self._rng)
        self.state.restart(board, budget)
        logger.debug("New %dx%d puzzle, budget %d", self.size, self.size, budget)
        self.events.emit(
            GameEvent.PUZZLE_GENERATED,
            board=board.to_rows(),
            move_budget=budget,
            difficulty=ProgressAnalyzer.difficulty_label(board),
        )

    def regenerate(self, shuffle_steps: int = DEFAULT_SHUFFLE_STEPS) -> None:
        """New shuffle, same size and budget."""
        self.generate(shuffle_steps)

    def set_state(self, board: Board, move_budget: int | None = None) -> Outcome:
        """Adopt a caller-supplied board; unsolvable boards are refused."""
        if board.size != self.size:
            return Outcome.failure(PuzzleError.MALFORMED_BOARD)
        if not Solvability.is_solvable(board):
            return Outcome.failure(PuzzleError.UNSOLVABLE_BOARD)

        budget = self.state.move_budget if move_budget is None else move_budget
        self.state.restart(board, budget)
        self.events.emit(
            GameEvent.PUZZLE_STATE_SET, board=board.to_rows(), move_budget=budget
        )
        return Outcome.success()

    def reset(self) -> None:
        """Restart the same puzzle from its initial board."""
        self.state.rewind()
        logger.debug("Puzzle reset")
        self.events.emit(GameEvent.PUZZLE_RESET, board=self.state.board.to_rows())

    # -- movement -------------------------------------------------------------

    def move(self, row: int, col: int) -> Outcome:
        """Slide the tile at (*row*, *col*) into the adjacent blank."""
        if self.status.is_terminal:
            return Outcome.failure(PuzzleError.PUZZLE_FINISHED)

        check = MoveValidator.validate_move(self.state.board, row, col)
        if not check:
            self.events.emit(
                GameEvent.INVALID_MOVE,
                error=check.error,
                reason=check.reason,
                position=Position(row, col),
                empty_position=self.state.board.find_empty(),
            )
            return Outcome.failure(check.error)

        return Outcome.success(self._apply(check.tile, check.tile_pos, check.empty_pos))

    def move_by_value(self, tile: int) -> Outcome:
        """Slide the numbered *tile*, wherever it is, into the blank."""
        if self.status.is_terminal:
            return Outcome.failure(PuzzleError.PUZZLE_FINISHED)
        check = MoveValidator.validate_value(self.state.board, tile)
        if check.error is PuzzleError.INVALID_TILE_VALUE:
            self.events.emit(
                GameEvent.INVALID_MOVE,
                error=check.error,
                reason=check.reason,
                tile=tile,
            )
            return Outcome.failure(check.error)
        row, col = self.state.board.find_value(tile)
        return self.move(row, col)

    def slide(self, direction: Direction) -> Outcome:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        br, bc = self.state.board.blank_pos
        dr, dc = OFFSETS[direction]
        return self.move(br - dr, bc - dc)

    def undo(self) -> Outcome:
        """Take back the most recent move."""
        if self.status.is_terminal:
            return Outcome.failure(PuzzleError.PUZZLE_FINISHED)
        if not self.state.history:
            return Outcome.failure(PuzzleError.NOTHING_TO_UNDO)

        move = self.state.pop()
        logger.debug("Undid move %d (tile %d)", move.number, move.tile)
        self.events.emit(
            GameEvent.MOVE_UNDONE,
            move=move,
            board=self.state.board.to_rows(),
            move_count=self.state.moves,
        )
        return Outcome.success(move)

    def can_undo(self) -> bool:
        return bool(self.state.history) and not self.status.is_terminal

    # -- queries --------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def is_won(self) -> bool:
        return self.state.completed

    @property
    def move_count(self) -> int:
        return self.state.moves

    def moves_remaining(self) -> int:
        return self.state.moves_remaining

    def is_solved(self) -> bool:
        return self.state.is_solved

    def current_board(self) -> Board:
        return self.state.board

    def initial_board(self) -> Board:
        return self.state.initial_board

    def solved_board(self) -> Board:
        return Board.solved(self.size)

    def empty_position(self) -> Position:
        return self.state.board.find_empty()

    def valid_moves(self) -> list[ValidMove]:
        return MoveValidator.valid_moves(self.state.board)

    def move_history(self) -> list[Move]:
        return list(self.state.history)

    def statistics(self) -> PuzzleStatistics:
        return self.state.statistics()

    # -- serialisation --------------------------------------------------------

    def export_state(self) -> dict[str, Any]:
        """Plain, JSON-serialisable snapshot of the session."""
        return self.state.to_dict()

    def import_state(self, data: dict[str, Any]) -> Outcome:
        """Replace the session with saved data.

        Boards and counters are re-checked by ``GameState.from_dict`` and
        the current board must be solvable; recorded moves are not replayed.
        """
        restored = GameState.from_dict(data, clock=self.state.clock)
        if not Solvability.is_solvable(restored.board):
            return Outcome.failure(PuzzleError.UNSOLVABLE_BOARD)

        self.size = restored.size
        self.state = restored
        logger.debug("Imported %dx%d session at move %d",
                     self.size, self.size, restored.moves)
        self.events.emit(GameEvent.PUZZLE_IMPORTED, board=restored.board.to_rows())
        return Outcome.success()

    # -- helpers --------------------------------------------------------------

    def _apply(self, tile: int, tile_pos: Position, empty_pos: Position) -> Move:
        state = self.state
        state.start_clock()

        before = state.board
        after = before.swap(tile_pos, empty_pos)
        move = Move(
            number=state.moves + 1,
            tile=tile,
            source=tile_pos,
            target=empty_pos,
            board_before=before,
            board_after=after,
            moves_remaining=max(0, state.move_budget - state.moves - 1),
            timestamp=state.now(),
        )
        state.record(move)
        logger.debug("Move %d: tile %d %s -> %s",
                     move.number, tile, tuple(tile_pos), tuple(empty_pos))
        self.events.emit(GameEvent.TILE_MOVED, move=move, board=after.to_rows())

        if MoveValidator.win_condition(after).solved:
            state.completed = True
            state.stop_clock()
            stats = state.statistics()
            logger.info("Puzzle solved in %d moves", state.moves)
            self.events.emit(
                GameEvent.PUZZLE_SOLVED,
                stats=stats,
                move_history=self.move_history(),
                board=after.to_rows(),
            )
        elif state.moves >= state.move_budget:
            state.stop_clock()
            stats = state.statistics()
            logger.info("Out of moves after %d moves", state.moves)
            self.events.emit(
                GameEvent.GAME_OVER,
                reason="Out of moves",
                stats=stats,
                move_history=self.move_history(),
                board=after.to_rows(),
            )
        return move
