"""Typed success/failure values returned by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from tileslide.models.board import Position

if TYPE_CHECKING:
    from tileslide.models.move import Move


class PuzzleError(StrEnum):
    OUT_OF_BOUNDS = "out_of_bounds"
    EMPTY_TILE_SELECTED = "empty_tile_selected"
    NOT_ADJACENT = "not_adjacent"
    UNSOLVABLE_BOARD = "unsolvable_board"
    MALFORMED_BOARD = "malformed_board"
    INVALID_TILE_VALUE = "invalid_tile_value"
    PUZZLE_FINISHED = "puzzle_finished"
    NOTHING_TO_UNDO = "nothing_to_undo"

    @property
    def reason(self) -> str:
        return _REASONS[self]


_REASONS: dict[PuzzleError, str] = {
    PuzzleError.OUT_OF_BOUNDS: "Position out of bounds",
    PuzzleError.EMPTY_TILE_SELECTED: "Cannot move empty tile",
    PuzzleError.NOT_ADJACENT: "Tile not adjacent to empty space",
    PuzzleError.UNSOLVABLE_BOARD: "Puzzle state is not solvable",
    PuzzleError.MALFORMED_BOARD: "Invalid puzzle state",
    PuzzleError.INVALID_TILE_VALUE: "Invalid tile value",
    PuzzleError.PUZZLE_FINISHED: "Puzzle is already finished",
    PuzzleError.NOTHING_TO_UNDO: "No moves to undo",
}


@dataclass(frozen=True)
class Validation:
    """Outcome of checking a single candidate move against a board."""

    valid: bool
    error: PuzzleError | None = None
    tile: int | None = None
    tile_pos: Position | None = None
    empty_pos: Position | None = None

    @property
    def reason(self) -> str:
        return self.error.reason if self.error else "Valid move"

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class Outcome:
    """Result of a session operation. Truthy on success."""

    ok: bool
    error: PuzzleError | None = None
    move: Move | None = None

    @classmethod
    def success(cls, move: Move | None = None) -> Outcome:
        return cls(ok=True, move=move)

    @classmethod
    def failure(cls, error: PuzzleError) -> Outcome:
        return cls(ok=False, error=error)

    @property
    def reason(self) -> str:
        return self.error.reason if self.error else ""

    def __bool__(self) -> bool:
        return self.ok
