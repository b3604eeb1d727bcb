"""Board model for the sliding puzzle game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple

from tileslide.config import EMPTY_TILE, MAX_SIZE, MIN_SIZE


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Fixed iteration order: up, down, left, right.
OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Position(NamedTuple):
    row: int
    col: int


class MalformedBoardError(ValueError):
    """A grid that breaks the board invariant (shape or value set)."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Malformed board: " + "; ".join(problems))


def _is_row(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def board_problems(rows: Sequence[Sequence[int]]) -> list[str]:
    """Return every structural problem with *rows* (empty when well formed)."""
    if not _is_row(rows):
        return [f"board is not a list of rows: {rows!r}"]
    size = len(rows)
    if size == 0:
        return ["board has no rows"]

    problems: list[str] = []
    if not MIN_SIZE <= size <= MAX_SIZE:
        problems.append(
            f"size {size} is not supported (expected {MIN_SIZE}-{MAX_SIZE})"
        )
    for r, row in enumerate(rows):
        if not _is_row(row):
            problems.append(f"row {r} is not a list of tiles: {row!r}")
        elif len(row) != size:
            problems.append(f"row {r} has {len(row)} cells, expected {size}")
    if problems:
        return problems

    flat = [v for row in rows for v in row]
    expected = set(range(size * size))
    seen: set[int] = set()
    duplicates: list[int] = []
    for v in flat:
        if isinstance(v, bool) or not isinstance(v, int) or v not in expected:
            problems.append(f"invalid tile value {v!r}")
        elif v in seen:
            duplicates.append(v)
        else:
            seen.add(v)
    if duplicates:
        problems.append(
            "duplicate values: " + ", ".join(str(v) for v in sorted(duplicates))
        )
    missing = sorted(expected - seen)
    if missing:
        problems.append("missing values: " + ", ".join(str(v) for v in missing))
    return problems


def adjacent_positions(pos: tuple[int, int], size: int) -> list[Position]:
    """In-bounds neighbours of *pos*, always ordered up, down, left, right."""
    row, col = pos
    neighbors: list[Position] = []
    for dr, dc in OFFSETS.values():
        nr, nc = row + dr, col + dc
        if 0 <= nr < size and 0 <= nc < size:
            neighbors.append(Position(nr, nc))
    return neighbors


def is_adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


@dataclass(frozen=True)
class Board:
    """Immutable sliding puzzle board.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Operations that would change the board return a new ``Board``.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: Position = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        problems = board_problems(self.tiles)
        if not problems and len(self.tiles) != self.size:
            problems = [f"declared size {self.size} but got {len(self.tiles)} rows"]
        if problems:
            raise MalformedBoardError(problems)
        tiles = tuple(tuple(row) for row in self.tiles)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank_pos", self._scan(EMPTY_TILE))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        flat = list(range(1, size * size)) + [EMPTY_TILE]
        return cls.from_flat(size, flat)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        problems = board_problems(rows)
        if problems:
            raise MalformedBoardError(problems)
        return cls(size=len(rows), tiles=tuple(tuple(row) for row in rows))

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise MalformedBoardError([
                f"expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}"
            ])
        tiles = tuple(
            tuple(flat[r * size : (r + 1) * size]) for r in range(size)
        )
        return cls(size=size, tiles=tiles)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def find_empty(self) -> Position:
        return self.blank_pos

    def find_value(self, value: int) -> Position | None:
        """Locate *value*, or ``None`` when the board does not contain it."""
        return self._scan(value)

    def flatten(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def to_rows(self) -> list[list[int]]:
        """Fresh nested-list copy, safe for callers to mutate."""
        return [list(row) for row in self.tiles]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.size * self.size - 1
        for i, v in enumerate(self.flatten()):
            if v != (EMPTY_TILE if i == last else i + 1):
                return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == EMPTY_TILE:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    # -- transformations ------------------------------------------------------

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        """Return a new board with the cells at *a* and *b* exchanged."""
        rows = self.to_rows()
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board.from_rows(rows)

    # -- helpers --------------------------------------------------------------

    def _scan(self, value: int) -> Position | None:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return Position(r, c)
        return None

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(" " * width if v == EMPTY_TILE else f"{v:>{width}}" for v in row)
            for row in self.tiles
        )
