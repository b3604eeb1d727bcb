"""A single applied move, with the snapshots needed to undo it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tileslide.models.board import Board, Position


@dataclass(frozen=True)
class Move:
    number: int
    tile: int
    source: Position
    target: Position  # the blank position before the move
    board_before: Board
    board_after: Board
    moves_remaining: int
    timestamp: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "tile": self.tile,
            "source": list(self.source),
            "target": list(self.target),
            "board_before": self.board_before.to_rows(),
            "board_after": self.board_after.to_rows(),
            "moves_remaining": self.moves_remaining,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Move:
        """Rebuild a move from ``to_dict`` output.

        Both board snapshots are structurally re-checked; the move itself
        is not replayed.
        """
        return cls(
            number=int(data["number"]),
            tile=int(data["tile"]),
            source=Position(*data["source"]),
            target=Position(*data["target"]),
            board_before=Board.from_rows(data["board_before"]),
            board_after=Board.from_rows(data["board_after"]),
            moves_remaining=int(data["moves_remaining"]),
            timestamp=float(data["timestamp"]),
        )
