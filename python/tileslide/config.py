"""Tunable constants for the puzzle engine.

Thresholds and presets here are presentation heuristics, not invariants.
"""

from __future__ import annotations

from dataclasses import dataclass

EMPTY_TILE = 0

MIN_SIZE = 3
MAX_SIZE = 5
DEFAULT_SIZE = 4

DEFAULT_MOVE_BUDGET = 100
DEFAULT_SHUFFLE_STEPS = 50

# How many recently vacated blank positions the generator refuses to revisit.
DEFAULT_AVOID_WINDOW = 1

# (upper bound of manhattan / (S*S*2), label), checked in order.
DIFFICULTY_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (0.3, "Easy"),
    (0.6, "Medium"),
)
HARDEST_LABEL = "Hard"


@dataclass(frozen=True)
class Difficulty:
    name: str
    size: int
    max_moves: int
    shuffle_moves: int

    @classmethod
    def from_name(cls, name: str) -> Difficulty:
        try:
            return PRESETS[name.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown difficulty {name!r}; expected one of "
                f"{', '.join(PRESETS)}."
            ) from None


PRESETS: dict[str, Difficulty] = {
    "easy": Difficulty("Easy", size=3, max_moves=50, shuffle_moves=20),
    "medium": Difficulty("Medium", size=4, max_moves=80, shuffle_moves=35),
    "hard": Difficulty("Hard", size=5, max_moves=120, shuffle_moves=50),
}
