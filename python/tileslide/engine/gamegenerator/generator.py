"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from collections import deque

from tileslide.config import DEFAULT_AVOID_WINDOW
from tileslide.models.board import Board, Position, adjacent_positions

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by random-walking the blank from the solved state.

    Every step is a legal slide, so the result is solvable by construction.
    """

    @staticmethod
    def generate(
        size: int,
        shuffle_steps: int,
        rng: random.Random | None = None,
        avoid_window: int = DEFAULT_AVOID_WINDOW,
    ) -> Board:
        """Return a board *shuffle_steps* random slides away from solved.

        The blank never steps back onto one of its last *avoid_window*
        positions unless that leaves no candidate at all; ``0`` allows
        immediate reversals.
        """
        if shuffle_steps < 0:
            raise ValueError(f"shuffle_steps must be >= 0, got {shuffle_steps}.")
        if avoid_window < 0:
            raise ValueError(f"avoid_window must be >= 0, got {avoid_window}.")

        choose = (rng or random).choice
        board = Board.solved(size)
        blank = board.blank_pos
        recent: deque[Position] = deque(maxlen=avoid_window or None)

        for _ in range(shuffle_steps):
            target = choose(GameGenerator._candidates(blank, size, recent))
            if avoid_window:
                recent.append(blank)
            board = board.swap(blank, target)
            blank = target

        logger.debug("Generated %dx%d board in %d steps:\n%s",
                     size, size, shuffle_steps, board)
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _candidates(
        blank: Position, size: int, recent: deque[Position]
    ) -> list[Position]:
        neighbors = adjacent_positions(blank, size)
        if not recent:
            return neighbors

        fresh = [p for p in neighbors if p not in recent]
        if fresh:
            return fresh
        # Window boxed the blank in; only forbid the immediate reversal.
        fresh = [p for p in neighbors if p != recent[-1]]
        return fresh or neighbors
