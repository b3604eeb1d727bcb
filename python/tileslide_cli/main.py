"""Sliding Puzzle command line.

Usage::

    tileslide play                    # Rich terminal game, medium preset
    tileslide play -d hard            # 5×5, 120 moves
    tileslide check 1 2 3 4 5 6 7 0 8 # analyse a row-major board
    tileslide generate -s 4 --json    # fresh session as JSON
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
import random
from enum import StrEnum
from typing import List, Optional

import typer
from rich.logging import RichHandler
from rich.text import Text

from tileslide.config import (
    DEFAULT_MOVE_BUDGET,
    DEFAULT_SHUFFLE_STEPS,
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    Difficulty,
)
from tileslide.engine.gameanalysis import ProgressAnalyzer
from tileslide.engine.gameplay import GamePlay
from tileslide.engine.gamesolvability import Solvability
from tileslide.engine.gamevalidator import MoveValidator
from tileslide.models.board import Board
from tileslide_cli.rich.app import console, render_board, render_progress

app = typer.Typer(add_completion=False, no_args_is_help=True)

EXIT_MALFORMED = 1
EXIT_UNSOLVABLE = 2


class Preset(StrEnum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _print_analysis(board: Board) -> bool:
    solvable = Solvability.is_solvable(board)
    console.print(render_board(board))
    console.print(
        render_progress(
            ProgressAnalyzer.analyze(board),
            solvable,
            Solvability.count_inversions(board),
        )
    )
    return solvable


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log engine activity."
    ),
) -> None:
    """Sliding Puzzle Game."""
    _setup_logging(verbose)


@app.command()
def play(
    difficulty: Preset = typer.Option(
        Preset.medium, "-d", "--difficulty", help="Preset to start from."
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size", min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}); overrides the preset.",
    ),
    shuffle: Optional[int] = typer.Option(
        None, "--shuffle", min=0, help="Random slides used to shuffle."
    ),
    budget: Optional[int] = typer.Option(
        None, "--budget", min=1, help="Moves allowed before game over."
    ),
) -> None:
    """Play in the terminal."""
    from tileslide_cli.rich import app as rich_app

    preset = Difficulty.from_name(difficulty.value)
    overrides = {
        k: v
        for k, v in (("size", size), ("shuffle_moves", shuffle), ("max_moves", budget))
        if v is not None
    }
    rich_app.run(dataclasses.replace(preset, **overrides))


@app.command()
def check(
    tiles: List[int] = typer.Argument(
        ..., help="Row-major tile values, 0 for the blank."
    ),
) -> None:
    """Analyse a board: structure, solvability and progress metrics."""
    size = math.isqrt(len(tiles))
    rows = [tiles[r * size : (r + 1) * size] for r in range(size)]
    if size * size != len(tiles):
        problems = [f"{len(tiles)} values do not form a square board"]
    else:
        problems = MoveValidator.check_board(rows)
    if problems:
        for problem in problems:
            console.print(Text(f"✗ {problem}", style="red"))
        raise typer.Exit(EXIT_MALFORMED)

    board = Board.from_rows(rows)
    solvable = _print_analysis(board)

    moves = MoveValidator.valid_moves(board)
    console.print(
        "Valid moves: "
        + ", ".join(f"{m.tile} ({m.direction})" for m in moves)
    )
    if not solvable:
        raise typer.Exit(EXIT_UNSOLVABLE)


@app.command()
def generate(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size", min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    steps: int = typer.Option(
        DEFAULT_SHUFFLE_STEPS, "--steps", min=0, help="Random slides from solved."
    ),
    budget: int = typer.Option(
        DEFAULT_MOVE_BUDGET, "--budget", min=1, help="Moves allowed."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for a reproducible shuffle."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the session export instead of a table."
    ),
) -> None:
    """Generate a solvable board."""
    rng = random.Random(seed) if seed is not None else None
    game = GamePlay(size, steps, budget, rng=rng)

    if as_json:
        typer.echo(json.dumps(game.export_state(), indent=2))
        return
    _print_analysis(game.current_board())


if __name__ == "__main__":
    app()
