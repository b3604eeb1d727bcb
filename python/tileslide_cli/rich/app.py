"""Rich terminal frontend: tables, colours and panels.

A thin consumer of the engine: it reads boards and statistics from a
``GamePlay`` and turns its notifications into status lines.
"""

from __future__ import annotations

from typing import Any

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tileslide.config import EMPTY_TILE, Difficulty
from tileslide.engine.events import GameEvent
from tileslide.engine.gameanalysis import Progress
from tileslide.engine.gameplay import GamePlay
from tileslide.models.board import Board, Direction
from tileslide_cli.input_handler import get_key, get_key_timeout

console = Console()

_DIFFICULTY_STYLE = {"Easy": "green", "Medium": "yellow", "Hard": "red"}


# -- helpers ------------------------------------------------------------------


def format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- rendering ----------------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == EMPTY_TILE:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_progress(progress: Progress, solvable: bool, inversions: int) -> Table:
    """Two-column summary of a board's analysis."""
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim", justify="right")
    table.add_column(style="bold")

    table.add_row(
        "Solvable", "[green]yes[/green]" if solvable else "[red]no[/red]"
    )
    table.add_row("Inversions", str(inversions))
    table.add_row(
        "Correct tiles",
        f"{progress.correct_tiles}/{progress.total_tiles} "
        f"({progress.completion:.1f}%)",
    )
    table.add_row("Manhattan distance", str(progress.manhattan_distance))
    table.add_row("Linear conflicts", str(progress.linear_conflicts))
    table.add_row("Estimated moves", str(progress.estimated_moves))
    style = _DIFFICULTY_STYLE.get(progress.difficulty, "white")
    table.add_row("Difficulty", f"[{style}]{progress.difficulty}[/{style}]")
    return table


def _stats_text(game: GamePlay) -> Text:
    stats = game.statistics()
    text = Text()
    text.append("  Moves: ", style="dim")
    text.append(str(stats.move_count), style="bold yellow")
    text.append("    Left: ", style="dim")
    text.append(
        str(stats.moves_remaining),
        style="bold red" if stats.moves_remaining <= 5 else "bold yellow",
    )
    text.append("    Time: ", style="dim")
    text.append(format_time(stats.elapsed_time), style="bold yellow")
    text.append("    ", style="dim")
    text.append(stats.difficulty, style=_DIFFICULTY_STYLE.get(stats.difficulty, ""))
    return text


def _controls_text() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→/WASD", "move"),
        ("U", "undo"),
        ("R", "restart"),
        ("N", "new"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f"  {label} ", style="dim")
    return controls


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    size = game.size
    panel = Panel(
        Align.center(render_board(game.current_board())),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats_text(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls_text()))


def _draw_finish(game: GamePlay, won: bool) -> None:
    console.clear()

    size = game.size
    stats = game.statistics()
    headline = Text()
    if won:
        headline.append("\n  ★ ", style="bold yellow")
        headline.append("CONGRATULATIONS!", style="bold green")
        headline.append("  You solved it!  ", style="green")
        headline.append("★\n", style="bold yellow")
    else:
        headline.append("\n  OUT OF MOVES  \n", style="bold red")

    summary = Text()
    summary.append("  Moves: ", style="dim")
    summary.append(str(stats.move_count), style="bold yellow")
    summary.append("    Time: ", style="dim")
    summary.append(format_time(stats.elapsed_time), style="bold yellow")
    summary.append("    Efficiency: ", style="dim")
    summary.append(f"{stats.efficiency:.0%}", style="bold yellow")

    colour = "green" if won else "red"
    panel = Panel(
        Group(
            Align.center(render_board(game.current_board())),
            Align.center(headline),
            Align.center(summary),
        ),
        title=f"[bold {colour}]Sliding Puzzle  {size}×{size}[/bold {colour}]",
        border_style=f"bold {colour}",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _watch(game: GamePlay, messages: list[str]) -> None:
    """Turn engine notifications into status lines for the next frame."""

    def invalid(data: dict[str, Any]) -> None:
        messages.append(f"[red]{data['reason']}[/red]")

    def undone(data: dict[str, Any]) -> None:
        messages.append(f"[cyan]Undid move {data['move'].number}[/cyan]")

    def reset(data: dict[str, Any]) -> None:
        messages.append("[yellow]Puzzle restarted[/yellow]")

    def generated(data: dict[str, Any]) -> None:
        messages.append(f"[yellow]New {data['difficulty'].lower()} puzzle[/yellow]")

    game.events.on(GameEvent.INVALID_MOVE, invalid)
    game.events.on(GameEvent.MOVE_UNDONE, undone)
    game.events.on(GameEvent.PUZZLE_RESET, reset)
    game.events.on(GameEvent.PUZZLE_GENERATED, generated)


def _play_game(game: GamePlay, shuffle_steps: int) -> None:
    messages: list[str] = []
    _watch(game, messages)

    while True:
        while not game.status.is_terminal:
            status = messages[-1] if messages else ""
            messages.clear()
            _draw_game(game, status)

            # Short timeout so the clock keeps ticking.
            key = get_key_timeout(0.5)
            while key is None:
                if game.move_count:
                    _draw_game(game, status)
                key = get_key_timeout(0.5)

            if key in _DIRECTIONS:
                game.slide(_DIRECTIONS[key])
            elif key == "undo":
                if not game.undo():
                    messages.append("[dim]Nothing to undo[/dim]")
            elif key == "restart":
                game.reset()
            elif key == "new":
                game.regenerate(shuffle_steps)
            elif key == "quit":
                return

        _draw_finish(game, won=game.is_won)
        console.print(
            Align.center(
                Text("\n  R restart  N new puzzle  Q quit\n", style="dim")
            )
        )
        while True:
            key = get_key()
            if key == "restart":
                game.reset()
                break
            if key == "new":
                game.regenerate(shuffle_steps)
                break
            if key == "quit":
                return


# -- public entry point -------------------------------------------------------


def run(difficulty: Difficulty) -> None:
    """Play puzzles at *difficulty* until the player quits."""
    game = GamePlay.from_difficulty(difficulty)
    _play_game(game, difficulty.shuffle_moves)
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
