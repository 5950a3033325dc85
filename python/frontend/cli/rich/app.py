"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same line
input and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import GameConfig
from backend.engine.gamestate import GameState
from backend.errors import PuzzleError
from backend.models.board import Grid
from backend.models.level import Difficulty, Level


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: Grid) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.blank - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == grid.blank:
                cells.append("")
            elif grid.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(state: GameState) -> Text:
    stats = Text()
    stats.append("  Level: ", style="dim")
    stats.append(str(int(state.level)), style="bold cyan")
    stats.append("    Size: ", style="dim")
    stats.append(f"{state.grid.size}×{state.grid.size}", style="bold cyan")
    stats.append("    Moves left: ", style="dim")
    stats.append(str(state.moves_left), style="bold yellow")
    return stats


# -- renderer -----------------------------------------------------------------


class RichRenderer:
    """Render collaborator that draws panels on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_instructions(self, config: GameConfig) -> None:
        keys = Table(show_header=False, box=None, padding=(0, 2))
        keys.add_column(style="bold cyan")
        keys.add_column(style="dim")
        keys.add_row("W", "move the blank up")
        keys.add_row("S", "move the blank down")
        keys.add_row("A", "move the blank left")
        keys.add_row("D", "move the blank right")

        levels = Table(show_header=True, box=rich.box.SIMPLE, header_style="bold")
        levels.add_column("Level", justify="center")
        levels.add_column("Moves", justify="right", style="bold yellow")
        for level in Level:
            levels.add_row(str(int(level)), str(config.budget_for(level)))

        panel = Panel(
            Group(keys, Text(""), levels),
            title="[bold]N U M B E R   P U Z Z L E[/bold]",
            border_style="bright_blue",
            padding=(1, 4),
        )
        self.console.print(Align.center(panel))

    def notify(self, message: str) -> None:
        self.console.print(Text(message, style="yellow"))

    def show_goal(self, grid: Grid) -> None:
        panel = Panel(
            Align.center(render_grid(grid)),
            title="[bold]Goal[/bold]",
            subtitle="[dim]reach this arrangement[/dim]",
            border_style="green",
            padding=(1, 2),
        )
        self.console.print(Align.center(panel))

    def show_grid(self, state: GameState) -> None:
        controls = Text()
        controls.append("  WASD", style="bold cyan")
        controls.append("  move the blank, then Enter", style="dim")

        panel = Panel(
            Group(Align.center(render_grid(state.grid)), Text(""), Align.center(_stats(state))),
            title=f"[bold cyan]Number Puzzle  {state.difficulty.label}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )
        self.console.print(Align.center(panel))
        self.console.print(Align.center(controls))

    def show_error(self, error: PuzzleError) -> None:
        style = "yellow" if error.recoverable else "bold red"
        self.console.print(Text(str(error), style=style))

    def show_won(self, state: GameState) -> None:
        self.console.print(
            Align.center(
                Text(
                    f"★ Solved in {state.moves_made} moves! ★",
                    style="bold green",
                )
            )
        )

    def show_lost(self, state: GameState) -> None:
        self.console.print(
            Align.center(Text("Out of moves. LOST, try again!", style="bold red"))
        )

    def show_stage(self, level: Level, difficulty: Difficulty) -> None:
        self.console.print(
            f"[cyan]Next stage:[/cyan] level [bold]{int(level)}[/bold], "
            f"[bold]{difficulty.label}[/bold]"
        )

    def show_completed(self) -> None:
        self.console.print(
            Align.center(Text("You have COMPLETED THE GAME!", style="bold green"))
        )
