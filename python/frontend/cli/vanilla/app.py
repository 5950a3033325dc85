"""Vanilla terminal frontend — no third-party dependencies.

Prints the grid as fixed-width text between two dashed rules::

    -------------
    | 1 | 2 | 3 |
    | 4 | 5 |   |
    | 7 | 8 | 6 |
    -------------
"""

from __future__ import annotations

from collections.abc import Callable

from backend.config import GameConfig
from backend.engine.gamestate import GameState
from backend.errors import PuzzleError
from backend.models.board import Grid
from backend.models.level import Difficulty, Level

Writer = Callable[[str], None]


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: Grid) -> str:
    """Return the plain-text representation of *grid*."""
    width = len(str(grid.blank - 1))  # widest tile number
    rule = "-" * (grid.size * (width + 3) + 1)

    lines: list[str] = [rule]
    for row in grid.rows():
        cells = [" " * width if val == grid.blank else f"{val:>{width}}" for val in row]
        lines.append("| " + " | ".join(cells) + " |")
    lines.append(rule)
    return "\n".join(lines)


# -- renderer -----------------------------------------------------------------


class VanillaRenderer:
    """Render collaborator that writes plain lines through *out*."""

    def __init__(self, out: Writer = print) -> None:
        self.out = out

    def show_instructions(self, config: GameConfig) -> None:
        self.out("")
        self.out("  ====================================")
        self.out("         N U M B E R   P U Z Z L E    ")
        self.out("  ====================================")
        self.out("")
        self.out("  W  move the blank up       S  move the blank down")
        self.out("  A  move the blank left     D  move the blank right")
        self.out("")
        for level in Level:
            self.out(f"  Level {int(level)}: {config.budget_for(level)} moves")
        self.out("")

    def show_goal(self, grid: Grid) -> None:
        self.out("Below is the winning position you need to reach:")
        self.out(render_grid(grid))

    def show_grid(self, state: GameState) -> None:
        self.out(f"Moves left: {state.moves_left}")
        self.out(render_grid(state.grid))

    def show_error(self, error: PuzzleError) -> None:
        self.out(f"Try again: {error}" if error.recoverable else f"Error: {error}")

    def show_won(self, state: GameState) -> None:
        self.out(
            f"You solved the {state.difficulty.label.lower()} grid in "
            f"{state.moves_made} moves. CONGRATULATIONS!"
        )

    def show_lost(self, state: GameState) -> None:
        self.out("LOST! You ran out of moves. TRY AGAIN.")

    def show_stage(self, level: Level, difficulty: Difficulty) -> None:
        self.out(f"You moved to level {int(level)}, {difficulty.label.lower()} grid.")

    def show_completed(self) -> None:
        self.out("Congratulations, you have COMPLETED THE GAME!")
