#!/usr/bin/env python3
"""Number Puzzle.

Usage::

    python main.py                    # asks for level and size
    python main.py -l 2 -d m          # level 2 (35 moves), 4×4
    python main.py -f rich --seed 7   # Rich terminal, reproducible deal

Exit status: 0 when the session ends after a win, 1 when the moves ran
out, 2 when the grid could not be created.
"""

import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_CONFIG  # noqa: E402
from backend.engine.gamegenerator import ShuffleGenerator  # noqa: E402
from backend.engine.gameplay.controller import GameController  # noqa: E402
from backend.engine.gamestate import GameStatus  # noqa: E402
from backend.models.level import Difficulty, Level  # noqa: E402
from frontend.cli.input_handler import LineInput  # noqa: E402
from frontend.cli.observability import configure_logging  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_EXIT_CODES = {
    GameStatus.STOPPED: 0,
    GameStatus.COMPLETED: 0,
    GameStatus.LOST: 1,
    GameStatus.ABORTED: 2,
}


# -- helpers ------------------------------------------------------------------


def _build(frontend: Frontend, line_input: LineInput):
    if frontend is Frontend.rich:
        from frontend.cli.rich.app import RichRenderer

        renderer = RichRenderer()
        line_input.reader = renderer.console.input
        line_input.notify = renderer.notify
        return renderer

    from frontend.cli.vanilla.app import VanillaRenderer

    return VanillaRenderer()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="NUMBER_PUZZLE_FRONTEND",
        help="Terminal frontend to use.",
    ),
    level: Optional[int] = typer.Option(
        None, "-l", "--level",
        min=1, max=3,
        envvar="NUMBER_PUZZLE_LEVEL",
        help="Starting level (1-3). Omit to be asked.",
    ),
    difficulty: Optional[Difficulty] = typer.Option(
        None, "-d", "--difficulty",
        case_sensitive=False,
        envvar="NUMBER_PUZZLE_DIFFICULTY",
        help="Starting size: e (3x3), m (4x4) or h (5x5). Omit to be asked.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="NUMBER_PUZZLE_SEED",
        help="Seed for reproducible deals.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar="NUMBER_PUZZLE_LOG_LEVEL",
        help="Logging level for engine diagnostics.",
    ),
) -> None:
    """Number Puzzle."""
    configure_logging(log_level)

    line_input = LineInput(
        level=Level(level) if level is not None else None,
        difficulty=difficulty,
    )
    renderer = _build(frontend, line_input)
    renderer.show_instructions(DEFAULT_CONFIG)

    controller = GameController(
        line_input,
        renderer,
        dealer=ShuffleGenerator(random.Random(seed)),
    )
    try:
        status = controller.run()
    except EOFError:
        # stdin closed (Ctrl-D or end of a pipe)
        status = GameStatus.STOPPED
    raise typer.Exit(_EXIT_CODES.get(status, 0))


if __name__ == "__main__":
    app()
