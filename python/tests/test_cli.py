"""Console collaborators and the typer entry point."""

from __future__ import annotations

import io

import pytest
from rich.console import Console
from typer.testing import CliRunner

import main
from backend.config import DEFAULT_CONFIG
from backend.engine.gamestate import GameState
from backend.engine.gameplay.moves import MoveEngine
from backend.errors import OutOfBoundsError
from backend.models.board import Direction, Grid
from backend.models.level import Difficulty, Level
from frontend.cli.input_handler import LineInput
from frontend.cli.rich.app import RichRenderer
from frontend.cli.vanilla.app import VanillaRenderer, render_grid

runner = CliRunner()


class NudgeDealer:
    def __init__(self, rng=None) -> None:
        pass

    def shuffle(self, grid: Grid) -> Grid:
        dealt = grid.copy()
        MoveEngine.apply(dealt, Direction.UP)
        return dealt


def _reader(*answers: str):
    queue = list(answers)
    return lambda prompt: queue.pop(0)


# -- vanilla rendering --------------------------------------------------------


def test_render_solved_3x3() -> None:
    assert render_grid(Grid.initialize_solved(3)) == (
        "-------------\n"
        "| 1 | 2 | 3 |\n"
        "| 4 | 5 | 6 |\n"
        "| 7 | 8 |   |\n"
        "-------------"
    )


def test_render_pads_two_digit_tiles() -> None:
    lines = render_grid(Grid.initialize_solved(4)).splitlines()

    assert lines[1] == "|  1 |  2 |  3 |  4 |"
    assert lines[4] == "| 13 | 14 | 15 |    |"
    assert set(lines[0]) == {"-"}
    assert len(lines[0]) == len(lines[1])


def test_vanilla_renderer_reports_moves_left() -> None:
    out: list[str] = []
    state = GameState(Grid.initialize_solved(3), Level.ONE, Difficulty.EASY, 40)

    VanillaRenderer(out.append).show_grid(state)

    assert out[0] == "Moves left: 40"


# -- rich rendering -----------------------------------------------------------


def test_rich_renderer_draws_tiles_and_stats() -> None:
    buffer = io.StringIO()
    renderer = RichRenderer(Console(file=buffer, width=80, color_system=None))
    state = GameState(Grid.initialize_solved(4), Level.TWO, Difficulty.MEDIUM, 35)

    renderer.show_grid(state)
    renderer.show_error(OutOfBoundsError(0, 4, 4))

    text = buffer.getvalue()
    assert "15" in text
    assert "Moves left: 35" in text
    assert "outside the 4x4 grid" in text


# -- line input ---------------------------------------------------------------


def test_line_input_reprompts_invalid_selection() -> None:
    notes: list[str] = []
    source = LineInput(_reader("9", "2", "x", "H"), notes.append)

    assert source.select_stage() == (Level.TWO, Difficulty.HARD)
    assert len(notes) == 2


def test_line_input_uses_preset_stage() -> None:
    source = LineInput(_reader(), level=Level.THREE, difficulty=Difficulty.EASY)

    assert source.select_stage() == (Level.THREE, Difficulty.EASY)


@pytest.mark.parametrize("answer, expected", [("y", True), ("Y\n", True), ("n", False), ("", False)])
def test_confirm_continue(answer: str, expected: bool) -> None:
    assert LineInput(_reader(answer)).confirm_continue() is expected


# -- entry point --------------------------------------------------------------


def test_cli_win_then_stop(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "ShuffleGenerator", NudgeDealer)

    result = runner.invoke(main.app, ["-l", "1", "-d", "e"], input="s\nn\n")

    assert result.exit_code == 0, result.output
    assert "CONGRATULATIONS" in result.output


def test_cli_lost_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "ShuffleGenerator", NudgeDealer)

    result = runner.invoke(main.app, ["-l", "3", "-d", "E"], input="a\nd\n" * 15)

    assert result.exit_code == 1, result.output
    assert "LOST" in result.output


def test_cli_asks_for_stage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "ShuffleGenerator", NudgeDealer)

    result = runner.invoke(main.app, [], input="7\n2\nm\nw\nx\ns\ns\nn\n")

    assert result.exit_code == 0, result.output
    assert "not a valid level" in result.output
    assert "not a valid move" in result.output
    assert "Moves left: 35" in result.output


def test_rich_notifier_prints_markup_literally() -> None:
    buffer = io.StringIO()
    renderer = RichRenderer(Console(file=buffer, width=80, color_system=None))
    source = LineInput(_reader("[/x]", "1", "[bold]", "e"), renderer.notify)

    assert source.select_stage() == (Level.ONE, Difficulty.EASY)

    text = buffer.getvalue()
    assert "'[/x]' is not a valid level" in text
    assert "'[bold]' is not a valid difficulty" in text


def test_vanilla_instructions_list_every_budget() -> None:
    out: list[str] = []

    VanillaRenderer(out.append).show_instructions(DEFAULT_CONFIG)

    assert "  Level 1: 40 moves" in out
    assert "  Level 2: 35 moves" in out
    assert "  Level 3: 30 moves" in out


def test_rich_instructions_list_every_budget() -> None:
    buffer = io.StringIO()

    RichRenderer(Console(file=buffer, width=80, color_system=None)).show_instructions(DEFAULT_CONFIG)

    text = buffer.getvalue()
    assert "move the blank up" in text
    for moves in ("40", "35", "30"):
        assert moves in text


def test_cli_end_of_input_stops_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "ShuffleGenerator", NudgeDealer)

    result = runner.invoke(main.app, ["-l", "1", "-d", "e"], input="w\n")

    assert result.exit_code == 0, result.output
    assert "Moves left: 39" in result.output


def test_cli_rich_frontend_reprompts_markup_selection(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "ShuffleGenerator", NudgeDealer)

    result = runner.invoke(main.app, ["-f", "rich"], input="[/x]\n3\ne\ns\nn\n")

    assert result.exit_code == 0, result.output
    assert "not a valid level" in result.output
    assert "Moves" in result.output
