"""Game flow — stage selection, the move budget and the play loop.

The controller is the only place that decides whether a session goes on.
It talks to the outside world through two collaborators:

* an ``InputSource`` that picks the first stage, supplies move symbols and
  answers the "next stage?" question;
* a ``Renderer`` that is shown grids, errors and outcomes.

State machine::

    SELECTING ──> PLAYING ──> WON ──(continue)──> SELECTING
                     │          ├──(stop)──────> STOPPED
                     │          └──(last stage)> COMPLETED
                     └──(budget spent)────────> LOST

A grid that cannot be allocated ends the session in ABORTED.
"""

from __future__ import annotations

import logging
from typing import Protocol

from backend.config import DEFAULT_CONFIG, GameConfig
from backend.engine.gamechecker import WinChecker
from backend.engine.gamegenerator import ShuffleGenerator
from backend.engine.gameplay.moves import MoveEngine
from backend.engine.gamestate import GameState, GameStatus
from backend.errors import (
    AllocationFailureError,
    InvalidDirectionSymbolError,
    OutOfBoundsError,
    PuzzleError,
)
from backend.models.board import Direction, Grid
from backend.models.level import Difficulty, Level

logger = logging.getLogger(__name__)


# -- collaborators ------------------------------------------------------------


class InputSource(Protocol):
    def select_stage(self) -> tuple[Level, Difficulty]: ...

    def next_move(self) -> str: ...

    def confirm_continue(self) -> bool: ...


class Renderer(Protocol):
    def show_goal(self, grid: Grid) -> None: ...

    def show_grid(self, state: GameState) -> None: ...

    def show_error(self, error: PuzzleError) -> None: ...

    def show_won(self, state: GameState) -> None: ...

    def show_lost(self, state: GameState) -> None: ...

    def show_stage(self, level: Level, difficulty: Difficulty) -> None: ...

    def show_completed(self) -> None: ...


class Dealer(Protocol):
    def shuffle(self, grid: Grid) -> Grid: ...


# -- controller ---------------------------------------------------------------


class GameController:
    """Owns the grid and drives one session from stage selection to the end."""

    def __init__(
        self,
        input_source: InputSource,
        renderer: Renderer,
        *,
        dealer: Dealer | None = None,
        config: GameConfig = DEFAULT_CONFIG,
        stage: tuple[Level, Difficulty] | None = None,
    ) -> None:
        self.input = input_source
        self.renderer = renderer
        self.dealer = dealer or ShuffleGenerator(scramble_factor=config.scramble_factor)
        self.config = config
        self.status = GameStatus.SELECTING
        self.state: GameState | None = None
        self.error: PuzzleError | None = None
        self._stage = stage

    # -- transitions ----------------------------------------------------------

    def select(self) -> GameStatus:
        """Set up the pending stage: goal grid, budget, then the shuffled deal."""
        self._require(GameStatus.SELECTING)
        if self._stage is None:
            self._stage = self.input.select_stage()
        level, difficulty = self._stage

        try:
            grid = Grid.initialize_solved(self.config.size_for(difficulty))
        except AllocationFailureError as exc:
            logger.error("Could not create the grid for %s/%s: %s", level, difficulty, exc)
            self.error = exc
            self.renderer.show_error(exc)
            return self._enter(GameStatus.ABORTED)

        self.state = GameState(grid, level, difficulty, self.config.budget_for(level))
        self.renderer.show_goal(grid)
        self.state.grid = self.dealer.shuffle(grid)
        self.renderer.show_grid(self.state)
        if self.state.budget.exhausted:
            self.renderer.show_lost(self.state)
            return self._enter(GameStatus.LOST)
        return self._enter(GameStatus.PLAYING)

    def play_move(self, move: str | Direction) -> GameStatus:
        """Apply one move.  Bad keys and illegal moves cost nothing."""
        self._require(GameStatus.PLAYING)
        state = self.state
        if state.budget.exhausted:
            self.renderer.show_lost(state)
            return self._enter(GameStatus.LOST)
        try:
            direction = move if isinstance(move, Direction) else Direction.from_symbol(move)
            MoveEngine.apply(state.grid, direction)
        except (InvalidDirectionSymbolError, OutOfBoundsError) as exc:
            logger.info("Move %r refused: %s", move, exc)
            self.renderer.show_error(exc)
            return self.status

        state.budget.consume()
        self.renderer.show_grid(state)

        if WinChecker.is_solved(state.grid):
            self.renderer.show_won(state)
            return self._enter(GameStatus.WON)
        if state.budget.exhausted:
            self.renderer.show_lost(state)
            return self._enter(GameStatus.LOST)
        return self.status

    def decide(self, carry_on: bool) -> GameStatus:
        """Leave the WON state: next stage, completion, or stop."""
        self._require(GameStatus.WON)
        if not carry_on:
            return self._enter(GameStatus.STOPPED)

        nxt = self.config.next_stage(self.state.level, self.state.difficulty)
        if nxt is None:
            self.renderer.show_completed()
            return self._enter(GameStatus.COMPLETED)

        self._stage = nxt
        self.renderer.show_stage(*nxt)
        return self._enter(GameStatus.SELECTING)

    # -- loop -----------------------------------------------------------------

    def run(self) -> GameStatus:
        """Drive the session until it reaches a terminal state."""
        while not self.status.is_terminal:
            if self.status is GameStatus.SELECTING:
                self.select()
            elif self.status is GameStatus.PLAYING:
                self.play_move(self.input.next_move())
            elif self.status is GameStatus.WON:
                self.decide(self.input.confirm_continue())
        return self.status

    # -- helpers --------------------------------------------------------------

    def _enter(self, status: GameStatus) -> GameStatus:
        logger.debug("%s -> %s", self.status, status)
        self.status = status
        return status

    def _require(self, status: GameStatus) -> None:
        if self.status is not status:
            raise RuntimeError(f"expected {status} state, controller is {self.status}")
