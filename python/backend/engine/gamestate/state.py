"""Tracks the mutable state of a round in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.models.board import Grid
from backend.models.level import Difficulty, Level


class GameStatus(StrEnum):
    SELECTING = "selecting"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    COMPLETED = "completed"
    STOPPED = "stopped"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL


_TERMINAL = frozenset({GameStatus.LOST, GameStatus.COMPLETED, GameStatus.STOPPED, GameStatus.ABORTED})


class MoveBudget:
    """A non-negative count of the moves the player has left."""

    def __init__(self, moves: int) -> None:
        if moves < 0:
            raise ValueError(f"move budget must be non-negative, got {moves}")
        self.initial = moves
        self.remaining = moves

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    @property
    def used(self) -> int:
        return self.initial - self.remaining

    def consume(self) -> None:
        if self.exhausted:
            raise ValueError("move budget already exhausted")
        self.remaining -= 1

    def __repr__(self) -> str:
        return f"MoveBudget({self.remaining}/{self.initial})"


class GameState:
    """Holds the current grid, its stage and the move budget."""

    def __init__(self, grid: Grid, level: Level, difficulty: Difficulty, budget: int) -> None:
        self.grid = grid
        self.level = level
        self.difficulty = difficulty
        self.budget = MoveBudget(budget)

    @property
    def moves_left(self) -> int:
        return self.budget.remaining

    @property
    def moves_made(self) -> int:
        return self.budget.used
