"""Produces shuffled starting grids."""

from __future__ import annotations

import logging
import random

from backend.engine.gamechecker import WinChecker
from backend.engine.gameplay.moves import MoveEngine
from backend.models.board import Direction, Grid

logger = logging.getLogger(__name__)


class ShuffleGenerator:
    """Deals random grids from the solved arrangement.

    ``shuffle`` deals a uniform permutation (Fisher–Yates) and, unless
    ``ensure_solvable`` is off, repairs its parity so the deal can be solved.
    ``scramble`` walks the blank randomly and reports the moves it made.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        ensure_solvable: bool = True,
        scramble_factor: int = 100,
    ) -> None:
        self.rng = rng or random.Random()
        self.ensure_solvable = ensure_solvable
        self.scramble_factor = scramble_factor

    def shuffle(self, grid: Grid) -> Grid:
        """Return a new, unsolved grid holding the same values as *grid*."""
        while True:
            values = grid.flat()
            for i in range(len(values) - 1, 0, -1):
                j = self.rng.randint(0, i)
                values[i], values[j] = values[j], values[i]
            dealt = Grid(grid.size, values)

            if self.ensure_solvable and not WinChecker.is_solvable(dealt):
                self._fix_parity(dealt)

            # Ensure the deal is not already solved
            if not WinChecker.is_solved(dealt):
                logger.debug("Dealt %dx%d grid %s", grid.size, grid.size, dealt.flat())
                return dealt

    def scramble(self, grid: Grid, steps: int | None = None) -> list[Direction]:
        """Scramble *grid* in place with random legal moves.

        Never immediately undoes the previous move.  Returns the directions
        applied, so replaying their opposites in reverse restores *grid*.
        """
        if steps is None:
            steps = grid.size * grid.size * self.scramble_factor
        history: list[Direction] = []
        for _ in range(steps):
            options = MoveEngine.legal_moves(grid)
            if history and history[-1].opposite in options and len(options) > 1:
                options.remove(history[-1].opposite)
            direction = self.rng.choice(options)
            MoveEngine.apply(grid, direction)
            history.append(direction)
        return history

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _fix_parity(grid: Grid) -> None:
        """Swap the first two non-blank tiles, flipping the permutation parity."""
        cells = [
            (r, c)
            for r in range(grid.size)
            for c in range(grid.size)
            if grid.get(r, c) != grid.blank
        ]
        grid.swap(cells[0], cells[1])
        logger.debug("Swapped %s and %s to make the deal solvable", cells[0], cells[1])
