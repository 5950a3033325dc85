"""Single-move validation and application."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from backend.errors import OutOfBoundsError
from backend.models.board import Direction, Grid

logger = logging.getLogger(__name__)


class MoveEngine:
    """Stateless move rules — all methods are static."""

    @staticmethod
    def target(grid: Grid, direction: Direction) -> tuple[int, int]:
        """Return the cell the blank would move to (may lie off the grid)."""
        br, bc = grid.blank_position()
        dr, dc = direction.offset
        return br + dr, bc + dc

    @staticmethod
    def can_apply(grid: Grid, direction: Direction) -> bool:
        return grid.contains(*MoveEngine.target(grid, direction))

    @staticmethod
    def legal_moves(grid: Grid) -> list[Direction]:
        return [d for d in Direction if MoveEngine.can_apply(grid, d)]

    @staticmethod
    def apply(grid: Grid, direction: Direction) -> None:
        """Move the blank one cell in *direction*.

        The destination is checked before anything is written, so an
        ``OutOfBoundsError`` leaves *grid* exactly as it was.
        """
        tr, tc = MoveEngine.target(grid, direction)
        if not grid.contains(tr, tc):
            logger.debug("Rejected %s: blank would leave the grid at (%d, %d)", direction, tr, tc)
            raise OutOfBoundsError(tr, tc, grid.size)
        grid.swap(grid.blank_position(), (tr, tc))

    @staticmethod
    def apply_all(grid: Grid, directions: Iterable[Direction]) -> int:
        """Apply *directions* in order and return how many were applied.

        Stops at the first illegal move by re-raising its error; moves
        applied before it stay applied.
        """
        applied = 0
        for direction in directions:
            MoveEngine.apply(grid, direction)
            applied += 1
        return applied
