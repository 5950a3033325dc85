"""Win detection and solvability parity."""

from __future__ import annotations

from backend.models.board import Grid


class WinChecker:
    """Stateless checks — all methods are static."""

    @staticmethod
    def is_solved(grid: Grid) -> bool:
        """Return True iff *grid* equals the solved grid of its size."""
        return grid == Grid.initialize_solved(grid.size)

    @staticmethod
    def is_solvable(grid: Grid) -> bool:
        """Return True if *grid* can reach the goal using blank moves.

        Every move is a transposition (flips the permutation parity) and
        shifts the blank by one cell (flips its distance parity), so the two
        parities agree exactly on the arrangements reachable from the goal.
        """
        return WinChecker.inversions(grid) % 2 == WinChecker.blank_distance(grid) % 2

    @staticmethod
    def inversions(grid: Grid) -> int:
        """Count pairs that appear out of order in the row-major values."""
        values = grid.flat()
        count = 0
        for i, a in enumerate(values):
            for b in values[i + 1 :]:
                if a > b:
                    count += 1
        return count

    @staticmethod
    def blank_distance(grid: Grid) -> int:
        """Manhattan distance of the blank from the bottom-right cell."""
        br, bc = grid.blank_position()
        last = grid.size - 1
        return (last - br) + (last - bc)
