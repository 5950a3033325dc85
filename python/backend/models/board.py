"""Grid model for the number puzzle.

Tiles are stored in one flat row-major list of ``size * size`` ints.  The
value ``size * size`` is the blank sentinel, so a solved 3×3 grid reads::

    1 2 3
    4 5 6
    7 8 _      # _ is 9
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import StrEnum

from backend.errors import AllocationFailureError, InvalidDirectionSymbolError, OutOfBoundsError


class Direction(StrEnum):
    """Where the *blank* moves.

    ``UP`` swaps the blank with the tile above it, so that tile slides down.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_symbol(cls, symbol: str) -> Direction:
        """Map a W/A/S/D key (any case) to a direction."""
        try:
            return _SYMBOLS[symbol.strip().lower()]
        except KeyError:
            raise InvalidDirectionSymbolError(symbol) from None

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_SYMBOLS: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

# (row delta, col delta) of the blank
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Grid:
    """An N×N permutation of ``1..N²`` with ``N²`` marking the blank cell."""

    def __init__(self, size: int, cells: Sequence[int] | None = None) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise AllocationFailureError(f"cannot allocate a grid of size {size!r}")
        try:
            self._cells: list[int] = (
                list(range(1, size * size + 1)) if cells is None else list(cells)
            )
        except MemoryError as exc:
            raise AllocationFailureError(f"cannot allocate a {size}x{size} grid") from exc
        if len(self._cells) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(self._cells)}."
            )
        self.size = size
        self._blank: tuple[int, int] | None = self._locate_blank()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def initialize_solved(cls, size: int) -> Grid:
        """Return the goal arrangement: ascending row-major, blank last."""
        return cls(size)

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Grid:
        """Create a grid from a flat row-major list, rejecting non-permutations.

        Example::

            Grid.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 9, 8])
        """
        grid = cls(size, list(flat))
        if not grid.is_permutation_valid():
            raise ValueError(f"{grid.flat()} is not a permutation of 1..{size * size}")
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        return cls.from_flat(len(rows), [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        """The sentinel value for the blank cell."""
        return self.size * self.size

    def get(self, row: int, col: int) -> int:
        return self._cells[self._index(row, col)]

    def blank_position(self) -> tuple[int, int]:
        if self._blank is None:
            raise ValueError("grid has no blank cell")
        return self._blank

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_permutation_valid(self) -> bool:
        return sorted(self._cells) == list(range(1, self.blank + 1))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if the tile at (row, col) sits in its goal position."""
        return self.get(row, col) == row * self.size + col + 1

    def flat(self) -> list[int]:
        return list(self._cells)

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self._cells[r * n : (r + 1) * n] for r in range(n)]

    # -- mutation -------------------------------------------------------------

    def set(self, row: int, col: int, value: int) -> None:
        """Write one cell.

        No permutation check is made: a duplicate value or an overwritten
        blank is accepted.  Only ``swap`` preserves the permutation.
        """
        if not 1 <= value <= self.blank:
            raise ValueError(f"tile value {value} outside 1..{self.blank}")
        index = self._index(row, col)
        self._cells[index] = value
        if value == self.blank:
            self._blank = (row, col)
        elif self._blank == (row, col):
            self._blank = self._locate_blank()

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        """Exchange two cells, moving the blank cache along if it is involved."""
        ia, ib = self._index(*a), self._index(*b)
        self._cells[ia], self._cells[ib] = self._cells[ib], self._cells[ia]
        if self._blank == a:
            self._blank = b
        elif self._blank == b:
            self._blank = a

    def copy(self) -> Grid:
        return Grid(self.size, self._cells)

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self.size}, {self._cells})"

    # -- helpers --------------------------------------------------------------

    def _index(self, row: int, col: int) -> int:
        if not self.contains(row, col):
            raise OutOfBoundsError(row, col, self.size)
        return row * self.size + col

    def _locate_blank(self) -> tuple[int, int] | None:
        try:
            index = self._cells.index(self.size * self.size)
        except ValueError:
            return None
        return divmod(index, self.size)
