"""Error types raised by the puzzle engine.

Player mistakes (``OutOfBoundsError``, ``InvalidDirectionSymbolError``,
``InvalidSelectionError``) are recoverable: the controller reports them and
re-prompts.  ``AllocationFailureError`` is fatal for the session.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every engine error."""

    recoverable: bool = True


class OutOfBoundsError(PuzzleError):
    """A coordinate (or the blank's destination) lies outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"({row}, {col}) is outside the {size}x{size} grid")
        self.row = row
        self.col = col
        self.size = size


class InvalidDirectionSymbolError(PuzzleError):
    """The move key does not map to a direction."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"{symbol!r} is not a valid move (use W, A, S or D)")
        self.symbol = symbol


class InvalidSelectionError(PuzzleError):
    """The level or difficulty symbol is not recognised."""

    def __init__(self, kind: str, symbol: str) -> None:
        super().__init__(f"{symbol!r} is not a valid {kind}")
        self.kind = kind
        self.symbol = symbol


class AllocationFailureError(PuzzleError):
    """The grid buffer could not be created."""

    recoverable = False
