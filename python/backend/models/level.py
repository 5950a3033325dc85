"""Level and difficulty selectors."""

from __future__ import annotations

from enum import IntEnum, StrEnum

from backend.errors import InvalidSelectionError


class Level(IntEnum):
    """Chooses the starting move budget."""

    ONE = 1
    TWO = 2
    THREE = 3

    @classmethod
    def from_symbol(cls, symbol: str) -> Level:
        try:
            return cls(int(symbol.strip()))
        except ValueError:
            raise InvalidSelectionError("level", symbol) from None


class Difficulty(StrEnum):
    """Chooses the grid dimension (the "sub-level")."""

    EASY = "e"
    MEDIUM = "m"
    HARD = "h"

    @classmethod
    def from_symbol(cls, symbol: str) -> Difficulty:
        try:
            return cls(symbol.strip().lower())
        except ValueError:
            raise InvalidSelectionError("difficulty", symbol) from None

    @property
    def label(self) -> str:
        return self.name.capitalize()
