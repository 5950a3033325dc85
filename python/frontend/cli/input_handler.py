"""Line-based input for the CLI frontends.

Each answer is one line terminated by Enter.  Invalid level or difficulty
symbols are reported and asked again; move symbols are passed through
untouched because the controller validates them.
"""

from __future__ import annotations

from collections.abc import Callable

from backend.errors import InvalidSelectionError
from backend.models.level import Difficulty, Level

Reader = Callable[[str], str]
Notifier = Callable[[str], None]


class LineInput:
    """Input collaborator reading answers through *reader* (``input`` by default)."""

    def __init__(
        self,
        reader: Reader = input,
        notify: Notifier = print,
        *,
        level: Level | None = None,
        difficulty: Difficulty | None = None,
    ) -> None:
        self.reader = reader
        self.notify = notify
        self.level = level
        self.difficulty = difficulty

    def select_stage(self) -> tuple[Level, Difficulty]:
        level = self.level or self._ask(
            "Choose the level  (1) 40 moves  (2) 35 moves  (3) 30 moves: ",
            Level.from_symbol,
        )
        difficulty = self.difficulty or self._ask(
            "Choose the size  (E) 3x3  (M) 4x4  (H) 5x5: ",
            Difficulty.from_symbol,
        )
        return level, difficulty

    def next_move(self) -> str:
        return self.reader("Play your move (W/A/S/D): ")

    def confirm_continue(self) -> bool:
        return self.reader("Move on to the next stage? (y/n): ").strip().lower() == "y"

    # -- helpers --------------------------------------------------------------

    def _ask(self, prompt: str, parse: Callable[[str], Level | Difficulty]) -> Level | Difficulty:
        while True:
            try:
                return parse(self.reader(prompt))
            except InvalidSelectionError as exc:
                self.notify(str(exc))
