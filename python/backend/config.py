"""Game tables: move budgets, grid sizes and the stage progression."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.level import Difficulty, Level


@dataclass(frozen=True)
class GameConfig:
    budgets: dict[Level, int] = field(
        default_factory=lambda: {Level.ONE: 40, Level.TWO: 35, Level.THREE: 30}
    )
    sizes: dict[Difficulty, int] = field(
        default_factory=lambda: {
            Difficulty.EASY: 3,
            Difficulty.MEDIUM: 4,
            Difficulty.HARD: 5,
        }
    )
    # random-walk scramble length is size * size * scramble_factor
    scramble_factor: int = 100

    def __post_init__(self) -> None:
        for level, moves in self.budgets.items():
            if moves < 1:
                raise ValueError(f"level {int(level)} needs a positive move budget, got {moves}")

    def budget_for(self, level: Level) -> int:
        return self.budgets[level]

    def size_for(self, difficulty: Difficulty) -> int:
        return self.sizes[difficulty]

    def next_stage(
        self, level: Level, difficulty: Difficulty
    ) -> tuple[Level, Difficulty] | None:
        """Return the stage after (level, difficulty), or ``None`` after the last.

        Difficulties advance first (easy → medium → hard); finishing hard
        moves to the next level at easy.
        """
        difficulties = list(Difficulty)
        i = difficulties.index(difficulty)
        if i + 1 < len(difficulties):
            return level, difficulties[i + 1]
        levels = list(Level)
        j = levels.index(level)
        if j + 1 < len(levels):
            return levels[j + 1], difficulties[0]
        return None


DEFAULT_CONFIG = GameConfig()
