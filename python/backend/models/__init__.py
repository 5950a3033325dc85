from backend.models.board import Direction, Grid
from backend.models.level import Difficulty, Level

__all__ = ["Difficulty", "Direction", "Grid", "Level"]
