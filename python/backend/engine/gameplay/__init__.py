from backend.engine.gameplay.moves import MoveEngine

__all__ = ["MoveEngine"]
