from backend.engine.gamechecker.checker import WinChecker

__all__ = ["WinChecker"]
