from backend.engine.gamestate.state import GameState, GameStatus, MoveBudget

__all__ = ["GameState", "GameStatus", "MoveBudget"]
