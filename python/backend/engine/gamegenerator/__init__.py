from backend.engine.gamegenerator.generator import ShuffleGenerator

__all__ = ["ShuffleGenerator"]
