from fifteen.engine.gamegenerator.generator import DEFAULT_SCRAMBLE, GameGenerator

__all__ = ["DEFAULT_SCRAMBLE", "GameGenerator"]
