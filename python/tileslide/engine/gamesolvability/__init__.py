from tileslide.engine.gamesolvability.solvability import Solvability

__all__ = ["Solvability"]
