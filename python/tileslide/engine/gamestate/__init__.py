from tileslide.engine.gamestate.state import (
    GameState,
    PuzzleStatistics,
    SessionStatus,
)

__all__ = ["GameState", "PuzzleStatistics", "SessionStatus"]
