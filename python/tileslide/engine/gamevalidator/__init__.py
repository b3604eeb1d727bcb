from tileslide.engine.gamevalidator.validator import (
    Misplaced,
    MoveValidator,
    ValidMove,
    WinCondition,
)

__all__ = ["Misplaced", "MoveValidator", "ValidMove", "WinCondition"]
