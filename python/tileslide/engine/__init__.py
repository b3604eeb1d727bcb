from tileslide.engine.events import EventEmitter, GameEvent
from tileslide.engine.gameanalysis import Progress, ProgressAnalyzer
from tileslide.engine.gamegenerator import GameGenerator
from tileslide.engine.gameplay import GamePlay
from tileslide.engine.gamesolvability import Solvability
from tileslide.engine.gamestate import GameState, PuzzleStatistics, SessionStatus
from tileslide.engine.gamevalidator import MoveValidator, ValidMove, WinCondition

__all__ = [
    "EventEmitter",
    "GameEvent",
    "GameGenerator",
    "GamePlay",
    "GameState",
    "MoveValidator",
    "Progress",
    "ProgressAnalyzer",
    "PuzzleStatistics",
    "SessionStatus",
    "Solvability",
    "ValidMove",
    "WinCondition",
]
