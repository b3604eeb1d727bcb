from tileslide.engine.gameanalysis.analyzer import Progress, ProgressAnalyzer

__all__ = ["Progress", "ProgressAnalyzer"]
