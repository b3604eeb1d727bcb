"""Sliding tile puzzle state engine."""

__version__ = "1.0.0"
