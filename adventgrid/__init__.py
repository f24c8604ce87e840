"""Solvers for ten grid and sequence puzzles, with a rectangular grid container."""

__version__ = "0.1.0"