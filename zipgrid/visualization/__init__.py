"""
Visualization tools for zip path puzzles.
"""

from .static_viz import PuzzleVisualizer

__all__ = ['PuzzleVisualizer']
