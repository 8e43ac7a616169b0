"""
In-memory puzzle storage.
"""

from .pool import PuzzlePool, PuzzleCache, PuzzleRecord

__all__ = ['PuzzlePool', 'PuzzleCache', 'PuzzleRecord']
