# zipgrid/core/__init__.py
"""
Core data structures and utilities for zip path puzzles.
"""

from .grid import Grid, Cell, Walls, Direction, Difficulty, Position
from .exceptions import (
    PuzzleGenerationError, PathSearchExhausted,
    UniquenessFailed, GenerationExhausted
)
from .validator import PuzzleValidator, ValidationResult
from .utils import (
    setup_logger, timer, memory_usage, content_hash,
    PuzzleConverter, save_puzzle_batch, load_puzzle_batch
)

__all__ = [
    # Data structures
    'Grid', 'Cell', 'Walls', 'Direction', 'Difficulty', 'Position',

    # Errors
    'PuzzleGenerationError', 'PathSearchExhausted',
    'UniquenessFailed', 'GenerationExhausted',

    # Validation
    'PuzzleValidator', 'ValidationResult',

    # Utilities
    'setup_logger', 'timer', 'memory_usage', 'content_hash',
    'PuzzleConverter', 'save_puzzle_batch', 'load_puzzle_batch'
]
