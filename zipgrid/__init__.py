"""
Generator and validator for zip path puzzles: connect numbered cells in a
single path that visits every cell exactly once.
"""

from .core import (
    Grid, Cell, Walls, Direction, Difficulty,
    PuzzleValidator, ValidationResult,
    PuzzleGenerationError, PathSearchExhausted,
    UniquenessFailed, GenerationExhausted
)
from .generators import PuzzleGenerator, PuzzleGeneratorConfig, generate_puzzle

__version__ = "0.1.0"

__all__ = [
    'generate_puzzle', 'PuzzleGenerator', 'PuzzleGeneratorConfig',
    'Grid', 'Cell', 'Walls', 'Direction', 'Difficulty',
    'PuzzleValidator', 'ValidationResult',
    'PuzzleGenerationError', 'PathSearchExhausted',
    'UniquenessFailed', 'GenerationExhausted'
]
