"""
Puzzle generators for zip path puzzles.
"""

from .path_finder import HamiltonianPathFinder
from .walls import derive_walls, select_visible_walls, path_edges
from .checkpoints import (
    CHECKPOINT_RANGES, DEFAULT_CHECKPOINT_RANGE,
    checkpoint_range, place_checkpoints
)
from .puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig, generate_puzzle

__all__ = [
    # Main generator
    'PuzzleGenerator', 'PuzzleGeneratorConfig', 'generate_puzzle',

    # Stages
    'HamiltonianPathFinder',
    'derive_walls', 'select_visible_walls', 'path_edges',
    'CHECKPOINT_RANGES', 'DEFAULT_CHECKPOINT_RANGE',
    'checkpoint_range', 'place_checkpoints'
]
