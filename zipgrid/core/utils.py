"""
Utility functions for zip path puzzles.
"""

import hashlib
import json
import logging
import os
import time
from functools import wraps
from pathlib import Path
from typing import List, Optional

import numpy as np
import psutil

from .. import config
from .grid import Grid, Direction


def setup_logger(name: str, log_file: Optional[Path] = None,
                 level: str = config.LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def timer(func):
    """Decorator to time function execution"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        # Try to get logger from first argument (usually self)
        if args and hasattr(args[0], 'logger'):
            args[0].logger.debug(f"{func.__name__} took {execution_time:.3f} seconds")
        else:
            logging.getLogger(func.__module__).debug(
                f"{func.__name__} took {execution_time:.3f} seconds")

        return result
    return wrapper


def memory_usage() -> float:
    """Get current memory usage in MB"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def content_hash(grid: Grid) -> str:
    """Stable hash of a grid's serialized form, used for deduplication"""
    payload = json.dumps(grid.to_list(), sort_keys=True, separators=(',', ':'))
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


class PuzzleConverter:
    """Convert puzzles between different formats"""

    @staticmethod
    def to_array(grid: Grid) -> np.ndarray:
        """
        Convert grid to 2D array of checkpoint numbers.
        0: plain cell, 1..K: checkpoint
        """
        array = np.zeros((grid.rows, grid.cols), dtype=int)
        for cell in grid:
            array[cell.row, cell.col] = cell.num
        return array

    @staticmethod
    def wall_mask(grid: Grid, visible: bool = False) -> np.ndarray:
        """
        Boolean array of shape (rows, cols, 4) in N, S, E, W order.
        """
        mask = np.zeros((grid.rows, grid.cols, 4), dtype=bool)
        for cell in grid:
            walls = cell.visible_walls if visible else cell.walls
            mask[cell.row, cell.col] = [walls[d] for d in Direction]
        return mask

    @staticmethod
    def to_string(grid: Grid, show_internal: bool = False) -> str:
        """
        Convert grid to ASCII art.

        Args:
            grid: The grid to convert
            show_internal: Draw internal walls too, not only visible ones

        Returns:
            String representation of the grid
        """
        def closed(cell, direction):
            if cell.visible_walls[direction]:
                return True
            return show_internal and cell.walls[direction]

        lines = []
        for r, row in enumerate(grid.cells):
            top = '+'
            for cell in row:
                edge = r == 0 or closed(cell, Direction.N)
                top += ('---' if edge else '   ') + '+'
            lines.append(top)

            middle = '|'
            for c, cell in enumerate(row):
                label = str(cell.num) if cell.num else ' '
                middle += label.center(3)
                edge = c == grid.cols - 1 or closed(cell, Direction.E)
                middle += '|' if edge else ' '
            lines.append(middle)

        lines.append('+' + '---+' * grid.cols)
        return '\n'.join(lines)


def save_puzzle_batch(grids: List[Grid], directory: Path, prefix: str = "puzzle") -> List[Path]:
    """Save multiple grids to a directory"""
    directory.mkdir(parents=True, exist_ok=True)

    paths = []
    for i, grid in enumerate(grids):
        filename = directory / f"{prefix}_{i:04d}.json"
        grid.save(filename)
        paths.append(filename)
    return paths


def load_puzzle_batch(directory: Path, pattern: str = "*.json") -> List[Grid]:
    """Load multiple grids from a directory, skipping unreadable files"""
    logger = logging.getLogger(__name__)
    grids = []

    for filepath in sorted(directory.glob(pattern)):
        try:
            grids.append(Grid.load(filepath))
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Error loading {filepath}: {e}")

    return grids
