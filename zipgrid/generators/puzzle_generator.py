"""
Puzzle generator for zip path puzzles.
"""

import random
from typing import List, Optional, Union
from pathlib import Path

from .. import config
from ..core.grid import Grid, Difficulty
from ..core.exceptions import (
    PuzzleGenerationError, UniquenessFailed, GenerationExhausted
)
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger, timer
from .path_finder import HamiltonianPathFinder
from .walls import derive_walls, select_visible_walls
from .checkpoints import CHECKPOINT_RANGES, checkpoint_range, place_checkpoints


class PuzzleGeneratorConfig:
    """Configuration for puzzle generator"""

    def __init__(self, **kwargs):
        self.min_size: int = kwargs.get('min_size', config.MIN_GRID_SIZE)
        self.max_size: int = kwargs.get('max_size', config.MAX_GRID_SIZE)
        self.max_attempts: int = kwargs.get('max_attempts', config.MAX_GENERATION_ATTEMPTS)
        self.max_path_attempts: int = kwargs.get('max_path_attempts', config.MAX_PATH_ATTEMPTS)
        self.max_search_steps: int = kwargs.get('max_search_steps', config.MAX_SEARCH_STEPS)
        self.ensure_unique: bool = kwargs.get('ensure_unique', True)
        self.random_seed: Optional[int] = kwargs.get('random_seed', None)
        self.checkpoint_ranges: dict = kwargs.get('checkpoint_ranges', dict(CHECKPOINT_RANGES))

        # Difficulty-specific parameters
        self.difficulty_params = kwargs.get('difficulty_params', {
            Difficulty.EASY: {
                'visible_walls': None,
            },
            Difficulty.MEDIUM: {
                'visible_walls': None,
            },
            Difficulty.HARD: {
                'visible_walls': config.HARD_VISIBLE_WALLS,
            },
        })

        if not config.MIN_GRID_SIZE <= self.min_size <= self.max_size <= config.MAX_GRID_SIZE:
            raise ValueError(f"Grid sizes must satisfy {config.MIN_GRID_SIZE} <= min_size "
                             f"<= max_size <= {config.MAX_GRID_SIZE}, got "
                             f"{self.min_size}..{self.max_size}")


class PuzzleGenerator:
    """Generate zip path puzzles with a unique solution"""

    def __init__(self, config: Optional[PuzzleGeneratorConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or PuzzleGeneratorConfig()
        self.logger = setup_logger(self.__class__.__name__)
        self.rng = rng or random.Random(self.config.random_seed)
        self.path_finder = HamiltonianPathFinder(self.rng, self.config.max_search_steps)

    @timer
    def generate(self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> Grid:
        """
        Generate a puzzle for the requested difficulty.

        Args:
            difficulty: Target difficulty level

        Returns:
            A fully valid grid with exactly one solution

        Raises:
            GenerationExhausted: if no valid puzzle was produced within
                ``max_attempts`` outer attempts
        """
        difficulty = Difficulty.parse(difficulty)

        for attempt in range(self.config.max_attempts):
            size = self.rng.randint(self.config.min_size, self.config.max_size)
            try:
                grid = self._generate_candidate(size, difficulty)
            except PuzzleGenerationError as e:
                self.logger.debug(f"Attempt {attempt + 1} failed: {e}")
                continue

            self.logger.info(f"Generated {size}x{size} {difficulty.value} puzzle with "
                             f"{grid.checkpoint_count} checkpoints on attempt {attempt + 1}")
            return grid

        self.logger.error(f"Failed to generate {difficulty.value} puzzle after "
                          f"{self.config.max_attempts} attempts")
        raise GenerationExhausted(difficulty.value, self.config.max_attempts)

    def _generate_candidate(self, size: int, difficulty: Difficulty) -> Grid:
        """Build one candidate grid, raising on any failed stage"""
        path = self.path_finder.find_with_retries(size, size, self.config.max_path_attempts)

        grid = derive_walls(path, size, size)
        place_checkpoints(grid, path, self.rng,
                          checkpoint_range(size, self.config.checkpoint_ranges))

        if self.config.ensure_unique:
            solutions = PuzzleValidator.count_solutions(grid, limit=2)
            if solutions != 1:
                raise UniquenessFailed(solutions)

        visible_range = self.config.difficulty_params[difficulty].get('visible_walls')
        if visible_range:
            select_visible_walls(grid, path, self.rng, visible_range)

        return grid

    def generate_batch(self, count: int,
                       difficulty: Optional[Union[Difficulty, str]] = None,
                       save_dir: Optional[Path] = None) -> List[Grid]:
        """
        Generate multiple puzzles.

        Without a difficulty the batch rotates through easy, medium and hard.
        Failed generations are logged and skipped.
        """
        grids = []
        rotation = list(Difficulty)

        for i in range(count):
            diff = Difficulty.parse(difficulty) if difficulty else rotation[i % len(rotation)]
            self.logger.debug(f"Generating puzzle {i + 1}/{count} ({diff.value})")

            try:
                grid = self.generate(diff)
            except GenerationExhausted as e:
                self.logger.warning(str(e))
                continue

            grids.append(grid)
            if save_dir:
                save_dir.mkdir(parents=True, exist_ok=True)
                grid.save(save_dir / f"{diff.value}_{grid.rows}x{grid.cols}_{i:04d}.json")

        self.logger.info(f"Generated {len(grids)}/{count} valid puzzles")
        return grids


def generate_puzzle(difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
                    seed: Optional[int] = None,
                    rng: Optional[random.Random] = None,
                    generator_config: Optional[PuzzleGeneratorConfig] = None) -> Grid:
    """
    Generate one puzzle.

    Each call owns its random source unless ``rng`` is given, so
    concurrent callers do not share state. ``seed`` seeds that source
    and leaves ``generator_config`` untouched.

    Raises:
        GenerationExhausted: if the retry budget is spent
    """
    if rng is None and seed is not None:
        rng = random.Random(seed)
    return PuzzleGenerator(generator_config, rng=rng).generate(difficulty)
