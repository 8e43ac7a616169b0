"""
Benchmark system for puzzle generation.
"""

import json
import time
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd
from tqdm import tqdm

from .. import config
from ..core.grid import Difficulty
from ..core.exceptions import GenerationExhausted
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger, memory_usage
from ..generators.puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig


@dataclass
class BenchmarkResult:
    """Result from a single generation run"""
    run_id: int
    difficulty: str
    success: bool
    generation_time: float
    memory_mb: float

    # Puzzle characteristics
    size: int = 0
    checkpoints: int = 0
    visible_walls: int = 0

    is_valid: bool = False
    error_message: str = ""
    timestamp: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class BenchmarkConfig:
    """Configuration for generation benchmarks"""

    def __init__(self, **kwargs):
        self.difficulties: List[Difficulty] = kwargs.get('difficulties', list(Difficulty))
        self.puzzles_per_difficulty: int = kwargs.get('puzzles_per_difficulty', 50)
        self.validate: bool = kwargs.get('validate', True)
        self.random_seed: Optional[int] = kwargs.get('random_seed', None)
        self.generator_config: PuzzleGeneratorConfig = kwargs.get(
            'generator_config', PuzzleGeneratorConfig(random_seed=self.random_seed))

        # Output parameters
        self.output_dir: Optional[Path] = kwargs.get('output_dir', config.RESULTS_BENCHMARKS_DIR)
        self.show_progress: bool = kwargs.get('show_progress', True)


class GenerationBenchmark:
    """Measure generation time and puzzle characteristics"""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()
        self.logger = setup_logger(self.__class__.__name__)
        self.generator = PuzzleGenerator(self.config.generator_config)
        self.results: List[BenchmarkResult] = []

    def run(self) -> pd.DataFrame:
        """
        Run the benchmark.

        Returns:
            DataFrame with one row per generation run
        """
        self.logger.info("Starting generation benchmark")
        start_time = time.time()

        total = len(self.config.difficulties) * self.config.puzzles_per_difficulty
        with tqdm(total=total, desc="Generating puzzles",
                  disable=not self.config.show_progress) as pbar:
            for difficulty in self.config.difficulties:
                for _ in range(self.config.puzzles_per_difficulty):
                    self.results.append(self._run_single(len(self.results), difficulty))
                    pbar.update(1)

        results_df = pd.DataFrame([r.to_dict() for r in self.results])

        if self.config.output_dir:
            self._save(results_df)

        self.logger.info(f"Benchmark completed in {time.time() - start_time:.2f} seconds")
        return results_df

    def _run_single(self, run_id: int, difficulty: Difficulty) -> BenchmarkResult:
        """Generate one puzzle and record its statistics"""
        result = BenchmarkResult(
            run_id=run_id,
            difficulty=difficulty.value,
            success=False,
            generation_time=0.0,
            memory_mb=0.0,
            timestamp=datetime.now().isoformat()
        )

        initial_memory = memory_usage()
        start = time.perf_counter()
        try:
            grid = self.generator.generate(difficulty)
        except GenerationExhausted as e:
            result.error_message = str(e)
            self.logger.warning(f"Run {run_id}: {e}")
            return result
        finally:
            result.generation_time = time.perf_counter() - start
            result.memory_mb = memory_usage() - initial_memory

        result.success = True
        result.size = grid.rows
        result.checkpoints = grid.checkpoint_count
        result.visible_walls = len(grid.visible_wall_edges())

        if self.config.validate:
            validation = PuzzleValidator.validate_puzzle(grid, difficulty)
            result.is_valid = validation.is_valid
            if not validation:
                result.error_message = "; ".join(validation.errors)
        else:
            result.is_valid = True

        return result

    def _save(self, results_df: pd.DataFrame):
        """Write CSV results and a JSON summary"""
        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        results_file = self.config.output_dir / f"generation_benchmark_{timestamp}.csv"
        results_df.to_csv(results_file, index=False)

        summary_file = self.config.output_dir / f"generation_benchmark_{timestamp}.json"
        with open(summary_file, 'w') as f:
            json.dump({
                'config': {
                    'difficulties': [d.value for d in self.config.difficulties],
                    'puzzles_per_difficulty': self.config.puzzles_per_difficulty,
                    'random_seed': self.config.random_seed,
                },
                'summary': summarize(results_df),
            }, f, indent=2)

        self.logger.info(f"Results saved to {results_file}")


def summarize(results_df: pd.DataFrame) -> dict:
    """Compute summary statistics per difficulty"""
    summary = {
        'total_runs': int(len(results_df)),
        'successful_runs': int(results_df['success'].sum()) if len(results_df) else 0,
        'by_difficulty': {},
    }
    if results_df.empty:
        return summary

    for difficulty, data in results_df.groupby('difficulty'):
        ok = data[data['success']]
        summary['by_difficulty'][difficulty] = {
            'success_rate': float(data['success'].mean()),
            'valid_rate': float(data['is_valid'].mean()),
            'avg_time': float(data['generation_time'].mean()),
            'max_time': float(data['generation_time'].max()),
            'avg_checkpoints': float(ok['checkpoints'].mean()) if len(ok) else 0.0,
            'avg_visible_walls': float(ok['visible_walls'].mean()) if len(ok) else 0.0,
            'size_distribution': {int(k): int(v) for k, v in ok['size'].value_counts().items()},
        }

    return summary
