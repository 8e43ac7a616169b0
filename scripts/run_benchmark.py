#!/usr/bin/env python3
"""
Script to benchmark zip path puzzle generation.

Usage:
    python scripts/run_benchmark.py --suite quick
    python scripts/run_benchmark.py -d hard -n 200 --seed 1
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from zipgrid.core.grid import Difficulty
from zipgrid.analysis.benchmark import GenerationBenchmark, BenchmarkConfig, summarize
from zipgrid import config


# Predefined benchmark suites
BENCHMARK_SUITES = {
    'quick': {
        'difficulties': list(Difficulty),
        'puzzles_per_difficulty': 20,
    },
    'standard': {
        'difficulties': list(Difficulty),
        'puzzles_per_difficulty': 200,
    },
    'full': {
        'difficulties': list(Difficulty),
        'puzzles_per_difficulty': 1000,
    },
}


@click.command()
@click.option('--suite', type=click.Choice(list(BENCHMARK_SUITES)),
              help='Use predefined benchmark suite')
@click.option('--difficulties', '-d', multiple=True,
              type=click.Choice(['easy', 'medium', 'hard']),
              help='Difficulty levels to test')
@click.option('--puzzles-per-difficulty', '-n', type=int, default=50,
              help='Number of puzzles per difficulty')
@click.option('--no-validate', is_flag=True,
              help='Skip validating each generated puzzle')
@click.option('--seed', type=int, default=None,
              help='Random seed for reproducibility')
@click.option('--output-dir', '-o', type=click.Path(), default=str(config.RESULTS_BENCHMARKS_DIR),
              help='Output directory for results')
def main(suite, difficulties, puzzles_per_difficulty, no_validate, seed, output_dir):
    """Run generation benchmarks."""

    if suite:
        params = dict(BENCHMARK_SUITES[suite])
        click.echo(f"Using '{suite}' benchmark suite")
    else:
        params = {
            'difficulties': [Difficulty(d) for d in difficulties] or list(Difficulty),
            'puzzles_per_difficulty': puzzles_per_difficulty,
        }

    benchmark_config = BenchmarkConfig(
        validate=not no_validate,
        random_seed=seed,
        output_dir=Path(output_dir),
        **params
    )

    click.echo(f"Difficulties: {', '.join(d.value for d in benchmark_config.difficulties)}")
    click.echo(f"Puzzles per difficulty: {benchmark_config.puzzles_per_difficulty}")

    results_df = GenerationBenchmark(benchmark_config).run()
    summary = summarize(results_df)

    click.echo("\n" + "=" * 60)
    click.echo("BENCHMARK SUMMARY")
    click.echo("=" * 60)
    click.echo(f"Runs: {summary['total_runs']}, successful: {summary['successful_runs']}")

    for difficulty, stats in summary['by_difficulty'].items():
        click.echo(f"\n{difficulty.upper()}:")
        click.echo(f"  Success rate: {stats['success_rate']:.1%}")
        click.echo(f"  Valid rate: {stats['valid_rate']:.1%}")
        click.echo(f"  Avg time: {stats['avg_time'] * 1000:.1f} ms (max {stats['max_time'] * 1000:.1f} ms)")
        click.echo(f"  Avg checkpoints: {stats['avg_checkpoints']:.1f}")
        click.echo(f"  Avg visible walls: {stats['avg_visible_walls']:.1f}")
        click.echo(f"  Sizes: {stats['size_distribution']}")


if __name__ == '__main__':
    main()
