#!/usr/bin/env python3
"""
Script to generate zip path puzzles.

Usage:
    python scripts/generate_puzzles.py --count 30
    python scripts/generate_puzzles.py --count 10 --difficulty hard --visualize
    python scripts/generate_puzzles.py --count 5 --size 3 --seed 42
"""

import click
import sys
from pathlib import Path
from datetime import datetime
import json

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from zipgrid.core.grid import Difficulty
from zipgrid.core.exceptions import GenerationExhausted
from zipgrid.core.utils import PuzzleConverter
from zipgrid.core.validator import PuzzleValidator
from zipgrid.generators.puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig
from zipgrid.storage.pool import PuzzlePool
from zipgrid import config


@click.command()
@click.option('--count', '-n', type=int, default=30,
              help='Number of puzzles to generate')
@click.option('--difficulty', '-d',
              type=click.Choice(['easy', 'medium', 'hard', 'mixed']),
              default='mixed', help='Puzzle difficulty (mixed rotates through all)')
@click.option('--size', '-s', type=click.IntRange(config.MIN_GRID_SIZE, config.MAX_GRID_SIZE),
              default=None, help='Force a square grid size')
@click.option('--output-dir', '-o', type=click.Path(), default=str(config.PUZZLES_DIR),
              help='Output directory for puzzles')
@click.option('--visualize', '-v', is_flag=True,
              help='Create a printable sheet of the generated puzzles')
@click.option('--seed', type=int, default=None,
              help='Random seed for reproducibility')
@click.option('--show', is_flag=True,
              help='Print the first puzzle to the terminal')
def main(count, difficulty, size, output_dir, visualize, seed, show):
    """Generate zip path puzzles and save them as JSON."""

    click.echo("=" * 60)
    click.echo("Zip Path Puzzle Generator")
    click.echo("=" * 60)

    config.ensure_directories()
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    generator_config = PuzzleGeneratorConfig(
        min_size=size or config.MIN_GRID_SIZE,
        max_size=size or config.MAX_GRID_SIZE,
        random_seed=seed
    )
    generator = PuzzleGenerator(generator_config)
    pool = PuzzlePool(generator)

    rotation = list(Difficulty)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    saved = []
    failures = 0
    duplicates = 0

    with click.progressbar(range(count), label='Generating puzzles') as bar:
        for i in bar:
            diff = rotation[i % len(rotation)] if difficulty == 'mixed' else Difficulty(difficulty)

            try:
                grid = generator.generate(diff)
            except GenerationExhausted as e:
                click.echo(f"\n{e}", err=True)
                failures += 1
                continue

            record = pool.add(grid, diff)
            if record is None:
                duplicates += 1
                continue

            puzzle_path = output_path / f"{diff.value}_{grid.rows}x{grid.cols}_{timestamp}_{i:04d}.json"
            grid.save(puzzle_path)
            saved.append((diff, grid))

    click.echo(f"\nSuccessfully generated {len(saved)}/{count} puzzles "
               f"({failures} failed, {duplicates} duplicates skipped)")
    click.echo(f"Puzzles saved to: {output_path}")

    if visualize and saved:
        from zipgrid.visualization.static_viz import PuzzleVisualizer

        sheet_path = config.RESULTS_VIZ_DIR / f"puzzle_sheet_{timestamp}.png"
        PuzzleVisualizer().create_puzzle_sheet(
            [grid for _, grid in saved[:12]], rows=3, cols=4, save_path=sheet_path)
        click.echo(f"Puzzle sheet saved to: {sheet_path}")

    summary = {
        'timestamp': timestamp,
        'requested': count,
        'generated': len(saved),
        'failed': failures,
        'duplicates': duplicates,
        'by_difficulty': pool.count_by_difficulty(),
        'generator_config': {
            'min_size': generator_config.min_size,
            'max_size': generator_config.max_size,
            'seed': seed
        }
    }

    summary_path = output_path / f"generation_summary_{timestamp}.json"
    with open(summary_path, 'w') as f:
        json.dump(summary, f, indent=2)
    click.echo(f"Generation summary saved to: {summary_path}")

    if show and saved:
        diff, grid = saved[0]
        click.echo(f"\nSample {diff.value} puzzle:")
        click.echo(PuzzleConverter.to_string(grid))

        stats = PuzzleValidator.get_puzzle_statistics(grid)
        click.echo(f"\nPuzzle statistics:")
        click.echo(f"  Size: {stats['rows']}x{stats['cols']}")
        click.echo(f"  Checkpoints: {stats['checkpoints']}")
        click.echo(f"  Visible walls: {stats['visible_walls']}")


if __name__ == '__main__':
    main()
