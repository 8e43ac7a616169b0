"""Tests for matplotlib rendering."""
import matplotlib.pyplot as plt

from zipgrid.generators.puzzle_generator import PuzzleGenerator, PuzzleGeneratorConfig
from zipgrid.visualization.static_viz import PuzzleVisualizer


def test_visualize_saves_png(tmp_path):
    grid = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=4)).generate("hard")
    save_path = tmp_path / "viz" / "puzzle.png"

    fig = PuzzleVisualizer(dpi=50).visualize(
        grid, show_solution=True, show_internal_walls=True,
        title="Hard", save_path=save_path, show_plot=False)

    assert save_path.exists()
    assert fig.axes[0].get_title() == "Hard"


def test_puzzle_sheet_hides_unused_axes(tmp_path):
    gen = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=5))
    grids = [gen.generate("easy") for _ in range(3)]

    fig = PuzzleVisualizer(dpi=50).create_puzzle_sheet(
        grids, rows=2, cols=2, save_path=tmp_path / "sheet.png")

    assert (tmp_path / "sheet.png").exists()
    assert [ax.get_visible() for ax in fig.axes] == [True, True, True, False]
    plt.close(fig)


def test_difficulty_showcase(tmp_path):
    gen = PuzzleGenerator(PuzzleGeneratorConfig(random_seed=6))
    grids = {d: gen.generate(d) for d in ("easy", "medium", "hard")}

    fig = PuzzleVisualizer(dpi=50).create_difficulty_showcase(grids, tmp_path / "show.png")

    assert (tmp_path / "show.png").exists()
    assert len(fig.axes) == 6
    plt.close(fig)
