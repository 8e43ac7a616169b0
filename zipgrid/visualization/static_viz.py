"""
Static visualization for zip path puzzles.
"""

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
import numpy as np
from typing import Optional, Tuple, List, Dict
from pathlib import Path

from .. import config
from ..core.grid import Grid, Direction
from ..core.validator import PuzzleValidator


class PuzzleVisualizer:
    """Visualize zip path puzzles"""

    def __init__(self, figsize: Tuple[int, int] = config.VIZ_FIGSIZE,
                 dpi: int = config.VIZ_DPI):
        """
        Initialize visualizer.

        Args:
            figsize: Figure size in inches
            dpi: Dots per inch for saved images
        """
        self.figsize = figsize
        self.dpi = dpi

        # Visual parameters
        self.checkpoint_radius = 0.3
        self.grid_color = '#E0E0E0'
        self.border_color = '#222222'
        self.visible_wall_color = '#C0392B'
        self.internal_wall_color = '#B0B0B0'
        self.checkpoint_color = '#2E86AB'
        self.path_color = '#F39C12'
        self.number_color = 'white'
        self.background_color = '#F7F7F7'

    def visualize(self, grid: Grid,
                  show_solution: bool = False,
                  show_internal_walls: bool = False,
                  title: Optional[str] = None,
                  save_path: Optional[Path] = None,
                  show_plot: bool = True) -> plt.Figure:
        """
        Create visualization of a puzzle.

        Args:
            grid: The puzzle to visualize
            show_solution: Whether to draw the solution path
            show_internal_walls: Whether to draw walls hidden from the player
            title: Optional title for the plot
            save_path: Optional path to save the image
            show_plot: Whether to display the plot

        Returns:
            The matplotlib figure
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        fig.patch.set_facecolor(self.background_color)

        self._draw_puzzle(ax, grid, show_solution, show_internal_walls)

        if title:
            ax.set_title(title, fontsize=16, pad=20)

        if save_path:
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight',
                        facecolor=self.background_color)

        if show_plot:
            plt.show()
        else:
            plt.close(fig)

        return fig

    def _draw_puzzle(self, ax, grid: Grid, show_solution: bool = False,
                     show_internal_walls: bool = False):
        """Draw one puzzle onto an axis"""
        ax.set_facecolor(self.background_color)
        ax.set_xlim(-0.5, grid.cols - 0.5)
        ax.set_ylim(-0.5, grid.rows - 0.5)
        ax.set_aspect('equal')

        # Row 0 at the top
        ax.invert_yaxis()

        self._draw_grid(ax, grid.rows, grid.cols)
        if show_internal_walls:
            self._draw_walls(ax, grid, visible=False)
        self._draw_walls(ax, grid, visible=True)
        if show_solution:
            self._draw_solution(ax, grid)
        self._draw_checkpoints(ax, grid)

        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    def _draw_grid(self, ax, rows: int, cols: int):
        """Draw cell lines and the outer border"""
        for x in np.arange(-0.5, cols, 1.0):
            ax.axvline(x, color=self.grid_color, linewidth=0.5)
        for y in np.arange(-0.5, rows, 1.0):
            ax.axhline(y, color=self.grid_color, linewidth=0.5)

        border = plt.Rectangle((-0.5, -0.5), cols, rows, fill=False,
                               edgecolor=self.border_color, linewidth=3, zorder=4)
        ax.add_patch(border)

    @staticmethod
    def _edge_segment(row: int, col: int, direction: Direction):
        """Line segment of a cell edge in plot coordinates"""
        if direction == Direction.S:
            return [(col - 0.5, row + 0.5), (col + 0.5, row + 0.5)]
        if direction == Direction.N:
            return [(col - 0.5, row - 0.5), (col + 0.5, row - 0.5)]
        if direction == Direction.E:
            return [(col + 0.5, row - 0.5), (col + 0.5, row + 0.5)]
        return [(col - 0.5, row - 0.5), (col - 0.5, row + 0.5)]

    def _draw_walls(self, ax, grid: Grid, visible: bool):
        """Draw closed interior walls, visible ones or internal ones"""
        segments = []
        for (r, c), _, direction in grid.edges():
            walls = grid.cell(r, c).visible_walls if visible else grid.cell(r, c).walls
            if walls[direction]:
                segments.append(self._edge_segment(r, c, direction))

        if not segments:
            return

        if visible:
            collection = LineCollection(segments, colors=self.visible_wall_color,
                                        linewidths=4, capstyle='round', zorder=3)
        else:
            collection = LineCollection(segments, colors=self.internal_wall_color,
                                        linewidths=1.5, linestyles='dashed', zorder=1)
        ax.add_collection(collection)

    def _draw_solution(self, ax, grid: Grid):
        """Draw the solution path through cell centres"""
        solution = PuzzleValidator.find_solution(grid)
        if not solution:
            return
        xs = [c for _, c in solution]
        ys = [r for r, _ in solution]
        ax.plot(xs, ys, color=self.path_color, linewidth=6, alpha=0.7,
                solid_capstyle='round', solid_joinstyle='round', zorder=2)

    def _draw_checkpoints(self, ax, grid: Grid):
        """Draw numbered checkpoints"""
        for cell in grid.checkpoints():
            circle = plt.Circle((cell.col, cell.row), self.checkpoint_radius,
                                color=self.checkpoint_color, zorder=5)
            ax.add_patch(circle)
            ax.text(cell.col, cell.row, str(cell.num),
                    ha='center', va='center', fontsize=14, fontweight='bold',
                    color=self.number_color, zorder=6)

    def create_puzzle_sheet(self, grids: List[Grid],
                            rows: int, cols: int,
                            save_path: Optional[Path] = None) -> plt.Figure:
        """Create a sheet of multiple puzzles (for printing)"""
        fig, axes = plt.subplots(rows, cols, figsize=(cols * 3, rows * 3), squeeze=False)

        for idx, ax in enumerate(axes.flat):
            if idx < len(grids):
                self._draw_puzzle(ax, grids[idx])
                ax.text(0.02, 0.98, f"#{idx + 1}", transform=ax.transAxes,
                        ha='left', va='top', fontsize=10)
            else:
                ax.set_visible(False)

        plt.tight_layout()

        if save_path:
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight')

        return fig

    def create_difficulty_showcase(self, grids_by_difficulty: Dict[str, Grid],
                                   save_path: Optional[Path] = None) -> plt.Figure:
        """Puzzle on top, solution below, one column per difficulty"""
        difficulties = list(grids_by_difficulty)
        n = len(difficulties)
        fig, axes = plt.subplots(2, n, figsize=(n * 4, 8), squeeze=False)

        for col, difficulty in enumerate(difficulties):
            grid = grids_by_difficulty[difficulty]
            self._draw_puzzle(axes[0, col], grid)
            axes[0, col].set_title(f"{difficulty.capitalize()}\n{grid.rows}x{grid.cols}",
                                   fontsize=12)
            self._draw_puzzle(axes[1, col], grid, show_solution=True)
            axes[1, col].set_title("Solution", fontsize=10)

        plt.tight_layout()

        if save_path:
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight')

        return fig
