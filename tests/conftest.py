"""Shared fixtures for zipgrid tests."""
import random

import matplotlib
matplotlib.use("Agg")

import pytest

from zipgrid.core.grid import Grid


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


def open_grid(rows, cols):
    """Grid with every interior wall open."""
    grid = Grid(rows, cols)
    for (r, c), _, direction in list(grid.edges()):
        grid.set_wall(r, c, direction, False)
    return grid


def brute_force_paths(grid):
    """
    All open-wall paths from checkpoint 1 to checkpoint K covering every
    cell, found by plain enumeration without checkpoint-order rules.
    """
    nums = {cell.num: cell.position for cell in grid if cell.num}
    start, end = nums[1], nums[max(nums)]
    total = grid.rows * grid.cols
    found = []

    def walk(path, seen):
        pos = path[-1]
        if len(path) == total:
            if pos == end:
                found.append(list(path))
            return
        cell = grid[pos]
        for direction, nb in grid.neighbors(*pos):
            if cell.walls[direction] or nb in seen:
                continue
            seen.add(nb)
            path.append(nb)
            walk(path, seen)
            path.pop()
            seen.discard(nb)

    walk([start], {start})
    return found
