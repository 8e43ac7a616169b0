"""Tests for checkpoint placement."""
import random

import pytest

from zipgrid.generators.checkpoints import (
    CHECKPOINT_RANGES, DEFAULT_CHECKPOINT_RANGE, checkpoint_range, place_checkpoints
)
from zipgrid.generators.path_finder import HamiltonianPathFinder
from zipgrid.generators.walls import derive_walls


def numbers_along(grid, path):
    return [grid[pos].num for pos in path if grid[pos].num]


class TestCheckpointRange:
    def test_table(self):
        assert checkpoint_range(3) == (3, 5)
        assert checkpoint_range(4) == (4, 7)
        assert checkpoint_range(5) == (5, 9)
        assert checkpoint_range(6) == (6, 12)
        assert checkpoint_range(7) == (8, 18)

    def test_fallback(self):
        assert checkpoint_range(9) == DEFAULT_CHECKPOINT_RANGE

    def test_custom_table(self):
        assert checkpoint_range(3, {3: (2, 2)}) == (2, 2)

    def test_ranges_fit_grid(self):
        for size, (low, high) in CHECKPOINT_RANGES.items():
            assert 2 <= low <= high <= size * size


class TestPlaceCheckpoints:

    @pytest.mark.parametrize("size", [3, 4, 5, 6, 7])
    def test_numbers_follow_path_order(self, size):
        for seed in range(10):
            rng = random.Random(seed)
            path = HamiltonianPathFinder(rng).find_with_retries(size, size)
            grid = derive_walls(path, size, size)
            place_checkpoints(grid, path, rng)

            k = grid.checkpoint_count
            low, high = checkpoint_range(size)
            assert low <= k <= high
            assert numbers_along(grid, path) == list(range(1, k + 1))
            assert grid[path[0]].num == 1
            assert grid[path[-1]].num == k

    def test_returns_selected_indices(self, rng):
        path = HamiltonianPathFinder(rng).find_with_retries(4, 4)
        grid = derive_walls(path, 4, 4)
        indices = place_checkpoints(grid, path, rng)

        assert indices[0] == 0
        assert indices[-1] == len(path) - 1
        assert indices == sorted(indices)
        assert [grid[path[i]].num for i in indices] == list(range(1, len(indices) + 1))

    def test_count_clamped_by_interior(self, rng):
        path = [(0, 0), (0, 1), (0, 2)]
        grid = derive_walls(path, 1, 3)
        place_checkpoints(grid, path, rng, count_range=(10, 10))
        assert [grid[p].num for p in path] == [1, 2, 3]

    def test_minimum_two_checkpoints(self, rng):
        path = [(0, 0), (0, 1), (0, 2)]
        grid = derive_walls(path, 1, 3)
        place_checkpoints(grid, path, rng, count_range=(2, 2))
        assert [grid[p].num for p in path] == [1, 0, 2]

    def test_rejects_short_path(self, rng):
        grid = derive_walls([(0, 0)], 1, 1)
        with pytest.raises(ValueError):
            place_checkpoints(grid, [(0, 0)], rng)
