"""Tests for wall derivation and visible wall selection."""
import random

import pytest

from zipgrid.core.grid import Direction
from zipgrid.generators.path_finder import HamiltonianPathFinder
from zipgrid.generators.walls import derive_walls, select_visible_walls, path_edges


SNAKE_3X3 = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0), (2, 0), (2, 1), (2, 2)]


class TestDeriveWalls:

    def test_only_path_edges_are_open(self):
        grid = derive_walls(SNAKE_3X3, 3, 3)
        used = path_edges(SNAKE_3X3)

        for a, b, direction in grid.edges():
            is_open = not grid[a].walls[direction]
            assert is_open == (frozenset((a, b)) in used)

    def test_open_edges_are_symmetric(self):
        grid = derive_walls(SNAKE_3X3, 3, 3)
        assert grid.cell(0, 0).walls.E is False
        assert grid.cell(0, 1).walls.W is False
        assert grid.cell(0, 2).walls.S is False
        assert grid.cell(1, 2).walls.N is False

    def test_border_walls_stay_closed(self):
        grid = derive_walls(SNAKE_3X3, 3, 3)
        for c in range(3):
            assert grid.cell(0, c).walls.N
            assert grid.cell(2, c).walls.S

    def test_open_edge_count(self, rng):
        path = HamiltonianPathFinder(rng).find_with_retries(6, 6)
        grid = derive_walls(path, 6, 6)
        opened = sum(1 for a, _, d in grid.edges() if not grid[a].walls[d])
        assert opened == len(path) - 1

    def test_deterministic(self):
        assert derive_walls(SNAKE_3X3, 3, 3) == derive_walls(SNAKE_3X3, 3, 3)

    def test_rejects_empty_path(self):
        with pytest.raises(ValueError):
            derive_walls([], 3, 3)

    def test_rejects_jumps(self):
        with pytest.raises(ValueError):
            derive_walls([(0, 0), (1, 1)], 3, 3)


class TestSelectVisibleWalls:

    def test_count_within_range_and_off_path(self):
        for seed in range(30):
            grid = derive_walls(SNAKE_3X3, 3, 3)
            revealed = select_visible_walls(grid, SNAKE_3X3, random.Random(seed), (3, 6))

            # 3x3 has 12 interior edges, 8 on the path
            assert 3 <= len(revealed) <= 4
            assert len(grid.visible_wall_edges()) == len(revealed)
            used = path_edges(SNAKE_3X3)
            for a, b in revealed:
                assert frozenset((a, b)) not in used

    def test_visible_walls_are_closed_and_symmetric(self, rng):
        path = HamiltonianPathFinder(rng).find_with_retries(7, 7)
        grid = derive_walls(path, 7, 7)
        select_visible_walls(grid, path, rng, (3, 6))

        for a, b, direction in grid.edges():
            assert grid[a].visible_walls[direction] == grid[b].visible_walls[direction.opposite]
            if grid[a].visible_walls[direction]:
                assert grid[a].walls[direction]

        assert 3 <= len(grid.visible_wall_edges()) <= 6

    def test_zero_range_reveals_nothing(self, rng):
        grid = derive_walls(SNAKE_3X3, 3, 3)
        assert select_visible_walls(grid, SNAKE_3X3, rng, (0, 0)) == []
        assert all(c.visible_walls.count() == 0 for c in grid)

    def test_invalid_range(self, rng):
        grid = derive_walls(SNAKE_3X3, 3, 3)
        with pytest.raises(ValueError):
            select_visible_walls(grid, SNAKE_3X3, rng, (5, 2))

    def test_border_never_marked(self, rng):
        grid = derive_walls(SNAKE_3X3, 3, 3)
        select_visible_walls(grid, SNAKE_3X3, rng, (6, 6))
        for c in range(3):
            assert not grid.cell(0, c).visible_walls[Direction.N]
            assert not grid.cell(2, c).visible_walls[Direction.S]
