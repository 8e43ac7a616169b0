"""Tests for grid data structures."""
import json

import pytest

from zipgrid.core.grid import Grid, Cell, Walls, Direction, Difficulty


class TestDirection:
    def test_opposites(self):
        assert Direction.N.opposite == Direction.S
        assert Direction.E.opposite == Direction.W
        for d in Direction:
            assert d.opposite.opposite == d

    def test_between_adjacent_cells(self):
        assert Direction.between((1, 1), (0, 1)) == Direction.N
        assert Direction.between((1, 1), (2, 1)) == Direction.S
        assert Direction.between((1, 1), (1, 2)) == Direction.E
        assert Direction.between((1, 1), (1, 0)) == Direction.W

    def test_between_rejects_non_adjacent(self):
        with pytest.raises(ValueError):
            Direction.between((0, 0), (1, 1))


class TestDifficulty:
    def test_parse_accepts_strings_and_enums(self):
        assert Difficulty.parse("hard") == Difficulty.HARD
        assert Difficulty.parse("EASY") == Difficulty.EASY
        assert Difficulty.parse(Difficulty.MEDIUM) == Difficulty.MEDIUM

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown difficulty"):
            Difficulty.parse("expert")


class TestWalls:
    def test_defaults_closed(self):
        walls = Walls()
        assert all(walls[d] for d in Direction)
        assert walls.count() == 4

    def test_index_by_letter_or_direction(self):
        walls = Walls.open()
        walls["N"] = True
        assert walls[Direction.N] is True
        assert walls.count() == 1


class TestGrid:
    def test_new_grid_is_closed_and_unnumbered(self):
        grid = Grid(3, 4)
        assert len(grid) == 12
        assert grid.checkpoint_count == 0
        assert all(cell.walls.count() == 4 for cell in grid)
        assert all(cell.visible_walls.count() == 0 for cell in grid)

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            Grid(0, 3)

    def test_neighbors_respect_bounds(self):
        grid = Grid(3, 3)
        assert len(grid.neighbors(0, 0)) == 2
        assert len(grid.neighbors(1, 1)) == 4
        assert len(grid.neighbors(2, 1)) == 3

    def test_set_wall_is_symmetric(self):
        grid = Grid(3, 3)
        grid.set_wall(1, 1, Direction.E, False)
        assert grid.cell(1, 1).walls.E is False
        assert grid.cell(1, 2).walls.W is False
        assert grid.open_neighbors(1, 1) == [(1, 2)]
        assert grid.open_neighbors(1, 2) == [(1, 1)]

    def test_set_visible_wall_is_symmetric(self):
        grid = Grid(3, 3)
        grid.set_visible_wall(0, 1, Direction.S, True)
        assert grid.cell(0, 1).visible_walls.S
        assert grid.cell(1, 1).visible_walls.N
        assert grid.visible_wall_edges() == [((0, 1), (1, 1))]

    def test_edges_counted_once(self):
        grid = Grid(3, 3)
        assert len(list(grid.edges())) == 12

    def test_checkpoints_sorted(self):
        grid = Grid(3, 3)
        grid.cell(2, 2).num = 2
        grid.cell(0, 0).num = 1
        grid.cell(1, 1).num = 3
        assert [c.num for c in grid.checkpoints()] == [1, 2, 3]
        assert grid.find_checkpoint(3).position == (1, 1)
        assert grid.find_checkpoint(4) is None


class TestSerialization:
    def _sample(self):
        grid = Grid(3, 3)
        grid.set_wall(0, 0, Direction.E, False)
        grid.set_visible_wall(1, 1, Direction.S, True)
        grid.cell(0, 0).num = 1
        grid.cell(0, 1).num = 2
        return grid

    def test_cell_shape(self):
        data = self._sample().to_list()
        assert len(data) == 3 and len(data[0]) == 3
        assert data[0][0] == {
            'row': 0, 'col': 0, 'num': 1,
            'walls': {'N': True, 'S': True, 'E': False, 'W': True},
            'visibleWalls': {'N': False, 'S': False, 'E': False, 'W': False},
        }

    def test_json_round_trip(self):
        grid = self._sample()
        restored = Grid.from_json(grid.to_json())
        assert restored == grid
        assert json.loads(restored.to_json()) == grid.to_list()

    def test_save_and_load(self, tmp_path):
        grid = self._sample()
        path = tmp_path / "grid.json"
        grid.save(path)
        assert Grid.load(path) == grid

    def test_missing_visible_walls_defaults_open(self):
        data = self._sample().to_list()
        del data[1][1]['visibleWalls']
        cell = Grid.from_list(data).cell(1, 1)
        assert cell.visible_walls.count() == 0

    def test_ragged_rows_rejected(self):
        data = self._sample().to_list()
        data[2].pop()
        with pytest.raises(ValueError):
            Grid.from_list(data)

    def test_copy_is_independent(self):
        grid = self._sample()
        clone = grid.copy()
        clone.cell(2, 2).num = 9
        assert grid.cell(2, 2).num == 0
        assert clone != grid

    def test_str_shows_numbers(self):
        text = str(self._sample())
        assert text.splitlines()[0].split() == ['1', '2', '.']


def test_cell_repr():
    assert repr(Cell(1, 2, 3)) == "Cell(1, 2, num=3)"
