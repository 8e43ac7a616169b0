"""
Core data structures for zip path puzzles.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Iterator, Union
from enum import Enum
import json
from pathlib import Path


Position = Tuple[int, int]


class Difficulty(Enum):
    """Puzzle difficulty levels"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        """Accept either a Difficulty or its string value"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}. "
                             f"Available: {[d.value for d in cls]}")


class Direction(Enum):
    """Orthogonal movement directions"""
    N = "N"
    S = "S"
    E = "E"
    W = "W"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def between(cls, a: Position, b: Position) -> "Direction":
        """Direction of travel from a to an orthogonally adjacent b"""
        d = (b[0] - a[0], b[1] - a[1])
        for direction, delta in _DELTAS.items():
            if delta == d:
                return direction
        raise ValueError(f"Cells {a} and {b} are not adjacent")


_DELTAS = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}

_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}


@dataclass
class Walls:
    """Four edge flags of a cell, True means closed"""
    N: bool = True
    S: bool = True
    E: bool = True
    W: bool = True

    def __getitem__(self, direction: Union[Direction, str]) -> bool:
        return getattr(self, Direction(direction).value)

    def __setitem__(self, direction: Union[Direction, str], value: bool):
        setattr(self, Direction(direction).value, bool(value))

    def count(self) -> int:
        return sum(1 for d in Direction if self[d])

    def to_dict(self) -> dict:
        return {'N': self.N, 'S': self.S, 'E': self.E, 'W': self.W}

    @classmethod
    def from_dict(cls, data: dict) -> 'Walls':
        return cls(N=bool(data['N']), S=bool(data['S']),
                   E=bool(data['E']), W=bool(data['W']))

    @classmethod
    def open(cls) -> 'Walls':
        return cls(False, False, False, False)


@dataclass
class Cell:
    """A single grid cell"""
    row: int
    col: int
    num: int = 0
    walls: Walls = field(default_factory=Walls)
    visible_walls: Walls = field(default_factory=Walls.open)

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def is_checkpoint(self) -> bool:
        return self.num > 0

    def to_dict(self) -> dict:
        return {
            'row': self.row,
            'col': self.col,
            'num': self.num,
            'walls': self.walls.to_dict(),
            'visibleWalls': self.visible_walls.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Cell':
        visible = data.get('visibleWalls')
        return cls(
            row=int(data['row']),
            col=int(data['col']),
            num=int(data['num']),
            walls=Walls.from_dict(data['walls']),
            visible_walls=Walls.from_dict(visible) if visible else Walls.open(),
        )

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, num={self.num})"


class Grid:
    """Rectangular grid of cells with symmetric wall state"""

    def __init__(self, rows: int, cols: int, cells: Optional[List[List[Cell]]] = None):
        """
        Initialize a grid.

        Args:
            rows: Number of rows
            cols: Number of columns
            cells: Optional nested rows of cells; all walls closed if omitted
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid grid dimensions: {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self.cells: List[List[Cell]] = cells or [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]

        if len(self.cells) != rows or any(len(row) != cols for row in self.cells):
            raise ValueError(f"Cell layout does not match {rows}x{cols}")

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def __getitem__(self, pos: Position) -> Cell:
        return self.cells[pos[0]][pos[1]]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __len__(self):
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Tuple[Direction, Position]]:
        """Orthogonal neighbours inside the grid"""
        result = []
        for direction in Direction:
            dr, dc = direction.delta
            r, c = row + dr, col + dc
            if self.in_bounds(r, c):
                result.append((direction, (r, c)))
        return result

    def open_neighbors(self, row: int, col: int) -> List[Position]:
        """Neighbours reachable through an open internal wall"""
        cell = self.cells[row][col]
        return [pos for direction, pos in self.neighbors(row, col)
                if not cell.walls[direction]]

    def edges(self) -> Iterator[Tuple[Position, Position, Direction]]:
        """Each interior edge once, as (a, b, direction from a to b)"""
        for r in range(self.rows):
            for c in range(self.cols):
                if r + 1 < self.rows:
                    yield (r, c), (r + 1, c), Direction.S
                if c + 1 < self.cols:
                    yield (r, c), (r, c + 1), Direction.E

    def set_wall(self, row: int, col: int, direction: Direction, closed: bool):
        """Set an internal wall on both sides of the edge"""
        self.cells[row][col].walls[direction] = closed
        dr, dc = direction.delta
        if self.in_bounds(row + dr, col + dc):
            self.cells[row + dr][col + dc].walls[direction.opposite] = closed

    def set_visible_wall(self, row: int, col: int, direction: Direction, visible: bool):
        """Set a visible wall on both sides of the edge"""
        self.cells[row][col].visible_walls[direction] = visible
        dr, dc = direction.delta
        if self.in_bounds(row + dr, col + dc):
            self.cells[row + dr][col + dc].visible_walls[direction.opposite] = visible

    @property
    def checkpoint_count(self) -> int:
        return max((cell.num for cell in self), default=0)

    def find_checkpoint(self, num: int) -> Optional[Cell]:
        for cell in self:
            if cell.num == num:
                return cell
        return None

    def checkpoints(self) -> List[Cell]:
        """Numbered cells in ascending order"""
        return sorted((cell for cell in self if cell.num > 0), key=lambda c: c.num)

    def visible_wall_edges(self) -> List[Tuple[Position, Position]]:
        """Visible walls, each physical edge counted once"""
        return [(a, b) for a, b, direction in self.edges()
                if self[a].visible_walls[direction]]

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid"""
        return Grid.from_list(self.to_list())

    def to_list(self) -> List[List[dict]]:
        """Convert grid to nested rows of cell dictionaries"""
        return [[cell.to_dict() for cell in row] for row in self.cells]

    @classmethod
    def from_list(cls, data: List[List[dict]]) -> 'Grid':
        """Create grid from nested rows of cell dictionaries"""
        if not data or not data[0]:
            raise ValueError("Grid data is empty")
        cells = [[Cell.from_dict(item) for item in row] for row in data]
        return cls(len(cells), len(cells[0]), cells)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_list(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> 'Grid':
        return cls.from_list(json.loads(text))

    def save(self, filepath: Path):
        """Save grid to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_list(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path) -> 'Grid':
        """Load grid from JSON file"""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_list(data)

    def __eq__(self, other):
        if isinstance(other, Grid):
            return self.to_list() == other.to_list()
        return False

    def __str__(self):
        """Numbers only, '.' for plain cells (useful for debugging)"""
        width = len(str(self.checkpoint_count)) if self.checkpoint_count else 1
        return '\n'.join(
            ' '.join(str(cell.num).rjust(width) if cell.num else '.'.rjust(width)
                     for cell in row)
            for row in self.cells
        )

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols}, {self.checkpoint_count} checkpoints)"
