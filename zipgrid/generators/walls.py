"""
Wall layouts derived from a solution path.
"""

import random
from typing import List, Sequence, Tuple

from ..core.grid import Grid, Direction, Position


def derive_walls(path: Sequence[Position], rows: int, cols: int) -> Grid:
    """
    Build a grid whose only open edges are the steps of ``path``.

    Args:
        path: Ordered cells, each orthogonally adjacent to the previous one
        rows: Grid rows
        cols: Grid columns

    Returns:
        New grid with all walls closed except along the path
    """
    if not path:
        raise ValueError("Cannot derive walls from an empty path")

    grid = Grid(rows, cols)
    for curr, nxt in zip(path, path[1:]):
        direction = Direction.between(curr, nxt)
        grid.set_wall(curr[0], curr[1], direction, False)

    return grid


def path_edges(path: Sequence[Position]) -> set:
    """Edges used by a path, as frozensets of two positions"""
    return {frozenset(pair) for pair in zip(path, path[1:])}


def select_visible_walls(grid: Grid, path: Sequence[Position],
                         rng: random.Random,
                         count_range: Tuple[int, int] = (3, 6)) -> List[Tuple[Position, Position]]:
    """
    Reveal a few closed, off-path walls to the player.

    Every interior edge is considered once. The chosen edges are marked
    visible on both cells.

    Args:
        grid: Grid with internal walls already derived
        path: The solution path
        rng: Random source
        count_range: Inclusive (min, max) number of walls to reveal

    Returns:
        The revealed edges as (cell, neighbour) pairs
    """
    low, high = count_range
    if low > high or low < 0:
        raise ValueError(f"Invalid visible wall range: {count_range}")

    used = path_edges(path)
    candidates = [
        (a, b, direction) for a, b, direction in grid.edges()
        if grid[a].walls[direction] and frozenset((a, b)) not in used
    ]

    rng.shuffle(candidates)
    count = min(rng.randint(low, high), len(candidates))

    revealed = []
    for a, b, direction in candidates[:count]:
        grid.set_visible_wall(a[0], a[1], direction, True)
        revealed.append((a, b))

    return revealed
