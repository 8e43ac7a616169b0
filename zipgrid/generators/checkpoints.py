"""
Checkpoint placement along a solution path.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.grid import Grid, Position


# (min, max) checkpoint count by grid size, first and last cell included
CHECKPOINT_RANGES: Dict[int, Tuple[int, int]] = {
    3: (3, 5),
    4: (4, 7),
    5: (5, 9),
    6: (6, 12),
    7: (8, 18),
}

DEFAULT_CHECKPOINT_RANGE = (5, 12)


def checkpoint_range(rows: int,
                     ranges: Optional[Dict[int, Tuple[int, int]]] = None) -> Tuple[int, int]:
    """Checkpoint count range for a square grid of the given size"""
    ranges = CHECKPOINT_RANGES if ranges is None else ranges
    return ranges.get(rows, DEFAULT_CHECKPOINT_RANGE)


def place_checkpoints(grid: Grid, path: Sequence[Position], rng: random.Random,
                      count_range: Optional[Tuple[int, int]] = None) -> List[int]:
    """
    Number a random subset of path positions 1..K in path order.

    The first path cell always gets 1 and the last always gets K. The
    total K is drawn uniformly from ``count_range`` and clamped by the
    number of available interior positions.

    Args:
        grid: Grid to write checkpoint numbers into
        path: The solution path
        rng: Random source
        count_range: Inclusive (min, max) checkpoint count; defaults to the
            table entry for ``grid.rows``

    Returns:
        The selected path indices in ascending order
    """
    if len(path) < 2:
        raise ValueError("Path must contain at least two cells")

    low, high = count_range or checkpoint_range(grid.rows)
    count = rng.randint(low, high)

    interior = list(range(1, len(path) - 1))
    rng.shuffle(interior)

    selected = interior[:max(count - 2, 0)]
    selected.append(len(path) - 1)
    selected.sort()

    grid[path[0]].num = 1
    for i, path_index in enumerate(selected):
        grid[path[path_index]].num = i + 2

    return [0] + selected
