"""
Randomized Hamiltonian path search over rectangular grids.
"""

import random
from typing import Dict, List, Optional

from .. import config
from ..core.grid import Direction, Position
from ..core.exceptions import PathSearchExhausted
from ..core.utils import setup_logger


class HamiltonianPathFinder:
    """
    Find a random path visiting every cell of a rows x cols grid once.

    Each attempt is a backtracking depth-first search from a random start
    cell that tries unvisited neighbours in shuffled order. Branches that
    can no longer cover the remaining cells (an unreachable or isolated
    cell, or too many dead ends) are cut early. A single attempt gives up
    after ``max_steps`` expansions.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 max_steps: int = config.MAX_SEARCH_STEPS):
        self.rng = rng or random.Random()
        self.max_steps = max_steps
        self.steps = 0
        self.logger = setup_logger(self.__class__.__name__)

    @staticmethod
    def start_candidates(rows: int, cols: int) -> List[Position]:
        """
        Cells a Hamiltonian path can start from.

        With an odd number of cells both path ends lie on the majority
        colour of the checkerboard, i.e. cells where row + col is even.
        """
        cells = [(r, c) for r in range(rows) for c in range(cols)]
        if (rows * cols) % 2 == 1:
            return [(r, c) for r, c in cells if (r + c) % 2 == 0]
        return cells

    def find(self, rows: int, cols: int) -> Optional[List[Position]]:
        """
        Run one search attempt from a random start.

        Args:
            rows: Grid rows
            cols: Grid columns

        Returns:
            Ordered list of rows*cols positions, or None if this attempt failed
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Invalid grid dimensions: {rows}x{cols}")

        total = rows * cols
        cells = [(r, c) for r in range(rows) for c in range(cols)]
        adjacency: Dict[Position, List[Position]] = {}
        for r, c in cells:
            adjacency[(r, c)] = [
                (r + dr, c + dc) for dr, dc in (d.delta for d in Direction)
                if 0 <= r + dr < rows and 0 <= c + dc < cols
            ]

        # Unvisited neighbour count of every cell
        free = {pos: len(adjacency[pos]) for pos in cells}
        visited = set()
        path: List[Position] = []
        self.steps = 0

        def visit(pos: Position):
            visited.add(pos)
            path.append(pos)
            for nb in adjacency[pos]:
                free[nb] -= 1

        def unvisit(pos: Position):
            visited.discard(pos)
            path.pop()
            for nb in adjacency[pos]:
                free[nb] += 1

        def hopeless(head: Position) -> bool:
            # An unvisited cell with one way in must be the next step or the
            # final cell, so more than two of them cannot all be covered.
            head_adjacent = adjacency[head]
            dead_ends = 0
            for pos in cells:
                if pos in visited:
                    continue
                degree = free[pos] + (1 if pos in head_adjacent else 0)
                if degree == 0:
                    return True
                if degree == 1:
                    dead_ends += 1
                    if dead_ends > 2:
                        return True

            # Unvisited cells must stay reachable from the head
            remaining = total - len(path)
            seen = {head}
            stack = [head]
            while stack:
                for nb in adjacency[stack.pop()]:
                    if nb not in visited and nb not in seen:
                        seen.add(nb)
                        stack.append(nb)
            return len(seen) - 1 < remaining

        def backtrack(pos: Position) -> bool:
            self.steps += 1
            if self.steps > self.max_steps:
                return False

            visit(pos)
            if len(path) == total:
                return True

            if not hopeless(pos):
                neighbors = [nb for nb in adjacency[pos] if nb not in visited]
                self.rng.shuffle(neighbors)
                for nb in neighbors:
                    if backtrack(nb):
                        return True
                    if self.steps > self.max_steps:
                        break

            unvisit(pos)
            return False

        start = self.rng.choice(self.start_candidates(rows, cols))
        if backtrack(start):
            return list(path)

        if self.steps > self.max_steps:
            self.logger.debug(f"Search from {start} on {rows}x{cols} hit the "
                              f"{self.max_steps} step budget")
        return None

    def find_with_retries(self, rows: int, cols: int,
                          attempts: int = config.MAX_PATH_ATTEMPTS) -> List[Position]:
        """
        Retry :meth:`find` with fresh random starts.

        Raises:
            PathSearchExhausted: if every attempt failed
        """
        for attempt in range(attempts):
            path = self.find(rows, cols)
            if path:
                self.logger.debug(f"Found {rows}x{cols} path on attempt {attempt + 1} "
                                  f"({self.steps} steps)")
                return path

        raise PathSearchExhausted(rows, cols, attempts)
