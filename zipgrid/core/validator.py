"""
Validator for zip path puzzle constraints.
"""

from typing import List, Optional, Union
import networkx as nx

from .grid import Grid, Difficulty, Position


class ValidationResult:
    """Result of puzzle validation"""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def merge(self, other: 'ValidationResult'):
        """Fold another result into this one"""
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        status = "Valid" if self.is_valid else "Invalid"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


class PuzzleValidator:
    """Validates zip path puzzle constraints"""

    @staticmethod
    def validate_structure(grid: Grid) -> ValidationResult:
        """Validate coordinates, checkpoint numbering and wall symmetry"""
        result = ValidationResult()

        # Cell coordinates
        for r, row in enumerate(grid.cells):
            for c, cell in enumerate(row):
                if (cell.row, cell.col) != (r, c):
                    result.add_error(f"Cell at index ({r}, {c}) claims position {cell.position}")

        # Checkpoint numbering
        nums = sorted(cell.num for cell in grid if cell.num != 0)
        if any(num < 0 for num in nums):
            result.add_error("Negative checkpoint number")
        k = len(nums)
        if k < 2:
            result.add_error(f"Puzzle needs at least 2 checkpoints, has {k}")
        elif nums != list(range(1, k + 1)):
            result.add_error(f"Checkpoints are not a contiguous 1..{k} sequence: {nums}")
        if k > len(grid):
            result.add_error(f"More checkpoints ({k}) than cells ({len(grid)})")

        # Wall symmetry and visible-wall consistency
        for a, b, direction in grid.edges():
            cell_a, cell_b = grid[a], grid[b]
            if cell_a.walls[direction] != cell_b.walls[direction.opposite]:
                result.add_error(f"Asymmetric wall between {a} and {b}")
            if cell_a.visible_walls[direction] != cell_b.visible_walls[direction.opposite]:
                result.add_error(f"Asymmetric visible wall between {a} and {b}")
            if cell_a.visible_walls[direction] and not cell_a.walls[direction]:
                result.add_error(f"Visible wall between {a} and {b} is open internally")

        # Every cell must be reachable through open walls
        graph = PuzzleValidator.open_edge_graph(grid)
        if not nx.is_connected(graph):
            result.add_error("Open walls do not connect every cell")

        return result

    @staticmethod
    def open_edge_graph(grid: Grid) -> nx.Graph:
        """Graph of cells joined by open internal walls"""
        graph = nx.Graph()
        graph.add_nodes_from(cell.position for cell in grid)
        for a, b, direction in grid.edges():
            if not grid[a].walls[direction]:
                graph.add_edge(a, b)
        return graph

    @staticmethod
    def count_solutions(grid: Grid, limit: int = 2) -> int:
        """
        Count wall-respecting paths from checkpoint 1 to checkpoint K that
        cover every cell and meet the checkpoints in increasing order.

        Args:
            grid: Grid with walls and checkpoint numbers assigned
            limit: Stop counting once this many solutions are found

        Returns:
            Number of solutions found, at most ``limit``
        """
        return len(PuzzleValidator._enumerate(grid, limit))

    @staticmethod
    def find_solution(grid: Grid) -> Optional[List[Position]]:
        """Return the first solution path found, or None"""
        solutions = PuzzleValidator._enumerate(grid, 1)
        return solutions[0] if solutions else None

    @staticmethod
    def has_unique_solution(grid: Grid) -> bool:
        """Check that exactly one solution exists"""
        return PuzzleValidator.count_solutions(grid, limit=2) == 1

    @staticmethod
    def _enumerate(grid: Grid, limit: int) -> List[List[Position]]:
        start = grid.find_checkpoint(1)
        k = grid.checkpoint_count
        end = grid.find_checkpoint(k)
        if start is None or end is None or limit <= 0:
            return []

        total = len(grid)
        end_pos = end.position
        visited = [[False] * grid.cols for _ in range(grid.rows)]
        path: List[Position] = []
        solutions: List[List[Position]] = []

        def dfs(pos: Position, next_num: int):
            if len(solutions) >= limit:
                return
            if len(path) == total:
                if pos == end_pos:
                    solutions.append(list(path))
                return

            for nb in grid.open_neighbors(*pos):
                if visited[nb[0]][nb[1]]:
                    continue
                num = grid[nb].num
                if num and num != next_num:
                    continue
                # K may only be entered on the covering step
                if nb == end_pos and len(path) + 1 < total:
                    continue

                visited[nb[0]][nb[1]] = True
                path.append(nb)
                dfs(nb, next_num + 1 if num else next_num)
                path.pop()
                visited[nb[0]][nb[1]] = False

                if len(solutions) >= limit:
                    return

        visited[start.row][start.col] = True
        path.append(start.position)
        dfs(start.position, 2)
        return solutions

    @staticmethod
    def validate_puzzle(grid: Grid,
                        difficulty: Optional[Union[Difficulty, str]] = None,
                        visible_wall_range: tuple = (3, 6)) -> ValidationResult:
        """Validate structure, uniqueness and difficulty-specific wall rules"""
        result = PuzzleValidator.validate_structure(grid)
        if not result:
            return result

        solutions = PuzzleValidator._enumerate(grid, 2)
        if len(solutions) != 1:
            result.add_error(f"Expected exactly one solution, found {len(solutions)}")
            return result

        solution = solutions[0]
        path_edges = {frozenset(pair) for pair in zip(solution, solution[1:])}
        visible = grid.visible_wall_edges()
        for a, b in visible:
            if frozenset((a, b)) in path_edges:
                result.add_error(f"Visible wall between {a} and {b} blocks the solution")

        if difficulty is not None:
            difficulty = Difficulty.parse(difficulty)
            if difficulty == Difficulty.HARD:
                low, high = visible_wall_range
                if not low <= len(visible) <= high:
                    result.add_error(f"Hard puzzle has {len(visible)} visible walls, "
                                     f"expected {low}-{high}")
            elif visible:
                result.add_error(f"{difficulty.value} puzzle has {len(visible)} visible walls")

        if grid.rows != grid.cols:
            result.add_warning(f"Grid is not square: {grid.rows}x{grid.cols}")

        return result

    @staticmethod
    def get_puzzle_statistics(grid: Grid) -> dict:
        """Get various statistics about the puzzle"""
        k = grid.checkpoint_count
        closed = sum(1 for a, b, d in grid.edges() if grid[a].walls[d])
        stats = {
            'rows': grid.rows,
            'cols': grid.cols,
            'cells': len(grid),
            'checkpoints': k,
            'checkpoint_density': k / len(grid),
            'interior_edges': sum(1 for _ in grid.edges()),
            'closed_walls': closed,
            'visible_walls': len(grid.visible_wall_edges()),
        }

        # Path steps between consecutive checkpoints
        solution = PuzzleValidator.find_solution(grid)
        if solution:
            index = {pos: i for i, pos in enumerate(solution)}
            gaps = [index[b.position] - index[a.position]
                    for a, b in zip(grid.checkpoints(), grid.checkpoints()[1:])]
            stats['max_checkpoint_gap'] = max(gaps) if gaps else 0
            stats['avg_checkpoint_gap'] = sum(gaps) / len(gaps) if gaps else 0.0

        return stats
