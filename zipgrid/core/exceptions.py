"""
Errors raised while generating puzzles.
"""


class PuzzleGenerationError(RuntimeError):
    """Base class for generation failures"""


class PathSearchExhausted(PuzzleGenerationError):
    """No Hamiltonian path found within the per-size attempt budget"""

    def __init__(self, rows: int, cols: int, attempts: int):
        self.rows = rows
        self.cols = cols
        self.attempts = attempts
        super().__init__(
            f"No Hamiltonian path found on {rows}x{cols} after {attempts} attempts"
        )


class UniquenessFailed(PuzzleGenerationError):
    """Candidate grid has zero or several solutions"""

    def __init__(self, solutions: int):
        self.solutions = solutions
        super().__init__(f"Expected exactly one solution, found {solutions}")


class GenerationExhausted(PuzzleGenerationError):
    """Outer retry budget spent without producing a valid puzzle"""

    def __init__(self, difficulty: str, attempts: int):
        self.difficulty = difficulty
        self.attempts = attempts
        super().__init__(
            f"Failed to generate {difficulty} puzzle after {attempts} attempts"
        )
