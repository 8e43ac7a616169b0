"""
In-memory pool of generated puzzles with deduplication and a TTL cache.
"""

import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from .. import config
from ..core.grid import Grid, Difficulty
from ..core.exceptions import GenerationExhausted
from ..core.utils import setup_logger, content_hash
from ..generators.puzzle_generator import PuzzleGenerator


@dataclass
class PuzzleRecord:
    """A stored puzzle"""
    puzzle_id: int
    difficulty: Difficulty
    grid_json: str
    content_hash: str
    created: float

    @property
    def grid(self) -> Grid:
        return Grid.from_json(self.grid_json)

    def to_dict(self) -> dict:
        return {
            'puzzle_id': self.puzzle_id,
            'difficulty': self.difficulty.value,
            'grid': self.grid.to_list(),
            'content_hash': self.content_hash,
            'created': self.created,
        }


class PuzzleCache:
    """Difficulty-keyed cache whose entries expire after ``ttl`` seconds"""

    def __init__(self, ttl: float = config.CACHE_TTL,
                 clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self.clock = clock
        self._entries: Dict[Difficulty, Tuple[PuzzleRecord, float]] = {}

    def is_valid(self, difficulty: Difficulty) -> bool:
        entry = self._entries.get(difficulty)
        if entry is None:
            return False
        return self.clock() - entry[1] < self.ttl

    def get(self, difficulty: Difficulty) -> Optional[PuzzleRecord]:
        if not self.is_valid(difficulty):
            self._entries.pop(difficulty, None)
            return None
        return self._entries[difficulty][0]

    def set(self, difficulty: Difficulty, record: PuzzleRecord):
        self._entries[difficulty] = (record, self.clock())

    def clear(self):
        self._entries.clear()


class PuzzlePool:
    """
    Stores generated puzzles keyed by content hash.

    The pool hands out random puzzles per difficulty and falls back to the
    generator when none is available.
    """

    def __init__(self, generator: Optional[PuzzleGenerator] = None,
                 cache: Optional[PuzzleCache] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time):
        self.generator = generator or PuzzleGenerator()
        self.clock = clock
        self.cache = cache or PuzzleCache(clock=clock)
        self.rng = rng or random.Random()
        self.logger = setup_logger(self.__class__.__name__)

        self._records: Dict[int, PuzzleRecord] = {}
        self._by_hash: Dict[str, int] = {}
        self._next_id = 1

    def __len__(self):
        return len(self._records)

    def add(self, grid: Grid, difficulty: Union[Difficulty, str]) -> Optional[PuzzleRecord]:
        """
        Store a puzzle.

        Returns:
            The new record, or None if an identical puzzle is already stored
        """
        difficulty = Difficulty.parse(difficulty)
        digest = content_hash(grid)
        if digest in self._by_hash:
            self.logger.debug(f"Skipping duplicate puzzle {digest[:12]}")
            return None

        record = PuzzleRecord(
            puzzle_id=self._next_id,
            difficulty=difficulty,
            grid_json=grid.to_json(),
            content_hash=digest,
            created=self.clock(),
        )
        self._records[record.puzzle_id] = record
        self._by_hash[digest] = record.puzzle_id
        self._next_id += 1
        return record

    def get(self, puzzle_id: int) -> Optional[PuzzleRecord]:
        return self._records.get(puzzle_id)

    def get_random(self, difficulty: Union[Difficulty, str],
                   excluded_ids: Iterable[int] = ()) -> Optional[PuzzleRecord]:
        """Random stored puzzle of a difficulty, skipping excluded ids"""
        difficulty = Difficulty.parse(difficulty)
        excluded = set(excluded_ids)
        candidates = [r for r in self._records.values()
                      if r.difficulty == difficulty and r.puzzle_id not in excluded]
        if not candidates:
            return None
        return self.rng.choice(candidates)

    def get_or_generate(self, difficulty: Union[Difficulty, str]) -> PuzzleRecord:
        """
        Cached puzzle if fresh, otherwise a stored one, otherwise a new one.

        Raises:
            GenerationExhausted: if a new puzzle was needed and generation failed
        """
        difficulty = Difficulty.parse(difficulty)

        record = self.cache.get(difficulty)
        if record:
            return record

        record = self.get_random(difficulty)
        if record is None:
            record = self._generate_and_store(difficulty)

        self.cache.set(difficulty, record)
        return record

    def get_random_puzzle(self, excluded_ids: Iterable[int] = ()) -> PuzzleRecord:
        """Puzzle of a random difficulty, generating one if all are excluded"""
        difficulty = self.rng.choice(list(Difficulty))
        record = self.get_random(difficulty, excluded_ids)
        if record is None:
            record = self._generate_and_store(difficulty)
        return record

    def _generate_and_store(self, difficulty: Difficulty) -> PuzzleRecord:
        # Identical grids are rare, so retry only a handful of times
        attempts = 5
        for _ in range(attempts):
            record = self.add(self.generator.generate(difficulty), difficulty)
            if record:
                return record
        self.logger.error(f"Generator kept producing duplicate {difficulty.value} puzzles")
        raise GenerationExhausted(difficulty.value, attempts)

    def count_by_difficulty(self) -> Dict[str, int]:
        counts = {d.value: 0 for d in Difficulty}
        for record in self._records.values():
            counts[record.difficulty.value] += 1
        return counts

    def cleanup(self, max_age: float) -> int:
        """Drop puzzles older than ``max_age`` seconds, returning how many"""
        cutoff = self.clock() - max_age
        stale = [pid for pid, r in self._records.items() if r.created < cutoff]
        for pid in stale:
            record = self._records.pop(pid)
            del self._by_hash[record.content_hash]
        if stale:
            self.logger.info(f"Removed {len(stale)} puzzles older than {max_age:.0f}s")
            self.cache.clear()
        return len(stale)

    def clear(self):
        self._records.clear()
        self._by_hash.clear()
        self.cache.clear()

    def records(self) -> List[PuzzleRecord]:
        return list(self._records.values())
