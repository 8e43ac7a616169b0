from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PUZZLES_DIR = DATA_DIR / "puzzles"

# Results directories
RESULTS_DIR = PROJECT_ROOT / "results"
RESULTS_VIZ_DIR = RESULTS_DIR / "visualizations"
RESULTS_BENCHMARKS_DIR = RESULTS_DIR / "benchmarks"


def ensure_directories():
    """Create output directories if they don't exist"""
    for dir_path in [PUZZLES_DIR, RESULTS_VIZ_DIR, RESULTS_BENCHMARKS_DIR]:
        dir_path.mkdir(parents=True, exist_ok=True)


# Grid sizes (square grids only)
MIN_GRID_SIZE = 3
MAX_GRID_SIZE = 7

# Generation budgets
MAX_GENERATION_ATTEMPTS = 20
MAX_PATH_ATTEMPTS = 100
MAX_SEARCH_STEPS = 20000

# Visible walls shown on hard puzzles
HARD_VISIBLE_WALLS = (3, 6)

# Puzzle pool
CACHE_TTL = 5 * 60  # seconds

# Visualization settings
VIZ_DPI = 150
VIZ_FIGSIZE = (6, 6)

# Logging configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
