"""
Analysis and benchmarking tools for puzzle generation.
"""

from .benchmark import (
    GenerationBenchmark, BenchmarkConfig, BenchmarkResult, summarize
)

__all__ = [
    'GenerationBenchmark', 'BenchmarkConfig', 'BenchmarkResult', 'summarize'
]
